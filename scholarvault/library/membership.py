"""Many-to-many index between documents and collections"""

import logging
from typing import Dict, FrozenSet, Iterable, Set

logger = logging.getLogger(__name__)


class MembershipIndex:
    """
    Tracks which documents belong to which collections.

    The index knows nothing about document or collection lifecycles; callers
    purge an id when the entity it names is deleted. Both add and remove are
    idempotent.
    """

    def __init__(self):
        self._by_collection: Dict[str, Set[str]] = {}
        self._by_document: Dict[str, Set[str]] = {}

    def __len__(self) -> int:
        return sum(len(documents) for documents in self._by_collection.values())

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        collection_id, document_id = pair
        return document_id in self._by_collection.get(collection_id, ())

    def add_membership(self, collection_id: str, document_id: str) -> None:
        self._by_collection.setdefault(collection_id, set()).add(document_id)
        self._by_document.setdefault(document_id, set()).add(collection_id)

    def remove_membership(self, collection_id: str, document_id: str) -> None:
        self._discard(self._by_collection, collection_id, document_id)
        self._discard(self._by_document, document_id, collection_id)

    def documents_in(self, collection_id: str) -> FrozenSet[str]:
        return frozenset(self._by_collection.get(collection_id, ()))

    def collections_for(self, document_id: str) -> FrozenSet[str]:
        return frozenset(self._by_document.get(document_id, ()))

    def collection_ids(self) -> FrozenSet[str]:
        """Collections holding at least one document"""
        return frozenset(self._by_collection)

    def document_ids(self) -> FrozenSet[str]:
        """Documents belonging to at least one collection"""
        return frozenset(self._by_document)

    def purge_document(self, document_id: str) -> None:
        for collection_id in self._by_document.pop(document_id, set()):
            self._discard(self._by_collection, collection_id, document_id)

    def purge_collection(self, collection_id: str) -> None:
        for document_id in self._by_collection.pop(collection_id, set()):
            self._discard(self._by_document, document_id, collection_id)

    def purge_collections(self, collection_ids: Iterable[str]) -> None:
        for collection_id in collection_ids:
            self.purge_collection(collection_id)

    def set_documents(self, collection_id: str, document_ids: Iterable[str]) -> None:
        """Replace the membership list of one collection with a freshly fetched one"""
        self.purge_collection(collection_id)
        for document_id in document_ids:
            self.add_membership(collection_id, document_id)
        logger.debug("Collection %s now holds %d documents",
                     collection_id, len(self._by_collection.get(collection_id, ())))

    @staticmethod
    def _discard(index: Dict[str, Set[str]], key: str, value: str) -> None:
        members = index.get(key)
        if members is None:
            return
        members.discard(value)
        if not members:
            del index[key]
