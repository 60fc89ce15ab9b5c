"""
Collection store

Holds the flat set of a user's collections. The tree lives only in the
parent_id links: children are found by lookup, never stored as pointers.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set

from ..exceptions import NotFoundError, DuplicateIdError, CycleError
from ..types.collections import Collection

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CollectionStore:
    """Authoritative set of Collection records for the current user"""

    def __init__(self, collections: Iterable[Collection] = ()):
        # dict keeps insertion order, which breaks ties between equal names
        self._records: Dict[str, Collection] = {}
        for collection in collections:
            self.add(collection)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, collection_id: object) -> bool:
        return collection_id in self._records

    def __iter__(self) -> Iterator[Collection]:
        return iter(list(self._records.values()))

    def get(self, collection_id: str) -> Collection:
        try:
            return self._records[collection_id]
        except KeyError:
            raise NotFoundError(collection_id) from None

    def add(self, collection: Collection) -> None:
        """
        Insert a new collection.

        Raises:
            DuplicateIdError: A collection with this id is already stored
        """
        if collection.id in self._records:
            raise DuplicateIdError(collection.id)
        self._records[collection.id] = collection
        logger.debug("Added collection %s (parent=%s)", collection.id, collection.parent_id)

    def upsert(self, collection: Collection) -> None:
        """Store a server-returned record, replacing any local copy in place"""
        self._records[collection.id] = collection

    def rename(self, collection_id: str, new_name: str, now: Optional[datetime] = None) -> Collection:
        """
        Rename a collection in place.

        Renaming to the current name is a no-op and leaves updated_at untouched.

        Raises:
            NotFoundError: No collection with this id
        """
        current = self.get(collection_id)
        if current.name == new_name:
            return current

        renamed = current.model_copy(update={"name": new_name, "updated_at": now or _utcnow()})
        self._records[collection_id] = renamed
        logger.debug("Renamed collection %s to %r", collection_id, new_name)
        return renamed

    def remove(self, collection_id: str) -> FrozenSet[str]:
        """
        Remove a collection together with all of its descendants.

        Returns:
            The ids removed, so callers can purge memberships

        Raises:
            NotFoundError: No collection with this id
        """
        self.get(collection_id)
        removed = {collection_id} | self.descendants(collection_id)
        for removed_id in removed:
            del self._records[removed_id]
        logger.debug("Removed collection %s and %d descendants", collection_id, len(removed) - 1)
        return frozenset(removed)

    def children_of(self, parent_id: Optional[str]) -> List[Collection]:
        """Collections directly under parent_id (None for roots), by case-insensitive name"""
        children = [c for c in self._records.values() if c.parent_id == parent_id]
        return sorted(children, key=lambda c: c.name.casefold())

    def move(self, collection_id: str, new_parent_id: Optional[str], now: Optional[datetime] = None) -> Collection:
        """
        Reparent a collection; None makes it a root.

        Raises:
            NotFoundError: The collection or the new parent does not exist
            CycleError: new_parent_id is the collection itself or one of its descendants
        """
        current = self.get(collection_id)
        self.check_move(collection_id, new_parent_id)

        if current.parent_id == new_parent_id:
            return current

        moved = current.model_copy(update={"parent_id": new_parent_id, "updated_at": now or _utcnow()})
        self._records[collection_id] = moved
        logger.debug("Moved collection %s under %s", collection_id, new_parent_id)
        return moved

    def check_move(self, collection_id: str, new_parent_id: Optional[str]) -> None:
        """Raise the error move() would raise, without changing anything"""
        self.get(collection_id)
        if new_parent_id is None:
            return
        self.get(new_parent_id)
        if new_parent_id == collection_id or collection_id in self.ancestors(new_parent_id):
            raise CycleError(collection_id, new_parent_id)

    def ancestors(self, collection_id: str) -> List[str]:
        """
        Ids on the path from collection_id's parent up to its root, nearest first.

        Stops at a dangling parent_id, and at a repeated id if the stored data
        already contains a cycle.
        """
        chain: List[str] = []
        seen = {collection_id}
        parent_id = self.get(collection_id).parent_id
        while parent_id is not None and parent_id in self._records and parent_id not in seen:
            chain.append(parent_id)
            seen.add(parent_id)
            parent_id = self._records[parent_id].parent_id
        return chain

    def descendants(self, collection_id: str) -> Set[str]:
        """All ids below collection_id, found by repeated child lookup"""
        found: Set[str] = set()
        frontier = [collection_id]
        while frontier:
            parent_id = frontier.pop()
            for child in self.children_of(parent_id):
                if child.id != collection_id and child.id not in found:
                    found.add(child.id)
                    frontier.append(child.id)
        return found
