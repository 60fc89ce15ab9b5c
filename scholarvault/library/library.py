"""
Library controller

Keeps the local folder tree, memberships and document list in step with the
remote API. Every mutation goes to the server first; local state changes only
after the call succeeds, so a failure leaves it exactly as it was.
"""

import logging
from typing import Any, Dict, FrozenSet, List, Optional, TYPE_CHECKING

from ..types.collections import Collection
from ..types.documents import Document
from .membership import MembershipIndex
from .session import AuthSession
from .store import CollectionStore
from .tree import DEFAULT_MAX_DEPTH, FolderNode, TreeViewState, build_forest
from .upload import UploadTracker

if TYPE_CHECKING:
    from ..client import Client

logger = logging.getLogger(__name__)


class Library:
    """The signed-in user's papers and folders"""

    def __init__(
        self,
        client: "Client",
        session: AuthSession,
        view_state: Optional[TreeViewState] = None,
        max_tree_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self._client = client
        self.session = session
        self.store = CollectionStore()
        self.memberships = MembershipIndex()
        self.view_state = view_state or TreeViewState()
        self.max_tree_depth = max_tree_depth
        self._documents: Dict[str, Document] = {}
        self._loaded_collections: set = set()

    # Loading

    def refresh(self) -> None:
        """Reload collections and documents from the server"""
        self.session.require_token()
        collections = self._client.collections.list()
        documents = self._client.documents.list()

        self.store = CollectionStore(collections)
        self.memberships.purge_collections(self.memberships.collection_ids() - self._collection_ids())
        self._loaded_collections &= self._collection_ids()
        stale = (self.view_state.expanded | {self.view_state.selected_collection_id}) - self._collection_ids()
        self.view_state.forget(cid for cid in stale if cid is not None)

        self._documents = {doc.id: doc for doc in documents}
        for document_id in self.memberships.document_ids() - set(self._documents):
            self.memberships.purge_document(document_id)

        logger.info("Loaded %d collections and %d documents", len(self.store), len(self._documents))

    def load_collection(self, collection_id: str) -> List[Document]:
        """Fetch the documents of one collection and record their memberships"""
        self.store.get(collection_id)
        documents = self._client.collections.documents(collection_id)
        for document in documents:
            self._documents[document.id] = document
        self.memberships.set_documents(collection_id, (doc.id for doc in documents))
        self._loaded_collections.add(collection_id)
        return documents

    # Folders

    def create_folder(self, name: str, parent_id: Optional[str] = None) -> Collection:
        if parent_id is not None:
            self.store.get(parent_id)
        collection = self._client.collections.create(name=name, parent_id=parent_id)
        self.store.add(collection)
        if parent_id is not None:
            self.view_state.expand(parent_id)
        return collection

    def rename_folder(self, collection_id: str, name: str) -> Collection:
        """Rename a folder; an unchanged name skips the server round-trip"""
        current = self.store.get(collection_id)
        if current.name == name:
            return current
        updated = self._client.collections.update(collection_id, name=name)
        self.store.upsert(updated)
        return updated

    def move_folder(self, collection_id: str, new_parent_id: Optional[str]) -> Collection:
        """
        Move a folder under another one, or to the top level with None.

        Raises:
            CycleError: The target is the folder itself or one of its descendants
        """
        self.store.check_move(collection_id, new_parent_id)
        updated = self._client.collections.update(collection_id, parent_id=new_parent_id)
        # The server's record is authoritative for where the folder ended up
        self.store.upsert(updated)
        return updated

    def delete_folder(self, collection_id: str) -> FrozenSet[str]:
        """Delete a folder and its subfolders; documents themselves are kept"""
        self.store.get(collection_id)
        self._client.collections.delete(collection_id)
        removed = self.store.remove(collection_id)
        self.memberships.purge_collections(removed)
        self._loaded_collections -= removed
        self.view_state.forget(removed)
        return removed

    # Memberships

    def add_to_collection(self, collection_id: str, document_id: str) -> None:
        self.store.get(collection_id)
        self._client.collections.add_document(collection_id, document_id)
        self.memberships.add_membership(collection_id, document_id)

    def remove_from_collection(self, collection_id: str, document_id: str) -> None:
        self.store.get(collection_id)
        self._client.collections.remove_document(collection_id, document_id)
        self.memberships.remove_membership(collection_id, document_id)

    # Documents

    def upload_document(self, file, tracker: Optional[UploadTracker] = None) -> Document:
        """Upload a PDF, tracking its phases on tracker when given"""
        tracker = tracker or UploadTracker()
        document = tracker.run(self._client.documents.upload, file)
        self._documents[document.id] = document
        return document

    def update_document(self, document_id: str, **fields: Any) -> Document:
        document = self._client.documents.update(document_id, **fields)
        self._documents[document.id] = document
        return document

    def delete_document(self, document_id: str) -> None:
        self._client.documents.delete(document_id)
        self._documents.pop(document_id, None)
        self.memberships.purge_document(document_id)

    def get_document(self, document_id: str) -> Document:
        """Local copy when present, otherwise fetched from the server"""
        document = self._documents.get(document_id)
        if document is None:
            document = self._client.documents.get(document_id)
            self._documents[document.id] = document
        return document

    def search(self, query: str) -> List[Document]:
        return self._client.documents.search(query)

    # Views

    def select(self, collection_id: Optional[str], fetch: bool = True) -> None:
        """
        Select a folder, or None for All Documents.

        With fetch, a folder whose documents were never loaded is loaded now.
        """
        if collection_id is not None:
            self.store.get(collection_id)
            if fetch and collection_id not in self._loaded_collections:
                self.load_collection(collection_id)
        self.view_state.select(collection_id)

    def visible_documents(self) -> List[Document]:
        """Documents of the selected folder, or every document for All Documents"""
        selected = self.view_state.selected_collection_id
        if selected is None:
            return list(self._documents.values())
        member_ids = self.memberships.documents_in(selected)
        return [doc for doc in self._documents.values() if doc.id in member_ids]

    @property
    def documents(self) -> List[Document]:
        return list(self._documents.values())

    def forest(self) -> List[FolderNode]:
        return build_forest(self.store, self.view_state, self.max_tree_depth)

    def _collection_ids(self) -> set:
        return {collection.id for collection in self.store}
