"""Collections resource implementation"""

from typing import Optional, List, TYPE_CHECKING
from ..types.collections import CollectionCreate, CollectionUpdate, Collection
from ..types.documents import Document

if TYPE_CHECKING:
    from ..client import Client
    from ..async_client import AsyncClient

_UNSET = object()


def _update_payload(name, parent_id) -> dict:
    """Build a PUT body holding only the fields the caller passed"""
    fields = {}
    if name is not _UNSET:
        fields["name"] = name
    if parent_id is not _UNSET:
        fields["parent_id"] = parent_id
    return CollectionUpdate(**fields).model_dump(exclude_unset=True)


class CollectionsResource:
    """Synchronous Collections resource"""

    def __init__(self, client: "Client"):
        self._client = client

    def list(self) -> List[Collection]:
        """
        List all collections of the authenticated user as a flat list.

        Use CollectionStore / build_forest to turn the list into a tree.
        """
        response = self._client.request("GET", "/api/collections", fallback="Failed to fetch collections")
        return [Collection(**item) for item in response.json()]

    def create(self, name: str, parent_id: Optional[str] = None) -> Collection:
        """
        Create a new collection.

        Args:
            name: Folder name (1-255 characters)
            parent_id: Parent collection id, None for a root folder

        Returns:
            Collection: Created collection with id and timestamps

        Raises:
            BadRequestError: Parent collection not found
        """
        data = CollectionCreate(name=name, parent_id=parent_id).model_dump()
        response = self._client.request(
            "POST", "/api/collections", json=data, fallback="Failed to create collection"
        )
        return Collection(**response.json())

    def update(self, collection_id: str, name=_UNSET, parent_id=_UNSET) -> Collection:
        """
        Rename and/or reparent a collection.

        Only the arguments actually passed are sent.

        Raises:
            ResourceNotFoundError: Collection not found
            BadRequestError: Parent not found or collection would be its own parent
        """
        data = _update_payload(name, parent_id)
        response = self._client.request(
            "PUT", f"/api/collections/{collection_id}", json=data, fallback="Failed to update collection"
        )
        return Collection(**response.json())

    def delete(self, collection_id: str) -> None:
        """Delete a collection; the server also deletes its descendants"""
        self._client.request(
            "DELETE", f"/api/collections/{collection_id}", fallback="Failed to delete collection"
        )

    def documents(self, collection_id: str) -> List[Document]:
        """List the documents in a collection, newest first"""
        response = self._client.request(
            "GET",
            f"/api/collections/{collection_id}/documents",
            fallback="Failed to fetch collection documents",
        )
        return [Document(**item) for item in response.json()]

    def add_document(self, collection_id: str, document_id: str) -> None:
        """Add a document to a collection; adding an existing member is a no-op server-side"""
        self._client.request(
            "POST",
            f"/api/collections/{collection_id}/documents/{document_id}",
            fallback="Failed to add document to collection",
        )

    def remove_document(self, collection_id: str, document_id: str) -> None:
        """
        Remove a document from a collection.

        Raises:
            ResourceNotFoundError: Collection not found or document not in collection
        """
        self._client.request(
            "DELETE",
            f"/api/collections/{collection_id}/documents/{document_id}",
            fallback="Failed to remove document from collection",
        )


class AsyncCollectionsResource:
    """Asynchronous Collections resource"""

    def __init__(self, client: "AsyncClient"):
        self._client = client

    async def list(self) -> List[Collection]:
        """List all collections (async)"""
        response = await self._client.request("GET", "/api/collections", fallback="Failed to fetch collections")
        return [Collection(**item) for item in response.json()]

    async def create(self, name: str, parent_id: Optional[str] = None) -> Collection:
        """Create a new collection (async)"""
        data = CollectionCreate(name=name, parent_id=parent_id).model_dump()
        response = await self._client.request(
            "POST", "/api/collections", json=data, fallback="Failed to create collection"
        )
        return Collection(**response.json())

    async def update(self, collection_id: str, name=_UNSET, parent_id=_UNSET) -> Collection:
        """Rename and/or reparent a collection (async)"""
        data = _update_payload(name, parent_id)
        response = await self._client.request(
            "PUT", f"/api/collections/{collection_id}", json=data, fallback="Failed to update collection"
        )
        return Collection(**response.json())

    async def delete(self, collection_id: str) -> None:
        """Delete a collection (async)"""
        await self._client.request(
            "DELETE", f"/api/collections/{collection_id}", fallback="Failed to delete collection"
        )

    async def documents(self, collection_id: str) -> List[Document]:
        """List the documents in a collection (async)"""
        response = await self._client.request(
            "GET",
            f"/api/collections/{collection_id}/documents",
            fallback="Failed to fetch collection documents",
        )
        return [Document(**item) for item in response.json()]

    async def add_document(self, collection_id: str, document_id: str) -> None:
        """Add a document to a collection (async)"""
        await self._client.request(
            "POST",
            f"/api/collections/{collection_id}/documents/{document_id}",
            fallback="Failed to add document to collection",
        )

    async def remove_document(self, collection_id: str, document_id: str) -> None:
        """Remove a document from a collection (async)"""
        await self._client.request(
            "DELETE",
            f"/api/collections/{collection_id}/documents/{document_id}",
            fallback="Failed to remove document from collection",
        )
