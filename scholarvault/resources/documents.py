"""Documents resource implementation"""

from typing import Any, List, TYPE_CHECKING
from ..types.documents import Document, DocumentCreate, DocumentUpdate
from ._uploads import FileInput, PDF_EXTENSIONS, open_upload

if TYPE_CHECKING:
    from ..client import Client
    from ..async_client import AsyncClient


class DocumentsResource:
    """Synchronous Documents resource"""

    def __init__(self, client: "Client"):
        self._client = client

    def list(self) -> List[Document]:
        """List every document of the authenticated user"""
        response = self._client.request("GET", "/api/documents", fallback="Failed to fetch documents")
        return [Document(**item) for item in response.json()]

    def search(self, query: str) -> List[Document]:
        """
        Full-text search over the user's documents.

        Args:
            query: Search terms (URL-encoded by httpx)
        """
        response = self._client.request(
            "GET", "/api/documents/search", params={"q": query}, fallback="Failed to search documents"
        )
        return [Document(**item) for item in response.json()]

    def create(self, title: str, **fields: Any) -> Document:
        """
        Create a document from metadata alone, without a PDF.

        Args:
            title: Document title
            **fields: Any other DocumentCreate field (authors, year, doi, ...)

        Raises:
            pydantic.ValidationError: Unknown or ill-typed field
        """
        data = DocumentCreate(title=title, **fields).model_dump(exclude_none=True)
        response = self._client.request("POST", "/api/documents", json=data, fallback="Failed to create document")
        return Document(**response.json())

    def upload(self, file: FileInput) -> Document:
        """
        Upload a PDF; the server stores it and extracts its metadata.

        The call returns once extraction has finished.

        Args:
            file: File path, Path object, or file-like object ending in .pdf

        Raises:
            ValueError: File is not a PDF
            BadRequestError: Server rejected the file
        """
        with open_upload(file, PDF_EXTENSIONS) as (filename, file_obj, content_type):
            response = self._client.request(
                "POST",
                "/api/documents/upload",
                files={"file": (filename, file_obj, content_type)},
                include_content_type=False,
                fallback="Failed to upload PDF",
            )
        return Document(**response.json())

    def get(self, document_id: str) -> Document:
        """
        Get a document by id.

        Raises:
            ResourceNotFoundError: Document not found
        """
        response = self._client.request("GET", f"/api/documents/{document_id}", fallback="Failed to fetch document")
        return Document(**response.json())

    def update(self, document_id: str, **fields: Any) -> Document:
        """
        Edit document metadata; only the fields passed are sent.

        Raises:
            ResourceNotFoundError: Document not found
        """
        data = DocumentUpdate(**fields).model_dump(exclude_unset=True)
        response = self._client.request(
            "PUT", f"/api/documents/{document_id}", json=data, fallback="Failed to update document"
        )
        return Document(**response.json())

    def delete(self, document_id: str) -> None:
        """Delete a document; the server also drops its collection memberships"""
        self._client.request("DELETE", f"/api/documents/{document_id}", fallback="Failed to delete document")


class AsyncDocumentsResource:
    """Asynchronous Documents resource"""

    def __init__(self, client: "AsyncClient"):
        self._client = client

    async def list(self) -> List[Document]:
        """List every document (async)"""
        response = await self._client.request("GET", "/api/documents", fallback="Failed to fetch documents")
        return [Document(**item) for item in response.json()]

    async def search(self, query: str) -> List[Document]:
        """Full-text search (async)"""
        response = await self._client.request(
            "GET", "/api/documents/search", params={"q": query}, fallback="Failed to search documents"
        )
        return [Document(**item) for item in response.json()]

    async def create(self, title: str, **fields: Any) -> Document:
        """Create a document from metadata alone (async)"""
        data = DocumentCreate(title=title, **fields).model_dump(exclude_none=True)
        response = await self._client.request(
            "POST", "/api/documents", json=data, fallback="Failed to create document"
        )
        return Document(**response.json())

    async def upload(self, file: FileInput) -> Document:
        """Upload a PDF (async)"""
        with open_upload(file, PDF_EXTENSIONS) as (filename, file_obj, content_type):
            response = await self._client.request(
                "POST",
                "/api/documents/upload",
                files={"file": (filename, file_obj, content_type)},
                include_content_type=False,
                fallback="Failed to upload PDF",
            )
        return Document(**response.json())

    async def get(self, document_id: str) -> Document:
        """Get a document by id (async)"""
        response = await self._client.request(
            "GET", f"/api/documents/{document_id}", fallback="Failed to fetch document"
        )
        return Document(**response.json())

    async def update(self, document_id: str, **fields: Any) -> Document:
        """Edit document metadata (async)"""
        data = DocumentUpdate(**fields).model_dump(exclude_unset=True)
        response = await self._client.request(
            "PUT", f"/api/documents/{document_id}", json=data, fallback="Failed to update document"
        )
        return Document(**response.json())

    async def delete(self, document_id: str) -> None:
        """Delete a document (async)"""
        await self._client.request(
            "DELETE", f"/api/documents/{document_id}", fallback="Failed to delete document"
        )
