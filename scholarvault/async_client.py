"""Asynchronous ScholarVault client"""

import asyncio
import logging
from typing import Optional, Any
import httpx
from ._base_client import BaseClient
from .exceptions import RemoteRequestError
from .resources import (
    AsyncAuthResource,
    AsyncUsersResource,
    AsyncCollectionsResource,
    AsyncDocumentsResource,
)

logger = logging.getLogger(__name__)


class AsyncClient(BaseClient):
    """
    Asynchronous client for the ScholarVault API.

    Example:
        >>> async with AsyncClient(token="...") as client:
        ...     folders = await client.collections.list()
        ...     papers = await client.collections.documents(folders[0].id)
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        token: Optional[str] = None,
        timeout: float = 60.0,
        max_retries: int = 1,
    ):
        super().__init__(base_url, token, timeout, max_retries)

        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            follow_redirects=True,
        )

        self.auth = AsyncAuthResource(self)
        self.users = AsyncUsersResource(self)
        self.collections = AsyncCollectionsResource(self)
        self.documents = AsyncDocumentsResource(self)

    async def request(
        self,
        method: str,
        path: str,
        fallback: Optional[str] = None,
        include_content_type: bool = True,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an async HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Request path (e.g., "/api/collections")
            fallback: Error message used when the server provides none
            include_content_type: Send Content-Type: application/json (False for multipart)
            **kwargs: Additional arguments passed to httpx (json, params, files, etc.)

        Returns:
            httpx.Response: Successful response

        Raises:
            RemoteRequestError: Non-success response (or a subclass) or transport failure
        """
        self._prepare_kwargs(kwargs, include_content_type)
        url = self._prepare_request_url(path)

        for attempt in range(self.max_retries):
            logger.debug("%s %s (attempt %d)", method, url, attempt + 1)
            try:
                response = await self._http_client.request(method, url, **kwargs)
            except httpx.RequestError as e:
                if self._can_retry_transport(method, attempt):
                    await asyncio.sleep(self._calculate_backoff(attempt))
                    continue
                logger.warning("%s %s failed: %s", method, url, e)
                raise RemoteRequestError(f"{fallback or 'Request failed'}: {e}") from e

            if self._should_retry(method, response) and attempt < self.max_retries - 1:
                await asyncio.sleep(self._calculate_backoff(attempt))
                continue

            self._handle_error(response, fallback)
            return response

        raise RemoteRequestError(fallback or "Request failed")

    async def close(self) -> None:
        """Close the async HTTP client"""
        if self._http_client:
            await self._http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False
