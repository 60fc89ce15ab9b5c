"""Synchronous ScholarVault client"""

import logging
import time
from typing import Optional, Any
import httpx
from ._base_client import BaseClient
from .exceptions import RemoteRequestError
from .resources import (
    AuthResource,
    UsersResource,
    CollectionsResource,
    DocumentsResource,
)

logger = logging.getLogger(__name__)


class Client(BaseClient):
    """
    Synchronous client for the ScholarVault API.

    Example:
        >>> client = Client(base_url="http://localhost:3000")
        >>> login = client.auth.login("ada@example.com", "secret")
        >>> client.set_token(login.token)
        >>> folder = client.collections.create(name="Thesis")
        >>> client.close()

        # Or using context manager:
        >>> with Client(token="...") as client:
        ...     papers = client.documents.list()
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        token: Optional[str] = None,
        timeout: float = 60.0,
        max_retries: int = 1,
    ):
        """
        Initialize synchronous ScholarVault client.

        Args:
            base_url: Base URL of the server (default: http://localhost:3000)
            token: Bearer token; may be set later with set_token()
            timeout: Request timeout in seconds (default: 60.0)
            max_retries: Total attempts per request (default: 1, i.e. no retry)
        """
        super().__init__(base_url, token, timeout, max_retries)

        self._http_client = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            follow_redirects=True,
        )

        self.auth = AuthResource(self)
        self.users = UsersResource(self)
        self.collections = CollectionsResource(self)
        self.documents = DocumentsResource(self)

    @classmethod
    def from_settings(cls, settings=None, token: Optional[str] = None) -> "Client":
        """Build a client from Settings (defaults to the cached environment settings)"""
        if settings is None:
            from .config import get_settings
            settings = get_settings()
        return cls(
            base_url=settings.API_URL,
            token=token,
            timeout=settings.TIMEOUT,
            max_retries=settings.MAX_RETRIES,
        )

    def request(
        self,
        method: str,
        path: str,
        fallback: Optional[str] = None,
        include_content_type: bool = True,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request.

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
                response = self._http_client.request(method, url, **kwargs)
            except httpx.RequestError as e:
                if self._can_retry_transport(method, attempt):
                    time.sleep(self._calculate_backoff(attempt))
                    continue
                logger.warning("%s %s failed: %s", method, url, e)
                raise RemoteRequestError(f"{fallback or 'Request failed'}: {e}") from e

            if self._should_retry(method, response) and attempt < self.max_retries - 1:
                time.sleep(self._calculate_backoff(attempt))
                continue

            self._handle_error(response, fallback)
            return response

        # max_retries >= 1 guarantees the loop returns or raises
        raise RemoteRequestError(fallback or "Request failed")

    def close(self) -> None:
        """Close the HTTP client"""
        if self._http_client:
            self._http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
