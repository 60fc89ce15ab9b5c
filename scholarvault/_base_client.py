"""Base client implementation with shared logic for sync and async clients"""

import logging
from typing import Optional, Dict
import httpx
from .version import __version__
from .exceptions import (
    RemoteRequestError,
    BadRequestError,
    AuthenticationError,
    PermissionDeniedError,
    ResourceNotFoundError,
    ConflictError,
)

logger = logging.getLogger(__name__)

# Status codes mapped to their exception type; anything else is a plain RemoteRequestError
_STATUS_ERRORS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: ResourceNotFoundError,
    409: ConflictError,
}

_IDEMPOTENT_METHODS = frozenset({"GET", "PUT", "DELETE"})
_RETRYABLE_STATUS = frozenset({502, 503, 504})


class BaseClient:
    """
    Base client with shared logic for HTTP requests and error handling.

    This class provides:
    - HTTP client management
    - Bearer token headers
    - Error handling and exception mapping
    - Optional retry with exponential backoff for idempotent requests
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        token: Optional[str] = None,
        timeout: float = 60.0,
        max_retries: int = 1,
    ):
        """
        Initialize base client.

        Args:
            base_url: Base URL of the ScholarVault server (default: http://localhost:3000)
            token: Bearer token; may be set later with set_token()
            timeout: Request timeout in seconds (default: 60.0)
            max_retries: Total attempts per request (default: 1, i.e. no retry)

        Raises:
            ValueError: If base_url is empty or max_retries is below 1
        """
        if not base_url:
            raise ValueError("base_url is required")
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")

        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.max_retries = max_retries

        # Will be set by subclasses
        self._http_client = None

    def set_token(self, token: Optional[str]) -> None:
        """Attach (or with None, clear) the bearer token used for requests"""
        self.token = token

    def _get_headers(self, include_content_type: bool = True) -> Dict[str, str]:
        """
        Get authentication and default headers for requests

        Args:
            include_content_type: Whether to include Content-Type: application/json
                                 (default: True, set to False for multipart uploads)

        Returns:
            Dict of headers including Authorization (when a token is set) and User-Agent
        """
        headers = {"User-Agent": f"scholarvault-python/{__version__}"}

        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        if include_content_type:
            headers["Content-Type"] = "application/json"

        return headers

    def _handle_error(self, response: httpx.Response, fallback: Optional[str] = None) -> None:
        """
        Handle error responses and raise appropriate exceptions.

        The server reports failures as {"error": "..."}; a FastAPI-style
        {"detail": "..."} body is accepted as well.

        Args:
            response: HTTP response object
            fallback: Message used when the server provides none

        Raises:
            BadRequestError: For 400 responses
            AuthenticationError: For 401 responses
            PermissionDeniedError: For 403 responses
            ResourceNotFoundError: For 404 responses
            ConflictError: For 409 responses
            RemoteRequestError: For other error responses
        """
        if response.is_success:
            return

        status_code = response.status_code
        message = None
        try:
            error_data = response.json()
        except ValueError:
            error_data = None

        if isinstance(error_data, dict):
            message = error_data.get("error") or error_data.get("detail")

        if not message:
            message = fallback or f"HTTP {status_code} error"

        logger.warning("Request %s %s failed with %s: %s",
                       response.request.method, response.request.url, status_code, message)

        error_class = _STATUS_ERRORS.get(status_code, RemoteRequestError)
        raise error_class(str(message), status_code)

    def _should_retry(self, method: str, response: Optional[httpx.Response]) -> bool:
        """
        Determine if a completed request should be retried.

        Only idempotent methods are retried, and only on gateway errors.
        """
        if method.upper() not in _IDEMPOTENT_METHODS:
            return False
        return response is not None and response.status_code in _RETRYABLE_STATUS

    def _can_retry_transport(self, method: str, attempt: int) -> bool:
        """Whether a transport failure on this attempt may be retried"""
        return method.upper() in _IDEMPOTENT_METHODS and attempt < self.max_retries - 1

    def _calculate_backoff(self, attempt: int) -> float:
        """
        Calculate exponential backoff delay.

        Args:
            attempt: Current retry attempt (0-indexed)

        Returns:
            float: Delay in seconds
        """
        return min(2 ** attempt, 16)  # Max 16 seconds

    def _prepare_request_url(self, path: str) -> str:
        """
        Prepare full URL from path

        Args:
            path: Request path (e.g., "/api/collections") or full URL

        Returns:
            str: Full URL for request
        """
        return path if path.startswith("http") else f"{self.base_url}{path}"

    def _prepare_kwargs(self, kwargs: dict, include_content_type: bool = True) -> dict:
        if "headers" not in kwargs:
            kwargs["headers"] = self._get_headers(include_content_type=include_content_type)
        return kwargs
