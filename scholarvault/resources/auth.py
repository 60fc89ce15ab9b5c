"""Auth resource implementation"""

from typing import Optional, TYPE_CHECKING
from ..types.auth import RegisterRequest, LoginRequest, LoginResponse, User

if TYPE_CHECKING:
    from ..client import Client
    from ..async_client import AsyncClient


class AuthResource:
    """Synchronous Auth resource"""

    def __init__(self, client: "Client"):
        self._client = client

    def register(self, email: str, password: str, username: Optional[str] = None) -> User:
        """
        Register a new user.

        Registration does not sign the user in; call login() afterwards.

        Args:
            email: User email address
            password: Account password
            username: Optional display name

        Returns:
            User: The created account

        Raises:
            ConflictError: Email already exists
            RemoteRequestError: Server error
        """
        data = RegisterRequest(email=email, password=password, username=username).model_dump()
        response = self._client.request(
            "POST", "/api/auth/register", json=data, fallback="Registration failed"
        )
        body = response.json()
        # The server wraps the new account together with a token on some versions
        return User(**body.get("user", body))

    def login(self, email: str, password: str) -> LoginResponse:
        """
        Exchange credentials for a bearer token.

        The token is not attached to the client automatically; see AuthSession.

        Raises:
            AuthenticationError: Invalid email or password
        """
        data = LoginRequest(email=email, password=password).model_dump()
        response = self._client.request("POST", "/api/auth/login", json=data, fallback="Login failed")
        return LoginResponse(**response.json())


class AsyncAuthResource:
    """Asynchronous Auth resource"""

    def __init__(self, client: "AsyncClient"):
        self._client = client

    async def register(self, email: str, password: str, username: Optional[str] = None) -> User:
        """Register a new user (async)"""
        data = RegisterRequest(email=email, password=password, username=username).model_dump()
        response = await self._client.request(
            "POST", "/api/auth/register", json=data, fallback="Registration failed"
        )
        body = response.json()
        return User(**body.get("user", body))

    async def login(self, email: str, password: str) -> LoginResponse:
        """Exchange credentials for a bearer token (async)"""
        data = LoginRequest(email=email, password=password).model_dump()
        response = await self._client.request("POST", "/api/auth/login", json=data, fallback="Login failed")
        return LoginResponse(**response.json())
