"""
Authentication session

One AuthSession per process holds the bearer token and the signed-in user.
It is created explicitly, initialized from a stored token, and handed to
whatever needs it.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union, TYPE_CHECKING

from ..exceptions import AuthenticationError, RemoteRequestError
from ..types.auth import User

if TYPE_CHECKING:
    from ..client import Client

logger = logging.getLogger(__name__)


class TokenStore(ABC):
    """Where the bearer token survives between runs"""

    @abstractmethod
    def load(self) -> Optional[str]:
        """Return the stored token, or None"""
        pass

    @abstractmethod
    def save(self, token: str) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class FileTokenStore(TokenStore):
    """Token kept in a single file readable only by the owner"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load(self) -> Optional[str]:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(mode=0o600, exist_ok=True)
        self.path.chmod(0o600)
        self.path.write_text(token, encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class MemoryTokenStore(TokenStore):
    """Token held in memory only"""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def load(self) -> Optional[str]:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class AuthSession:
    """Token and current user for the signed-in account"""

    def __init__(self, client: "Client", token_store: TokenStore):
        self._client = client
        self._token_store = token_store
        self.token: Optional[str] = None
        self.user: Optional[User] = None
        self.is_loading = True

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.user is not None

    def initialize(self) -> Optional[User]:
        """
        Restore the session from the stored token.

        A stored token the server no longer accepts is discarded. Transport
        failures propagate and leave the stored token in place.
        """
        try:
            stored = self._token_store.load()
            if not stored:
                return None

            self._client.set_token(stored)
            try:
                user = self._client.users.me()
            except RemoteRequestError as e:
                if e.status_code is None:
                    self._client.set_token(None)
                    raise
                logger.info("Stored token rejected (%s), signing out", e.message)
                self._teardown()
                return None
            except Exception:
                self._client.set_token(None)
                raise

            self.token = stored
            self.user = user
            return user
        finally:
            self.is_loading = False

    def login(self, email: str, password: str) -> User:
        result = self._client.auth.login(email, password)
        self.token = result.token
        self.user = result.user
        self._client.set_token(result.token)
        self._token_store.save(result.token)
        logger.info("Signed in as %s", result.user.email)
        return result.user

    def register(self, email: str, password: str, username: Optional[str] = None) -> User:
        """Create the account, then sign in with the same credentials"""
        self._client.auth.register(email, password, username)
        return self.login(email, password)

    def logout(self) -> None:
        self._teardown()
        logger.info("Signed out")

    def require_token(self) -> str:
        if self.token is None:
            raise AuthenticationError("Not signed in", 401)
        return self.token

    def refresh_user(self) -> User:
        """Re-read the profile after it was edited elsewhere"""
        self.require_token()
        self.user = self._client.users.me()
        return self.user

    def _teardown(self) -> None:
        self.token = None
        self.user = None
        self._client.set_token(None)
        self._token_store.clear()
