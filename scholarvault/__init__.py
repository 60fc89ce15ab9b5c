"""ScholarVault - Python client and folder model for a personal research-paper library"""

from .client import Client
from .async_client import AsyncClient
from .config import Settings, get_settings, configure_logging
from .exceptions import (
    ScholarVaultError,
    LibraryError,
    NotFoundError,
    DuplicateIdError,
    CycleError,
    RemoteRequestError,
    BadRequestError,
    AuthenticationError,
    PermissionDeniedError,
    ResourceNotFoundError,
    ConflictError,
)
from .library import (
    CollectionStore,
    MembershipIndex,
    TreeViewState,
    FolderNode,
    build_forest,
    AuthSession,
    FileTokenStore,
    MemoryTokenStore,
    UploadPhase,
    UploadTracker,
    Library,
)
from .version import __version__

__all__ = [
    "Client",
    "AsyncClient",
    "Settings",
    "get_settings",
    "configure_logging",
    "ScholarVaultError",
    "LibraryError",
    "NotFoundError",
    "DuplicateIdError",
    "CycleError",
    "RemoteRequestError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "ResourceNotFoundError",
    "ConflictError",
    "CollectionStore",
    "MembershipIndex",
    "TreeViewState",
    "FolderNode",
    "build_forest",
    "AuthSession",
    "FileTokenStore",
    "MemoryTokenStore",
    "UploadPhase",
    "UploadTracker",
    "Library",
    "__version__",
]
