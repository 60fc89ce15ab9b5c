"""Collection tree model, memberships, session and upload tracking"""

from .store import CollectionStore
from .membership import MembershipIndex
from .tree import TreeViewState, FolderNode, build_forest, iter_visible, iter_all
from .session import AuthSession, TokenStore, FileTokenStore, MemoryTokenStore
from .upload import UploadPhase, UploadTracker, UploadInProgressError
from .library import Library

__all__ = [
    "CollectionStore",
    "MembershipIndex",
    "TreeViewState",
    "FolderNode",
    "build_forest",
    "iter_visible",
    "iter_all",
    "AuthSession",
    "TokenStore",
    "FileTokenStore",
    "MemoryTokenStore",
    "UploadPhase",
    "UploadTracker",
    "UploadInProgressError",
    "Library",
]
