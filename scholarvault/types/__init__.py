"""Type definitions for ScholarVault"""

from .auth import User, RegisterRequest, LoginRequest, LoginResponse, ProfileUpdate
from .collections import Collection, CollectionCreate, CollectionUpdate
from .documents import Document, DocumentCreate, DocumentUpdate

__all__ = [
    "User",
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "ProfileUpdate",
    "Collection",
    "CollectionCreate",
    "CollectionUpdate",
    "Document",
    "DocumentCreate",
    "DocumentUpdate",
]
