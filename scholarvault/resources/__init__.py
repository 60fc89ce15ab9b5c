"""Resource classes for ScholarVault"""

from .auth import AuthResource, AsyncAuthResource
from .users import UsersResource, AsyncUsersResource
from .collections import CollectionsResource, AsyncCollectionsResource
from .documents import DocumentsResource, AsyncDocumentsResource

__all__ = [
    "AuthResource",
    "AsyncAuthResource",
    "UsersResource",
    "AsyncUsersResource",
    "CollectionsResource",
    "AsyncCollectionsResource",
    "DocumentsResource",
    "AsyncDocumentsResource",
]
