"""Exception classes for ScholarVault"""

from typing import Optional


class ScholarVaultError(Exception):
    """Base exception for all ScholarVault errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# Local library errors. These signal programming mistakes against the
# in-memory model and are never retried.

class LibraryError(ScholarVaultError):
    """Base exception for collection store and membership errors"""
    pass


class NotFoundError(LibraryError):
    """Raised when an id is absent from the store"""

    def __init__(self, collection_id: str):
        super().__init__(f"Collection not found: {collection_id}")
        self.collection_id = collection_id


class DuplicateIdError(LibraryError):
    """Raised when inserting a collection whose id already exists"""

    def __init__(self, collection_id: str):
        super().__init__(f"Collection already exists: {collection_id}")
        self.collection_id = collection_id


class CycleError(LibraryError):
    """Raised when a move would make a collection its own ancestor"""

    def __init__(self, collection_id: str, new_parent_id: str):
        super().__init__(
            f"Cannot move collection {collection_id} under {new_parent_id}: "
            "target is the collection itself or one of its descendants"
        )
        self.collection_id = collection_id
        self.new_parent_id = new_parent_id


# Remote API errors

class RemoteRequestError(ScholarVaultError):
    """Raised for non-success HTTP responses and transport failures"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class BadRequestError(RemoteRequestError):
    """Raised when the server rejects the request payload (400)"""
    pass


class AuthenticationError(RemoteRequestError):
    """Raised when the token is invalid, expired or missing (401)"""
    pass


class PermissionDeniedError(RemoteRequestError):
    """Raised when the user lacks permission for a resource (403)"""
    pass


class ResourceNotFoundError(RemoteRequestError):
    """Raised when the server cannot find the resource (404)"""
    pass


class ConflictError(RemoteRequestError):
    """Raised on conflicting writes, e.g. an email already registered (409)"""
    pass
