"""User profile resource implementation"""

from typing import Optional, TYPE_CHECKING
from ..types.auth import User, ProfileUpdate
from ._uploads import FileInput, IMAGE_EXTENSIONS, MAX_PROFILE_IMAGE_BYTES, open_upload

if TYPE_CHECKING:
    from ..client import Client
    from ..async_client import AsyncClient


class UsersResource:
    """Synchronous Users resource"""

    def __init__(self, client: "Client"):
        self._client = client

    def me(self) -> User:
        """
        Get the user the current token belongs to.

        Raises:
            AuthenticationError: Token missing, invalid or expired
            ResourceNotFoundError: The account no longer exists
        """
        response = self._client.request("GET", "/api/user/me", fallback="Failed to get current user")
        return User(**response.json())

    def update_profile(self, username: Optional[str]) -> User:
        """Set (or with None, clear) the display name"""
        data = ProfileUpdate(username=username).model_dump()
        response = self._client.request(
            "PUT", "/api/user/profile", json=data, fallback="Failed to update profile"
        )
        return User(**response.json())

    def upload_profile_image(self, file: FileInput) -> User:
        """
        Upload a profile image.

        Args:
            file: File path, Path object, or file-like object (JPG, PNG or WebP under 5MB)

        Raises:
            ValueError: Unsupported image type or image too large
            BadRequestError: Server rejected the image
        """
        with open_upload(file, IMAGE_EXTENSIONS, MAX_PROFILE_IMAGE_BYTES) as (filename, file_obj, content_type):
            response = self._client.request(
                "POST",
                "/api/user/profile-image",
                files={"file": (filename, file_obj, content_type)},
                include_content_type=False,
                fallback="Failed to upload profile image",
            )
        return User(**response.json())

    def delete_profile_image(self) -> User:
        """Remove the profile image"""
        response = self._client.request(
            "DELETE", "/api/user/profile-image", fallback="Failed to delete profile image"
        )
        return User(**response.json())


class AsyncUsersResource:
    """Asynchronous Users resource"""

    def __init__(self, client: "AsyncClient"):
        self._client = client

    async def me(self) -> User:
        """Get the current user (async)"""
        response = await self._client.request("GET", "/api/user/me", fallback="Failed to get current user")
        return User(**response.json())

    async def update_profile(self, username: Optional[str]) -> User:
        """Set the display name (async)"""
        data = ProfileUpdate(username=username).model_dump()
        response = await self._client.request(
            "PUT", "/api/user/profile", json=data, fallback="Failed to update profile"
        )
        return User(**response.json())

    async def upload_profile_image(self, file: FileInput) -> User:
        """Upload a profile image (async)"""
        with open_upload(file, IMAGE_EXTENSIONS, MAX_PROFILE_IMAGE_BYTES) as (filename, file_obj, content_type):
            response = await self._client.request(
                "POST",
                "/api/user/profile-image",
                files={"file": (filename, file_obj, content_type)},
                include_content_type=False,
                fallback="Failed to upload profile image",
            )
        return User(**response.json())

    async def delete_profile_image(self) -> User:
        """Remove the profile image (async)"""
        response = await self._client.request(
            "DELETE", "/api/user/profile-image", fallback="Failed to delete profile image"
        )
        return User(**response.json())
