"""Type definitions for Auth and User API"""

from pydantic import BaseModel, Field
from typing import Optional


class User(BaseModel):
    """Schema for the authenticated user"""

    id: str
    email: str
    username: Optional[str] = None
    profile_image_url: Optional[str] = None


class RegisterRequest(BaseModel):
    """Schema for user registration"""

    email: str = Field(..., min_length=3, description="User email address")
    password: str = Field(..., min_length=1, description="Account password")
    username: Optional[str] = Field(None, description="Optional display name")


class LoginRequest(BaseModel):
    """Schema for login"""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Schema for login response"""

    token: str = Field(..., description="Bearer token for subsequent requests")
    user: User


class ProfileUpdate(BaseModel):
    """Schema for updating the user profile"""

    username: Optional[str] = None
