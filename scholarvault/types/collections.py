"""Type definitions for Collections API"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class CollectionCreate(BaseModel):
    """Schema for creating a new collection (folder)"""

    name: str = Field(..., min_length=1, max_length=255, description="Folder name")
    parent_id: Optional[str] = Field(None, description="Parent folder, None for a root folder")


class CollectionUpdate(BaseModel):
    """Schema for updating a collection (all fields optional)"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    parent_id: Optional[str] = None


class Collection(BaseModel):
    """A user-owned folder; folders form a forest through parent_id"""

    id: str
    user_id: str
    name: str
    parent_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
