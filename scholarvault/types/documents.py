"""Type definitions for Documents API"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class DocumentCreate(BaseModel):
    """Schema for creating a document from metadata alone"""

    model_config = {"extra": "forbid"}

    title: str = Field(..., min_length=1, description="Document title")
    authors: Optional[List[str]] = None
    year: Optional[int] = None
    publication_type: Optional[str] = None
    journal: Optional[str] = None
    volume: Optional[str] = None
    issue: Optional[str] = None
    pages: Optional[str] = None
    publisher: Optional[str] = None
    doi: Optional[str] = None
    url: Optional[str] = None
    abstract_text: Optional[str] = None
    keywords: Optional[List[str]] = None


class DocumentUpdate(BaseModel):
    """Schema for editing document metadata (all fields optional)"""

    model_config = {"extra": "forbid"}

    title: Optional[str] = Field(None, min_length=1)
    authors: Optional[List[str]] = None
    year: Optional[int] = None
    publication_type: Optional[str] = None
    journal: Optional[str] = None
    volume: Optional[str] = None
    issue: Optional[str] = None
    pages: Optional[str] = None
    publisher: Optional[str] = None
    doi: Optional[str] = None
    url: Optional[str] = None
    abstract_text: Optional[str] = None
    keywords: Optional[List[str]] = None


class Document(BaseModel):
    """A research paper with its extracted bibliographic metadata"""

    id: str
    user_id: str
    title: str
    authors: Optional[List[str]] = None
    year: Optional[int] = None
    publication_type: Optional[str] = None
    journal: Optional[str] = None
    volume: Optional[str] = None
    issue: Optional[str] = None
    pages: Optional[str] = None
    publisher: Optional[str] = None
    doi: Optional[str] = None
    url: Optional[str] = None
    abstract_text: Optional[str] = None
    keywords: Optional[List[str]] = None
    pdf_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
