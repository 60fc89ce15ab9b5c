"""
Pytest configuration and shared fixtures for ScholarVault tests

Provides:
- Sync and async clients pointed at a mocked server
- Collection and document payloads as the server returns them
- Helpers for building in-memory collection trees
"""

import pytest
import pytest_asyncio
from datetime import datetime, timezone
from uuid import uuid4

from scholarvault import Client, AsyncClient
from scholarvault.types.collections import Collection


BASE_URL = "http://localhost:3000"
USER_ID = "5f1d7c2e-0000-4000-8000-000000000001"
CREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def token():
    """Test bearer token"""
    return "test_token_123"


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def client(token, base_url):
    """Create test client"""
    client = Client(base_url=base_url, token=token, max_retries=1)
    yield client
    client.close()


@pytest_asyncio.fixture
async def async_client(token, base_url):
    """Create test async client"""
    client = AsyncClient(base_url=base_url, token=token, max_retries=1)
    yield client
    await client.close()


@pytest.fixture
def collection_id():
    return str(uuid4())


@pytest.fixture
def document_id():
    return str(uuid4())


@pytest.fixture
def user_response():
    return {
        "id": USER_ID,
        "email": "ada@example.com",
        "username": "ada",
        "profile_image_url": None,
    }


def collection_payload(collection_id, name="Thesis", parent_id=None):
    """Collection JSON as returned by the server"""
    return {
        "id": collection_id,
        "user_id": USER_ID,
        "name": name,
        "parent_id": parent_id,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }


def document_payload(document_id, title="Attention Is All You Need", **fields):
    """Document JSON as returned by the server"""
    payload = {
        "id": document_id,
        "user_id": USER_ID,
        "title": title,
        "authors": ["Ashish Vaswani", "Noam Shazeer"],
        "year": 2017,
        "publication_type": "conference",
        "journal": "NeurIPS",
        "volume": "30",
        "issue": None,
        "pages": "5998-6008",
        "publisher": None,
        "doi": "10.48550/arXiv.1706.03762",
        "url": None,
        "abstract_text": "The dominant sequence transduction models...",
        "keywords": ["transformers", "attention"],
        "pdf_url": f"/uploads/{document_id}.pdf",
        "created_at": "2024-01-02T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
    }
    payload.update(fields)
    return payload


@pytest.fixture
def mock_collection_response(collection_id):
    return collection_payload(collection_id)


@pytest.fixture
def mock_document_response(document_id):
    return document_payload(document_id)


def make_collection(collection_id, name=None, parent_id=None):
    """In-memory Collection record for store and tree tests"""
    return Collection(
        id=collection_id,
        user_id=USER_ID,
        name=name or collection_id,
        parent_id=parent_id,
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )


@pytest.fixture
def collection_json():
    """Factory for server collection payloads"""
    return collection_payload


@pytest.fixture
def document_json():
    """Factory for server document payloads"""
    return document_payload


@pytest.fixture
def new_collection():
    """Factory for in-memory Collection records"""
    return make_collection
