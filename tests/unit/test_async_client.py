"""Unit tests for AsyncClient and the async resources"""

import httpx
import pytest
from pytest_httpx import HTTPXMock
from unittest.mock import AsyncMock, patch

from scholarvault import AsyncClient, RemoteRequestError, ResourceNotFoundError


@pytest.mark.asyncio
async def test_list_collections(async_client, httpx_mock: HTTPXMock, collection_json):
    httpx_mock.add_response(
        method="GET",
        url="http://localhost:3000/api/collections",
        json=[collection_json("a"), collection_json("b", parent_id="a")],
    )

    collections = await async_client.collections.list()

    assert [c.id for c in collections] == ["a", "b"]


@pytest.mark.asyncio
async def test_create_and_move(async_client, httpx_mock: HTTPXMock, collection_json):
    httpx_mock.add_response(
        method="POST",
        url="http://localhost:3000/api/collections",
        match_json={"name": "Drafts", "parent_id": "a"},
        json=collection_json("c", name="Drafts", parent_id="a"),
    )
    httpx_mock.add_response(
        method="PUT",
        url="http://localhost:3000/api/collections/c",
        match_json={"parent_id": None},
        json=collection_json("c", name="Drafts"),
    )

    created = await async_client.collections.create("Drafts", parent_id="a")
    moved = await async_client.collections.update(created.id, parent_id=None)

    assert created.parent_id == "a"
    assert moved.parent_id is None


@pytest.mark.asyncio
async def test_memberships(async_client, httpx_mock: HTTPXMock, document_json):
    httpx_mock.add_response(method="POST", url="http://localhost:3000/api/collections/a/documents/d1")
    httpx_mock.add_response(
        method="GET",
        url="http://localhost:3000/api/collections/a/documents",
        json=[document_json("d1")],
    )
    httpx_mock.add_response(method="DELETE", url="http://localhost:3000/api/collections/a/documents/d1")

    await async_client.collections.add_document("a", "d1")
    documents = await async_client.collections.documents("a")
    await async_client.collections.remove_document("a", "d1")

    assert [d.id for d in documents] == ["d1"]


@pytest.mark.asyncio
async def test_upload(async_client, httpx_mock: HTTPXMock, tmp_path, mock_document_response):
    pdf = tmp_path / "paper.pdf"
    pdf.write_bytes(b"%PDF-1.7")
    httpx_mock.add_response(
        method="POST",
        url="http://localhost:3000/api/documents/upload",
        json=mock_document_response,
    )

    document = await async_client.documents.upload(pdf)

    assert document.id == mock_document_response["id"]


@pytest.mark.asyncio
async def test_not_found(async_client, httpx_mock: HTTPXMock):
    httpx_mock.add_response(
        method="GET",
        url="http://localhost:3000/api/documents/missing",
        status_code=404,
        json={"error": "Document not found"},
    )

    with pytest.raises(ResourceNotFoundError, match="Document not found"):
        await async_client.documents.get("missing")


@pytest.mark.asyncio
async def test_login_and_me(async_client, httpx_mock: HTTPXMock, user_response):
    httpx_mock.add_response(
        method="POST",
        url="http://localhost:3000/api/auth/login",
        json={"token": "jwt", "user": user_response},
    )
    httpx_mock.add_response(method="GET", url="http://localhost:3000/api/user/me", json=user_response)

    result = await async_client.auth.login("ada@example.com", "secret")
    async_client.set_token(result.token)
    user = await async_client.users.me()

    assert user.id == user_response["id"]
    assert httpx_mock.get_requests()[-1].headers["Authorization"] == "Bearer jwt"


@pytest.mark.asyncio
@patch("scholarvault.async_client.asyncio.sleep", new_callable=AsyncMock)
async def test_transport_error_retried_for_get(mock_sleep, token, httpx_mock: HTTPXMock):
    httpx_mock.add_exception(httpx.ReadTimeout("slow"))
    httpx_mock.add_response(method="GET", url="http://localhost:3000/api/documents", json=[])

    async with AsyncClient(token=token, max_retries=2) as client:
        documents = await client.documents.list()

    assert documents == []
    mock_sleep.assert_awaited_once_with(1)


@pytest.mark.asyncio
async def test_transport_error_without_retry(async_client, httpx_mock: HTTPXMock):
    httpx_mock.add_exception(httpx.ConnectError("refused"))

    with pytest.raises(RemoteRequestError, match="Failed to fetch collections") as exc_info:
        await async_client.collections.list()

    assert exc_info.value.status_code is None
