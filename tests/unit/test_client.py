"""Unit tests for Client class"""

import httpx
import pytest
from pytest_httpx import HTTPXMock
from unittest.mock import patch

from scholarvault import (
    Client,
    Settings,
    RemoteRequestError,
    BadRequestError,
    AuthenticationError,
    PermissionDeniedError,
    ResourceNotFoundError,
    ConflictError,
)


def test_client_initialization():
    """Test client initialization"""
    client = Client()
    assert client.base_url == "http://localhost:3000"
    assert client.token is None
    assert client.timeout == 60.0
    assert client.max_retries == 1
    client.close()


def test_client_initialization_custom():
    """Test client initialization with custom settings"""
    client = Client(base_url="https://vault.example.org/", token="t", timeout=5.0, max_retries=3)
    assert client.base_url == "https://vault.example.org"
    assert client.token == "t"
    assert client.max_retries == 3
    client.close()


def test_client_rejects_bad_settings():
    with pytest.raises(ValueError, match="base_url is required"):
        Client(base_url="")
    with pytest.raises(ValueError, match="max_retries"):
        Client(max_retries=0)


def test_client_from_settings():
    settings = Settings(API_URL="http://api.test", TIMEOUT=3.0, MAX_RETRIES=2)
    with Client.from_settings(settings, token="abc") as client:
        assert client.base_url == "http://api.test"
        assert client.timeout == 3.0
        assert client.max_retries == 2
        assert client.token == "abc"


def test_get_headers(client):
    headers = client._get_headers()
    assert headers["Authorization"] == "Bearer test_token_123"
    assert headers["Content-Type"] == "application/json"
    assert headers["User-Agent"].startswith("scholarvault-python/")


def test_headers_without_token():
    with Client() as client:
        assert "Authorization" not in client._get_headers()


def test_headers_for_multipart(client):
    assert "Content-Type" not in client._get_headers(include_content_type=False)


def test_set_token(client):
    client.set_token(None)
    assert "Authorization" not in client._get_headers()
    client.set_token("fresh")
    assert client._get_headers()["Authorization"] == "Bearer fresh"


def test_request_sends_bearer_token(client, httpx_mock: HTTPXMock):
    httpx_mock.add_response(
        method="GET",
        url="http://localhost:3000/api/collections",
        match_headers={"Authorization": "Bearer test_token_123"},
        json=[],
    )

    response = client.request("GET", "/api/collections")
    assert response.status_code == 200


@pytest.mark.parametrize(
    "status_code,error_class",
    [
        (400, BadRequestError),
        (401, AuthenticationError),
        (403, PermissionDeniedError),
        (404, ResourceNotFoundError),
        (409, ConflictError),
        (500, RemoteRequestError),
    ],
)
def test_error_mapping(client, httpx_mock: HTTPXMock, status_code, error_class):
    httpx_mock.add_response(
        method="GET",
        url="http://localhost:3000/api/collections",
        status_code=status_code,
        json={"error": "Something went wrong"},
    )

    with pytest.raises(error_class, match="Something went wrong") as exc_info:
        client.request("GET", "/api/collections")

    assert exc_info.value.status_code == status_code
    assert isinstance(exc_info.value, RemoteRequestError)


def test_error_detail_field(client, httpx_mock: HTTPXMock):
    httpx_mock.add_response(
        method="GET",
        url="http://localhost:3000/api/user/me",
        status_code=401,
        json={"detail": "Token expired"},
    )

    with pytest.raises(AuthenticationError, match="Token expired"):
        client.request("GET", "/api/user/me")


def test_error_fallback_message(client, httpx_mock: HTTPXMock):
    httpx_mock.add_response(
        method="GET",
        url="http://localhost:3000/api/collections",
        status_code=500,
        text="",
    )

    with pytest.raises(RemoteRequestError) as exc_info:
        client.request("GET", "/api/collections", fallback="Failed to fetch collections")

    assert exc_info.value.message == "Failed to fetch collections"
    assert exc_info.value.status_code == 500


def test_transport_error(client, httpx_mock: HTTPXMock):
    httpx_mock.add_exception(httpx.ConnectError("connection refused"))

    with pytest.raises(RemoteRequestError, match="Failed to fetch documents") as exc_info:
        client.request("GET", "/api/documents", fallback="Failed to fetch documents")

    assert exc_info.value.status_code is None


@patch("scholarvault.client.time.sleep")
def test_idempotent_request_retried(mock_sleep, token, httpx_mock: HTTPXMock):
    httpx_mock.add_response(method="GET", url="http://localhost:3000/api/documents", status_code=503)
    httpx_mock.add_response(method="GET", url="http://localhost:3000/api/documents", json=[])

    with Client(token=token, max_retries=2) as client:
        response = client.request("GET", "/api/documents")

    assert response.json() == []
    mock_sleep.assert_called_once_with(1)


@patch("scholarvault.client.time.sleep")
def test_post_not_retried(mock_sleep, token, httpx_mock: HTTPXMock):
    httpx_mock.add_response(method="POST", url="http://localhost:3000/api/collections", status_code=503)

    with Client(token=token, max_retries=3) as client:
        with pytest.raises(RemoteRequestError) as exc_info:
            client.request("POST", "/api/collections", json={"name": "x"})

    assert exc_info.value.status_code == 503
    assert len(httpx_mock.get_requests()) == 1
    mock_sleep.assert_not_called()


def test_default_makes_single_attempt(client, httpx_mock: HTTPXMock):
    httpx_mock.add_response(method="GET", url="http://localhost:3000/api/documents", status_code=503)

    with pytest.raises(RemoteRequestError):
        client.request("GET", "/api/documents")

    assert len(httpx_mock.get_requests()) == 1


def test_client_context_manager():
    with Client() as client:
        assert client._http_client is not None
    assert client._http_client.is_closed
