"""Unit tests for the backend HTTP utilities.

This module tests the HTTP handling layer defined in backend/_http.py:

1. Helper Functions:
   - _parse_error_response: Extracting error info from row-store and auth
     service error bodies
   - _raise_for_status: Mapping HTTP status codes to exception types
   - _calculate_backoff: Exponential backoff calculation for retries

2. AsyncHTTPClient:
   - Initialization and context manager support
   - Auth headers
   - Error mapping and retry

Note: These tests use httpx's mock transport to avoid real network calls.
"""

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from backend._http import (
    DEFAULT_RETRY_BACKOFF_BASE,
    DEFAULT_RETRY_BACKOFF_MAX,
    RETRYABLE_STATUS_CODES,
    AsyncHTTPClient,
    _calculate_backoff,
    _parse_error_response,
    _raise_for_status,
)
from backend.exceptions import (
    APIError,
    AuthError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)


def make_client(handler, **kwargs) -> AsyncHTTPClient:
    return AsyncHTTPClient(
        base_url="http://localhost:54321",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


# =============================================================================
# Helper Function Tests: _parse_error_response
# =============================================================================


class TestParseErrorResponse:
    def test_row_store_error(self) -> None:
        """Row-store errors carry message, code, details, and hint."""
        response = httpx.Response(
            status_code=400,
            json={
                "message": 'invalid input syntax for type timestamp: "x"',
                "code": "22007",
                "details": None,
                "hint": "Check the format",
            },
        )
        message, code, details = _parse_error_response(response)

        assert message.startswith("invalid input syntax")
        assert code == "22007"
        assert details == {"hint": "Check the format"}

    def test_auth_error_description(self) -> None:
        response = httpx.Response(
            status_code=401,
            json={"error": "invalid_grant", "error_description": "Token expired"},
        )
        assert _parse_error_response(response) == ("Token expired", "invalid_grant", None)

    def test_auth_msg(self) -> None:
        response = httpx.Response(
            status_code=401,
            json={"msg": "Invalid JWT", "error_code": "bad_jwt"},
        )
        assert _parse_error_response(response) == ("Invalid JWT", "bad_jwt", None)

    def test_plain_text(self) -> None:
        response = httpx.Response(status_code=502, text="Bad Gateway")
        assert _parse_error_response(response) == ("Bad Gateway", None, None)

    def test_empty_body(self) -> None:
        response = httpx.Response(status_code=503)
        assert _parse_error_response(response) == ("HTTP 503 error", None, None)


# =============================================================================
# Helper Function Tests: _raise_for_status
# =============================================================================


class TestRaiseForStatus:
    def test_success_does_not_raise(self) -> None:
        _raise_for_status(httpx.Response(200, json=[]))

    @pytest.mark.parametrize(
        "status_code,exc_type",
        [
            (400, ValidationError),
            (422, ValidationError),
            (401, AuthError),
            (403, AuthError),
            (404, NotFoundError),
            (409, ConflictError),
            (500, ServerError),
            (503, ServerError),
            (418, APIError),
        ],
    )
    def test_status_mapping(self, status_code, exc_type) -> None:
        response = httpx.Response(status_code, json={"message": "nope"})

        with pytest.raises(exc_type) as exc_info:
            _raise_for_status(response)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == "nope"

    def test_keeps_response_body(self) -> None:
        response = httpx.Response(409, json={"message": "duplicate key", "code": "23505"})

        with pytest.raises(ConflictError) as exc_info:
            _raise_for_status(response)

        assert exc_info.value.response_body["code"] == "23505"


# =============================================================================
# Helper Function Tests: _calculate_backoff
# =============================================================================


class TestCalculateBackoff:
    def test_doubles_each_attempt(self) -> None:
        assert _calculate_backoff(0) == DEFAULT_RETRY_BACKOFF_BASE
        assert _calculate_backoff(1) == DEFAULT_RETRY_BACKOFF_BASE * 2
        assert _calculate_backoff(2) == DEFAULT_RETRY_BACKOFF_BASE * 4

    def test_capped(self) -> None:
        assert _calculate_backoff(20) == DEFAULT_RETRY_BACKOFF_MAX

    def test_retryable_codes(self) -> None:
        assert RETRYABLE_STATUS_CODES == {502, 503, 504}


# =============================================================================
# AsyncHTTPClient Tests
# =============================================================================


class TestAsyncHTTPClientInit:
    def test_defaults(self) -> None:
        client = AsyncHTTPClient(base_url="http://localhost:54321/")

        assert client.base_url == "http://localhost:54321"
        assert client.api_key == ""
        assert client.access_token is None
        assert client.timeout == 30.0
        assert client.retry_enabled is False
        assert client.max_retries == 3

    async def test_async_context_manager(self) -> None:
        async with AsyncHTTPClient(base_url="http://localhost:54321") as client:
            assert isinstance(client, AsyncHTTPClient)


class TestAsyncHTTPClientRequests:
    async def test_sends_api_key_as_bearer_when_signed_out(self) -> None:
        seen = {}

        async def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200, json=[])

        client = make_client(handler, api_key="anon-key")
        await client.get("/rest/v1/events")
        await client.close()

        assert seen["apikey"] == "anon-key"
        assert seen["authorization"] == "Bearer anon-key"

    async def test_sends_access_token_when_signed_in(self) -> None:
        seen = {}

        async def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200, json=[])

        client = make_client(handler, api_key="anon-key")
        client.access_token = "user-token"
        await client.get("/rest/v1/events")
        await client.close()

        assert seen["apikey"] == "anon-key"
        assert seen["authorization"] == "Bearer user-token"

    async def test_drops_none_params_and_merges_headers(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            assert dict(request.url.params) == {"select": "*"}
            assert request.headers["prefer"] == "return=representation"
            return httpx.Response(200, json=[{"id": "1"}])

        client = make_client(handler)
        result = await client.get(
            "/rest/v1/events",
            params={"select": "*", "order": None},
            headers={"Prefer": "return=representation"},
        )
        await client.close()

        assert result == [{"id": "1"}]

    async def test_patch_sends_json(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "PATCH"
            assert json.loads(request.content) == {"title": "Retro"}
            return httpx.Response(200, json=[{"id": "1", "title": "Retro"}])

        client = make_client(handler)
        result = await client.patch("/rest/v1/events", json={"title": "Retro"})
        await client.close()

        assert result[0]["title"] == "Retro"

    async def test_empty_response_returns_none(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        client = make_client(handler)
        assert await client.delete("/rest/v1/events") is None
        await client.close()


class TestAsyncHTTPClientErrorHandling:
    async def test_maps_error_status(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"msg": "Invalid JWT"})

        client = make_client(handler)
        with pytest.raises(AuthError):
            await client.get("/auth/v1/user")
        await client.close()

    async def test_non_json_success_body(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>Bad Gateway</html>")

        client = make_client(handler)
        with pytest.raises(APIError) as exc_info:
            await client.get("/rest/v1/events")
        await client.close()

        assert exc_info.value.status_code == 200
        assert exc_info.value.response_body == "<html>Bad Gateway</html>"

    async def test_connection_error(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused")

        client = make_client(handler)
        with pytest.raises(ConnectionError) as exc_info:
            await client.get("/rest/v1/events")
        await client.close()

        assert exc_info.value.url == "http://localhost:54321/rest/v1/events"

    async def test_timeout_error(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow")

        client = make_client(handler, timeout=5.0)
        with pytest.raises(TimeoutError) as exc_info:
            await client.get("/rest/v1/events")
        await client.close()

        assert exc_info.value.timeout == 5.0

    async def test_no_retry_by_default(self) -> None:
        calls = []

        async def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503, text="unavailable")

        client = make_client(handler)
        with pytest.raises(ServerError):
            await client.get("/rest/v1/events")
        await client.close()

        assert len(calls) == 1

    async def test_retries_transient_status(self, monkeypatch) -> None:
        monkeypatch.setattr("backend._http.asyncio.sleep", AsyncMock())
        responses = iter([httpx.Response(502), httpx.Response(200, json=[])])

        async def handler(request: httpx.Request) -> httpx.Response:
            return next(responses)

        client = make_client(handler, retry_enabled=True)
        assert await client.get("/rest/v1/events") == []
        await client.close()

    async def test_gives_up_after_max_retries(self, monkeypatch) -> None:
        monkeypatch.setattr("backend._http.asyncio.sleep", AsyncMock())
        calls = []

        async def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(504)

        client = make_client(handler, retry_enabled=True, max_retries=2)
        with pytest.raises(ServerError):
            await client.get("/rest/v1/events")
        await client.close()

        assert len(calls) == 3
