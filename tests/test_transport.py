"""AuthenticatedTransport のユニットテスト"""

import httpx
import pytest
import respx
from rbx_opencloud.credential import Credential
from rbx_opencloud.exceptions import HttpStatusError, TransportError
from rbx_opencloud.transport import (
    AuthenticatedTransport,
    AuthScheme,
    ensure_success,
    path_segment,
)


def make_transport(scheme: AuthScheme = AuthScheme.API_KEY) -> AuthenticatedTransport:
    return AuthenticatedTransport(httpx.AsyncClient(), Credential("secret"), scheme)


def test_request_attaches_api_key() -> None:
    request = make_transport().request("GET", "https://example.com/a", params={"x": 1})
    assert request.headers["x-api-key"] == "secret"
    assert "Authorization" not in request.headers
    assert request.url.params["x"] == "1"


def test_request_attaches_bearer() -> None:
    request = make_transport(AuthScheme.BEARER).request("GET", "https://example.com/a")
    assert request.headers["Authorization"] == "Bearer secret"
    assert "x-api-key" not in request.headers


def test_request_timeout_extension() -> None:
    request = make_transport().request("GET", "https://example.com/a", timeout=2.5)
    assert request.extensions["timeout"]["connect"] == 2.5


@respx.mock
async def test_send_does_not_interpret_status() -> None:
    """送信は 4xx/5xx でも例外にしないこと。"""
    respx.get("https://example.com/a").mock(return_value=httpx.Response(503))
    resp = await make_transport().get("https://example.com/a")
    assert resp.status_code == 503


async def test_send_wraps_timeout() -> None:
    """httpx のタイムアウトは TransportError になること。"""
    with respx.mock:
        respx.get("https://example.com/a").mock(side_effect=httpx.ReadTimeout("timed out"))
        with pytest.raises(TransportError) as exc_info:
            await make_transport().get("https://example.com/a")
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
        assert "secret" not in str(exc_info.value)


def test_ensure_success() -> None:
    request = httpx.Request("GET", "https://example.com/a")
    ensure_success(httpx.Response(204, request=request), "ctx")
    with pytest.raises(HttpStatusError) as exc_info:
        ensure_success(httpx.Response(429, text="slow down", request=request), "ctx")
    assert exc_info.value.status_code == 429
    assert str(exc_info.value) == "HTTP_ERROR: ctx: HTTP 429: slow down"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1001, "1001"),
        ("player#1", "player%231"),
        ("a/b?c=d", "a%2Fb%3Fc%3Dd"),
        ("with space", "with%20space"),
    ],
)
def test_path_segment(value: object, expected: str) -> None:
    assert path_segment(value) == expected
