"""Tests for the request ID middleware."""

from httpx import ASGITransport, AsyncClient
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse
from starlette.routing import Route

from app.middleware import RequestIDMiddleware
from app.middleware.request_id import resolve_request_id


def test_safe_client_value_is_kept() -> None:
    assert resolve_request_id("abc-123_X") == "abc-123_X"
    assert resolve_request_id("  abc  ") == "abc"


def test_unsafe_or_missing_value_is_replaced() -> None:
    for raw in (None, "", "has space", "x" * 65, "new\nline"):
        generated = resolve_request_id(raw)
        assert generated
        assert generated != raw


def _app():
    async def echo(request):
        return PlainTextResponse(request.state.request_id)

    return RequestIDMiddleware(Starlette(routes=[Route("/", echo)]))


async def test_request_id_forwarded_to_handler_and_response() -> None:
    async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as ac:
        response = await ac.get("/", headers={"X-Request-ID": "trace-1"})

    assert response.text == "trace-1"
    assert response.headers["X-Request-ID"] == "trace-1"


async def test_request_id_generated_when_absent() -> None:
    async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as ac:
        response = await ac.get("/")

    assert response.headers["X-Request-ID"] == response.text
    assert response.text
