"""Tests for ScrapboxAdapter over httpx.MockTransport."""

import httpx
import pytest

from kpt_sync.adapters.outbound.scrapbox_adapter import ScrapboxAdapter
from kpt_sync.domain.errors import FetchError


def _adapter(handler) -> ScrapboxAdapter:
    return ScrapboxAdapter(
        base_url="https://scrapbox.io/api/",
        sid="s3cret",
        transport=httpx.MockTransport(handler),
    )


async def test_get_page_text_sends_cookie_and_path():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["cookie"] = request.headers.get("cookie")
        return httpx.Response(200, text="月報_202404\n\n[[Keep]]\nok")

    text = await _adapter(handler).get_page_text("team", "月報_202404")

    assert text == "月報_202404\n\n[[Keep]]\nok"
    assert seen["cookie"] == "connect.sid=s3cret"
    assert seen["url"].host == "scrapbox.io"
    assert seen["url"].path == "/api/pages/team/月報_202404/text"


async def test_non_200_raises_fetch_error_with_payload():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="page not found", headers={"x-trace": "abc"})

    with pytest.raises(FetchError) as exc_info:
        await _adapter(handler).get_page_text("team", "月報_202404")

    err = exc_info.value
    assert err.response_code == 404
    assert err.contents == "page not found"
    assert err.headers["x-trace"] == "abc"


async def test_other_success_codes_are_failures():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    with pytest.raises(FetchError) as exc_info:
        await _adapter(handler).get_page_text("team", "月報_202404")
    assert exc_info.value.response_code == 204


async def test_transport_error_raises_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError) as exc_info:
        await _adapter(handler).get_page_text("team", "月報_202404")

    assert exc_info.value.response_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
