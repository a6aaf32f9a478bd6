"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable, Mapping

import httpx
import pytest

from maplink_coordinates.settings import Settings

SHORT_LINK = "https://maps.app.goo.gl/qz2zoCrJpmjH7Pmk7"

PLACE_URL = (
    "https://www.google.com/maps/place/Empire+State+Building/"
    "@40.7484405,-73.9882393,17z/data=!3m1!4b1!4m6!3m5"
    "!1s0x89c259a9b3117469:0xd134e199a405a163!8m2!3d40.7484405!4d-73.9856644"
    "!16zL20vMDJuZF8?entry=ttu"
)

DMS_URL = (
    "https://www.google.com/maps/place/"
    "40%C2%B041'54.0%22N+74%C2%B002'42.0%22W/@40.6892,-74.0445,17z"
)

VIEW_URL = "https://www.google.com/maps/@40.7484,-73.9857,15z"


@pytest.fixture(scope="session")
def map_links() -> dict[str, str]:
    """Representative share links and the URLs they expand to."""
    return {
        "short": SHORT_LINK,
        "place": PLACE_URL,
        "dms": DMS_URL,
        "view": VIEW_URL,
    }


@pytest.fixture()
def test_settings() -> Settings:
    """Settings that keep mock transports away from environment proxies."""
    return Settings(
        timeout=5.0,
        concurrency=2,
        user_agent="TestClient/0.0.0",
        http_proxy=None,
        https_proxy=None,
        use_proxy=False,
    )


@pytest.fixture()
def redirect_transport() -> Callable[[Mapping[str, str]], httpx.MockTransport]:
    """Build a transport that answers 302 for known links and 200 otherwise."""

    def _build(redirects: Mapping[str, str]) -> httpx.MockTransport:
        async def handler(request: httpx.Request) -> httpx.Response:
            target = redirects.get(str(request.url))
            if target is None:
                return httpx.Response(200, text="<html></html>")
            return httpx.Response(302, headers={"Location": target})

        return httpx.MockTransport(handler)

    return _build
