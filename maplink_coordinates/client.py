"""Single-hop redirect resolution built on httpx."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from .settings import Settings, get_settings

__all__ = ["RedirectResolver", "resolve_redirect"]

_logger = logging.getLogger(__name__)

_REDIRECT_STATUS = 302


class RedirectResolver:
    """Thin wrapper around httpx.AsyncClient that expands share links.

    Each call to :meth:`resolve` issues exactly one GET with redirect
    following disabled and reads only the status code and ``Location``.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        concurrency = settings.concurrency or 1
        self._semaphore = asyncio.Semaphore(concurrency)

    async def __aenter__(self) -> RedirectResolver:
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def resolve(self, url: str) -> str | None:
        """Return the ``Location`` target of a 302 response to ``url``.

        Any other outcome (a different status, a missing header, a network
        error or timeout) yields ``None``.
        """
        await self._ensure_client()
        assert self._client is not None
        try:
            async with self._semaphore:
                async with self._client.stream("GET", url) as response:
                    status = response.status_code
                    location = response.headers.get("Location")
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            _logger.debug("Redirect request for %s failed: %r", url, exc)
            return None

        if status != _REDIRECT_STATUS:
            _logger.debug("Expected %d from %s, got %d", _REDIRECT_STATUS, url, status)
            return None
        if not location:
            _logger.debug("Redirect from %s carried no Location header", url)
            return None
        return location

    async def _ensure_client(self) -> None:
        if self._client is not None:
            return
        headers: dict[str, str] = {
            "User-Agent": self._settings.user_agent,
        }
        timeout = httpx.Timeout(self._settings.timeout)
        client_kwargs: dict[str, Any] = {
            "timeout": timeout,
            "headers": headers,
            "transport": self._transport,
            "follow_redirects": False,
            "http2": True,
        }
        if self._settings.use_proxy:
            proxy_value = self._settings.https_proxy or self._settings.http_proxy
            if proxy_value:
                client_kwargs["proxy"] = proxy_value
        else:
            client_kwargs["trust_env"] = False
        self._client = httpx.AsyncClient(**client_kwargs)


async def resolve_redirect(
    url: str,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str | None:
    """Resolve a single share link with a short-lived resolver."""
    cfg = settings or get_settings()
    async with RedirectResolver(cfg, transport=transport) as resolver:
        return await resolver.resolve(url)
