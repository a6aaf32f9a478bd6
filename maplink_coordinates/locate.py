"""Resolve-then-extract pipeline for share links."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable

import httpx

from maplink_coordinates.client import RedirectResolver
from maplink_coordinates.extract import extract_coordinate
from maplink_coordinates.settings import Settings, get_settings
from maplink_coordinates.types import Coordinate, LocateResult

__all__ = ["locate", "locate_expanded", "locate_many", "locate_share_link"]

_logger = logging.getLogger(__name__)

ResultCallback = Callable[[LocateResult], Awaitable[None]]


def locate_expanded(url: str) -> LocateResult:
    """Extract a coordinate from a URL that is already expanded."""
    return LocateResult(url=url, expanded_url=url, coordinate=extract_coordinate(url))


async def locate(url: str, *, resolver: RedirectResolver) -> LocateResult:
    """Expand ``url`` through one redirect and extract its coordinate."""
    expanded = await resolver.resolve(url)
    if expanded is None:
        _logger.debug("Could not expand %s", url)
        return LocateResult(url=url)
    return LocateResult(
        url=url,
        expanded_url=expanded,
        coordinate=extract_coordinate(expanded),
    )


async def locate_share_link(
    url: str,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Coordinate | None:
    """Return the coordinate behind a share link, or None."""
    cfg = settings or get_settings()
    async with RedirectResolver(cfg, transport=transport) as resolver:
        result = await locate(url, resolver=resolver)
    return result.coordinate


async def locate_many(
    urls: Iterable[str],
    *,
    resolver: RedirectResolver,
    on_result: ResultCallback | None = None,
) -> list[LocateResult]:
    """Locate several share links concurrently, preserving input order."""

    async def _run(url: str) -> LocateResult:
        result = await locate(url, resolver=resolver)
        if on_result is not None:
            await on_result(result)
        return result

    return list(await asyncio.gather(*(_run(url) for url in urls)))
