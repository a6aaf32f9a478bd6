from __future__ import annotations

from typing import List

from tqdm import tqdm

from maplink_coordinates.client import RedirectResolver
from maplink_coordinates.locate import locate_expanded, locate_many
from maplink_coordinates.settings import Settings
from maplink_coordinates.types import LocateResult


async def process_links(
    urls: List[str],
    *,
    settings: Settings,
    resolve: bool = True,
    show_progress: bool = True,
    verbose: bool = False,
) -> List[LocateResult]:
    progress = tqdm(
        total=len(urls),
        desc="Locating",
        unit="link",
        disable=not show_progress,
    )

    async def _on_result(result: LocateResult) -> None:
        progress.update(1)
        if verbose and not result.located:
            progress.write(f"No coordinate for {result.url}")

    try:
        if not resolve:
            results = []
            for url in urls:
                result = locate_expanded(url)
                await _on_result(result)
                results.append(result)
            return results

        async with RedirectResolver(settings) as resolver:
            return await locate_many(urls, resolver=resolver, on_result=_on_result)
    finally:
        progress.close()
