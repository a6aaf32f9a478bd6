import pytest

from maplink_coordinates.cli import orchestrator
from maplink_coordinates.client import RedirectResolver
from maplink_coordinates.types import Coordinate


@pytest.mark.asyncio
async def test_process_links_resolves(
    monkeypatch,
    map_links,
    test_settings,
    redirect_transport,
):
    transport = redirect_transport({map_links["short"]: map_links["place"]})
    monkeypatch.setattr(
        orchestrator,
        "RedirectResolver",
        lambda settings: RedirectResolver(settings, transport=transport),
    )

    results = await orchestrator.process_links(
        [map_links["short"], "https://maps.app.goo.gl/unknown"],
        settings=test_settings,
        show_progress=False,
        verbose=True,
    )

    assert results[0].coordinate == Coordinate(lat=40.7484405, lng=-73.9856644)
    assert results[1].expanded_url is None
    assert results[1].coordinate is None


@pytest.mark.asyncio
async def test_process_links_without_resolving(monkeypatch, map_links, test_settings):
    def _fail(settings):
        raise AssertionError("resolver must not be created")

    monkeypatch.setattr(orchestrator, "RedirectResolver", _fail)

    results = await orchestrator.process_links(
        [map_links["view"], map_links["dms"]],
        settings=test_settings,
        resolve=False,
        show_progress=False,
    )

    assert results[0].coordinate == Coordinate(lat=40.7484, lng=-73.9857)
    assert results[1].coordinate.lat == pytest.approx(40 + 41 / 60 + 54 / 3600)
    assert results[1].coordinate.lng == pytest.approx(-(74 + 2 / 60 + 42 / 3600))
