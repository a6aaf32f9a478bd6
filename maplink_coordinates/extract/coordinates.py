"""Coordinate extraction from expanded map URLs."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from urllib.parse import unquote

from maplink_coordinates.extract.dms import parse_dms_components
from maplink_coordinates.types import Coordinate

__all__ = [
    "MATCHERS",
    "extract_coordinate",
    "match_dms",
    "match_projection",
    "match_view_centre",
]

_logger = logging.getLogger(__name__)

# !3d<lat>!4d<lng>, the pinned location of a place URL
_PROJECTION_PATTERN = re.compile(r"3d(-?\d+\.\d+)!4d(-?\d+\.\d+)", re.ASCII)
# @<lat>,<lng>,<zoom>z, the viewport centre
_VIEW_CENTRE_PATTERN = re.compile(r"@(-?\d+\.\d+),(-?\d+\.\d+)", re.ASCII)

Matcher = Callable[[str], Coordinate | None]


def _pair_from_match(match: re.Match[str] | None) -> Coordinate | None:
    if match is None:
        return None
    lat_raw, lng_raw = match.groups()
    try:
        return Coordinate(lat=float(lat_raw), lng=float(lng_raw))
    except ValueError:
        return None


def match_projection(text: str) -> Coordinate | None:
    """Match the ``3d<lat>!4d<lng>`` projection segment."""
    return _pair_from_match(_PROJECTION_PATTERN.search(text))


def match_dms(text: str) -> Coordinate | None:
    """Match the first two DMS readings as latitude then longitude.

    Assignment is positional: the first reading is always the latitude,
    whatever its direction letter says.
    """
    try:
        components = parse_dms_components(text, limit=2)
    except ValueError:
        # numeric conversion of a matched reading failed
        return None
    if len(components) < 2:
        return None
    lat_component, lng_component = components
    return Coordinate(
        lat=lat_component.to_decimal(),
        lng=lng_component.to_decimal(),
    )


def match_view_centre(text: str) -> Coordinate | None:
    """Match the ``@<lat>,<lng>`` view-centre segment."""
    return _pair_from_match(_VIEW_CENTRE_PATTERN.search(text))


# Most precise first.
MATCHERS: tuple[Matcher, ...] = (
    match_projection,
    match_dms,
    match_view_centre,
)


def extract_coordinate(url: str) -> Coordinate | None:
    """Return the coordinate embedded in ``url``, or None when there is none.

    The string is percent-decoded once before the matchers in
    :data:`MATCHERS` are tried in order; the first hit wins.
    """
    decoded = unquote(url)
    for matcher in MATCHERS:
        coordinate = matcher(decoded)
        if coordinate is not None:
            _logger.debug("%s matched %s", matcher.__name__, coordinate)
            return coordinate
    _logger.debug("No coordinate pattern found in %s", decoded)
    return None
