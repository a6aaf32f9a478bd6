"""
Map share-link coordinate extraction package.

Expands a shortened map link through a single redirect and reads the
latitude/longitude embedded in the resulting URL.
"""

from __future__ import annotations

from maplink_coordinates.client import RedirectResolver, resolve_redirect
from maplink_coordinates.extract import dms_to_decimal, extract_coordinate
from maplink_coordinates.locate import (
    locate,
    locate_expanded,
    locate_many,
    locate_share_link,
)
from maplink_coordinates.types import Coordinate, DMSComponent, LocateResult

__all__: tuple[str, ...] = (
    "Coordinate",
    "DMSComponent",
    "LocateResult",
    "RedirectResolver",
    "dms_to_decimal",
    "extract_coordinate",
    "locate",
    "locate_expanded",
    "locate_many",
    "locate_share_link",
    "resolve_redirect",
)
