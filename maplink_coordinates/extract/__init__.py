"""Extraction module public API."""

from __future__ import annotations

from maplink_coordinates.extract.coordinates import (
    MATCHERS,
    extract_coordinate,
    match_dms,
    match_projection,
    match_view_centre,
)
from maplink_coordinates.extract.dms import dms_to_decimal, parse_dms_components

__all__ = [
    "MATCHERS",
    "dms_to_decimal",
    "extract_coordinate",
    "match_dms",
    "match_projection",
    "match_view_centre",
    "parse_dms_components",
]
