"""Degrees-minutes-seconds parsing."""

from __future__ import annotations

import re

from maplink_coordinates.types import DMSComponent, dms_to_decimal

__all__ = ["DMS_PATTERN", "dms_to_decimal", "parse_dms_components"]

# e.g. 40°41'54.0"N, the closing double quote is optional
DMS_PATTERN = re.compile(
    r"(\d{1,3})°(\d{1,2})'(\d{1,2}(?:\.\d+)?)\"?([NSEW])",
    re.ASCII,
)


def parse_dms_components(text: str, *, limit: int | None = None) -> list[DMSComponent]:
    """Return the DMS readings found in ``text``, in source order.

    Parsing stops after ``limit`` readings when given.
    """
    components: list[DMSComponent] = []
    for match in DMS_PATTERN.finditer(text):
        if limit is not None and len(components) >= limit:
            break
        degrees, minutes, seconds, direction = match.groups()
        components.append(
            DMSComponent(
                degrees=int(degrees),
                minutes=int(minutes),
                seconds=float(seconds),
                direction=direction,
            )
        )
    return components
