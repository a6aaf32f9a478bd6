"""Package-wide type definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

_NEGATIVE_DIRECTIONS: Final[frozenset[str]] = frozenset({"S", "W"})


def dms_to_decimal(
    degrees: int,
    minutes: int,
    seconds: float,
    direction: str,
) -> float:
    """Convert a DMS reading to signed decimal degrees.

    South and west readings are negative.
    """
    decimal = degrees + minutes / 60 + seconds / 3600
    return -decimal if direction in _NEGATIVE_DIRECTIONS else decimal


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees.

    Values are taken as found in the source text; no range check is applied.
    """

    lat: float
    lng: float

    def as_dict(self) -> dict[str, float]:
        """Return the coordinate as a ``{"lat", "lng"}`` mapping."""
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True, slots=True)
class DMSComponent:
    """One degrees-minutes-seconds reading such as ``40°41'54.0"N``."""

    degrees: int
    minutes: int
    seconds: float
    direction: str

    def to_decimal(self) -> float:
        """Return this reading in signed decimal degrees."""
        return dms_to_decimal(
            self.degrees, self.minutes, self.seconds, self.direction
        )


@dataclass(slots=True)
class LocateResult:
    """Outcome of locating a single share link."""

    url: str
    expanded_url: str | None = None
    coordinate: Coordinate | None = None

    @property
    def located(self) -> bool:
        """Return True when a coordinate was found."""
        return self.coordinate is not None

    def to_record(self) -> dict[str, Any]:
        """Convert the result into a JSON-serialisable record."""
        return {
            "url": self.url,
            "expanded_url": self.expanded_url,
            "coordinate": (
                self.coordinate.as_dict() if self.coordinate is not None else None
            ),
        }
