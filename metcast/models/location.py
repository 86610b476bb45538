"""Location models returned by the Met Office location services."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


@dataclass(frozen=True)
class Location:
    name: str
    area: str | None = None
    geohash: str | None = None  # None means too coarse to forecast

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> "Location":
        return cls(
            name=raw.get("name", ""),
            area=raw.get("area"),
            geohash=raw.get("geohash"),
        )

    @property
    def label(self) -> str:
        return f"{self.name} ({self.area or 'N/A'})"


class MatchKind(StrEnum):
    FOUND = "found"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class LocationMatch:
    """Outcome of a location search: one location, several, or none."""

    kind: MatchKind
    candidates: list[Location] = field(default_factory=list)

    @classmethod
    def found(cls, location: Location) -> "LocationMatch":
        return cls(MatchKind.FOUND, [location])

    @classmethod
    def ambiguous(cls, candidates: list[Location]) -> "LocationMatch":
        return cls(MatchKind.AMBIGUOUS, list(candidates))

    @classmethod
    def not_found(cls) -> "LocationMatch":
        return cls(MatchKind.NOT_FOUND)

    @property
    def location(self) -> Location | None:
        if self.kind == MatchKind.FOUND:
            return self.candidates[0]
        return None
