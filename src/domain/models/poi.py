from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class PointOfInterest:
    id: int
    name: str
    category: str
    location: GeoPoint
