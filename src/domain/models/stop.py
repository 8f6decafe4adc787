from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Stop:
    """A boarding point of the timetable, looked up by `id`."""

    id: str
    name: str
    location: GeoPoint
