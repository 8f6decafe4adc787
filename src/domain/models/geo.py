from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        # NaN fails both comparisons and is let through on purpose: distance
        # math on it yields NaN, which no time budget accepts.
        if self.lat < -90.0 or self.lat > 90.0:
            raise ValueError(f"Invalid latitude: {self.lat}")
        if self.lon < -180.0 or self.lon > 180.0:
            raise ValueError(f"Invalid longitude: {self.lon}")
