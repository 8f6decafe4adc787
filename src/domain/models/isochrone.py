from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .geo import GeoPoint
from .poi import PointOfInterest
from .stop import Stop


@dataclass(frozen=True, slots=True)
class NearbyStop:
    stop: Stop
    distance_km: float


@dataclass(frozen=True, slots=True)
class ReachedStop:
    stop: Stop
    minutes: float


@dataclass(frozen=True, slots=True)
class AccessiblePoi:
    poi: PointOfInterest
    minutes: float


@dataclass(frozen=True, slots=True)
class IsochroneRequest:
    """Inputs of one isochrone computation.

    `weights` is already resolved (see `resolve_weights`).
    """

    origin: GeoPoint
    max_minutes: float | None = None
    categories: frozenset[str] | None = None
    weights: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class IsochroneSnapshot:
    origin: GeoPoint
    max_minutes: float
    nearest_stops: tuple[NearbyStop, ...]
    reachable_stops: tuple[ReachedStop, ...]
    accessible_pois: tuple[AccessiblePoi, ...]
    counts_by_category: Mapping[str, int]
    score: float

    @property
    def reached_stop_count(self) -> int:
        return len(self.reachable_stops)

    @property
    def poi_count(self) -> int:
        return len(self.accessible_pois)


@dataclass(frozen=True, slots=True)
class LabelledOrigin:
    origin: GeoPoint
    label: str | None = None


@dataclass(frozen=True, slots=True)
class LabelledSnapshot:
    label: str
    snapshot: IsochroneSnapshot
