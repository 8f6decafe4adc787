from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .geo import GeoPoint
from .poi import PointOfInterest
from .stop import Stop


@dataclass(frozen=True, slots=True)
class ScheduledVisit:
    """One stop's arrival/departure within a trip.

    Times are minutes since service day midnight (may exceed 24h).
    """

    trip_id: str
    stop_sequence: int
    arrival_min: float
    departure_min: float
    stop_id: str


@dataclass(frozen=True, slots=True)
class Trip:
    trip_id: str
    route_id: str | None = None


@dataclass(frozen=True, slots=True)
class TransitRoute:
    route_id: str
    short_name: str | None = None
    long_name: str | None = None


@dataclass(frozen=True, slots=True)
class TransitEdge:
    """Minimum travel time between two consecutive stops of one trip."""

    from_stop_id: str
    to_stop_id: str
    minutes: float
    trip_id: str
    route_id: str | None = None


@dataclass(frozen=True, slots=True)
class DatasetStats:
    stops: int
    stop_times: int
    routes: int
    pois: int


@dataclass(frozen=True, slots=True)
class TransitDataset:
    """Read-only transit network plus the POI catalogue.

    Loaded once at startup and shared by every request.
    """

    stops_by_id: Mapping[str, Stop]
    visits: tuple[ScheduledVisit, ...]
    trips_by_id: Mapping[str, Trip]
    routes_by_id: Mapping[str, TransitRoute] = field(
        default_factory=lambda: MappingProxyType({})
    )
    pois: tuple[PointOfInterest, ...] = ()
    poi_categories: tuple[str, ...] = ()

    @property
    def stops(self) -> tuple[Stop, ...]:
        return tuple(self.stops_by_id.values())

    @property
    def route_by_trip(self) -> dict[str, str | None]:
        return {trip_id: trip.route_id for trip_id, trip in self.trips_by_id.items()}

    def pois_by_category(self) -> dict[str, tuple[PointOfInterest, ...]]:
        grouped: dict[str, list[PointOfInterest]] = {}
        for poi in self.pois:
            grouped.setdefault(poi.category, []).append(poi)
        return {category: tuple(items) for category, items in grouped.items()}

    @property
    def default_location(self) -> GeoPoint:
        """Mean of all stop coordinates; used to centre a fresh map."""

        lat_sum = 0.0
        lon_sum = 0.0
        count = 0
        for stop in self.stops_by_id.values():
            lat = stop.location.lat
            lon = stop.location.lon
            # x == x is False only for NaN.
            if lat == lat and lon == lon:
                lat_sum += lat
                lon_sum += lon
                count += 1

        if count == 0:
            return GeoPoint(lat=0.0, lon=0.0)
        return GeoPoint(lat=lat_sum / count, lon=lon_sum / count)

    @property
    def stats(self) -> DatasetStats:
        return DatasetStats(
            stops=len(self.stops_by_id),
            stop_times=len(self.visits),
            routes=len(self.routes_by_id),
            pois=len(self.pois),
        )
