from __future__ import annotations

import csv
import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from src.app.ports.output import ITransitDatasetRepository
from src.domain.algorithms.geo_utils import parse_time_to_minutes
from src.domain.exceptions import DatasetError
from src.domain.models import (
    GeoPoint,
    PointOfInterest,
    ScheduledVisit,
    Stop,
    TransitDataset,
    TransitRoute,
    Trip,
)

logger = logging.getLogger(__name__)

REQUIRED_FILES = ("stops.txt", "trips.txt", "stop_times.txt", "pois.csv")
OPTIONAL_FILES = ("routes.txt", "poi_categories.csv")


def _rows(path: Path) -> Iterator[tuple[int, dict[str, str]]]:
    with path.open("r", encoding="utf-8-sig", newline="") as fp:
        reader = csv.DictReader(fp)
        # Header is line 1.
        for line_no, row in enumerate(reader, start=2):
            yield line_no, row


def _text(row: dict[str, str], key: str) -> str:
    return (row.get(key) or "").strip()


def _location(row: dict[str, str], lat_key: str, lon_key: str) -> GeoPoint:
    return GeoPoint(lat=float(row[lat_key]), lon=float(row[lon_key]))


@dataclass(slots=True)
class LocalTransitDatasetRepository(ITransitDatasetRepository):
    """Loads a timetable (GTFS-style .txt files) and a POI catalogue from a directory.

    Files:
      - stops.txt, trips.txt, stop_times.txt: required timetable tables
      - routes.txt: optional route names
      - pois.csv: poi_id, name, category_name, latitude, longitude
      - poi_categories.csv: optional category_name list; derived from pois.csv otherwise

    Env vars:
      - DATASET_PATH: directory containing the files (default: data/transit)

    Any missing required file or malformed row raises DatasetError.
    """

    base_path: str | Path | None = None

    def _base(self) -> Path:
        value = self.base_path or os.getenv("DATASET_PATH") or "data/transit"
        return Path(value)

    def load_dataset(self) -> TransitDataset:
        base = self._base()
        for name in REQUIRED_FILES:
            if not (base / name).is_file():
                raise DatasetError(f"Missing dataset file: {base / name}")

        stops_by_id = self._load_stops(base / "stops.txt")
        routes_by_id = self._load_routes(base / "routes.txt")
        trips_by_id = self._load_trips(base / "trips.txt")
        visits = self._load_visits(base / "stop_times.txt")
        pois = self._load_pois(base / "pois.csv")
        categories = self._load_categories(base / "poi_categories.csv", pois)

        dataset = TransitDataset(
            stops_by_id=MappingProxyType(stops_by_id),
            visits=visits,
            trips_by_id=MappingProxyType(trips_by_id),
            routes_by_id=MappingProxyType(routes_by_id),
            pois=pois,
            poi_categories=categories,
        )
        stats = dataset.stats
        logger.info(
            "Loaded transit dataset from %s: %d stops, %d stop times, %d routes, %d POIs",
            base,
            stats.stops,
            stats.stop_times,
            stats.routes,
            stats.pois,
        )
        return dataset

    def _load_stops(self, path: Path) -> dict[str, Stop]:
        stops_by_id: dict[str, Stop] = {}
        for line_no, row in _rows(path):
            stop_id = _text(row, "stop_id")
            if not stop_id:
                continue
            try:
                location = _location(row, "stop_lat", "stop_lon")
            except (KeyError, TypeError, ValueError) as exc:
                raise DatasetError(f"{path.name}:{line_no}: bad stop coordinates") from exc
            stops_by_id[stop_id] = Stop(
                id=stop_id, name=_text(row, "stop_name") or stop_id, location=location
            )
        return stops_by_id

    def _load_routes(self, path: Path) -> dict[str, TransitRoute]:
        routes_by_id: dict[str, TransitRoute] = {}
        if not path.exists():
            return routes_by_id
        for _, row in _rows(path):
            route_id = _text(row, "route_id")
            if not route_id:
                continue
            routes_by_id[route_id] = TransitRoute(
                route_id=route_id,
                short_name=_text(row, "route_short_name") or None,
                long_name=_text(row, "route_long_name") or None,
            )
        return routes_by_id

    def _load_trips(self, path: Path) -> dict[str, Trip]:
        trips_by_id: dict[str, Trip] = {}
        for _, row in _rows(path):
            trip_id = _text(row, "trip_id")
            if not trip_id:
                continue
            trips_by_id[trip_id] = Trip(
                trip_id=trip_id, route_id=_text(row, "route_id") or None
            )
        return trips_by_id

    def _load_visits(self, path: Path) -> tuple[ScheduledVisit, ...]:
        visits: list[ScheduledVisit] = []
        seen: set[tuple[str, int]] = set()
        for line_no, row in _rows(path):
            trip_id = _text(row, "trip_id")
            stop_id = _text(row, "stop_id")
            if not trip_id or not stop_id:
                continue
            try:
                seq = int(_text(row, "stop_sequence"))
                arrival = parse_time_to_minutes(row["arrival_time"])
                departure = parse_time_to_minutes(row["departure_time"])
            except (KeyError, TypeError, ValueError) as exc:
                raise DatasetError(f"{path.name}:{line_no}: bad stop time") from exc

            if (trip_id, seq) in seen:
                raise DatasetError(
                    f"{path.name}:{line_no}: duplicate stop_sequence {seq} for trip {trip_id}"
                )
            seen.add((trip_id, seq))

            visits.append(
                ScheduledVisit(
                    trip_id=trip_id,
                    stop_sequence=seq,
                    arrival_min=arrival,
                    departure_min=departure,
                    stop_id=stop_id,
                )
            )
        return tuple(visits)

    def _load_pois(self, path: Path) -> tuple[PointOfInterest, ...]:
        pois: list[PointOfInterest] = []
        for line_no, row in _rows(path):
            try:
                poi_id = int(_text(row, "poi_id"))
                location = _location(row, "latitude", "longitude")
            except (KeyError, TypeError, ValueError) as exc:
                raise DatasetError(f"{path.name}:{line_no}: bad POI row") from exc
            category = _text(row, "category_name")
            if not category:
                raise DatasetError(f"{path.name}:{line_no}: POI without category")
            pois.append(
                PointOfInterest(
                    id=poi_id,
                    name=_text(row, "name"),
                    category=category,
                    location=location,
                )
            )
        return tuple(pois)

    def _load_categories(
        self, path: Path, pois: tuple[PointOfInterest, ...]
    ) -> tuple[str, ...]:
        if not path.exists():
            return tuple(sorted({poi.category for poi in pois}))

        categories: list[str] = []
        for _, row in _rows(path):
            name = _text(row, "category_name")
            if name and name not in categories:
                categories.append(name)

        unknown = {poi.category for poi in pois} - set(categories)
        if unknown:
            raise DatasetError(f"POIs use undeclared categories: {sorted(unknown)}")
        return tuple(categories)
