from __future__ import annotations

import pytest

from src.domain.models import (
    GeoPoint,
    PointOfInterest,
    ScheduledVisit,
    Stop,
    TransitDataset,
    TransitRoute,
    Trip,
)

# Along the equator 0.01 degrees of longitude is ~1.11 km (~13.9 min walk).
STOPS = (
    Stop(id="A", name="Stop A", location=GeoPoint(lat=0.0, lon=0.0)),
    Stop(id="B", name="Stop B", location=GeoPoint(lat=0.0, lon=0.01)),
    Stop(id="C", name="Stop C", location=GeoPoint(lat=0.0, lon=0.05)),
    Stop(id="D", name="Stop D", location=GeoPoint(lat=0.0, lon=0.10)),
    Stop(id="E", name="Stop E", location=GeoPoint(lat=1.0, lon=1.0)),
)

VISITS = (
    # T1: A -2-> B -5-> C -10-> D
    ScheduledVisit("T1", 1, 480.0, 480.0, "A"),
    ScheduledVisit("T1", 2, 482.0, 482.0, "B"),
    ScheduledVisit("T1", 3, 487.0, 487.0, "C"),
    ScheduledVisit("T1", 4, 497.0, 497.0, "D"),
    # T2: C -> A with identical timestamps (floored to 0.5 min).
    ScheduledVisit("T2", 1, 500.0, 500.0, "C"),
    ScheduledVisit("T2", 2, 500.0, 500.0, "A"),
)

POIS = (
    PointOfInterest(1, "General Hospital", "Hospital", GeoPoint(lat=0.0, lon=0.0)),
    PointOfInterest(2, "Central Library", "Library", GeoPoint(lat=0.0, lon=0.051)),
    PointOfInterest(3, "Corner Shop", "Retail", GeoPoint(lat=0.0, lon=0.101)),
    PointOfInterest(4, "Out-of-town Mall", "Retail", GeoPoint(lat=0.5, lon=0.5)),
)

BALANCED = {"Hospital": 0.4, "Library": 0.3, "Retail": 0.3}


def _make_dataset(
    visits: tuple[ScheduledVisit, ...] = VISITS,
    pois: tuple[PointOfInterest, ...] = POIS,
) -> TransitDataset:
    return TransitDataset(
        stops_by_id={s.id: s for s in STOPS},
        visits=visits,
        trips_by_id={"T1": Trip("T1", "R1"), "T2": Trip("T2", "R2")},
        routes_by_id={
            "R1": TransitRoute("R1", short_name="1"),
            "R2": TransitRoute("R2", short_name="2"),
        },
        pois=pois,
        poi_categories=("Hospital", "Library", "Retail"),
    )


@pytest.fixture
def dataset() -> TransitDataset:
    return _make_dataset()


@pytest.fixture
def dataset_factory():
    return _make_dataset


@pytest.fixture
def balanced_weights() -> dict[str, float]:
    return dict(BALANCED)
