from __future__ import annotations

from pathlib import Path

import pytest

from src.adapters.persistence.local_transit_dataset_repository import (
    LocalTransitDatasetRepository,
)
from src.domain.exceptions import DatasetError

FILES = {
    "stops.txt": (
        "stop_id,stop_name,stop_lat,stop_lon\n"
        "A,Alpha,0.0,0.0\n"
        "B,Bravo,0.0,0.01\n"
        ",Nameless,1.0,1.0\n"
    ),
    "routes.txt": "route_id,route_short_name,route_long_name\nR1,1,Crosstown\n",
    "trips.txt": "route_id,service_id,trip_id\nR1,WK,T1\n",
    "stop_times.txt": (
        "trip_id,arrival_time,departure_time,stop_id,stop_sequence\n"
        "T1,08:03:30,08:04:00,B,2\n"
        "T1,08:00:00,08:00:00,A,1\n"
    ),
    "pois.csv": (
        "poi_id,name,category_name,latitude,longitude\n"
        "1,General Hospital,Hospital,0.0,0.0\n"
        "2,Central Library,Library,0.0,0.011\n"
    ),
}


def _write(base: Path, files: dict[str, str]) -> Path:
    for name, content in files.items():
        (base / name).write_text(content, encoding="utf-8")
    return base


def test_load_dataset_parses_all_tables(tmp_path: Path) -> None:
    repo = LocalTransitDatasetRepository(base_path=_write(tmp_path, FILES))

    dataset = repo.load_dataset()

    assert set(dataset.stops_by_id) == {"A", "B"}
    assert dataset.stops_by_id["B"].name == "Bravo"
    assert dataset.trips_by_id["T1"].route_id == "R1"
    assert dataset.routes_by_id["R1"].long_name == "Crosstown"
    assert dataset.route_by_trip == {"T1": "R1"}

    by_seq = {v.stop_sequence: v for v in dataset.visits}
    assert by_seq[1].departure_min == 480.0
    assert by_seq[2].arrival_min == pytest.approx(483.5)

    assert [p.name for p in dataset.pois] == ["General Hospital", "Central Library"]
    # Without poi_categories.csv the categories come from the POIs.
    assert dataset.poi_categories == ("Hospital", "Library")
    assert dataset.stats.stops == 2
    assert dataset.stats.stop_times == 2
    assert dataset.stats.routes == 1
    assert dataset.stats.pois == 2


def test_default_location_is_mean_of_stops(tmp_path: Path) -> None:
    dataset = LocalTransitDatasetRepository(
        base_path=_write(tmp_path, FILES)
    ).load_dataset()

    location = dataset.default_location
    assert location.lat == 0.0
    assert location.lon == pytest.approx(0.005)


def test_declared_categories_keep_their_order(tmp_path: Path) -> None:
    files = dict(FILES)
    files["poi_categories.csv"] = "category_name\nLibrary\nHospital\nRetail\n"

    dataset = LocalTransitDatasetRepository(base_path=_write(tmp_path, files)).load_dataset()

    assert dataset.poi_categories == ("Library", "Hospital", "Retail")
    assert dataset.pois_by_category()["Library"][0].id == 2


def test_routes_file_is_optional(tmp_path: Path) -> None:
    files = {k: v for k, v in FILES.items() if k != "routes.txt"}

    dataset = LocalTransitDatasetRepository(base_path=_write(tmp_path, files)).load_dataset()

    assert dict(dataset.routes_by_id) == {}


def test_base_path_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATASET_PATH", str(_write(tmp_path, FILES)))

    dataset = LocalTransitDatasetRepository().load_dataset()

    assert len(dataset.stops_by_id) == 2


@pytest.mark.parametrize("missing", ["stops.txt", "trips.txt", "stop_times.txt", "pois.csv"])
def test_missing_required_file_raises(tmp_path: Path, missing: str) -> None:
    files = {k: v for k, v in FILES.items() if k != missing}

    with pytest.raises(DatasetError, match=missing):
        LocalTransitDatasetRepository(base_path=_write(tmp_path, files)).load_dataset()


@pytest.mark.parametrize(
    ("name", "content"),
    [
        ("stops.txt", "stop_id,stop_name,stop_lat,stop_lon\nA,Alpha,north,0.0\n"),
        ("stops.txt", "stop_id,stop_name,stop_lat,stop_lon\nA,Alpha,95.0,0.0\n"),
        (
            "stop_times.txt",
            "trip_id,arrival_time,departure_time,stop_id,stop_sequence\n"
            "T1,soon,08:00:00,A,1\n",
        ),
        (
            "stop_times.txt",
            "trip_id,arrival_time,departure_time,stop_id,stop_sequence\n"
            "T1,08:00:00,08:00:00,A,1\n"
            "T1,08:05:00,08:05:00,B,1\n",
        ),
        ("pois.csv", "poi_id,name,category_name,latitude,longitude\nx,Bad,Retail,0,0\n"),
        ("pois.csv", "poi_id,name,category_name,latitude,longitude\n1,Bad,,0,0\n"),
        ("poi_categories.csv", "category_name\nHospital\n"),
    ],
)
def test_malformed_rows_raise(tmp_path: Path, name: str, content: str) -> None:
    files = dict(FILES)
    files[name] = content

    with pytest.raises(DatasetError):
        LocalTransitDatasetRepository(base_path=_write(tmp_path, files)).load_dataset()
