from __future__ import annotations

import random

import pytest

from src.domain.algorithms.timetable_graph import build_adjacency, edge_count
from src.domain.models import ScheduledVisit


def test_consecutive_visits_yield_one_edge_with_travel_time() -> None:
    visits = [
        ScheduledVisit("T1", 1, 100.0, 100.0, "A"),
        ScheduledVisit("T1", 2, 101.5, 102.0, "B"),
    ]

    adjacency = build_adjacency(visits, {"T1": "R1"})

    assert list(adjacency) == ["A"]
    (edge,) = adjacency["A"]
    assert edge.to_stop_id == "B"
    assert edge.minutes == pytest.approx(1.5)
    assert edge.trip_id == "T1"
    assert edge.route_id == "R1"


@pytest.mark.parametrize("next_arrival", [100.0, 99.0])
def test_zero_or_negative_travel_time_is_floored(next_arrival: float) -> None:
    visits = [
        ScheduledVisit("T1", 1, 100.0, 100.0, "A"),
        ScheduledVisit("T1", 2, next_arrival, next_arrival, "B"),
    ]

    (edge,) = build_adjacency(visits)["A"]

    assert edge.minutes == 0.5


def test_visits_are_sorted_by_sequence_within_trip() -> None:
    visits = [
        ScheduledVisit("T1", 3, 110.0, 110.0, "C"),
        ScheduledVisit("T1", 1, 100.0, 100.0, "A"),
        ScheduledVisit("T1", 2, 104.0, 105.0, "B"),
    ]

    adjacency = build_adjacency(visits)

    assert [(e.from_stop_id, e.to_stop_id, e.minutes) for e in adjacency["A"]] == [
        ("A", "B", 4.0)
    ]
    assert [(e.from_stop_id, e.to_stop_id, e.minutes) for e in adjacency["B"]] == [
        ("B", "C", 5.0)
    ]
    assert "C" not in adjacency


def test_unknown_trip_has_no_route() -> None:
    visits = [
        ScheduledVisit("T9", 1, 0.0, 0.0, "A"),
        ScheduledVisit("T9", 2, 3.0, 3.0, "B"),
    ]

    (edge,) = build_adjacency(visits, {})["A"]

    assert edge.route_id is None


def test_single_visit_trip_has_no_edges() -> None:
    adjacency = build_adjacency([ScheduledVisit("T1", 1, 0.0, 0.0, "A")])

    assert dict(adjacency) == {}
    assert edge_count(adjacency) == 0


def test_build_is_idempotent_and_independent_of_input_order(dataset) -> None:
    visits = list(dataset.visits)
    shuffled = list(visits)
    random.Random(7).shuffle(shuffled)

    first = build_adjacency(visits, dataset.route_by_trip)
    second = build_adjacency(visits, dataset.route_by_trip)
    third = build_adjacency(shuffled, dataset.route_by_trip)

    assert dict(first) == dict(second) == dict(third)
    assert edge_count(first) == 4


def test_adjacency_is_read_only(dataset) -> None:
    adjacency = build_adjacency(dataset.visits)

    with pytest.raises(TypeError):
        adjacency["Z"] = ()  # type: ignore[index]
