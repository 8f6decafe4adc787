from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from src.domain.models import ScheduledVisit, TransitEdge

# Timetables sometimes repeat a timestamp for consecutive stops; such hops
# still cost something.
MIN_EDGE_MINUTES = 0.5

Adjacency = Mapping[str, tuple[TransitEdge, ...]]


def build_adjacency(
    visits: Iterable[ScheduledVisit],
    route_by_trip: Mapping[str, str | None] | None = None,
) -> Adjacency:
    """Build stop -> outgoing transit edges from scheduled visits.

    One edge is emitted per consecutive pair of visits on the same trip.
    Visits need not be sorted: each trip is ordered by stop_sequence, and
    trips are walked in trip_id order so the result does not depend on the
    input order.
    """

    route_by_trip = route_by_trip or {}

    by_trip: dict[str, list[ScheduledVisit]] = {}
    for visit in visits:
        by_trip.setdefault(visit.trip_id, []).append(visit)

    adjacency: dict[str, list[TransitEdge]] = {}
    for trip_id in sorted(by_trip):
        entries = by_trip[trip_id]
        entries.sort(key=lambda v: v.stop_sequence)
        route_id = route_by_trip.get(trip_id)
        for current, nxt in zip(entries, entries[1:]):
            minutes = max(MIN_EDGE_MINUTES, nxt.arrival_min - current.departure_min)
            adjacency.setdefault(current.stop_id, []).append(
                TransitEdge(
                    from_stop_id=current.stop_id,
                    to_stop_id=nxt.stop_id,
                    minutes=minutes,
                    trip_id=trip_id,
                    route_id=route_id,
                )
            )

    return MappingProxyType(
        {stop_id: tuple(edges) for stop_id, edges in adjacency.items()}
    )


def edge_count(adjacency: Adjacency) -> int:
    return sum(len(edges) for edges in adjacency.values())
