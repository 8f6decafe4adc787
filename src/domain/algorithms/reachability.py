from __future__ import annotations

import heapq
import math
from collections.abc import Iterable
from typing import Any

from src.domain.models import GeoPoint, NearbyStop, Stop

from .geo_utils import WALK_SPEED_KMH, point_distance_km, walking_minutes
from .timetable_graph import Adjacency

DEFAULT_MAX_MINUTES = 30.0
BOARDING_STOP_COUNT = 8
MAX_WALK_MINUTES = 18.0


def resolve_max_minutes(value: Any, default: float = DEFAULT_MAX_MINUTES) -> float:
    """Coerce a caller-supplied budget; missing, zero or non-numeric means default."""

    try:
        minutes = float(value)
    except (TypeError, ValueError):
        return float(default)
    if not minutes or math.isnan(minutes):
        return float(default)
    return minutes


def nearest_stops(
    stops: Iterable[Stop], *, origin: GeoPoint, count: int
) -> list[NearbyStop]:
    scored = [
        NearbyStop(stop=stop, distance_km=point_distance_km(origin, stop.location))
        for stop in stops
    ]
    scored.sort(key=lambda s: s.distance_km)
    return scored[:count]


def reachable_stops(
    adjacency: Adjacency,
    stops: Iterable[Stop],
    *,
    origin: GeoPoint,
    max_minutes: float,
    boarding_count: int = BOARDING_STOP_COUNT,
    max_walk_minutes: float = MAX_WALK_MINUTES,
    walk_speed_kmh: float = WALK_SPEED_KMH,
) -> dict[str, float]:
    """Minimum minutes from origin to every stop reachable within max_minutes.

    The origin first walks to its nearest stops (boarding), then transit edges
    are relaxed in order of accumulated minutes. Every returned value is
    <= max_minutes; an empty dict means nothing is reachable.
    """

    best: dict[str, float] = {}
    frontier: list[tuple[float, str]] = []

    for candidate in nearest_stops(stops, origin=origin, count=boarding_count):
        walk = walking_minutes(candidate.distance_km, walk_speed_kmh)
        if walk <= max_walk_minutes and walk <= max_minutes:
            stop_id = candidate.stop.id
            if stop_id not in best or walk < best[stop_id]:
                best[stop_id] = walk
                heapq.heappush(frontier, (walk, stop_id))

    while frontier:
        minutes, stop_id = heapq.heappop(frontier)
        if minutes > max_minutes:
            break
        if minutes > best.get(stop_id, math.inf):
            # Superseded by a better label pushed later.
            continue

        for edge in adjacency.get(stop_id, ()):
            candidate_minutes = minutes + edge.minutes
            if candidate_minutes > max_minutes:
                continue
            known = best.get(edge.to_stop_id)
            if known is None or candidate_minutes < known:
                best[edge.to_stop_id] = candidate_minutes
                heapq.heappush(frontier, (candidate_minutes, edge.to_stop_id))

    return best
