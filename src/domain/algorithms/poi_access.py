from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence

from src.domain.models import AccessiblePoi, GeoPoint, PointOfInterest, ReachedStop

from .geo_utils import WALK_SPEED_KMH, point_distance_km, walking_minutes


def poi_minutes(
    poi: PointOfInterest,
    *,
    origin: GeoPoint,
    reached: Sequence[ReachedStop],
    walk_speed_kmh: float = WALK_SPEED_KMH,
) -> float:
    """Fastest way to a POI: walk straight there, or ride to a stop and walk on."""

    # A direct walk of 0 minutes is a real answer, not "unset".
    best = walking_minutes(point_distance_km(origin, poi.location), walk_speed_kmh)

    for hop in reached:
        total = hop.minutes + walking_minutes(
            point_distance_km(hop.stop.location, poi.location), walk_speed_kmh
        )
        if total < best:
            best = total

    return best


def attach_pois(
    reached: Sequence[ReachedStop],
    pois: Iterable[PointOfInterest],
    *,
    origin: GeoPoint,
    max_minutes: float,
    categories: Collection[str] | None = None,
    walk_speed_kmh: float = WALK_SPEED_KMH,
) -> tuple[list[AccessiblePoi], dict[str, int]]:
    """Return the POIs reachable within max_minutes and their count per category.

    An empty or missing `categories` collection disables filtering. Minutes
    are rounded to one decimal and the list is sorted fastest first.
    """

    wanted = set(categories) if categories else None

    accessible: list[AccessiblePoi] = []
    counts: dict[str, int] = {}
    for poi in pois:
        if wanted is not None and poi.category not in wanted:
            continue

        minutes = poi_minutes(
            poi, origin=origin, reached=reached, walk_speed_kmh=walk_speed_kmh
        )
        if minutes <= max_minutes:
            accessible.append(AccessiblePoi(poi=poi, minutes=round(minutes, 1)))
            counts[poi.category] = counts.get(poi.category, 0) + 1

    accessible.sort(key=lambda a: a.minutes)
    return accessible, counts
