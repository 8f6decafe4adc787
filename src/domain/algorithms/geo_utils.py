from __future__ import annotations

import math

from src.domain.models import GeoPoint

EARTH_RADIUS_KM = 6371.0
WALK_SPEED_KMH = 4.8  # brisk walk


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres. Arguments in degrees."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2.0) ** 2
    )
    # Rounding can push antipodal inputs just past 1; NaN must survive.
    if s > 1.0:
        s = 1.0
    return 2.0 * EARTH_RADIUS_KM * math.asin(math.sqrt(s))


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in meters."""

    return distance_km(a.lat, a.lon, b.lat, b.lon) * 1000.0


def point_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    return distance_km(a.lat, a.lon, b.lat, b.lon)


def walking_minutes(distance_km: float, speed_kmh: float = WALK_SPEED_KMH) -> float:
    if distance_km <= 0:
        return 0.0
    return distance_km / speed_kmh * 60.0


def parse_time_to_minutes(raw: str) -> float:
    """Convert a timetable clock value (HH:MM[:SS]) to minutes since midnight.

    Hours may exceed 24 for trips running past midnight.
    """

    parts = raw.strip().split(":")
    if not 2 <= len(parts) <= 3:
        raise ValueError(f"Invalid time of day: {raw!r}")
    hh, mm = parts[0], parts[1]
    ss = parts[2] if len(parts) == 3 else "0"
    return int(hh) * 60 + int(mm) + int(ss) / 60.0
