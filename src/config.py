from __future__ import annotations

import os
from dataclasses import dataclass


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip() or None


def _env_float(name: str, default: float) -> float:
    raw = _env_str(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from exc


def _env_int(name: str, default: int) -> int:
    raw = _env_str(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Runtime settings for the isochrone engine and its dataset source.

    Env vars:
      - DATASET_PATH: local directory with the timetable + POI files (default: data/transit)
      - DATASET_BUCKET / DATASET_PREFIX: load the same files from S3 instead
      - SCORING_PROFILES_PATH: optional JSON file replacing the built-in profiles
      - DEFAULT_MAX_MINUTES, MAX_WALK_MINUTES, BOARDING_STOP_COUNT,
        NEAREST_STOP_COUNT, WALK_SPEED_KMH: search tuning
      - COMPARE_MAX_WORKERS: threads used by comparisons (1 = sequential)
      - COMPARE_MAX_ORIGINS: upper bound on origins per comparison
      - LOG_LEVEL: root log level (default: INFO)
    """

    dataset_path: str = "data/transit"
    dataset_bucket: str | None = None
    dataset_prefix: str = "transit"
    scoring_profiles_path: str | None = None
    default_max_minutes: float = 30.0
    max_walk_minutes: float = 18.0
    boarding_stop_count: int = 8
    nearest_stop_count: int = 5
    walk_speed_kmh: float = 4.8
    compare_max_workers: int = 1
    compare_max_origins: int = 10
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> "EngineConfig":
        return EngineConfig(
            dataset_path=_env_str("DATASET_PATH") or "data/transit",
            dataset_bucket=_env_str("DATASET_BUCKET"),
            dataset_prefix=(_env_str("DATASET_PREFIX") or "transit").strip("/"),
            scoring_profiles_path=_env_str("SCORING_PROFILES_PATH"),
            default_max_minutes=_env_float("DEFAULT_MAX_MINUTES", 30.0),
            max_walk_minutes=_env_float("MAX_WALK_MINUTES", 18.0),
            boarding_stop_count=_env_int("BOARDING_STOP_COUNT", 8),
            nearest_stop_count=_env_int("NEAREST_STOP_COUNT", 5),
            walk_speed_kmh=_env_float("WALK_SPEED_KMH", 4.8),
            compare_max_workers=max(1, _env_int("COMPARE_MAX_WORKERS", 1)),
            compare_max_origins=max(2, _env_int("COMPARE_MAX_ORIGINS", 10)),
            log_level=(_env_str("LOG_LEVEL") or "INFO").upper(),
        )
