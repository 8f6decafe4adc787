from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from src.app.ports.output import IScoringProfileRepository
from src.domain.models import ScoringProfile

BUILTIN_PROFILES: tuple[ScoringProfile, ...] = (
    ScoringProfile(
        id="balanced",
        name="Balanced Essentials",
        description="Even emphasis on hospitals, libraries, and retail.",
        weights=MappingProxyType({"Hospital": 0.4, "Library": 0.3, "Retail": 0.3}),
    ),
    ScoringProfile(
        id="healthcare",
        name="Health & Safety",
        description="Prioritises quick access to hospitals and urgent care.",
        weights=MappingProxyType({"Hospital": 0.65, "Library": 0.1, "Retail": 0.25}),
    ),
    ScoringProfile(
        id="families",
        name="Family Friendly",
        description="Highlights libraries and daily retail needs.",
        weights=MappingProxyType({"Hospital": 0.3, "Library": 0.45, "Retail": 0.25}),
    ),
)


def _profile_from_dict(raw: dict[str, Any]) -> ScoringProfile:
    weights = {str(k): float(v) for k, v in dict(raw.get("weights") or {}).items()}
    if any(w < 0 for w in weights.values()):
        raise ValueError(f"Scoring profile {raw.get('id')!r} has negative weights")
    return ScoringProfile(
        id=str(raw["id"]),
        name=str(raw.get("name") or raw["id"]),
        description=str(raw.get("description") or ""),
        weights=MappingProxyType(weights),
    )


def load_profiles_file(path: str | Path) -> tuple[ScoringProfile, ...]:
    """Read profiles from a JSON list of {id, name, description, weights}."""

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list) or not data:
        raise ValueError(f"{path}: expected a non-empty list of scoring profiles")
    return tuple(_profile_from_dict(item) for item in data)


@dataclass(slots=True)
class StaticScoringProfileRepository(IScoringProfileRepository):
    """In-memory scoring profiles; the first one is the default.

    Env vars:
      - SCORING_PROFILES_PATH: JSON file replacing the built-in profiles
    """

    profiles: tuple[ScoringProfile, ...] = BUILTIN_PROFILES

    def __post_init__(self) -> None:
        if not self.profiles:
            raise ValueError("At least one scoring profile is required")

    @classmethod
    def from_path(cls, path: str | Path | None) -> "StaticScoringProfileRepository":
        if not path:
            return cls()
        return cls(profiles=load_profiles_file(path))

    @classmethod
    def from_env(cls) -> "StaticScoringProfileRepository":
        return cls.from_path((os.getenv("SCORING_PROFILES_PATH") or "").strip() or None)

    def list_profiles(self) -> tuple[ScoringProfile, ...]:
        return self.profiles

    def get_profile(self, profile_id: str) -> ScoringProfile | None:
        return next((p for p in self.profiles if p.id == profile_id), None)

    def default_profile(self) -> ScoringProfile:
        return self.profiles[0]
