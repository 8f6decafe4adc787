from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from src.app.ports.output import IScoringProfileRepository
from src.domain.algorithms.scoring import resolve_weights
from src.domain.models import ScoringProfile


@dataclass(slots=True)
class ScoringService:
    profile_repository: IScoringProfileRepository

    def list_profiles(self) -> tuple[ScoringProfile, ...]:
        return self.profile_repository.list_profiles()

    def resolve_weights(
        self,
        *,
        profile_id: str | None = None,
        custom_weights: Mapping[str, float] | None = None,
    ) -> dict[str, float]:
        profile = (
            self.profile_repository.get_profile(profile_id) if profile_id else None
        )
        return resolve_weights(
            custom_weights=custom_weights,
            profile=profile,
            default_profile=self.profile_repository.default_profile(),
        )
