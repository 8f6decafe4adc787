from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import ScoringProfile


class IScoringProfileRepository(ABC):
    """Port for looking up named scoring profiles."""

    @abstractmethod
    def list_profiles(self) -> tuple[ScoringProfile, ...]:
        raise NotImplementedError

    @abstractmethod
    def get_profile(self, profile_id: str) -> ScoringProfile | None:
        """Return the profile with this id, or None if there is none."""

    @abstractmethod
    def default_profile(self) -> ScoringProfile:
        raise NotImplementedError
