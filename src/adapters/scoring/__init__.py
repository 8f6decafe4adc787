from .static_scoring_profile_repository import StaticScoringProfileRepository

__all__ = ["StaticScoringProfileRepository"]
