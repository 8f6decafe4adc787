from .scoring_profile_repository import IScoringProfileRepository
from .transit_dataset_repository import ITransitDatasetRepository

__all__ = [
    "IScoringProfileRepository",
    "ITransitDatasetRepository",
]
