from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import TransitDataset


class ITransitDatasetRepository(ABC):
    """Port for loading the static transit network and POI catalogue."""

    @abstractmethod
    def load_dataset(self) -> TransitDataset:
        raise NotImplementedError
