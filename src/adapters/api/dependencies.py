from __future__ import annotations

from dataclasses import dataclass

from src.adapters.persistence import (
    LocalTransitDatasetRepository,
    S3TransitDatasetRepository,
)
from src.adapters.scoring import StaticScoringProfileRepository
from src.app.ports.output import ITransitDatasetRepository
from src.app.services.isochrone_service import IsochroneService
from src.app.services.scoring_service import ScoringService
from src.config import EngineConfig
from src.domain.exceptions import EngineNotReady


@dataclass(slots=True)
class _Services:
    config: EngineConfig | None = None
    isochrone: IsochroneService | None = None
    scoring: ScoringService | None = None


_services = _Services()


def build_dataset_repository(config: EngineConfig) -> ITransitDatasetRepository:
    if config.dataset_bucket:
        return S3TransitDatasetRepository(
            bucket=config.dataset_bucket, prefix=config.dataset_prefix
        )
    return LocalTransitDatasetRepository(base_path=config.dataset_path)


def init_services(config: EngineConfig | None = None) -> None:
    """Load the dataset and build the engine. Called once at startup.

    Errors propagate: the service must not start on a missing or partial dataset.
    """

    config = config or EngineConfig.from_env()

    profiles = StaticScoringProfileRepository.from_path(config.scoring_profiles_path)

    isochrone = IsochroneService.from_repository(
        build_dataset_repository(config),
        default_max_minutes=config.default_max_minutes,
        max_walk_minutes=config.max_walk_minutes,
        boarding_stop_count=config.boarding_stop_count,
        nearest_stop_count=config.nearest_stop_count,
        walk_speed_kmh=config.walk_speed_kmh,
        compare_max_workers=config.compare_max_workers,
    )

    _services.config = config
    _services.scoring = ScoringService(profile_repository=profiles)
    _services.isochrone = isochrone


def reset_services() -> None:
    _services.config = None
    _services.isochrone = None
    _services.scoring = None


def get_engine_config() -> EngineConfig:
    return _services.config or EngineConfig()


def get_isochrone_service() -> IsochroneService:
    if _services.isochrone is None:
        raise EngineNotReady("Transit dataset not loaded")
    return _services.isochrone


def get_scoring_service() -> ScoringService:
    if _services.scoring is None:
        _services.scoring = ScoringService(
            profile_repository=StaticScoringProfileRepository.from_env()
        )
    return _services.scoring
