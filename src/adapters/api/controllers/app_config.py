from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_isochrone_service, get_scoring_service
from src.adapters.api.schemas.app_config import (
    AppConfigSchema,
    DatasetStatsSchema,
    ScoringProfileSchema,
)
from src.adapters.api.schemas.isochrones import GeoPointSchema
from src.app.services.isochrone_service import TRAVEL_OPTIONS, IsochroneService
from src.app.services.scoring_service import ScoringService

router = APIRouter(tags=["config"])


def _profiles(scoring: ScoringService) -> list[ScoringProfileSchema]:
    return [
        ScoringProfileSchema(
            id=p.id, name=p.name, description=p.description, weights=dict(p.weights)
        )
        for p in scoring.list_profiles()
    ]


@router.get("/scoring-profiles", response_model=list[ScoringProfileSchema])
def list_scoring_profiles(
    scoring: ScoringService = Depends(get_scoring_service),
) -> list[ScoringProfileSchema]:
    return _profiles(scoring)


@router.get("/app-config", response_model=AppConfigSchema)
def get_app_config(
    service: IsochroneService = Depends(get_isochrone_service),
    scoring: ScoringService = Depends(get_scoring_service),
) -> AppConfigSchema:
    dataset = service.dataset
    location = dataset.default_location
    stats = dataset.stats
    return AppConfigSchema(
        poi_categories=list(dataset.poi_categories),
        scoring_profiles=_profiles(scoring),
        travel_options=list(TRAVEL_OPTIONS),
        default_location=GeoPointSchema(latitude=location.lat, longitude=location.lon),
        dataset_stats=DatasetStatsSchema(
            stops=stats.stops,
            stop_times=stats.stop_times,
            routes=stats.routes,
            pois=stats.pois,
        ),
    )
