from __future__ import annotations

from pydantic import BaseModel

from src.adapters.api.schemas.isochrones import GeoPointSchema


class ScoringProfileSchema(BaseModel):
    id: str
    name: str
    description: str = ""
    weights: dict[str, float]


class DatasetStatsSchema(BaseModel):
    stops: int
    stop_times: int
    routes: int
    pois: int


class AppConfigSchema(BaseModel):
    poi_categories: list[str]
    scoring_profiles: list[ScoringProfileSchema]
    travel_options: list[int]
    default_location: GeoPointSchema
    dataset_stats: DatasetStatsSchema
