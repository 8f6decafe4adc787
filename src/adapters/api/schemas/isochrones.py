from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

Weight = Annotated[float, Field(ge=0.0)]


class GeoPointSchema(BaseModel):
    latitude: float
    longitude: float


class NearbyStopSchema(BaseModel):
    stop_id: str
    stop_name: str
    latitude: float
    longitude: float
    distance_km: float


class ReachedStopSchema(BaseModel):
    stop_id: str
    stop_name: str
    latitude: float
    longitude: float
    minutes: float


class AccessiblePoiSchema(BaseModel):
    poi_id: int
    name: str
    category_name: str
    latitude: float
    longitude: float
    minutes: float


class SnapshotMetadataSchema(BaseModel):
    reached_stop_count: int
    poi_count: int


class SnapshotSchema(BaseModel):
    origin: GeoPointSchema
    max_minutes: float
    nearest_stops: list[NearbyStopSchema] = []
    reachable_stops: list[ReachedStopSchema] = []
    accessible_pois: list[AccessiblePoiSchema] = []
    counts_by_category: dict[str, int] = {}
    score: float
    metadata: SnapshotMetadataSchema


class ScoredRequestSchema(BaseModel):
    max_minutes: float | None = Field(default=None, ge=0.0)
    categories: list[str] | None = None
    profile_id: str | None = None
    custom_weights: dict[str, Weight] | None = None


class IsochroneRequestSchema(ScoredRequestSchema):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class IsochroneResponseSchema(SnapshotSchema):
    weights: dict[str, float]


class CompareOriginSchema(BaseModel):
    label: str | None = None
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class CompareRequestSchema(ScoredRequestSchema):
    origins: list[CompareOriginSchema] = Field(..., min_length=2)


class LabelledSnapshotSchema(SnapshotSchema):
    label: str


class CompareResponseSchema(BaseModel):
    max_minutes: float
    weights: dict[str, float]
    results: list[LabelledSnapshotSchema]
