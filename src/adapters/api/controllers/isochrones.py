from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import (
    get_engine_config,
    get_isochrone_service,
    get_scoring_service,
)
from src.adapters.api.schemas.isochrones import (
    AccessiblePoiSchema,
    CompareRequestSchema,
    CompareResponseSchema,
    GeoPointSchema,
    IsochroneRequestSchema,
    IsochroneResponseSchema,
    LabelledSnapshotSchema,
    NearbyStopSchema,
    ReachedStopSchema,
    SnapshotMetadataSchema,
)
from src.app.services.isochrone_service import IsochroneService
from src.app.services.scoring_service import ScoringService
from src.config import EngineConfig
from src.domain.models import (
    GeoPoint,
    IsochroneRequest,
    IsochroneSnapshot,
    LabelledOrigin,
)

router = APIRouter(tags=["isochrones"])


def _snapshot_fields(snapshot: IsochroneSnapshot) -> dict:
    return {
        "origin": GeoPointSchema(
            latitude=snapshot.origin.lat, longitude=snapshot.origin.lon
        ),
        "max_minutes": snapshot.max_minutes,
        "nearest_stops": [
            NearbyStopSchema(
                stop_id=s.stop.id,
                stop_name=s.stop.name,
                latitude=s.stop.location.lat,
                longitude=s.stop.location.lon,
                distance_km=s.distance_km,
            )
            for s in snapshot.nearest_stops
        ],
        "reachable_stops": [
            ReachedStopSchema(
                stop_id=r.stop.id,
                stop_name=r.stop.name,
                latitude=r.stop.location.lat,
                longitude=r.stop.location.lon,
                minutes=r.minutes,
            )
            for r in snapshot.reachable_stops
        ],
        "accessible_pois": [
            AccessiblePoiSchema(
                poi_id=a.poi.id,
                name=a.poi.name,
                category_name=a.poi.category,
                latitude=a.poi.location.lat,
                longitude=a.poi.location.lon,
                minutes=a.minutes,
            )
            for a in snapshot.accessible_pois
        ],
        "counts_by_category": dict(snapshot.counts_by_category),
        "score": snapshot.score,
        "metadata": SnapshotMetadataSchema(
            reached_stop_count=snapshot.reached_stop_count,
            poi_count=snapshot.poi_count,
        ),
    }


@router.post("/isochrones", response_model=IsochroneResponseSchema)
def compute_isochrone(
    req: IsochroneRequestSchema,
    service: IsochroneService = Depends(get_isochrone_service),
    scoring: ScoringService = Depends(get_scoring_service),
) -> IsochroneResponseSchema:
    weights = scoring.resolve_weights(
        profile_id=req.profile_id, custom_weights=req.custom_weights
    )
    snapshot = service.compute(
        IsochroneRequest(
            origin=GeoPoint(lat=req.latitude, lon=req.longitude),
            max_minutes=req.max_minutes,
            categories=frozenset(req.categories) if req.categories else None,
            weights=weights,
        )
    )
    return IsochroneResponseSchema(**_snapshot_fields(snapshot), weights=weights)


@router.post("/isochrones/compare", response_model=CompareResponseSchema)
def compare_isochrones(
    req: CompareRequestSchema,
    service: IsochroneService = Depends(get_isochrone_service),
    scoring: ScoringService = Depends(get_scoring_service),
    config: EngineConfig = Depends(get_engine_config),
) -> CompareResponseSchema:
    if len(req.origins) > config.compare_max_origins:
        raise HTTPException(
            status_code=400,
            detail=f"At most {config.compare_max_origins} origins can be compared",
        )

    weights = scoring.resolve_weights(
        profile_id=req.profile_id, custom_weights=req.custom_weights
    )
    results = service.compare(
        [
            LabelledOrigin(
                origin=GeoPoint(lat=o.latitude, lon=o.longitude), label=o.label
            )
            for o in req.origins
        ],
        max_minutes=req.max_minutes,
        categories=req.categories,
        weights=weights,
    )
    return CompareResponseSchema(
        # Every snapshot carries the same resolved budget.
        max_minutes=results[0].snapshot.max_minutes,
        weights=weights,
        results=[
            LabelledSnapshotSchema(label=r.label, **_snapshot_fields(r.snapshot))
            for r in results
        ],
    )
