from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from src.app.ports.output import ITransitDatasetRepository
from src.domain.algorithms.poi_access import attach_pois
from src.domain.algorithms.reachability import (
    nearest_stops,
    reachable_stops,
    resolve_max_minutes,
)
from src.domain.algorithms.scoring import compute_score
from src.domain.algorithms.timetable_graph import Adjacency, build_adjacency, edge_count
from src.domain.models import (
    IsochroneRequest,
    IsochroneSnapshot,
    LabelledOrigin,
    LabelledSnapshot,
    ReachedStop,
    TransitDataset,
)

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "Untitled pin"
TRAVEL_OPTIONS = (15, 30, 45, 60)


@dataclass(slots=True)
class IsochroneService:
    """Walk + scheduled transit isochrones over a static timetable.

    - The adjacency is built once from the dataset and never mutated.
    - Every call allocates its own labels and frontier, so one instance can
      serve concurrent requests without locking.
    """

    dataset: TransitDataset
    adjacency: Adjacency

    # Tuning knobs
    default_max_minutes: float = 30.0
    max_walk_minutes: float = 18.0
    boarding_stop_count: int = 8
    nearest_stop_count: int = 5
    walk_speed_kmh: float = 4.8
    compare_max_workers: int = 1

    @classmethod
    def from_dataset(cls, dataset: TransitDataset, **tuning: Any) -> "IsochroneService":
        adjacency = build_adjacency(dataset.visits, dataset.route_by_trip)
        logger.info(
            "Built timetable graph: %d stops with departures, %d edges",
            len(adjacency),
            edge_count(adjacency),
        )
        return cls(dataset=dataset, adjacency=adjacency, **tuning)

    @classmethod
    def from_repository(
        cls, repository: ITransitDatasetRepository, **tuning: Any
    ) -> "IsochroneService":
        return cls.from_dataset(repository.load_dataset(), **tuning)

    def compute(self, request: IsochroneRequest) -> IsochroneSnapshot:
        origin = request.origin
        limit = resolve_max_minutes(request.max_minutes, self.default_max_minutes)

        labels = reachable_stops(
            self.adjacency,
            self.dataset.stops_by_id.values(),
            origin=origin,
            max_minutes=limit,
            boarding_count=self.boarding_stop_count,
            max_walk_minutes=self.max_walk_minutes,
            walk_speed_kmh=self.walk_speed_kmh,
        )

        reached: list[ReachedStop] = []
        for stop_id, minutes in labels.items():
            # Timetables may reference stops missing from the stop list.
            stop = self.dataset.stops_by_id.get(stop_id)
            if stop is None:
                continue
            reached.append(ReachedStop(stop=stop, minutes=minutes))
        reached.sort(key=lambda r: (r.minutes, r.stop.id))

        accessible, counts = attach_pois(
            reached,
            self.dataset.pois,
            origin=origin,
            max_minutes=limit,
            categories=request.categories,
            walk_speed_kmh=self.walk_speed_kmh,
        )
        score = compute_score(counts, request.weights)

        logger.debug(
            "Isochrone at (%s, %s) within %s min: %d stops, %d POIs, score %.3f",
            origin.lat,
            origin.lon,
            limit,
            len(reached),
            len(accessible),
            score,
        )

        return IsochroneSnapshot(
            origin=origin,
            max_minutes=limit,
            nearest_stops=tuple(
                nearest_stops(
                    self.dataset.stops_by_id.values(),
                    origin=origin,
                    count=self.nearest_stop_count,
                )
            ),
            reachable_stops=tuple(reached),
            accessible_pois=tuple(accessible),
            counts_by_category=counts,
            score=score,
        )

    def compare(
        self,
        origins: Sequence[LabelledOrigin],
        *,
        max_minutes: float | None = None,
        categories: Collection[str] | None = None,
        weights: Mapping[str, float],
    ) -> list[LabelledSnapshot]:
        """Run the isochrone pipeline once per origin.

        Results come back in the order of `origins` whatever the worker count.
        """

        wanted = frozenset(categories) if categories else None

        def _run(item: LabelledOrigin) -> LabelledSnapshot:
            snapshot = self.compute(
                IsochroneRequest(
                    origin=item.origin,
                    max_minutes=max_minutes,
                    categories=wanted,
                    weights=weights,
                )
            )
            return LabelledSnapshot(label=item.label or DEFAULT_LABEL, snapshot=snapshot)

        if self.compare_max_workers <= 1 or len(origins) <= 1:
            return [_run(item) for item in origins]

        workers = min(self.compare_max_workers, len(origins))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(_run, origins))
