from .geo import GeoPoint
from .isochrone import (
    AccessiblePoi,
    IsochroneRequest,
    IsochroneSnapshot,
    LabelledOrigin,
    LabelledSnapshot,
    NearbyStop,
    ReachedStop,
)
from .poi import PointOfInterest
from .scoring import ScoringProfile
from .stop import Stop
from .timetable import (
    DatasetStats,
    ScheduledVisit,
    TransitDataset,
    TransitEdge,
    TransitRoute,
    Trip,
)

__all__ = [
    "AccessiblePoi",
    "DatasetStats",
    "GeoPoint",
    "IsochroneRequest",
    "IsochroneSnapshot",
    "LabelledOrigin",
    "LabelledSnapshot",
    "NearbyStop",
    "PointOfInterest",
    "ReachedStop",
    "ScheduledVisit",
    "ScoringProfile",
    "Stop",
    "TransitDataset",
    "TransitEdge",
    "TransitRoute",
    "Trip",
]
