from .local_transit_dataset_repository import LocalTransitDatasetRepository
from .s3_transit_dataset_repository import S3TransitDatasetRepository

__all__ = [
    "LocalTransitDatasetRepository",
    "S3TransitDatasetRepository",
]
