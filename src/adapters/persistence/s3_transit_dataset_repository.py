from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from botocore.exceptions import ClientError

from src.adapters.aws import s3_client
from src.app.ports.output import ITransitDatasetRepository
from src.domain.models import TransitDataset

from .local_transit_dataset_repository import (
    OPTIONAL_FILES,
    REQUIRED_FILES,
    LocalTransitDatasetRepository,
)

logger = logging.getLogger(__name__)

_MISSING_CODES = {"NoSuchKey", "404", "NotFound"}


@dataclass(slots=True)
class S3TransitDatasetRepository(ITransitDatasetRepository):
    """Dataset repository backed by S3.

    Downloads the dataset files into a temporary directory and parses them
    with LocalTransitDatasetRepository.

    Env vars:
      - DATASET_BUCKET: bucket name
      - DATASET_PREFIX: key prefix holding the files (default: transit)
      - ENDPOINT_URL: preferred LocalStack endpoint (e.g. http://localhost:4566)
      - AWS_REGION: defaults to eu-west-1
    """

    bucket: str | None = None
    prefix: str | None = None

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("DATASET_BUCKET")
        if not value:
            raise RuntimeError("Missing DATASET_BUCKET")
        return value

    def _prefix(self) -> str:
        return (self.prefix or os.getenv("DATASET_PREFIX") or "transit").strip("/")

    def load_dataset(self) -> TransitDataset:
        s3 = s3_client()
        bucket = self._bucket()
        prefix = self._prefix()

        with tempfile.TemporaryDirectory(prefix="transitscope-") as tmp:
            base = Path(tmp)
            for name in REQUIRED_FILES + OPTIONAL_FILES:
                key = f"{prefix}/{name}"
                try:
                    obj = s3.get_object(Bucket=bucket, Key=key)
                except ClientError as exc:
                    code = str(exc.response.get("Error", {}).get("Code", ""))
                    if code in _MISSING_CODES:
                        # Required files are reported by the local loader.
                        logger.debug("s3://%s/%s not found", bucket, key)
                        continue
                    raise
                (base / name).write_bytes(obj["Body"].read())

            logger.info("Fetched transit dataset from s3://%s/%s", bucket, prefix)
            return LocalTransitDatasetRepository(base_path=base).load_dataset()
