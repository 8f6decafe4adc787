from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import boto3
from botocore.client import BaseClient

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client
else:
    S3Client = BaseClient  # type: ignore[misc,assignment]

LOCALSTACK_DEFAULT_URL = "http://localhost:4566"


def _truthy(raw: str | None) -> bool:
    return (raw or "").strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class AwsRuntimeConfig:
    """Where boto3 should talk to: real AWS, or LocalStack for dev and tests.

    Env vars:
      - AWS_REGION: defaults to eu-west-1
      - ENDPOINT_URL: explicit endpoint, wins over everything else
      - USE_LOCALSTACK + LOCALSTACK_ENDPOINT_URL: LocalStack toggle
    """

    region: str
    endpoint_url: str | None = None

    @staticmethod
    def from_env() -> "AwsRuntimeConfig":
        endpoint_url = (os.getenv("ENDPOINT_URL") or "").strip() or None
        if endpoint_url is None and _truthy(os.getenv("USE_LOCALSTACK")):
            endpoint_url = os.getenv("LOCALSTACK_ENDPOINT_URL", LOCALSTACK_DEFAULT_URL)

        return AwsRuntimeConfig(
            region=os.getenv("AWS_REGION", "eu-west-1"),
            endpoint_url=endpoint_url,
        )


def s3_client(cfg: AwsRuntimeConfig | None = None) -> S3Client:
    cfg = cfg or AwsRuntimeConfig.from_env()
    session = boto3.session.Session(region_name=cfg.region)
    return session.client("s3", endpoint_url=cfg.endpoint_url)
