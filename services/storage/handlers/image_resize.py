"""
AWS Lambda handler — Image Resize

Triggered by S3 ObjectCreated events (directly or through SQS) on the
storage bucket.

Flow:
  1. Skips keys under resized/ (our own output).
  2. Downloads the object; skips anything that is not image/*.
  3. For each MAX_SIZES entry, fits the image inside WxH without enlarging.
  4. Writes each derivative to resized/<W>x<H>/<filename>.

Environment variables:
  S3_BUCKET_NAME       — bucket read from and written to
  ENABLE_IMAGE_RESIZE  — "true"/"false" kill switch (default: true)
  MAX_SIZES            — comma-separated WxH list (default: 150x300,500x600)
  AWS_REGION           — AWS region (set by Lambda runtime)
"""
from __future__ import annotations

import functools
import logging

import boto3

from app.config import Settings
from app.resize.config import ResizeConfig
from app.resize.generator import DerivativeGenerator
from app.resize.store import S3ObjectStore

logger = logging.getLogger()
logger.setLevel(logging.INFO)


@functools.lru_cache(maxsize=1)
def get_generator() -> DerivativeGenerator:
    """Build the generator once per cold start; config is fixed for the process lifetime."""
    settings = Settings()
    logger.setLevel(settings.log_level.upper())
    config = ResizeConfig.from_settings(settings)
    s3_client = boto3.client("s3", region_name=settings.aws_region)
    return DerivativeGenerator(config, S3ObjectStore(s3_client, config.bucket))


def handler(event: dict, context: object) -> dict:
    """Lambda entry point — resizes images from S3 upload events."""
    results = get_generator().process_event(event)
    return {"statusCode": 200, "results": [result.as_dict() for result in results]}
