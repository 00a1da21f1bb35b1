"""
AWS S3 utilities — presigned URLs and direct object operations for the HTTP API.

Upload flow:
  1. Client requests a presigned PUT URL from the API.
  2. Client uploads the file directly to S3 using the presigned URL.
  3. S3 ObjectCreated event triggers the image resize Lambda
     (handlers/image_resize.py), which writes derivatives under resized/.
"""
from __future__ import annotations

import logging
import time
from typing import Any

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from app.config import Settings
from app.exceptions import (
    BucketNotConfigured,
    S3DeleteError,
    S3DownloadUrlError,
    S3ListError,
    S3PresignError,
    S3UploadError,
)
from app.objects.constants import UPLOAD_PREFIX

logger = logging.getLogger(__name__)


def build_upload_key(file_name: str, now_ms: int | None = None) -> str:
    """Build the S3 key for a new upload: uploads/<epoch-ms>-<file_name>."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{UPLOAD_PREFIX}{now_ms}-{file_name}"


def _require_bucket(settings: Settings) -> str:
    if not settings.s3_bucket_name:
        raise BucketNotConfigured()
    return settings.s3_bucket_name


def _s3_session(settings: Settings) -> aioboto3.Session:
    return aioboto3.Session(
        aws_access_key_id=settings.aws_access_key_id or None,
        aws_secret_access_key=settings.aws_secret_access_key or None,
        region_name=settings.aws_region,
    )


async def generate_presigned_put_url(
    key: str,
    content_type: str,
    settings: Settings,
) -> str:
    """Return a presigned PUT URL bound to ``key`` and ``content_type``."""
    bucket = _require_bucket(settings)
    try:
        async with _s3_session(settings).client("s3") as s3:
            url: str = await s3.generate_presigned_url(
                "put_object",
                Params={
                    "Bucket": bucket,
                    "Key": key,
                    "ContentType": content_type,
                },
                ExpiresIn=settings.s3_presign_expiry_seconds,
            )
    except (BotoCoreError, ClientError) as exc:
        logger.error("Error generating presigned URL for key %s: %s", key, exc)
        raise S3PresignError()
    return url


async def generate_presigned_get_url(key: str, settings: Settings) -> str:
    """Return a presigned GET URL for direct S3 access."""
    bucket = _require_bucket(settings)
    try:
        async with _s3_session(settings).client("s3") as s3:
            url: str = await s3.generate_presigned_url(
                "get_object",
                Params={"Bucket": bucket, "Key": key},
                ExpiresIn=settings.s3_presign_expiry_seconds,
            )
    except (BotoCoreError, ClientError) as exc:
        logger.error("Error getting object URL for key %s: %s", key, exc)
        raise S3DownloadUrlError()
    return url


async def upload_object(
    key: str,
    data: bytes,
    content_type: str | None,
    settings: Settings,
) -> None:
    """PutObject ``data`` under ``key``."""
    bucket = _require_bucket(settings)
    params: dict[str, Any] = {"Bucket": bucket, "Key": key, "Body": data}
    if content_type:
        params["ContentType"] = content_type
    try:
        async with _s3_session(settings).client("s3") as s3:
            await s3.put_object(**params)
    except (BotoCoreError, ClientError) as exc:
        logger.error("Error uploading file to key %s: %s", key, exc)
        raise S3UploadError()


async def list_objects(prefix: str, max_keys: int, settings: Settings) -> list[dict]:
    """Return the raw ``Contents`` entries of a single ListObjectsV2 page."""
    bucket = _require_bucket(settings)
    try:
        async with _s3_session(settings).client("s3") as s3:
            response = await s3.list_objects_v2(
                Bucket=bucket, Prefix=prefix, MaxKeys=max_keys,
            )
    except (BotoCoreError, ClientError) as exc:
        logger.error("Error listing objects under prefix %s: %s", prefix, exc)
        raise S3ListError()
    return response.get("Contents", [])


async def delete_object(key: str, settings: Settings) -> None:
    """Delete an S3 object. S3 treats deleting a missing key as success."""
    bucket = _require_bucket(settings)
    try:
        async with _s3_session(settings).client("s3") as s3:
            await s3.delete_object(Bucket=bucket, Key=key)
    except (BotoCoreError, ClientError) as exc:
        logger.error("Error deleting object %s: %s", key, exc)
        raise S3DeleteError()
