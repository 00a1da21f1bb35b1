"""
Object API — controller layer.

Receives validated input from router, calls the S3 helpers, composes the
response. Thin glue layer between HTTP and S3.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app import s3
from app.exceptions import MissingPresignParameters, NoFileUploaded
from app.objects.schemas import (
    MessageResponse,
    ObjectListResponse,
    ObjectSummary,
    ObjectUrlResponse,
    PresignedUploadResponse,
    UploadResponse,
)

if TYPE_CHECKING:
    from fastapi import UploadFile

    from app.config import Settings

logger = logging.getLogger(__name__)


async def request_presigned_upload(
    file_name: str | None,
    content_type: str | None,
    settings: Settings,
) -> PresignedUploadResponse:
    """Issue a presigned PUT URL for a new key under uploads/."""
    if not file_name or not content_type:
        raise MissingPresignParameters()

    key = s3.build_upload_key(file_name)
    url = await s3.generate_presigned_put_url(key, content_type, settings)
    logger.info("Issued presigned upload URL for %s", key)
    return PresignedUploadResponse(url=url, key=key)


async def upload_file(file: UploadFile | None, settings: Settings) -> UploadResponse:
    """Upload a multipart file straight to S3 under uploads/."""
    if file is None or not file.filename:
        raise NoFileUploaded()

    key = s3.build_upload_key(file.filename)
    data = await file.read()
    await s3.upload_object(key, data, file.content_type, settings)
    logger.info("Uploaded %d bytes to %s", len(data), key)
    return UploadResponse(message="File uploaded successfully", key=key)


async def get_object_url(key: str, settings: Settings) -> ObjectUrlResponse:
    url = await s3.generate_presigned_get_url(key, settings)
    return ObjectUrlResponse(url=url)


async def list_objects(
    prefix: str,
    max_keys: int,
    settings: Settings,
) -> ObjectListResponse:
    contents = await s3.list_objects(prefix, max_keys, settings)
    return ObjectListResponse(
        objects=[ObjectSummary.from_s3(entry) for entry in contents],
    )


async def delete_object(key: str, settings: Settings) -> MessageResponse:
    await s3.delete_object(key, settings)
    logger.info("Deleted object %s", key)
    return MessageResponse(message="Object deleted successfully")
