"""
Object API — HTTP routes.

Every route operates on the single configured bucket (S3_BUCKET_NAME).
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, File, Query, UploadFile

from app.config import Settings
from app.objects import controller
from app.objects.constants import DEFAULT_LIST_PREFIX, DEFAULT_MAX_KEYS, MAX_LIST_KEYS
from app.objects.schemas import (
    MessageResponse,
    ObjectListResponse,
    ObjectUrlResponse,
    PresignedUploadResponse,
    UploadResponse,
)

router = APIRouter(prefix="/s3", tags=["objects"])


def get_settings() -> Settings:
    return Settings()


# ── Upload flow ──────────────────────────────────────────────────────────────

@router.get(
    "/presigned-url",
    response_model=PresignedUploadResponse,
    summary="Request a presigned upload URL",
    description=(
        "Generates a presigned S3 PUT URL for a new key under uploads/. "
        "Once the client PUTs the file, the resize Lambda generates the "
        "configured derivatives under resized/."
    ),
)
async def get_presigned_upload_url(
    file_name: str | None = Query(default=None, alias="fileName"),
    content_type: str | None = Query(default=None, alias="contentType"),
    settings: Settings = Depends(get_settings),
) -> PresignedUploadResponse:
    return await controller.request_presigned_upload(file_name, content_type, settings)


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload a file through the API",
)
async def upload_file(
    file: UploadFile | None = File(default=None),
    settings: Settings = Depends(get_settings),
) -> UploadResponse:
    return await controller.upload_file(file, settings)


# ── Objects ──────────────────────────────────────────────────────────────────

@router.get(
    "/object/{key:path}",
    response_model=ObjectUrlResponse,
    summary="Get a presigned download URL",
)
async def get_object_url(
    key: str,
    settings: Settings = Depends(get_settings),
) -> ObjectUrlResponse:
    return await controller.get_object_url(key, settings)


@router.get(
    "/list",
    response_model=ObjectListResponse,
    summary="List objects under a prefix",
)
async def list_objects(
    prefix: str = Query(default=DEFAULT_LIST_PREFIX),
    max_keys: int = Query(default=DEFAULT_MAX_KEYS, ge=1, le=MAX_LIST_KEYS, alias="maxKeys"),
    settings: Settings = Depends(get_settings),
) -> ObjectListResponse:
    return await controller.list_objects(prefix, max_keys, settings)


@router.delete(
    "/object/{key:path}",
    response_model=MessageResponse,
    summary="Delete an object",
)
async def delete_object(
    key: str,
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    return await controller.delete_object(key, settings)
