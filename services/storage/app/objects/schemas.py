"""
Object API — Pydantic V2 response schemas.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ── Base ─────────────────────────────────────────────────────────────────────

class _Base(BaseModel):
    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
    )


# ── Responses ────────────────────────────────────────────────────────────────

class PresignedUploadResponse(_Base):
    """Returned when a presigned PUT URL is generated."""
    url: str
    key: str = Field(description="S3 key the client must PUT to")


class UploadResponse(_Base):
    message: str
    key: str


class ObjectUrlResponse(_Base):
    """Time-limited presigned GET URL."""
    url: str


class ObjectSummary(_Base):
    key: str
    size: int = Field(ge=0)
    last_modified: datetime | None = None
    etag: str | None = None
    storage_class: str | None = None

    @classmethod
    def from_s3(cls, entry: dict) -> ObjectSummary:
        """Build from one ListObjectsV2 ``Contents`` entry."""
        return cls(
            key=entry["Key"],
            size=entry.get("Size", 0),
            last_modified=entry.get("LastModified"),
            etag=entry.get("ETag"),
            storage_class=entry.get("StorageClass"),
        )


class ObjectListResponse(_Base):
    objects: list[ObjectSummary]


class MessageResponse(_Base):
    message: str
