from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.resize.sizes import DEFAULT_SIZES, split_size_list

if TYPE_CHECKING:
    from app.config import Settings


@dataclass(frozen=True)
class ResizeConfig:
    """Resize settings resolved once per process and passed to the generator."""

    bucket: str
    enabled: bool = True
    sizes: tuple[str, ...] = DEFAULT_SIZES

    def __post_init__(self) -> None:
        if self.enabled and not self.bucket:
            raise ValueError("S3_BUCKET_NAME must be set when image resizing is enabled")

    @classmethod
    def from_settings(cls, settings: Settings) -> ResizeConfig:
        return cls(
            bucket=settings.s3_bucket_name,
            enabled=settings.enable_image_resize,
            sizes=split_size_list(settings.max_sizes),
        )
