"""
Image resampler — fit inside a bounding box, never enlarge.

Uses Pillow. The derivative keeps the origin's encoding format so it can
be stored with the origin's Content-Type.
"""
from __future__ import annotations

import io
import logging

from PIL import Image

logger = logging.getLogger(__name__)

# Encoder options per Pillow format name; formats not listed use Pillow defaults.
SAVE_OPTIONS: dict[str, dict] = {
    "JPEG": {"quality": 85},
    "WEBP": {"quality": 85, "method": 4},
    "PNG": {"optimize": True},
}


class ImageResizer:
    """Decode an origin image once and produce bounded derivatives from it."""

    def __init__(self, image_data: bytes) -> None:
        self._image = Image.open(io.BytesIO(image_data))
        self._image.load()
        self.format: str = self._image.format or "PNG"

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def resize_to_fit(self, max_width: int, max_height: int) -> bytes:
        """Resize to fit within max dimensions, maintaining aspect ratio.

        Images already inside the box are re-encoded at their original size.
        """
        img = self._image.copy()
        img.thumbnail((max_width, max_height), Image.LANCZOS)

        buf = io.BytesIO()
        img.save(buf, format=self.format, **SAVE_OPTIONS.get(self.format, {}))
        return buf.getvalue()
