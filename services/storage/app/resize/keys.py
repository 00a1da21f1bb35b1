"""
Object key conventions.

  uploads/...                         origin objects
  resized/<width>x<height>/<filename> derivatives, never reprocessed
"""
from __future__ import annotations

import urllib.parse

from app.resize.sizes import SizeSpec

RESIZED_PREFIX = "resized/"


def decode_key(raw_key: str) -> str:
    """Decode a key from an S3 event payload (``+`` is a space)."""
    return urllib.parse.unquote_plus(raw_key)


def is_derived_key(key: str) -> bool:
    return key.startswith(RESIZED_PREFIX)


def basename(key: str) -> str:
    return key.rsplit("/", 1)[-1]


def derived_key(origin_key: str, size: SizeSpec) -> str:
    return f"{RESIZED_PREFIX}{size.label}/{basename(origin_key)}"


def is_image(content_type: str | None) -> bool:
    if not content_type:
        return False
    return content_type.lower().startswith("image/")
