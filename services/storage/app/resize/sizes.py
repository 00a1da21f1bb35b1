"""
Size specifications — ``"<w>x<h>[,<w>x<h>...]"`` parsing.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from app.resize.errors import InvalidSizeSpec

DEFAULT_SIZES: tuple[str, ...] = ("150x300", "500x600")

_SIZE_RE = re.compile(r"^\s*([0-9]+)\s*[xX]\s*([0-9]+)\s*$")


@dataclass(frozen=True)
class SizeSpec:
    """Bounding box a derivative must fit inside."""

    width: int
    height: int

    @property
    def label(self) -> str:
        return f"{self.width}x{self.height}"


def parse_size_spec(raw: str) -> SizeSpec:
    """Parse one ``WxH`` entry. Both sides must be positive integers."""
    match = _SIZE_RE.match(raw)
    if match is None:
        raise InvalidSizeSpec(raw)
    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        raise InvalidSizeSpec(raw)
    return SizeSpec(width=width, height=height)


def split_size_list(value: str | None) -> tuple[str, ...]:
    """Split the comma-separated MAX_SIZES value, keeping invalid entries for the generator to report.

    An unset or blank value means the defaults.
    """
    if value is None or not value.strip():
        return DEFAULT_SIZES
    return tuple(part.strip() for part in value.split(","))
