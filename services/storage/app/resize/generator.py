"""
Derivative generator — turns S3 ObjectCreated notifications into resized copies.

For every record in a batch, in order:
  1. decode the key; keys under resized/ are skipped before any fetch
     (derivative writes emit notifications of their own);
  2. fetch the object; non-image content types are skipped without
     downloading the body;
  3. for each configured size, in order: parse it (invalid entries are
     logged and skipped), fit the image inside the box without enlarging,
     and write it to resized/<w>x<h>/<basename> with the origin Content-Type.

A fetch, decode or write failure aborts the whole batch: the error is
logged and re-raised so the event source can redeliver. Derivatives already
written stay in place. Reprocessing a key overwrites the same derived keys,
so at-least-once delivery is safe.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from app.resize.config import ResizeConfig
from app.resize.errors import InvalidSizeSpec
from app.resize.events import iter_s3_records, parse_record
from app.resize.keys import derived_key, is_derived_key, is_image
from app.resize.processor import ImageResizer
from app.resize.sizes import parse_size_spec
from app.resize.store import ObjectStore

logger = logging.getLogger(__name__)

PROCESSED = "processed"
SKIPPED = "skipped"

SKIP_DERIVED = "derived key"
SKIP_NOT_IMAGE = "not an image"


class Resizer(Protocol):
    format: str
    width: int
    height: int

    def resize_to_fit(self, max_width: int, max_height: int) -> bytes: ...


@dataclass
class RecordResult:
    key: str
    status: str
    reason: str | None = None
    derived_keys: list[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        result: dict = {"key": self.key, "status": self.status}
        if self.reason is not None:
            result["reason"] = self.reason
        if self.derived_keys:
            result["derived_keys"] = list(self.derived_keys)
        return result


class DerivativeGenerator:
    def __init__(
        self,
        config: ResizeConfig,
        store: ObjectStore,
        resizer_factory: Callable[[bytes], Resizer] = ImageResizer,
    ) -> None:
        self._config = config
        self._store = store
        self._resizer_factory = resizer_factory

    def process_event(self, event: dict) -> list[RecordResult]:
        """Process a notification batch sequentially; the first failure aborts it."""
        if not self._config.enabled:
            logger.info("Image resizing is disabled. Skipping processing.")
            return []

        results: list[RecordResult] = []
        try:
            for record in iter_s3_records(event):
                results.append(self.process_record(record))
        except Exception:
            logger.exception(
                "Error processing image batch after %d record(s)", len(results),
            )
            raise
        return results

    def process_record(self, record: dict) -> RecordResult:
        notification = parse_record(record)
        key = notification.key

        if is_derived_key(key):
            logger.info("Skipping already resized image: %s", key)
            return RecordResult(key=key, status=SKIPPED, reason=SKIP_DERIVED)

        if notification.bucket and notification.bucket != self._config.bucket:
            logger.warning(
                "Notification for bucket %s; reading %s from configured bucket %s",
                notification.bucket, key, self._config.bucket,
            )

        logger.info("Processing: %s", key)
        origin = self._store.fetch(key)

        if not is_image(origin.content_type):
            origin.close()
            logger.info("Skipping non-image file: %s (%s)", key, origin.content_type)
            return RecordResult(key=key, status=SKIPPED, reason=SKIP_NOT_IMAGE)

        resizer = self._resizer_factory(origin.read())
        logger.info(
            "Original image: %dx%d, format: %s",
            resizer.width, resizer.height, resizer.format,
        )

        written: list[str] = []
        for raw_size in self._config.sizes:
            try:
                size = parse_size_spec(raw_size)
            except InvalidSizeSpec:
                logger.error("Invalid size format: %s", raw_size)
                continue

            logger.info("Resizing %s to %s", key, size.label)
            data = resizer.resize_to_fit(size.width, size.height)

            target = derived_key(key, size)
            self._store.write(target, data, origin.content_type)
            logger.info("Uploaded resized image to %s", target)
            written.append(target)

        return RecordResult(key=key, status=PROCESSED, derived_keys=written)
