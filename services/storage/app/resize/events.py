"""
S3 ObjectCreated notification parsing.

Records may arrive directly from S3 or wrapped in an SQS message body
(S3 → SQS → Lambda); both shapes are flattened into plain S3 records.
"""
from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass

from app.resize.errors import MalformedNotification
from app.resize.keys import decode_key


@dataclass(frozen=True)
class NotificationRecord:
    bucket: str
    key: str
    raw_key: str


def iter_s3_records(event: dict) -> Iterator[dict]:
    for record in event.get("Records", []):
        if record.get("eventSource") == "aws:sqs":
            try:
                body = json.loads(record.get("body") or "{}")
            except json.JSONDecodeError as exc:
                raise MalformedNotification("SQS body is not valid JSON") from exc
            yield from body.get("Records", [])
        else:
            yield record


def parse_record(record: dict) -> NotificationRecord:
    s3_info = record.get("s3")
    if not isinstance(s3_info, dict):
        raise MalformedNotification("missing 's3' section")
    raw_key = (s3_info.get("object") or {}).get("key")
    if not isinstance(raw_key, str) or not raw_key:
        raise MalformedNotification("missing object key")
    bucket = (s3_info.get("bucket") or {}).get("name", "")
    return NotificationRecord(bucket=bucket, key=decode_key(raw_key), raw_key=raw_key)
