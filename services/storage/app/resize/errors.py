"""
Derivative generation — error types.

Only InvalidSizeSpec is handled inside the generator (the size entry is
skipped). Everything else propagates and fails the notification batch.
"""
from __future__ import annotations


class DerivativeError(Exception):
    """Base class for derivative generation failures."""


class InvalidSizeSpec(DerivativeError, ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid size format: {raw!r}")
        self.raw = raw


class MalformedNotification(DerivativeError, ValueError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Malformed S3 notification record: {reason}")
        self.reason = reason


class ObjectStoreError(DerivativeError):
    action = "access"

    def __init__(self, bucket: str, key: str) -> None:
        super().__init__(f"Could not {self.action} s3://{bucket}/{key}")
        self.bucket = bucket
        self.key = key


class ObjectFetchError(ObjectStoreError):
    action = "fetch"


class ObjectNotFound(ObjectFetchError):
    action = "find"


class ObjectWriteError(ObjectStoreError):
    action = "write"
