"""
Object store port used by the derivative generator.

The generator only needs two operations against one bucket: fetch an
object (content type up front, bytes on demand) and write bytes under a key.
S3ObjectStore implements them on a synchronous boto3 client (Lambda runtime).
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from app.resize.errors import ObjectFetchError, ObjectNotFound, ObjectWriteError

logger = logging.getLogger(__name__)


def _noop() -> None:
    return None


@dataclass(frozen=True)
class StoredObject:
    """A fetched object whose body has not been downloaded yet.

    Call ``read()`` to buffer the body, or ``close()`` to release it unread.
    """

    content_type: str | None
    read: Callable[[], bytes]
    close: Callable[[], None] = _noop


class ObjectStore(Protocol):
    def fetch(self, key: str) -> StoredObject: ...

    def write(self, key: str, body: bytes, content_type: str | None) -> None: ...


class S3ObjectStore:
    """ObjectStore backed by a boto3 S3 client bound to a single bucket."""

    def __init__(self, client: Any, bucket: str) -> None:
        self._client = client
        self._bucket = bucket

    def fetch(self, key: str) -> StoredObject:
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=key)
        except ClientError as exc:
            error_code = exc.response.get("Error", {}).get("Code", "")
            if error_code in ("404", "NoSuchKey"):
                raise ObjectNotFound(self._bucket, key) from exc
            raise ObjectFetchError(self._bucket, key) from exc
        except BotoCoreError as exc:
            raise ObjectFetchError(self._bucket, key) from exc

        stream = response["Body"]

        def read() -> bytes:
            try:
                return stream.read()
            except (BotoCoreError, ClientError) as exc:
                raise ObjectFetchError(self._bucket, key) from exc
            finally:
                stream.close()

        return StoredObject(
            content_type=response.get("ContentType"),
            read=read,
            close=stream.close,
        )

    def write(self, key: str, body: bytes, content_type: str | None) -> None:
        params: dict[str, Any] = {"Bucket": self._bucket, "Key": key, "Body": body}
        if content_type:
            params["ContentType"] = content_type
        try:
            self._client.put_object(**params)
        except (BotoCoreError, ClientError) as exc:
            raise ObjectWriteError(self._bucket, key) from exc
