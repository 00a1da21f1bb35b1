import urllib.parse
from collections.abc import Generator
from dataclasses import dataclass
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app.config import Settings
from app.main import create_app
from app.objects.router import get_settings
from app.resize.errors import ObjectNotFound
from app.resize.store import StoredObject

TEST_BUCKET = "test-bucket"


@dataclass(frozen=True)
class Blob:
    body: bytes
    content_type: str | None


def make_image_bytes(
    size: tuple[int, int] = (1000, 800),
    fmt: str = "PNG",
    mode: str = "RGB",
) -> bytes:
    color = (0, 200, 100, 255) if mode == "RGBA" else (0, 200, 100)
    image = Image.new(mode, size, color=color)
    buffer = BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def s3_record(key: str, bucket: str = TEST_BUCKET) -> dict:
    """One S3 ObjectCreated record, with the key encoded the way S3 encodes it."""
    return {
        "eventVersion": "2.1",
        "eventSource": "aws:s3",
        "awsRegion": "us-east-1",
        "eventName": "ObjectCreated:Put",
        "s3": {
            "s3SchemaVersion": "1.0",
            "bucket": {"name": bucket, "arn": f"arn:aws:s3:::{bucket}"},
            "object": {"key": urllib.parse.quote_plus(key, safe="/"), "size": 1024},
        },
    }


def s3_event(*keys: str) -> dict:
    return {"Records": [s3_record(key) for key in keys]}


class FakeObjectStore:
    """In-memory ObjectStore that records every call in order."""

    def __init__(self) -> None:
        self.objects: dict[str, Blob] = {}
        self.calls: list[tuple[str, str]] = []
        self.reads: list[str] = []
        self.closed: list[str] = []
        self.fail_writes_to: set[str] = set()

    def put(self, key: str, body: bytes, content_type: str | None) -> None:
        self.objects[key] = Blob(body=body, content_type=content_type)

    def fetch(self, key: str) -> StoredObject:
        self.calls.append(("fetch", key))
        try:
            blob = self.objects[key]
        except KeyError:
            raise ObjectNotFound(TEST_BUCKET, key) from None

        def read() -> bytes:
            self.reads.append(key)
            return blob.body

        return StoredObject(
            content_type=blob.content_type,
            read=read,
            close=lambda: self.closed.append(key),
        )

    def write(self, key: str, body: bytes, content_type: str | None) -> None:
        self.calls.append(("write", key))
        if key in self.fail_writes_to:
            raise OSError(f"write refused for {key}")
        self.put(key, body, content_type)

    @property
    def writes(self) -> list[str]:
        return [key for op, key in self.calls if op == "write"]


@pytest.fixture
def store() -> FakeObjectStore:
    return FakeObjectStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(s3_bucket_name=TEST_BUCKET, env_name="development")


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
