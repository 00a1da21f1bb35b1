import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings
from app.objects.router import router as objects_router
from app.rate_limit import limiter
from shared.middleware.error_handler import error_envelope_middleware, http_exception_handler
from shared.middleware.request_id import request_id_middleware


# ── OpenAPI metadata ──────────────────────────────────────────────────────────

_DESCRIPTION = """
## Storage Service

Thin HTTP façade over a single S3 bucket.

* **Upload** — presigned S3 PUT URLs for direct uploads, or multipart upload through the API.
* **Download** — presigned S3 GET URLs for time-limited access.
* **Objects** — list objects under a prefix, delete by key.
* **Derivatives** — every image created under `uploads/` is resized by the
  `image_resize` Lambda into `resized/<width>x<height>/<filename>`.

### Error shape
All errors return a consistent JSON envelope:
```json
{ "error": { "code": "not_found", "message": "Human-readable message" }, "request_id": "..." }
```
"""

_TAGS_METADATA = [
    {
        "name": "objects",
        "description": "Presigned URLs, uploads, listing and deletion of stored objects.",
    },
]


# ── Health schema ─────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str
    service: str


# ── App factory ───────────────────────────────────────────────────────────────

def get_settings() -> Settings:
    return Settings()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s:%(name)s: %(message)s",
    )

    app = FastAPI(
        title="Storage Service",
        version="1.0.0",
        description=_DESCRIPTION,
        openapi_tags=_TAGS_METADATA,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Attach rate limiter state before middleware
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Middleware (applied in reverse-registration order: last added = outermost)
    app.add_middleware(SlowAPIMiddleware)
    app.middleware("http")(request_id_middleware)
    app.middleware("http")(error_envelope_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    app.include_router(objects_router, prefix="/api")

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="storage")

    return app


app = create_app()
