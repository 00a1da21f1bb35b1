"""
Global slowapi rate limiter.

Storage defaults to in-memory (one counter set per process); point
RATE_LIMIT_STORAGE_URI at Redis to share limits across instances.
Disabled when ENV_NAME=development.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import Settings

_settings = Settings()

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[_settings.rate_limit_default],
    storage_uri=_settings.rate_limit_storage_uri,
    enabled=_settings.env_name != "development",
)
