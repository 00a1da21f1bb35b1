from pathlib import Path

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_files() -> list[str]:
    """Load .env from repository root (when running from services/storage) then local .env."""
    base = Path(__file__).resolve().parent.parent.parent.parent  # repository root
    return [str(base / ".env"), ".env"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── AWS ───────────────────────────────────────────────────────────────────
    # Empty credentials fall through to the default boto credential chain.
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = "us-east-1"
    s3_bucket_name: str = ""

    # S3 presigned URL expiry (PUT and GET)
    s3_presign_expiry_seconds: int = 3600

    # ── Image resizing (S3 ObjectCreated → Lambda) ────────────────────────────
    enable_image_resize: bool = True
    max_sizes: str = "150x300,500x600"

    # ── HTTP ──────────────────────────────────────────────────────────────────
    env_name: str = "development"
    cors_origins: str = "*"
    rate_limit_default: str = "120/minute"
    rate_limit_storage_uri: str = "memory://"

    log_level: str = "INFO"

    @field_validator("enable_image_resize", "max_sizes", mode="before")
    @classmethod
    def _blank_means_default(cls, value, info: ValidationInfo):
        # ENABLE_IMAGE_RESIZE= and MAX_SIZES= (set but empty) fall back to the defaults
        if isinstance(value, str) and not value.strip():
            return cls.model_fields[info.field_name].default
        return value

    @property
    def cors_origins_list(self) -> list[str]:
        return [x.strip() for x in self.cors_origins.split(",") if x.strip()]

