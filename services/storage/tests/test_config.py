import pytest

from app.config import Settings
from app.resize.config import ResizeConfig
from app.resize.sizes import DEFAULT_SIZES


def test_blank_env_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENABLE_IMAGE_RESIZE", "")
    monkeypatch.setenv("MAX_SIZES", "")

    settings = Settings(s3_bucket_name="test-bucket")

    assert settings.enable_image_resize is True
    assert settings.max_sizes == "150x300,500x600"
    assert ResizeConfig.from_settings(settings).sizes == DEFAULT_SIZES


@pytest.mark.parametrize(("raw", "expected"), [("true", True), ("false", False), ("0", False)])
def test_enable_flag_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("ENABLE_IMAGE_RESIZE", raw)

    assert Settings().enable_image_resize is expected
