import pytest
from pydantic import ValidationError

from photo_worker.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_compression_values(self) -> None:
        s = Settings()
        assert s.compression_quality == 40
        assert s.compression_size_ceiling_bytes == 37_500
        assert s.compression_max_width == 400
        assert s.compression_max_height == 600

    def test_default_upload_target(self) -> None:
        s = Settings()
        assert s.upload_target == "dry_run"

    def test_default_batch_concurrency(self) -> None:
        s = Settings()
        assert s.batch_concurrency == 8

    def test_failed_photo_dump_disabled_by_default(self) -> None:
        s = Settings()
        assert s.failed_photos_dir == ""


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_compression_quality(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMPRESSION_QUALITY", "60")
        s = Settings()
        assert s.compression_quality == 60

    def test_loads_size_ceiling(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMPRESSION_SIZE_CEILING_BYTES", "50000")
        s = Settings()
        assert s.compression_size_ceiling_bytes == 50_000

    def test_loads_records_header_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECORDS_HAVE_HEADER", "false")
        s = Settings()
        assert s.records_have_header is False


class TestSettingsValidation:
    def test_invalid_quality_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMPRESSION_QUALITY", "high")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_concurrency_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BATCH_CONCURRENCY", "abc")
        with pytest.raises(ValidationError):
            Settings()
