from unittest.mock import MagicMock

import pytest

from photo_worker.photos.dry_run_uploader import DryRunPhotoUploader
from photo_worker.photos.factory import PhotoUploaderFactory
from photo_worker.photos.http_client import HttpPhotoUploader


class TestPhotoUploaderFactory:
    def test_creates_http_uploader(self) -> None:
        settings = MagicMock(upload_target="http")

        uploader = PhotoUploaderFactory.create(settings, MagicMock())

        assert isinstance(uploader, HttpPhotoUploader)

    def test_creates_dry_run_uploader(self) -> None:
        settings = MagicMock(upload_target="DRY_RUN")

        uploader = PhotoUploaderFactory.create(settings, MagicMock())

        assert isinstance(uploader, DryRunPhotoUploader)

    def test_raises_for_unknown_target(self) -> None:
        settings = MagicMock(upload_target="s3")

        with pytest.raises(ValueError, match="Unknown upload target"):
            PhotoUploaderFactory.create(settings, MagicMock())


class TestDryRunPhotoUploader:
    def test_upload_does_not_raise(self) -> None:
        DryRunPhotoUploader().upload("S1", b"data")
