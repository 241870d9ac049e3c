import httpx

from photo_worker.config.settings import Settings
from photo_worker.photos.base import BasePhotoUploader
from photo_worker.photos.dry_run_uploader import DryRunPhotoUploader
from photo_worker.photos.http_client import HttpPhotoUploader


class PhotoUploaderFactory:
    """Creates the configured upload adapter."""

    TARGETS = ("http", "dry_run")

    @classmethod
    def create(cls, settings: Settings, client: httpx.Client) -> BasePhotoUploader:
        target = settings.upload_target.lower()
        if target == "http":
            return HttpPhotoUploader(client)
        if target == "dry_run":
            return DryRunPhotoUploader()
        raise ValueError(
            f"Unknown upload target '{target}'. Choose from: {list(cls.TARGETS)}"
        )
