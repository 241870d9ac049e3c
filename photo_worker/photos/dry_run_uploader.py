from photo_worker.logging.logger import Log
from photo_worker.photos.base import BasePhotoUploader


class DryRunPhotoUploader(BasePhotoUploader):
    """Accepts every upload without sending it anywhere."""

    def upload(self, record_id: str, jpeg_bytes: bytes) -> None:
        Log.info("Dry run: skipping upload", record_id=record_id, size=len(jpeg_bytes))
