from abc import ABC, abstractmethod

from photo_worker.photos.models import FetchedPhoto


class BasePhotoFetcher(ABC):
    """Contract for adapters that retrieve a record's current photo."""

    @abstractmethod
    def fetch(self, record_id: str) -> FetchedPhoto:
        """Download raw photo bytes and the reported content type.

        Raises:
            PhotoFetchError: on transport failure, non-2xx status or empty body.
        """


class BasePhotoUploader(ABC):
    """Contract for adapters that accept the final compressed JPEG."""

    @abstractmethod
    def upload(self, record_id: str, jpeg_bytes: bytes) -> None:
        """Store the compressed photo for the record.

        Raises:
            PhotoUploadError: if the remote store rejects the upload.
        """
