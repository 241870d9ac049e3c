from urllib.parse import quote

import httpx

from photo_worker.photos.base import BasePhotoFetcher, BasePhotoUploader
from photo_worker.photos.exceptions import PhotoFetchError, PhotoUploadError
from photo_worker.photos.models import FetchedPhoto


def build_http_client(
    *,
    base_url: str,
    token: str,
    timeout_seconds: int,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an httpx client carrying the bearer token for the photo API."""
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    return httpx.Client(
        base_url=base_url.rstrip("/"),
        headers=headers,
        timeout=timeout_seconds,
        transport=transport,
    )


def record_path_segment(record_id: str) -> str:
    """Percent-encode a record id as exactly one URL path segment.

    Raises:
        ValueError: if the id is empty or a dot segment.
    """
    segment = quote(record_id, safe="")
    if segment in ("", ".", ".."):
        raise ValueError(f"Invalid record id {record_id!r}")
    return segment


class HttpPhotoFetcher(BasePhotoFetcher):
    """GET {base}/students/{id}/photos/current."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def fetch(self, record_id: str) -> FetchedPhoto:
        try:
            segment = record_path_segment(record_id)
        except ValueError as exc:
            raise PhotoFetchError(str(exc)) from exc
        try:
            response = self._client.get(f"/students/{segment}/photos/current")
        except httpx.HTTPError as exc:
            raise PhotoFetchError(f"photo download failed for {record_id}: {exc}") from exc
        if not response.is_success:
            raise PhotoFetchError(
                f"photo download failed for {record_id}: status={response.status_code}"
            )
        if not response.content:
            raise PhotoFetchError(f"photo download returned empty body for {record_id}")
        return FetchedPhoto(
            record_id=record_id,
            data=response.content,
            content_type=response.headers.get("Content-Type", ""),
        )


class HttpPhotoUploader(BasePhotoUploader):
    """POST {base}/students/{id}/photos with a JPEG body."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def upload(self, record_id: str, jpeg_bytes: bytes) -> None:
        try:
            segment = record_path_segment(record_id)
        except ValueError as exc:
            raise PhotoUploadError(str(exc)) from exc
        try:
            response = self._client.post(
                f"/students/{segment}/photos",
                content=jpeg_bytes,
                headers={"Content-Type": "image/jpeg"},
            )
        except httpx.HTTPError as exc:
            raise PhotoUploadError(f"upload failed for {record_id}: {exc}") from exc
        if not response.is_success:
            raise PhotoUploadError(
                f"upload failed: status={response.status_code}, body={response.text}"
            )
