import re
from pathlib import Path

from photo_worker.processor.exceptions import ArtifactWriteError

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def failed_photo_path(directory: Path, record_id: str) -> Path:
    """Build path to a dumped photo: {directory}/failed_photo_{record_id}.bin"""
    safe_id = _UNSAFE_FILENAME_CHARS.sub("_", record_id)
    return directory / f"failed_photo_{safe_id}.bin"


class FailedPhotoDumper:
    """Persists undecodable photo bytes for offline inspection."""

    def __init__(self, directory: Path | None) -> None:
        self._directory = directory

    @property
    def enabled(self) -> bool:
        return self._directory is not None

    def write(self, record_id: str, data: bytes) -> Path | None:
        """Write bytes to the dump directory; no-op when dumping is disabled.

        Raises:
            ArtifactWriteError: if the directory or file cannot be written.
        """
        if self._directory is None:
            return None
        path = failed_photo_path(self._directory, record_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise ArtifactWriteError(f"Cannot write {path}: {exc}") from exc
        return path
