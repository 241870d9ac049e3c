from dataclasses import dataclass

from photo_worker.compression.models import CompressionStatus

FETCH_ERROR = "fetch-error"
UPLOAD_ERROR = "upload-error"
UNEXPECTED_ERROR = "error"


@dataclass(frozen=True)
class RecordOutcome:
    """Final per-record result of one batch run, keyed by record id."""

    record_id: str
    status: str
    original_size: int = 0
    compressed_size: int = 0
    uploaded: bool = False
    error_message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == CompressionStatus.OK.value
