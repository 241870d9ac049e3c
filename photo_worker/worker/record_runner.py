from photo_worker.logging.logger import Log
from photo_worker.photos.exceptions import PhotoFetchError, PhotoUploadError
from photo_worker.processor.models import (
    FETCH_ERROR,
    UNEXPECTED_ERROR,
    UPLOAD_ERROR,
    RecordOutcome,
)
from photo_worker.processor.processor import Processor


class RecordRunner:
    """Run one record, catch exceptions, and classify the outcome.

    Never raises: a single record's failure must not abort the batch.
    """

    def __init__(self, processor: Processor) -> None:
        self._processor = processor

    def run(self, record_id: str) -> RecordOutcome:
        try:
            outcome = self._processor.process(record_id)
        except PhotoFetchError as exc:
            return self._failed(record_id, FETCH_ERROR, exc)
        except PhotoUploadError as exc:
            return self._failed(record_id, UPLOAD_ERROR, exc)
        except Exception as exc:
            return self._failed(record_id, UNEXPECTED_ERROR, exc)

        if outcome.ok:
            Log.info(
                f"Record {record_id} compressed",
                original=outcome.original_size,
                compressed=outcome.compressed_size,
                uploaded=outcome.uploaded,
            )
        else:
            Log.warning(f"Record {record_id} skipped", status=outcome.status)
        return outcome

    def _failed(self, record_id: str, status: str, exc: Exception) -> RecordOutcome:
        Log.error(f"Record {record_id} failed: {exc}", status=status)
        return RecordOutcome(record_id=record_id, status=status, error_message=str(exc))
