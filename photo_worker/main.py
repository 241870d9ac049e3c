from pathlib import Path

from photo_worker.config.settings import Settings
from photo_worker.logging.logger import Log
from photo_worker.photos.http_client import build_http_client
from photo_worker.processor.processor import build_processor
from photo_worker.records.record_source import RecordListLoader
from photo_worker.records.report import ReportWriter, summarize
from photo_worker.worker.batch import BatchWorker
from photo_worker.worker.record_runner import RecordRunner


def main() -> None:
    """Entry point: load records -> build dependencies -> run batch -> write report."""
    settings = Settings()
    Log.configure(settings.log_level)

    record_ids = RecordListLoader(
        Path(settings.records_path), skip_header=settings.records_have_header
    ).load()
    Log.info(f"Loaded {len(record_ids)} records from {settings.records_path}")

    client = build_http_client(
        base_url=settings.photo_api_base_url,
        token=settings.photo_api_token,
        timeout_seconds=settings.http_timeout_seconds,
    )
    try:
        processor = build_processor(settings, client)
        worker = BatchWorker(RecordRunner(processor), settings)
        outcomes = worker.run(record_ids)
    finally:
        client.close()

    written = ReportWriter(
        Path(settings.report_path), settings.report_min_original_bytes
    ).write(outcomes)
    Log.info(f"Wrote {written} report rows to {settings.report_path}")
    Log.info("Batch finished", **summarize(outcomes))


if __name__ == "__main__":
    main()
