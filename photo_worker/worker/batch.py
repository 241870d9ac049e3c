from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from photo_worker.config.settings import Settings
from photo_worker.logging.logger import Log
from photo_worker.processor.models import RecordOutcome
from photo_worker.worker.record_runner import RecordRunner


class BatchWorker:
    """Fan records out to a bounded thread pool and collect outcomes.

    Outcomes are returned in completion order; callers key them by record id.
    """

    def __init__(self, record_runner: RecordRunner, settings: Settings) -> None:
        if settings.batch_concurrency < 1:
            raise ValueError(
                f"batch_concurrency must be at least 1, got {settings.batch_concurrency}"
            )
        self._record_runner = record_runner
        self._settings = settings

    def run(self, record_ids: Iterable[str]) -> list[RecordOutcome]:
        """Process every record; stop early only on KeyboardInterrupt.

        On interrupt, pending records are cancelled and records already
        running are allowed to finish; their outcomes are still returned.
        """
        outcomes: list[RecordOutcome] = []
        collected: set[Future[RecordOutcome]] = set()
        executor = ThreadPoolExecutor(max_workers=self._settings.batch_concurrency)
        futures: dict[Future[RecordOutcome], str] = {
            executor.submit(self._record_runner.run, record_id): record_id
            for record_id in record_ids
        }
        Log.info(
            f"Batch started with {len(futures)} records",
            concurrency=self._settings.batch_concurrency,
        )
        try:
            for future in as_completed(futures):
                outcomes.append(future.result())
                collected.add(future)
        except KeyboardInterrupt:
            Log.info("Batch interrupted, cancelling pending records")
            executor.shutdown(wait=False, cancel_futures=True)
        finally:
            executor.shutdown(wait=True)
        for future in futures:
            if future in collected or future.cancelled() or not future.done():
                continue
            outcomes.append(future.result())
        return outcomes
