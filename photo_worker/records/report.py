import csv
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from photo_worker.processor.models import RecordOutcome

REPORT_HEADER = ("RecordId", "OriginalSizeKB", "CompressedSizeKB", "Status")


def format_kb(size_bytes: int) -> str:
    return f"{size_bytes / 1024:.1f}"


def summarize(outcomes: Iterable[RecordOutcome]) -> dict[str, int]:
    """Count outcomes per status."""
    return dict(Counter(outcome.status for outcome in outcomes))


class ReportWriter:
    """Writes per-record outcomes as CSV, sorted by record id."""

    def __init__(self, path: Path, min_original_bytes: int = 0) -> None:
        self._path = path
        self._min_original_bytes = min_original_bytes

    def write(self, outcomes: Iterable[RecordOutcome]) -> int:
        """Write the report and return the number of data rows."""
        rows = sorted(
            (o for o in outcomes if o.original_size >= self._min_original_bytes),
            key=lambda o: o.record_id,
        )
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerow(REPORT_HEADER)
            for outcome in rows:
                writer.writerow(
                    [
                        outcome.record_id,
                        format_kb(outcome.original_size),
                        format_kb(outcome.compressed_size),
                        outcome.status,
                    ]
                )
        return len(rows)
