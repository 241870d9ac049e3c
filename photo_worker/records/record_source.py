import csv
from pathlib import Path


class RecordListLoader:
    """Reads record identifiers from the first column of a CSV or text file."""

    def __init__(self, path: Path, skip_header: bool = True) -> None:
        self._path = path
        self._skip_header = skip_header

    def load(self) -> list[str]:
        """Return unique, non-blank ids in file order.

        Raises:
            FileNotFoundError: if the list file does not exist.
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Record list not found: {self._path}")
        record_ids: list[str] = []
        seen: set[str] = set()
        with self._path.open(newline="", encoding="utf-8-sig") as handle:
            rows = csv.reader(handle)
            if self._skip_header:
                next(rows, None)
            for row in rows:
                if not row:
                    continue
                record_id = row[0].strip()
                if not record_id or record_id in seen:
                    continue
                seen.add(record_id)
                record_ids.append(record_id)
        return record_ids
