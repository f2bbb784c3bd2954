"""
Workbook reading, row normalisation, and deduplication into a Snapshot.
"""
from __future__ import annotations

import datetime as dt
import logging
import time
from pathlib import Path
from typing import Any, Iterable, Iterator

from openpyxl import load_workbook

from voter_portal.config import DATA_FILE
from voter_portal.data.normalize import build_header_map, is_blank_row, normalize_row
from voter_portal.data.schemas import Snapshot, VoterRecord

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Workbook rows
# ---------------------------------------------------------------------------

def iter_sheet_rows(path: Path) -> Iterator[tuple[int, tuple[Any, ...]]]:
    """Yield (row_number, cell values) for every row of the first worksheet.

    Row numbers are 1-based, matching the sheet.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{path.name} file not found at {path}")

    wb = load_workbook(path, read_only=True, data_only=True)
    try:
        if not wb.worksheets:
            raise ValueError("No worksheet found in Excel file")
        sheet = wb.worksheets[0]
        for row_number, values in enumerate(sheet.iter_rows(values_only=True), start=1):
            yield row_number, tuple(values)
    finally:
        wb.close()


# ---------------------------------------------------------------------------
# Records & dedup
# ---------------------------------------------------------------------------

def build_records(rows: Iterable[tuple[int, tuple[Any, ...]]]) -> list[VoterRecord]:
    """Normalise data rows and drop unusable ones.

    The first row is the header. Rows without an English name are dropped,
    as are repeats of an earlier (serial, english name) pair — first wins.
    """
    header_map: dict[str, int] | None = None
    seen: set[str] = set()
    records: list[VoterRecord] = []

    for row_number, values in rows:
        if header_map is None:
            header_map = build_header_map(values)
            continue
        if is_blank_row(values):
            continue

        voter = normalize_row(header_map, values, row_number)
        key = voter.dedup_key
        if voter.english_name and key not in seen:
            seen.add(key)
            records.append(voter)

    return records


def load_snapshot(path: Path = DATA_FILE) -> Snapshot:
    """Build a ready Snapshot from the workbook at ``path``.

    Never raises: on any failure the error is logged and an empty, ready
    snapshot is returned so the server keeps answering (with no results).
    """
    path = Path(path)
    logger.info("Loading voter data from %s...", path.name)
    start = time.perf_counter()
    try:
        records = build_records(iter_sheet_rows(path))
    except Exception as exc:
        logger.error("Error loading data: %s", exc)
        return Snapshot.empty(ready=True, source=str(path), error=str(exc))

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("Loaded %d voters in %.0fms", len(records), elapsed_ms)
    return Snapshot(
        records=tuple(records),
        ready=True,
        source=str(path),
        loaded_at=dt.datetime.now(dt.timezone.utc),
    )
