"""Workbook loading, row normalisation, and the in-memory snapshot store."""
from .loader import build_records, iter_sheet_rows, load_snapshot
from .normalize import build_header_map, normalize_header, normalize_row
from .schemas import Snapshot, VoterRecord
from .store import DataStore
from .watcher import ReloadWatcher
