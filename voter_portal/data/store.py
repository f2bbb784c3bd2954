"""
DataStore — holds the current voter Snapshot and swaps it on reload.

Loaded at startup, read on every request. Readers take the snapshot
reference once and never lock; reloads build a new Snapshot off to the side
and replace the reference in a single assignment.
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path

from voter_portal.config import DATA_FILE
from voter_portal.data.loader import load_snapshot
from voter_portal.data.schemas import Snapshot

logger = logging.getLogger(__name__)


class DataStore:
    """Single-writer / many-reader holder of the current Snapshot."""

    def __init__(self, source: Path = DATA_FILE) -> None:
        self.source = Path(source)
        self._snapshot: Snapshot = Snapshot.empty(ready=False, source=str(self.source))
        self._install_lock = threading.Lock()
        self._load_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_current(self) -> Snapshot:
        return self._snapshot

    @property
    def is_ready(self) -> bool:
        return self._snapshot.ready

    def voter_count(self) -> int:
        return len(self._snapshot.records)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def install(self, snapshot: Snapshot) -> None:
        """Make ``snapshot`` the current one. Readers see old or new, never a mix."""
        with self._install_lock:
            self._snapshot = snapshot

    def reload(self) -> Snapshot:
        """Load the source file and install the result.

        Concurrent reloads run one at a time so an older load can never
        overwrite a newer one.
        """
        with self._load_lock:
            snapshot = load_snapshot(self.source)
            self.install(snapshot)
        return snapshot
