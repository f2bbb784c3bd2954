"""
Reload trigger — polls the data file's mtime and fires a callback on change.
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

from voter_portal.config import RELOAD_POLL_SECONDS

logger = logging.getLogger(__name__)


def _mtime(path: Path) -> Optional[float]:
    """Modification time, or None when the file is missing."""
    try:
        return path.stat().st_mtime
    except FileNotFoundError:
        return None


class ReloadWatcher:
    """Calls ``on_change`` whenever ``path``'s mtime changes.

    The file appearing or disappearing counts as a change. Errors from the
    poll or the callback are logged and the watcher keeps running.
    """

    def __init__(
        self,
        path: Path,
        on_change: Callable[[], object],
        interval: float = RELOAD_POLL_SECONDS,
    ) -> None:
        self.path = Path(path)
        self.on_change = on_change
        self.interval = interval
        self._last_mtime: Optional[float] = _mtime(self.path)
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def check(self) -> bool:
        """Poll once; run the callback and return True if the file changed."""
        current = _mtime(self.path)
        if current == self._last_mtime:
            return False
        self._last_mtime = current
        logger.info("%s changed, reloading...", self.path.name)
        self.on_change()
        return True

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.check()
            except Exception:
                logger.exception("Reload watcher error for %s", self.path)

    def start(self) -> "ReloadWatcher":
        if self._thread is not None and self._thread.is_alive():
            return self
        self._stop.clear()
        self._last_mtime = _mtime(self.path)
        self._thread = threading.Thread(target=self._run, name="voter-reload-watcher", daemon=True)
        self._thread.start()
        logger.info("Watching %s for changes every %.1fs", self.path.name, self.interval)
        return self

    def stop(self, timeout: float = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
