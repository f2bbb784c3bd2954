"""
Voter record and dataset snapshot schemas.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class VoterRecord:
    """One voter row after header mapping."""
    serial: str
    marathi_name: str = ""
    english_name: str = ""
    polling_station: str = ""
    candidate: str = ""
    symbol: str = ""
    message: str = ""

    @property
    def dedup_key(self) -> str:
        return f"{self.serial}|{self.english_name}".lower()

    @property
    def search_text(self) -> str:
        return f"{self.english_name} {self.marathi_name} {self.polling_station}".lower()


@dataclass(frozen=True)
class Snapshot:
    """An immutable load generation of voter records.

    ``ready`` means the snapshot may be queried, not that it holds data:
    a failed load still produces an empty, ready snapshot (``error`` is set).
    """
    records: tuple[VoterRecord, ...] = ()
    ready: bool = False
    source: Optional[str] = None
    loaded_at: Optional[dt.datetime] = None
    error: Optional[str] = None

    @classmethod
    def empty(cls, ready: bool = False, source: Optional[str] = None,
              error: Optional[str] = None) -> "Snapshot":
        loaded_at = dt.datetime.now(dt.timezone.utc) if ready else None
        return cls(records=(), ready=ready, source=source, loaded_at=loaded_at, error=error)

    def __len__(self) -> int:
        return len(self.records)
