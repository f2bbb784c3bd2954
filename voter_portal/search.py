"""
Voter search — capped substring match over the current Snapshot.
"""
from __future__ import annotations

from typing import Optional

from voter_portal.config import DEBUG_SAMPLE_SIZE, LOADING_MESSAGE, MIN_QUERY_LENGTH, SEARCH_LIMIT
from voter_portal.data.schemas import Snapshot, VoterRecord
from voter_portal.data.store import DataStore


class DataLoadingError(Exception):
    """Raised when a search arrives before the first snapshot is installed."""

    def __init__(self, message: str = LOADING_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().lower()


def search_snapshot(snapshot: Snapshot, query: Optional[str], limit: int = SEARCH_LIMIT) -> list[VoterRecord]:
    """Records whose English name, Marathi name or polling station contain ``query``.

    Case-insensitive, unanchored, in stored order, truncated at ``limit``.
    Queries shorter than two characters return nothing.
    """
    if not snapshot.ready:
        raise DataLoadingError()

    q = normalize_query(query)
    if len(q) < MIN_QUERY_LENGTH:
        return []

    results: list[VoterRecord] = []
    for voter in snapshot.records:
        if q in voter.search_text:
            results.append(voter)
            if len(results) >= limit:
                break
    return results


def search_voters(store: DataStore, query: Optional[str], limit: int = SEARCH_LIMIT) -> list[dict]:
    """Search the store's current snapshot and project results for the wire."""
    snapshot = store.get_current()
    return [project(v) for v in search_snapshot(snapshot, query, limit)]


def project(voter: VoterRecord) -> dict:
    return {
        "serial": voter.serial,
        "marathiName": voter.marathi_name,
        "englishName": voter.english_name,
        "polling": voter.polling_station,
        "voteFor": voter.candidate,
        "vote": voter.symbol,
        "message": voter.message,
    }


def debug_summary(snapshot: Snapshot, sample_size: int = DEBUG_SAMPLE_SIZE) -> dict:
    """Readiness, record count and the first few names."""
    return {
        "ready": snapshot.ready,
        "totalVoters": len(snapshot.records),
        "sample": [
            {"english": v.english_name, "marathi": v.marathi_name}
            for v in snapshot.records[:sample_size]
        ],
    }
