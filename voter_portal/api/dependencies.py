"""
FastAPI dependencies — the app's DataStore.
"""
from __future__ import annotations

from fastapi import Request

from voter_portal.data.store import DataStore


def get_store(request: Request) -> DataStore:
    """Return the store whether or not its first load has finished.

    ``create_app`` always attaches a store; readiness is checked by the
    search itself so the 503 body stays uniform.
    """
    return request.app.state.store
