"""
Public search and debug endpoints (no auth).
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from voter_portal.api.dependencies import get_store
from voter_portal.api.response_models import DebugResponse, ErrorResponse, VoterResult
from voter_portal.data.store import DataStore
from voter_portal.search import debug_summary, search_voters

router = APIRouter(tags=["search"])


@router.get(
    "/search",
    response_model=list[VoterResult],
    responses={503: {"model": ErrorResponse, "description": "Data still loading"}},
)
def search(
    q: Optional[str] = Query(None, description="Name or polling station fragment"),
    store: DataStore = Depends(get_store),
):
    """Up to 20 voters whose English/Marathi name or polling station contains ``q``."""
    return search_voters(store, q)


@router.get("/debug", response_model=DebugResponse)
def debug(store: DataStore = Depends(get_store)):
    return debug_summary(store.get_current())
