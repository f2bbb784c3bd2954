"""
Frontend: static assets from the public folder, landing page for everything else.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import FileResponse, PlainTextResponse


def _static_file(root: Path, full_path: str) -> Optional[Path]:
    """The file under ``root`` named by ``full_path``, if there is one.

    Paths that escape ``root`` or that the OS cannot represent (null bytes,
    over-long names) are treated as missing.
    """
    if not full_path:
        return None
    try:
        candidate = (root / full_path).resolve()
        # Ensure the target is actually inside the public folder
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    except (OSError, ValueError):
        return None
    return None


def build_pages_router(public_dir: Path, landing_page: str) -> APIRouter:
    """Catch-all GET route bound to ``public_dir``."""
    router = APIRouter(tags=["pages"])
    root = Path(public_dir).resolve()

    @router.get("/{full_path:path}", include_in_schema=False)
    def serve_frontend(full_path: str):
        asset = _static_file(root, full_path)
        if asset is not None:
            return FileResponse(asset)

        index_html = root / landing_page
        if index_html.is_file():
            return FileResponse(
                index_html,
                headers={"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"},
            )
        return PlainTextResponse(f"{landing_page} not found in /public folder", status_code=404)

    return router
