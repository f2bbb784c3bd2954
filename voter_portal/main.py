"""
Voter Portal — FastAPI app factory with background data loading.
"""
from __future__ import annotations

import logging
import threading
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from voter_portal import __version__, config
from voter_portal.api.router_pages import build_pages_router
from voter_portal.api.router_search import router as search_router
from voter_portal.data.store import DataStore
from voter_portal.data.watcher import ReloadWatcher
from voter_portal.logging_utils import configure_logging
from voter_portal.search import DataLoadingError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the first load in the background; watch the file outside production.

    Requests are served immediately and get a 503 until the load installs.
    """
    store: DataStore = app.state.store
    logger.info("Voter Portal starting (env=%s, data=%s)", config.APP_ENV, store.source)

    initial_load = threading.Thread(target=store.reload, name="voter-initial-load", daemon=True)
    app.state.initial_load = initial_load
    initial_load.start()

    watcher: Optional[ReloadWatcher] = None
    if app.state.watch:
        try:
            watcher = ReloadWatcher(store.source, store.reload).start()
        except Exception:
            logger.exception("Could not start reload watcher; serving without it")
    app.state.watcher = watcher

    yield

    if watcher is not None:
        watcher.stop()


async def data_loading_handler(request: Request, exc: DataLoadingError) -> JSONResponse:
    return JSONResponse(status_code=503, content={"error": exc.message})


def create_app(
    data_file: Optional[Path] = None,
    public_dir: Optional[Path] = None,
    watch: Optional[bool] = None,
) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    app = FastAPI(
        title="Voter Portal API",
        description="Public voter search over the election spreadsheet",
        version=__version__,
        lifespan=lifespan,
    )

    store = DataStore(data_file or config.DATA_FILE)
    app.state.store = store
    app.state.watch = (config.WATCH_DATA_FILE and not config.IS_PRODUCTION) if watch is None else watch

    app.add_exception_handler(DataLoadingError, data_loading_handler)

    app.include_router(search_router)
    # Catch-all must come last
    app.include_router(build_pages_router(public_dir or config.PUBLIC_DIR, config.LANDING_PAGE))

    return app


app = create_app()
