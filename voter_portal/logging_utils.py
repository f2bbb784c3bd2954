"""Console logging setup shared by the API server and the CLI."""
from __future__ import annotations

import logging

SYSTEM_FMT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single console handler to the package logger.

    Safe to call repeatedly; existing handlers are replaced so app factories
    created in tests do not duplicate output.
    """
    logger = logging.getLogger("voter_portal")
    logger.setLevel(level)
    logger.handlers = []

    sh = logging.StreamHandler()
    sh.setFormatter(logging.Formatter(SYSTEM_FMT))
    logger.addHandler(sh)
    return logger
