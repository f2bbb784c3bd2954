"""
Voter Portal — Configuration: paths, environment, header synonyms.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with env vars for deployment
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_FILE = Path(os.environ.get("VOTER_DATA_FILE", str(PROJECT_ROOT / "ourdata.xlsx")))
PUBLIC_DIR = Path(os.environ.get("VOTER_PUBLIC_DIR", str(PROJECT_ROOT / "public")))
LANDING_PAGE = "voter-portal.html"

# ---------------------------------------------------------------------------
# Server / environment
# ---------------------------------------------------------------------------
PORT = int(os.environ.get("PORT", "3000"))
APP_ENV = os.environ.get("APP_ENV", "development").strip().lower()
IS_PRODUCTION = APP_ENV == "production"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Reload watcher (never runs in production)
WATCH_DATA_FILE = os.environ.get("WATCH_DATA_FILE", "1").lower() not in ("0", "false", "no", "off")
RELOAD_POLL_SECONDS = float(os.environ.get("RELOAD_POLL_SECONDS", "5"))

# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
SEARCH_LIMIT = 20
MIN_QUERY_LENGTH = 2
DEBUG_SAMPLE_SIZE = 3
LOADING_MESSAGE = "Data is still loading, please wait..."

# ---------------------------------------------------------------------------
# Header synonyms: logical field → accepted column names.
# Order matters — first header present with a non-empty cell wins.
# Matching ignores case and collapses whitespace runs.
# ---------------------------------------------------------------------------
FIELD_SYNONYMS = [
    ("serial",          ["अ.नं.", "अ नं", "sr no", "serial", "अ.क्र.", "अ क्र"]),
    ("marathi_name",    ["नाव (मराठी)", "नाव मराठी", "marathi name"]),
    ("english_name",    ["english name", "englishname"]),
    ("polling_station", ["मतदान केंद्र", "polling booth", "polling station"]),
    ("candidate",       ["उमेदवार", "candidate", "vote for"]),
    ("symbol",          ["निशाणी", "symbol"]),
    ("message",         ["आवाहन", "message", "msg"]),
]
