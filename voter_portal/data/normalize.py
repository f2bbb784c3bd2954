"""
Header normalisation and per-row field extraction via synonym lookup.
"""
from __future__ import annotations

import datetime as dt
import re
from typing import Any, Sequence

from voter_portal.config import FIELD_SYNONYMS
from voter_portal.data.schemas import VoterRecord

_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Header map
# ---------------------------------------------------------------------------

def normalize_header(text: Any) -> str:
    """Lowercase, trim and collapse whitespace runs to a single space."""
    return _WHITESPACE_RE.sub(" ", str(text).strip().lower())


def build_header_map(header_row: Sequence[Any]) -> dict[str, int]:
    """Map normalised header text → 0-based column index.

    Blank header cells are skipped; if two headers normalise to the same
    text, the rightmost column wins.
    """
    header_map: dict[str, int] = {}
    for idx, value in enumerate(header_row):
        key = cell_text(value)
        if key:
            header_map[normalize_header(key)] = idx
    return header_map


# ---------------------------------------------------------------------------
# Cell values
# ---------------------------------------------------------------------------

def cell_text(value: Any) -> str:
    """Render a spreadsheet cell as trimmed text ("" for empty cells)."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dt.datetime, dt.date)):
        return value.isoformat()
    return str(value).strip()


def _lookup(header_map: dict[str, int], row: Sequence[Any], names: Sequence[str]) -> str:
    for name in names:
        idx = header_map.get(normalize_header(name))
        if idx is None or idx >= len(row):
            continue
        text = cell_text(row[idx])
        if text:
            return text
    return ""


# ---------------------------------------------------------------------------
# Row → record
# ---------------------------------------------------------------------------

def normalize_row(header_map: dict[str, int], row: Sequence[Any], row_number: int) -> VoterRecord:
    """Extract every logical field from one data row.

    Each field takes the first synonym that is both present in the header and
    non-empty in this row. A missing serial falls back to the sheet row number.
    """
    fields = {field: _lookup(header_map, row, names) for field, names in FIELD_SYNONYMS}
    if not fields["serial"]:
        fields["serial"] = str(row_number)
    return VoterRecord(**fields)


def is_blank_row(row: Sequence[Any]) -> bool:
    return not any(cell_text(v) for v in row)
