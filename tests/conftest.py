"""Shared fixtures: workbook builders for the loader, store and API tests."""
from pathlib import Path

import pytest
from openpyxl import Workbook

DEFAULT_HEADER = [
    "अ.नं.", "नाव (मराठी)", "English Name", "मतदान केंद्र", "उमेदवार", "निशाणी", "आवाहन",
]


def write_workbook(path: Path, rows, header=DEFAULT_HEADER) -> Path:
    """Write ``header`` + ``rows`` to the first sheet of a new workbook."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Voters"
    if header is not None:
        ws.append(list(header))
    for row in rows:
        ws.append(list(row))
    wb.save(path)
    return path


@pytest.fixture
def make_workbook(tmp_path):
    """Factory fixture: make_workbook(rows, header=..., name=...) -> Path."""
    def _make(rows, header=DEFAULT_HEADER, name="ourdata.xlsx"):
        return write_workbook(tmp_path / name, rows, header)
    return _make


@pytest.fixture
def sample_rows():
    return [
        ["12", "राम शिंदे", "Ram Shinde", "Booth 5", "A. Patil", "Lotus", "Vote for us"],
        ["13", "सीता पवार", "Sita Pawar", "Booth 6", "A. Patil", "Lotus", ""],
        ["14", "", "Ramesh Kale", "Booth 5", "", "", ""],
    ]


@pytest.fixture
def sample_workbook(make_workbook, sample_rows):
    return make_workbook(sample_rows)
