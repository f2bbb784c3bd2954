"""
Tests for the search service: query floor, cap, matching, projection.
"""
import pytest

from voter_portal.data.schemas import Snapshot, VoterRecord
from voter_portal.data.store import DataStore
from voter_portal.search import (
    DataLoadingError,
    debug_summary,
    normalize_query,
    project,
    search_snapshot,
    search_voters,
)

RAM = VoterRecord(
    serial="12", marathi_name="राम शिंदे", english_name="Ram Shinde", polling_station="Booth 5",
    candidate="A. Patil", symbol="Lotus", message="Vote for us",
)
SITA = VoterRecord(serial="13", marathi_name="सीता पवार", english_name="Sita Pawar", polling_station="Booth 6")


@pytest.fixture
def snapshot():
    return Snapshot(records=(RAM, SITA), ready=True)


class TestQueryFloor:
    """Queries under two characters return nothing."""

    @pytest.mark.parametrize("query", [None, "", " ", "r", "  R  ", "\tx\n"])
    def test_short_queries_return_empty(self, snapshot, query):
        assert search_snapshot(snapshot, query) == []

    def test_normalize_query(self):
        assert normalize_query("  RaM ") == "ram"
        assert normalize_query(None) == ""


class TestMatching:
    """Test substring matching across the searchable fields."""

    def test_scenario_ram(self, snapshot):
        assert search_snapshot(snapshot, "ram") == [RAM]

    def test_no_match(self, snapshot):
        assert search_snapshot(snapshot, "zz") == []

    def test_matches_marathi_name(self, snapshot):
        assert search_snapshot(snapshot, "सीता") == [SITA]

    def test_matches_polling_station(self, snapshot):
        assert search_snapshot(snapshot, "booth") == [RAM, SITA]
        assert search_snapshot(snapshot, "BOOTH 6") == [SITA]

    def test_candidate_and_message_not_searched(self, snapshot):
        assert search_snapshot(snapshot, "patil") == []
        assert search_snapshot(snapshot, "vote for") == []

    def test_result_cap_keeps_scan_order(self):
        records = tuple(VoterRecord(serial=str(i), english_name=f"Ram {i}") for i in range(50))
        results = search_snapshot(Snapshot(records=records, ready=True), "ram")
        assert len(results) == 20
        assert [r.serial for r in results] == [str(i) for i in range(20)]

    def test_not_ready_raises(self):
        with pytest.raises(DataLoadingError) as exc_info:
            search_snapshot(Snapshot.empty(ready=False), "ram")
        assert exc_info.value.message == "Data is still loading, please wait..."

    def test_not_ready_raises_even_for_short_query(self):
        with pytest.raises(DataLoadingError):
            search_snapshot(Snapshot.empty(ready=False), "r")


class TestProjection:
    """Test wire-format projection and the debug summary."""

    def test_project_keys(self):
        assert project(RAM) == {
            "serial": "12",
            "marathiName": "राम शिंदे",
            "englishName": "Ram Shinde",
            "polling": "Booth 5",
            "voteFor": "A. Patil",
            "vote": "Lotus",
            "message": "Vote for us",
        }

    def test_search_voters_uses_current_snapshot(self, tmp_path, snapshot):
        store = DataStore(tmp_path / "ourdata.xlsx")
        store.install(snapshot)
        results = search_voters(store, "shinde")
        assert [r["englishName"] for r in results] == ["Ram Shinde"]

    def test_debug_summary(self, snapshot):
        summary = debug_summary(snapshot)
        assert summary == {
            "ready": True,
            "totalVoters": 2,
            "sample": [
                {"english": "Ram Shinde", "marathi": "राम शिंदे"},
                {"english": "Sita Pawar", "marathi": "सीता पवार"},
            ],
        }

    def test_debug_sample_capped(self):
        records = tuple(VoterRecord(serial=str(i), english_name=f"V{i}") for i in range(10))
        assert len(debug_summary(Snapshot(records=records, ready=True))["sample"]) == 3
