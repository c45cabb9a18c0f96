"""
Unit tests for the record store repositories.

Query construction is tested with mocked SQLite operations; descriptor
decoding and the location hierarchy are tested on plain rows.
"""

import json
import pytest
from unittest.mock import patch
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.analytics import AnalyticsSnapshot, PaymentStats
from models.memo import Memo, MemoViolation
from repositories.analytics_repository import AnalyticsRepository
from repositories.driver_repository import DriverRepository, decode_descriptor
from repositories.location_repository import LocationRepository
from repositories.memo_repository import MemoRepository


class TestDecodeDescriptor:
    """Stored descriptors come back as float lists."""

    def test_json_array(self):
        assert decode_descriptor("[0.1, 0.2, 0.3]") == [0.1, 0.2, 0.3]

    def test_index_keyed_object(self):
        raw = json.dumps({"0": 0.5, "2": 0.7, "1": 0.6, "10": 1.0})
        assert decode_descriptor(raw) == [0.5, 0.6, 0.7, 1.0]

    @pytest.mark.parametrize("raw", [None, ""])
    def test_absent(self, raw):
        assert decode_descriptor(raw) is None


class TestDriverRepository:
    """Test suite for Driver repository."""

    @pytest.fixture
    def repo(self):
        return DriverRepository()

    def test_get_by_id_decodes_row(self, repo):
        row = {"id": "GJ001", "name": "GOVIND", "is_driver": 1, "face_descriptor": "[0.1, 0.2]"}

        with patch.object(repo, 'execute_query', return_value=[row]):
            result = repo.get_by_id("GJ001")

            assert result["is_driver"] is True
            assert result["face_descriptor"] == [0.1, 0.2]
            call_args = repo.execute_query.call_args
            assert "WHERE id = ?" in call_args[0][0]
            assert call_args[0][1] == ("GJ001",)

    def test_get_by_id_missing(self, repo):
        with patch.object(repo, 'execute_query', return_value=[]):
            assert repo.get_by_id("NOPE") is None

    def test_list_basic_projection(self, repo):
        rows = [{"id": "GJ001", "name": "A", "city": "Surat", "photo": None, "face_descriptor": None}]

        with patch.object(repo, 'execute_query', return_value=rows):
            result = repo.list_basic()

            assert result[0]["face_descriptor"] is None
            query = repo.execute_query.call_args[0][0]
            assert "SELECT id, name, city, photo, face_descriptor FROM drivers" in query


class TestMemoRepository:
    """Test suite for Memo repository."""

    @pytest.fixture
    def repo(self):
        return MemoRepository()

    @pytest.fixture
    def sample_memo(self):
        return Memo(
            id="MEMO-1",
            driver_id="GJ001",
            officer_id="OFF-1",
            violations=[MemoViolation(id="V001", violation="Riding without helmet", fine=1000)],
            total_fine=1000,
            date="2026-10-18T09:00:00+00:00",
        )

    def test_create_serializes_violations(self, repo, sample_memo):
        with patch.object(repo, 'execute_write', return_value={"rows_affected": 1}), \
                patch.object(repo, 'get_by_id', return_value={"id": "MEMO-1"}):
            result = repo.create(sample_memo)

            assert result["id"] == "MEMO-1"
            params = repo.execute_write.call_args[0][1]
            assert params[0] == "MEMO-1"
            assert json.loads(params[5]) == [{"id": "V001", "violation": "Riding without helmet", "fine": 1000}]
            assert params[7] == "pending"

    def test_find_by_date_prefix_uses_like(self, repo):
        rows = [{"id": "MEMO-1", "violations": "[]"}]

        with patch.object(repo, 'execute_query', return_value=rows):
            result = repo.find_by_date_prefix("2026-10-18")

            assert result[0]["violations"] == []
            call_args = repo.execute_query.call_args
            assert "date LIKE ?" in call_args[0][0]
            assert call_args[0][1] == ("2026-10-18%",)

    def test_find_by_driver_newest_first(self, repo):
        with patch.object(repo, 'execute_query', return_value=[]):
            repo.find_by_driver("GJ001")

            assert "ORDER BY date DESC" in repo.execute_query.call_args[0][0]


class TestAnalyticsRepository:
    """Test suite for Analytics repository."""

    @pytest.fixture
    def repo(self):
        return AnalyticsRepository()

    def test_create_serializes_maps(self, repo):
        snapshot = AnalyticsSnapshot(
            date="2026-10-18",
            today_violations=2,
            total_fines=6000,
            active_officers=1,
            violation_breakdown={"Dangerous driving": 1},
            payment_stats=PaymentStats(paid=1, pending=1, total=2),
            last_updated="2026-10-18T09:00:00+00:00",
        )

        with patch.object(repo, 'execute_write', return_value={"rows_affected": 1}):
            repo.create(snapshot)

            params = repo.execute_write.call_args[0][1]
            assert json.loads(params[4]) == {"Dangerous driving": 1}
            assert json.loads(params[5]) == {"paid": 1, "pending": 1, "total": 2}

    def test_find_latest(self, repo):
        row = {
            "date": "2026-10-18",
            "total_violations": 4,
            "total_fines": 8000,
            "active_officers": 2,
            "violation_breakdown": '{"Riding without helmet": 4}',
            "payment_stats": '{"paid": 0, "pending": 4, "total": 4}',
            "updated_at": "2026-10-18T09:00:00+00:00",
        }

        with patch.object(repo, 'execute_query', return_value=[row]):
            result = repo.find_latest()

            assert result.today_violations == 4
            assert result.payment_stats.pending == 4
            assert result.last_updated == "2026-10-18T09:00:00+00:00"
            query = repo.execute_query.call_args[0][0]
            assert "ORDER BY updated_at DESC" in query
            assert "LIMIT 1" in query

    def test_find_latest_empty(self, repo):
        with patch.object(repo, 'execute_query', return_value=[]):
            assert repo.find_latest() is None


class TestLocationRepository:
    """Test suite for Location repository."""

    def test_hierarchy(self):
        repo = LocationRepository()
        districts = [{"id": 1, "name": "Mehsana"}, {"id": 2, "name": "Surat"}]
        cities = [
            {"district_id": 1, "name": "Mehsana", "latitude": 23.588, "longitude": 72.3693},
            {"district_id": 2, "name": "Olpad", "latitude": None, "longitude": None},
            {"district_id": 9, "name": "Orphan", "latitude": 1.0, "longitude": 1.0},
            {"district_id": 1, "name": "Visnagar", "latitude": 23.6934, "longitude": 72.5487},
        ]

        with patch.object(repo, 'get_districts', return_value=districts), \
                patch.object(repo, 'get_cities', return_value=cities):
            result = repo.get_hierarchy()

        assert result.districts == {"Mehsana": ["Mehsana", "Visnagar"], "Surat": ["Olpad"]}
        assert result.city_coordinates == {
            "Mehsana": [23.588, 72.3693],
            "Visnagar": [23.6934, 72.5487],
        }
