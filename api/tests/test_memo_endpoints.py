import pytest
import sqlite3
from unittest.mock import patch
from fastapi.testclient import TestClient

# conftest.py will handle environment setup
from main import app

client = TestClient(app)

# Test API key for authenticated requests
headers = {"X-API-Key": "test-api-key"}

HELMET = {"id": "V001", "code": "177", "violation": "Riding without helmet", "fine": 1000}
DANGEROUS = {"id": "V002", "code": "184", "violation": "Dangerous driving", "fine": 5000}


@pytest.fixture(autouse=True)
def cleanup(clean_memos):
    """Start every test without memos or analytics snapshots"""
    yield


def memo_payload(**overrides):
    payload = {
        "driver_id": "GJ001",
        "officer_id": "OFF-1",
        "officer_name": "Inspector Test",
        "location": "Visnagar",
        "violations": [HELMET, DANGEROUS],
    }
    payload.update(overrides)
    return payload


def test_create_memo_computes_total_fine():
    """Test the stored total equals the sum of the violation fines"""
    response = client.post("/api/memos", json=memo_payload(), headers=headers)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["memo"]["total_fine"] == 6000
    assert data["memo"]["payment_status"] == "pending"
    assert data["memo"]["id"].startswith("MEMO-")

    history = client.get("/api/memos/driver/GJ001", headers=headers).json()
    assert len(history) == 1
    assert history[0]["total_fine"] == 6000
    assert [v["id"] for v in history[0]["violations"]] == ["V001", "V002"]


def test_client_total_fine_is_ignored():
    """Test a client supplied total does not override the computed one"""
    response = client.post("/api/memos", json=memo_payload(total_fine=1), headers=headers)
    assert response.json()["memo"]["total_fine"] == 6000


def test_missing_fine_counts_as_zero():
    """Test violations without a fine contribute nothing"""
    payload = memo_payload(violations=[HELMET, {"id": "V999", "violation": "Custom"}])
    response = client.post("/api/memos", json=payload, headers=headers)
    assert response.status_code == 200
    assert response.json()["memo"]["total_fine"] == 1000


@pytest.mark.parametrize("overrides", [
    {"driver_id": None},
    {"driver_id": ""},
    {"officer_id": None},
    {"violations": []},
    {"violations": None},
])
def test_create_memo_missing_fields_rejected(overrides):
    """Test memos without driver, officer or violations return 400"""
    response = client.post("/api/memos", json=memo_payload(**overrides), headers=headers)
    assert response.status_code == 400
    assert "Missing required fields" in response.json()["detail"]


def test_create_memo_accepts_camel_case_fields():
    """Test the kiosk's camelCase field names are accepted"""
    payload = {
        "driverId": "GJ002",
        "officerId": "OFF-2",
        "officerName": "Inspector Camel",
        "violations": [DANGEROUS],
        "paymentStatus": "paid",
    }
    response = client.post("/api/memos", json=payload, headers=headers)
    assert response.status_code == 200
    assert response.json()["memo"]["payment_status"] == "paid"

    history = client.get("/api/memos/driver/GJ002", headers=headers).json()
    assert history[0]["officer_name"] == "Inspector Camel"
    assert history[0]["location"] == "Unknown Location"


def test_memo_defaults():
    """Test officer name and location defaults"""
    payload = memo_payload()
    del payload["officer_name"]
    del payload["location"]
    client.post("/api/memos", json=payload, headers=headers)

    memo = client.get("/api/memos/driver/GJ001", headers=headers).json()[0]
    assert memo["officer_name"] == "Unknown Officer"
    assert memo["location"] == "Unknown Location"
    assert memo["payment_status"] == "pending"


def test_driver_history_newest_first():
    """Test history is ordered by date descending"""
    first = client.post("/api/memos", json=memo_payload(violations=[HELMET]), headers=headers).json()
    second = client.post("/api/memos", json=memo_payload(violations=[DANGEROUS]), headers=headers).json()

    history = client.get("/api/memos/driver/GJ001", headers=headers).json()
    assert [m["id"] for m in history] == [second["memo"]["id"], first["memo"]["id"]]


def test_driver_history_empty_for_unknown_driver():
    response = client.get("/api/memos/driver/NOPE", headers=headers)
    assert response.status_code == 200
    assert response.json() == []


def test_memo_creation_refreshes_analytics():
    """Test a new memo appends an analytics snapshot"""
    client.post("/api/memos", json=memo_payload(), headers=headers)

    data = client.get("/api/analytics", headers=headers).json()
    assert data["today_violations"] == 1
    assert data["total_fines"] == 6000
    assert data["violation_breakdown"] == {"Riding without helmet": 1, "Dangerous driving": 1}
    assert data["last_updated"] is not None


def test_analytics_failure_does_not_fail_memo():
    """Test a failed analytics refresh is logged, not returned"""
    with patch("routes.memo_routes.analytics_service.refresh", side_effect=sqlite3.OperationalError("locked")):
        response = client.post("/api/memos", json=memo_payload(), headers=headers)
    assert response.status_code == 200


def test_create_memo_requires_api_key():
    response = client.post("/api/memos", json=memo_payload())
    assert response.status_code == 401


def test_fractional_fines_are_summed():
    """Test non-integer fines keep their fractional part in the total"""
    payload = memo_payload(violations=[{"id": "V900", "violation": "Custom", "fine": 250.5}, HELMET])
    response = client.post("/api/memos", json=payload, headers=headers)
    assert response.status_code == 200
    assert response.json()["memo"]["total_fine"] == 1250.5

    history = client.get("/api/memos/driver/GJ001", headers=headers).json()
    assert history[0]["total_fine"] == 1250.5


def test_numeric_ids_are_accepted():
    """Test numeric driver and officer ids are stored as strings"""
    payload = {"driverId": 101, "officerId": 7, "violations": [HELMET]}
    response = client.post("/api/memos", json=payload, headers=headers)
    assert response.status_code == 200

    history = client.get("/api/memos/driver/101", headers=headers).json()
    assert len(history) == 1
    assert history[0]["officer_id"] == "7"
