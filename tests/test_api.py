import pytest
from fastapi.testclient import TestClient
from insight_intake.api import get_intake
from insight_intake.intake import InsightIntake
from insight_intake.kinds import INSIGHT_KINDS
from insight_intake.main import app


client = TestClient(app)

VALID = {"type": "track", "event": "trackingEvent", "data": {}}


@pytest.fixture
def intake():
    fresh = InsightIntake()
    app.dependency_overrides[get_intake] = lambda: fresh
    yield fresh
    app.dependency_overrides.clear()


def test_healthz():
    res = client.get('/healthz')
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_validate_valid(intake):
    res = client.post('/api/insights/validate', json=VALID)
    assert res.status_code == 200
    assert res.json() == {"valid": True, "reason": None}


def test_validate_not_an_object(intake):
    res = client.post('/api/insights/validate', json=0)
    assert res.status_code == 200
    assert res.json() == {"valid": False, "reason": "insight must be an object"}


def test_validate_does_not_count(intake):
    client.post('/api/insights/validate', json=VALID)
    assert intake.stats() == {"accepted": 0, "dropped": 0}


def test_submit_accepted(intake):
    res = client.post('/api/insights', json=dict(VALID, extra=1))
    assert res.status_code == 200
    data = res.json()
    assert data["accepted"] is True
    assert data["insight"] == VALID
    assert client.get('/api/insights/stats').json() == {"accepted": 1, "dropped": 0}


def test_submit_rejected(intake):
    res = client.post('/api/insights', json={"type": 0, "event": "trackingEvent", "data": {}})
    assert res.status_code == 422
    assert res.json()["detail"] == "type must be a string"


def test_submit_dropped():
    dropping = InsightIntake(policy="drop")
    app.dependency_overrides[get_intake] = lambda: dropping
    try:
        res = client.post('/api/insights', json={"type": "track", "event": "trackingEvent"})
    finally:
        app.dependency_overrides.clear()
    assert res.status_code == 200
    assert res.json() == {"accepted": False, "insight": None, "reason": "data is missing"}
    assert dropping.stats() == {"accepted": 0, "dropped": 1}


def test_kinds(intake):
    res = client.get('/api/insights/kinds')
    assert res.status_code == 200
    assert res.json() == sorted(INSIGHT_KINDS)
