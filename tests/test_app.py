"""Integration tests for the Flask JSON API.

The Gemini-backed advisory service is swapped for a fake.
"""

import time

import pytest

import app as app_module
from subjects.domain_subject import RiskClassification


@pytest.fixture
def client(fake_advisor, monkeypatch):
    monkeypatch.setattr(app_module, "ADVISORY_SERVICE", fake_advisor)
    monkeypatch.setattr(app_module, "SESSION_CONTEXTS", {})
    monkeypatch.setattr(app_module, "SESSION_CONTROLLERS", {})
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c
    for controller in app_module.SESSION_CONTROLLERS.values():
        controller.close()


def _settle(timeout=5):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if not any(c.busy for c in app_module.SESSION_CONTROLLERS.values()):
            return
        time.sleep(0.01)
    raise AssertionError("analysis did not settle")


# ── Domain ───────────────────────────────────────────────────────────────

def test_default_domain(client):
    assert client.get("/api/domain").get_json() == {"domain": "PERSONAL"}


def test_switch_domain(client):
    resp = client.post("/api/domain", json={"domain": "business"})
    assert resp.status_code == 200
    assert client.get("/api/domain").get_json()["domain"] == "BUSINESS"


def test_invalid_domain(client):
    resp = client.post("/api/domain", json={"domain": "PIRATES"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid domain"


# ── Profile form ─────────────────────────────────────────────────────────

def test_update_profile(client):
    resp = client.post("/api/profile", json={"monthlyIncome": "5000", "savings": "10000"})
    assert resp.status_code == 200
    assert resp.get_json()["form"]["savings"] == "10000"


def test_profile_requires_object(client):
    assert client.post("/api/profile", json=["nope"]).status_code == 400


def test_curriculum(client):
    body = client.get("/api/curriculum?level=SECONDARY&stream=LITERARY").get_json()
    assert "العلوم العسكرية" in body["electives"]

    body = client.get("/api/curriculum?level=PRIMARY").get_json()
    assert body["electives"] == []
    assert body["stream"] is None


# ── Analysis ─────────────────────────────────────────────────────────────

def test_analysis_returns_baseline_then_adjusted(client, fake_advisor, gate, make_analysis):
    fake_advisor.gate = gate
    fake_advisor.result = make_analysis(RiskClassification.DANGER)
    client.post("/api/profile", json={"monthlyIncome": "5000", "savings": "10000"})

    resp = client.post("/api/analysis")
    assert resp.status_code == 202
    body = resp.get_json()
    assert body["status"] == "PENDING"
    assert body["risk"] == "NONE"
    assert body["data"][0]["health"] == 80
    assert body["analysis"] is None

    # busy: a second request is refused, not queued
    assert client.post("/api/analysis").status_code == 409
    assert client.post("/api/domain", json={"domain": "STUDENT"}).status_code == 409

    gate.set()
    _settle()

    body = client.get("/api/projection").get_json()
    assert body["status"] == "SETTLED"
    assert body["risk"] == "DANGER"
    assert body["analysis"]["riskLevel"] == "DANGER"
    assert body["data"][5]["health"] == 45
    assert len(fake_advisor.calls) == 1


def test_failed_analysis_keeps_baseline(client, fake_advisor):
    fake_advisor.result = None
    client.post("/api/domain", json={"domain": "GOVERNMENT"})

    client.post("/api/analysis")
    _settle()

    body = client.get("/api/projection").get_json()
    assert body["status"] == "SETTLED"
    assert body["risk"] == "NONE"
    assert body["analysis"] is None
    assert body["data"][2]["economicGrowth"] == 38


def test_domain_switch_discards_result(client, fake_advisor, make_analysis):
    fake_advisor.result = make_analysis(RiskClassification.POSITIVE)
    client.post("/api/analysis")
    _settle()

    client.post("/api/domain", json={"domain": "STUDENT"})

    body = client.get("/api/projection").get_json()
    assert body["status"] == "IDLE"
    assert body["data"] == []


def test_sessions_share_one_advisory_pool(client, fake_advisor):
    fake_advisor.result = None
    with app_module.app.test_client() as other:
        client.post("/api/analysis")
        other.post("/api/analysis")
        _settle()

    controllers = list(app_module.SESSION_CONTROLLERS.values())
    assert len(controllers) == 2
    assert all(c._executor is app_module.ADVISORY_EXECUTOR for c in controllers)

    for controller in controllers:
        controller.close()
    assert app_module.ADVISORY_EXECUTOR.submit(lambda: "ok").result(timeout=5) == "ok"
