import pytest
from fastapi.testclient import TestClient

from adlens.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_extract_meta(client, meta_account_payload):
    resp = client.post("/extract/meta", json={"payload": meta_account_payload})
    assert resp.status_code == 200
    record = resp.json()["record"]
    assert record["entity_id"] == "act_1001"
    assert record["cpc"] == 0.7525
    assert record["roi"] is None
    assert record["confidence"]["roi"] is None
    assert record["confidence"]["spend"] == "high"


def test_extract_absent_payload(client):
    resp = client.post("/extract/google", json={"payload": None})
    assert resp.status_code == 200
    assert resp.json()["status"] == "no_data"


def test_extract_unknown_platform(client):
    resp = client.post("/extract/tiktok", json={"payload": {"x": 1}})
    assert resp.status_code == 400


def test_compare(client, meta_account_payload, google_customer_payload):
    resp = client.post(
        "/compare",
        json={
            "primary": {"platform": "meta", "payload": meta_account_payload},
            "secondary": {
                "platform": "google",
                "payload": google_customer_payload,
                "hints": {"entity_name": "Google Main"},
            },
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["secondary"]["entity_name"] == "Google Main"
    roi = body["differences"]["roi"]
    assert roi == {"absolute": -200.0, "percentage": -100.0, "better": "secondary"}


def test_compare_entities(client, meta_account_payload):
    resp = client.post(
        "/compare/entities",
        json={
            "sources": [
                {"platform": "meta", "payload": meta_account_payload},
                {"platform": "meta", "payload": None},
                {"platform": "google", "payload": {"metrics": {"cost": 5}}},
            ]
        },
    )
    body = resp.json()
    assert len(body["entities"]) == 2
    assert body["comparison"]["differences"]["spend"]["absolute"] == 145.5


def test_chart_series(client, meta_account_payload):
    record = client.post("/extract/meta", json={"payload": meta_account_payload}).json()["record"]

    single = client.post("/chart-series", json={"records": [record], "metric": "cpm"}).json()
    assert single["series"][0]["color_key"] == "meta"

    fanned = client.post("/chart-series", json={"records": [record]}).json()
    assert set(fanned["series"]) == {
        "spend", "impressions", "clicks", "ctr", "interactions", "engagements",
    }


def test_chart_series_rejects_unknown_metric(client):
    resp = client.post("/chart-series", json={"records": [], "metric": "orders"})
    assert resp.status_code == 422


def test_chart_series_rejects_inconsistent_record(client):
    forged = {
        "entity_id": "x",
        "entity_name": "x",
        "platform_label": "Meta Ads",
        "spend": 0,
        "cpc": 999,
        "roi": 5,
        "confidence": {},
    }
    resp = client.post("/chart-series", json={"records": [forged], "metric": "cpc"})
    assert resp.status_code == 422
