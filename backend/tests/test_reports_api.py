"""
Tests for /api/v1/reports
=========================
Covers:
- Happy path: running, walking and swimming reports with metrics
- Unknown kind: 200 with the sentinel report and no metrics
- Unknown kind: blank or overlong labels also get the sentinel
- Validation: negative action, zero weight, out-of-range duration, missing fields rejected (422)
- Kinds listing
- Health check

Run: pytest tests/test_reports_api.py -v
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fittracker.main import app

client = TestClient(app)

_RUN_BODY = {
    "kind": "Running",
    "action": 4000,
    "duration_minutes": 9,
    "weight": 85,
}


class TestHappyPath:

    def test_running_report(self):
        resp = client.post("/api/v1/reports", json=_RUN_BODY)

        assert resp.status_code == 200
        data = resp.json()
        assert data["training_type"] == "Running"
        assert data["report"].startswith("Training type: Running\n")
        assert "Mean speed: 17.33 km/h\n" in data["report"]
        assert data["metrics"]["distance_km"] == pytest.approx(2.6)
        assert data["metrics"]["duration_minutes"] == pytest.approx(9.0)

    def test_walking_report(self):
        resp = client.post(
            "/api/v1/reports",
            json={**_RUN_BODY, "kind": "walking", "duration_minutes": 60, "height": 185},
        )

        assert resp.status_code == 200
        data = resp.json()
        assert data["training_type"] == "Walking"
        assert data["metrics"]["mean_speed_kmh"] == pytest.approx(2.6)
        assert data["report"].endswith("Calories burned: 718.93\n")

    def test_swimming_report(self):
        resp = client.post(
            "/api/v1/reports",
            json={
                "kind": "Swimming",
                "action": 1000,
                "duration_minutes": 15,
                "weight": 85,
                "length_pool": 100,
                "count_pool": 4,
            },
        )

        assert resp.status_code == 200
        data = resp.json()
        assert data["metrics"]["distance_km"] == pytest.approx(0.4)
        assert data["metrics"]["calories"] == pytest.approx(114.75)


class TestUnknownKind:

    def test_sentinel_without_metrics(self):
        resp = client.post("/api/v1/reports", json={**_RUN_BODY, "kind": "Curling"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["report"] == "unknown training type\n"
        assert data["training_type"] is None
        assert data["metrics"] is None

    @pytest.mark.parametrize("kind", ["", "   ", "x" * 60])
    def test_blank_or_long_kind_is_unknown(self, kind: str):
        resp = client.post("/api/v1/reports", json={**_RUN_BODY, "kind": kind})

        assert resp.status_code == 200
        data = resp.json()
        assert data["report"] == "unknown training type\n"
        assert data["metrics"] is None


class TestValidation:

    @pytest.mark.parametrize(
        "override",
        [
            {"action": -1},
            {"weight": 0},
            {"duration_minutes": -5},
            {"count_pool": -1},
            {"duration_minutes": 1e13},
        ],
    )
    def test_invalid_counters_rejected(self, override: dict):
        resp = client.post("/api/v1/reports", json={**_RUN_BODY, **override})
        assert resp.status_code == 422

    def test_missing_required_field_rejected(self):
        body = {k: v for k, v in _RUN_BODY.items() if k != "weight"}
        resp = client.post("/api/v1/reports", json=body)
        assert resp.status_code == 422


class TestMisc:

    def test_lists_kinds(self):
        resp = client.get("/api/v1/reports/kinds")
        assert resp.status_code == 200
        assert resp.json() == ["Running", "Walking", "Swimming"]

    def test_health_check(self):
        resp = client.get("/api/v1/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "service": "fittracker-api"}
