import pytest
from fastapi.testclient import TestClient

from src.api.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def canonical_payload() -> dict:
    return {
        "home_price": 300000,
        "down_payment": 60000,
        "annual_interest_rate_pct": 6.5,
        "term_years": 30,
    }


class TestHealth:
    def test_ok(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestDefaults:
    def test_starting_values(self, client):
        resp = client.get("/api/v1/mortgage/defaults")
        assert resp.status_code == 200
        assert resp.json() == {
            "home_price": 300000,
            "down_payment": 60000,
            "annual_interest_rate_pct": 6.5,
            "term_years": 30,
        }


class TestCalculate:
    def test_standard_mortgage(self, client, canonical_payload):
        resp = client.post("/api/v1/mortgage/calculate", json=canonical_payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["result"]["principal"] == 240000
        assert data["result"]["monthly_payment"] == pytest.approx(1516.96, abs=1e-2)
        assert data["down_payment_ratio"] == pytest.approx(0.20)
        assert [row["label"] for row in data["summary"]] == [
            "Monthly Payment", "Total Interest Paid", "Total Amount Paid",
        ]
        assert data["advisories"] == []

    def test_no_result_is_not_an_error(self, client, canonical_payload):
        payload = {**canonical_payload, "down_payment": 300000}
        resp = client.post("/api/v1/mortgage/calculate", json=payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["result"] is None
        assert data["summary"] == []
        assert data["breakdown"] == []

    def test_zero_rate_reports_advisory(self, client, canonical_payload):
        payload = {**canonical_payload, "annual_interest_rate_pct": 0}
        data = client.post("/api/v1/mortgage/calculate", json=payload).json()
        assert data["result"] is None
        assert data["advisories"] == ["Interest rate is below the minimum of 0.1"]

    def test_missing_field(self, client):
        resp = client.post("/api/v1/mortgage/calculate", json={"home_price": 300000})
        assert resp.status_code == 422

    def test_term_beyond_double_range_rejected(self, client, canonical_payload):
        payload = {**canonical_payload, "term_years": 10**400}
        assert client.post("/api/v1/mortgage/calculate", json=payload).status_code == 422

    def test_very_long_term_still_computes(self, client, canonical_payload):
        payload = {**canonical_payload, "term_years": 1_000_000}
        resp = client.post("/api/v1/mortgage/calculate", json=payload)
        assert resp.status_code == 200
        # Interest-only limit: 240000 * 0.065 / 12
        assert resp.json()["result"]["monthly_payment"] == pytest.approx(1300.0)
        assert resp.json()["advisories"] == ["Loan term is above the maximum of 50"]

    def test_fractional_term_rejected(self, client, canonical_payload):
        payload = {**canonical_payload, "term_years": 2.5}
        assert client.post("/api/v1/mortgage/calculate", json=payload).status_code == 422


class TestSchedule:
    def test_yearly_totals(self, client, canonical_payload):
        resp = client.post("/api/v1/mortgage/schedule", json=canonical_payload)
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["payments"]) == 360
        assert len(data["yearly"]) == 30
        assert data["yearly"][-1]["ending_balance"] == 0

    def test_no_result(self, client, canonical_payload):
        payload = {**canonical_payload, "term_years": 0}
        data = client.post("/api/v1/mortgage/schedule", json=payload).json()
        assert data == {"monthly_payment": None, "payments": [], "yearly": []}

    def test_too_many_payments(self, client, canonical_payload):
        payload = {**canonical_payload, "term_years": 500}
        assert client.post("/api/v1/mortgage/schedule", json=payload).status_code == 422
