import pytest
from fastapi.testclient import TestClient

from mortgage_calculator.api.app import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def standard_request():
    return {
        "principal": 200000,
        "annual_interest_rate_pct": 6,
        "number_of_payments": 360,
        "payment_frequency": 12,
        "compounding_frequency": 12,
    }


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestFrequencies:
    def test_options(self, client):
        data = client.get("/api/v1/frequencies").json()
        assert data["payment_frequencies"] == [
            {"label": "Monthly", "value": 12},
            {"label": "Bi-Weekly", "value": 26},
            {"label": "Weekly", "value": 52},
        ]
        assert data["compounding_frequencies"] == [1, 2, 4, 12, 365]


class TestAmortization:
    def test_standard_mortgage(self, client, standard_request):
        resp = client.post("/api/v1/amortization", json=standard_request)
        assert resp.status_code == 200
        data = resp.json()
        assert data["periodic_interest_factor"] == pytest.approx(0.005, abs=1e-12)
        assert data["blended_payment"] == pytest.approx(1199.10, abs=0.01)
        assert data["summary"]["total_interest_paid"] == pytest.approx(231676.38, abs=0.01)
        assert data["summary"]["amortization_years"] == 30.0
        assert len(data["schedule"]) == 360
        assert data["schedule"][-1]["remaining_balance"] == 0.0
        assert len(data["yearly"]) == 30
        assert data["report"].startswith("Mortgage Amortization Schedule")

    def test_schedule_omitted(self, client, standard_request):
        standard_request["include_schedule"] = False
        data = client.post("/api/v1/amortization", json=standard_request).json()
        assert data["schedule"] == []
        assert len(data["yearly"]) == 30
        assert "Additional Information:" in data["report"]

    def test_defaults_to_monthly(self, client):
        data = client.post("/api/v1/amortization", json={
            "principal": 36000,
            "annual_interest_rate_pct": 0,
            "number_of_payments": 36,
        }).json()
        assert data["blended_payment"] == 1000.0
        assert data["summary"]["amortization_years"] == 3.0

    def test_negative_principal(self, client, standard_request):
        standard_request["principal"] = -100
        resp = client.post("/api/v1/amortization", json=standard_request)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "principal must be greater than 0"

    def test_zero_payment_frequency(self, client, standard_request):
        standard_request["payment_frequency"] = 0
        resp = client.post("/api/v1/amortization", json=standard_request)
        assert resp.status_code == 400
        assert "payment_frequency" in resp.json()["detail"]

    def test_rate_too_large(self, client, standard_request):
        standard_request.update(annual_interest_rate_pct=1e7, payment_frequency=1, compounding_frequency=365)
        resp = client.post("/api/v1/amortization", json=standard_request)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "annual_interest_rate is too large to compute"

    def test_wrong_type(self, client, standard_request):
        standard_request["number_of_payments"] = "many"
        resp = client.post("/api/v1/amortization", json=standard_request)
        assert resp.status_code == 422
