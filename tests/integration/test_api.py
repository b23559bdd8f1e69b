"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, patch


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "snowball_debts_imported_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

    generated = client.get("/health")
    assert generated.headers["X-Request-ID"]


def test_plan_endpoint(client: TestClient, sample_payload: dict):
    """Test POST /v1/plan"""
    response = client.post("/v1/plan", json=sample_payload)

    assert response.status_code == 200
    data = response.json()
    assert [d["id"] for d in data["payoff_order"]] == ["medical", "visa"]
    assert data["months_to_payoff"] > 0
    assert data["open_debt_ids"] == []
    assert data["budget"]["extra_payment"] == 1375.0
    assert data["budget"]["has_deficit"] is False
    assert data["total_interest_saved"] >= 0

    month_one = [p for p in data["payment_plans"] if p["month"] == 1]
    assert [p["debt_id"] for p in month_one] == ["visa", "medical"]
    assert month_one[1]["is_payoff_month"] is True


def test_plan_endpoint_empty(client: TestClient):
    response = client.post("/v1/plan", json={"monthly_income": 3000})

    assert response.status_code == 200
    data = response.json()
    assert data["months_to_payoff"] == 0
    assert data["payment_plans"] == []
    assert data["payoff_order"] == []
    assert data["total_interest_saved"] == 0


def test_plan_endpoint_reports_open_debts(client: TestClient):
    payload = {
        "monthly_income": 10,
        "debts": [
            {"id": "payday", "name": "Payday", "balance": 10000, "minimum_payment": 10, "interest_rate": 36},
        ],
    }
    response = client.post("/v1/plan", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["months_to_payoff"] == 600
    assert data["open_debt_ids"] == ["payday"]


def test_plan_endpoint_respects_configured_cap(client: TestClient):
    payload = {
        "monthly_income": 10,
        "debts": [{"id": "d1", "name": "Loan", "balance": 1000, "minimum_payment": 10, "interest_rate": 0}],
    }
    with patch("snowball_planner.api.dependencies.settings.max_months", 24):
        response = client.post("/v1/plan", json=payload)

    assert response.json()["months_to_payoff"] == 24
    assert response.json()["open_debt_ids"] == ["d1"]


def test_plan_endpoint_deficit(client: TestClient):
    payload = {
        "monthly_income": 100,
        "budget_categories": [{"name": "Rent", "amount": 500, "type": "fixed"}],
        "debts": [{"id": "d1", "name": "Loan", "balance": 1000, "minimum_payment": 200, "interest_rate": 0}],
    }
    response = client.post("/v1/plan", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["budget"]["has_deficit"] is True
    assert data["budget"]["extra_payment"] == 0
    assert data["months_to_payoff"] == 5


@pytest.mark.parametrize(
    "debt_override",
    [
        {"balance": -5},
        {"balance": 1e17},
        {"minimum_payment": 1e12},
        {"interest_rate": 5000},
        {"priority": "urgent"},
        {"type": "boat"},
        {"id": ""},
    ],
)
def test_plan_endpoint_validation(client: TestClient, sample_payload: dict, debt_override: dict):
    sample_payload["debts"][0].update(debt_override)
    response = client.post("/v1/plan", json=sample_payload)
    assert response.status_code == 422


def test_plan_endpoint_rejects_duplicate_debt_ids(client: TestClient, sample_payload: dict):
    sample_payload["debts"][1]["id"] = sample_payload["debts"][0]["id"]
    response = client.post("/v1/plan", json=sample_payload)

    assert response.status_code == 422
    assert "Duplicate debt id" in response.text


def test_schedule_endpoint(client: TestClient):
    payload = {
        "monthly_income": 150,
        "debts": [
            {"id": "d1", "name": "D1", "balance": 500, "minimum_payment": 50, "interest_rate": 0, "priority": "high"},
            {"id": "d2", "name": "D2", "balance": 5000, "minimum_payment": 100, "interest_rate": 0, "priority": "low"},
        ],
    }
    response = client.post("/v1/plan/schedule", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["months_to_payoff"] == 50
    assert data["duration"] == "4 years, 2 months"
    assert len(data["months"]) == 50
    assert data["months"][10]["total_payment"] == 150
    assert [line["debt_id"] for line in data["months"][10]["debts"]] == ["d2"]


def test_export_endpoint(client: TestClient, sample_payload: dict):
    response = client.post("/v1/plan/export", json=sample_payload)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.text.splitlines()[0].startswith("month,debt_id,debt_name")

    summary = client.post("/v1/plan/export?kind=summary", json=sample_payload)
    assert summary.status_code == 200
    assert summary.text.splitlines()[0].startswith("rank,debt_id")

    invalid = client.post("/v1/plan/export?kind=pdf", json=sample_payload)
    assert invalid.status_code == 400


def test_budget_summary_endpoint(client: TestClient, sample_payload: dict):
    response = client.post("/v1/budget/summary", json=sample_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["total_expenses"] == 2500
    assert data["total_minimum_payments"] == 125
    assert data["remaining_income"] == 1375
    assert data["total_debt"] == 3700


def test_budget_defaults_endpoint(client: TestClient):
    response = client.get("/v1/budget/defaults")

    assert response.status_code == 200
    categories = response.json()["categories"]
    assert len(categories) == 9
    assert categories[0]["type"] == "fixed"


def test_import_endpoint(client: TestClient):
    body = (
        "id,debtor,name,type,current_amount,minimum_monthly_payment,interest_rate,snowball_priority\n"
        "cc1,Chase,Visa,credit_card,2500,75,19.99%,1\n"
        ",Dr Smith,Checkup,overdue bill,300,25,0,5\n"
    )
    response = client.post("/v1/debts/import", content=body, headers={"Content-Type": "text/csv"})

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert data["debts"][0]["name"] == "Chase: Visa"
    assert data["debts"][0]["priority"] == "high"
    assert data["debts"][1]["type"] == "other"


def test_imported_debts_feed_plan(client: TestClient):
    body = "name,current_amount,minimum_monthly_payment,interest_rate\nGym,120,40,0\n"
    debts = client.post("/v1/debts/import", content=body).json()["debts"]

    response = client.post("/v1/plan", json={"monthly_income": 40, "debts": debts})
    assert response.status_code == 200
    assert response.json()["months_to_payoff"] == 3


def test_import_endpoint_missing_columns(client: TestClient):
    response = client.post("/v1/debts/import", content="name,amount\nVisa,100\n")

    assert response.status_code == 422
    assert "current_amount" in response.json()["detail"]


def test_import_endpoint_not_utf8(client: TestClient):
    response = client.post("/v1/debts/import", content=b"name,current_amount\n\xff\xfe,100\n")
    assert response.status_code == 422


def test_import_endpoint_too_large(client: TestClient):
    with patch("snowball_planner.api.v1.debts.settings.max_import_bytes", 10):
        response = client.post("/v1/debts/import", content="name,current_amount\nVisa,100\n")

    assert response.status_code == 413


def test_import_endpoint_rejects_declared_length_before_reading(client: TestClient):
    with patch("snowball_planner.api.v1.debts.settings.max_import_bytes", 10), \
         patch("starlette.requests.Request.body", new_callable=AsyncMock) as mock_body:
        response = client.post("/v1/debts/import", content="name,current_amount\nVisa,100\n")

    assert response.status_code == 413
    mock_body.assert_not_called()


def test_import_endpoint_duplicate_ids(client: TestClient):
    body = "id,name,current_amount\ncc1,Visa,100\ncc1,Amex,200\n"
    response = client.post("/v1/debts/import", content=body)

    assert response.status_code == 422
    assert "cc1" in response.json()["detail"]


def test_manual_debts_endpoint_rejects_huge_balance(client: TestClient):
    payload = {"entries": [{"name": "Visa", "balance": 1e17, "minimum_payment": 1}]}
    response = client.post("/v1/debts/manual", json=payload)
    assert response.status_code == 422


def test_manual_debts_endpoint(client: TestClient):
    payload = {
        "entries": [
            {"name": "Visa", "balance": 1000, "minimum_payment": 40, "interest_rate": 22, "priority": "high"},
            {"name": "Incomplete", "balance": 1000},
        ]
    }
    response = client.post("/v1/debts/manual", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    assert data["debts"][0]["priority"] == "high"
    assert data["debts"][0]["type"] == "other"


def test_template_endpoint(client: TestClient):
    response = client.get("/v1/debts/template")

    assert response.status_code == 200
    assert response.text.startswith("id,debtor,name,type,current_amount")
