"""Integration tests for API endpoints"""

from datetime import date
from unittest.mock import AsyncMock, patch
from fastapi.testclient import TestClient
from finhealth_gateway.domain.advice import ADVISOR_UNAVAILABLE_MESSAGE
from finhealth_gateway.domain.exceptions import AdvisorAPIError, InvalidAdvisorResponseError

ADVISOR = "finhealth_gateway.infrastructure.clients.advisor.AdvisorClient.get_advice"


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "finhealth-gateway"}


def test_metrics_endpoint(client: TestClient, healthy_payload):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/evaluate", json=healthy_payload)

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "finhealth_evaluation_total" in response.text
    assert "finhealth_score" in response.text


def test_metrics_label_route_templates(client: TestClient, healthy_payload):
    """Test request latency is labelled by route, not raw URL"""
    client.post("/v1/evaluate", json=healthy_payload)
    assert client.get("/v1/no-such-page-4821").status_code == 404

    text = client.get("/metrics").text
    assert 'endpoint="/v1/evaluate"' in text
    assert 'endpoint="unmatched"' in text
    assert "no-such-page-4821" not in text


def test_request_id_header(client: TestClient):
    """Test generated and propagated request IDs"""
    assert client.get("/health").headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_evaluate_endpoint(client: TestClient, healthy_payload):
    """Test POST /v1/evaluate returns camelCase result"""
    response = client.post("/v1/evaluate", json=healthy_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 100
    assert data["riskLevel"] == "Excellent"
    assert data["incomeTotal"] == 100000
    assert data["totalExpenses"] == 35000
    assert data["savingsRatio"] == 0.55
    assert data["debtRatio"] == 0.1
    assert data["expenseRatio"] == 0.35
    assert data["suggestions"] == ["Start SIP investments for long-term wealth."]
    assert [step["month"] for step in data["roadmap"]] == [f"Month {i}" for i in range(1, 7)]
    assert data["roadmap"][2] == {"month": "Month 3", "action": "Start SIP & Diversify"}
    assert data["greeting"].startswith("Hello! I've analyzed your financial health. Your score is 100/100")


def test_evaluate_empty_form_defaults_to_zero(client: TestClient):
    """Test unset fields default to 0"""
    response = client.post("/v1/evaluate", json={})

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 50
    assert data["riskLevel"] == "Moderate"
    assert data["incomeTotal"] == 0


def test_evaluate_accepts_snake_case_and_negatives(client: TestClient):
    """Test no range validation and both field spellings"""
    response = client.post(
        "/v1/evaluate",
        json={
            "income": {"monthly": 0},
            "expenses": {"rent": -500},
            "savings": {"emergency_fund": 10},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["totalExpenses"] == -500
    assert data["expenseRatio"] == -500  # divisor floored at 1
    assert data["savingsRatio"] == 500


def test_evaluate_rejects_non_numeric(client: TestClient):
    response = client.post("/v1/evaluate", json={"income": {"monthly": "lots"}})
    assert response.status_code == 422


def test_evaluate_null_fields_default_to_zero(client: TestClient):
    """Test null amounts and null sections are treated as unset"""
    response = client.post(
        "/v1/evaluate",
        json={"income": {"monthly": 100000, "other": None}, "loans": None, "expenses": {"rent": None}},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["incomeTotal"] == 100000
    assert data["totalExpenses"] == 0
    assert data["debtRatio"] == 0


def test_evaluate_overflowing_totals_serialize_as_null(client: TestClient):
    """Test totals beyond float range come back as JSON null"""
    response = client.post("/v1/evaluate", json={"income": {"monthly": 1e308, "other": 1e308}})

    assert response.status_code == 200
    data = response.json()
    assert data["incomeTotal"] is None
    assert data["savingsRatio"] is None
    assert data["debtRatio"] == 0
    assert data["score"] == 50


@patch(ADVISOR)
def test_advice_endpoint(mock_advisor: AsyncMock, client: TestClient, healthy_payload):
    """Test POST /v1/advice forwards snapshot and question"""
    mock_advisor.return_value = "Keep your SIP running."
    result = client.post("/v1/evaluate", json=healthy_payload).json()

    response = client.post(
        "/v1/advice",
        json={
            "data": healthy_payload,
            "result": result,
            "history": [{"role": "ai", "content": result["greeting"]}],
            "question": "  Should I buy gold?  ",
        },
    )

    assert response.status_code == 200
    assert response.json() == {"reply": "Keep your SIP running."}

    messages = mock_advisor.call_args.args[0]
    assert [m["role"] for m in messages] == ["system", "assistant", "user"]
    assert "Score: 100/100" in messages[0]["content"]
    assert messages[-1]["content"] == "Should I buy gold?"


@patch(ADVISOR)
def test_advice_uses_submitted_result(mock_advisor: AsyncMock, client: TestClient, healthy_payload):
    """Test the advice endpoint does not re-evaluate the snapshot"""
    mock_advisor.return_value = "ok"
    result = client.post("/v1/evaluate", json=healthy_payload).json()
    result.update(score=42, riskLevel="High Risk")

    client.post("/v1/advice", json={"data": healthy_payload, "result": result, "question": "Why?"})

    system_prompt = mock_advisor.call_args.args[0][0]["content"]
    assert "Score: 42/100" in system_prompt
    assert "Risk Level: High Risk" in system_prompt


@patch(ADVISOR)
def test_advice_advisor_unavailable(mock_advisor: AsyncMock, client: TestClient, healthy_payload):
    """Test advisor failure becomes a generic 503"""
    mock_advisor.side_effect = AdvisorAPIError("Advisor API timeout after 15.0s")
    result = client.post("/v1/evaluate", json=healthy_payload).json()

    response = client.post("/v1/advice", json={"data": healthy_payload, "result": result, "question": "Hi"})

    assert response.status_code == 503
    assert response.json()["detail"] == ADVISOR_UNAVAILABLE_MESSAGE


@patch(ADVISOR)
def test_advice_malformed_reply(mock_advisor: AsyncMock, client: TestClient, healthy_payload):
    mock_advisor.side_effect = InvalidAdvisorResponseError("Advisor reply is empty")
    result = client.post("/v1/evaluate", json=healthy_payload).json()

    response = client.post("/v1/advice", json={"data": healthy_payload, "result": result, "question": "Hi"})

    assert response.status_code == 503
    assert response.json()["detail"] == ADVISOR_UNAVAILABLE_MESSAGE


@patch(ADVISOR)
def test_advice_rejects_blank_question(mock_advisor: AsyncMock, client: TestClient, healthy_payload):
    """Test whitespace-only questions never reach the advisor"""
    result = client.post("/v1/evaluate", json=healthy_payload).json()

    response = client.post("/v1/advice", json={"data": healthy_payload, "result": result, "question": "   "})

    assert response.status_code == 422
    mock_advisor.assert_not_called()


def test_advice_without_api_key(client: TestClient, healthy_payload):
    """Test unconfigured advisor reports unavailable instead of failing"""
    result = client.post("/v1/evaluate", json=healthy_payload).json()

    with patch("finhealth_gateway.infrastructure.clients.advisor.settings.advisor_api_key", ""):
        response = client.post("/v1/advice", json={"data": healthy_payload, "result": result, "question": "Hi"})

    assert response.status_code == 503


def test_report_endpoint(client: TestClient, healthy_payload):
    """Test POST /v1/report"""
    response = client.post("/v1/report", json=healthy_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "FinHealth Report"
    assert data["generatedOn"] == date.today().isoformat()
    assert data["executiveSummary"][0] == "Financial Score: 100/100"
    assert data["breakdown"] == [
        ["Total Income", "INR 1,00,000"],
        ["Total Expenses", "INR 35,000"],
        ["Savings", "INR 65,000"],
    ]
    assert data["recommendations"] == ["Start SIP investments for long-term wealth."]
    assert data["charts"]["scoreBand"] == "good"
    assert [s["name"] for s in data["charts"]["ratioDistribution"]] == ["Savings", "Expenses", "Debt"]


def test_report_download(client: TestClient, healthy_payload):
    """Test POST /v1/report/download returns a text attachment"""
    response = client.post("/v1/report/download", json=healthy_payload)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert 'filename="FinHealth_Report.txt"' in response.headers["content-disposition"]
    assert "Executive Summary" in response.text
    assert "Month 3: Start SIP & Diversify" in response.text
