"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict
from fastapi.testclient import TestClient
from finhealth_gateway.api.main import create_app
from finhealth_gateway.domain.models import Expenses, FinancialData, Income, Loans, Savings


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def healthy_data() -> FinancialData:
    """Comfortable salary, moderate spending, well funded emergency reserve"""
    return FinancialData(
        income=Income(monthly=100000, other=0),
        expenses=Expenses(
            rent=20000,
            food=5000,
            transport=3000,
            utilities=2000,
            entertainment=2000,
            others=3000,
        ),  # 35000 total
        loans=Loans(emi=10000, outstanding=200000),
        savings=Savings(current=50000, emergency_fund=300000),
    )


@pytest.fixture
def stretched_data() -> FinancialData:
    """Spending and EMI exceed income, no emergency reserve"""
    return FinancialData(
        income=Income(monthly=45000, other=5000),
        expenses=Expenses(
            rent=20000,
            food=10000,
            transport=5000,
            utilities=3000,
            entertainment=2000,
            others=0,
        ),  # 40000 total
        loans=Loans(emi=15000, outstanding=600000),
        savings=Savings(current=10000, emergency_fund=0),
    )


@pytest.fixture
def healthy_payload() -> Dict[str, Any]:
    """Form payload (wire format) for the healthy snapshot"""
    return {
        "income": {"monthly": 100000, "other": 0},
        "expenses": {
            "rent": 20000,
            "food": 5000,
            "transport": 3000,
            "utilities": 2000,
            "entertainment": 2000,
            "others": 3000,
        },
        "loans": {"emi": 10000, "outstanding": 200000},
        "savings": {"current": 50000, "emergencyFund": 300000},
    }
