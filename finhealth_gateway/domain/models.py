"""Domain models - pure Python dataclasses representing a financial snapshot and its evaluation"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Income:
    """Monthly earnings"""

    monthly: float = 0
    other: float = 0


@dataclass(frozen=True)
class Expenses:
    """Monthly spending by category"""

    rent: float = 0
    food: float = 0
    transport: float = 0
    utilities: float = 0
    entertainment: float = 0
    others: float = 0


@dataclass(frozen=True)
class Loans:
    """Debt obligations"""

    emi: float = 0
    outstanding: float = 0  # display only, not scored


@dataclass(frozen=True)
class Savings:
    """Accumulated savings"""

    current: float = 0
    emergency_fund: float = 0


@dataclass(frozen=True)
class FinancialData:
    """Self-reported snapshot submitted through the form"""

    income: Income = field(default_factory=Income)
    expenses: Expenses = field(default_factory=Expenses)
    loans: Loans = field(default_factory=Loans)
    savings: Savings = field(default_factory=Savings)


@dataclass(frozen=True)
class FinancialMetrics:
    """Derived amounts and ratios used by the scoring rules"""

    income_total: float
    total_expenses: float
    safe_income: float
    monthly_savings: float
    savings_ratio: float
    debt_ratio: float
    expense_ratio: float
    monthly_needs: float
    required_emergency_fund: float
    emergency_fund: float


@dataclass(frozen=True)
class RoadmapStep:
    """Single month in the six-month plan"""

    month: str
    action: str


@dataclass(frozen=True)
class FinancialResult:
    """Output of a financial health evaluation"""

    score: int
    risk_level: str  # "Excellent" | "Moderate" | "High Risk"
    income_total: float
    total_expenses: float
    savings_ratio: float
    debt_ratio: float
    expense_ratio: float
    suggestions: Tuple[str, ...]
    roadmap: Tuple[RoadmapStep, ...]


@dataclass(frozen=True)
class ChatMessage:
    """Single turn in the advisory chat"""

    role: str  # "user" or "ai"
    content: str
