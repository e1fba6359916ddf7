"""Financial health scoring engine - core business logic for score, risk tier and advice"""

from typing import Callable, List, Tuple
from finhealth_gateway.domain.models import FinancialData, FinancialMetrics, FinancialResult, RoadmapStep

RISK_EXCELLENT = "Excellent"
RISK_MODERATE = "Moderate"
RISK_HIGH = "High Risk"

EMERGENCY_FUND_MONTHS = 6

# (name, predicate, points). Rules are independent; each awards all or nothing.
SCORE_RULES: List[Tuple[str, Callable[[FinancialMetrics], bool], int]] = [
    ("savings_ratio", lambda m: m.savings_ratio > 0.30, 30),
    ("debt_ratio", lambda m: m.debt_ratio < 0.20, 30),
    ("expense_ratio", lambda m: m.expense_ratio < 0.60, 20),
    ("emergency_fund", lambda m: m.emergency_fund > m.required_emergency_fund, 20),
]

# (predicate, text). Declaration order is the order shown to the user.
SUGGESTION_RULES: List[Tuple[Callable[[FinancialMetrics, int], bool], str]] = [
    (lambda m, score: m.savings_ratio < 0.30, "Increase your savings rate by 10% monthly."),
    (
        lambda m, score: m.emergency_fund < m.monthly_needs * EMERGENCY_FUND_MONTHS,
        "Build emergency fund covering 6 months expenses.",
    ),
    (lambda m, score: score >= 80, "Start SIP investments for long-term wealth."),
    (lambda m, score: m.debt_ratio > 0.40, "Consider consolidating high-interest loans."),
    (lambda m, score: m.expense_ratio > 0.70, "Review discretionary spending (Entertainment, Shopping)."),
]


def compute_metrics(data: FinancialData) -> FinancialMetrics:
    """
    Derive totals and income ratios from a raw snapshot.

    Zero income is replaced by 1 as the divisor only, so the ratios become raw
    amounts (e.g. debt_ratio == emi) rather than failing. Negative inputs are
    not clamped.
    """
    income_total = data.income.monthly + data.income.other

    expenses = data.expenses
    total_expenses = (
        expenses.rent
        + expenses.food
        + expenses.transport
        + expenses.utilities
        + expenses.entertainment
        + expenses.others
    )

    safe_income = 1 if income_total == 0 else income_total

    emi = data.loans.emi
    monthly_savings = income_total - total_expenses - emi
    monthly_needs = total_expenses + emi

    return FinancialMetrics(
        income_total=income_total,
        total_expenses=total_expenses,
        safe_income=safe_income,
        monthly_savings=monthly_savings,
        savings_ratio=monthly_savings / safe_income,
        debt_ratio=emi / safe_income,
        expense_ratio=total_expenses / safe_income,
        monthly_needs=monthly_needs,
        required_emergency_fund=monthly_needs * EMERGENCY_FUND_MONTHS,
        emergency_fund=data.savings.emergency_fund,
    )


def calculate_score(metrics: FinancialMetrics) -> int:
    """
    Sum the points of every rule that holds.

    Scoring weights:
    - 30: savings ratio above 30%
    - 30: debt ratio below 20%
    - 20: expense ratio below 60%
    - 20: emergency fund above 6 months of expenses plus EMI

    Thresholds are strict, a value exactly on a boundary earns nothing.
    """
    return sum(points for _, predicate, points in SCORE_RULES if predicate(metrics))


def determine_risk_level(score: int) -> str:
    """
    Map score to risk tier.

    Score bands:
    - 80+:     Excellent
    - 50 - 79: Moderate
    - < 50:    High Risk
    """
    if score >= 80:
        return RISK_EXCELLENT
    elif score >= 50:
        return RISK_MODERATE
    else:
        return RISK_HIGH


def build_suggestions(metrics: FinancialMetrics, score: int) -> List[str]:
    """Collect advice lines for every suggestion rule that holds, in rule order"""
    return [text for predicate, text in SUGGESTION_RULES if predicate(metrics, score)]


def build_roadmap(score: int) -> List[RoadmapStep]:
    """Six-month plan; only month 3 depends on the score"""
    month_3 = "Start SIP & Diversify" if score >= 80 else "Clear high interest debt"
    return [
        RoadmapStep("Month 1", "Track spending & Reduce entertainment expenses"),
        RoadmapStep("Month 2", "Build emergency fund buffer"),
        RoadmapStep("Month 3", month_3),
        RoadmapStep("Month 4", "Increase savings by 5%"),
        RoadmapStep("Month 5", "Reduce EMI burden by prepaying if possible"),
        RoadmapStep("Month 6", "Review financial goals & Diversify investments"),
    ]


def evaluate_financial_health(data: FinancialData) -> FinancialResult:
    """
    Main entry point: score a snapshot and build advice and roadmap.

    Pure and deterministic; safe to call concurrently.
    """
    metrics = compute_metrics(data)
    score = calculate_score(metrics)

    return FinancialResult(
        score=score,
        risk_level=determine_risk_level(score),
        income_total=metrics.income_total,
        total_expenses=metrics.total_expenses,
        savings_ratio=metrics.savings_ratio,
        debt_ratio=metrics.debt_ratio,
        expense_ratio=metrics.expense_ratio,
        suggestions=tuple(build_suggestions(metrics, score)),
        roadmap=tuple(build_roadmap(score)),
    )
