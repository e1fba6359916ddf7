"""Exportable health report and dashboard chart data built from an evaluation"""

from dataclasses import dataclass
from datetime import date
from typing import List, Tuple

from finhealth_gateway.domain.models import FinancialResult, RoadmapStep
from finhealth_gateway.utils.formatting import format_inr, format_percent

REPORT_TITLE = "FinHealth Report"
NO_SUGGESTIONS_MESSAGE = "Great job! Your financial health looks solid. Keep monitoring your expenses."


@dataclass(frozen=True)
class ChartSlice:
    """Named value in a chart series"""

    name: str
    value: float


@dataclass(frozen=True)
class ChartData:
    """Series consumed by the dashboard charts"""

    score_band: str  # "good" | "fair" | "poor"
    score_gauge: Tuple[ChartSlice, ...]
    cash_flow: Tuple[ChartSlice, ...]
    ratio_distribution: Tuple[ChartSlice, ...]


@dataclass(frozen=True)
class FinancialReport:
    """Everything the exported report shows"""

    title: str
    generated_on: date
    score: int
    risk_level: str
    executive_summary: Tuple[str, ...]
    breakdown: Tuple[Tuple[str, str], ...]
    recommendations: Tuple[str, ...]
    roadmap: Tuple[RoadmapStep, ...]
    charts: ChartData


def score_band(score: int) -> str:
    """Colour band for the score gauge; same cut-offs as the risk tiers"""
    if score >= 80:
        return "good"
    elif score >= 50:
        return "fair"
    return "poor"


def build_chart_data(result: FinancialResult) -> ChartData:
    """
    Build chart series from an evaluation.

    Ratios are shown as evaluated, except the savings slice of the ratio
    distribution which is floored at 0 since a pie slice cannot be negative.
    """
    return ChartData(
        score_band=score_band(result.score),
        score_gauge=(
            ChartSlice("Score", result.score),
            ChartSlice("Remaining", 100 - result.score),
        ),
        cash_flow=(
            ChartSlice("In", result.income_total),
            ChartSlice("Out", result.total_expenses),
        ),
        ratio_distribution=(
            ChartSlice("Savings", max(0, result.savings_ratio)),
            ChartSlice("Expenses", result.expense_ratio),
            ChartSlice("Debt", result.debt_ratio),
        ),
    )


def build_report(result: FinancialResult, generated_on: date | None = None) -> FinancialReport:
    """
    Assemble the downloadable report.

    The "Savings" breakdown row is income minus living expenses, before EMI,
    matching the figure users see on the exported report.
    """
    if generated_on is None:
        generated_on = date.today()

    executive_summary = (
        f"Financial Score: {result.score}/100",
        f"Monthly Savings Ratio: {format_percent(result.savings_ratio)}",
        f"Debt-to-Income Ratio: {format_percent(result.debt_ratio)}",
    )

    breakdown = (
        ("Total Income", format_inr(result.income_total)),
        ("Total Expenses", format_inr(result.total_expenses)),
        ("Savings", format_inr(result.income_total - result.total_expenses)),
    )

    recommendations = result.suggestions or (NO_SUGGESTIONS_MESSAGE,)

    return FinancialReport(
        title=REPORT_TITLE,
        generated_on=generated_on,
        score=result.score,
        risk_level=result.risk_level,
        executive_summary=executive_summary,
        breakdown=breakdown,
        recommendations=tuple(recommendations),
        roadmap=result.roadmap,
        charts=build_chart_data(result),
    )


def render_text_report(report: FinancialReport) -> str:
    """Plain-text rendition of the report for download"""
    lines: List[str] = [
        report.title,
        f"Generated on: {report.generated_on.isoformat()}",
        f"Risk Level: {report.risk_level}",
        "",
        "Executive Summary",
        *report.executive_summary,
        "",
        "Financial Breakdown",
    ]

    label_width = max(len(label) for label, _ in report.breakdown)
    lines.extend(f"{label.ljust(label_width)}  {amount}" for label, amount in report.breakdown)

    lines += ["", "Recommendations"]
    lines.extend(f"- {text}" for text in report.recommendations)

    lines += ["", "6-Month Roadmap"]
    lines.extend(f"{step.month}: {step.action}" for step in report.roadmap)

    return "\n".join(lines) + "\n"
