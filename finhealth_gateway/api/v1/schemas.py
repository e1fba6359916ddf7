"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import Annotated, Any, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from finhealth_gateway.domain.models import (
    ChatMessage,
    Expenses,
    FinancialData,
    FinancialResult,
    Income,
    Loans,
    RoadmapStep,
    Savings,
)
from finhealth_gateway.domain.report import ChartData, FinancialReport


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FormModel(CamelModel):
    """Form section: blank (null) amounts and sections fall back to their default"""

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


# Form input. Amounts are not range-checked; unset or null fields are 0.

class IncomeSchema(FormModel):
    monthly: float = 0
    other: float = 0


class ExpensesSchema(FormModel):
    rent: float = 0
    food: float = 0
    transport: float = 0
    utilities: float = 0
    entertainment: float = 0
    others: float = 0


class LoansSchema(FormModel):
    emi: float = 0
    outstanding: float = 0


class SavingsSchema(FormModel):
    current: float = 0
    emergency_fund: float = 0


class FinancialDataSchema(FormModel):
    """Request body for POST /v1/evaluate and /v1/report"""

    income: IncomeSchema = Field(default_factory=IncomeSchema)
    expenses: ExpensesSchema = Field(default_factory=ExpensesSchema)
    loans: LoansSchema = Field(default_factory=LoansSchema)
    savings: SavingsSchema = Field(default_factory=SavingsSchema)

    def to_domain(self) -> FinancialData:
        return FinancialData(
            income=Income(**self.income.model_dump()),
            expenses=Expenses(**self.expenses.model_dump()),
            loans=Loans(**self.loans.model_dump()),
            savings=Savings(**self.savings.model_dump()),
        )


class RoadmapStepSchema(CamelModel):
    month: str
    action: str


class FinancialResultSchema(CamelModel):
    """Evaluation snapshot as returned to, and echoed back by, the dashboard"""

    score: int
    risk_level: Literal["Excellent", "Moderate", "High Risk"]
    income_total: float
    total_expenses: float
    savings_ratio: float
    debt_ratio: float
    expense_ratio: float
    suggestions: List[str] = Field(default_factory=list)
    roadmap: List[RoadmapStepSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: FinancialResult, **extra) -> "FinancialResultSchema":
        return cls(
            score=result.score,
            risk_level=result.risk_level,
            income_total=result.income_total,
            total_expenses=result.total_expenses,
            savings_ratio=result.savings_ratio,
            debt_ratio=result.debt_ratio,
            expense_ratio=result.expense_ratio,
            suggestions=list(result.suggestions),
            roadmap=[RoadmapStepSchema(month=s.month, action=s.action) for s in result.roadmap],
            **extra,
        )

    def to_domain(self) -> FinancialResult:
        return FinancialResult(
            score=self.score,
            risk_level=self.risk_level,
            income_total=self.income_total,
            total_expenses=self.total_expenses,
            savings_ratio=self.savings_ratio,
            debt_ratio=self.debt_ratio,
            expense_ratio=self.expense_ratio,
            suggestions=tuple(self.suggestions),
            roadmap=tuple(RoadmapStep(s.month, s.action) for s in self.roadmap),
        )


class EvaluationResponse(FinancialResultSchema):
    """Response for POST /v1/evaluate"""

    greeting: str


class ChatMessageSchema(CamelModel):
    role: Literal["user", "ai"]
    content: str


class AdviceRequest(CamelModel):
    """Request body for POST /v1/advice"""

    data: FinancialDataSchema
    result: FinancialResultSchema
    history: List[ChatMessageSchema] = Field(default_factory=list)
    question: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

    def history_to_domain(self) -> List[ChatMessage]:
        return [ChatMessage(role=m.role, content=m.content) for m in self.history]


class AdviceResponse(CamelModel):
    """Response for POST /v1/advice"""

    reply: str


class ChartSliceSchema(CamelModel):
    name: str
    value: float


class ChartDataSchema(CamelModel):
    score_band: str
    score_gauge: List[ChartSliceSchema]
    cash_flow: List[ChartSliceSchema]
    ratio_distribution: List[ChartSliceSchema]

    @classmethod
    def from_domain(cls, charts: ChartData) -> "ChartDataSchema":
        def series(slices):
            return [ChartSliceSchema(name=s.name, value=s.value) for s in slices]

        return cls(
            score_band=charts.score_band,
            score_gauge=series(charts.score_gauge),
            cash_flow=series(charts.cash_flow),
            ratio_distribution=series(charts.ratio_distribution),
        )


class ReportResponse(CamelModel):
    """Response for POST /v1/report"""

    title: str
    generated_on: date
    score: int
    risk_level: str
    executive_summary: List[str]
    breakdown: List[Tuple[str, str]]
    recommendations: List[str]
    roadmap: List[RoadmapStepSchema]
    charts: ChartDataSchema

    @classmethod
    def from_domain(cls, report: FinancialReport) -> "ReportResponse":
        return cls(
            title=report.title,
            generated_on=report.generated_on,
            score=report.score,
            risk_level=report.risk_level,
            executive_summary=list(report.executive_summary),
            breakdown=list(report.breakdown),
            recommendations=list(report.recommendations),
            roadmap=[RoadmapStepSchema(month=s.month, action=s.action) for s in report.roadmap],
            charts=ChartDataSchema.from_domain(report.charts),
        )
