"""POST /v1/report - Exportable financial health report"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from finhealth_gateway.api.v1.schemas import FinancialDataSchema, ReportResponse
from finhealth_gateway.domain.scoring import evaluate_financial_health
from finhealth_gateway.domain.report import build_report, render_text_report

router = APIRouter()

REPORT_FILENAME = "FinHealth_Report.txt"


@router.post("/report", response_model=ReportResponse)
def get_report(request_body: FinancialDataSchema):
    """
    Evaluate a snapshot and return report content with chart series.

    Returns:
        Executive summary, breakdown, recommendations, roadmap and charts
    """
    result = evaluate_financial_health(request_body.to_domain())
    return ReportResponse.from_domain(build_report(result))


@router.post("/report/download", response_class=PlainTextResponse)
def download_report(request_body: FinancialDataSchema):
    """Plain-text report as a file attachment"""
    result = evaluate_financial_health(request_body.to_domain())
    return PlainTextResponse(
        render_text_report(build_report(result)),
        headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
    )
