"""POST /v1/evaluate - Financial health evaluation endpoint"""

import time
from fastapi import APIRouter, Request

from finhealth_gateway.api.v1.schemas import FinancialDataSchema, EvaluationResponse
from finhealth_gateway.api.dependencies import get_request_id
from finhealth_gateway.domain.scoring import evaluate_financial_health
from finhealth_gateway.domain.advice import build_greeting
from finhealth_gateway.infrastructure.observability.metrics import record_evaluation
from finhealth_gateway.infrastructure.observability.logging import log_evaluation

router = APIRouter()


@router.post("/evaluate", response_model=EvaluationResponse)
async def evaluate(request_body: FinancialDataSchema, request: Request):
    """
    Score a submitted financial snapshot.

    Flow:
    1. Convert the form payload to domain data
    2. Evaluate score, risk tier, suggestions and roadmap (exactly once)
    3. Record metrics and logs
    4. Return the result with the chat greeting
    """
    start_time = time.time()
    request_id = get_request_id(request)

    result = evaluate_financial_health(request_body.to_domain())

    duration_ms = (time.time() - start_time) * 1000
    record_evaluation(result.risk_level, result.score)
    log_evaluation(request_id, result.score, result.risk_level, len(result.suggestions), duration_ms)

    return EvaluationResponse.from_domain(result, greeting=build_greeting(result))
