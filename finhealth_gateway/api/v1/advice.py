"""POST /v1/advice - Advisory chat endpoint"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from finhealth_gateway.api.v1.schemas import AdviceRequest, AdviceResponse
from finhealth_gateway.api.dependencies import get_advisor_client, get_request_id
from finhealth_gateway.domain.advice import ADVISOR_UNAVAILABLE_MESSAGE, AdviceProvider, build_chat_messages
from finhealth_gateway.domain.exceptions import AdvisorAPIError
from finhealth_gateway.infrastructure.observability.metrics import advisor_failures_counter

router = APIRouter()


@router.post("/advice", response_model=AdviceResponse)
async def ask_advisor(
    request_body: AdviceRequest,
    request: Request,
    advisor: AdviceProvider = Depends(get_advisor_client),
):
    """
    Forward a question, with the evaluation snapshot as context, to the advisor.

    The submitted result is used verbatim; nothing is re-evaluated here.
    """
    request_id = get_request_id(request)

    messages = build_chat_messages(
        request_body.data.to_domain(),
        request_body.result.to_domain(),
        request_body.history_to_domain(),
        request_body.question,
    )

    try:
        reply = await advisor.get_advice(messages)

    except AdvisorAPIError as e:
        advisor_failures_counter.inc()
        logging.error(f"Advisor API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail=ADVISOR_UNAVAILABLE_MESSAGE)

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return AdviceResponse(reply=reply)
