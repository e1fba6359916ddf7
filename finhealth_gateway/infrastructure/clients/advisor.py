"""Advisor API HTTP client for the advisory chat"""

import logging
from typing import Dict, List

import httpx

from finhealth_gateway.config import settings
from finhealth_gateway.domain.exceptions import AdvisorAPIError, InvalidAdvisorResponseError
from finhealth_gateway.infrastructure.observability.metrics import advisor_latency_histogram

logger = logging.getLogger(__name__)


class AdvisorClient:
    """Client for an external OpenAI-compatible chat completions API"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.advisor_api_base).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.advisor_api_key
        self.model = model or settings.advisor_model
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_advice(self, messages: List[Dict[str, str]]) -> str:
        """
        Send the conversation and return the advisor's reply text.

        No retries: a failed call is reported once and the user may ask again.

        Raises:
            AdvisorAPIError: On missing credentials, timeout, HTTP or network errors
            InvalidAdvisorResponseError: When the response carries no reply text
        """
        if not self.api_key:
            logger.warning("Advisor API key not configured")
            raise AdvisorAPIError("Advisor API key not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": settings.advisor_referer,
        }
        payload = {"model": self.model, "messages": messages}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with advisor_latency_histogram.time():
                    response = await client.post(
                        f"{self.base_url}/chat/completions",
                        json=payload,
                        headers=headers,
                    )
                response.raise_for_status()
                data = response.json()

            except httpx.TimeoutException as e:
                raise AdvisorAPIError(f"Advisor API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise AdvisorAPIError(f"Advisor API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise AdvisorAPIError(f"Advisor API unreachable: {e}") from e
            except ValueError as e:
                raise InvalidAdvisorResponseError(f"Advisor API returned invalid JSON: {e}") from e

        try:
            reply = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise InvalidAdvisorResponseError(f"Invalid reply from advisor: {e}") from e

        if not isinstance(reply, str) or not reply.strip():
            raise InvalidAdvisorResponseError("Advisor reply is empty")

        return reply
