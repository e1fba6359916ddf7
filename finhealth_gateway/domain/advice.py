"""Advisory chat - prompt construction for the external language-model advisor"""

import json
from dataclasses import asdict
from typing import Any, Dict, List, Protocol, Sequence

from finhealth_gateway.domain.models import ChatMessage, FinancialData, FinancialResult
from finhealth_gateway.utils.formatting import format_percent, to_plain_number

ADVISOR_UNAVAILABLE_MESSAGE = (
    "I'm sorry, I'm having trouble connecting to my brain right now. Please try again in a moment."
)

# Wire names for the raw snapshot, matching the form payload
_CAMEL_CASE = {"emergency_fund": "emergencyFund"}


class AdviceProvider(Protocol):
    """Capability to obtain a reply from an external advisor"""

    async def get_advice(self, messages: List[Dict[str, str]]) -> str:
        """Return reply text; raises AdvisorAPIError when unavailable"""
        ...


def financial_data_to_dict(data: FinancialData) -> Dict[str, Dict[str, Any]]:
    """Nested camelCase dict of the snapshot, integral amounts without '.0'"""
    return {
        section: {_CAMEL_CASE.get(name, name): to_plain_number(value) for name, value in fields.items()}
        for section, fields in asdict(data).items()
    }


def build_greeting(result: FinancialResult) -> str:
    """Opening chat message quoting the evaluated score"""
    return (
        f"Hello! I've analyzed your financial health. Your score is {result.score}/100 "
        f"with a {result.risk_level} risk level. How can I help you improve your roadmap today?"
    )


def build_system_prompt(data: FinancialData, result: FinancialResult) -> str:
    """
    Render the evaluation snapshot into the advisor's system prompt.

    Values are read from ``result`` as given and never recomputed, so the
    advisor sees exactly what the dashboard shows.
    """
    raw_data = json.dumps(financial_data_to_dict(data), separators=(",", ":"), ensure_ascii=False)

    return "\n".join(
        [
            "You are an expert AI Financial Advisor. You have access to the user's financial data:",
            f"Score: {result.score}/100",
            f"Risk Level: {result.risk_level}",
            f"Total Income: ₹{to_plain_number(result.income_total)}",
            f"Total Expenses: ₹{to_plain_number(result.total_expenses)}",
            f"Savings Ratio: {format_percent(result.savings_ratio)}",
            f"Debt Ratio: {format_percent(result.debt_ratio)}",
            "",
            f"Raw Data: {raw_data}",
            "",
            "Provide concise, professional, and actionable financial advice. Be encouraging but realistic.",
        ]
    )


def build_chat_messages(
    data: FinancialData,
    result: FinancialResult,
    history: Sequence[ChatMessage],
    question: str,
) -> List[Dict[str, str]]:
    """
    Assemble the chat-completions message list.

    Order: system prompt, prior turns (``ai`` sent as ``assistant``), new question.
    """
    messages = [{"role": "system", "content": build_system_prompt(data, result)}]
    messages.extend(
        {"role": "assistant" if m.role == "ai" else "user", "content": m.content}
        for m in history
    )
    messages.append({"role": "user", "content": question})
    return messages
