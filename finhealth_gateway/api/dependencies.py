"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from finhealth_gateway.infrastructure.clients.advisor import AdvisorClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_advisor_client() -> AdvisorClient:
    """Provide Advisor API client instance"""
    return AdvisorClient()
