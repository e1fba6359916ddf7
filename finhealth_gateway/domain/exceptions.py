"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AdvisorAPIError(DomainException):
    """Advisor API returned an error or is unavailable"""

    pass


class InvalidAdvisorResponseError(AdvisorAPIError):
    """Advisor API response is malformed or has no reply text"""

    pass
