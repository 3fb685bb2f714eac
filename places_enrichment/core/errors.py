"""Error types and classification for places enrichment.

Failures are classified for logging only. Nothing here schedules a retry.
"""

import asyncio
from enum import Enum

import httpx
from supabase import FunctionsError, FunctionsRelayError


class ErrorCategory(str, Enum):
    """Error categories attached to failure logs.

    - TRANSIENT: Temporary errors (network timeouts, service unavailable)
    - RATE_LIMIT: Rate limiting errors (429)
    - PERMANENT: Permanent errors (400, 401, 404, invalid params)
    - UNKNOWN: Anything else
    """

    TRANSIENT = "transient"
    RATE_LIMIT = "rate_limit"
    PERMANENT = "permanent"
    UNKNOWN = "unknown"


class EnrichmentError(Exception):
    """Base class for enrichment errors."""


class CandidateFetchError(EnrichmentError):
    """Raised when candidate selection against the record store fails."""

    def __init__(self, query: str, cause: Exception):
        self.query = query
        self.cause = cause
        super().__init__(f"{query} query failed: {cause}")


class ErrorClassifier:
    """Classifies errors into categories.

    Static methods for stateless classification.
    """

    @staticmethod
    def categorize(error: Exception) -> ErrorCategory:
        """Categorize an error into TRANSIENT, RATE_LIMIT, PERMANENT, or UNKNOWN.

        Args:
            error: Exception to categorize

        Returns:
            ErrorCategory enum value
        """
        if isinstance(
            error,
            (
                asyncio.TimeoutError,
                httpx.TimeoutException,
                httpx.NetworkError,
            ),
        ):
            return ErrorCategory.TRANSIENT

        if isinstance(error, httpx.HTTPStatusError):
            return ErrorClassifier.categorize_status(error.response.status_code)

        # Relay errors mean the gateway could not reach the function
        if isinstance(error, FunctionsRelayError):
            return ErrorCategory.TRANSIENT

        if isinstance(error, FunctionsError) and isinstance(error.status, int):
            return ErrorClassifier.categorize_status(error.status)

        return ErrorClassifier.categorize_message(str(error))

    @staticmethod
    def categorize_status(status_code: int) -> ErrorCategory:
        """Categorize an HTTP status code."""
        if status_code == 429:
            return ErrorCategory.RATE_LIMIT
        if status_code in (502, 503, 504):
            return ErrorCategory.TRANSIENT
        if 400 <= status_code < 500:
            return ErrorCategory.PERMANENT
        return ErrorCategory.UNKNOWN

    @staticmethod
    def categorize_message(error_msg: str) -> ErrorCategory:
        """Categorize error by message (for reported errors and wrapped exceptions).

        Args:
            error_msg: Error message string

        Returns:
            ErrorCategory enum value
        """
        error_msg_lower = error_msg.lower()

        if "429" in error_msg or "rate limit" in error_msg_lower:
            return ErrorCategory.RATE_LIMIT

        if any(code in error_msg for code in ["503", "504", "502"]):
            return ErrorCategory.TRANSIENT

        if any(code in error_msg for code in ["400", "401", "403", "404", "405"]):
            return ErrorCategory.PERMANENT

        if "timeout" in error_msg_lower or "timed out" in error_msg_lower:
            return ErrorCategory.TRANSIENT

        return ErrorCategory.UNKNOWN
