"""
Meeting Summarizer exception hierarchy.

All application-specific exceptions inherit from MeetingSummarizerError,
so the session layer can turn any failure into a single user notification.
"""

from datetime import UTC, datetime


class MeetingSummarizerError(Exception):
    """Base exception for all Meeting Summarizer errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "MEETING_SUMMARIZER_ERROR",
    ) -> None:
        self.detail = detail
        self.code = code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class ValidationError(MeetingSummarizerError):
    """Raised when a required input is missing or blank.

    ``field`` names the offending input ("transcript" or "credential").
    """

    def __init__(self, detail: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(detail=detail, code="VALIDATION_ERROR")


class TransportError(MeetingSummarizerError):
    """Raised when the completion endpoint answers with a non-success status
    or cannot be reached at all."""

    def __init__(
        self,
        detail: str = "Completion request failed",
        status_code: int | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(detail=detail, code="TRANSPORT_ERROR")


class FormatError(MeetingSummarizerError):
    """Raised when the response does not parse into the expected shape."""

    def __init__(self, detail: str = "Unexpected response format") -> None:
        super().__init__(detail=detail, code="FORMAT_ERROR")


class DispatchInProgressError(MeetingSummarizerError):
    """Raised when a summarization is requested while one is still pending."""

    def __init__(self) -> None:
        super().__init__(
            detail="A summarization request is already in progress",
            code="DISPATCH_IN_PROGRESS",
        )
