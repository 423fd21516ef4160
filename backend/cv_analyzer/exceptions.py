"""
Error kinds raised while handling a CV upload.

Each class carries the HTTP status and the public error title used by the
exception handlers in main.py; the exception message becomes ``details``.
"""


class CVAnalysisError(Exception):
    """Base class for all errors rendered as a failure envelope."""

    status_code = 500
    error = "An error occurred during CV processing"


class InvalidUpload(CVAnalysisError):
    """Missing, oversized or wrongly typed upload, or malformed form fields."""

    status_code = 400
    error = "Invalid upload"


class ExtractionFailed(CVAnalysisError):
    """The uploaded document could not be turned into text."""


class MalformedAIResponse(CVAnalysisError):
    """The completion service returned text that is not the expected JSON."""


class UpstreamServiceError(CVAnalysisError):
    """The completion service call failed or timed out."""


class CVProcessingError(CVAnalysisError):
    """Wraps any unexpected exception raised while processing an upload."""
