"""
Domain errors.

Every error carries the HTTP status it should surface as, so the API
layer can render ``{"error": message}`` without knowing the cause.
"""


class VerificationError(Exception):
    """Base class for verification failures."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(VerificationError):
    """Provider credentials are missing. Needs a redeploy to fix."""
    status_code = 500


class UpstreamError(VerificationError):
    """Provider call failed or returned a malformed payload."""
    status_code = 500


class BadRequestError(VerificationError):
    """A required query/body parameter is missing."""
    status_code = 400


class NotFoundError(VerificationError):
    """Unknown or empty session reference."""
    status_code = 404


class ReconciliationError(VerificationError):
    """Extraction payload is not a JSON object at all."""
    status_code = 502
