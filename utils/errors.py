"""Error types raised by routes and services.

Every error carries the HTTP status it maps to, so the exception handlers in
``api.main`` can render them without knowing where they came from.
"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for errors rendered as JSON error bodies."""
    
    status_code: int = 500
    
    def __init__(self, message: str, details: Any = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
    
    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ConfigurationError(AppError):
    """A required external-service setting is missing."""
    status_code = 500


class ValidationError(AppError):
    """Caller input is missing or malformed."""
    status_code = 400


class UnauthorizedError(AppError):
    """No usable session accompanies the request."""
    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class RequestTimeoutError(AppError):
    status_code = 408


class UpstreamError(AppError):
    """An external collaborator answered with a non-success status."""
    status_code = 502


class InvalidResponseError(AppError):
    """An external collaborator answered successfully but without usable content."""
    status_code = 500


class ParseError(AppError):
    status_code = 500


class BackendError(AppError):
    """A Supabase query or procedure call failed."""
    status_code = 500
