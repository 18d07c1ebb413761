"""
Custom exceptions for repository-related operations.

Every error raised out of a repository carries a stable ErrorKey plus a
diagnostic context string, and renders as `[KEY] message: (context)`.
"""

from typing import Iterable

from .messages import DEFAULT_LANGUAGE, ErrorKey, render_message

# canonical repository-level exception

class RepositoryError(Exception):
    """
    Base exception for repository errors.

    - key: stable ErrorKey identifying the failed rule or operation
    - context: offending field/value for diagnostics (e.g. "ID = 3")
    - language: message set the error was rendered with ("en" or "ja")
    - message: rendered `[KEY] message: (context)` text
    - fields: optional list of field names related to the error (e.g. ['email'])
    - constraint: optional DB constraint name (for logs only)
    - error_code: canonical short code used to pick an HTTP status
    """

    # Map canonical error_code -> default HTTP status.
    ERROR_CODE_TO_STATUS = {
        "validation": 422,
        "duplicate": 409,
        "not_found": 404,
        "query": 500,
        "connection": 503,
    }

    default_error_code: str | None = None
    retryable: bool = False

    def __init__(self, key: ErrorKey, context: str = "", *, language: str = DEFAULT_LANGUAGE,
                 fields: Iterable[str] | None = None, constraint: str | None = None,
                 error_code: str | None = None):
        self.key = key
        self.context = context
        self.language = language
        self.message = render_message(key, context, language)
        super().__init__(self.message)
        self.fields = list(fields) if fields else None
        self.constraint = constraint
        self.error_code = error_code or self.default_error_code

    def __str__(self) -> str:
        return self.message

    def render(self, language: str) -> str:
        """Render the same key/context in another language."""
        return render_message(self.key, self.context, language)

    def to_payload(self) -> dict:
        """
        JSON-serializable dict for HTTP responses:
            {"detail": "[TaskIdInvalid] ...", "key": "TaskIdInvalid", "code": "validation", "fields": [...]}
        The constraint name stays out of the payload.
        """
        payload = {"detail": self.message, "key": str(self.key)}
        if self.error_code:
            payload["code"] = self.error_code
        if self.fields:
            payload["fields"] = list(self.fields)
        return payload

    def http_status(self) -> int:
        """HTTP status for this error's code, 400 when the code is unknown."""
        if self.error_code:
            return self.ERROR_CODE_TO_STATUS.get(self.error_code, 400)
        return 400


class ValidationError(RepositoryError):
    """Caller-supplied data broke a business rule (format, hierarchy, pagination bounds)."""

    default_error_code = "validation"


class DuplicateError(ValidationError):
    """A unique row (user assignment, project name, username/email) already exists."""

    default_error_code = "duplicate"


class NotFoundError(RepositoryError):
    """A referenced id, or a requested page beyond the available rows, does not exist."""

    default_error_code = "not_found"


class QueryError(RepositoryError):
    """The store rejected or failed to execute an otherwise valid operation."""

    default_error_code = "query"


class StoreConnectionError(RepositoryError):
    """Transport or pool failure (timeout, exhaustion, I/O). Safe to retry."""

    default_error_code = "connection"
    retryable = True


__all__ = [
    "RepositoryError",
    "ValidationError",
    "DuplicateError",
    "NotFoundError",
    "QueryError",
    "StoreConnectionError",
]
