"""
Domain error taxonomy.

Every error raised deliberately by the service layer derives from
``JokebookError`` and carries the message that is safe to show to API
clients together with the HTTP status it maps to.  The exception
handlers registered in ``main.create_app`` turn them into
``{"error": message}`` responses.
"""


class JokebookError(Exception):
    """Base exception for jokebook-specific errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(JokebookError):
    """Raised when a write request is missing or has malformed fields."""

    status_code = 400


class UpstreamError(JokebookError):
    """Raised when the joke provider is unreachable or answers with an error."""


class StorageError(JokebookError):
    """Raised when reading from or writing to the document store fails."""


class StartupError(JokebookError):
    """Raised for fatal boot conditions (missing configuration, no storage)."""
