"""
Application error taxonomy.

Errors carry the HTTP status they should be rendered with.
No framework imports allowed; the mapping to responses lives in handlers.
"""

DEFAULT_ERROR_STATUS = 500


class AppError(Exception):
    """Base error carrying a human-readable message and an HTTP status code."""

    def __init__(self, message: str, status_code: int = DEFAULT_ERROR_STATUS) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    @property
    def status(self) -> int:
        return self.status_code


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"{resource} not found", 404)
        self.resource = resource
