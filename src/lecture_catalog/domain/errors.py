"""Errors raised by the lecture catalog.

Every error carries a stable ``error_code``. The lecture service maps codes
to HTTP statuses (see ``entrypoints/http/exception_handlers.py``); the catalog
controller shows ``message`` to the user as its ``error`` text.
"""

from typing import Any


class DomainError(Exception):
    """Failure with a user-facing message and a machine-readable code."""

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        # Extra keys (field name, page, status code) travel with the error
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message, "code": self.error_code}
        payload.update(self.context)
        return payload


class ValidationError(DomainError):
    """
    Input rejected before it reached a repository or the remote source.

    ``errors`` holds one ``{"field", "message", "code"}`` entry per offending
    field, so an upload form can flag every blank field at once. Served as 422.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[dict[str, str]] | None = errors or None
        default = "Validation failed" if self.errors else "Validation error"
        super().__init__(message or default, **context)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class NotFoundError(DomainError):
    """A lecture or course that does not exist. Served as 404."""

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """A lecture with the same video URL already exists. Served as 409."""

    error_code: str = "CONFLICT"


class UnauthorizedError(DomainError):
    """Nobody is signed in for an action that credits a user. Served as 401."""

    error_code: str = "UNAUTHORIZED"


class SourceUnavailableError(DomainError):
    """
    The lecture source could not be reached or refused the request.

    Covers transport failures, backend errors and rejected credentials while
    fetching. Recoverable: the user retries explicitly. Served as 503.
    """

    error_code: str = "SOURCE_UNAVAILABLE"


class InternalError(DomainError):
    """Unexpected condition inside the catalog; logged for investigation. Served as 500."""

    error_code: str = "INTERNAL_ERROR"
