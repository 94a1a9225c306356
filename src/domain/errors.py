"""Error taxonomy shared by the use cases and the API layer.

Every failure that crosses a request boundary is one of these. The API layer
maps them to JSON responses in ``src.infrastructure.api.error_handlers``.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorItem:
    msg: str
    param: str | None = None

    def as_dict(self) -> dict[str, str | None]:
        return {"msg": self.msg, "param": self.param}


class DomainError(Exception):
    status_code: int = 400

    def __init__(
        self,
        message: str,
        *,
        errors: list[ErrorItem] | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors if errors is not None else [ErrorItem(message)]
        if status_code is not None:
            self.status_code = status_code


class ValidationError(DomainError):
    """Malformed or missing input. Carries one item per violated rule."""

    status_code = 400

    def __init__(self, errors: list[ErrorItem]) -> None:
        message = "; ".join(item.msg for item in errors) or "Invalid request"
        super().__init__(message, errors=errors)


class AuthError(DomainError):
    """Missing, invalid or expired token (401) or bad credentials (400)."""

    status_code = 401


class ForbiddenError(DomainError):
    """Authenticated, but not allowed to touch this resource."""

    status_code = 401


class NotFoundError(DomainError):
    """Resource absent or identifier malformed.

    ``reason`` is ``"malformed_id"`` or ``"absent"``; both look the same to the
    client but are logged separately.
    """

    status_code = 404
    MALFORMED_ID = "malformed_id"
    ABSENT = "absent"

    def __init__(
        self,
        message: str,
        *,
        reason: str = ABSENT,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.reason = reason


class ConflictError(DomainError):
    """Duplicate registration, duplicate like, or unlike without a like."""

    status_code = 400


class UpstreamError(DomainError):
    """External gateway failure."""

    status_code = 400


class InternalError(DomainError):
    status_code = 500

    def __init__(self, message: str = "Server Error") -> None:
        super().__init__(message)
