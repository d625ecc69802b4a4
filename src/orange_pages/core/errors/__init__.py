"""Error handling module with RFC 7807 Problem Details."""

from orange_pages.core.errors.exceptions import (
    AccessRedirectError,
    AppException,
    ForbiddenError,
    SessionPendingError,
    UnauthorizedError,
)
from orange_pages.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    "AccessRedirectError",
    "AppException",
    "FieldError",
    "ForbiddenError",
    "ProblemDetail",
    "SessionPendingError",
    "UnauthorizedError",
    "register_exception_handlers",
]
