"""Domain exceptions for the application.

These exceptions are raised at the HTTP edge only. The permission
derivation and the access guard are total functions and never raise;
the route decorators translate their decisions into these errors, which
the exception handlers turn into RFC 7807 Problem Details responses.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid."""

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class SessionPendingError(UnauthorizedError):
    """Raised when a protected view is requested before a session resolved.

    This is the HTTP rendition of the guard's pending state: the caller
    has no decision yet and must establish a session before retrying.
    """

    message = "Session has not been resolved"
    error_code = "session_pending"


class ForbiddenError(AppException):
    """Raised when user lacks permission to access a resource.

    Example:
        raise ForbiddenError(
            "Platform administrators only",
            details={"required": "super_admin"}
        )
    """

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


class AccessRedirectError(ForbiddenError):
    """Raised when the access guard redirects away from a protected view.

    The target is exposed as ``redirect_to`` in the problem details and
    as the ``Location`` header so the routing layer can navigate.

    Example:
        raise AccessRedirectError("/dashboard", details={"capability": "can_manage_team"})
    """

    message = "Access denied, redirect required"
    error_code = "access_redirect"

    def __init__(
        self,
        redirect_to: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        details["redirect_to"] = redirect_to
        self.redirect_to = redirect_to
        super().__init__(message=message, details=details, **kwargs)
