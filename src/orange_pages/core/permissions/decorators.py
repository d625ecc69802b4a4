"""Guard decorators for route protection.

These decorators run the access guard against the request session and
translate its decision into the HTTP response:

- pending  -> SessionPendingError (401)
- redirect -> AccessRedirectError (403 with ``redirect_to``)
- allow    -> the route runs

Decorated routes must accept the session as a ``session`` keyword
argument (``session: CurrentSession``).
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar, cast

import structlog

from orange_pages.core.errors import AccessRedirectError, SessionPendingError
from orange_pages.core.permissions.guard import (
    GuardDecision,
    GuardOutcome,
    check_access,
    check_admin_access,
)
from orange_pages.core.permissions.models import Capability
from orange_pages.core.session.context import SessionState


logger = structlog.get_logger()

P = ParamSpec("P")
R = TypeVar("R")


def _enforce(decision: GuardDecision, guarded: str) -> None:
    if decision.outcome is GuardOutcome.PENDING:
        raise SessionPendingError()

    if decision.outcome is GuardOutcome.REDIRECT:
        target = cast("str", decision.target)
        logger.info("access_redirected", guarded=guarded, redirect_to=target)
        raise AccessRedirectError(target, details={"required": guarded})


def require_capability(
    capability: Capability,
    *,
    redirect_to: str | None = None,
    require_company: bool = True,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator that requires a capability to enter a route.

    Usage:
        @router.get("/team")
        @require_capability(Capability.CAN_MANAGE_TEAM)
        async def team(session: CurrentSession):
            ...

    Args:
        capability: The capability the route requires
        redirect_to: Redirect target for users lacking the capability
        require_company: Require an active organization selection

    Returns:
        Decorator function
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            session = cast("SessionState | None", kwargs.get("session"))
            decision = check_access(
                session,
                capability,
                redirect_to=redirect_to,
                require_company=require_company,
            )
            _enforce(decision, capability.value)
            return await func(*args, **kwargs)

        return wrapper

    return decorator


def require_super_admin() -> Callable[
    [Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]
]:
    """Decorator that restricts a route to platform super admins.

    Usage:
        @router.get("/admin/overview")
        @require_super_admin()
        async def overview(session: CurrentSession):
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            session = cast("SessionState | None", kwargs.get("session"))
            _enforce(check_admin_access(session), "super_admin")
            return await func(*args, **kwargs)

        return wrapper

    return decorator
