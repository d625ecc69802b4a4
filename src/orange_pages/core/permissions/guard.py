"""Access guard for protected dashboard views.

Every evaluation maps its inputs to exactly one of three decisions:

- ``pending``: the session is still resolving; not a decision, callers
  must show a loading state and evaluate again once inputs arrive
- ``allow``: render the protected view
- ``redirect``: hand ``target`` to the routing layer

The guard reads only what it is given, never mutates it and never raises.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from orange_pages.core.constants import DASHBOARD_PATH, LOGIN_PATH
from orange_pages.core.permissions.models import Capability, CapabilitySet


if TYPE_CHECKING:
    from orange_pages.core.session.context import SessionState


class GuardOutcome(str, Enum):
    PENDING = "pending"
    ALLOW = "allow"
    REDIRECT = "redirect"


@dataclass(frozen=True, slots=True)
class GuardDecision:
    """Result of one guard evaluation."""

    outcome: GuardOutcome
    target: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.outcome is GuardOutcome.PENDING

    @property
    def is_allowed(self) -> bool:
        return self.outcome is GuardOutcome.ALLOW


PENDING = GuardDecision(GuardOutcome.PENDING)
ALLOW = GuardDecision(GuardOutcome.ALLOW)


def redirect(target: str) -> GuardDecision:
    return GuardDecision(GuardOutcome.REDIRECT, target)


def evaluate(
    capabilities: CapabilitySet | None,
    capability: Capability | str,
    *,
    has_company: bool,
    redirect_to: str | None = None,
    require_company: bool = True,
) -> GuardDecision:
    """Guard decision from a capability set and the organization context.

    Args:
        capabilities: Derived capability set, None while inputs are loading
        capability: Capability the view requires (enum or name)
        has_company: Whether an organization is selected
        redirect_to: Where to send users lacking the capability
        require_company: Require an active organization selection

    Returns:
        PENDING, ALLOW or a redirect decision
    """
    if capabilities is None:
        return PENDING

    if require_company and not has_company:
        # Fixed fallback, independent of the requested capability
        return redirect(DASHBOARD_PATH)

    if capabilities.has(capability):
        return ALLOW

    return redirect(redirect_to or DASHBOARD_PATH)


def check_access(
    session: "SessionState | None",
    capability: Capability | str,
    *,
    redirect_to: str | None = None,
    require_company: bool = True,
) -> GuardDecision:
    """Decide whether a session may enter a view gated by ``capability``.

    Args:
        session: Resolved session state, None while it is still loading
        capability: Capability the view requires (enum or name)
        redirect_to: Where to send users lacking the capability
        require_company: Require an active organization selection

    Returns:
        PENDING, ALLOW or a redirect decision
    """
    if session is None or session.is_loading:
        return PENDING

    return evaluate(
        session.capabilities,
        capability,
        has_company=bool(session.active_organization_id),
        redirect_to=redirect_to,
        require_company=require_company,
    )


def check_admin_access(session: "SessionState | None") -> GuardDecision:
    """Gate platform administration to super admins.

    Users without a resolved identity or without super-admin standing
    are sent to the login page.
    """
    if session is None or session.is_loading:
        return PENDING

    if not session.user_id or not session.is_super_admin:
        return redirect(LOGIN_PATH)

    return ALLOW
