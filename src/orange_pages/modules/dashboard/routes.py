"""Member dashboard endpoints.

Protected views are gated with ``@require_capability``; the navigation
endpoint evaluates the same guard for every entry so clients can hide
what the user cannot open.
"""

from typing import NamedTuple

from fastapi import APIRouter

from orange_pages.core.constants import DASHBOARD_PATH
from orange_pages.core.errors import AccessRedirectError, SessionPendingError
from orange_pages.core.permissions import (
    Capability,
    check_access,
    role_display_name,
    tier_display_name,
)
from orange_pages.core.permissions.decorators import require_capability
from orange_pages.core.session import CurrentSession, SessionState
from orange_pages.modules.dashboard.schemas import (
    DashboardViewResponse,
    NavigationEntry,
    NavigationResponse,
)


router = APIRouter(prefix="/dashboard", tags=["dashboard"])

COMPANY_PROFILE_PATH = f"{DASHBOARD_PATH}/company-profile"


class DashboardView(NamedTuple):
    key: str
    title: str
    path: str
    capability: Capability | None


DASHBOARD_VIEWS: tuple[DashboardView, ...] = (
    DashboardView("overview", "Dashboard", DASHBOARD_PATH, None),
    DashboardView(
        "company-profile",
        "Company Profile",
        COMPANY_PROFILE_PATH,
        Capability.CAN_EDIT_PROFILE,
    ),
    DashboardView(
        "leadership",
        "Leadership",
        f"{COMPANY_PROFILE_PATH}/leadership",
        Capability.CAN_MANAGE_LEADERSHIP,
    ),
    DashboardView(
        "team",
        "Team",
        f"{DASHBOARD_PATH}/team",
        Capability.CAN_MANAGE_TEAM,
    ),
)


def view_context(view: str, session: SessionState | None) -> DashboardViewResponse:
    """Organization context for a view the guard has let through.

    Raises:
        SessionPendingError: If the session is unresolved
        AccessRedirectError: If the session acts for no known organization
    """
    if session is None:
        raise SessionPendingError()

    membership = session.active_membership
    if membership is None:
        raise AccessRedirectError(DASHBOARD_PATH)

    capabilities = membership.capabilities
    return DashboardViewResponse(
        view=view,
        organization_id=membership.organization_id,
        organization_name=membership.organization_name,
        team_role=role_display_name(capabilities.team_role),
        tier=tier_display_name(capabilities.tier),
    )


@router.get(
    "/navigation",
    response_model=NavigationResponse,
    summary="Dashboard navigation for the current session",
)
async def get_navigation(session: CurrentSession) -> NavigationResponse:
    entries = [
        NavigationEntry(
            key=view.key,
            title=view.title,
            path=view.path,
            capability=view.capability,
            enabled=(
                view.capability is None
                or check_access(session, view.capability).is_allowed
            ),
        )
        for view in DASHBOARD_VIEWS
    ]
    return NavigationResponse(
        active_organization_id=session.active_organization_id if session else None,
        entries=entries,
    )


@router.get(
    "/company-profile",
    response_model=DashboardViewResponse,
    summary="Company profile editor",
)
@require_capability(Capability.CAN_EDIT_PROFILE)
async def company_profile(session: CurrentSession) -> DashboardViewResponse:
    return view_context("company-profile", session)


@router.get(
    "/company-profile/leadership",
    response_model=DashboardViewResponse,
    summary="Leadership team editor",
)
@require_capability(
    Capability.CAN_MANAGE_LEADERSHIP,
    redirect_to=COMPANY_PROFILE_PATH,
)
async def leadership(session: CurrentSession) -> DashboardViewResponse:
    return view_context("leadership", session)


@router.get(
    "/team",
    response_model=DashboardViewResponse,
    summary="Team management",
)
@require_capability(Capability.CAN_MANAGE_TEAM)
async def team(session: CurrentSession) -> DashboardViewResponse:
    return view_context("team", session)
