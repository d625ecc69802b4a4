"""Derive capability sets from team role and membership tier.

Permissions are computed, never stored: a CapabilitySet is a pure
function of (team role, tier, active membership). Organizational
authority comes from the role alone; paid-membership perks require an
active membership.
"""

from orange_pages.core.permissions.models import (
    DEFAULT_CAPABILITIES,
    CapabilitySet,
    MemberTier,
    TeamRole,
)


ADMIN_ROLES = frozenset({TeamRole.OWNER, TeamRole.ADMIN})


def is_company_admin(team_role: TeamRole | None) -> bool:
    """Check if a role has admin-level access to its organization."""
    return team_role in ADMIN_ROLES


def has_team_access(team_role: TeamRole | None) -> bool:
    """Check if the user belongs to the organization's team at all."""
    return team_role is not None


def derive_capabilities(
    team_role: TeamRole | None,
    tier: MemberTier | None,
    is_active_member: bool,
) -> CapabilitySet:
    """Map a role, tier and membership flag to a CapabilitySet.

    Total and side-effect free. Admin capabilities are decided before
    membership activity, so an admin of a lapsed organization keeps
    management access but loses member benefits.

    Args:
        team_role: Role within the organization, None when not on the team
        tier: Membership tier, None when there is none
        is_active_member: Whether the organization's membership is active

    Returns:
        A new CapabilitySet
    """
    if team_role is None:
        return DEFAULT_CAPABILITIES

    is_admin = is_company_admin(team_role)

    if not is_active_member:
        return CapabilitySet(
            is_member=False,
            team_role=team_role,
            tier=None,
            can_edit_profile=is_admin,
            can_manage_team=is_admin,
            can_manage_leadership=is_admin,
        )

    return CapabilitySet(
        is_member=True,
        team_role=team_role,
        tier=tier,
        can_claim_tickets=True,
        can_register_events=True,
        can_apply_speaking=True,
        can_rsvp_dinners=True,
        can_request_resources=True,
        can_edit_profile=is_admin,
        can_manage_team=is_admin,
        can_manage_leadership=is_admin,
    )
