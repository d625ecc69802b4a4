"""Explicit session context for permission evaluation.

The session is passed into the guard and the derivation function instead
of being read from ambient state, so every evaluation is deterministic
and testable without a running application.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from orange_pages.core.permissions.derivation import derive_capabilities
from orange_pages.core.permissions.models import (
    DEFAULT_CAPABILITIES,
    CapabilitySet,
    MemberTier,
    TeamRole,
)


@dataclass(frozen=True, slots=True)
class OrganizationMembership:
    """A user's team membership in one organization."""

    organization_id: str
    team_role: TeamRole | None
    tier: MemberTier | None = None
    membership_active: bool = False
    is_primary: bool = False
    organization_name: str | None = None

    @property
    def capabilities(self) -> CapabilitySet:
        return derive_capabilities(self.team_role, self.tier, self.membership_active)


@dataclass(frozen=True, slots=True)
class SessionState:
    """Resolved identity plus the organization it is acting for.

    Attributes:
        user_id: Authenticated user id, None for anonymous sessions
        is_super_admin: Platform administrator flag
        memberships: Every team membership of the user
        active_organization_id: Selected organization, if any
        is_loading: True while the identity source is still resolving
    """

    user_id: str | None = None
    is_super_admin: bool = False
    memberships: tuple[OrganizationMembership, ...] = field(default_factory=tuple)
    active_organization_id: str | None = None
    is_loading: bool = False

    @property
    def active_membership(self) -> OrganizationMembership | None:
        if self.active_organization_id is None:
            return None
        for membership in self.memberships:
            if membership.organization_id == self.active_organization_id:
                return membership
        return None

    @property
    def capabilities(self) -> CapabilitySet:
        """Capabilities for the active organization, recomputed on each access."""
        membership = self.active_membership
        if membership is None:
            return DEFAULT_CAPABILITIES
        return membership.capabilities


LOADING_SESSION = SessionState(is_loading=True)


def select_active_organization(
    memberships: Sequence[OrganizationMembership],
    preferred_id: str | None = None,
) -> str | None:
    """Pick the organization a session acts for.

    A preferred organization is honoured only while the user still
    belongs to it. Otherwise the primary membership wins, then the
    first membership.

    Args:
        memberships: The user's team memberships
        preferred_id: Previously selected organization id, if any

    Returns:
        The selected organization id, or None without memberships
    """
    if preferred_id and any(m.organization_id == preferred_id for m in memberships):
        return preferred_id

    if not memberships:
        return None

    for membership in memberships:
        if membership.is_primary:
            return membership.organization_id

    return memberships[0].organization_id
