"""Capability vocabulary for the member dashboard.

Defines WHAT a user can do: team roles, membership tiers, the named
capabilities and the immutable CapabilitySet derived from them. Nothing
here is persisted; capability sets are always recomputed from role and
tier (see ``derivation.py``).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog


logger = structlog.get_logger()


class TeamRole(str, Enum):
    """A user's standing within one organization."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"


class MemberTier(str, Enum):
    """Paid subscription level of an organization."""

    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    CHAIRMAN = "chairman"
    EXECUTIVE = "executive"
    INDUSTRY = "industry"
    PREMIER = "premier"
    SPONSOR = "sponsor"


class Capability(str, Enum):
    """Named boolean capabilities of a CapabilitySet."""

    # Member benefits (paid membership perks)
    CAN_CLAIM_TICKETS = "can_claim_tickets"
    CAN_REGISTER_EVENTS = "can_register_events"
    CAN_APPLY_SPEAKING = "can_apply_speaking"
    CAN_RSVP_DINNERS = "can_rsvp_dinners"
    CAN_REQUEST_RESOURCES = "can_request_resources"

    # Organizational authority (role-derived)
    CAN_EDIT_PROFILE = "can_edit_profile"
    CAN_MANAGE_TEAM = "can_manage_team"
    CAN_MANAGE_LEADERSHIP = "can_manage_leadership"

    @property
    def camel_name(self) -> str:
        """Name used by web clients, e.g. ``canManageTeam``."""
        head, *rest = self.value.split("_")
        return head + "".join(part.title() for part in rest)

    @classmethod
    def from_name(cls, name: "str | Capability") -> "Capability | None":
        """Resolve a snake_case or camelCase name; ``None`` if unknown."""
        if isinstance(name, Capability):
            return name
        if not isinstance(name, str):
            return None
        return _CAPABILITY_NAMES.get(name.strip())


MEMBER_BENEFITS: tuple[Capability, ...] = (
    Capability.CAN_CLAIM_TICKETS,
    Capability.CAN_REGISTER_EVENTS,
    Capability.CAN_APPLY_SPEAKING,
    Capability.CAN_RSVP_DINNERS,
    Capability.CAN_REQUEST_RESOURCES,
)

ADMIN_CAPABILITIES: tuple[Capability, ...] = (
    Capability.CAN_EDIT_PROFILE,
    Capability.CAN_MANAGE_TEAM,
    Capability.CAN_MANAGE_LEADERSHIP,
)

_CAPABILITY_NAMES: dict[str, Capability] = {
    **{c.value: c for c in Capability},
    **{c.camel_name: c for c in Capability},
}


@dataclass(frozen=True, slots=True)
class CapabilitySet:
    """The derived, per-evaluation record of what a user may do."""

    is_member: bool = False
    team_role: TeamRole | None = None
    tier: MemberTier | None = None

    can_claim_tickets: bool = False
    can_register_events: bool = False
    can_apply_speaking: bool = False
    can_rsvp_dinners: bool = False
    can_request_resources: bool = False

    can_edit_profile: bool = False
    can_manage_team: bool = False
    can_manage_leadership: bool = False

    def has(self, capability: "Capability | str") -> bool:
        """Look up a capability by enum or name. Unknown names are False."""
        resolved = Capability.from_name(capability)
        if resolved is None:
            return False
        return bool(getattr(self, resolved.value))

    def granted(self) -> list[Capability]:
        """Capabilities that are currently true, in declaration order."""
        return [c for c in Capability if getattr(self, c.value)]


# No-access state: used before data loads and when there is no team role
DEFAULT_CAPABILITIES = CapabilitySet()


def _normalize(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip().lower()


def parse_team_role(value: Any) -> TeamRole | None:
    """Normalize a raw upstream role value into a TeamRole or None."""
    if value is None or isinstance(value, TeamRole):
        return value
    raw = _normalize(value)
    if not raw or raw == "none":
        return None
    try:
        return TeamRole(raw)
    except ValueError:
        logger.warning("unknown_team_role", value=raw)
        return None


def parse_member_tier(value: Any) -> MemberTier | None:
    """Normalize a raw upstream tier value into a MemberTier or None."""
    if value is None or isinstance(value, MemberTier):
        return value
    raw = _normalize(value)
    if not raw or raw == "none":
        return None
    try:
        return MemberTier(raw)
    except ValueError:
        logger.warning("unknown_member_tier", value=raw)
        return None


TIER_DISPLAY_NAMES: dict[MemberTier, str] = {
    MemberTier.CHAIRMAN: "Chairman's Circle",
}

CAPABILITY_LABELS: dict[Capability, str] = {
    Capability.CAN_CLAIM_TICKETS: "Tickets",
    Capability.CAN_REGISTER_EVENTS: "Events",
    Capability.CAN_APPLY_SPEAKING: "Speaking",
    Capability.CAN_RSVP_DINNERS: "Dinners",
    Capability.CAN_REQUEST_RESOURCES: "Resources",
    Capability.CAN_EDIT_PROFILE: "Profile",
    Capability.CAN_MANAGE_TEAM: "Team",
    Capability.CAN_MANAGE_LEADERSHIP: "Leadership",
}


def tier_display_name(tier: MemberTier | None) -> str:
    """Human-readable tier name; organizations without a tier are "Free"."""
    if tier is None:
        return "Free"
    return TIER_DISPLAY_NAMES.get(tier, tier.value.title())


# Team seats per tier; None is unlimited. Tiers not listed get no seats.
TIER_TEAM_LIMITS: dict[MemberTier, int | None] = {
    MemberTier.SILVER: 3,
    MemberTier.GOLD: 5,
    MemberTier.PLATINUM: 10,
    MemberTier.CHAIRMAN: None,
    MemberTier.EXECUTIVE: None,
}


def max_team_members(tier: MemberTier | None) -> int | None:
    """Team seats included with a tier, None when unlimited."""
    if tier is None:
        return 0
    return TIER_TEAM_LIMITS.get(tier, 0)


def can_invite_member(tier: MemberTier | None, active_members: int) -> bool:
    """Check whether a team with ``active_members`` has a free seat."""
    limit = max_team_members(tier)
    return limit is None or active_members < limit


def role_display_name(role: TeamRole | None) -> str:
    if role is None:
        return "None"
    return role.value.title()


def capability_label(capability: Capability) -> str:
    return CAPABILITY_LABELS[capability]
