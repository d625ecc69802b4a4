"""Role and tier based permission model for the member dashboard."""

from orange_pages.core.permissions.derivation import (
    derive_capabilities,
    has_team_access,
    is_company_admin,
)
from orange_pages.core.permissions.features import FeatureAccess, feature_access
from orange_pages.core.permissions.guard import (
    ALLOW,
    PENDING,
    GuardDecision,
    GuardOutcome,
    check_access,
    check_admin_access,
    evaluate,
    redirect,
)
from orange_pages.core.permissions.models import (
    ADMIN_CAPABILITIES,
    DEFAULT_CAPABILITIES,
    MEMBER_BENEFITS,
    TIER_TEAM_LIMITS,
    Capability,
    CapabilitySet,
    MemberTier,
    TeamRole,
    can_invite_member,
    capability_label,
    max_team_members,
    parse_member_tier,
    parse_team_role,
    role_display_name,
    tier_display_name,
)


__all__ = [
    "ADMIN_CAPABILITIES",
    "ALLOW",
    "DEFAULT_CAPABILITIES",
    "MEMBER_BENEFITS",
    "PENDING",
    "Capability",
    "CapabilitySet",
    "FeatureAccess",
    "GuardDecision",
    "GuardOutcome",
    "MemberTier",
    "TIER_TEAM_LIMITS",
    "TeamRole",
    "can_invite_member",
    "capability_label",
    "check_access",
    "check_admin_access",
    "derive_capabilities",
    "evaluate",
    "feature_access",
    "has_team_access",
    "is_company_admin",
    "max_team_members",
    "parse_member_tier",
    "parse_team_role",
    "redirect",
    "role_display_name",
    "tier_display_name",
]
