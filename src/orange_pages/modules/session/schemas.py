"""Pydantic schemas for session permission queries.

Responses use camelCase field names, the shape web clients consume.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from orange_pages.core.permissions import (
    GuardOutcome,
    MemberTier,
    TeamRole,
    capability_label,
    max_team_members,
    role_display_name,
    tier_display_name,
)
from orange_pages.core.session import OrganizationMembership


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CapabilitySetResponse(CamelModel):
    """Capabilities of the session in its active organization."""

    is_member: bool
    team_role: TeamRole | None
    tier: MemberTier | None

    can_claim_tickets: bool
    can_register_events: bool
    can_apply_speaking: bool
    can_rsvp_dinners: bool
    can_request_resources: bool

    can_edit_profile: bool
    can_manage_team: bool
    can_manage_leadership: bool


class GuardDecisionResponse(CamelModel):
    """Access guard decision for the routing layer.

    ``target`` is set only for redirects.
    """

    outcome: GuardOutcome
    target: str | None = None


class FeatureAccessResponse(CamelModel):
    show_member_dashboard: bool
    show_event_benefits: bool
    show_member_resources: bool
    show_team_management: bool
    can_claim_tickets: bool
    can_view_ticket_allocation: bool
    show_upgrade_prompts: bool
    show_membership_cta: bool


class OrganizationResponse(CamelModel):
    """One of the user's organizations with display-ready labels."""

    organization_id: str
    organization_name: str | None
    team_role: TeamRole | None
    team_role_display: str
    tier: MemberTier | None
    tier_display: str
    membership_active: bool
    is_primary: bool
    is_active: bool
    max_team_members: int | None
    capabilities: list[str]

    @classmethod
    def from_membership(
        cls,
        membership: OrganizationMembership,
        active_organization_id: str | None,
    ) -> "OrganizationResponse":
        capabilities = membership.capabilities
        return cls(
            organization_id=membership.organization_id,
            organization_name=membership.organization_name,
            team_role=membership.team_role,
            team_role_display=role_display_name(membership.team_role),
            tier=capabilities.tier,
            tier_display=(
                tier_display_name(capabilities.tier)
                if membership.membership_active
                else "No membership"
            ),
            membership_active=membership.membership_active,
            is_primary=membership.is_primary,
            is_active=membership.organization_id == active_organization_id,
            max_team_members=max_team_members(capabilities.tier),
            capabilities=[capability_label(c) for c in capabilities.granted()],
        )


class OrganizationsResponse(CamelModel):
    active_organization_id: str | None
    organizations: list[OrganizationResponse]
