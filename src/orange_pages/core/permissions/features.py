"""Dashboard feature flags derived from a capability set.

UI surfaces use these to decide which sections to show, which to render
as locked previews and when to surface membership upsells.
"""

from dataclasses import dataclass

from orange_pages.core.permissions.models import CapabilitySet


@dataclass(frozen=True, slots=True)
class FeatureAccess:
    # Dashboard sections
    show_member_dashboard: bool
    show_event_benefits: bool
    show_member_resources: bool
    show_team_management: bool

    # Actions
    can_claim_tickets: bool
    can_view_ticket_allocation: bool

    # Upsell triggers
    show_upgrade_prompts: bool
    show_membership_cta: bool


def feature_access(
    capabilities: CapabilitySet,
    *,
    is_super_admin: bool = False,
) -> FeatureAccess:
    """Compute dashboard feature flags.

    Platform super admins see everything. Active members see member
    sections. Everyone else gets locked previews and upsell prompts,
    while team management still follows ``can_manage_team``.
    """
    if is_super_admin:
        return FeatureAccess(
            show_member_dashboard=True,
            show_event_benefits=True,
            show_member_resources=True,
            show_team_management=True,
            can_claim_tickets=True,
            can_view_ticket_allocation=True,
            show_upgrade_prompts=False,
            show_membership_cta=False,
        )

    if capabilities.is_member:
        return FeatureAccess(
            show_member_dashboard=True,
            show_event_benefits=True,
            show_member_resources=True,
            show_team_management=capabilities.can_manage_team,
            can_claim_tickets=capabilities.can_claim_tickets,
            can_view_ticket_allocation=True,
            show_upgrade_prompts=False,
            show_membership_cta=False,
        )

    return FeatureAccess(
        show_member_dashboard=False,
        show_event_benefits=False,
        show_member_resources=False,
        show_team_management=capabilities.can_manage_team,
        can_claim_tickets=False,
        can_view_ticket_allocation=False,
        show_upgrade_prompts=True,
        show_membership_cta=True,
    )
