"""Unit tests for capability derivation.

These tests verify derive_capabilities including:
- The no-role base case
- Separation of role authority from membership perks
- Tier propagation only for active memberships
"""

import pytest

from orange_pages.core.permissions import (
    ADMIN_CAPABILITIES,
    DEFAULT_CAPABILITIES,
    MEMBER_BENEFITS,
    CapabilitySet,
    MemberTier,
    TeamRole,
    derive_capabilities,
    has_team_access,
    is_company_admin,
)


pytestmark = pytest.mark.unit

ALL_TIERS = [*MemberTier, None]
ADMIN_ROLES = [TeamRole.OWNER, TeamRole.ADMIN]


class TestNoTeamRole:
    """Users without a team role get nothing."""

    @pytest.mark.parametrize("tier", ALL_TIERS)
    @pytest.mark.parametrize("is_active_member", [True, False])
    def test_no_role_is_default(self, tier, is_active_member):
        """Without a role every capability is false, whatever the tier."""
        capabilities = derive_capabilities(None, tier, is_active_member)

        assert capabilities == DEFAULT_CAPABILITIES
        assert capabilities.team_role is None
        assert capabilities.tier is None
        assert capabilities.granted() == []


class TestInactiveMembership:
    """Lapsed or free organizations keep authority but lose perks."""

    @pytest.mark.parametrize("tier", ALL_TIERS)
    def test_owner_keeps_management(self, tier):
        capabilities = derive_capabilities(TeamRole.OWNER, tier, False)

        assert capabilities.can_manage_team is True
        assert capabilities.can_claim_tickets is False

    @pytest.mark.parametrize("tier", ALL_TIERS)
    def test_member_has_no_admin_capabilities(self, tier):
        capabilities = derive_capabilities(TeamRole.MEMBER, tier, False)

        assert capabilities.can_edit_profile is False
        assert capabilities.can_manage_team is False
        assert capabilities.can_manage_leadership is False

    @pytest.mark.parametrize("role", list(TeamRole))
    @pytest.mark.parametrize("tier", ALL_TIERS)
    def test_benefits_and_tier_cleared(self, role, tier):
        """Inactive membership clears the tier and every benefit, even for owners."""
        capabilities = derive_capabilities(role, tier, False)

        assert capabilities.is_member is False
        assert capabilities.tier is None
        assert capabilities.team_role is role
        assert not any(capabilities.has(c) for c in MEMBER_BENEFITS)

    def test_admin_silver_inactive(self):
        """A lapsed silver admin matches the documented record exactly."""
        assert derive_capabilities(TeamRole.ADMIN, MemberTier.SILVER, False) == (
            CapabilitySet(
                is_member=False,
                team_role=TeamRole.ADMIN,
                tier=None,
                can_claim_tickets=False,
                can_register_events=False,
                can_apply_speaking=False,
                can_rsvp_dinners=False,
                can_request_resources=False,
                can_edit_profile=True,
                can_manage_team=True,
                can_manage_leadership=True,
            )
        )


class TestActiveMembership:
    """Active members get every benefit; admins additionally manage."""

    @pytest.mark.parametrize("role", ADMIN_ROLES)
    @pytest.mark.parametrize("tier", ALL_TIERS)
    def test_tier_passes_through(self, role, tier):
        assert derive_capabilities(role, tier, True).tier == tier

    @pytest.mark.parametrize("role", list(TeamRole))
    def test_all_benefits_granted(self, role):
        capabilities = derive_capabilities(role, MemberTier.PLATINUM, True)

        assert capabilities.is_member is True
        assert all(capabilities.has(c) for c in MEMBER_BENEFITS)

    @pytest.mark.parametrize("role", ADMIN_ROLES)
    def test_admin_roles_manage(self, role):
        capabilities = derive_capabilities(role, MemberTier.SPONSOR, True)

        assert all(capabilities.has(c) for c in ADMIN_CAPABILITIES)

    def test_member_gold_active(self):
        """An active gold member matches the documented record exactly."""
        assert derive_capabilities(TeamRole.MEMBER, MemberTier.GOLD, True) == (
            CapabilitySet(
                is_member=True,
                team_role=TeamRole.MEMBER,
                tier=MemberTier.GOLD,
                can_claim_tickets=True,
                can_register_events=True,
                can_apply_speaking=True,
                can_rsvp_dinners=True,
                can_request_resources=True,
                can_edit_profile=False,
                can_manage_team=False,
                can_manage_leadership=False,
            )
        )

    def test_active_without_tier(self):
        """An active membership with no recorded tier still grants benefits."""
        capabilities = derive_capabilities(TeamRole.MEMBER, None, True)

        assert capabilities.is_member is True
        assert capabilities.tier is None
        assert capabilities.can_claim_tickets is True


class TestRoleHelpers:
    @pytest.mark.parametrize(
        ("role", "expected"),
        [
            (TeamRole.OWNER, True),
            (TeamRole.ADMIN, True),
            (TeamRole.MEMBER, False),
            (None, False),
        ],
    )
    def test_is_company_admin(self, role, expected):
        assert is_company_admin(role) is expected

    @pytest.mark.parametrize(
        ("role", "expected"),
        [(TeamRole.OWNER, True), (TeamRole.MEMBER, True), (None, False)],
    )
    def test_has_team_access(self, role, expected):
        assert has_team_access(role) is expected
