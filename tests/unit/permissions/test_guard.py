"""Unit tests for the access guard.

These tests verify check_access, evaluate and check_admin_access including:
- Pending while the session resolves
- The company requirement and its fixed fallback
- Capability checks and redirect targets
"""

import pytest

from orange_pages.core.permissions import (
    ALLOW,
    DEFAULT_CAPABILITIES,
    PENDING,
    Capability,
    CapabilitySet,
    GuardOutcome,
    MemberTier,
    TeamRole,
    check_access,
    check_admin_access,
    derive_capabilities,
    evaluate,
    redirect,
)
from orange_pages.core.session import LOADING_SESSION, SessionState
from tests.factories import OrganizationMembershipFactory, build_session


pytestmark = pytest.mark.unit


class TestPending:
    @pytest.mark.parametrize("capability", list(Capability))
    def test_no_session_is_pending(self, capability):
        assert check_access(None, capability) == PENDING

    def test_loading_session_is_pending(self):
        decision = check_access(LOADING_SESSION, Capability.CAN_CLAIM_TICKETS)

        assert decision.is_pending
        assert decision.target is None

    def test_loading_wins_over_missing_company(self):
        """Nothing is decided until the session has resolved."""
        decision = check_access(
            LOADING_SESSION, "can_manage_team", redirect_to="/elsewhere"
        )

        assert decision.outcome is GuardOutcome.PENDING


class TestCompanyRequirement:
    def test_no_active_company_redirects_to_dashboard(self):
        session = SessionState(user_id="user-1")

        assert check_access(session, Capability.CAN_CLAIM_TICKETS) == redirect(
            "/dashboard"
        )

    def test_fallback_ignores_redirect_to(self):
        session = SessionState(user_id="user-1")

        decision = check_access(
            session, Capability.CAN_MANAGE_TEAM, redirect_to="/dashboard/upgrade"
        )

        assert decision.target == "/dashboard"

    def test_company_not_required(self):
        """Without an organization the default set denies, so the target applies."""
        session = SessionState(user_id="user-1")

        decision = check_access(
            session,
            Capability.CAN_CLAIM_TICKETS,
            redirect_to="/dashboard/upgrade",
            require_company=False,
        )

        assert decision == redirect("/dashboard/upgrade")


class TestEvaluate:
    """Guard decisions from a capability set and the company flag."""

    @pytest.fixture
    def owner_capabilities(self) -> CapabilitySet:
        return derive_capabilities(TeamRole.OWNER, MemberTier.GOLD, True)

    def test_unloaded_capabilities_are_pending(self):
        decision = evaluate(None, Capability.CAN_MANAGE_TEAM, has_company=True)

        assert decision == PENDING

    @pytest.mark.parametrize("capability", list(Capability))
    def test_missing_company_redirects_even_when_granted(
        self, owner_capabilities, capability
    ):
        assert owner_capabilities.has(capability)

        decision = evaluate(
            owner_capabilities,
            capability,
            has_company=False,
            redirect_to="/dashboard/company-profile",
        )

        assert decision == redirect("/dashboard")

    def test_granted_without_company_requirement(self, owner_capabilities):
        decision = evaluate(
            owner_capabilities,
            Capability.CAN_MANAGE_TEAM,
            has_company=False,
            require_company=False,
        )

        assert decision == ALLOW

    def test_granted_with_company(self, owner_capabilities):
        decision = evaluate(
            owner_capabilities, "canManageLeadership", has_company=True
        )

        assert decision == ALLOW

    def test_denied_uses_redirect_target(self):
        decision = evaluate(
            DEFAULT_CAPABILITIES,
            Capability.CAN_CLAIM_TICKETS,
            has_company=True,
            redirect_to="/dashboard/upgrade",
        )

        assert decision == redirect("/dashboard/upgrade")

    def test_empty_organization_id_counts_as_missing(self):
        """A session acting for a blank organization id has no company."""
        membership = OrganizationMembershipFactory.build(
            organization_id="", team_role=TeamRole.OWNER
        )
        session = build_session(membership, active_organization_id="")

        decision = check_access(
            session, Capability.CAN_MANAGE_TEAM, redirect_to="/elsewhere"
        )

        assert membership.capabilities.can_manage_team is True
        assert decision == redirect("/dashboard")


class TestCapabilityCheck:
    def test_granted_capability_allows(self):
        session = build_session(OrganizationMembershipFactory.build())

        assert check_access(session, Capability.CAN_CLAIM_TICKETS) == ALLOW

    def test_denied_capability_redirects(self):
        session = build_session(OrganizationMembershipFactory.build())

        decision = check_access(
            session,
            Capability.CAN_MANAGE_TEAM,
            redirect_to="/dashboard/company-profile",
        )

        assert decision.outcome is GuardOutcome.REDIRECT
        assert decision.target == "/dashboard/company-profile"

    def test_denied_without_target_uses_dashboard(self):
        session = build_session(OrganizationMembershipFactory.build())

        assert check_access(session, "can_manage_leadership") == redirect("/dashboard")

    def test_lapsed_owner_manages_but_gets_no_tickets(self):
        membership = OrganizationMembershipFactory.build(
            team_role=TeamRole.OWNER,
            tier=MemberTier.PLATINUM,
            membership_active=False,
        )
        session = build_session(membership)

        assert check_access(session, Capability.CAN_MANAGE_TEAM).is_allowed
        assert not check_access(session, Capability.CAN_CLAIM_TICKETS).is_allowed

    def test_camel_case_name(self):
        membership = OrganizationMembershipFactory.build(team_role=TeamRole.ADMIN)
        session = build_session(membership)

        assert check_access(session, "canEditProfile") == ALLOW

    def test_unknown_capability_redirects(self):
        membership = OrganizationMembershipFactory.build(team_role=TeamRole.OWNER)
        session = build_session(membership)

        assert check_access(session, "can_launch_rockets") == redirect("/dashboard")

    def test_uses_active_organization_only(self):
        """Capabilities from other memberships never leak into the active one."""
        owned = OrganizationMembershipFactory.build(team_role=TeamRole.OWNER)
        joined = OrganizationMembershipFactory.build(team_role=TeamRole.MEMBER)
        session = build_session(
            owned, joined, active_organization_id=joined.organization_id
        )

        assert check_access(session, Capability.CAN_MANAGE_TEAM) == redirect(
            "/dashboard"
        )

    def test_does_not_mutate_session(self):
        session = build_session(OrganizationMembershipFactory.build())
        before = session.capabilities

        check_access(session, Capability.CAN_MANAGE_TEAM)

        assert session.capabilities == before


class TestAdminAccess:
    def test_pending(self):
        assert check_admin_access(None) == PENDING
        assert check_admin_access(LOADING_SESSION) == PENDING

    def test_anonymous_goes_to_login(self):
        assert check_admin_access(SessionState()) == redirect("/login")

    def test_regular_user_goes_to_login(self):
        session = build_session(
            OrganizationMembershipFactory.build(team_role=TeamRole.OWNER)
        )

        assert check_admin_access(session) == redirect("/login")

    def test_super_admin_allowed(self):
        session = build_session(is_super_admin=True)

        assert check_admin_access(session) == ALLOW
