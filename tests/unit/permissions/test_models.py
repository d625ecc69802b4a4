"""Unit tests for the capability vocabulary."""

import pytest

from orange_pages.core.permissions import (
    DEFAULT_CAPABILITIES,
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


pytestmark = pytest.mark.unit


class TestCapabilityNames:
    def test_camel_name(self):
        assert Capability.CAN_MANAGE_TEAM.camel_name == "canManageTeam"
        assert Capability.CAN_RSVP_DINNERS.camel_name == "canRsvpDinners"

    @pytest.mark.parametrize(
        "name",
        ["can_manage_team", "canManageTeam", " can_manage_team ", Capability.CAN_MANAGE_TEAM],
    )
    def test_from_name(self, name):
        assert Capability.from_name(name) is Capability.CAN_MANAGE_TEAM

    @pytest.mark.parametrize("name", ["can_fly", "", "is_member", "team_role", 42, None])
    def test_from_name_unknown(self, name):
        assert Capability.from_name(name) is None


class TestCapabilitySet:
    def test_default_is_all_false(self):
        assert DEFAULT_CAPABILITIES.is_member is False
        assert DEFAULT_CAPABILITIES.team_role is None
        assert DEFAULT_CAPABILITIES.tier is None
        assert not any(DEFAULT_CAPABILITIES.has(c) for c in Capability)

    def test_has_by_enum_and_name(self):
        capabilities = CapabilitySet(can_edit_profile=True)

        assert capabilities.has(Capability.CAN_EDIT_PROFILE) is True
        assert capabilities.has("can_edit_profile") is True
        assert capabilities.has("canEditProfile") is True
        assert capabilities.has("can_manage_team") is False

    def test_unknown_capability_is_denied(self):
        """Non-capability fields are never treated as grants."""
        capabilities = CapabilitySet(is_member=True, can_claim_tickets=True)

        assert capabilities.has("is_member") is False
        assert capabilities.has("can_do_anything") is False

    def test_granted_in_declaration_order(self):
        capabilities = CapabilitySet(can_manage_team=True, can_claim_tickets=True)

        assert capabilities.granted() == [
            Capability.CAN_CLAIM_TICKETS,
            Capability.CAN_MANAGE_TEAM,
        ]

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_CAPABILITIES.can_manage_team = True


class TestParsing:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("owner", TeamRole.OWNER),
            ("ADMIN", TeamRole.ADMIN),
            (" Member ", TeamRole.MEMBER),
            (TeamRole.OWNER, TeamRole.OWNER),
            ("none", None),
            ("", None),
            (None, None),
            ("superuser", None),
        ],
    )
    def test_parse_team_role(self, raw, expected):
        assert parse_team_role(raw) is expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("gold", MemberTier.GOLD),
            ("Chairman", MemberTier.CHAIRMAN),
            (MemberTier.SPONSOR, MemberTier.SPONSOR),
            ("None", None),
            (None, None),
            ("bronze", None),
        ],
    )
    def test_parse_member_tier(self, raw, expected):
        assert parse_member_tier(raw) is expected


class TestDisplayNames:
    @pytest.mark.parametrize(
        ("tier", "expected"),
        [
            (None, "Free"),
            (MemberTier.SILVER, "Silver"),
            (MemberTier.CHAIRMAN, "Chairman's Circle"),
            (MemberTier.SPONSOR, "Sponsor"),
        ],
    )
    def test_tier_display_name(self, tier, expected):
        assert tier_display_name(tier) == expected

    def test_role_display_name(self):
        assert role_display_name(TeamRole.OWNER) == "Owner"
        assert role_display_name(None) == "None"

    def test_every_capability_has_label(self):
        labels = {capability_label(c) for c in Capability}

        assert len(labels) == len(Capability)
        assert capability_label(Capability.CAN_CLAIM_TICKETS) == "Tickets"


class TestTeamLimits:
    @pytest.mark.parametrize(
        ("tier", "expected"),
        [
            (MemberTier.SILVER, 3),
            (MemberTier.GOLD, 5),
            (MemberTier.PLATINUM, 10),
            (MemberTier.CHAIRMAN, None),
            (MemberTier.EXECUTIVE, None),
            (MemberTier.SPONSOR, 0),
            (None, 0),
        ],
    )
    def test_max_team_members(self, tier, expected):
        assert max_team_members(tier) == expected

    def test_invite_below_limit(self):
        assert can_invite_member(MemberTier.GOLD, 4) is True
        assert can_invite_member(MemberTier.GOLD, 5) is False

    def test_unlimited_tier(self):
        assert can_invite_member(MemberTier.CHAIRMAN, 500) is True

    def test_no_tier_has_no_seats(self):
        assert can_invite_member(None, 0) is False
