"""Test factories for generating test data."""

from tests.factories.session import OrganizationMembershipFactory, build_session


__all__ = [
    "OrganizationMembershipFactory",
    "build_session",
]
