"""Session tokens issued by the hosted auth provider.

The auth provider signs an HS256 access token whose custom claims carry
the user's team memberships. This module decodes those tokens into
validated claims and normalizes them into a SessionState; it also mints
equivalent tokens for local development and tests.
"""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from pydantic import BaseModel

from orange_pages.config import settings
from orange_pages.core.permissions.models import parse_member_tier, parse_team_role
from orange_pages.core.session.context import (
    OrganizationMembership,
    SessionState,
    select_active_organization,
)


class MembershipClaim(BaseModel):
    """One team membership as carried in the token."""

    organization_id: str
    team_role: str | None = None
    tier: str | None = None
    membership_active: bool = False
    is_primary: bool = False
    organization_name: str | None = None


class SessionClaims(BaseModel):
    """Data extracted from a session token.

    Attributes:
        user_id: The user's id (``sub`` claim)
        exp: Token expiration time
        is_super_admin: Platform administrator flag
        memberships: The user's team memberships
    """

    user_id: str
    exp: datetime
    is_super_admin: bool = False
    memberships: list[MembershipClaim] = []


def _membership_claim(membership: OrganizationMembership) -> dict[str, Any]:
    return {
        "organization_id": membership.organization_id,
        "team_role": membership.team_role.value if membership.team_role else None,
        "tier": membership.tier.value if membership.tier else None,
        "membership_active": membership.membership_active,
        "is_primary": membership.is_primary,
        "organization_name": membership.organization_name,
    }


def create_session_token(
    user_id: str,
    memberships: Sequence[OrganizationMembership] = (),
    *,
    is_super_admin: bool = False,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed session token.

    Args:
        user_id: The user's id
        memberships: Team memberships to embed
        is_super_admin: Platform administrator flag
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT
    """
    now = datetime.now(UTC)
    expire = now + (
        expires_delta or timedelta(minutes=settings.session_token_expire_minutes)
    )

    to_encode: dict[str, Any] = {
        "sub": user_id,
        "aud": settings.session_audience,
        "exp": expire,
        "iat": now,
        "is_super_admin": is_super_admin,
        "memberships": [_membership_claim(m) for m in memberships],
    }

    return jwt.encode(
        to_encode,
        settings.session_secret,
        algorithm=settings.session_algorithm,
    )


def decode_session_token(token: str) -> SessionClaims | None:
    """Decode and validate a session token.

    Returns:
        SessionClaims if valid, None if invalid, expired or malformed
    """
    try:
        payload = jwt.decode(
            token,
            settings.session_secret,
            algorithms=[settings.session_algorithm],
            audience=settings.session_audience,
        )

        user_id = payload.get("sub")
        exp = payload.get("exp")
        if not user_id or exp is None:
            return None

        return SessionClaims(
            user_id=str(user_id),
            exp=datetime.fromtimestamp(exp, tz=UTC),
            is_super_admin=bool(payload.get("is_super_admin", False)),
            memberships=payload.get("memberships") or [],
        )

    except (JWTError, ValueError, TypeError):
        return None


def session_from_claims(
    claims: SessionClaims,
    preferred_organization_id: str | None = None,
) -> SessionState:
    """Normalize decoded claims into a SessionState.

    Unrecognized roles and tiers become None so that downstream
    evaluation only ever sees the defined input domain.
    """
    memberships = tuple(
        OrganizationMembership(
            organization_id=claim.organization_id,
            team_role=parse_team_role(claim.team_role),
            tier=parse_member_tier(claim.tier),
            membership_active=claim.membership_active,
            is_primary=claim.is_primary,
            organization_name=claim.organization_name,
        )
        for claim in claims.memberships
    )

    return SessionState(
        user_id=claims.user_id,
        is_super_admin=claims.is_super_admin,
        memberships=memberships,
        active_organization_id=select_active_organization(
            memberships, preferred_organization_id
        ),
    )
