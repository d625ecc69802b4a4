"""Session resolution: identity, memberships and the active organization."""

from orange_pages.core.session.context import (
    LOADING_SESSION,
    OrganizationMembership,
    SessionState,
    select_active_organization,
)
from orange_pages.core.session.dependencies import (
    CurrentSession,
    ResolvedSession,
    get_resolved_session,
    get_session,
)
from orange_pages.core.session.middleware import (
    RequestIdMiddleware,
    SessionContextMiddleware,
)
from orange_pages.core.session.tokens import (
    MembershipClaim,
    SessionClaims,
    create_session_token,
    decode_session_token,
    session_from_claims,
)


__all__ = [
    "LOADING_SESSION",
    "CurrentSession",
    "MembershipClaim",
    "OrganizationMembership",
    "RequestIdMiddleware",
    "ResolvedSession",
    "SessionClaims",
    "SessionContextMiddleware",
    "SessionState",
    "create_session_token",
    "decode_session_token",
    "get_resolved_session",
    "get_session",
    "select_active_organization",
    "session_from_claims",
]
