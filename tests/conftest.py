"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Callable, Sequence

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from orange_pages.core.constants import ORGANIZATION_HEADER
from orange_pages.core.session import OrganizationMembership, create_session_token
from orange_pages.main import create_app


AuthHeaders = Callable[..., dict[str, str]]


@pytest.fixture
def app() -> FastAPI:
    """Create test application instance."""
    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def auth_headers() -> AuthHeaders:
    """Build Authorization headers carrying a signed session token.

    Returns:
        Function taking the memberships to embed, plus optional
        ``user_id``, ``is_super_admin`` and preferred ``organization_id``
    """

    def _headers(
        memberships: Sequence[OrganizationMembership] = (),
        *,
        user_id: str = "user-1",
        is_super_admin: bool = False,
        organization_id: str | None = None,
    ) -> dict[str, str]:
        token = create_session_token(
            user_id, memberships, is_super_admin=is_super_admin
        )
        headers = {"Authorization": f"Bearer {token}"}
        if organization_id:
            headers[ORGANIZATION_HEADER] = organization_id
        return headers

    return _headers
