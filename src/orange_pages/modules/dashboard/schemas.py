"""Pydantic schemas for dashboard navigation and views."""

from orange_pages.core.permissions import Capability
from orange_pages.modules.session.schemas import CamelModel


class NavigationEntry(CamelModel):
    """A dashboard entry; ``enabled`` reflects the current session."""

    key: str
    title: str
    path: str
    capability: Capability | None = None
    enabled: bool


class NavigationResponse(CamelModel):
    active_organization_id: str | None
    entries: list[NavigationEntry]


class DashboardViewResponse(CamelModel):
    """Context for a protected dashboard view."""

    view: str
    organization_id: str
    organization_name: str | None
    team_role: str
    tier: str
