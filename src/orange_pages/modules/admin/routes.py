"""Platform administration endpoints (super admins only)."""

from fastapi import APIRouter

from orange_pages.core.permissions import (
    ADMIN_CAPABILITIES,
    MEMBER_BENEFITS,
    MemberTier,
    TeamRole,
    capability_label,
    role_display_name,
    tier_display_name,
)
from orange_pages.core.permissions.decorators import require_super_admin
from orange_pages.core.session import CurrentSession
from orange_pages.modules.session.schemas import CamelModel


router = APIRouter(prefix="/admin", tags=["admin"])


class Option(CamelModel):
    value: str
    label: str


class PermissionModelResponse(CamelModel):
    """Vocabulary used by the admin tools' role and tier pickers."""

    roles: list[Option]
    tiers: list[Option]
    member_benefits: list[Option]
    admin_capabilities: list[Option]


@router.get(
    "/permission-model",
    response_model=PermissionModelResponse,
    summary="Roles, tiers and capabilities with display labels",
)
@require_super_admin()
async def permission_model(session: CurrentSession) -> PermissionModelResponse:
    return PermissionModelResponse(
        roles=[Option(value=r.value, label=role_display_name(r)) for r in TeamRole],
        tiers=[Option(value=t.value, label=tier_display_name(t)) for t in MemberTier],
        member_benefits=[
            Option(value=c.value, label=capability_label(c)) for c in MEMBER_BENEFITS
        ],
        admin_capabilities=[
            Option(value=c.value, label=capability_label(c))
            for c in ADMIN_CAPABILITIES
        ],
    )
