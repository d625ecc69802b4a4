"""Session permission endpoints.

Web clients query these to decide which actions and navigation entries
to render, and to run the access guard before entering a view.
"""

from fastapi import APIRouter, Query

from orange_pages.core.permissions import check_access, feature_access
from orange_pages.core.session import CurrentSession, ResolvedSession
from orange_pages.modules.session.schemas import (
    CapabilitySetResponse,
    FeatureAccessResponse,
    GuardDecisionResponse,
    OrganizationResponse,
    OrganizationsResponse,
)


router = APIRouter(prefix="/session", tags=["session"])


@router.get(
    "/capabilities",
    response_model=CapabilitySetResponse,
    summary="Capabilities in the active organization",
)
async def get_capabilities(session: ResolvedSession) -> CapabilitySetResponse:
    return CapabilitySetResponse.model_validate(session.capabilities)


@router.get(
    "/access/{capability}",
    response_model=GuardDecisionResponse,
    summary="Evaluate the access guard",
    description=(
        "Returns pending, allow or redirect for a view gated by the capability. "
        "Unknown capability names are treated as not granted."
    ),
)
async def check_capability_access(
    capability: str,
    session: CurrentSession,
    redirect_to: str | None = Query(default=None, alias="redirectTo"),
    require_company: bool = Query(default=True, alias="requireCompany"),
) -> GuardDecisionResponse:
    decision = check_access(
        session,
        capability,
        redirect_to=redirect_to,
        require_company=require_company,
    )
    return GuardDecisionResponse(outcome=decision.outcome, target=decision.target)


@router.get(
    "/features",
    response_model=FeatureAccessResponse,
    summary="Dashboard feature flags",
)
async def get_features(session: ResolvedSession) -> FeatureAccessResponse:
    flags = feature_access(session.capabilities, is_super_admin=session.is_super_admin)
    return FeatureAccessResponse.model_validate(flags)


@router.get(
    "/organizations",
    response_model=OrganizationsResponse,
    summary="Organizations the user belongs to",
)
async def list_organizations(session: ResolvedSession) -> OrganizationsResponse:
    return OrganizationsResponse(
        active_organization_id=session.active_organization_id,
        organizations=[
            OrganizationResponse.from_membership(m, session.active_organization_id)
            for m in session.memberships
        ],
    )
