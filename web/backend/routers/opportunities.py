#!/usr/bin/env python3
"""
Opportunity endpoints - projects and service requests matching a company's skills.
"""

import logging
from fastapi import APIRouter, Depends, Query

from core.matching import OpportunityMatchingService
from core.matching.opportunity import CONSULTANT_ROLE, SERVICE_PROVIDER_ROLES, VENDOR_ROLES
from ..dependencies import get_opportunity_matching_service
from ..exceptions import InvalidRoleException
from ..models.responses import OpportunityMatchesResponse
from ..utils import to_opportunity_match

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/companies", tags=["opportunities"])

SUPPORTED_ROLES = VENDOR_ROLES | SERVICE_PROVIDER_ROLES | {CONSULTANT_ROLE}


@router.get("/{company_id}/opportunities", response_model=OpportunityMatchesResponse)
def get_opportunities(
    company_id: str,
    role: str = Query(..., description="vendor, service_provider or consultant (and their variants)"),
    service: OpportunityMatchingService = Depends(get_opportunity_matching_service)
):
    """
    Get opportunities the company can serve in the given role.

    Opportunities owned by the company and zero-score matches are never
    returned. Sorted by match score (highest first).
    """
    normalized_role = role.strip().lower()
    if normalized_role not in SUPPORTED_ROLES:
        raise InvalidRoleException(
            f"Unsupported role: {role}. Expected one of {', '.join(sorted(SUPPORTED_ROLES))}"
        )

    matches = service.find_matches_for_company(company_id, normalized_role)

    return OpportunityMatchesResponse(
        success=True,
        company_id=company_id,
        role=normalized_role,
        count=len(matches),
        matches=[to_opportunity_match(m) for m in matches]
    )
