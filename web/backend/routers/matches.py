#!/usr/bin/env python3
"""
Match endpoints - ranked service providers for a service request.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.matching import ServiceMatchingService
from ..dependencies import get_service_matching_service
from ..models.responses import ProviderMatchesResponse
from ..utils import to_provider_match

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/service-requests", tags=["matches"])


@router.get("/{request_id}/matches", response_model=ProviderMatchesResponse)
def get_matches(
    request_id: str,
    min_score: Optional[float] = Query(default=None, ge=0, le=1, description="Minimum overall score filter"),
    service: ServiceMatchingService = Depends(get_service_matching_service)
):
    """
    Get available providers ranked for a service request.

    Returns matches sorted by overall score (highest first). An unknown
    request yields an empty list, not an error.
    """
    if min_score is None:
        matches = service.match_service_providers_to_request(request_id)
    else:
        matches = service.get_matches_above_threshold(request_id, min_score=min_score)

    return ProviderMatchesResponse(
        success=True,
        request_id=request_id,
        count=len(matches),
        matches=[to_provider_match(m) for m in matches]
    )


@router.get("/{request_id}/matches/top", response_model=ProviderMatchesResponse)
def get_top_matches(
    request_id: str,
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum results to return"),
    service: ServiceMatchingService = Depends(get_service_matching_service)
):
    """Get the top N provider matches (configured default when limit is omitted)."""
    matches = service.get_top_matches(request_id, limit=limit)

    return ProviderMatchesResponse(
        success=True,
        request_id=request_id,
        count=len(matches),
        matches=[to_provider_match(m) for m in matches]
    )
