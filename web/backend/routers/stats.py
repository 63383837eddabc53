#!/usr/bin/env python3
"""
Stats endpoints - match statistics for a service request.
"""

from dataclasses import asdict
from fastapi import APIRouter, Depends

from core.matching import ServiceMatchingService
from ..dependencies import get_service_matching_service
from ..models.responses import MatchStatisticsModel, MatchStatisticsResponse

router = APIRouter(prefix="/api/service-requests", tags=["stats"])


@router.get("/{request_id}/matches/stats", response_model=MatchStatisticsResponse)
def get_stats(
    request_id: str,
    service: ServiceMatchingService = Depends(get_service_matching_service)
):
    """
    Get statistics about the ranked matches of a service request.

    Returns total count, average and top score, and the score distribution
    (excellent/good/fair/poor). Empty results give all-zero statistics.
    """
    stats = service.get_match_statistics(request_id)

    return MatchStatisticsResponse(
        success=True,
        request_id=request_id,
        stats=MatchStatisticsModel(**asdict(stats))
    )
