#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from decimal import Decimal
from typing import Optional, Any

from core.matching import OpportunityMatch, ScoredMatch
from .models.responses import OpportunityMatchModel, ProviderMatch, ProviderSummary


def safe_float(value: Optional[Any], default: Optional[float] = None) -> Optional[float]:
    """
    Safely convert value to float.

    Args:
        value: Value to convert (can be Decimal, int, float, or None).
        default: Default value if conversion fails or value is None.

    Returns:
        Float value.
    """
    if value is None:
        return default

    if isinstance(value, Decimal):
        return float(value)

    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def safe_str(value: Optional[Any]) -> Optional[str]:
    """Plain string for enum members and other values; None stays None."""
    if value is None:
        return None
    return str(getattr(value, 'value', value))


def to_provider_match(match: ScoredMatch) -> ProviderMatch:
    provider = match.provider
    return ProviderMatch(
        provider=ProviderSummary(
            provider_id=provider.id,
            user_id=provider.user_id,
            skills=list(provider.skills or []),
            availability_status=safe_str(provider.availability_status),
            pricing_model=safe_str(provider.pricing_model),
            hourly_rate=safe_float(provider.hourly_rate),
            amount=safe_float(provider.amount)
        ),
        skill_match_score=match.skill_match_score,
        availability_score=match.availability_score,
        pricing_score=match.pricing_score,
        overall_score=match.overall_score,
        matched_skills=list(match.matched_skills)
    )


def to_opportunity_match(match: OpportunityMatch) -> OpportunityMatchModel:
    return OpportunityMatchModel(
        target_type=safe_str(match.target_type),
        target_id=match.target_id,
        title=getattr(match.target, 'title', '') or '',
        match_score=match.match_score,
        skills_score=match.skills_score,
        matched_skills=list(match.matched_skills),
        missing_skills=list(match.missing_skills),
        location_score=match.location_score,
        location_reason=match.location_reason,
        payment_compatibility=match.payment_compatibility,
        payment_score=match.payment_score
    )
