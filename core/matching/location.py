#!/usr/bin/env python3
"""
Location and Payment Compatibility - Optional opportunity sub-scores.

Location score (0-1):
- missing data on either side: 1.0 (no penalty)
- opportunity country not allowed: 0.0
- same city: 1.0
- same country: 0.7 remote allowed / 0.4 on-site
- different country: 0.2 remote allowed / 0.0 on-site
"""
from typing import Iterable, Optional, Tuple
import logging

from core.matching.models import Location, PaymentMode

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> str:
    return (value or '').strip()


def calculate_location_score(
    opportunity_location: Optional[Location],
    provider_location: Optional[Location],
    allowed_countries: Optional[Iterable[str]] = None
) -> Tuple[float, str]:
    """
    Calculate location compatibility between an opportunity and a provider.

    Returns: (score, reason)
    """
    if opportunity_location is None or provider_location is None:
        return 1.0, "No location data available"

    remote = bool(opportunity_location.is_remote_allowed)
    opp_country = _clean(opportunity_location.country)
    provider_country = _clean(provider_location.country)
    opp_city = _clean(opportunity_location.city)
    provider_city = _clean(provider_location.city)

    allowed = {c.strip().lower() for c in allowed_countries or [] if c and c.strip()}
    if opp_country and allowed and opp_country.lower() not in allowed:
        return 0.0, f'Opportunity country "{opp_country}" is not allowed'

    if opp_country and provider_country and opp_country.lower() == provider_country.lower():
        if opp_city and provider_city and opp_city.lower() == provider_city.lower():
            return 1.0, f"Same city: {opp_city}, {opp_country}"
        if remote:
            return 0.7, f"Same country ({opp_country}), remote allowed"
        return 0.4, f"Same country ({opp_country}), different city, on-site required"

    if remote:
        return 0.2, f"Different country ({opp_country} vs {provider_country}), remote allowed"
    return 0.0, f"Different country ({opp_country} vs {provider_country}), on-site required"


def assess_payment_compatibility(
    opportunity_mode: Optional[str],
    provider_mode: Optional[str]
) -> Tuple[float, str]:
    """
    Compare preferred payment modes (CASH, BARTER, HYBRID). Missing modes count as CASH.

    Returns: (score, description)
    """
    opp = (getattr(opportunity_mode, 'value', opportunity_mode) or PaymentMode.CASH.value).upper()
    provider = (getattr(provider_mode, 'value', provider_mode) or PaymentMode.CASH.value).upper()

    if opp == provider:
        return 1.0, f"Perfect match: Both prefer {opp}"
    if PaymentMode.HYBRID.value in (opp, provider):
        return 0.8, f"Compatible: {opp} and {provider} can be negotiated"
    if {opp, provider} == {PaymentMode.CASH.value, PaymentMode.BARTER.value}:
        return 0.5, f"Mismatch: Opportunity prefers {opp}, provider prefers {provider}"
    return 1.0, f"Opportunity prefers {opp}"
