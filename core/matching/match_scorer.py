#!/usr/bin/env python3
"""
Match Scorer - Sub-scores, overall score and ranking for provider matches.

Overall score:
    overall = w_skill * skill_match + w_avail * availability + w_price * pricing

clamped to [0, 1]. Pricing is neutral (0.5 by default) when unknown.
All weights and heuristics come from ScoringConfig.
"""

from dataclasses import replace
from typing import Any, List, Optional
import logging
import math

from core.config_loader import ScoringConfig
from core.matching.models import (
    Budget, ProviderPricing, ProviderSkillMatch, ScoredMatch,
    ServiceProviderProfile, ServiceRequest
)
from core.matching.skill_matcher import SkillMatcher

logger = logging.getLogger(__name__)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def normalize_status(value: Any) -> Optional[str]:
    """Upper-cased status string for enum members and raw strings; None otherwise."""
    status = getattr(value, 'value', value)
    if not isinstance(status, str):
        return None
    return status.strip().upper()


def _positive_float(value: Any) -> Optional[float]:
    """Return value as a float if it is a positive number, else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or number <= 0:
        return None
    return number


class MatchScorer:
    """Score and rank provider matches for service requests."""

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        skill_matcher: Optional[SkillMatcher] = None
    ):
        self.config = config or ScoringConfig()
        self.skill_matcher = skill_matcher or SkillMatcher()

    def calculate_availability_score(self, availability_status: Any) -> float:
        """Look up the availability score; unknown or missing status scores 0.0."""
        status = normalize_status(availability_status)
        if status is None:
            return 0.0
        return float(self.config.availability_scores.get(status, 0.0))

    def estimate_provider_amount(self, provider_pricing: ProviderPricing) -> Optional[float]:
        """
        Derive a single comparable amount from provider pricing.

        Hourly rates win over flat amounts and are converted with
        hours_per_project.
        """
        hourly_rate = _positive_float(provider_pricing.hourly_rate)
        if hourly_rate is not None:
            return hourly_rate * self.config.pricing.hours_per_project

        return _positive_float(provider_pricing.amount)

    def calculate_pricing_score(
        self,
        provider_pricing: Optional[ProviderPricing],
        request_budget: Optional[Budget]
    ) -> float:
        """
        Score provider pricing against the request budget (0-1).

        - below budget min: below_budget_score
        - inside [min, max]: 1.0
        - above max: 1 - overage / budget range, floored at 0

        Missing pricing or budget data gives the neutral score.
        """
        neutral = self.config.pricing.neutral_score
        if provider_pricing is None or request_budget is None:
            return neutral

        amount = self.estimate_provider_amount(provider_pricing)
        if amount is None:
            return neutral

        budget_min = _positive_float(request_budget.min) or 0.0
        budget_max = _positive_float(request_budget.max) or math.inf

        if amount < budget_min:
            return self.config.pricing.below_budget_score
        if amount <= budget_max:
            return 1.0

        overage = amount - budget_max
        budget_range = (budget_max - budget_min) or budget_max
        if budget_range <= 0:
            return 0.0
        penalty = min(overage / budget_range, 1.0)
        return max(0.0, 1.0 - penalty)

    def calculate_overall_score(
        self,
        skill_match_score: Optional[float] = None,
        availability_score: Optional[float] = None,
        pricing_score: Optional[float] = None
    ) -> float:
        """Weighted combination of sub-scores, clamped to [0, 1]."""
        weights = self.config.weights
        skill = skill_match_score or 0.0
        availability = availability_score or 0.0
        pricing = pricing_score if pricing_score is not None else self.config.pricing.neutral_score

        overall = (
            skill * weights.skill_match +
            availability * weights.availability +
            pricing * weights.pricing
        )
        return _clamp01(overall)

    def score_bucket(self, overall_score: float) -> str:
        """Statistics bucket for an overall score. Each lower bound is inclusive."""
        buckets = self.config.buckets
        if overall_score >= buckets.excellent:
            return 'excellent'
        if overall_score >= buckets.good:
            return 'good'
        if overall_score >= buckets.fair:
            return 'fair'
        return 'poor'

    def rank_matches(self, matches: Any) -> List[ScoredMatch]:
        """
        Recompute overall scores and sort highest first.

        The sort is stable: equal scores keep their input order.
        """
        if not isinstance(matches, (list, tuple)):
            return []

        rescored = [
            replace(
                match,
                overall_score=self.calculate_overall_score(
                    match.skill_match_score,
                    match.availability_score,
                    match.pricing_score
                )
            )
            for match in matches
        ]
        return sorted(rescored, key=lambda m: m.overall_score, reverse=True)

    def score_provider_match(
        self,
        provider: ServiceProviderProfile,
        service_request: ServiceRequest,
        skill_match: Optional[ProviderSkillMatch] = None
    ) -> ScoredMatch:
        """
        Score one provider against a service request.

        If skill_match is given (from SkillMatcher.find_matching_providers),
        its skill score and matched skills are reused.
        """
        required_skills = service_request.required_skills or []

        if skill_match is not None:
            skill_match_score = skill_match.skill_match_score
            matched_skills = list(skill_match.matched_skills)
        else:
            skill_match_score = self.skill_matcher.calculate_skill_match(provider.skills or [], required_skills)
            matched_skills = self.skill_matcher.matched_skills(provider.skills or [], required_skills)

        availability_score = self.calculate_availability_score(provider.availability_status)

        pricing_score = self.calculate_pricing_score(
            ProviderPricing(
                hourly_rate=provider.hourly_rate,
                amount=provider.amount,
                pricing_model=provider.pricing_model
            ),
            service_request.budget
        )

        overall_score = self.calculate_overall_score(skill_match_score, availability_score, pricing_score)

        logger.debug(
            f"Provider {provider.id} vs request {service_request.id}: "
            f"skill={skill_match_score:.2f}, availability={availability_score:.2f}, "
            f"pricing={pricing_score:.2f}, overall={overall_score:.2f}"
        )

        return ScoredMatch(
            provider=provider,
            skill_match_score=skill_match_score,
            availability_score=availability_score,
            pricing_score=pricing_score,
            overall_score=overall_score,
            matched_skills=matched_skills
        )
