#!/usr/bin/env python3
"""
Opportunity Matching Service - Role-aware discovery of opportunities for a company.

Matches a company's declared skills against open projects, mega-projects and
service requests it does not own. A required skill counts as matched on an
exact or bidirectional substring match; there is no half credit here.

Score (0-100) = round(100 * matched / required). An opportunity that
declares no required skills is a perfect match (100).

When OpportunityConfig.blend_location_and_payment is enabled the score
becomes a weighted blend of skills, location and payment compatibility.
"""
from typing import Any, List, Optional, Tuple
import logging
import math

from core.config_loader import OpportunityConfig
from core.matching.interfaces import DataSourceUnavailable, MarketplaceDataSource, NullDataSource
from core.matching.location import assess_payment_compatibility, calculate_location_score
from core.matching.models import (
    CompanyProfile, Opportunity, OpportunityMatch, OpportunityScore, Project,
    RequestType, ServiceRequest, ServiceRequestStatus, TargetType
)
from core.matching.skill_matcher import is_partial_match, normalize_skills

logger = logging.getLogger(__name__)

VENDOR_ROLES = frozenset({'vendor', 'vendor_corporate', 'vendor_individual'})
SERVICE_PROVIDER_ROLES = frozenset({'service_provider', 'skill_service_provider'})
CONSULTANT_ROLE = 'consultant'


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _value(v: Any) -> str:
    return str(getattr(v, 'value', v) or '')


def resolve_required_skills(opportunity: Opportunity) -> List[str]:
    """
    Normalized required skills of an opportunity.

    Mega-projects take the union of their sub-project requirements with
    duplicates removed; a mega-project without sub-project skills falls
    back to its own scope.
    """
    if isinstance(opportunity, ServiceRequest):
        return normalize_skills(opportunity.required_skills)

    if isinstance(opportunity, Project):
        if opportunity.is_mega and opportunity.sub_projects:
            union: List[str] = []
            seen = set()
            for sub in opportunity.sub_projects:
                for skill in normalize_skills(sub.skill_requirements if sub else None):
                    if skill not in seen:
                        seen.add(skill)
                        union.append(skill)
            if union:
                return union
        if opportunity.scope is not None:
            return normalize_skills(opportunity.scope.skill_requirements)

    return []


def target_type_for(opportunity: Opportunity) -> str:
    if isinstance(opportunity, ServiceRequest):
        return TargetType.SERVICE_REQUEST.value
    if opportunity.is_mega:
        return TargetType.MEGA_PROJECT.value
    return TargetType.PROJECT.value


class OpportunityMatchingService:
    """Find opportunities a company's skills can serve."""

    def __init__(
        self,
        data_source: Optional[MarketplaceDataSource] = None,
        config: Optional[OpportunityConfig] = None
    ):
        self.data_source = data_source or NullDataSource()
        self.config = config or OpportunityConfig()

    def calculate_match_score(self, opportunity: Opportunity, company_id: str) -> OpportunityScore:
        """Score one opportunity for a company. Unknown companies and non-opportunities score 0."""
        if not isinstance(opportunity, (Project, ServiceRequest)):
            logger.debug(f"Not an opportunity, scoring 0: {type(opportunity).__name__}")
            return OpportunityScore()

        try:
            company_skills, company = self._load_company(company_id)
        except DataSourceUnavailable as e:
            logger.warning(f"Data source unavailable while scoring for company {company_id}: {e}")
            return OpportunityScore()

        return self._score_opportunity(opportunity, company_skills, company)

    def find_matches_for_company(self, company_id: str, role: str) -> List[OpportunityMatch]:
        """
        Find opportunities with a positive match score for a company acting in a role.

        Returns:
            List of OpportunityMatch sorted by match_score (highest first).
            Equal scores keep candidate order (projects before service requests).
        """
        try:
            company_skills, company = self._load_company(company_id)
            candidates = self._candidates_for_role(company_id, role)
        except DataSourceUnavailable as e:
            logger.warning(f"Data source unavailable while matching company {company_id}: {e}")
            return []

        matches = []
        for opportunity in candidates:
            result = self._score_opportunity(opportunity, company_skills, company)
            if result.score <= 0:
                continue
            matches.append(OpportunityMatch(
                target_type=target_type_for(opportunity),
                target_id=opportunity.id,
                target=opportunity,
                match_score=result.score,
                matched_skills=result.matched_skills,
                missing_skills=result.missing_skills,
                skills_score=result.skills_score,
                location_score=result.location_score,
                location_reason=result.location_reason,
                payment_compatibility=result.payment_compatibility,
                payment_score=result.payment_score
            ))

        matches.sort(key=lambda m: m.match_score, reverse=True)
        logger.info(f"Company {company_id} ({role}): {len(matches)}/{len(candidates)} opportunities matched")
        return matches

    def _load_company(self, company_id: str) -> Tuple[List[str], Optional[CompanyProfile]]:
        company_skills = self.data_source.get_company_skills(company_id) or []
        company = None
        if self.config.blend_location_and_payment:
            company = self.data_source.get_company_profile(company_id)
        return company_skills, company

    def _candidates_for_role(self, company_id: str, role: str) -> List[Opportunity]:
        role = (role or '').strip().lower()

        projects: List[Opportunity] = []
        requests: List[ServiceRequest] = []
        if role not in SERVICE_PROVIDER_ROLES and role != CONSULTANT_ROLE:
            projects = [
                p for p in self.data_source.get_all_projects() or []
                if p.owner_company_id != company_id
                and _value(p.status).lower() == 'active'
                and _value(p.visibility).lower() == 'public'
            ]
        if role not in VENDOR_ROLES:
            requests = [
                r for r in self.data_source.get_all_service_requests() or []
                if r.owner_company_id != company_id
                and _value(r.status) == ServiceRequestStatus.OPEN.value
            ]

        if role in SERVICE_PROVIDER_ROLES:
            return [r for r in requests if _value(r.request_type) != RequestType.ADVISORY.value]
        if role == CONSULTANT_ROLE:
            return [r for r in requests if _value(r.request_type) == RequestType.ADVISORY.value]
        if role not in VENDOR_ROLES:
            logger.debug(f"Role {role!r} has no opportunity filter, considering all open opportunities")
        return projects + requests

    def _score_opportunity(
        self,
        opportunity: Opportunity,
        company_skills: List[str],
        company: Optional[CompanyProfile]
    ) -> OpportunityScore:
        normalized_company = normalize_skills(company_skills)
        if not normalized_company:
            return OpportunityScore()

        required = resolve_required_skills(opportunity)

        matched_skills: List[str] = []
        missing_skills: List[str] = []
        skills_score = 100
        if required:
            company_set = set(normalized_company)
            for skill in required:
                if skill in company_set or any(is_partial_match(c, skill) for c in normalized_company):
                    matched_skills.append(skill)
                else:
                    missing_skills.append(skill)
            skills_score = _round_half_up(100 * len(matched_skills) / len(required))

        if not self.config.blend_location_and_payment:
            return OpportunityScore(
                score=skills_score,
                matched_skills=matched_skills,
                missing_skills=missing_skills,
                skills_score=skills_score
            )

        location_score, location_reason = calculate_location_score(
            opportunity.location,
            company.location if company else None,
            self.config.allowed_countries
        )
        payment_score, payment_compatibility = assess_payment_compatibility(
            opportunity.payment_mode,
            company.payment_mode if company else None
        )
        blended = _round_half_up(
            skills_score * self.config.skills_weight +
            location_score * 100 * self.config.location_weight +
            payment_score * 100 * self.config.payment_weight
        )

        return OpportunityScore(
            score=blended,
            matched_skills=matched_skills,
            missing_skills=missing_skills,
            skills_score=skills_score,
            location_score=_round_half_up(location_score * 100),
            location_reason=location_reason,
            payment_compatibility=payment_compatibility,
            payment_score=_round_half_up(payment_score * 100)
        )
