#!/usr/bin/env python3
"""
Service Matching Service - Match service providers to one service request.

Pipeline per call:
1. Fetch the request and all provider profiles from the data source
2. Keep AVAILABLE providers only
3. SkillMatcher annotates skill overlap
4. MatchScorer scores and ranks

Fails soft: an unknown request or an unreachable data source yields an
empty result, never an exception.
"""
from typing import List, Optional
import logging

from core.config_loader import ScoringConfig, ServiceMatchingConfig
from core.matching.interfaces import DataSourceUnavailable, MarketplaceDataSource, NullDataSource
from core.matching.match_scorer import MatchScorer, normalize_status
from core.matching.models import AvailabilityStatus, MatchStatistics, ScoredMatch
from core.matching.skill_matcher import SkillMatcher

logger = logging.getLogger(__name__)


class ServiceMatchingService:
    """
    Service for ranking providers against a service request.

    Holds only its dependencies; every call fetches fresh data.
    """

    def __init__(
        self,
        data_source: Optional[MarketplaceDataSource] = None,
        scoring_config: Optional[ScoringConfig] = None,
        config: Optional[ServiceMatchingConfig] = None
    ):
        """
        Initialize matching service with dependencies.

        Args:
            data_source: Marketplace read accessors (NullDataSource if None)
            scoring_config: Weights and heuristics for MatchScorer
            config: Defaults for top-N and threshold queries
        """
        self.data_source = data_source or NullDataSource()
        self.config = config or ServiceMatchingConfig()
        self.skill_matcher = SkillMatcher()
        self.scorer = MatchScorer(config=scoring_config, skill_matcher=self.skill_matcher)

    def match_service_providers_to_request(self, request_id: str) -> List[ScoredMatch]:
        """
        Rank available providers for a service request.

        Returns:
            List of ScoredMatch sorted by overall_score (highest first),
            empty if the request is unknown or data cannot be read
        """
        try:
            service_request = self.data_source.get_service_request_by_id(request_id)
            if service_request is None:
                logger.info(f"Service request {request_id} not found")
                return []
            providers = self.data_source.get_all_service_provider_profiles() or []
        except DataSourceUnavailable as e:
            logger.warning(f"Data source unavailable while matching request {request_id}: {e}")
            return []

        available = [
            p for p in providers
            if normalize_status(p.availability_status) == AvailabilityStatus.AVAILABLE.value
        ]

        skill_matches = self.skill_matcher.find_matching_providers(
            available, service_request.required_skills or []
        )
        scored = [
            self.scorer.score_provider_match(sm.provider, service_request, skill_match=sm)
            for sm in skill_matches
        ]
        ranked = self.scorer.rank_matches(scored)

        logger.info(
            f"Request {request_id}: {len(ranked)} matches from "
            f"{len(available)}/{len(providers)} available providers"
        )
        return ranked

    def get_top_matches(self, request_id: str, limit: Optional[int] = None) -> List[ScoredMatch]:
        limit = self.config.top_matches_limit if limit is None else limit
        return self.match_service_providers_to_request(request_id)[:max(0, limit)]

    def get_matches_above_threshold(self, request_id: str, min_score: Optional[float] = None) -> List[ScoredMatch]:
        min_score = self.config.min_score_threshold if min_score is None else min_score
        return [
            m for m in self.match_service_providers_to_request(request_id)
            if m.overall_score >= min_score
        ]

    def get_match_statistics(self, request_id: str) -> MatchStatistics:
        """
        Summarize the ranked matches for a request.

        An empty match set gives explicit zero statistics.
        """
        matches = self.match_service_providers_to_request(request_id)
        if not matches:
            return MatchStatistics()

        scores = [m.overall_score for m in matches]
        stats = MatchStatistics(
            total_matches=len(matches),
            average_score=sum(scores) / len(scores),
            top_score=max(scores)
        )
        for score in scores:
            stats.matches_by_score_range[self.scorer.score_bucket(score)] += 1
        return stats
