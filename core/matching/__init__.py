#!/usr/bin/env python3
"""
Matching Module - Provider and opportunity matching for PMTwin.

Public API:
- SkillMatcher: Skill overlap scoring (skill_matcher.py)
- MatchScorer: Availability/pricing/overall scores and ranking (match_scorer.py)
- ServiceMatchingService: Providers for a service request (service.py)
- OpportunityMatchingService: Opportunities for a company (opportunity.py)
- MarketplaceDataSource: Read accessors the services depend on (interfaces.py)
"""

from core.matching.models import (
    AvailabilityStatus, PricingModel, ServiceRequestStatus, RequestType,
    ProjectType, PaymentMode, TargetType,
    Location, Budget, ServiceRequest, ServiceProviderProfile, ProjectScope,
    Project, CompanyProfile, ProviderPricing, ProviderSkillMatch, ScoredMatch,
    MatchStatistics, OpportunityScore, OpportunityMatch
)
from core.matching.interfaces import (
    MarketplaceDataSource, NullDataSource, InMemoryDataSource, DataSourceUnavailable
)
from core.matching.skill_matcher import SkillMatcher
from core.matching.match_scorer import MatchScorer
from core.matching.service import ServiceMatchingService
from core.matching.opportunity import OpportunityMatchingService

__all__ = [
    'SkillMatcher', 'MatchScorer', 'ServiceMatchingService', 'OpportunityMatchingService',
    'MarketplaceDataSource', 'NullDataSource', 'InMemoryDataSource', 'DataSourceUnavailable',
    'AvailabilityStatus', 'PricingModel', 'ServiceRequestStatus', 'RequestType',
    'ProjectType', 'PaymentMode', 'TargetType',
    'Location', 'Budget', 'ServiceRequest', 'ServiceProviderProfile', 'ProjectScope',
    'Project', 'CompanyProfile', 'ProviderPricing', 'ProviderSkillMatch', 'ScoredMatch',
    'MatchStatistics', 'OpportunityScore', 'OpportunityMatch',
]
