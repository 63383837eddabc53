#!/usr/bin/env python3
"""
Matching Models - Data structures for matching.

Input entities mirror the marketplace records the data source hands over.
Result types are transient values produced per query and never persisted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Optional, Union


class AvailabilityStatus(str, Enum):
    AVAILABLE = 'AVAILABLE'
    BUSY = 'BUSY'
    UNAVAILABLE = 'UNAVAILABLE'


class PricingModel(str, Enum):
    HOURLY = 'HOURLY'
    FIXED = 'FIXED'
    RETAINER = 'RETAINER'


class ServiceRequestStatus(str, Enum):
    OPEN = 'OPEN'
    OFFERED = 'OFFERED'
    APPROVED = 'APPROVED'
    IN_PROGRESS = 'IN_PROGRESS'
    COMPLETED = 'COMPLETED'
    CANCELLED = 'CANCELLED'


class RequestType(str, Enum):
    NORMAL = 'NORMAL'
    ADVISORY = 'ADVISORY'


class ProjectType(str, Enum):
    SINGLE = 'SINGLE'
    MEGA = 'MEGA'


class PaymentMode(str, Enum):
    CASH = 'CASH'
    BARTER = 'BARTER'
    HYBRID = 'HYBRID'


class TargetType(str, Enum):
    PROJECT = 'PROJECT'
    MEGA_PROJECT = 'MEGA_PROJECT'
    SERVICE_REQUEST = 'SERVICE_REQUEST'


@dataclass
class Location:
    city: Optional[str] = None
    country: Optional[str] = None
    is_remote_allowed: bool = False


@dataclass
class Budget:
    """Request budget. max=None means unbounded."""
    min: Optional[float] = None
    max: Optional[float] = None
    currency: str = 'SAR'


@dataclass
class ServiceRequest:
    id: str
    owner_company_id: str
    required_skills: List[str] = field(default_factory=list)
    budget: Optional[Budget] = None
    status: str = ServiceRequestStatus.OPEN
    request_type: Optional[str] = None
    title: str = ""
    location: Optional[Location] = None
    payment_mode: Optional[str] = None


@dataclass
class ServiceProviderProfile:
    id: str
    user_id: str
    skills: List[str] = field(default_factory=list)
    availability_status: Optional[str] = None
    pricing_model: Optional[str] = None
    hourly_rate: Optional[float] = None
    amount: Optional[float] = None


@dataclass
class ProjectScope:
    """Scope of a project or of one mega-project sub-project."""
    skill_requirements: List[str] = field(default_factory=list)
    title: str = ""


@dataclass
class Project:
    id: str
    owner_company_id: str
    status: str = 'active'
    visibility: str = 'public'
    project_type: str = ProjectType.SINGLE
    scope: Optional[ProjectScope] = None
    sub_projects: List[ProjectScope] = field(default_factory=list)
    title: str = ""
    location: Optional[Location] = None
    payment_mode: Optional[str] = None

    @property
    def is_mega(self) -> bool:
        return self.project_type == ProjectType.MEGA


@dataclass
class CompanyProfile:
    """Company (or individual) declaring skills on the marketplace."""
    id: str
    name: str = ""
    skills: List[str] = field(default_factory=list)
    location: Optional[Location] = None
    payment_mode: Optional[str] = None


Opportunity = Union[Project, ServiceRequest]


@dataclass
class ProviderPricing:
    """Pricing inputs for the pricing sub-score."""
    hourly_rate: Optional[float] = None
    amount: Optional[float] = None
    pricing_model: Optional[str] = None


@dataclass
class ProviderSkillMatch:
    """Provider annotated with its skill overlap (output of SkillMatcher)."""
    provider: ServiceProviderProfile
    skill_match_score: float = 0.0
    matched_skills: List[str] = field(default_factory=list)


@dataclass
class ScoredMatch:
    """Complete scored provider match with sub-scores and overall score."""
    provider: ServiceProviderProfile
    skill_match_score: float = 0.0
    availability_score: float = 0.0
    pricing_score: Optional[float] = None
    overall_score: float = 0.0
    matched_skills: List[str] = field(default_factory=list)


@dataclass
class MatchStatistics:
    total_matches: int = 0
    average_score: float = 0.0
    top_score: float = 0.0
    matches_by_score_range: Dict[str, int] = field(default_factory=lambda: {
        'excellent': 0,
        'good': 0,
        'fair': 0,
        'poor': 0,
    })


@dataclass
class OpportunityScore:
    """Skill fit of a company for one opportunity (0-100)."""
    score: int = 0
    matched_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    skills_score: int = 0

    # Only populated when location/payment blending is enabled
    location_score: Optional[int] = None
    location_reason: Optional[str] = None
    payment_compatibility: Optional[str] = None
    payment_score: Optional[int] = None


@dataclass
class OpportunityMatch:
    target_type: str
    target_id: str
    target: Opportunity
    match_score: int
    matched_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    skills_score: int = 0
    location_score: Optional[int] = None
    location_reason: Optional[str] = None
    payment_compatibility: Optional[str] = None
    payment_score: Optional[int] = None
