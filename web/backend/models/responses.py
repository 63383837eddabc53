#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict


class ProviderSummary(BaseModel):
    """Provider fields exposed alongside a match."""
    provider_id: str
    user_id: str
    skills: List[str] = Field(default_factory=list)
    availability_status: Optional[str] = None
    pricing_model: Optional[str] = None
    hourly_rate: Optional[float] = None
    amount: Optional[float] = None


class ProviderMatch(BaseModel):
    """A scored provider match for a service request."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "provider": {
                    "provider_id": "sp-001",
                    "user_id": "user-101",
                    "skills": ["Project Management", "Civil Engineering"],
                    "availability_status": "AVAILABLE",
                    "pricing_model": "HOURLY",
                    "hourly_rate": 50.0,
                    "amount": None
                },
                "skill_match_score": 0.83,
                "availability_score": 1.0,
                "pricing_score": 1.0,
                "overall_score": 0.9,
                "matched_skills": ["Project Management", "Civil Engineering"]
            }
        }
    )

    provider: ProviderSummary
    skill_match_score: float = Field(ge=0, le=1)
    availability_score: float = Field(ge=0, le=1)
    pricing_score: Optional[float] = Field(None, ge=0, le=1)
    overall_score: float = Field(ge=0, le=1)
    matched_skills: List[str] = Field(default_factory=list)


class ProviderMatchesResponse(BaseModel):
    success: bool
    request_id: str
    count: int
    matches: List[ProviderMatch]


class MatchStatisticsModel(BaseModel):
    total_matches: int = 0
    average_score: float = 0.0
    top_score: float = 0.0
    matches_by_score_range: Dict[str, int]


class MatchStatisticsResponse(BaseModel):
    success: bool
    request_id: str
    stats: MatchStatisticsModel


class OpportunityMatchModel(BaseModel):
    """An opportunity matched to a company's skills."""
    target_type: str
    target_id: str
    title: str = ""
    match_score: int = Field(ge=0, le=100)
    skills_score: int = Field(0, ge=0, le=100)
    matched_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    location_score: Optional[int] = None
    location_reason: Optional[str] = None
    payment_compatibility: Optional[str] = None
    payment_score: Optional[int] = None


class OpportunityMatchesResponse(BaseModel):
    success: bool
    company_id: str
    role: str
    count: int
    matches: List[OpportunityMatchModel]
