import logging
import os
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///pmtwin.db"


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080


class ScoringWeights(BaseModel):
    """Weights for the overall provider score. Expected to sum to 1.0."""
    skill_match: float = 0.6
    availability: float = 0.2
    pricing: float = 0.2


class PricingConfig(BaseModel):
    """
    Pricing heuristic parameters.

    hours_per_project converts an hourly rate into a project-equivalent
    amount. The 40-hour figure is inherited business practice, not a
    verified rule; tune it per marketplace.
    """
    hours_per_project: float = 40.0
    below_budget_score: float = 0.7  # cheaper than budget: good, but capped below 1.0
    neutral_score: float = 0.5  # used whenever pricing data is missing


class ScoreBuckets(BaseModel):
    """Lower bounds of the statistics histogram buckets (overall score 0-1)."""
    excellent: float = 0.8
    good: float = 0.6
    fair: float = 0.4


class ScoringConfig(BaseModel):
    """
    Configuration for the MatchScorer.

    Handles availability, pricing and weighted overall scores.
    """
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    availability_scores: Dict[str, float] = Field(default_factory=lambda: {
        'AVAILABLE': 1.0,
        'BUSY': 0.5,
        'UNAVAILABLE': 0.0,
    })
    buckets: ScoreBuckets = Field(default_factory=ScoreBuckets)


class ServiceMatchingConfig(BaseModel):
    """Defaults for ServiceMatchingService convenience queries."""
    top_matches_limit: int = 10
    min_score_threshold: float = 0.5  # 0-1


class OpportunityConfig(BaseModel):
    """
    Configuration for the OpportunityMatchingService.

    When blend_location_and_payment is False the opportunity score is the
    pure skills score (0-100).
    """
    blend_location_and_payment: bool = False
    skills_weight: float = 0.60
    location_weight: float = 0.25
    payment_weight: float = 0.15

    # Empty list = every country allowed
    allowed_countries: List[str] = Field(default_factory=list)


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    service_matching: ServiceMatchingConfig = Field(default_factory=ServiceMatchingConfig)
    opportunity: OpportunityConfig = Field(default_factory=OpportunityConfig)


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another directory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data: Optional[dict] = None
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    else:
        logger.warning(f"No config file found at {config_path}, using defaults")

    data = data or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        if 'database' not in data or data['database'] is None:
            data['database'] = {}
        data['database']['url'] = env_db_url

    return AppConfig(**data)
