#!/usr/bin/env python3
"""
Skill Matcher - Skill overlap between a candidate and a request.

Scoring per required skill:
- exact match (case/whitespace-insensitive): 1.0
- partial match (either skill contains the other): 0.5
- otherwise: 0.0

The overlap score is the mean over required skills, so it is always in [0, 1].
"""

from typing import Any, Iterable, List, Optional
import logging

from core.matching.models import ProviderSkillMatch, ServiceProviderProfile

logger = logging.getLogger(__name__)

EXACT_MATCH_POINTS = 1.0
PARTIAL_MATCH_POINTS = 0.5


def normalize_skills(skills: Any) -> List[str]:
    """
    Trim and lower-case a skill collection.

    Anything that is not a list/tuple/set of strings degrades to an empty
    list; blank and non-string items are dropped.
    """
    if not isinstance(skills, (list, tuple, set, frozenset)):
        return []
    normalized = []
    for skill in skills:
        if not isinstance(skill, str):
            continue
        key = skill.strip().lower()
        if key:
            normalized.append(key)
    return normalized


def is_partial_match(a: str, b: str) -> bool:
    """Bidirectional containment test on already-normalized skills."""
    return a in b or b in a


class SkillMatcher:
    """Compute skill overlap scores. Stateless."""

    def calculate_skill_match(
        self,
        candidate_skills: Optional[Iterable[str]],
        required_skills: Optional[Iterable[str]]
    ) -> float:
        """
        Score how well candidate skills cover the required skills.

        Returns 0.0 when either side is empty after normalization.
        """
        candidates = normalize_skills(candidate_skills)
        required = normalize_skills(required_skills)

        if not candidates or not required:
            return 0.0

        candidate_set = set(candidates)
        points = 0.0
        for required_skill in required:
            if required_skill in candidate_set:
                points += EXACT_MATCH_POINTS
            elif any(is_partial_match(c, required_skill) for c in candidates):
                points += PARTIAL_MATCH_POINTS

        return points / len(required)

    def matched_skills(
        self,
        candidate_skills: Optional[Iterable[str]],
        required_skills: Optional[Iterable[str]]
    ) -> List[str]:
        """Candidate skills (original spelling) that fully or partially match any required skill."""
        required = normalize_skills(required_skills)
        if not required or not isinstance(candidate_skills, (list, tuple, set, frozenset)):
            return []

        matched = []
        for skill in candidate_skills:
            if not isinstance(skill, str):
                continue
            key = skill.strip().lower()
            if key and any(is_partial_match(key, r) for r in required):
                matched.append(skill)
        return matched

    def find_matching_providers(
        self,
        providers: Optional[Iterable[ServiceProviderProfile]],
        required_skills: Optional[Iterable[str]]
    ) -> List[ProviderSkillMatch]:
        """
        Annotate each provider with its skill score and matched skills.

        An empty requirement list is not an error: every provider is
        returned with a score of 0.
        """
        if not providers:
            return []

        required = normalize_skills(required_skills)
        if not required:
            return [ProviderSkillMatch(provider=p, skill_match_score=0.0) for p in providers]

        annotated = []
        for provider in providers:
            skills = provider.skills or []
            annotated.append(ProviderSkillMatch(
                provider=provider,
                skill_match_score=self.calculate_skill_match(skills, required_skills),
                matched_skills=self.matched_skills(skills, required_skills)
            ))

        logger.debug(f"Annotated {len(annotated)} providers against {len(required)} required skills")
        return annotated
