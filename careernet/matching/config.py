"""Configuration for job match scoring."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchConfig:
    """Weights and thresholds for the job match score."""

    skills_weight: float = 0.40
    experience_weight: float = 0.35
    education_weight: float = 0.15
    location_weight: float = 0.10

    location_neutral: float = 50.0
    location_exact: float = 100.0
    location_same_city: float = 75.0

    strength_threshold: float = 70.0
    location_strength_threshold: float = 90.0
    gap_threshold: float = 50.0
    recommendation_threshold: float = 60.0
    missing_keyword_limit: int = 5

    strong_match: int = 70
    good_match: int = 50


DEFAULT_MATCH_CONFIG = MatchConfig()
