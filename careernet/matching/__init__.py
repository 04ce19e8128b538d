"""Job posting to candidate profile match scoring."""

from .scorer import calculate_job_match
from .types import Education, Employment, Job, MatchScore, Profile, Skill

__all__ = [
    "Education",
    "Employment",
    "Job",
    "MatchScore",
    "Profile",
    "Skill",
    "calculate_job_match",
]
