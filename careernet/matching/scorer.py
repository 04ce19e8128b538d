"""Weighted keyword-overlap score between a job posting and a profile."""

import logging
import math

from .config import DEFAULT_MATCH_CONFIG, MatchConfig
from .tokenize import extract_keywords, jaccard_similarity, normalize_whitespace
from .types import Job, MatchScore, Profile

log = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores."""
    return int(math.floor(value + 0.5))


def _ordered_unique(words: list[str]) -> list[str]:
    return list(dict.fromkeys(words))


def location_score(
    profile_location: str | None,
    job_location: str | None,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> float:
    """Exact or remote match scores highest, same city next, else neutral."""
    if not profile_location or not job_location:
        return config.location_neutral

    user_loc = normalize_whitespace(profile_location).lower()
    job_loc = normalize_whitespace(job_location).lower()
    if user_loc == job_loc or "remote" in job_loc:
        return config.location_exact
    if user_loc.split(",")[0].strip() == job_loc.split(",")[0].strip():
        return config.location_same_city
    return config.location_neutral


def calculate_job_match(
    job: Job,
    profile: Profile,
    *,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> MatchScore:
    """Score a job against a profile on a 0-100 scale.

    Skills, experience and education are each the Jaccard similarity of the
    profile's keywords with the job's keywords. Location is rule-based.
    """
    job_keywords = _ordered_unique(
        extract_keywords(f"{job.job_description} {job.job_title}")
    )
    job_keyword_set = set(job_keywords)

    user_skills = {
        skill.name.strip().lower() for skill in profile.skills if skill.name.strip()
    }
    skills = jaccard_similarity(user_skills, job_keyword_set) * 100

    experience_keywords = {
        keyword
        for entry in profile.employment_history
        for keyword in extract_keywords(f"{entry.title} {entry.description}")
    }
    experience = jaccard_similarity(experience_keywords, job_keyword_set) * 100

    education_keywords = {
        keyword
        for entry in profile.education
        for keyword in extract_keywords(f"{entry.degree} {entry.field}")
    }
    education = jaccard_similarity(education_keywords, job_keyword_set) * 100

    location = location_score(profile.location, job.location, config)

    overall = round_half_up(
        skills * config.skills_weight
        + experience * config.experience_weight
        + education * config.education_weight
        + location * config.location_weight
    )

    strengths: list[str] = []
    if skills >= config.strength_threshold:
        strengths.append("Strong skill match")
    if experience >= config.strength_threshold:
        strengths.append("Relevant experience")
    if education >= config.strength_threshold:
        strengths.append("Educational background aligns")
    if location >= config.location_strength_threshold:
        strengths.append("Location match")

    gaps: list[str] = []
    missing = [keyword for keyword in job_keywords if keyword not in user_skills]
    if len(missing) > config.missing_keyword_limit:
        gaps.append(f"{', '.join(missing[:3])} and {len(missing) - 3} more skills")
    if skills < config.gap_threshold:
        gaps.append("Skills gap detected")
    if experience < config.gap_threshold:
        gaps.append("Limited relevant experience")

    recommendations: list[str] = []
    if skills < config.recommendation_threshold:
        recommendations.append("Highlight transferable skills in your resume")
        recommendations.append("Consider adding relevant certifications")
    if experience < config.recommendation_threshold:
        recommendations.append("Emphasize relevant projects and achievements")
    if overall >= config.strong_match:
        recommendations.append("Strong match - prioritize this application")
    elif overall >= config.good_match:
        recommendations.append("Good match - tailor your materials carefully")
    else:
        recommendations.append("Stretch opportunity - emphasize learning potential")

    log.debug(
        f"Match for {job.job_title}: overall={overall} skills={skills:.1f} "
        f"experience={experience:.1f} education={education:.1f}"
    )

    return MatchScore(
        overall_score=overall,
        skills_score=round_half_up(skills),
        experience_score=round_half_up(experience),
        education_score=round_half_up(education),
        location_score=round_half_up(location),
        strengths=strengths,
        gaps=gaps,
        recommendations=recommendations,
    )
