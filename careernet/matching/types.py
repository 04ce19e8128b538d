"""Typed contracts for job match scoring."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Job:
    job_title: str
    job_description: str
    company_name: str = ""
    location: str | None = None
    salary_min: int | None = None
    salary_max: int | None = None


@dataclass(frozen=True)
class Skill:
    name: str
    level: str = ""


@dataclass(frozen=True)
class Employment:
    title: str
    company: str = ""
    description: str = ""


@dataclass(frozen=True)
class Education:
    degree: str
    field: str = ""
    institution: str = ""


@dataclass(frozen=True)
class Profile:
    skills: tuple[Skill, ...] = ()
    employment_history: tuple[Employment, ...] = ()
    education: tuple[Education, ...] = ()
    experience_level: str | None = None
    location: str | None = None


@dataclass(frozen=True)
class MatchScore:
    overall_score: int
    skills_score: int
    experience_score: int
    education_score: int
    location_score: int
    strengths: list[str] = field(default_factory=list)
    gaps: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
