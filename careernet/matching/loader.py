"""Read jobs and profiles from YAML documents."""

from pathlib import Path
from typing import Any

import yaml

from .types import Education, Employment, Job, Profile, Skill


def _mapping(raw: Any, what: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ValueError(f"{what} must be a mapping: {raw!r}")
    return raw


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _optional_str(value: Any) -> str | None:
    return _text(value) or None


def _optional_int(value: Any, what: str) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{what} must be a whole number, got {value!r}") from exc


def _entries(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"'{key}' must be a list")
    return [_mapping(entry, f"'{key}' entry") for entry in raw]


def job_from_dict(raw: dict[str, Any]) -> Job:
    """Convert a raw mapping into a Job.

    Raises:
        ValueError: if the document is not a mapping or a salary is not a number.
    """
    data = _mapping(raw, "job")
    return Job(
        job_title=_text(data.get("job_title")),
        job_description=_text(data.get("job_description")),
        company_name=_text(data.get("company_name")),
        location=_optional_str(data.get("location")),
        salary_min=_optional_int(data.get("salary_min"), "salary_min"),
        salary_max=_optional_int(data.get("salary_max"), "salary_max"),
    )


def profile_from_dict(raw: dict[str, Any]) -> Profile:
    """Convert a raw mapping into a Profile.

    Skills may be given as plain names (``skills: [python, sql]``) or as
    mappings with ``name`` and ``level``.

    Raises:
        ValueError: if a section is not a list of mappings.
    """
    data = _mapping(raw, "profile")

    skills = []
    raw_skills = data.get("skills") or []
    if not isinstance(raw_skills, list):
        raise ValueError("'skills' must be a list")
    for entry in raw_skills:
        if isinstance(entry, dict):
            skills.append(
                Skill(name=_text(entry.get("name")), level=_text(entry.get("level")))
            )
        elif isinstance(entry, (str, int, float)):
            skills.append(Skill(name=_text(entry)))
        else:
            raise ValueError(f"'skills' entry must be a name or mapping: {entry!r}")

    return Profile(
        skills=tuple(skills),
        employment_history=tuple(
            Employment(
                title=_text(e.get("title")),
                company=_text(e.get("company")),
                description=_text(e.get("description")),
            )
            for e in _entries(data, "employment_history")
        ),
        education=tuple(
            Education(
                degree=_text(e.get("degree")),
                field=_text(e.get("field")),
                institution=_text(e.get("institution")),
            )
            for e in _entries(data, "education")
        ),
        experience_level=_optional_str(data.get("experience_level")),
        location=_optional_str(data.get("location")),
    )


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML mapping from disk."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    try:
        document = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {file_path}: {exc}") from exc
    return _mapping(document, str(file_path))
