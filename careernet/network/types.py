"""Typed contracts for the contact graph."""

from dataclasses import dataclass

UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class Contact:
    id: str
    name: str = UNKNOWN_NAME
    company: str | None = None
    role: str | None = None
    school: str | None = None
    graduation_year: int | None = None
    is_influencer: bool = False
    is_industry_leader: bool = False
    influence_score: float | None = None

    @property
    def effective_influence(self) -> float:
        """Influence score with absent values read as 0."""
        return self.influence_score or 0


@dataclass(frozen=True)
class ConnectionEdge:
    contact_id_a: str
    contact_id_b: str
    relationship_type: str | None = None


@dataclass(frozen=True)
class ConnectionPath:
    target: Contact
    path: tuple[str, ...]
    degree: int
    path_description: str
