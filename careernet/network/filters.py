"""Alumni and influencer selection over a contact list."""

from typing import Iterable

from .config import DEFAULT_NETWORK_CONFIG
from .types import Contact


def _normalize(text: str | None) -> str:
    if text is None:
        return ""
    return " ".join(text.split()).lower()


def school_matches(contact_school: str | None, query_school: str | None) -> bool:
    """Case-insensitive equality, with substring containment either way."""
    contact_key = _normalize(contact_school)
    query_key = _normalize(query_school)
    if not contact_key or not query_key:
        return False
    if contact_key == query_key:
        return True
    return query_key in contact_key or contact_key in query_key


def filter_alumni(
    contacts: Iterable[Contact],
    user_schools: Iterable[str],
) -> list[Contact]:
    """Contacts who attended any of the user's schools, in input order."""
    schools = [school for school in user_schools if _normalize(school)]
    if not schools:
        return []

    return [
        contact
        for contact in contacts
        if contact.school
        and any(school_matches(contact.school, school) for school in schools)
    ]


def filter_influencers(
    contacts: Iterable[Contact],
    min_influence_score: float = DEFAULT_NETWORK_CONFIG.min_influence_score,
) -> list[Contact]:
    """Flagged influencers and industry leaders at or above the threshold.

    Sorted by influence score, highest first; ties keep input order.
    """
    selected = [
        contact
        for contact in contacts
        if (contact.is_influencer or contact.is_industry_leader)
        and contact.effective_influence >= min_influence_score
    ]
    return sorted(selected, key=lambda contact: -contact.effective_influence)
