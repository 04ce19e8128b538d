"""Load contacts and relationship edges from a YAML or JSON network file."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .types import UNKNOWN_NAME, ConnectionEdge, Contact

log = logging.getLogger(__name__)


class NetworkFileError(ValueError):
    """Raised when a network file cannot be interpreted."""


@dataclass
class NetworkData:
    """Contacts, extra people and edges read from one file."""

    contacts: list[Contact] = field(default_factory=list)
    people: list[Contact] = field(default_factory=list)
    connections: list[ConnectionEdge] = field(default_factory=list)

    def find_contact(self, contact_id: str) -> Contact | None:
        for contact in [*self.contacts, *self.people]:
            if contact.id == contact_id:
                return contact
        return None


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


_TRUE_STRINGS = {"true", "yes", "1"}
_FALSE_STRINGS = {"false", "no", "0", ""}


def _flag(value: Any, name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise NetworkFileError(f"{name} must be true or false, got {value!r}")


def contact_from_dict(raw: dict[str, Any]) -> Contact:
    """Convert a raw mapping into a Contact.

    Raises:
        NetworkFileError: if the entry is not a mapping with an id, or a
            flag is not a boolean.
    """
    if not isinstance(raw, dict):
        raise NetworkFileError(f"Contact entry must be a mapping: {raw!r}")

    contact_id = _optional_str(raw.get("id"))
    if contact_id is None:
        raise NetworkFileError(f"Contact entry missing id: {raw!r}")

    return Contact(
        id=contact_id,
        name=_optional_str(raw.get("name")) or UNKNOWN_NAME,
        company=_optional_str(raw.get("company")),
        role=_optional_str(raw.get("role")),
        school=_optional_str(raw.get("school")),
        graduation_year=_optional_int(raw.get("graduation_year")),
        is_influencer=_flag(raw.get("is_influencer"), "is_influencer"),
        is_industry_leader=_flag(
            raw.get("is_industry_leader"), "is_industry_leader"
        ),
        influence_score=_optional_float(raw.get("influence_score")),
    )


def edge_from_dict(raw: dict[str, Any]) -> ConnectionEdge:
    """Convert a raw mapping into a ConnectionEdge.

    Raises:
        NetworkFileError: if either endpoint is missing.
    """
    if not isinstance(raw, dict):
        raise NetworkFileError(f"Connection entry must be a mapping: {raw!r}")

    a = _optional_str(raw.get("contact_id_a"))
    b = _optional_str(raw.get("contact_id_b"))
    if a is None or b is None:
        raise NetworkFileError(f"Connection entry missing endpoint: {raw!r}")

    return ConnectionEdge(
        contact_id_a=a,
        contact_id_b=b,
        relationship_type=_optional_str(raw.get("relationship_type")),
    )


def _section(document: dict[str, Any], key: str) -> list:
    value = document.get(key) or []
    if not isinstance(value, list):
        raise NetworkFileError(f"'{key}' must be a list")
    return value


def parse_network(document: Any) -> NetworkData:
    """Build NetworkData from an already-parsed document."""
    if document is None:
        return NetworkData()
    if not isinstance(document, dict):
        raise NetworkFileError("Network file must contain a mapping at top level")

    return NetworkData(
        contacts=[contact_from_dict(raw) for raw in _section(document, "contacts")],
        people=[contact_from_dict(raw) for raw in _section(document, "people")],
        connections=[edge_from_dict(raw) for raw in _section(document, "connections")],
    )


def load_network(path: str | Path) -> NetworkData:
    """Read a network file.

    JSON files are accepted too, JSON being a subset of YAML.

    Raises:
        FileNotFoundError: if the file does not exist.
        NetworkFileError: if the file is not a valid network document.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Network file not found: {file_path}")

    try:
        document = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise NetworkFileError(f"Invalid network file {file_path}: {exc}") from exc

    data = parse_network(document)
    log.info(
        f"Loaded {len(data.contacts)} contacts, {len(data.people)} people, "
        f"{len(data.connections)} connections from {file_path}"
    )
    return data
