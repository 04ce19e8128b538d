"""Deterministic keyword extraction and set similarity."""

import re
from typing import Iterable

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WS_RE = re.compile(r"\s+")

MIN_KEYWORD_LEN = 4


def normalize_whitespace(text: str | None) -> str:
    """Collapse whitespace to single spaces."""
    if text is None:
        return ""
    return _WS_RE.sub(" ", text).strip()


def extract_keywords(text: str | None) -> list[str]:
    """Lowercase words of at least four characters, punctuation stripped."""
    if not text:
        return []
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [word for word in _WS_RE.split(cleaned) if len(word) >= MIN_KEYWORD_LEN]


def jaccard_similarity(left: Iterable[str], right: Iterable[str]) -> float:
    """Intersection over union in [0, 1]; two empty sets score 0."""
    left_set = set(left)
    right_set = set(right)
    union = left_set | right_set
    if not union:
        return 0.0
    return len(left_set & right_set) / len(union)
