"""
String normalization and edit-distance similarity.

Similarity is ``100 * (L - d) / L`` where ``d`` is the Levenshtein
distance and ``L`` the length of the longer normalized string.
"""
import re

from rapidfuzz.distance import Levenshtein

_WHITESPACE = re.compile(r"\s+")


def normalize_postcode(value: str | None) -> str:
    """Drop all whitespace and uppercase. ``"sw1a 2aa"`` -> ``"SW1A2AA"``."""
    if not value:
        return ""
    return _WHITESPACE.sub("", value).upper()


def normalize_text(value: str | None) -> str:
    """Lowercase and trim for fuzzy comparison."""
    if not value:
        return ""
    return value.strip().lower()


def similarity(a: str | None, b: str | None) -> float:
    """Similarity score in [0, 100]; 100 means identical after normalization."""
    s1 = normalize_text(a)
    s2 = normalize_text(b)
    if s1 == s2:
        return 100.0
    if not s1 or not s2:
        return 0.0
    longest = max(len(s1), len(s2))
    # unit-cost insert/delete/substitute, no transposition
    return 100.0 * (longest - Levenshtein.distance(s1, s2)) / longest
