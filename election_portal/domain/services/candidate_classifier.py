"""Candidate classification rules.

Maps a free-text qualification to an education tier and an age to an age
bracket. Both functions are total: malformed input never raises, it falls
into the fallback tier or outside every bracket.
"""

from __future__ import annotations

import math
import unicodedata

from functools import lru_cache
from numbers import Real
from typing import Any

from election_portal.domain.services.classification_tables import (
    DEFAULT_TABLES,
    ClassificationTables,
)


def normalize_qualification(raw: Any) -> str:
    """Normalize a qualification string for keyword matching.

    NFKC normalization, lowercase and collapsed whitespace.
    """
    if raw is None:
        return ""
    text = unicodedata.normalize("NFKC", str(raw)).lower()
    return " ".join(text.split())


@lru_cache(maxsize=4096)
def _match_tier(normalized: str, tables: ClassificationTables) -> str:
    padded = f" {normalized} "
    for tier in tables.education_tiers:
        if any(keyword in padded for keyword in tier.keywords):
            return tier.label
    return tables.fallback_tier


def classify_qualification(
    raw: Any, tables: ClassificationTables = DEFAULT_TABLES
) -> str:
    """Classify a raw qualification string into an education tier.

    Tiers are tested in ``tables.education_tiers`` order and the first tier
    with a keyword contained in the normalized string wins. The string is
    padded with a space on each side so space-padded keywords match whole
    words only.

    Args:
        raw: Qualification text from the feed (may be None or empty)
        tables: Classification tables

    Returns:
        Tier label, ``tables.fallback_tier`` when nothing matches
    """
    normalized = normalize_qualification(raw)
    if not normalized:
        return tables.fallback_tier
    return _match_tier(normalized, tables)


def classify_age(age: Any, tables: ClassificationTables = DEFAULT_TABLES) -> str | None:
    """Return the label of the age bracket containing ``age``.

    Args:
        age: Age in years
        tables: Classification tables

    Returns:
        Bracket label, or None for missing, non-numeric, non-finite or
        out-of-range ages
    """
    if isinstance(age, bool) or not isinstance(age, Real):
        return None
    if not math.isfinite(age):
        return None
    for bracket in tables.age_brackets:
        if bracket.contains(age):
            return bracket.label
    return None
