"""Candidate filter predicate."""

from __future__ import annotations

from collections.abc import Iterable

from election_portal.domain.services.candidate_classifier import (
    classify_qualification,
)
from election_portal.domain.services.classification_tables import (
    DEFAULT_TABLES,
    ClassificationTables,
)
from election_portal.domain.value_objects.candidate import (
    CandidateRecord,
    FilterState,
)


_STRUCTURAL_FIELDS: tuple[str, ...] = (
    "province",
    "district",
    "party",
    "qualification",
    "gender",
    "constituency",
    "age_min",
    "age_max",
)


def normalize_search_text(search_text: str | None) -> str | None:
    """Return the lowercase search needle, or None when there is nothing to search."""
    if search_text is None:
        return None
    needle = search_text.strip().lower()
    return needle or None


def matches(
    record: CandidateRecord,
    filters: FilterState,
    tables: ClassificationTables = DEFAULT_TABLES,
) -> bool:
    """Return True if the record satisfies every present filter field.

    All fields are AND-ed together, including the free-text search, which
    matches a case-insensitive substring of the name, party or district.
    Qualification is compared on the classified tier, not the raw text.

    Args:
        record: Candidate record
        filters: Filter state
        tables: Classification tables used for the qualification tier

    Returns:
        True if the record matches
    """
    if filters.province is not None and record.province_name != filters.province:
        return False
    if filters.district is not None and record.district_name != filters.district:
        return False
    if filters.party is not None and record.party_name != filters.party:
        return False
    if filters.gender is not None and record.gender != filters.gender:
        return False
    if (
        filters.constituency is not None
        and record.constituency_id != filters.constituency
    ):
        return False
    if filters.qualification is not None and (
        classify_qualification(record.qualification, tables) != filters.qualification
    ):
        return False

    if filters.age_min is not None and (
        record.age is None or record.age < filters.age_min
    ):
        return False
    if filters.age_max is not None and (
        record.age is None or record.age > filters.age_max
    ):
        return False

    needle = normalize_search_text(filters.search_text)
    if needle is not None:
        haystacks = (record.name, record.party_name, record.district_name)
        if not any(needle in (value or "").lower() for value in haystacks):
            return False

    return True


def filter_candidates(
    records: Iterable[CandidateRecord],
    filters: FilterState,
    tables: ClassificationTables = DEFAULT_TABLES,
) -> list[CandidateRecord]:
    """Return the records matching ``filters``, preserving input order."""
    return [record for record in records if matches(record, filters, tables)]


def count_active_filters(filters: FilterState) -> int:
    """Count the structural filters in use (free-text search is not counted)."""
    return sum(1 for name in _STRUCTURAL_FIELDS if getattr(filters, name) is not None)
