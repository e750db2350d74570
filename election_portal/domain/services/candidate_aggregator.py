"""Candidate statistics aggregation.

Folds a (filtered) candidate list into grouped counts used by every chart
and summary card of the dashboard.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

from election_portal.domain.services.candidate_classifier import (
    classify_age,
    classify_qualification,
)
from election_portal.domain.services.classification_tables import (
    DEFAULT_TABLES,
    ClassificationTables,
)
from election_portal.domain.value_objects.candidate import (
    AggregatedStats,
    CandidateRecord,
    StatsSummary,
)


def aggregate(
    records: Iterable[CandidateRecord],
    tables: ClassificationTables = DEFAULT_TABLES,
) -> AggregatedStats:
    """Aggregate candidate records into grouped counts.

    Records missing a grouping field still count towards ``total`` and every
    other mapping. Every qualification tier and age bracket is present in
    the result, with zero when unused; ages outside every bracket are not
    counted in ``by_age_group``.

    Args:
        records: Candidate records (usually already filtered)
        tables: Classification tables

    Returns:
        AggregatedStats
    """
    by_party: Counter[str] = Counter()
    by_province: Counter[str] = Counter()
    by_district: Counter[str] = Counter()
    by_gender: Counter[str] = Counter()
    by_qualification = dict.fromkeys(tables.qualification_hierarchy, 0)
    by_age_group = dict.fromkeys(tables.age_bracket_labels, 0)
    total = 0

    for record in records:
        total += 1
        if record.party_name:
            by_party[record.party_name] += 1
        if record.province_name:
            by_province[record.province_name] += 1
        if record.district_name:
            by_district[record.district_name] += 1
        if record.gender:
            by_gender[record.gender] += 1

        tier = classify_qualification(record.qualification, tables)
        by_qualification[tier] = by_qualification.get(tier, 0) + 1

        bracket = classify_age(record.age, tables)
        if bracket is not None:
            by_age_group[bracket] += 1

    return AggregatedStats(
        total=total,
        by_party=dict(by_party),
        by_province=dict(by_province),
        by_district=dict(by_district),
        by_gender=dict(by_gender),
        by_qualification=by_qualification,
        by_age_group=by_age_group,
    )


def top_counts(
    counts: Mapping[str, int], limit: int | None = None
) -> list[tuple[str, int]]:
    """Sort a count mapping for display.

    Highest count first, ties broken by key so the order is deterministic.

    Args:
        counts: Key to count mapping
        limit: Keep only the first ``limit`` entries (None keeps all)

    Returns:
        List of (key, count) pairs
    """
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    if limit is not None:
        return ordered[: max(limit, 0)]
    return ordered


def summarize(stats: AggregatedStats) -> StatsSummary:
    """Distinct party/district/province counts for the summary cards."""
    return StatsSummary(
        total=stats.total,
        parties=len(stats.by_party),
        districts=len(stats.by_district),
        provinces=len(stats.by_province),
    )
