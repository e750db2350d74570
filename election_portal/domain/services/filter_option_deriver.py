"""Filter option derivation.

Computes the distinct, sorted values offered by each filter control. The
district list follows the selected province and the constituency list
follows the selected district; every other list ignores the selection.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from election_portal.domain.services.candidate_classifier import (
    classify_qualification,
)
from election_portal.domain.services.classification_tables import (
    DEFAULT_TABLES,
    ClassificationTables,
)
from election_portal.domain.value_objects.candidate import (
    CandidateRecord,
    FilterOptions,
    FilterState,
)


def sort_parties(parties: Iterable[str], priority: Sequence[str]) -> list[str]:
    """Sort party names: priority parties first in priority order, then A-Z.

    Args:
        parties: Distinct party names
        priority: Major party names in display order

    Returns:
        Sorted party names
    """
    rank = {name: index for index, name in enumerate(priority)}

    def sort_key(name: str) -> tuple[int, int, str]:
        if name in rank:
            return (0, rank[name], "")
        return (1, 0, name)

    return sorted(set(parties), key=sort_key)


def derive_options(
    records: Sequence[CandidateRecord],
    filters: FilterState | None = None,
    tables: ClassificationTables = DEFAULT_TABLES,
) -> FilterOptions:
    """Derive the option lists for every filter control.

    Args:
        records: Unfiltered candidate records
        filters: Current selection; only province and district are used
        tables: Classification tables

    Returns:
        FilterOptions
    """
    selected_province = filters.province if filters is not None else None
    selected_district = filters.district if filters is not None else None

    provinces = sorted({r.province_name for r in records if r.province_name})
    districts = sorted(
        {
            r.district_name
            for r in records
            if r.district_name
            and (selected_province is None or r.province_name == selected_province)
        }
    )
    constituencies = sorted(
        {
            r.constituency_id
            for r in records
            if r.constituency_id is not None
            and (selected_district is None or r.district_name == selected_district)
        }
    )
    parties = sort_parties(
        (r.party_name for r in records if r.party_name), tables.party_priority
    )

    present_tiers = {classify_qualification(r.qualification, tables) for r in records}
    qualifications = [
        tier for tier in tables.qualification_hierarchy if tier in present_tiers
    ]

    genders = sorted({r.gender for r in records if r.gender})

    return FilterOptions(
        provinces=provinces,
        districts=districts,
        parties=parties,
        qualifications=qualifications,
        constituencies=constituencies,
        genders=genders,
    )
