"""Candidate dataset value objects."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


# Value sent by an "all" entry of a select control; means "no constraint".
ALL_OPTION = "all"

FILTER_FIELDS: tuple[str, ...] = (
    "province",
    "district",
    "party",
    "qualification",
    "gender",
    "constituency",
    "age_min",
    "age_max",
    "search_text",
)

# Selections that lose their meaning when the field they depend on changes.
_DEPENDENT_FIELDS: dict[str, tuple[str, ...]] = {
    "province": ("district", "constituency"),
    "district": ("constituency",),
}


@dataclass(frozen=True)
class CandidateRecord:
    """One contesting candidate, normalized from the Election Commission feed."""

    id: int
    """Candidate ID, stable across loads."""
    name: str
    """Display name (never empty)."""
    party_name: str | None = None
    """Party name; exact string equality defines party identity."""
    province_name: str | None = None
    district_name: str | None = None
    constituency_id: int | None = None
    gender: str | None = None
    age: int | None = None
    qualification: str | None = None
    """Raw free-text qualification, input to tier classification."""
    symbol_name: str | None = None
    """Election symbol name, display only."""


@dataclass(frozen=True)
class FilterOptions:
    """Option lists used to populate the filter controls."""

    provinces: list[str] = field(default_factory=list)
    districts: list[str] = field(default_factory=list)
    parties: list[str] = field(default_factory=list)
    qualifications: list[str] = field(default_factory=list)
    constituencies: list[int] = field(default_factory=list)
    genders: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FilterState:
    """Currently selected filter values.

    Every field is optional; ``None`` means "no constraint". Instances are
    never mutated, use :meth:`with_value` to derive the next state.
    """

    province: str | None = None
    district: str | None = None
    party: str | None = None
    qualification: str | None = None
    gender: str | None = None
    constituency: int | None = None
    age_min: int | None = None
    age_max: int | None = None
    search_text: str | None = None

    def with_value(self, name: str, value: Any) -> FilterState:
        """Return a copy with one field replaced.

        ``"all"`` and empty strings are stored as ``None``. Changing the
        province clears district and constituency, changing the district
        clears constituency.

        Args:
            name: Field name (one of FILTER_FIELDS)
            value: New value

        Returns:
            New FilterState

        Raises:
            ValueError: If name is not a filter field
        """
        if name not in FILTER_FIELDS:
            raise ValueError(f"Unknown filter field: {name}")

        if value == ALL_OPTION or value == "":
            value = None

        changes: dict[str, Any] = {name: value}
        if value != getattr(self, name):
            for dependent in _DEPENDENT_FIELDS.get(name, ()):
                changes[dependent] = None
        return replace(self, **changes)

    def revalidate(self, options: FilterOptions) -> FilterState:
        """Clear district/constituency selections that are no longer offered."""
        changes: dict[str, Any] = {}
        if self.district is not None and self.district not in options.districts:
            changes["district"] = None
            changes["constituency"] = None
        elif (
            self.constituency is not None
            and self.constituency not in options.constituencies
        ):
            changes["constituency"] = None

        if not changes:
            return self
        return replace(self, **changes)


@dataclass(frozen=True)
class AggregatedStats:
    """Grouped counts over a filtered candidate list.

    Recomputed from scratch for every input list, never updated in place.
    ``by_qualification`` and ``by_age_group`` always contain every known tier
    and bracket, the other mappings only the keys actually seen.
    """

    total: int
    by_party: dict[str, int]
    by_province: dict[str, int]
    by_district: dict[str, int]
    by_gender: dict[str, int]
    by_qualification: dict[str, int]
    by_age_group: dict[str, int]


@dataclass(frozen=True)
class StatsSummary:
    """Headline numbers shown on the dashboard summary cards."""

    total: int
    parties: int
    districts: int
    provinces: int
