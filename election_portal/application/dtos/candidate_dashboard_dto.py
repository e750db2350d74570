"""Candidate dashboard DTOs.

Input and output data of CandidateDashboardUseCase.
"""

from dataclasses import dataclass, field

from election_portal.domain.value_objects.candidate import (
    AggregatedStats,
    CandidateRecord,
    FilterOptions,
    FilterState,
)


DEFAULT_PER_PAGE = 12


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class DashboardQueryInputDto:
    """Dashboard query input.

    Attributes:
        filters: Current filter selection
        page: 1-based page number of the candidate list
        per_page: Candidates per page
    """

    filters: FilterState = field(default_factory=FilterState)
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class CandidatePage:
    """One page of the filtered candidate list."""

    items: list[CandidateRecord]
    page: int
    per_page: int
    total_items: int
    total_pages: int


@dataclass
class LoadCandidatesOutputDto:
    """Result of loading the candidate dataset."""

    total_loaded: int = 0
    success: bool = True
    error_message: str | None = None


@dataclass
class DashboardOutputDto:
    """Everything the dashboard needs to render.

    Attributes:
        filters: Filter state actually applied (after revalidation)
        filtered_count: Number of candidates matching the filters
        stats: Grouped counts of the matching candidates
        options: Filter control options
        page: Requested page of the matching candidates
        load_error: Error message of the last failed load, if any
    """

    filters: FilterState
    filtered_count: int
    stats: AggregatedStats
    options: FilterOptions
    page: CandidatePage
    load_error: str | None = None


@dataclass
class PartyCount:
    """A party seen in the dataset and its number of candidates."""

    name: str
    candidate_count: int
