"""Candidate dashboard use case.

Loads the candidate dataset once and answers dashboard queries from memory.

Query flow:
    1. Revalidate the filter state against the derived options
    2. Filter the dataset
    3. Aggregate the matching candidates
    4. Slice the requested page

Filtered views are memoized per FilterState and option lists per
(province, district); both memos are dropped when the dataset changes.
"""

import logging

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from election_portal.application.dtos.candidate_dashboard_dto import (
    DashboardOutputDto,
    DashboardQueryInputDto,
    LoadCandidatesOutputDto,
    PartyCount,
)
from election_portal.application.services.pagination import paginate
from election_portal.domain.exceptions import CandidateFeedError
from election_portal.domain.services.candidate_aggregator import aggregate
from election_portal.domain.services.candidate_filter import filter_candidates
from election_portal.domain.services.classification_tables import (
    DEFAULT_TABLES,
    ClassificationTables,
)
from election_portal.domain.services.filter_option_deriver import derive_options
from election_portal.domain.services.interfaces.candidate_feed_service import (
    ICandidateFeedService,
)
from election_portal.domain.value_objects.candidate import (
    AggregatedStats,
    CandidateRecord,
    FilterOptions,
    FilterState,
)


logger = logging.getLogger(__name__)

_MAX_CACHED_VIEWS = 64
_MAX_CACHED_OPTIONS = 256


@dataclass(frozen=True)
class _FilteredView:
    records: tuple[CandidateRecord, ...]
    stats: AggregatedStats


class CandidateDashboardUseCase:
    """Filtering, statistics and option lists over the candidate dataset."""

    def __init__(
        self,
        feed: ICandidateFeedService,
        tables: ClassificationTables = DEFAULT_TABLES,
    ) -> None:
        self._feed = feed
        self._tables = tables
        self._records: tuple[CandidateRecord, ...] = ()
        self._loaded = False
        self._load_error: str | None = None
        self._views: dict[FilterState, _FilteredView] = {}
        self._options: dict[tuple[str | None, str | None], FilterOptions] = {}

    @property
    def records(self) -> tuple[CandidateRecord, ...]:
        return self._records

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def load_error(self) -> str | None:
        return self._load_error

    async def load(self) -> LoadCandidatesOutputDto:
        """Fetch the dataset from the feed.

        A feed failure leaves an empty dataset and is reported in the output
        so the caller can offer a retry.
        """
        try:
            records = await self._feed.fetch_candidates()
        except CandidateFeedError as e:
            logger.error("Failed to load candidates: %s", e)
            for failure in e.failures:
                logger.error("  %s", failure)
            self.set_records([])
            self._load_error = str(e)
            return LoadCandidatesOutputDto(
                total_loaded=0, success=False, error_message=str(e)
            )

        self.set_records(records)
        logger.info("Loaded %d candidates", len(records))
        return LoadCandidatesOutputDto(total_loaded=len(records), success=True)

    def set_records(self, records: Sequence[CandidateRecord]) -> None:
        """Install an already fetched dataset."""
        self._records = tuple(records)
        self._loaded = True
        self._load_error = None
        self._views.clear()
        self._options.clear()

    def query(self, input_dto: DashboardQueryInputDto) -> DashboardOutputDto:
        """Answer a dashboard query."""
        filters = self.revalidate(input_dto.filters)
        options = self.get_options(filters)
        view = self._get_view(filters)

        return DashboardOutputDto(
            filters=filters,
            filtered_count=len(view.records),
            stats=view.stats,
            options=options,
            page=paginate(view.records, input_dto.page, input_dto.per_page),
            load_error=self._load_error,
        )

    def revalidate(self, filters: FilterState) -> FilterState:
        """Clear a district or constituency that the dataset no longer offers."""
        while True:
            revalidated = filters.revalidate(self.get_options(filters))
            if revalidated == filters:
                return filters
            filters = revalidated

    def get_options(self, filters: FilterState) -> FilterOptions:
        """Filter options for the given province/district selection."""
        key = (filters.province, filters.district)
        options = self._options.get(key)
        if options is None:
            options = derive_options(self._records, filters, self._tables)
            _remember(self._options, key, options, _MAX_CACHED_OPTIONS)
        return options

    def get_filtered(self, filters: FilterState) -> list[CandidateRecord]:
        """Candidates matching ``filters``, in dataset order."""
        return list(self._get_view(filters).records)

    def get_stats(self, filters: FilterState) -> AggregatedStats:
        """Grouped counts of the candidates matching ``filters``."""
        return self._get_view(filters).stats

    def list_parties(self) -> list[PartyCount]:
        """Distinct party names in first-seen order with candidate counts."""
        counts: Counter[str] = Counter()
        for record in self._records:
            if record.party_name:
                counts[record.party_name.strip()] += 1
        return [PartyCount(name=name, candidate_count=n) for name, n in counts.items()]

    def _get_view(self, filters: FilterState) -> _FilteredView:
        view = self._views.get(filters)
        if view is None:
            matched = tuple(filter_candidates(self._records, filters, self._tables))
            view = _FilteredView(
                records=matched, stats=aggregate(matched, self._tables)
            )
            _remember(self._views, filters, view, _MAX_CACHED_VIEWS)
        return view


def _remember(cache: dict, key, value, max_size: int) -> None:
    """Insert into a bounded memo, evicting the oldest entry when full."""
    if len(cache) >= max_size:
        cache.pop(next(iter(cache)))
    cache[key] = value
