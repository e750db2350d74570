"""Candidate dashboard presenter."""

from collections.abc import Mapping, Sequence
from typing import Any

import pandas as pd

from election_portal.application.dtos.candidate_dashboard_dto import (
    DashboardOutputDto,
    DashboardQueryInputDto,
    LoadCandidatesOutputDto,
)
from election_portal.application.usecases.candidate_dashboard_usecase import (
    CandidateDashboardUseCase,
)
from election_portal.domain.services.candidate_aggregator import (
    summarize,
    top_counts,
)
from election_portal.domain.services.candidate_filter import count_active_filters
from election_portal.domain.services.classification_tables import short_party_name
from election_portal.domain.value_objects.candidate import (
    AggregatedStats,
    CandidateRecord,
    FilterState,
    StatsSummary,
)
from election_portal.infrastructure.config.settings import Settings, get_settings
from election_portal.interfaces.factories.candidate_dashboard_factory import (
    CandidateDashboardFactory,
)
from election_portal.interfaces.web.streamlit.presenters.base import BasePresenter
from election_portal.interfaces.web.streamlit.utils.session_manager import (
    SessionManager,
)


_USECASE_KEY = "candidate_dashboard_usecase"
_FILTERS_KEY = "candidate_dashboard_filters"
_PAGE_KEY = "candidate_dashboard_page"


class CandidateDashboardPresenter(BasePresenter[DashboardOutputDto]):
    """Candidate dashboard presenter.

    The use case (and so the loaded dataset) lives in the session, so it is
    fetched once per browser session rather than on every rerun.
    """

    def __init__(
        self,
        usecase: CandidateDashboardUseCase | None = None,
        session: SessionManager | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__()
        self.session = session or SessionManager()
        self.settings = settings or get_settings()
        if usecase is None:
            usecase = self.session.get(_USECASE_KEY)
            if usecase is None:
                usecase = CandidateDashboardFactory.create(self.settings)
        self.session.set(_USECASE_KEY, usecase)
        self.usecase: CandidateDashboardUseCase = usecase

    @property
    def filters(self) -> FilterState:
        return self.session.get_or_create(_FILTERS_KEY, FilterState())

    @property
    def page(self) -> int:
        return self.session.get_or_create(_PAGE_KEY, 1)

    def load_data(self) -> DashboardOutputDto:
        """Load the dataset on first use and answer the current query."""
        if not self.usecase.is_loaded:
            self.reload()
        return self.query()

    def reload(self) -> LoadCandidatesOutputDto:
        """Fetch the dataset again (used by the retry button)."""
        result = self._run_async(self.usecase.load())
        if result.success:
            self.logger.info("candidates_loaded", total=result.total_loaded)
        else:
            self.logger.error("candidates_load_failed", error=result.error_message)
        self.session.set(_PAGE_KEY, 1)
        return result

    def query(self) -> DashboardOutputDto:
        """Run the current filter/page selection against the dataset."""
        output = self.usecase.query(
            DashboardQueryInputDto(
                filters=self.filters,
                page=self.page,
                per_page=self.settings.CANDIDATES_PER_PAGE,
            )
        )
        # Keep the revalidated selection and clamped page for the next rerun
        self.session.set(_FILTERS_KEY, output.filters)
        self.session.set(_PAGE_KEY, output.page.page)
        return output

    def update_filter(self, name: str, value: Any) -> FilterState:
        """Change one filter field and go back to the first page."""
        filters = self.filters.with_value(name, value)
        self.session.set(_FILTERS_KEY, filters)
        self.session.set(_PAGE_KEY, 1)
        return filters

    def clear_filters(self) -> None:
        self.session.set(_FILTERS_KEY, FilterState())
        self.session.set(_PAGE_KEY, 1)

    def set_page(self, page: int) -> None:
        self.session.set(_PAGE_KEY, max(page, 1))

    def active_filter_count(self) -> int:
        return count_active_filters(self.filters)

    def summarize(self, stats: AggregatedStats) -> StatsSummary:
        return summarize(stats)

    def to_dataframe(self, records: Sequence[CandidateRecord]) -> pd.DataFrame | None:
        """Convert a candidate page to a DataFrame."""
        if not records:
            return None

        df_data = []
        for record in records:
            df_data.append(
                {
                    "ID": record.id,
                    "Name": record.name,
                    "Party": record.party_name or "",
                    "Symbol": record.symbol_name or "",
                    "Province": record.province_name or "",
                    "District": record.district_name or "",
                    "Constituency": record.constituency_id,
                    "Gender": record.gender or "",
                    "Age": record.age,
                    "Qualification": record.qualification or "",
                }
            )
        return pd.DataFrame(df_data)

    def party_chart_frame(
        self, stats: AggregatedStats, limit: int | None = None
    ) -> pd.DataFrame:
        """Top parties by candidate count, labelled with short names."""
        if limit is None:
            limit = self.settings.TOP_PARTIES_LIMIT
        rows = [
            {"Party": short_party_name(name), "Candidates": count}
            for name, count in top_counts(stats.by_party, limit)
        ]
        return pd.DataFrame(rows, columns=["Party", "Candidates"]).set_index("Party")

    def counts_frame(self, counts: Mapping[str, int], label: str) -> pd.DataFrame:
        """One-column DataFrame of a count mapping, keeping its key order."""
        return pd.DataFrame(
            {"Candidates": list(counts.values())},
            index=pd.Index(list(counts.keys()), name=label),
        )

    def handle_action(self, action: str, **kwargs: Any) -> Any:
        """Handle a user action."""
        if action == "update_filter":
            return self.update_filter(kwargs["name"], kwargs.get("value"))
        elif action == "clear_filters":
            return self.clear_filters()
        elif action == "set_page":
            return self.set_page(kwargs["page"])
        elif action == "reload":
            return self.reload()
        else:
            raise ValueError(f"Unknown action: {action}")
