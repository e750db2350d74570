"""Candidate dashboard page."""

from typing import Any

import streamlit as st

from election_portal.application.dtos.candidate_dashboard_dto import (
    DashboardOutputDto,
)
from election_portal.domain.value_objects.candidate import ALL_OPTION
from election_portal.interfaces.web.streamlit.presenters.candidate_dashboard_presenter import (  # noqa: E501
    CandidateDashboardPresenter,
)


def render_candidates_page() -> None:
    """Render the candidate dashboard page."""
    st.header("Election Candidates")

    presenter = CandidateDashboardPresenter()
    with st.spinner("Loading candidates..."):
        output = presenter.load_data()

    if output.load_error:
        st.error(f"Could not load candidate data: {output.load_error}")
        if st.button("Retry"):
            presenter.reload()
            st.rerun()
        return

    render_filter_sidebar(presenter, output)
    render_summary(presenter, output)
    render_charts(presenter, output)
    render_candidate_list(presenter, output)


def _select(
    presenter: CandidateDashboardPresenter,
    label: str,
    name: str,
    options: list[Any],
    current: Any,
) -> None:
    """Render one filter selectbox and apply a changed selection."""
    choices = [ALL_OPTION, *options]
    index = choices.index(current) if current in choices else 0
    selected = st.sidebar.selectbox(
        label,
        options=choices,
        index=index,
        format_func=lambda v: "All" if v == ALL_OPTION else str(v),
    )
    if (None if selected == ALL_OPTION else selected) != current:
        presenter.update_filter(name, selected)
        st.rerun()


def render_filter_sidebar(
    presenter: CandidateDashboardPresenter, output: DashboardOutputDto
) -> None:
    """Render the filter controls."""
    filters = output.filters
    options = output.options

    active = presenter.active_filter_count()
    st.sidebar.subheader(f"Filters ({active} active)" if active else "Filters")

    search = st.sidebar.text_input(
        "Search name, party or district", value=filters.search_text or ""
    )
    if (search or None) != filters.search_text:
        presenter.update_filter("search_text", search)
        st.rerun()

    _select(presenter, "Province", "province", options.provinces, filters.province)
    _select(presenter, "District", "district", options.districts, filters.district)
    _select(
        presenter,
        "Constituency",
        "constituency",
        options.constituencies,
        filters.constituency,
    )
    _select(presenter, "Party", "party", options.parties, filters.party)
    _select(
        presenter,
        "Education",
        "qualification",
        options.qualifications,
        filters.qualification,
    )
    _select(presenter, "Gender", "gender", options.genders, filters.gender)

    col_min, col_max = st.sidebar.columns(2)
    age_min = col_min.number_input(
        "Min age", min_value=0, max_value=120, value=filters.age_min, step=1
    )
    age_max = col_max.number_input(
        "Max age", min_value=0, max_value=120, value=filters.age_max, step=1
    )
    if age_min != filters.age_min:
        presenter.update_filter("age_min", age_min)
        st.rerun()
    if age_max != filters.age_max:
        presenter.update_filter("age_max", age_max)
        st.rerun()

    if active and st.sidebar.button("Clear filters"):
        presenter.clear_filters()
        st.rerun()


def render_summary(
    presenter: CandidateDashboardPresenter, output: DashboardOutputDto
) -> None:
    """Render the summary cards."""
    summary = presenter.summarize(output.stats)
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Candidates", f"{summary.total:,}")
    col2.metric("Parties", f"{summary.parties:,}")
    col3.metric("Districts", f"{summary.districts:,}")
    col4.metric("Provinces", f"{summary.provinces:,}")


def render_charts(
    presenter: CandidateDashboardPresenter, output: DashboardOutputDto
) -> None:
    """Render the grouped count charts."""
    if output.filtered_count == 0:
        return

    st.subheader("Candidates by party")
    st.bar_chart(presenter.party_chart_frame(output.stats))

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Education")
        st.bar_chart(
            presenter.counts_frame(output.stats.by_qualification, "Education")
        )
    with col2:
        st.subheader("Age groups")
        st.bar_chart(presenter.counts_frame(output.stats.by_age_group, "Age group"))


def render_candidate_list(
    presenter: CandidateDashboardPresenter, output: DashboardOutputDto
) -> None:
    """Render the paged candidate table."""
    page = output.page
    st.subheader(f"Candidates ({output.filtered_count:,})")

    df = presenter.to_dataframe(page.items)
    if df is None:
        st.info("No candidates match the current filters.")
        return
    st.dataframe(df, width="stretch", hide_index=True)

    if page.total_pages > 1:
        col_prev, col_info, col_next = st.columns([1, 2, 1])
        if col_prev.button("Previous", disabled=page.page <= 1):
            presenter.set_page(page.page - 1)
            st.rerun()
        col_info.markdown(f"Page {page.page} of {page.total_pages}")
        if col_next.button("Next", disabled=page.page >= page.total_pages):
            presenter.set_page(page.page + 1)
            st.rerun()
