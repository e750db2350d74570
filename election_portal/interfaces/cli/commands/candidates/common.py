"""Options and helpers shared by the candidates commands."""

import asyncio

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from election_portal.application.usecases.candidate_dashboard_usecase import (
    CandidateDashboardUseCase,
)
from election_portal.domain.value_objects.candidate import (
    FILTER_FIELDS,
    FilterState,
)
from election_portal.interfaces.factories.candidate_dashboard_factory import (
    CandidateDashboardFactory,
)


_FILTER_OPTIONS = (
    click.option("--province", default=None, help="Province name"),
    click.option("--district", default=None, help="District name"),
    click.option("--party", default=None, help="Exact party name"),
    click.option(
        "--qualification", default=None, help="Education tier, e.g. 'Bachelors'"
    ),
    click.option("--gender", default=None, help="Gender value as in the feed"),
    click.option("--constituency", type=int, default=None, help="Constituency no."),
    click.option("--age-min", type=int, default=None, help="Minimum age"),
    click.option("--age-max", type=int, default=None, help="Maximum age"),
    click.option("--search", "search_text", default=None, help="Name/party/district"),
)


def filter_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the candidate filter options to a command."""
    for option in reversed(_FILTER_OPTIONS):
        func = option(func)
    return func


def snapshot_option(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach ``--file`` for reading a saved snapshot instead of the feed."""
    return click.option(
        "--file",
        "snapshot_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read candidates from a JSON snapshot instead of the live feed",
    )(func)


def build_filters(**kwargs: Any) -> FilterState:
    """Build a FilterState from command options.

    Fields are applied in FILTER_FIELDS order so a province given after a
    district on the command line does not clear the district.
    """
    filters = FilterState()
    for name in FILTER_FIELDS:
        value = kwargs.get(name)
        if value is not None:
            filters = filters.with_value(name, value)
    return filters


def load_usecase(snapshot_path: Path | None) -> CandidateDashboardUseCase:
    """Create the use case and load the dataset.

    Raises:
        click.ClickException: If the dataset could not be loaded
    """
    usecase = CandidateDashboardFactory.create(snapshot_path=snapshot_path)
    result = asyncio.run(usecase.load())
    if not result.success:
        raise click.ClickException(
            f"Failed to load candidates: {result.error_message}"
        )
    return usecase
