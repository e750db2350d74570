"""Candidate statistics command."""

import click

from election_portal.application.dtos.candidate_dashboard_dto import (
    DashboardQueryInputDto,
)
from election_portal.domain.services.candidate_aggregator import (
    summarize,
    top_counts,
)
from election_portal.domain.services.candidate_filter import count_active_filters
from election_portal.domain.services.classification_tables import short_party_name
from election_portal.infrastructure.config.settings import get_settings
from election_portal.interfaces.cli.base import BaseCommand, with_error_handling
from election_portal.interfaces.cli.commands.candidates.common import (
    build_filters,
    filter_options,
    load_usecase,
    snapshot_option,
)


@click.command()
@filter_options
@snapshot_option
@click.option(
    "--limit", type=int, default=None, help="Parties to list (TOP_PARTIES_LIMIT)"
)
@with_error_handling
def stats(snapshot_path, limit: int | None, **filter_values):
    """Show grouped counts for the filtered candidates."""
    if limit is None:
        limit = get_settings().TOP_PARTIES_LIMIT
    usecase = load_usecase(snapshot_path)
    filters = build_filters(**filter_values)
    output = usecase.query(DashboardQueryInputDto(filters=filters))
    summary = summarize(output.stats)

    active = count_active_filters(output.filters)
    BaseCommand.show_progress(f"=== Candidates ({active} filters active) ===")
    BaseCommand.show_progress(f"  Total:      {summary.total:,}")
    BaseCommand.show_progress(f"  Parties:    {summary.parties:,}")
    BaseCommand.show_progress(f"  Districts:  {summary.districts:,}")
    BaseCommand.show_progress(f"  Provinces:  {summary.provinces:,}")

    BaseCommand.show_progress(f"\n=== Top {limit} parties ===")
    for name, count in top_counts(output.stats.by_party, limit):
        BaseCommand.show_progress(f"  {short_party_name(name)}: {count:>6,}")

    BaseCommand.show_progress("\n=== Gender ===")
    for name, count in top_counts(output.stats.by_gender):
        BaseCommand.show_progress(f"  {name}: {count:>6,}")

    BaseCommand.show_progress("\n=== Education ===")
    for tier, count in output.stats.by_qualification.items():
        BaseCommand.show_progress(f"  {tier}: {count:>6,}")

    BaseCommand.show_progress("\n=== Age groups ===")
    for label, count in output.stats.by_age_group.items():
        BaseCommand.show_progress(f"  {label}: {count:>6,}")
