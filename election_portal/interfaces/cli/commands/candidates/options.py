"""Filter option listing command."""

import click

from election_portal.interfaces.cli.base import BaseCommand, with_error_handling
from election_portal.interfaces.cli.commands.candidates.common import (
    build_filters,
    load_usecase,
    snapshot_option,
)


@click.command()
@click.option("--province", default=None, help="Narrow districts to a province")
@click.option("--district", default=None, help="Narrow constituencies to a district")
@snapshot_option
@with_error_handling
def options(snapshot_path, province: str | None, district: str | None):
    """List the values offered by each filter control."""
    usecase = load_usecase(snapshot_path)
    filters = usecase.revalidate(build_filters(province=province, district=district))
    opts = usecase.get_options(filters)

    sections = (
        ("Provinces", opts.provinces),
        ("Districts", opts.districts),
        ("Constituencies", [str(c) for c in opts.constituencies]),
        ("Parties", opts.parties),
        ("Education", opts.qualifications),
        ("Genders", opts.genders),
    )
    for title, values in sections:
        BaseCommand.show_progress(f"=== {title} ({len(values)}) ===")
        for value in values:
            BaseCommand.show_progress(f"  {value}")
