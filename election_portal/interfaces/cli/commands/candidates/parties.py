"""Party listing command."""

import click

from election_portal.interfaces.cli.base import BaseCommand, with_error_handling
from election_portal.interfaces.cli.commands.candidates.common import (
    load_usecase,
    snapshot_option,
)


@click.command()
@snapshot_option
@with_error_handling
def parties(snapshot_path):
    """List distinct party names with their candidate counts."""
    usecase = load_usecase(snapshot_path)
    party_counts = usecase.list_parties()
    if not party_counts:
        BaseCommand.warning("No parties found.")
        return

    BaseCommand.show_progress(f"=== Parties ({len(party_counts)}) ===")
    for i, party in enumerate(party_counts, 1):
        BaseCommand.show_progress(f"  {i:>4}. {party.name} ({party.candidate_count:,})")
