"""Candidate dataset CLI command group."""

import click

from election_portal.interfaces.cli.commands.candidates.options import options
from election_portal.interfaces.cli.commands.candidates.parties import parties
from election_portal.interfaces.cli.commands.candidates.stats import stats


@click.group()
def candidates():
    """Candidate dataset commands."""


candidates.add_command(stats)
candidates.add_command(options)
candidates.add_command(parties)
