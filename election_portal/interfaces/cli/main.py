"""election-portal CLI entry point."""

import click

from election_portal import __version__
from election_portal.common.logging import setup_logging
from election_portal.infrastructure.config.sentry import init_sentry
from election_portal.infrastructure.config.settings import get_settings
from election_portal.interfaces.cli.commands.candidates import candidates


@click.group()
@click.version_option(__version__, prog_name="election-portal")
@click.option("--log-level", default=None, help="Override LOG_LEVEL")
def cli(log_level: str | None):
    """Election candidate portal tools."""
    settings = get_settings()
    setup_logging(
        level=log_level or settings.LOG_LEVEL, log_format=settings.LOG_FORMAT
    )
    init_sentry(settings)


cli.add_command(candidates)


if __name__ == "__main__":
    cli()
