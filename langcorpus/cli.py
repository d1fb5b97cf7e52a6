"""Command-line interface for langcorpus using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import click
from langcorpus import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """langcorpus: tokenize text files and explore their word statistics."""
    pass


# Register subcommands
from langcorpus.commands.stats import stats  # noqa: E402
from langcorpus.commands.padded import padded  # noqa: E402
from langcorpus.commands.sample import sample  # noqa: E402

cli.add_command(stats)
cli.add_command(padded)
cli.add_command(sample)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
