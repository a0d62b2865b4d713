"""
Defines the main Click command group for compio.

This module provides:
- The root `cli` command group for the application.
- Integration with Rich-enhanced Click classes (`RichGroup`).
- Registration of subcommands from other modules.

Usage:
Import `cli` to initialize and run the command-line interface.
"""

import click
from compio import __version__
from compio.commands.base import RichGroup
from compio.commands.read import read
from compio.commands.tokens import tokens


@click.group(
    cls=RichGroup,
    help="""
    compio

    Read and check whitespace-delimited input from stdin.
    """,
)
@click.version_option(__version__, "-V", "--version", prog_name="compio")
def cli() -> None:
    """
    The root Click command group for compio.
    """
    pass


# Explicitly annotate `cli` as `click.Group` for static type checking
cli: click.Group = cli

# Register subcommands
cli.add_command(read)
cli.add_command(tokens)
