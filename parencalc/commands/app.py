"""
Defines the main Click command group for the parencalc command palette.

This module provides:
- The root `cli` command group for the REPL.
- Integration with Rich-enhanced Click classes (`RichGroup`).
- Registration of subcommands from other modules.
"""

import click
from parencalc.commands.base import RichGroup
from parencalc.commands.mode import mode, detail
from parencalc.commands.tokens import tokens


@click.group(
    cls=RichGroup,
    help="""
    parencalc Command Palette

    Type an expression to evaluate it, or a /command below.
    Use /exit to quit.
    """,
)
def cli() -> None:
    """
    The root Click command group for parencalc.
    """
    pass


# Explicitly annotate `cli` as `click.Group` for static type checking
cli: click.Group = cli

# Register subcommands
cli.add_command(tokens)
cli.add_command(mode)
cli.add_command(detail)
