"""
Evaluation mode commands.

Commands:
- /mode show: Display the operand policy
- /mode strict: Reject operands that are neither a number nor a group
- /mode lenient: Read such operands as zero
- /detail on|off: Toggle printing the token sequence with each result
"""

from rich.console import Console
import click
from parencalc.commands.base import RichGroup, RichCommand, rich_help
from parencalc.config.settings import appsettings

console: Console = Console()


def policy_print() -> None:
    console.print(
        f"[yellow]operand policy[/yellow]: [green]{appsettings.operandPolicy().value}[/green]"
    )


@click.group(
    cls=RichGroup,
    short_help="operand policy",
    help="""
    mode

    Choose how operands that are neither a number nor '(' are handled.
    """,
)
def mode() -> None:
    pass


mode: click.Group = mode


@mode.command(
    cls=RichCommand,
    short_help="show the operand policy",
    help=rich_help(
        command="show",
        description="Show the operand policy",
        usage="/mode show",
        args={"<None>": "no arguments"},
    ),
)
async def show() -> None:
    policy_print()


@mode.command(
    cls=RichCommand,
    short_help="reject invalid operands",
    help=rich_help(
        command="strict",
        description="Raise an error on an invalid operand",
        usage="/mode strict",
        args={"<None>": "no arguments"},
    ),
)
async def strict() -> None:
    appsettings.strictOperands = True
    policy_print()


@mode.command(
    cls=RichCommand,
    short_help="read invalid operands as zero",
    help=rich_help(
        command="lenient",
        description="Read an invalid operand as zero",
        usage="/mode lenient",
        args={"<None>": "no arguments"},
    ),
)
async def lenient() -> None:
    appsettings.strictOperands = False
    policy_print()


@click.command(
    cls=RichCommand,
    short_help="toggle token echo",
    help=rich_help(
        command="detail",
        description="Print the token sequence with each result",
        usage="/detail on|off",
        args={"on|off": "enable or disable"},
    ),
)
@click.argument("state", type=click.Choice(["on", "off"]))
async def detail(state: str) -> None:
    appsettings.detailedOutput = state == "on"
    console.print(f"[yellow]detailed output[/yellow]: [green]{state}[/green]")
