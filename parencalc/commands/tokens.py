"""
Token inspection commands.

Command:
- /tokens show <expression>: Display the token sequence of an expression
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import click
from parencalc.commands.base import RichGroup, RichCommand, rich_help
from parencalc.lib.expr import ExpressionError, OPERATIONS, tokenize
from parencalc.lib.expr.symbols import numeric_is
from parencalc.lib.log import LOG

console: Console = Console()


def token_role(token: str) -> str:
    """Name the grammar role a token plays."""
    if numeric_is(token[0]):
        return "number"
    if token == "(":
        return "open"
    if token == ")":
        return "close"
    if token in OPERATIONS:
        return "operator"
    return "unknown"


def tokens_table(tokens: list[str]) -> Table:
    table: Table = Table(title="Tokens", border_style="cyan")
    table.add_column("#", justify="right", style="magenta")
    table.add_column("token", style="green")
    table.add_column("role", style="yellow")
    for index, token in enumerate(tokens):
        table.add_row(str(index), escape(token), token_role(token))
    return table


@click.group(
    cls=RichGroup,
    short_help="inspect tokens",
    help="""
    tokens

    Show how an expression line is split into tokens.
    """,
)
def tokens() -> None:
    pass


tokens: click.Group = tokens


@tokens.command(
    cls=RichCommand,
    short_help="tabulate the tokens of an expression",
    context_settings={"ignore_unknown_options": True},
    help=rich_help(
        command="show",
        description="Show the token sequence of an expression",
        usage="/tokens show <expression>",
        args={"<expression>": "expression text, the rest of the line"},
    ),
)
@click.argument("expression", nargs=-1, required=True)
async def show(expression: tuple[str, ...]) -> None:
    """
    Tokenize and tabulate an expression.
    """
    text: str = " ".join(expression)
    try:
        console.print(tokens_table(tokenize(text)))
    except ExpressionError as e:
        LOG(f"Error tokenizing {text!r}: {e}")
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
