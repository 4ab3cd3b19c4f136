"""
The interactive calculator loop.

Each line read at the prompt is either a palette command (leading `/`) or
an expression; results and errors are printed and the loop carries on until
`/exit`, end of input, or an unrecoverable error.
"""

from rich.console import Console
from typing import Final
from parencalc.config.settings import appsettings
from parencalc.lib.input import input_get, input_handle
from parencalc.lib.log import LOG
from parencalc.models.dataModel import InputResult

console: Final[Console] = Console()


async def repl_do() -> None:
    """Read and evaluate lines until the session ends.

    Blank lines are skipped. Bad expressions only print an error; the loop
    stops on `/exit`, Ctrl-D or Ctrl-C at the prompt.
    """
    console.print(
        "[cyan]parencalc[/cyan]  "
        "[green]evaluate expressions like [white]((1+2)*(3-1))[/white]; "
        "[white]/help[/white] lists commands, [white]/exit[/white] quits[/green]"
    )
    console.print(
        f"[dim]operand policy: {appsettings.operandPolicy().value}[/dim]"
    )

    continue_repl: bool = True
    while continue_repl:
        try:
            input_result: InputResult = await input_get()

            if not input_result.continue_loop:
                break

            cleaned_input: str = input_result.text.strip()
            if not cleaned_input:
                continue

            continue_repl = await input_handle(
                text=cleaned_input, non_interactive=False
            )

        except KeyboardInterrupt:
            console.print("\n[bold yellow]Use '/exit' to quit properly[/bold yellow]")
        except Exception as e:
            LOG(f"REPL critical error: {e}")
            console.print(f"[bold red]Fatal error: {e}[/bold red]")
            continue_repl = False

    console.print("[bold cyan]REPL session terminated[/bold cyan]")
