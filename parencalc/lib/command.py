"""
Dispatch of palette commands typed at the calculator prompt.

A line starting with `/` is split shell-style and run through the click
group in `parencalc.commands.app`. `/exit` ends the session; `/help` and any
`--help` render the rich help. Usage and runtime errors are printed and never
end the session.
"""

import asyncio
import shlex
import click
from typing import Any, Final
from rich.console import Console
from parencalc.commands.app import cli
from parencalc.lib.log import LOG

console: Final[Console] = Console()


async def command_process(user_input: str) -> bool:
    """Run one palette command.

    Args:
        user_input: The command line, leading `/` included

    Returns:
        False after `/exit`, True otherwise
    """
    try:
        parts: list[str] = shlex.split(user_input[1:])
    except ValueError as e:
        LOG(f"Error parsing command: {e}")
        console.print(f"[bold red]Error parsing input: {e}[/bold red]")
        return True

    if not parts:
        console.print("[bold red]Error: No command provided.[/bold red]")
        return True

    command: str = parts[0]
    args: list[str] = parts[1:]

    try:
        if command == "exit":
            return False

        if command == "help" or "--help" in args:
            cli.main(
                args=[command] + args if command != "help" else ["--help"],
                prog_name="/",
                standalone_mode=False,
            )
            return True

        result: Any = cli.main(
            args=[command] + args, prog_name="/", standalone_mode=False
        )
        # Palette commands are coroutines
        if asyncio.iscoroutine(result):
            await result
        return True

    except click.exceptions.UsageError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return True
    except SystemExit:
        return True
    except Exception as e:
        LOG(f"Command processing error: {e}")
        console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        return True
