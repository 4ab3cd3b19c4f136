"""
parencalc Main Module.

This module serves as the main entry point for parencalc, a calculator for
fully-parenthesized arithmetic over non-negative decimal numbers.

Features:
- Applies command-line overrides to the application settings
- Supports multiple input modes: stdin, direct expression, and interactive REPL
- Handles graceful termination on user interruption

Examples:
    Start interactive REPL:
        $ parencalc

    Single expression mode:
        $ parencalc --expr "((1+2)*(3-1))"
        $ echo "3 + 4" | parencalc
        $ parencalc --tokens --expr "(12 + 3)"

Note:
    Input priority order:
    1. stdin (if available)
    2. --expr argument (if provided)
    3. interactive REPL (default)
"""

from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter
from parencalc.config.settings import appsettings
from parencalc.lib.repl import repl_do
from parencalc.lib.input import mode_detect, input_readStdin, input_handle
from parencalc.models.dataModel import InputMode
import asyncio
import signal
from rich.console import Console
from parencalc.lib.log import LOG
import sys
from typing import Final, Optional
from types import FrameType

__version__: Final[str] = "0.1.0"

DISPLAY_TITLE: Final[
    str
] = """
┌─┐┌─┐┬─┐┌─┐┌┐┌┌─┐┌─┐┬  ┌─┐
├─┘├─┤├┬┘├┤ ││││  ├─┤│  │
┴  ┴ ┴┴└─└─┘┘└┘└─┘┴ ┴┴─┘└─┘
"""

console: Final[Console] = Console()

parser: Final[ArgumentParser] = ArgumentParser(
    prog="parencalc",
    description="Evaluate fully-parenthesized arithmetic expressions.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument("--expr", type=str, help="Expression to evaluate (alternative to stdin)")
parser.add_argument(
    "--lenient",
    action="store_true",
    help="Read operands that are neither a number nor a group as zero",
)
parser.add_argument(
    "--tokens", action="store_true", help="Also print the token sequence"
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def config_setup(options: Namespace) -> bool:
    """Apply command-line overrides to the application settings.

    Args:
        options: Parsed command-line arguments

    Returns:
        bool: True if configuration successful
    """
    try:
        if options.lenient:
            appsettings.strictOperands = False
        if options.tokens:
            appsettings.detailedOutput = True
        return True
    except Exception as e:
        LOG(f"Configuration setup failed: {e}")
        return False


async def async_main(options: Namespace) -> None:
    """Asynchronous main function handling all input modes.

    Args:
        options: Parsed command-line arguments
    """
    try:
        if not config_setup(options):
            return

        mode: InputMode = await mode_detect(options.expr)

        if mode.has_stdin:
            input_text: str = await input_readStdin()
            await input_handle(input_text, non_interactive=True)

        elif mode.expr_string:
            await input_handle(mode.expr_string, non_interactive=True)

        else:
            console.print(DISPLAY_TITLE)
            await repl_do()

    except Exception as e:
        LOG(f"Unhandled exception in async_main: {e}")
        console.print(f"[bold red]An unexpected error occurred: {e}[/bold red]")
        sys.exit(1)


def signal_handle(sig: int, frame: Optional[FrameType]) -> None:
    """Signal handler for graceful interruption.

    Args:
        sig: Signal number
        frame: Current stack frame
    """
    console.print("\n[bold red]Interrupt received. Exiting.[/bold red]")
    sys.exit(0)


def main(argv: Optional[list[str]] = None) -> None:
    """Console script entry point.

    Args:
        argv: Argument list, defaults to sys.argv[1:]
    """
    options: Namespace = parser.parse_args(argv)

    signal.signal(signal.SIGINT, signal_handle)

    try:
        asyncio.run(async_main(options))
    except KeyboardInterrupt:
        console.print("\n[bold cyan]Program interrupted by user. Exiting.[/bold cyan]")


if __name__ == "__main__":
    main()
