"""
Input handling and processing for parencalc.

This module provides functionality for collecting and processing user input:
- Interactive and non-interactive input
- Input mode detection
- Expression evaluation and command dispatch
- Error reporting

Processing order:
1. Commands (leading '/')
2. Expression evaluation
"""

import sys
from typing import Final, Optional
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from rich.markup import escape
from parencalc.config.settings import appsettings, console, historyFile_ensure
from parencalc.lib.command import command_process
from parencalc.lib.evaluator import expression_evaluate, result_format
from parencalc.lib.log import LOG
from parencalc.models.dataModel import EvalResult, InputMode, InputResult, ProcessResult

COMMAND_PREFIX: Final[str] = "/"


class REPLSession:
    """Manages REPL input session with history support."""

    def __init__(self) -> None:
        self.session: Optional[PromptSession] = None
        self._setup_prompt_session()

    def _setup_prompt_session(self) -> None:
        """Initialize prompt toolkit session."""
        self.session = PromptSession(
            history=FileHistory(str(historyFile_ensure(appsettings))),
            enable_history_search=True,
        )


# Global session instance
repl_session: Optional[REPLSession] = None


async def input_get() -> InputResult:
    """Get user input with prompt.

    Returns:
        InputResult containing:
            - text: The user input text
            - continue_loop: Whether to continue processing
            - error: Any error message if input failed

    Note:
        Supports up/down history navigation and persistent history.
        Ctrl-D (EOF) and Ctrl-C end the loop.
    """
    global repl_session
    try:
        if not repl_session:
            repl_session = REPLSession()

        user_input: str = await repl_session.session.prompt_async(
            f"{appsettings.prompt} "
        )
        return InputResult(text=user_input.strip(), continue_loop=True)

    except (EOFError, KeyboardInterrupt):
        return InputResult(text="", continue_loop=False, error="Input terminated")
    except Exception as e:
        return InputResult(text="", continue_loop=False, error=f"Input error: {e}")


async def mode_detect(expr_string: str | None = None) -> InputMode:
    """Detect the appropriate input mode.

    Args:
        expr_string: Optional expression from the command line

    Returns:
        InputMode indicating how to handle input

    Note:
        Priority order:
        1. Stdin content
        2. Expression string
        3. REPL mode
    """
    try:
        if not sys.stdin.isatty():
            return InputMode(has_stdin=True, expr_string=None, use_repl=False)
        if expr_string:
            return InputMode(has_stdin=False, expr_string=expr_string, use_repl=False)
        return InputMode(has_stdin=False, expr_string=None, use_repl=True)

    except Exception as e:
        LOG(f"Error detecting input mode: {e}")
        return InputMode(has_stdin=False, expr_string=None, use_repl=True)


async def input_readStdin() -> str:
    """Read the expression line from stdin.

    Returns:
        The first line of stdin, without its line terminator

    Raises:
        IOError: If stdin is empty or cannot be read
    """
    try:
        content: str = sys.stdin.readline().rstrip("\r\n")
    except Exception as e:
        LOG(f"Error reading from stdin: {e}")
        raise IOError(f"Failed to read from stdin: {e}")
    if not content:
        raise IOError("Empty input from stdin")
    return content


async def input_process(text: str) -> ProcessResult:
    """Process any type of input (commands or expressions).

    Args:
        text: Raw input text to process

    Returns:
        ProcessResult containing the formatted value or command status
    """
    if text.startswith(COMMAND_PREFIX):
        try:
            continue_processing: bool = await command_process(text)
            return ProcessResult(
                text=text,
                is_command=True,
                should_exit=not continue_processing,
                success=True,
                exit_code=0,
            )
        except Exception as e:
            LOG(f"Command processing error: {e}")
            return ProcessResult(
                text="",
                is_command=True,
                should_exit=True,
                error=str(e),
                success=False,
                exit_code=1,
            )

    result: EvalResult = expression_evaluate(text)
    if not result.success:
        return ProcessResult(
            text="",
            tokens=result.tokens,
            is_command=False,
            should_exit=False,
            error=result.error,
            success=False,
            exit_code=1,
        )

    return ProcessResult(
        text=result_format(result.value),
        tokens=result.tokens,
        is_command=False,
        should_exit=False,
        success=True,
        exit_code=0,
    )


async def input_handle(text: str, non_interactive: bool = False) -> bool:
    """Handle input processing and return whether to continue REPL loop.

    Returns:
        bool: True if REPL should continue, False if should exit

    Note:
        In non-interactive mode this always ends the process with the
        result's exit code.
    """
    process_result: ProcessResult = await input_process(text)
    if not process_result.success:
        console.print(f"[bold red]Error: {escape(process_result.error or '')}[/bold red]")
        if non_interactive:
            sys.exit(process_result.exit_code)
        return True  # Continue loop despite errors in interactive mode

    if appsettings.detailedOutput and process_result.tokens:
        console.print(f"[dim]tokens: {escape(' '.join(process_result.tokens))}[/dim]")

    should_exit: bool = False
    if process_result.is_command:
        if process_result.should_exit:
            if non_interactive:
                sys.exit(process_result.exit_code)
            console.print("[bold cyan]Exiting.[/bold cyan]")
            should_exit = True
    elif non_interactive:
        console.print(process_result.text, highlight=False)
    else:
        console.print(f"[bold yellow]=[/bold yellow] {process_result.text}")

    if non_interactive:
        sys.exit(process_result.exit_code)

    return not should_exit
