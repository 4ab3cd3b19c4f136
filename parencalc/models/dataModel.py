"""
dataModel.py

This module defines the data models used throughout parencalc.
The models leverage Pydantic for validation and type safety.

Features:
- Evaluation results
- Input collection and processing results
- Input mode detection
"""

from pydantic import BaseModel, Field
from enum import Enum


class OperandPolicy(Enum):
    """
    How an operand that is neither a number nor a group is treated.
    """

    STRICT = "strict"
    LENIENT = "lenient"


class EvalResult(BaseModel):
    """Result of evaluating one expression line.

    Attributes:
        value: The computed number, None on failure
        tokens: Token sequence of the line (empty if tokenizing failed)
        error: Optional error message if evaluation failed
        success: Whether evaluation succeeded
    """

    value: float | None = None
    tokens: list[str] = Field(default_factory=list)
    error: str | None = None
    success: bool = True


class InputResult(BaseModel):
    """Result of input collection operation.

    Attributes:
        text: The collected input text
        continue_loop: Whether to continue processing
        error: Optional error message if input collection failed
    """

    text: str
    continue_loop: bool
    error: str | None = None


class ProcessResult(BaseModel):
    """Result of command/input processing.

    Attributes:
        text: Formatted result or command text
        tokens: Token sequence of an evaluated expression
        is_command: Whether input was a command
        should_exit: Whether to exit processing
        error: Optional error message
        success: Whether processing succeeded
        exit_code: Exit code for non-interactive mode
    """

    text: str
    tokens: list[str] = Field(default_factory=list)
    is_command: bool
    should_exit: bool
    error: str | None = None
    success: bool = True
    exit_code: int = 0


class InputMode(BaseModel):
    """Input mode determination.

    Attributes:
        has_stdin: Whether stdin has content
        expr_string: Expression given on the command line
        use_repl: Whether to use interactive REPL
    """

    has_stdin: bool = False
    expr_string: str | None = None
    use_repl: bool = True
