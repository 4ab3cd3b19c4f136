"""
settings.py

This module provides application configuration management for parencalc.

Features:
- Centralized application configuration using Pydantic settings
- Constants for application-wide use
- A shared rich console

Usage:
Import appsettings for application configuration values.
"""

from pathlib import Path
from typing import Final
from appdirs import user_data_dir
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console
from parencalc.models.dataModel import OperandPolicy

# Console instance for rich output
console: Final[Console] = Console()

# Per-user data directory (REPL history lives here)
DATA_DIR: Final[Path] = Path(user_data_dir("parencalc", ""))
HISTORY_FILE: Final[Path] = DATA_DIR / "history"


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with PCALC_ prefix.

    Attributes:
        beQuiet: Suppress detailed logging output
        strictOperands: Reject operands that are neither a number nor a
                        parenthesized group (False substitutes zero instead)
        detailedOutput: Print the token sequence alongside each result
        prompt: REPL prompt text
        historyFile: REPL history file
    """

    beQuiet: bool = False
    strictOperands: bool = True
    detailedOutput: bool = False
    prompt: str = "calc>"
    historyFile: Path = Field(default=HISTORY_FILE)

    model_config = SettingsConfigDict(
        env_prefix="PCALC_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="allow",  # Allow additional attributes not defined in the model
    )

    def operandPolicy(self) -> OperandPolicy:
        """The operand policy implied by `strictOperands`."""
        return OperandPolicy.STRICT if self.strictOperands else OperandPolicy.LENIENT


def historyFile_ensure(settings: App) -> Path:
    """
    Ensure the directory holding the REPL history file exists.

    Args:
        settings: The application settings

    Returns:
        Path: The history file path
    """
    settings.historyFile.parent.mkdir(parents=True, exist_ok=True)
    return settings.historyFile


# Create the application settings instance
appsettings: Final[App] = App()
