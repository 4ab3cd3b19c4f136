"""Shared pytest fixtures for parencalc."""

import io
import os
import pytest
from rich.console import Console
from parencalc.config.settings import appsettings


@pytest.fixture(autouse=True)
def settings_restore():
    """Undo runtime changes to the shared settings and PCALC_ variables."""
    saved: dict = appsettings.model_dump()
    yield
    for key, value in saved.items():
        setattr(appsettings, key, value)
    for k in list(os.environ):
        if k.startswith("PCALC_"):
            del os.environ[k]


@pytest.fixture
def console_capture() -> tuple[Console, io.StringIO]:
    """A rich console writing into a string buffer."""
    output = io.StringIO()
    return Console(file=output, width=120), output
