"""Tests for REPL command palette functionality."""

import pytest
from unittest.mock import patch
from parencalc.commands import mode, tokens
from parencalc.config.settings import appsettings
from parencalc.lib.command import command_process


@pytest.mark.asyncio
async def test_tokens_show(console_capture):
    console, output = console_capture
    with patch("parencalc.commands.tokens.console", console):
        await tokens.show.callback(("(12", "+", "3)"))
    text = output.getvalue()
    assert "12" in text
    assert "number" in text
    assert "operator" in text
    assert "close" in text


@pytest.mark.asyncio
async def test_tokens_show_error(console_capture):
    console, output = console_capture
    with patch("parencalc.commands.tokens.console", console):
        await tokens.show.callback(("",))
    assert "Error" in output.getvalue()


def test_token_role():
    assert tokens.token_role("3.5") == "number"
    assert tokens.token_role("(") == "open"
    assert tokens.token_role(")") == "close"
    assert tokens.token_role("/") == "operator"
    assert tokens.token_role("abc") == "unknown"


@pytest.mark.asyncio
async def test_mode_switching(console_capture):
    console, output = console_capture
    with patch("parencalc.commands.mode.console", console):
        await mode.lenient.callback()
        assert appsettings.strictOperands is False
        await mode.strict.callback()
        assert appsettings.strictOperands is True
        await mode.show.callback()
    assert "lenient" in output.getvalue()
    assert "strict" in output.getvalue()


@pytest.mark.asyncio
async def test_command_process_dispatches(console_capture):
    console, output = console_capture
    with patch("parencalc.commands.mode.console", console):
        assert await command_process("/mode lenient") is True
        assert await command_process("/detail on") is True
    assert appsettings.strictOperands is False
    assert appsettings.detailedOutput is True


@pytest.mark.asyncio
async def test_command_process_tokens(console_capture):
    console, output = console_capture
    with patch("parencalc.commands.tokens.console", console):
        assert await command_process("/tokens show ((1+2)*3)") is True
    assert "operator" in output.getvalue()


@pytest.mark.asyncio
async def test_command_process_exit():
    assert await command_process("/exit") is False


@pytest.mark.asyncio
async def test_command_process_errors_continue(console_capture):
    console, output = console_capture
    with patch("parencalc.lib.command.console", console):
        assert await command_process("/") is True
        assert await command_process('/tokens show "(1') is True
        assert await command_process("/nosuch") is True
    text = output.getvalue()
    assert "No command provided" in text
    assert "Error parsing input" in text


@pytest.mark.asyncio
async def test_tokens_show_dash_led_operand(console_capture):
    console, output = console_capture
    with (
        patch("parencalc.commands.tokens.console", console),
        patch("parencalc.lib.command.console", console),
    ):
        assert await command_process("/tokens show (5 -3)") is True
    text = output.getvalue()
    assert "No such option" not in text
    assert "operator" in text
    assert "close" in text


@pytest.mark.asyncio
async def test_help_lists_commands(console_capture):
    console, output = console_capture
    with patch("parencalc.commands.base.console", console):
        assert await command_process("/help") is True
        assert await command_process("/mode --help") is True
    text = output.getvalue()
    for name in ("tokens", "mode", "detail", "strict", "lenient"):
        assert name in text
    assert "toggle token echo" in text
    assert "No description available" not in text


@pytest.mark.asyncio
async def test_command_help_panel(console_capture):
    console, output = console_capture
    with patch("parencalc.commands.base.console", console):
        assert await command_process("/tokens show --help") is True
    text = output.getvalue()
    assert "Show the token sequence of an expression" in text
    assert "/tokens show <expression>" in text
