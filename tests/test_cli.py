"""Tests for the agent-fs command line front end."""

import io
import json
import logging

import pytest
from rich.logging import RichHandler

from agent_fs.infrastructure.logging_setup import configure_logging
from agent_fs.infrastructure.tools.tool_manager import ToolManager
from agent_fs.ui.cli.app import EXIT_OK, EXIT_TOOL_ERROR, EXIT_USAGE, build_parser, handle_command, main
from agent_fs.ui.cli.console import make_console


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console(buffer):
    return make_console("dark", use_color=False, file=buffer)


def test_list_prints_every_tool(console, buffer):
    assert main(["list"], console=console) == EXIT_OK
    output = buffer.getvalue()
    for name in ("file_read", "file_edit", "file_search", "directory_create"):
        assert name in output


def test_call_success(console, buffer, tmp_path):
    target = tmp_path / "made.txt"
    params = json.dumps({"path": str(target), "content": "hi\n"})

    assert main(["call", "file_create", params], console=console) == EXIT_OK
    assert target.read_text(encoding="utf-8") == "hi\n"
    assert "Tool Result: file_create" in buffer.getvalue()


def test_call_tool_failure_exit_code(console, buffer, tmp_path):
    params = json.dumps({"path": str(tmp_path / "absent.txt")})
    assert main(["call", "file_delete", params], console=console) == EXIT_TOOL_ERROR
    assert "Tool Error: file_delete" in buffer.getvalue()


def test_call_invalid_parameters_exit_code(console):
    assert main(["call", "file_edit", "{}"], console=console) == EXIT_TOOL_ERROR


@pytest.mark.parametrize(
    "argv",
    [
        ["call", "no_such_tool", "{}"],
        ["call", "file_info", "{not json"],
    ],
)
def test_call_usage_errors(console, argv):
    assert main(argv, console=console) == EXIT_USAGE


def test_parser_defaults():
    args = build_parser().parse_args(["call", "file_info"])
    assert (args.command, args.tool, args.params, args.theme) == ("call", "file_info", "{}", "dark")


def test_handle_command(console, buffer, tmp_path):
    manager = ToolManager()
    assert handle_command(console, manager, "/exit") is False
    assert handle_command(console, manager, "/quit") is False
    assert handle_command(console, manager, "") is True

    assert handle_command(console, manager, "/bogus") is True
    assert "Unknown command" in buffer.getvalue()

    (tmp_path / "x.txt").write_text("x\n", encoding="utf-8")
    line = "/call file_info " + json.dumps({"path": str(tmp_path / "x.txt")})
    assert handle_command(console, manager, line) is True
    assert "Tool Result: file_info" in buffer.getvalue()


def test_configure_logging_installs_single_rich_handler(console):
    configure_logging("debug", console=console)
    configure_logging("info", console=console)
    logger = logging.getLogger("agent_fs")
    assert logger.level == logging.INFO
    assert len([h for h in logger.handlers if isinstance(h, RichHandler)]) == 1
    assert logger.propagate is False


def test_color_policy(monkeypatch):
    from agent_fs.ui.cli.console import color_policy

    monkeypatch.delenv("AGENT_FS_FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert color_policy(False, io.StringIO()) == (False, False)
    assert color_policy(None, io.StringIO()) == (False, False)
    assert color_policy(True, io.StringIO()) == (True, False)

    monkeypatch.setenv("NO_COLOR", "1")
    assert color_policy(True, io.StringIO()) == (False, False)
    monkeypatch.setenv("AGENT_FS_FORCE_COLOR", "1")
    assert color_policy(True, io.StringIO()) == (True, True)


@pytest.mark.parametrize("line", ["x = a[/i]", "items[bold]", "[red]not a style[/red]"])
def test_call_prints_file_text_verbatim(console, buffer, tmp_path, line):
    path = tmp_path / "brackets.py"
    path.write_text(line + "\n", encoding="utf-8")

    assert main(["call", "file_read", json.dumps({"path": str(path)})], console=console) == EXIT_OK
    assert line in buffer.getvalue()


def test_tool_error_text_printed_verbatim(console, buffer, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["call", "file_info", json.dumps({"path": "[/gone].txt"})], console=console) == EXIT_TOOL_ERROR
    assert "[/gone].txt" in buffer.getvalue()


def test_unknown_command_echoed_verbatim(console, buffer):
    assert handle_command(console, ToolManager(), "/what[/b]") is True
    assert "/what[/b]" in buffer.getvalue()
