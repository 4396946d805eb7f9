"""
Command-line front end for the file tool catalogue.

Commands:
  agent-fs list                          List registered tools
  agent-fs call <tool> '<json args>'     Execute one tool and print the result
  agent-fs                               Interactive session (/help for commands)

Exit codes for ``call``: 0 on success, 1 when the tool fails, 2 on bad usage
(unknown tool, malformed JSON).

Run:
  agent-fs ...
  or
  python -m agent_fs ...
"""

from __future__ import annotations

import argparse
import asyncio
import json
from typing import Any, Dict, List, Optional

from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from agent_fs.infrastructure.logging_setup import configure_logging
from agent_fs.infrastructure.tools.results import ToolError
from agent_fs.infrastructure.tools.tool_manager import ToolManager
from agent_fs.ui.cli.console import make_console

EXIT_OK = 0
EXIT_TOOL_ERROR = 1
EXIT_USAGE = 2


def list_tools(console: Console, manager: ToolManager) -> None:
    """Render a table of registered tools."""
    table = Table(title="Registered Tools", box=ROUNDED)
    table.add_column("Name", no_wrap=True, style="tool")
    table.add_column("Description")
    table.add_column("Required Params")
    table.add_column("Approval")

    for info in manager.list_tools():
        req = ", ".join(info["input_schema"].get("required", []))
        table.add_row(info["name"], info["description"], req or "-", "[gated]yes[/gated]" if info["requires_approval"] else "no")

    console.print(table)


def call_tool(console: Console, manager: ToolManager, tool_name: str, params_raw: str) -> int:
    """Execute a tool with JSON arguments and print the result panel."""
    try:
        params: Dict[str, Any] = json.loads(params_raw) if params_raw.strip() else {}
    except json.JSONDecodeError as e:
        console.print(Panel(Text(f"Invalid JSON: {e}"), title="Error", box=ROUNDED, border_style="error"))
        return EXIT_USAGE

    try:
        manager.get_tool(tool_name)
    except KeyError:
        console.print(Panel(Text(f"Tool '{tool_name}' not found"), title="Error", box=ROUNDED, border_style="error"))
        return EXIT_USAGE

    try:
        result = asyncio.run(manager.execute_tool(tool_name, params))
    except ToolError as e:
        body = str(e)
        if e.context:
            body += "\n" + json.dumps(e.context, ensure_ascii=False, indent=2)
        console.print(Panel(Text(body), title=f"Tool Error: {tool_name}", box=ROUNDED, border_style="error"))
        return EXIT_TOOL_ERROR

    rendered = json.dumps(result.data, ensure_ascii=False, indent=2)
    console.print(Panel(Text(f"{result.message}\n\n{rendered}"), title=f"Tool Result: {tool_name}", box=ROUNDED))
    return EXIT_OK


def show_help(console: Console) -> None:
    """Print help panel."""
    console.print(
        Panel(
            "Commands\n"
            "/help      Show help\n"
            "/tools     List registered tools\n"
            "/call      Execute a tool (e.g., /call file_info {\"path\":\"README.md\"})\n"
            "/exit      Exit",
            title="Help",
            box=ROUNDED,
        )
    )


def handle_command(console: Console, manager: ToolManager, cmd: str) -> bool:
    """Handle one interactive command. Returns False when the session should end."""
    cmd = cmd.strip()
    if not cmd:
        return True
    if cmd in ("/exit", "/quit"):
        return False
    if cmd == "/help":
        show_help(console)
    elif cmd == "/tools":
        list_tools(console, manager)
    elif cmd.startswith("/call"):
        parts = cmd.split(maxsplit=2)
        if len(parts) < 2:
            console.print("Usage: /call <tool_name> {\"param\":\"value\", ...}")
        else:
            call_tool(console, manager, parts[1], parts[2] if len(parts) == 3 else "")
    else:
        console.print(f"[warning]Unknown command: {escape(cmd)}[/warning] (try /help)")
    return True


def interactive(console: Console, manager: ToolManager) -> int:
    from prompt_toolkit import PromptSession
    from prompt_toolkit.completion import WordCompleter
    from prompt_toolkit.history import InMemoryHistory

    session = PromptSession(
        history=InMemoryHistory(),
        completer=WordCompleter(["/help", "/tools", "/call", "/exit"] + sorted(manager.tools), sentence=True),
    )
    show_help(console)
    while True:
        try:
            line = session.prompt("agent-fs> ")
        except (EOFError, KeyboardInterrupt):
            break
        if not handle_command(console, manager, line):
            break
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="agent-fs", description="File tool catalogue for coding agents")
    parser.add_argument("--log-level", default=None, help="Logging level (default: AGENT_FS_LOG_LEVEL or WARNING)")
    parser.add_argument("--theme", choices=["dark", "light"], default="dark")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("list", help="List registered tools")
    call = sub.add_parser("call", help="Execute a tool")
    call.add_argument("tool", help="Tool name, e.g. file_edit")
    call.add_argument("params", nargs="?", default="{}", help="JSON object with the tool arguments")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or make_console(args.theme, use_color=False if args.no_color else None)
    configure_logging(args.log_level)
    manager = ToolManager(register_defaults=True)

    if args.command == "list":
        list_tools(console, manager)
        return EXIT_OK
    if args.command == "call":
        return call_tool(console, manager, args.tool, args.params)
    return interactive(console, manager)


if __name__ == "__main__":
    raise SystemExit(main())
