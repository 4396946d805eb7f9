"""
Rich console factory for the agent-fs CLI.
"""

import os
import sys
from typing import Dict, Optional, Tuple

from rich.console import Console
from rich.theme import Theme

# Style names referenced from app.py markup and panel borders
PALETTES: Dict[str, Dict[str, str]] = {
    "dark": {
        "tool": "bold cyan",
        "gated": "yellow",
        "warning": "yellow",
        "error": "bold red",
        "success": "green",
        "muted": "grey70",
    },
    "light": {
        "tool": "bold dark_blue",
        "gated": "dark_orange",
        "warning": "dark_orange",
        "error": "red",
        "success": "dark_green",
        "muted": "grey42",
    },
}


def _truthy_env(name: str) -> bool:
    return (os.getenv(name) or "").lower() in ("1", "true", "yes", "on")


def color_policy(use_color: Optional[bool], stream=None) -> Tuple[bool, bool]:
    """
    Decide (colored, force_terminal) for a console.

    NO_COLOR turns color off unless AGENT_FS_FORCE_COLOR is set. With
    use_color=None the decision follows whether the stream is a tty.
    """
    stream = stream or sys.stdout
    tty = bool(getattr(stream, "isatty", lambda: False)())
    forced = _truthy_env("AGENT_FS_FORCE_COLOR")

    if use_color is False:
        return False, False
    wanted = tty if use_color is None else True
    colored = wanted and (forced or os.getenv("NO_COLOR") is None)
    return colored, forced or (colored and tty)


def make_console(theme_name: str = "dark", use_color: Optional[bool] = None, file=None) -> Console:
    """Create a Rich console with the selected palette and color policy."""
    palette = PALETTES.get(theme_name, PALETTES["dark"])
    colored, force_terminal = color_policy(use_color, file)
    return Console(
        file=file,
        theme=Theme(palette),
        no_color=not colored,
        color_system="auto" if colored else None,
        force_terminal=force_terminal,
        highlight=False,
    )
