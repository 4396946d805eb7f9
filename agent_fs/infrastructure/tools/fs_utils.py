"""
Async filesystem helpers shared by the file tools.

Blocking calls run in a worker thread through ``asyncio.to_thread`` so a tool
suspends only while the filesystem is busy. OSErrors are converted to
ExecutionFailed with the action and path that failed.
"""

from __future__ import annotations

import asyncio
import os
import shutil
from typing import Any, Callable, TypeVar

from .config import Config
from .results import ExecutionFailed

T = TypeVar("T")


async def run_io(action: str, path: str, func: Callable[..., T], *args: Any) -> T:
    """Run ``func(*args)`` off the event loop, wrapping OSError."""
    try:
        return await asyncio.to_thread(func, *args)
    except OSError as e:
        raise ExecutionFailed(f"Cannot {action} '{path}': {e.strerror or e}", {"path": path}) from e


def _read_text(path: str) -> str:
    # newline="" keeps \r\n intact so edits preserve line endings
    with open(path, "r", encoding=Config.ENCODING, newline="") as f:
        return f.read()


def _write_text(path: str, content: str) -> None:
    with open(path, "w", encoding=Config.ENCODING, newline="") as f:
        f.write(content)


async def read_text(path: str) -> str:
    """Read a whole text file; undecodable content is an ExecutionFailed."""
    try:
        return await run_io("read", path, _read_text, path)
    except UnicodeDecodeError as e:
        raise ExecutionFailed(f"Cannot read '{path}': not a {Config.ENCODING} text file", {"path": path}) from e


async def write_text(path: str, content: str) -> None:
    await run_io("write", path, _write_text, path, content)


async def ensure_parent(path: str) -> None:
    """Create the parent directories of ``path`` when missing."""
    parent = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(parent):
        await run_io("create parent directory for", path, os.makedirs, parent, 0o777, True)


async def lexists(path: str) -> bool:
    return await asyncio.to_thread(os.path.lexists, path)


def _copy_bytes(source: str, destination: str) -> int:
    shutil.copyfile(source, destination)
    shutil.copymode(source, destination)
    return os.path.getsize(destination)


async def copy_file(source: str, destination: str) -> int:
    """Byte-copy ``source`` to ``destination``; return bytes written."""
    return await run_io("copy", source, _copy_bytes, source, destination)


def format_size(size: int) -> str:
    """Render a byte count with a base-1024 unit (B, KB, MB, GB)."""
    kb = 1024
    mb = kb * 1024
    gb = mb * 1024
    if size >= gb:
        return f"{size / gb:.1f} GB"
    if size >= mb:
        return f"{size / mb:.1f} MB"
    if size >= kb:
        return f"{size / kb:.1f} KB"
    return f"{size} B"


__all__ = [
    "run_io",
    "read_text",
    "write_text",
    "ensure_parent",
    "lexists",
    "copy_file",
    "format_size",
]
