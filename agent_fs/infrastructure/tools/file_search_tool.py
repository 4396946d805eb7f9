# agent_fs/infrastructure/tools/file_search_tool.py
"""
Recursive content search.

The walk keeps an explicit stack of pending paths instead of recursing.
Directory entries are pushed in reverse so that pops follow the order the
filesystem listed them, which keeps the traversal depth-first with files
reported in listing order. The match cap is checked before every entry and
every line; once reached, the walk stops.
"""

import asyncio
import os
from typing import Dict, Any, FrozenSet, List, Optional

from agent_fs.abstractions.dto.requests import SearchRequest

from .config import Config
from .fs_utils import lexists
from .hashline import split_lines
from .params import optional_bool, optional_int, optional_str, require_str
from .results import ExecutionFailed, ToolResult, ok
from .tool_base import Tool


def _list_dir(path: str) -> List[str]:
    with os.scandir(path) as it:
        return [entry.path for entry in it]


def _read_text_or_none(path: str) -> Optional[str]:
    try:
        with open(path, "r", encoding=Config.ENCODING) as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        return None


def _extension(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[1].lstrip(".")


class FileSearchTool(Tool[SearchRequest]):
    """
    Search text content across files in a directory tree.
    Results are reported in traversal order, not by relevance.
    """

    def __init__(self, ignored_dirs: Optional[FrozenSet[str]] = None):
        """
        Args:
            ignored_dirs: Directory names never descended into (defaults to Config.ignored_dirs())
        """
        self.ignored_dirs = frozenset(ignored_dirs) if ignored_dirs is not None else Config.ignored_dirs()

    @property
    def name(self) -> str:
        return "file_search"

    @property
    def description(self) -> str:
        return (
            "Search for text content across files in a directory. Returns matching lines with file "
            "paths and line numbers. Hidden entries and dependency/build directories are skipped."
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Text to search for"
                },
                "path": {
                    "type": "string",
                    "description": "Directory or file to search in",
                    "default": "."
                },
                "file_pattern": {
                    "type": "string",
                    "description": "File extension filter without the dot (e.g., 'rs', 'py', 'js')"
                },
                "case_sensitive": {
                    "type": "boolean",
                    "description": "Case sensitive search (default: false)",
                    "default": False
                },
                "max_results": {
                    "type": "integer",
                    "description": "Maximum results to return",
                    "minimum": 1,
                    "default": Config.SEARCH_MAX_RESULTS
                }
            },
            "required": ["query"]
        }

    def validate(self, input: Dict[str, Any]) -> SearchRequest:
        file_pattern = optional_str(input, "file_pattern")
        return SearchRequest(
            query=require_str(input, "query", allow_empty=False),
            root_path=optional_str(input, "path") or optional_str(input, "root_path") or ".",
            file_pattern=file_pattern.lstrip(".") if file_pattern else None,
            case_sensitive=optional_bool(input, "case_sensitive"),
            max_results=optional_int(input, "max_results", default=Config.SEARCH_MAX_RESULTS, minimum=1),
        )

    def _is_pruned(self, name: str) -> bool:
        return name.startswith(".") or name in self.ignored_dirs

    async def perform(self, request: SearchRequest) -> ToolResult:
        if not await lexists(request.root_path):
            raise ExecutionFailed(f"Path '{request.root_path}' does not exist", {"path": request.root_path})

        needle = request.query if request.case_sensitive else request.query.lower()
        matches: List[Dict[str, Any]] = []
        stack: List[str] = [request.root_path]

        while stack and len(matches) < request.max_results:
            current = stack.pop()

            if os.path.isdir(current):
                if os.path.islink(current) and current != request.root_path:
                    continue
                try:
                    entries = await asyncio.to_thread(_list_dir, current)
                except OSError:
                    continue
                children = [p for p in entries if not self._is_pruned(os.path.basename(p))]
                stack.extend(reversed(children))
                continue

            if not os.path.isfile(current):
                continue
            if request.file_pattern is not None and _extension(current) != request.file_pattern:
                continue

            content = await asyncio.to_thread(_read_text_or_none, current)
            if content is None:
                continue

            for number, line in enumerate(split_lines(content), start=1):
                if len(matches) >= request.max_results:
                    break
                haystack = line if request.case_sensitive else line.lower()
                if needle in haystack:
                    matches.append({"file": current, "line_number": number, "content": line.strip()})

        total = len(matches)
        return ok(
            {
                "matches": matches,
                "total": total,
                "query": request.query,
                "truncated": total >= request.max_results,
            },
            f"{total} result(s) for \"{request.query}\"",
        )
