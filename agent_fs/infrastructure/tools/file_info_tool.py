# agent_fs/infrastructure/tools/file_info_tool.py

import asyncio
import os
import stat
from typing import Dict, Any, Optional

from agent_fs.abstractions.dto.requests import InfoRequest

from .config import Config
from .fs_utils import format_size, run_io
from .hashline import split_lines
from .params import require_str
from .results import ToolResult, ok
from .tool_base import Tool


def _entry_type(mode: int) -> str:
    if stat.S_ISLNK(mode):
        return "symlink"
    if stat.S_ISREG(mode):
        return "file"
    if stat.S_ISDIR(mode):
        return "directory"
    return "other"


def _count_lines(path: str) -> Optional[int]:
    # Best effort: unreadable or non-text files simply have no line count
    try:
        with open(path, "r", encoding=Config.ENCODING, newline="") as f:
            return len(split_lines(f.read()))
    except (OSError, UnicodeDecodeError):
        return None


class FileInfoTool(Tool[InfoRequest]):
    """
    Read-only metadata inspection.

    Reports kind, size, read-only flag, timestamps and extension. Regular
    files below ``Config.INFO_LINE_COUNT_LIMIT`` bytes also get a line count.
    """

    @property
    def name(self) -> str:
        return "file_info"

    @property
    def description(self) -> str:
        return "Get detailed information about a file or directory (size, permissions, timestamps, type)."

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Path to the file or directory"
                }
            },
            "required": ["path"]
        }

    def validate(self, input: Dict[str, Any]) -> InfoRequest:
        return InfoRequest(path=require_str(input, "path", allow_empty=False))

    async def perform(self, request: InfoRequest) -> ToolResult:
        path = request.path
        st = await run_io("read metadata of", path, os.lstat, path)

        entry_type = _entry_type(st.st_mode)
        size = st.st_size
        readonly = not (st.st_mode & stat.S_IWUSR)
        modified = int(st.st_mtime) if st.st_mtime else None
        birthtime = getattr(st, "st_birthtime", None)
        created = int(birthtime) if birthtime else None
        extension = os.path.splitext(os.path.basename(path.rstrip("/\\")))[1].lstrip(".")

        line_count = None
        if entry_type == "file" and size < Config.INFO_LINE_COUNT_LIMIT:
            line_count = await asyncio.to_thread(_count_lines, path)

        size_human = format_size(size)
        summary = f"{path}: {entry_type} ({size_human}, {'read-only' if readonly else 'read/write'}"
        if line_count is not None:
            summary += f", {line_count} lines"
        summary += ")"

        return ok(
            {
                "path": path,
                "type": entry_type,
                "size": size,
                "size_human": size_human,
                "readonly": readonly,
                "extension": extension,
                "modified_timestamp": modified,
                "created_timestamp": created,
                "line_count": line_count,
            },
            summary,
        )
