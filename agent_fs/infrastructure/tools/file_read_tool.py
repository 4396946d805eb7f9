# agent_fs/infrastructure/tools/file_read_tool.py

from typing import Dict, Any

from agent_fs.abstractions.dto.requests import ReadRequest

from .fs_utils import read_text
from .hashline import render_hashlines, split_lines
from .params import optional_int, require_str
from .results import ExecutionFailed, ToolResult, ok
from .tool_base import Tool


class FileReadTool(Tool[ReadRequest]):
    """
    Read a text file in hashline format.

    Every line is printed as ``number|hash|content``. The hash is what
    file_edit expects in hashline mode.
    """

    @property
    def name(self) -> str:
        return "file_read"

    @property
    def description(self) -> str:
        return (
            "Read a text file. Each line is returned as 'line_number|hash|content'; pass line_number "
            "and hash to file_edit to replace that line. Supports reading a window with start_line/limit."
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Path to the file to read"
                },
                "start_line": {
                    "type": "integer",
                    "description": "1-based line to start from (default: 1)",
                    "minimum": 1,
                    "default": 1
                },
                "limit": {
                    "type": "integer",
                    "description": "Maximum number of lines to return (default: all)",
                    "minimum": 1
                }
            },
            "required": ["path"]
        }

    def validate(self, input: Dict[str, Any]) -> ReadRequest:
        return ReadRequest(
            path=require_str(input, "path", allow_empty=False),
            start_line=optional_int(input, "start_line", default=1, minimum=1),
            limit=optional_int(input, "limit", minimum=1),
        )

    async def perform(self, request: ReadRequest) -> ToolResult:
        text = await read_text(request.path)
        total = len(split_lines(text))

        if total and request.start_line > total:
            raise ExecutionFailed(
                f"start_line {request.start_line} is past the end of '{request.path}' ({total} lines)",
                {"path": request.path, "total_lines": total},
            )

        end = total if request.limit is None else min(total, request.start_line + request.limit - 1)
        return ok(
            {
                "path": request.path,
                "content": render_hashlines(text, start=request.start_line, limit=request.limit),
                "total_lines": total,
                "start_line": request.start_line,
                "end_line": end,
            },
            f"Read {request.path} (lines {request.start_line}-{end} of {total})",
        )
