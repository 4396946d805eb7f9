# agent_fs/infrastructure/tools/file_create_tool.py

from typing import Dict, Any

from agent_fs.abstractions.dto.requests import CreateRequest

from .config import Config
from .fs_utils import ensure_parent, lexists, write_text
from .hashline import split_lines
from .params import optional_bool, require_str
from .results import ExecutionFailed, ToolResult, ok
from .tool_base import APPROVAL_NOTICE, Tool


class FileCreateTool(Tool[CreateRequest]):
    """
    Create a new file with content.
    Refuses to replace an existing path unless overwrite is set.
    """

    requires_approval = True

    @property
    def name(self) -> str:
        return "file_create"

    @property
    def description(self) -> str:
        return (
            "Create a new file with content. Fails if the file already exists unless overwrite=true. "
            "Creates parent directories automatically. " + APPROVAL_NOTICE
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Path for the new file"
                },
                "content": {
                    "type": "string",
                    "description": "Content to write to the new file"
                },
                "overwrite": {
                    "type": "boolean",
                    "description": "If true, overwrite existing file (default: false)",
                    "default": False
                }
            },
            "required": ["path", "content"]
        }

    def validate(self, input: Dict[str, Any]) -> CreateRequest:
        return CreateRequest(
            path=require_str(input, "path", allow_empty=False),
            content=require_str(input, "content"),
            overwrite=optional_bool(input, "overwrite"),
        )

    async def perform(self, request: CreateRequest) -> ToolResult:
        existed = await lexists(request.path)
        if existed and not request.overwrite:
            raise ExecutionFailed(
                f"File '{request.path}' already exists. Use overwrite=true to replace it, or file_edit to modify it.",
                {"path": request.path},
            )

        await ensure_parent(request.path)
        await write_text(request.path, request.content)

        lines = len(split_lines(request.content))
        size = len(request.content.encode(Config.ENCODING))
        return ok(
            {
                "path": request.path,
                "bytes": size,
                "lines": lines,
                "created": True,
                "overwritten": existed,
            },
            f"Created {request.path} ({lines} lines, {size} bytes)",
        )
