# agent_fs/infrastructure/tools/directory_create_tool.py

import os
from typing import Dict, Any

from agent_fs.abstractions.dto.requests import MkdirRequest

from .fs_utils import lexists, run_io
from .params import require_str
from .results import ExecutionFailed, ToolResult, ok
from .tool_base import APPROVAL_NOTICE, Tool


class DirectoryCreateTool(Tool[MkdirRequest]):
    """Create a directory hierarchy (mkdir -p). An existing directory is a no-op success."""

    requires_approval = True

    @property
    def name(self) -> str:
        return "directory_create"

    @property
    def description(self) -> str:
        return (
            "Create a directory and all parent directories if they don't exist (like mkdir -p). "
            + APPROVAL_NOTICE
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Path of the directory to create"
                }
            },
            "required": ["path"]
        }

    def validate(self, input: Dict[str, Any]) -> MkdirRequest:
        return MkdirRequest(path=require_str(input, "path", allow_empty=False))

    async def perform(self, request: MkdirRequest) -> ToolResult:
        path = request.path
        if await lexists(path):
            if os.path.isdir(path):
                return ok({"path": path, "already_existed": True}, f"Directory already exists: {path}")
            raise ExecutionFailed(f"A file already exists at this path: {path}", {"path": path})

        await run_io("create directory", path, os.makedirs, path, 0o777, True)
        return ok({"path": path, "created": True}, f"Created directory {path}")
