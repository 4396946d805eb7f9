# agent_fs/infrastructure/tools/file_move_tool.py

import os
from typing import Dict, Any

from agent_fs.abstractions.dto.requests import MoveRequest

from .fs_utils import ensure_parent, lexists, run_io
from .params import require_str
from .results import ExecutionFailed, ToolResult, ok
from .tool_base import APPROVAL_NOTICE, Tool


class FileMoveTool(Tool[MoveRequest]):
    """Move or rename a file or directory; never replaces an existing destination."""

    requires_approval = True

    @property
    def name(self) -> str:
        return "file_move"

    @property
    def description(self) -> str:
        return (
            "Move or rename a file or directory. Creates parent directories for destination "
            "automatically. " + APPROVAL_NOTICE
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "source": {
                    "type": "string",
                    "description": "Source path (file or directory)"
                },
                "destination": {
                    "type": "string",
                    "description": "Destination path"
                }
            },
            "required": ["source", "destination"]
        }

    def validate(self, input: Dict[str, Any]) -> MoveRequest:
        return MoveRequest(
            source=require_str(input, "source", allow_empty=False),
            destination=require_str(input, "destination", allow_empty=False),
        )

    async def perform(self, request: MoveRequest) -> ToolResult:
        if not await lexists(request.source):
            raise ExecutionFailed(f"Source '{request.source}' does not exist", {"source": request.source})
        if await lexists(request.destination):
            raise ExecutionFailed(
                f"Destination '{request.destination}' already exists",
                {"destination": request.destination},
            )

        await ensure_parent(request.destination)
        await run_io("move", request.source, os.rename, request.source, request.destination)

        return ok(
            {"source": request.source, "destination": request.destination},
            f"Moved {request.source} -> {request.destination}",
        )
