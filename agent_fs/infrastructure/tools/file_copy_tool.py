# agent_fs/infrastructure/tools/file_copy_tool.py

import os
from typing import Dict, Any

from agent_fs.abstractions.dto.requests import CopyRequest

from .fs_utils import copy_file, ensure_parent, lexists
from .params import require_str
from .results import ExecutionFailed, ToolResult, ok
from .tool_base import APPROVAL_NOTICE, Tool


class FileCopyTool(Tool[CopyRequest]):
    """
    Copy a single file byte for byte.
    An existing destination file is replaced.
    """

    requires_approval = True

    @property
    def name(self) -> str:
        return "file_copy"

    @property
    def description(self) -> str:
        return (
            "Copy a file to a new location. Creates parent directories automatically. " + APPROVAL_NOTICE
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "source": {
                    "type": "string",
                    "description": "Source file path"
                },
                "destination": {
                    "type": "string",
                    "description": "Destination file path"
                }
            },
            "required": ["source", "destination"]
        }

    def validate(self, input: Dict[str, Any]) -> CopyRequest:
        return CopyRequest(
            source=require_str(input, "source", allow_empty=False),
            destination=require_str(input, "destination", allow_empty=False),
        )

    async def perform(self, request: CopyRequest) -> ToolResult:
        if not await lexists(request.source):
            raise ExecutionFailed(f"Source '{request.source}' does not exist", {"source": request.source})
        if os.path.isdir(request.source):
            raise ExecutionFailed(
                f"Source '{request.source}' is a directory; only files can be copied",
                {"source": request.source},
            )

        await ensure_parent(request.destination)
        size = await copy_file(request.source, request.destination)

        return ok(
            {"source": request.source, "destination": request.destination, "bytes": size},
            f"Copied {request.source} -> {request.destination} ({size} bytes)",
        )
