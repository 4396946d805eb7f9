# agent_fs/infrastructure/tools/file_delete_tool.py

import errno
import os
import shutil
from typing import Dict, Any

from agent_fs.abstractions.dto.requests import DeleteRequest

from .fs_utils import lexists, run_io
from .params import optional_bool, require_str
from .results import ExecutionFailed, ToolResult, ok
from .tool_base import APPROVAL_NOTICE, Tool


def _rmdir(path: str) -> None:
    try:
        os.rmdir(path)
    except OSError as e:
        if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
            raise ExecutionFailed(
                f"Directory '{path}' is not empty. Use recursive=true to delete it with its contents.",
                {"path": path},
            ) from e
        raise


class FileDeleteTool(Tool[DeleteRequest]):
    """
    Delete a file or directory.

    Non-empty directories are only removed when ``recursive`` is set; without
    it the directory and its contents are left untouched. Symlinks are
    unlinked, never followed.
    """

    requires_approval = True

    @property
    def name(self) -> str:
        return "file_delete"

    @property
    def description(self) -> str:
        return (
            "Delete a file or empty directory. For safety, cannot delete non-empty directories "
            "unless recursive=true. " + APPROVAL_NOTICE
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Path to the file or directory to delete"
                },
                "recursive": {
                    "type": "boolean",
                    "description": "If true, delete directory and all contents recursively (DANGEROUS)",
                    "default": False
                }
            },
            "required": ["path"]
        }

    def validate(self, input: Dict[str, Any]) -> DeleteRequest:
        return DeleteRequest(
            path=require_str(input, "path", allow_empty=False),
            recursive=optional_bool(input, "recursive"),
        )

    async def perform(self, request: DeleteRequest) -> ToolResult:
        path = request.path
        if not await lexists(path):
            raise ExecutionFailed(f"Path '{path}' does not exist", {"path": path})

        if os.path.islink(path) or os.path.isfile(path):
            await run_io("delete", path, os.remove, path)
            return ok({"path": path, "type": "file"}, f"Deleted file {path}")

        if os.path.isdir(path):
            if request.recursive:
                await run_io("delete directory", path, shutil.rmtree, path)
            else:
                await run_io("delete directory", path, _rmdir, path)
            return ok(
                {"path": path, "type": "directory", "recursive": request.recursive},
                f"Deleted directory {path}",
            )

        raise ExecutionFailed(f"Unsupported path type: {path}", {"path": path})
