"""
File tools package.

Exports:
- Tool: base contract
- ToolManager: catalogue registry and dispatch
- one Tool subclass per operation
"""

from .tool_base import Tool
from .results import ToolResult, ToolError, InvalidParameters, ExecutionFailed
from .hashline import line_fingerprint, render_hashlines
from .tool_manager import ToolManager
from .file_read_tool import FileReadTool
from .file_edit_tool import FileEditTool
from .file_create_tool import FileCreateTool
from .file_delete_tool import FileDeleteTool
from .file_move_tool import FileMoveTool
from .file_copy_tool import FileCopyTool
from .file_info_tool import FileInfoTool
from .directory_create_tool import DirectoryCreateTool
from .file_search_tool import FileSearchTool

__all__ = [
    "Tool",
    "ToolResult",
    "ToolError",
    "InvalidParameters",
    "ExecutionFailed",
    "line_fingerprint",
    "render_hashlines",
    "ToolManager",
    "FileReadTool",
    "FileEditTool",
    "FileCreateTool",
    "FileDeleteTool",
    "FileMoveTool",
    "FileCopyTool",
    "FileInfoTool",
    "DirectoryCreateTool",
    "FileSearchTool",
]
