"""
agent_fs: file-manipulation tool catalogue for coding agents.

Exports the tool manager and the result/error model most callers need.
"""

from agent_fs.infrastructure.tools.results import ExecutionFailed, InvalidParameters, ToolError, ToolResult
from agent_fs.infrastructure.tools.tool_manager import ToolManager

__version__ = "0.1.0"

__all__ = ["ToolManager", "ToolResult", "ToolError", "InvalidParameters", "ExecutionFailed", "__version__"]
