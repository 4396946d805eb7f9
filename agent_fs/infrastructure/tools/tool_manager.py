# agent_fs/infrastructure/tools/tool_manager.py

import logging
from typing import Dict, Any, List, Type

from .tool_base import Tool
from .results import ToolError, ToolResult

# Import all available tools
from .file_edit_tool import FileEditTool
from .file_create_tool import FileCreateTool
from .file_delete_tool import FileDeleteTool
from .file_move_tool import FileMoveTool
from .file_copy_tool import FileCopyTool
from .file_info_tool import FileInfoTool
from .directory_create_tool import DirectoryCreateTool
from .file_search_tool import FileSearchTool
from .file_read_tool import FileReadTool

logger = logging.getLogger(__name__)


class ToolManager:
    """
    Manages a collection of tools and handles tool registration and execution.

    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize tool registry.

        Args:
            register_defaults: Whether to register default tools
        """
        self.tools: Dict[str, Tool] = {}
        if register_defaults:
            self.register_default_tools()

    def register_default_tools(self) -> None:
        """Register the file tool catalogue."""
        default_tools = [
            FileReadTool(),
            FileEditTool(),
            FileCreateTool(),
            FileDeleteTool(),
            FileMoveTool(),
            FileCopyTool(),
            FileInfoTool(),
            DirectoryCreateTool(),
            FileSearchTool(),
        ]
        for tool in default_tools:
            self.register_tool(tool)

    def register_tool(self, tool: Tool) -> None:
        """
        Register a tool instance.

        Args:
            tool: Tool instance to register
        """
        self.tools[tool.name] = tool

    def register_tool_class(self, tool_class: Type[Tool], **kwargs) -> None:
        """
        Register a tool class by instantiating and registering it.

        Args:
            tool_class: Tool class to instantiate and register
            **kwargs: Arguments to pass to tool constructor
        """
        tool = tool_class(**kwargs)
        self.register_tool(tool)

    def get_tool(self, name: str) -> Tool:
        """
        Get a registered tool by name.

        Args:
            name: Name of the tool to retrieve

        Returns:
            The requested tool instance

        Raises:
            KeyError: If tool is not found
        """
        if name not in self.tools:
            raise KeyError(f"Tool '{name}' not found")
        return self.tools[name]

    def list_tools(self) -> List[Dict[str, Any]]:
        """
        Get information about all registered tools.

        Returns:
            List of tool information dictionaries containing name,
            description, input_schema and requires_approval for each tool
        """
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "input_schema": tool.input_schema,
                "requires_approval": tool.requires_approval,
            }
            for tool in self.tools.values()
        ]

    async def execute_tool(self, name: str, input: Dict[str, Any]) -> ToolResult:
        """
        Execute a tool by name with given arguments.

        Args:
            name: Name of the tool to execute
            input: Argument bundle passed to the tool

        Returns:
            Tool execution result

        Raises:
            KeyError: If tool is not found
            ToolError: InvalidParameters or ExecutionFailed raised by the tool
        """
        tool = self.get_tool(name)
        logger.debug(f"Dispatching {name} with keys {sorted(input) if isinstance(input, dict) else input!r}")
        try:
            return await tool.execute(input)
        except ToolError as e:
            logger.info(f"{name} failed ({e.kind}): {e.detail}")
            raise
