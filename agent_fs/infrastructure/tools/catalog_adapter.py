"""
Tool catalog adapter implementing IToolCatalog interface.
"""

from typing import List, Optional

from agent_fs.abstractions.dto.tools import ToolDescriptor

from .tool_base import Tool
from .tool_manager import ToolManager


def describe(tool: Tool) -> ToolDescriptor:
    """Snapshot a tool's identity, schema and approval flag."""
    return ToolDescriptor(
        name=tool.name,
        description=tool.description,
        raw_schema=tool.input_schema,
        requires_approval=tool.requires_approval,
    )


class ToolManagerCatalogAdapter:
    """
    Read-only view of a ToolManager for callers that only need to know
    which file operations exist and whether they are approval-gated.
    """

    def __init__(self, manager: Optional[ToolManager] = None):
        self.manager = manager or ToolManager(register_defaults=True)

    def list_tools(self) -> List[ToolDescriptor]:
        return [describe(tool) for tool in self.manager.tools.values()]

    def get_tool(self, name: str) -> Optional[ToolDescriptor]:
        tool = self.manager.tools.get(name)
        return describe(tool) if tool is not None else None

    def gated_tools(self) -> List[str]:
        """Names of the tools that mutate the filesystem."""
        return [tool.name for tool in self.manager.tools.values() if tool.requires_approval]
