"""
Tool invocation adapter implementing IToolInvocationAdapter interface.
"""

from typing import Dict, Any, Optional, TYPE_CHECKING
from agent_fs.abstractions.dto.tools import ToolInvocationResult

if TYPE_CHECKING:
    from agent_fs.interfaces.services.tools import IToolInvocationAdapter

from .results import ToolError
from .tool_manager import ToolManager


class ToolInvocationAdapter:
    """
    Adapter for ToolManager to implement IToolInvocationAdapter interface.

    Tool failures are returned as a failed ToolInvocationResult instead of
    being raised, so a decision loop can feed them back to the model.
    """

    def __init__(self, manager: Optional[ToolManager] = None):
        self.manager = manager or ToolManager(register_defaults=True)

    async def execute(self, name: str, params: Dict[str, Any], call_id: Optional[str] = None) -> "ToolInvocationResult":
        """
        Execute a tool by name with given parameters.
        """
        try:
            self.manager.get_tool(name)
        except KeyError:
            return ToolInvocationResult(
                ok=False,
                value=None,
                error=f"Tool '{name}' not found",
                tool_name=name,
                error_kind="unknown_tool",
                call_id=call_id,
            )

        try:
            result = await self.manager.execute_tool(name, params or {})
        except ToolError as e:
            return ToolInvocationResult(
                ok=False,
                value=None,
                error=str(e),
                tool_name=name,
                error_kind=e.kind,
                call_id=call_id,
                context=dict(e.context),
            )

        return ToolInvocationResult(
            ok=True,
            value=result.to_dict(),
            error=None,
            tool_name=name,
            call_id=call_id,
        )
