"""
Tool port (contract only) used by BL and infra adapters.
"""
from __future__ import annotations
from typing import Protocol, Dict, Any, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from agent_fs.infrastructure.tools.results import ToolResult

@runtime_checkable
class ITool(Protocol):
    name: str
    description: str
    input_schema: Dict[str, Any]
    requires_approval: bool

    async def execute(self, input: Dict[str, Any]) -> "ToolResult":
        ...

__all__ = ["ITool"]
