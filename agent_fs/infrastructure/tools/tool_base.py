# agent_fs/infrastructure/tools/tool_base.py
"""
Based on: https://docs.anthropic.com/claude/docs/tool-use
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Generic, TypeVar

from .results import InvalidParameters, ToolResult

RequestT = TypeVar("RequestT")

APPROVAL_NOTICE = "REQUIRES APPROVAL."


class Tool(ABC, Generic[RequestT]):
    """
    Base class for catalogue operations.

    Subclasses declare their identity and schema, turn the loose argument
    bundle into a typed request in ``validate`` and act on that request in
    ``perform``. ``execute`` ties the two together so validation always
    finishes before any filesystem access.

    See: https://docs.anthropic.com/claude/docs/tool-use
    """

    requires_approval: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name used in function calling format."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        pass

    @property
    @abstractmethod
    def input_schema(self) -> Dict[str, Any]:
        """
        JSONSchema object defining accepted input_schema.
        Must include:
        - type: "object"
        - properties: Parameter definitions
        - required: List of required input_schema
        """
        pass

    @abstractmethod
    def validate(self, input: Dict[str, Any]) -> RequestT:
        """Validate the argument bundle; raise InvalidParameters on violation."""
        pass

    @abstractmethod
    async def perform(self, request: RequestT) -> ToolResult:
        """Run the operation for an already validated request."""
        pass

    async def execute(self, input: Dict[str, Any]) -> ToolResult:
        """Validate the input and execute the tool."""
        if input is None:
            input = {}
        if not isinstance(input, dict):
            raise InvalidParameters("arguments must be an object")
        request = self.validate(input)
        return await self.perform(request)

    def get_tool_definition(self) -> Dict[str, Any]:
        """Get the tool definition in Anthropic's format."""
        schema = self.input_schema
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": {
                "type": "object",
                "properties": schema.get("properties", {}) or {},
                "required": schema.get("required", []) or [],
            },
        }
