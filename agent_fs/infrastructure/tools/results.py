"""
Result envelope and error taxonomy shared by every tool.

Successful executions return a ToolResult; failures raise a ToolError
subclass. Only two kinds exist:

- InvalidParameters: the argument bundle is malformed. Raised before any I/O.
- ExecutionFailed: a precondition on live filesystem state failed, or an
  underlying I/O call failed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ToolResult:
    success: bool
    data: Dict[str, Any]
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "data": dict(self.data), "message": self.message}


def ok(data: Dict[str, Any], message: str) -> ToolResult:
    """Build a successful result."""
    return ToolResult(success=True, data=data, message=message)


class ToolError(Exception):
    """Base class for tool failures. Carries no retry state."""

    kind: str = "tool_error"

    def __init__(self, detail: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.context: Dict[str, Any] = dict(context or {})

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "detail": self.detail, "context": dict(self.context)}


class InvalidParameters(ToolError):
    kind = "invalid_parameters"

    def __str__(self) -> str:
        return f"Invalid parameters: {self.detail}"


class ExecutionFailed(ToolError):
    kind = "execution_failed"

    def __str__(self) -> str:
        return f"Execution failed: {self.detail}"


__all__ = ["ToolResult", "ok", "ToolError", "InvalidParameters", "ExecutionFailed"]
