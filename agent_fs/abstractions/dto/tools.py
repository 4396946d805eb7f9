"""
Shared tool DTOs for catalogs and invocation results.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    raw_schema: Dict[str, Any]
    requires_approval: bool = False

@dataclass
class ToolInvocationResult:
    ok: bool
    value: Optional[Dict[str, Any]]
    error: Optional[str]
    tool_name: str
    error_kind: Optional[str] = None  # "invalid_parameters" | "execution_failed" | "unknown_tool"
    call_id: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)

__all__ = ["ToolDescriptor", "ToolInvocationResult"]
