"""
Argument bundle accessors used by every tool's validate() step.

Each helper reads one field, checks presence and primitive type, and raises
InvalidParameters with the field name on violation.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .results import InvalidParameters

_MISSING = object()


def require_str(input: Dict[str, Any], key: str, allow_empty: bool = True) -> str:
    value = input.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise InvalidParameters(f"{key} is required")
    if not isinstance(value, str):
        raise InvalidParameters(f"{key} must be a string")
    if not allow_empty and not value:
        raise InvalidParameters(f"{key} must not be empty")
    return value


def optional_str(input: Dict[str, Any], key: str, default: Optional[str] = None) -> Optional[str]:
    value = input.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidParameters(f"{key} must be a string")
    return value


def optional_bool(input: Dict[str, Any], key: str, default: bool = False) -> bool:
    value = input.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidParameters(f"{key} must be a boolean")
    return value


def _as_int(key: str, value: Any) -> int:
    # bool is an int subclass; JSON numbers may arrive as integral floats
    if isinstance(value, bool):
        raise InvalidParameters(f"{key} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidParameters(f"{key} must be an integer")


def require_int(input: Dict[str, Any], key: str, minimum: Optional[int] = None) -> int:
    value = input.get(key)
    if value is None:
        raise InvalidParameters(f"{key} is required")
    number = _as_int(key, value)
    if minimum is not None and number < minimum:
        raise InvalidParameters(f"{key} must be >= {minimum} (got {number})")
    return number


def optional_int(
    input: Dict[str, Any], key: str, default: Optional[int] = None, minimum: Optional[int] = None
) -> Optional[int]:
    if input.get(key) is None:
        return default
    return require_int(input, key, minimum=minimum)


__all__ = ["require_str", "optional_str", "optional_bool", "require_int", "optional_int"]
