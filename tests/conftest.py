"""
Shared test fixtures for the file tools.

Every test works inside pytest's ``tmp_path``; nothing touches the real
working tree. Coroutine tests are marked with ``pytest.mark.asyncio``.
"""

import os
import sys
from typing import Dict

import pytest
from dotenv import load_dotenv

# Ensure project root is on sys.path so 'agent_fs' imports resolve in tests
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

# Load environment variables
load_dotenv()

from agent_fs.infrastructure.tools.tool_manager import ToolManager  # noqa: E402


@pytest.fixture
def manager() -> ToolManager:
    """A ToolManager with the default catalogue registered."""
    return ToolManager(register_defaults=True)


@pytest.fixture
def make_tree(tmp_path):
    """
    Build a file tree under tmp_path from a {relative_path: content} mapping.
    Returns the root path as a string.
    """

    def _make(files: Dict[str, str]) -> str:
        for rel, content in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return str(tmp_path)

    return _make
