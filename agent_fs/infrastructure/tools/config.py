"""
Configuration module for loading environment variables and settings.

This module handles:
1. Loading overrides from a .env file
2. Setting default limits for the file tools
3. Validating settings (lax; bad values fall back to defaults)
"""

import os
from typing import FrozenSet, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Directories never descended into by the content search
BASE_IGNORED_DIRS = frozenset({".git", "node_modules", "target", "__pycache__"})


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


class Config:
    """Configuration manager for file tool settings."""

    # Search defaults
    SEARCH_MAX_RESULTS: int = _env_int('AGENT_FS_SEARCH_MAX_RESULTS', 30)
    EXTRA_IGNORED_DIRS: str = os.getenv('AGENT_FS_EXTRA_IGNORED_DIRS', 'venv,.venv,dist,build')

    # file_info only counts lines below this size (bytes)
    INFO_LINE_COUNT_LIMIT: int = _env_int('AGENT_FS_INFO_LINE_COUNT_LIMIT', 10_000_000)

    # Text encoding used for reads and writes
    ENCODING: str = os.getenv('AGENT_FS_ENCODING', 'utf-8')

    # Logging
    LOG_LEVEL: str = os.getenv('AGENT_FS_LOG_LEVEL', 'WARNING').upper()

    @classmethod
    def ignored_dirs(cls) -> FrozenSet[str]:
        """Directory names pruned by the content search."""
        extra = {name.strip() for name in (cls.EXTRA_IGNORED_DIRS or "").split(",") if name.strip()}
        return BASE_IGNORED_DIRS | extra

    @classmethod
    def get(cls, key_name: str) -> Optional[object]:
        """
        Get a setting by name.

        Args:
            key_name: Name of the setting to retrieve

        Returns:
            The setting value or None if not found
        """
        return getattr(cls, key_name, None)
