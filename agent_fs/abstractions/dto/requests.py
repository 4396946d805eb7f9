"""
Typed request values produced by each tool's validation step.

A tool receives a loose argument bundle, validates it once into one of these
frozen dataclasses, and executes against the typed value only.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class SubstringEdit:
    path: str
    old_string: str
    new_string: str
    replace_all: bool = False


@dataclass(frozen=True)
class LineEdit:
    path: str
    line_number: int
    fingerprint: str
    new_string: str


EditRequest = Union[SubstringEdit, LineEdit]


@dataclass(frozen=True)
class CreateRequest:
    path: str
    content: str
    overwrite: bool = False


@dataclass(frozen=True)
class DeleteRequest:
    path: str
    recursive: bool = False


@dataclass(frozen=True)
class MoveRequest:
    source: str
    destination: str


@dataclass(frozen=True)
class CopyRequest:
    source: str
    destination: str


@dataclass(frozen=True)
class InfoRequest:
    path: str


@dataclass(frozen=True)
class MkdirRequest:
    path: str


@dataclass(frozen=True)
class SearchRequest:
    query: str
    root_path: str = "."
    file_pattern: Optional[str] = None
    case_sensitive: bool = False
    max_results: int = 30


@dataclass(frozen=True)
class ReadRequest:
    path: str
    start_line: int = 1
    limit: Optional[int] = None


__all__ = [
    "SubstringEdit",
    "LineEdit",
    "EditRequest",
    "CreateRequest",
    "DeleteRequest",
    "MoveRequest",
    "CopyRequest",
    "InfoRequest",
    "MkdirRequest",
    "SearchRequest",
    "ReadRequest",
]
