"""
Line fingerprints for hashline editing.

A fingerprint is a short hex token computed from one line's bytes only. The
reader tool prints lines as ``number|fingerprint|content``; the edit tool
recomputes the fingerprint of the addressed line and refuses to write when
it differs from the one the caller saw.

The token is masked to 12 bits and rendered with ``{:02x}``, so it is two
or three hex digits wide. It detects stale views, nothing more.
"""

from typing import Iterator, List, Tuple, Union

FINGERPRINT_SEED = 2166136261
FINGERPRINT_PRIME = 16777619
FINGERPRINT_MASK = 0xFFF
_U32 = 0xFFFFFFFF


def line_fingerprint(line: Union[str, bytes]) -> str:
    """Return the fingerprint of a single line (line ending already stripped)."""
    data = line.encode("utf-8") if isinstance(line, str) else line
    acc = FINGERPRINT_SEED
    for byte in data:
        acc = (acc * FINGERPRINT_PRIME) & _U32
        acc ^= byte
    return format(acc & FINGERPRINT_MASK, "02x")


def split_lines(text: str) -> List[str]:
    """
    Split text on ``\\n`` with line endings removed.

    A trailing ``\\r`` is dropped from each line and a final newline does not
    open an extra empty line. Other separators that ``str.splitlines`` would
    honour (form feed, U+2028, ...) stay part of the line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def iter_hashlines(lines: List[str], start: int = 1) -> Iterator[Tuple[int, str, str]]:
    for offset, line in enumerate(lines):
        yield start + offset, line_fingerprint(line), line


def render_hashlines(text: str, start: int = 1, limit: Union[int, None] = None) -> str:
    """
    Render ``text`` as hashline output.

    Args:
        text: Full file content
        start: 1-based line number of the first line to render
        limit: Maximum number of lines to render (all remaining when None)
    """
    lines = split_lines(text)
    window = lines[start - 1:] if limit is None else lines[start - 1:start - 1 + limit]
    return "\n".join(f"{number}|{fp}|{content}" for number, fp, content in iter_hashlines(window, start))


__all__ = [
    "FINGERPRINT_SEED",
    "FINGERPRINT_PRIME",
    "FINGERPRINT_MASK",
    "line_fingerprint",
    "split_lines",
    "iter_hashlines",
    "render_hashlines",
]
