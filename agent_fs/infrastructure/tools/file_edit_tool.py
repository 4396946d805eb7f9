# agent_fs/infrastructure/tools/file_edit_tool.py

from typing import Dict, Any, List, Tuple

from agent_fs.abstractions.dto.requests import EditRequest, LineEdit, SubstringEdit

from .fs_utils import read_text, write_text
from .hashline import line_fingerprint, split_lines
from .params import optional_bool, require_int, require_str
from .results import ExecutionFailed, InvalidParameters, ToolResult, ok
from .tool_base import APPROVAL_NOTICE, Tool


class FileEditTool(Tool[EditRequest]):
    """
    Edit a file in one of two modes.

    - str_replace: replace an exact ``old_string`` that must be unique in the
      file unless ``replace_all`` is set.
    - hashline: replace the line at ``line_number`` after checking that its
      current fingerprint still equals ``hash`` (as printed by file_read).

    Both modes read the file once and, when every check passes, write it
    back once. A failed check never reaches the write.
    """

    requires_approval = True

    @property
    def name(self) -> str:
        return "file_edit"

    @property
    def description(self) -> str:
        return (
            "Edit a file by replacing an exact string with a new string. Supports two modes:\n"
            "1. str_replace: Provide old_string (exact match) + new_string\n"
            "2. Hashline: Provide line_number + hash + new_string (hash from file_read output)\n"
            "The hash check fails if the line changed since it was read. " + APPROVAL_NOTICE
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Path to the file to edit"
                },
                "old_string": {
                    "type": "string",
                    "description": "Exact string to find (must be unique in file unless replace_all=true). Use this OR hash+line_number."
                },
                "new_string": {
                    "type": "string",
                    "description": "Replacement string (replaces old_string, or the whole line in hashline mode). Required, as new_string or new_content."
                },
                "new_content": {
                    "type": "string",
                    "description": "Alias of new_string"
                },
                "replace_all": {
                    "type": "boolean",
                    "description": "Replace ALL occurrences (default: false, replaces the unique match)",
                    "default": False
                },
                "line_number": {
                    "type": "integer",
                    "description": "1-based line number to edit (hashline mode). Use instead of old_string.",
                    "minimum": 1
                },
                "hash": {
                    "type": "string",
                    "description": "Hash of the line content as shown by file_read (2-3 hex chars). Required for hashline mode."
                },
                "fingerprint": {
                    "type": "string",
                    "description": "Alias of hash"
                }
            },
            "required": ["path"]
        }

    def validate(self, input: Dict[str, Any]) -> EditRequest:
        path = require_str(input, "path", allow_empty=False)
        if input.get("new_string") is None and input.get("new_content") is not None:
            new_string = require_str(input, "new_content")
        else:
            new_string = require_str(input, "new_string")

        hash_key = "hash" if input.get("hash") is not None else "fingerprint"
        if input.get("line_number") is not None and input.get(hash_key) is not None:
            return LineEdit(
                path=path,
                line_number=require_int(input, "line_number", minimum=1),
                fingerprint=require_str(input, hash_key, allow_empty=False),
                new_string=new_string,
            )

        if input.get("old_string") is None:
            raise InvalidParameters("old_string is required (or use hashline mode with line_number + hash)")
        old_string = require_str(input, "old_string", allow_empty=False)
        if old_string == new_string:
            raise InvalidParameters("old_string and new_string must be different")
        return SubstringEdit(
            path=path,
            old_string=old_string,
            new_string=new_string,
            replace_all=optional_bool(input, "replace_all"),
        )

    async def perform(self, request: EditRequest) -> ToolResult:
        content = await read_text(request.path)

        if isinstance(request, LineEdit):
            updated, replacements, mode = self._apply_line_edit(content, request), 1, "hashline"
        else:
            updated, replacements = self._apply_substring_edit(content, request)
            mode = "str_replace"

        await write_text(request.path, updated)

        total_lines = len(split_lines(updated))
        return ok(
            {
                "path": request.path,
                "replacements": replacements,
                "mode": mode,
                "total_lines": total_lines,
            },
            f"Edited {request.path} ({replacements} replacement{'s' if replacements != 1 else ''}, mode: {mode})",
        )

    def _apply_substring_edit(self, content: str, request: SubstringEdit) -> Tuple[str, int]:
        count = content.count(request.old_string)
        if count == 0:
            raise ExecutionFailed(
                f"old_string not found in '{request.path}'. Check indentation and whitespace.",
                {"path": request.path, "occurrences": 0},
            )
        if count > 1 and not request.replace_all:
            raise ExecutionFailed(
                f"old_string found {count} times in '{request.path}'. Add more context to make it unique, "
                "or set replace_all=true.",
                {"path": request.path, "occurrences": count},
            )
        if request.replace_all:
            return content.replace(request.old_string, request.new_string), count
        return content.replace(request.old_string, request.new_string, 1), 1

    def _apply_line_edit(self, content: str, request: LineEdit) -> str:
        lines: List[str] = split_lines(content)
        if request.line_number > len(lines):
            raise ExecutionFailed(
                f"Line {request.line_number} does not exist (file has {len(lines)} lines)",
                {"path": request.path, "line_number": request.line_number, "total_lines": len(lines)},
            )

        index = request.line_number - 1
        actual = line_fingerprint(lines[index])
        if actual != request.fingerprint:
            raise ExecutionFailed(
                f"Hash mismatch on line {request.line_number}: expected '{request.fingerprint}' but found "
                f"'{actual}'. The line changed since it was read; read the file again.",
                {
                    "path": request.path,
                    "line_number": request.line_number,
                    "expected": request.fingerprint,
                    "actual": actual,
                },
            )

        # Only the edited line changes; every line keeps its own ending
        pieces = content.split("\n")
        pieces[index] = request.new_string + ("\r" if pieces[index].endswith("\r") else "")
        return "\n".join(pieces)
