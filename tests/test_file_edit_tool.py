"""Tests for the FileEditTool (str_replace and hashline modes)."""

import pytest

from agent_fs.abstractions.dto.requests import LineEdit, SubstringEdit
from agent_fs.infrastructure.tools.file_edit_tool import FileEditTool
from agent_fs.infrastructure.tools.hashline import line_fingerprint
from agent_fs.infrastructure.tools.results import ExecutionFailed, InvalidParameters

SOURCE = "def add(a, b):\n    return a + b\n\nprint(add(1, 2))\n"


@pytest.fixture
def edit_tool():
    return FileEditTool()


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "calc.py"
    path.write_text(SOURCE, encoding="utf-8")
    return path


def test_tool_identity(edit_tool):
    assert edit_tool.name == "file_edit"
    assert edit_tool.requires_approval is True
    assert edit_tool.description.endswith("REQUIRES APPROVAL.")
    schema = edit_tool.input_schema
    assert schema["required"] == ["path"]
    assert "new_content" in schema["properties"]
    for key in ("old_string", "replace_all", "line_number", "hash"):
        assert key in schema["properties"]


# --- validation -------------------------------------------------------------

def test_validate_selects_substring_mode(edit_tool):
    request = edit_tool.validate({"path": "f.py", "old_string": "a", "new_string": "b"})
    assert request == SubstringEdit(path="f.py", old_string="a", new_string="b", replace_all=False)


def test_validate_selects_line_mode_only_with_both_fields(edit_tool):
    request = edit_tool.validate({"path": "f.py", "line_number": 2, "hash": "8f", "new_string": "x"})
    assert request == LineEdit(path="f.py", line_number=2, fingerprint="8f", new_string="x")

    # line_number alone falls back to substring mode, which needs old_string
    with pytest.raises(InvalidParameters, match="old_string is required"):
        edit_tool.validate({"path": "f.py", "line_number": 2, "new_string": "x"})


def test_validate_accepts_aliases(edit_tool):
    request = edit_tool.validate({"path": "f.py", "line_number": 1, "fingerprint": "dc5", "new_content": "y"})
    assert request == LineEdit(path="f.py", line_number=1, fingerprint="dc5", new_string="y")


@pytest.mark.parametrize(
    "params, message",
    [
        ({"new_string": "x", "old_string": "y"}, "path is required"),
        ({"path": "f.py", "old_string": "y"}, "new_string is required"),
        ({"path": "f.py", "old_string": 3, "new_string": "x"}, "old_string must be a string"),
        ({"path": "f.py", "old_string": "y", "new_string": "x", "replace_all": "yes"}, "replace_all must be a boolean"),
        ({"path": "f.py", "line_number": 0, "hash": "aa", "new_string": "x"}, "line_number must be >= 1"),
        ({"path": "f.py", "line_number": True, "hash": "aa", "new_string": "x"}, "line_number must be an integer"),
        ({"path": "f.py", "line_number": "3", "hash": "aa", "new_string": "x"}, "line_number must be an integer"),
        ({"path": "f.py", "line_number": 3, "hash": 12, "new_string": "x"}, "hash must be a string"),
    ],
)
def test_validate_rejects_bad_bundles(edit_tool, params, message):
    with pytest.raises(InvalidParameters, match=message):
        edit_tool.validate(params)


@pytest.mark.asyncio
async def test_identical_strings_rejected_without_touching_file(edit_tool, tmp_path):
    # The path does not exist: InvalidParameters proves no read happened either
    missing = tmp_path / "missing.py"
    with pytest.raises(InvalidParameters, match="must be different"):
        await edit_tool.execute({"path": str(missing), "old_string": "same", "new_string": "same"})
    assert not missing.exists()


@pytest.mark.asyncio
async def test_identical_strings_leave_existing_file_unchanged(edit_tool, source_file):
    before = source_file.stat().st_mtime_ns
    with pytest.raises(InvalidParameters):
        await edit_tool.execute({"path": str(source_file), "old_string": "a + b", "new_string": "a + b"})
    assert source_file.read_text(encoding="utf-8") == SOURCE
    assert source_file.stat().st_mtime_ns == before


# --- str_replace mode -------------------------------------------------------

@pytest.mark.asyncio
async def test_unique_replacement(edit_tool, source_file):
    result = await edit_tool.execute(
        {"path": str(source_file), "old_string": "return a + b", "new_string": "return a - b"}
    )
    assert result.success is True
    assert result.data == {"path": str(source_file), "replacements": 1, "mode": "str_replace", "total_lines": 4}
    assert "str_replace" in result.message
    assert source_file.read_text(encoding="utf-8") == SOURCE.replace("a + b", "a - b")


@pytest.mark.asyncio
async def test_missing_substring_fails(edit_tool, source_file):
    with pytest.raises(ExecutionFailed, match="not found") as excinfo:
        await edit_tool.execute({"path": str(source_file), "old_string": "a * b", "new_string": "a / b"})
    assert excinfo.value.context["occurrences"] == 0
    assert source_file.read_text(encoding="utf-8") == SOURCE


@pytest.mark.asyncio
async def test_ambiguous_substring_fails_and_file_unchanged(edit_tool, source_file):
    with pytest.raises(ExecutionFailed, match="found 2 times") as excinfo:
        await edit_tool.execute({"path": str(source_file), "old_string": "add(", "new_string": "plus("})
    assert excinfo.value.context["occurrences"] == 2
    assert source_file.read_text(encoding="utf-8") == SOURCE


@pytest.mark.asyncio
async def test_replace_all(edit_tool, source_file):
    result = await edit_tool.execute(
        {"path": str(source_file), "old_string": "add(", "new_string": "plus(", "replace_all": True}
    )
    assert result.data["replacements"] == 2
    assert source_file.read_text(encoding="utf-8") == SOURCE.replace("add(", "plus(")


@pytest.mark.asyncio
async def test_missing_file_is_execution_failure(edit_tool, tmp_path):
    with pytest.raises(ExecutionFailed, match="Cannot read"):
        await edit_tool.execute({"path": str(tmp_path / "nope.py"), "old_string": "a", "new_string": "b"})


@pytest.mark.asyncio
async def test_binary_file_is_execution_failure(edit_tool, tmp_path):
    blob = tmp_path / "blob.bin"
    blob.write_bytes(b"\xff\xfe\x00\x81")
    with pytest.raises(ExecutionFailed, match="not a utf-8 text file"):
        await edit_tool.execute({"path": str(blob), "old_string": "a", "new_string": "b"})
    assert blob.read_bytes() == b"\xff\xfe\x00\x81"


# --- hashline mode ----------------------------------------------------------

@pytest.mark.asyncio
async def test_line_edit_with_matching_hash(edit_tool, source_file):
    fp = line_fingerprint("    return a + b")
    result = await edit_tool.execute(
        {"path": str(source_file), "line_number": 2, "hash": fp, "new_string": "    return b + a"}
    )
    assert result.data["mode"] == "hashline"
    assert result.data["replacements"] == 1
    assert result.data["total_lines"] == 4
    assert source_file.read_text(encoding="utf-8") == SOURCE.replace("a + b", "b + a")


@pytest.mark.asyncio
async def test_line_edit_detects_stale_view(edit_tool, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("one\ntwo\nthree\nfour\n", encoding="utf-8")
    seen = line_fingerprint("three")

    # Someone else rewrites line 3 after we read it
    path.write_text("one\ntwo\nTHREE!\nfour\n", encoding="utf-8")

    with pytest.raises(ExecutionFailed, match="Hash mismatch") as excinfo:
        await edit_tool.execute({"path": str(path), "line_number": 3, "hash": seen, "new_string": "3"})

    err = excinfo.value
    assert err.context["expected"] == seen
    assert err.context["actual"] == line_fingerprint("THREE!")
    assert seen in err.detail and err.context["actual"] in err.detail
    assert path.read_text(encoding="utf-8") == "one\ntwo\nTHREE!\nfour\n"


@pytest.mark.asyncio
async def test_line_number_past_end(edit_tool, source_file):
    with pytest.raises(ExecutionFailed, match="Line 9 does not exist \\(file has 4 lines\\)"):
        await edit_tool.execute({"path": str(source_file), "line_number": 9, "hash": "dc5", "new_string": "x"})
    assert source_file.read_text(encoding="utf-8") == SOURCE


@pytest.mark.asyncio
async def test_line_edit_on_blank_line(edit_tool, source_file):
    await edit_tool.execute(
        {"path": str(source_file), "line_number": 3, "hash": "dc5", "new_string": "# separator"}
    )
    assert source_file.read_text(encoding="utf-8").splitlines()[2] == "# separator"


@pytest.mark.asyncio
async def test_line_edit_preserves_crlf_and_missing_final_newline(edit_tool, tmp_path):
    path = tmp_path / "win.txt"
    path.write_bytes(b"alpha\r\nbeta\r\ngamma")
    await edit_tool.execute(
        {"path": str(path), "line_number": 2, "hash": line_fingerprint("beta"), "new_string": "BETA"}
    )
    assert path.read_bytes() == b"alpha\r\nBETA\r\ngamma"


@pytest.mark.asyncio
async def test_str_replace_keeps_crlf(edit_tool, tmp_path):
    path = tmp_path / "win.txt"
    path.write_bytes(b"alpha\r\nbeta\r\n")
    await edit_tool.execute({"path": str(path), "old_string": "beta", "new_string": "delta"})
    assert path.read_bytes() == b"alpha\r\ndelta\r\n"


@pytest.mark.asyncio
async def test_line_edit_keeps_each_line_ending_in_mixed_file(edit_tool, tmp_path):
    path = tmp_path / "mixed.txt"
    path.write_bytes(b"a\r\nb\nc\n")
    await edit_tool.execute({"path": str(path), "line_number": 3, "hash": line_fingerprint("c"), "new_string": "C"})
    assert path.read_bytes() == b"a\r\nb\nC\n"

    await edit_tool.execute({"path": str(path), "line_number": 1, "hash": line_fingerprint("a"), "new_string": "A"})
    assert path.read_bytes() == b"A\r\nb\nC\n"


@pytest.mark.asyncio
async def test_new_content_alias_satisfies_replacement(edit_tool, source_file):
    await edit_tool.execute({"path": str(source_file), "old_string": "a + b", "new_content": "a * b"})
    assert source_file.read_text(encoding="utf-8") == SOURCE.replace("a + b", "a * b")
