# tests/unit/test_untracked.py
from diffscope.diff.untracked import (
    split_content,
    synthesize_added_file,
    synthesize_binary_file,
    synthesize_from_bytes,
)
from diffscope.models.diff import FileStatus, LineType


def test_synthesize_five_line_file():
    change = synthesize_added_file("notes.txt", "one\ntwo\nthree\nfour\nfive\n")

    assert change.path == "notes.txt"
    assert change.status == FileStatus.ADDED
    assert change.additions == 5
    assert change.deletions == 0
    assert len(change.hunks) == 1

    hunk = change.hunks[0]
    assert (hunk.old_start, hunk.old_lines, hunk.new_start, hunk.new_lines) == (0, 0, 1, 5)
    assert hunk.header == "@@ -0,0 +1,5 @@"
    assert [line.type for line in hunk.lines] == [LineType.ADDED] * 5
    assert [line.new_number for line in hunk.lines] == [1, 2, 3, 4, 5]
    assert hunk.lines[2].content == "three"


def test_synthesize_without_trailing_newline():
    change = synthesize_added_file("a.txt", "first\nsecond")

    assert change.hunks[0].header == "@@ -0,0 +1,2 @@"
    assert [line.content for line in change.hunks[0].lines] == ["first", "second"]


def test_synthesize_keeps_blank_lines():
    assert split_content("a\n\nb\n") == ["a", "", "b"]


def test_synthesize_empty_file():
    change = synthesize_added_file("empty.txt", "")

    assert change.hunks[0].header == "@@ -0,0 +1,0 @@"
    assert change.hunks[0].lines == []
    assert change.additions == 0


def test_synthesize_binary_file():
    change = synthesize_binary_file("logo.png")

    assert change.is_binary is True
    assert change.status == FileStatus.ADDED
    assert change.hunks == []


def test_synthesize_from_bytes_detects_binary():
    assert synthesize_from_bytes("a.bin", b"\x89PNG\r\n\x1a\n\x00\x00").is_binary is True
    assert synthesize_from_bytes("b.bin", b"\xff\xfe\xfd").is_binary is True


def test_synthesize_from_bytes_decodes_text():
    change = synthesize_from_bytes("hello.py", "print('héllo')\n".encode("utf-8"))

    assert change.is_binary is False
    assert change.hunks[0].lines[0].content == "print('héllo')"
