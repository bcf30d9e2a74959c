# src/diffscope/diff/parser.py
import re
import logging
from typing import NamedTuple
from diffscope.models.diff import (
    AddedLine,
    ContextLine,
    DeletedLine,
    FileChange,
    FileStatus,
    Hunk,
    Line,
)


logger = logging.getLogger(__name__)

FILE_MARKER = "diff --git"
HUNK_MARKER = "@@"
NO_NEWLINE_MARKER = "\\"
BINARY_MARKER = "Binary files"

FILE_HEADER_RE = re.compile(r"diff --git [a-z]/(.+) [a-z]/(.+)")
HUNK_HEADER_RE = re.compile(r"@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)")


class Span(NamedTuple):
    """One side of a hunk header range. ``count`` is None when the header omits it."""
    start: int
    count: int | None

    @property
    def length(self) -> int:
        return 1 if self.count is None else self.count


def parse_span(start: str, count: str | None) -> Span:
    return Span(int(start), int(count) if count is not None else None)


def parse_hunk_header(header: str) -> tuple[Span, Span] | None:
    """Parse ``@@ -a[,b] +c[,d] @@...`` into (old, new) spans, None if it doesn't match."""
    match = HUNK_HEADER_RE.match(header)
    if not match:
        return None
    old_start, old_count, new_start, new_count, _ = match.groups()
    return parse_span(old_start, old_count), parse_span(new_start, new_count)


class DiffParser:
    """Single forward pass over unified diff text.

    The text is split into lines once and walked with an integer cursor.
    Sections and hunks that can't be interpreted are skipped, never raised.
    """

    def __init__(self, diff_text: str):
        self.lines = diff_text.split("\n")
        self.current = 0

    def parse(self) -> list[FileChange]:
        files: list[FileChange] = []

        while self.current < len(self.lines):
            if self.lines[self.current].startswith(FILE_MARKER):
                files.append(self._parse_file())
            else:
                self.current += 1

        return files

    def _at_boundary(self) -> bool:
        line = self.lines[self.current]
        return line.startswith((FILE_MARKER, HUNK_MARKER, BINARY_MARKER))

    def _parse_file(self) -> FileChange:
        old_path = path = ""
        match = FILE_HEADER_RE.match(self.lines[self.current])
        if match:
            old_path, path = match.group(1), match.group(2)
        else:
            logger.debug(f"Unrecognized file header: {self.lines[self.current]!r}")
        self.current += 1

        status: FileStatus | None = None
        is_binary = False
        hunks: list[Hunk] = []

        while self.current < len(self.lines) and not self.lines[self.current].startswith(FILE_MARKER):
            line = self.lines[self.current]

            if line.startswith("new file"):
                status = FileStatus.ADDED
            elif line.startswith("deleted file"):
                status = FileStatus.DELETED
            elif line.startswith("rename from"):
                status = FileStatus.RENAMED
                old_path = line.removeprefix("rename from ")
            elif line.startswith(BINARY_MARKER):
                is_binary = True
            elif line.startswith(HUNK_MARKER):
                hunk = self._parse_hunk()
                if hunk is not None:
                    # _parse_hunk already moved the cursor past the hunk body
                    hunks.append(hunk)
                    continue

            self.current += 1

        return FileChange(
            old_path=old_path,
            path=path,
            status=status or FileStatus.MODIFIED,
            is_binary=is_binary,
            hunks=[] if is_binary else hunks,
        )

    def _parse_hunk(self) -> Hunk | None:
        header = self.lines[self.current]
        spans = parse_hunk_header(header)
        if spans is None:
            # cursor stays on the header; the file loop steps over it
            logger.debug(f"Skipping malformed hunk header: {header!r}")
            return None

        old, new = spans
        old_number = old.start
        new_number = new.start
        lines: list[Line] = []
        self.current += 1

        while self.current < len(self.lines) and not self._at_boundary():
            text = self.lines[self.current]
            self.current += 1

            if not text:
                continue

            marker, content = text[0], text[1:]
            if marker == "+":
                lines.append(AddedLine(content=content, new_number=new_number))
                new_number += 1
            elif marker == "-":
                lines.append(DeletedLine(content=content, old_number=old_number))
                old_number += 1
            elif marker == " ":
                lines.append(ContextLine(content=content, old_number=old_number, new_number=new_number))
                old_number += 1
                new_number += 1
            elif marker != NO_NEWLINE_MARKER:
                logger.debug(f"Ignoring unexpected hunk line: {text!r}")

        return Hunk(
            old_start=old.start,
            old_lines=old.length,
            new_start=new.start,
            new_lines=new.length,
            header=header,
            lines=lines,
        )


def parse_diff(diff_text: str) -> list[FileChange]:
    """Parse unified diff text (as produced by ``git diff``) into file changes."""
    if not diff_text:
        return []
    return DiffParser(diff_text).parse()
