# src/diffscope/diff/untracked.py
from diffscope.models.diff import AddedLine, FileChange, FileStatus, Hunk


def split_content(content: str) -> list[str]:
    """Split file text into lines; a trailing newline ends the last line."""
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def synthesize_added_file(path: str, content: str) -> FileChange:
    """Build an all-added diff for a file that has no previous version."""
    lines = split_content(content)
    return FileChange(
        old_path=path,
        path=path,
        status=FileStatus.ADDED,
        hunks=[
            Hunk(
                old_start=0,
                old_lines=0,
                new_start=1,
                new_lines=len(lines),
                header=f"@@ -0,0 +1,{len(lines)} @@",
                lines=[
                    AddedLine(content=line, new_number=number)
                    for number, line in enumerate(lines, start=1)
                ],
            )
        ],
    )


def synthesize_binary_file(path: str) -> FileChange:
    return FileChange(old_path=path, path=path, status=FileStatus.ADDED, is_binary=True)


def synthesize_from_bytes(path: str, data: bytes) -> FileChange:
    if b"\0" in data:
        return synthesize_binary_file(path)
    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError:
        return synthesize_binary_file(path)
    return synthesize_added_file(path, content)
