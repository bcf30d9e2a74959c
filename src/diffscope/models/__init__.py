from .diff import (
    AddedLine,
    ContextLine,
    DeletedLine,
    DiffKind,
    DiffResult,
    FileChange,
    FileStatus,
    Hunk,
    Line,
    LineType,
)

__all__ = [
    "AddedLine",
    "ContextLine",
    "DeletedLine",
    "DiffKind",
    "DiffResult",
    "FileChange",
    "FileStatus",
    "Hunk",
    "Line",
    "LineType",
]
