# src/diffscope/errors.py


class DiffscopeError(Exception):
    pass


class GitCommandError(DiffscopeError):
    """A git invocation could not be run or exited non-zero."""

    def __init__(self, args: list[str], stderr: str = "", returncode: int | None = None):
        self.command = args
        self.stderr = stderr
        self.returncode = returncode
        detail = stderr.strip() or f"exit code {returncode}"
        super().__init__(f"git command failed ({' '.join(args)}): {detail}")


class DiffError(DiffscopeError):
    """Whole-operation failure reported to the caller; the cause is chained."""


class FileNotInDiffError(DiffscopeError, LookupError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"file not found in diff: {path}")
