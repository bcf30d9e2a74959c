# src/diffscope/diff/service.py
import logging
from diffscope.errors import DiffError, FileNotInDiffError, GitCommandError
from diffscope.models.diff import DiffKind, DiffResult, FileChange
from diffscope.platforms.base import GitBackend
from .parser import parse_diff
from .untracked import synthesize_from_bytes


logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_LINES = 3
FULL_CONTEXT_LINES = 999999

UNTRACKED_KINDS = (DiffKind.UNSTAGED, DiffKind.ALL)


class DiffService:
    def __init__(self, backend: GitBackend, full_context_lines: int = FULL_CONTEXT_LINES):
        self.backend = backend
        self.full_context_lines = full_context_lines

    async def get_diff(
        self,
        kind: DiffKind = DiffKind.ALL,
        context_lines: int = DEFAULT_CONTEXT_LINES,
    ) -> DiffResult:
        """Parse the working copy diff, plus untracked files for unstaged/all."""
        try:
            raw = await self.backend.raw_diff_text(kind, context_lines)
        except GitCommandError as e:
            raise DiffError(f"failed to get diff: {e}") from e

        files = parse_diff(raw)
        logger.debug(f"Parsed {len(files)} file(s) from {kind.value} diff")

        if kind in UNTRACKED_KINDS:
            files.extend(await self._untracked_changes())

        return DiffResult(files=files, type=kind)

    async def _untracked_changes(self) -> list[FileChange]:
        try:
            paths = await self.backend.list_untracked_files()
        except GitCommandError as e:
            logger.warning(f"Could not list untracked files: {e}")
            return []

        changes = []
        for path in paths:
            try:
                changes.append(await self._untracked_change(path))
            except OSError as e:
                logger.warning(f"Could not read untracked file {path}: {e}")
        return changes

    async def _untracked_change(self, path: str) -> FileChange:
        data = await self.backend.read_worktree_file(path)
        return synthesize_from_bytes(path, data)

    async def get_file_diff(
        self,
        path: str,
        kind: DiffKind = DiffKind.ALL,
        context_lines: int = DEFAULT_CONTEXT_LINES,
    ) -> FileChange:
        try:
            untracked = await self.backend.list_untracked_files()
        except GitCommandError as e:
            logger.warning(f"Could not list untracked files: {e}")
            untracked = []

        if path in untracked:
            try:
                return await self._untracked_change(path)
            except OSError as e:
                raise DiffError(f"failed to read untracked file {path}: {e}") from e

        result = await self.get_diff(kind, context_lines)
        for file in result.files:
            if file.path == path:
                return file

        raise FileNotInDiffError(path)

    async def get_file_diff_with_full_context(
        self,
        path: str,
        kind: DiffKind = DiffKind.ALL,
    ) -> FileChange:
        return await self.get_file_diff(path, kind, self.full_context_lines)

    async def get_status(self) -> list[str]:
        try:
            return await self.backend.get_status()
        except GitCommandError as e:
            raise DiffError(f"failed to get status: {e}") from e

    async def get_file_content(self, path: str) -> str:
        try:
            return await self.backend.get_file_content(path)
        except (GitCommandError, OSError) as e:
            raise DiffError(f"failed to read file {path}: {e}") from e
