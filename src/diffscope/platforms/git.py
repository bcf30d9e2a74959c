import asyncio
import logging
from pathlib import Path
from diffscope.errors import GitCommandError
from diffscope.models.diff import DiffKind
from .base import GitBackend


logger = logging.getLogger(__name__)

STATUS_PREFIX_WIDTH = 3

DIFF_ARGS = {
    DiffKind.STAGED: ["diff", "--cached", "--no-color", "--no-ext-diff"],
    DiffKind.UNSTAGED: ["diff", "--no-color", "--no-ext-diff"],
    DiffKind.ALL: ["diff", "HEAD", "--no-color", "--no-ext-diff"],
}


class LocalGitClient(GitBackend):
    def __init__(self, repo_path: str = ".", git_binary: str = "git", timeout: float = 30.0):
        self.repo_path = Path(repo_path)
        self.git_binary = git_binary
        self.timeout = timeout

    async def _run_git(self, *args: str) -> str:
        command = [self.git_binary, *args]
        logger.debug(f"Running {' '.join(command)} in {self.repo_path}")
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=self.repo_path,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (FileNotFoundError, NotADirectoryError, PermissionError) as e:
            raise GitCommandError(command, stderr=str(e)) from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise GitCommandError(command, stderr=f"timed out after {self.timeout}s") from e

        if process.returncode != 0:
            raise GitCommandError(
                command,
                stderr=stderr.decode("utf-8", errors="replace"),
                returncode=process.returncode,
            )
        return stdout.decode("utf-8", errors="replace")

    async def raw_diff_text(self, kind: DiffKind, context_lines: int = 3) -> str:
        args = list(DIFF_ARGS[kind])
        if context_lines >= 0:
            args.append(f"-U{context_lines}")
        return await self._run_git(*args)

    async def get_status(self) -> list[str]:
        """Changed paths from ``git status --porcelain -z``, status codes stripped."""
        output = await self._run_git("status", "--porcelain", "-z")
        entries = output.split("\0")
        paths = []
        index = 0
        while index < len(entries):
            entry = entries[index]
            index += 1
            if len(entry) <= STATUS_PREFIX_WIDTH:
                continue
            paths.append(entry[STATUS_PREFIX_WIDTH:])
            if "R" in entry[:2] or "C" in entry[:2]:
                # rename/copy source follows as its own entry
                index += 1
        return paths

    async def get_file_content(self, file_path: str) -> str:
        """File text at HEAD, or the working tree copy if HEAD doesn't have it."""
        try:
            return await self._run_git("show", f"HEAD:{file_path}")
        except GitCommandError:
            logger.debug(f"{file_path} not in HEAD, reading from disk")

        data = await self.read_worktree_file(file_path)
        return data.decode("utf-8", errors="replace")

    async def list_untracked_files(self) -> list[str]:
        output = await self._run_git("ls-files", "-z", "--others", "--exclude-standard")
        return [path for path in output.split("\0") if path]

    def _worktree_path(self, file_path: str) -> Path:
        root = self.repo_path.resolve()
        resolved = (root / file_path).resolve()
        if not resolved.is_relative_to(root):
            raise PermissionError(f"{file_path} is outside the repository")
        return resolved

    async def read_worktree_file(self, file_path: str) -> bytes:
        return await asyncio.to_thread(self._worktree_path(file_path).read_bytes)
