from abc import ABC, abstractmethod
from diffscope.models.diff import DiffKind


class GitBackend(ABC):
    @abstractmethod
    async def raw_diff_text(self, kind: DiffKind, context_lines: int = 3) -> str:
        pass

    @abstractmethod
    async def get_status(self) -> list[str]:
        pass

    @abstractmethod
    async def get_file_content(self, file_path: str) -> str:
        pass

    @abstractmethod
    async def list_untracked_files(self) -> list[str]:
        pass

    @abstractmethod
    async def read_worktree_file(self, file_path: str) -> bytes:
        pass
