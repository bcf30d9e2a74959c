from .base import GitBackend
from .git import LocalGitClient

__all__ = ["GitBackend", "LocalGitClient"]
