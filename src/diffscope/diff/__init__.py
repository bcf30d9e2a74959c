from .parser import parse_diff, DiffParser
from .untracked import synthesize_added_file, synthesize_binary_file
from .service import DiffService

__all__ = ["parse_diff", "DiffParser", "synthesize_added_file", "synthesize_binary_file", "DiffService"]
