"""treefind - A streaming, symlink-aware filesystem traversal engine."""

__version__ = "0.1.0"

from treefind.matcher import BasicFileMatch, FileMatcher
from treefind.walker import FileEntry, list_one_level, list_recursive, list_recursive_walk, symlink_walk

__all__ = [
    "BasicFileMatch",
    "FileMatcher",
    "FileEntry",
    "list_one_level",
    "list_recursive",
    "list_recursive_walk",
    "symlink_walk",
]
