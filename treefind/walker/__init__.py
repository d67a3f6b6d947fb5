"""Walker module for symlink-aware filesystem traversal."""

from .errors import (
    CycleDetectedError,
    NotFoundError,
    PermissionDeniedError,
    SymlinkResolutionError,
    TraversalError,
)
from .filesystem import FileEntry, FileInfo, probe, read_dir_no_sort, resolve_symlink
from .listing import iter_one_level, iter_recursive, list_one_level, list_recursive
from .sorting import SORT_FUNCTIONS, SortFn, get_sort_fn, no_sort, sort_by_name, sort_by_name_casefold
from .walk import SKIP_DIR, Redirection, WalkAction, list_recursive_walk, symlink_walk, walk

__all__ = [
    "FileEntry",
    "FileInfo",
    "probe",
    "read_dir_no_sort",
    "resolve_symlink",
    "list_one_level",
    "list_recursive",
    "iter_one_level",
    "iter_recursive",
    "walk",
    "symlink_walk",
    "list_recursive_walk",
    "Redirection",
    "WalkAction",
    "SKIP_DIR",
    "SortFn",
    "SORT_FUNCTIONS",
    "get_sort_fn",
    "sort_by_name",
    "sort_by_name_casefold",
    "no_sort",
    "TraversalError",
    "NotFoundError",
    "PermissionDeniedError",
    "SymlinkResolutionError",
    "CycleDetectedError",
]
