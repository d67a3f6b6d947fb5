"""Inclusion and exclusion policies for traversal results."""

from .base import PASS_THROUGH, FileMatcher, PassThroughMatcher
from .basic import BasicFileMatch, InvalidPatternError
from .filetypes import FILE_TYPES, VCS_DIRECTORIES

__all__ = [
    "FileMatcher",
    "PassThroughMatcher",
    "PASS_THROUGH",
    "BasicFileMatch",
    "InvalidPatternError",
    "FILE_TYPES",
    "VCS_DIRECTORIES",
]
