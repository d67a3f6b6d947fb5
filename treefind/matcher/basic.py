"""Default FileMatcher policy: hidden, VCS, extension and pattern filtering."""

import os
import re
from dataclasses import dataclass, field

from treefind.matcher.filetypes import (
    VCS_DIRECTORIES,
    get_file_type_extensions,
    normalize_extension,
)


class InvalidPatternError(Exception):
    """Raised when the name pattern is not a valid regular expression."""


@dataclass
class BasicFileMatch:
    """FileMatcher combining the common find-style filters.

    Name matching is case insensitive unless `case_sensitive` is set. A
    `pattern` of None matches every name.
    """

    ignore_dir_results: bool = False
    ignore_file_results: bool = False
    ignore_hidden: bool = True
    ignore_vcs_dirs: bool = True
    ignore_file_extensions: list[str] = field(default_factory=list)
    match_file_types: list[str] = field(default_factory=list)
    ignore_file_types: list[str] = field(default_factory=list)
    pattern: str | None = None
    case_sensitive: bool = False

    _regex: re.Pattern[str] | None = field(init=False, repr=False, default=None)
    _ignored_extensions: frozenset[str] = field(init=False, repr=False, default=frozenset())
    _matched_extensions: frozenset[str] = field(init=False, repr=False, default=frozenset())

    def __post_init__(self) -> None:
        if self.pattern is not None:
            flags = 0 if self.case_sensitive else re.IGNORECASE
            try:
                self._regex = re.compile(self.pattern, flags)
            except re.error as e:
                raise InvalidPatternError(f"Invalid pattern {self.pattern!r}: {e}") from e

        ignored = {normalize_extension(ext) for ext in self.ignore_file_extensions}
        self._ignored_extensions = frozenset(ignored) | get_file_type_extensions(
            self.ignore_file_types
        )
        self._matched_extensions = get_file_type_extensions(self.match_file_types)

    def skip_directory_name(self, name: str) -> bool:
        if self.ignore_hidden and _is_hidden(name):
            return True
        return self.ignore_vcs_dirs and name in VCS_DIRECTORIES

    def skip_directory_results(self) -> bool:
        return self.ignore_dir_results

    def skip_file_results(self) -> bool:
        return self.ignore_file_results

    def skip_file_name(self, name: str) -> bool:
        if self.ignore_hidden and _is_hidden(name):
            return True

        extension = os.path.splitext(name)[1].lower()
        if extension in self._ignored_extensions:
            return True
        if self._matched_extensions:
            return extension not in self._matched_extensions
        return False

    def match_file_name(self, name: str) -> bool:
        if self._regex is None:
            return True
        return self._regex.search(name) is not None


def _is_hidden(name: str) -> bool:
    return name.startswith(".") and name not in (".", "..")
