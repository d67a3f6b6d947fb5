"""The policy contract consulted by the traversal at every directory level."""

from typing import Protocol


class FileMatcher(Protocol):
    """Protocol for deciding which names are skipped or reported."""

    def skip_directory_name(self, name: str) -> bool:
        """Return True to skip a directory and everything under it."""

    def skip_directory_results(self) -> bool:
        """Return True to descend into directories without reporting them."""

    def skip_file_results(self) -> bool:
        """Return True to report no files at all."""

    def skip_file_name(self, name: str) -> bool:
        """Return True to leave a file out of the results."""

    def match_file_name(self, name: str) -> bool:
        """Return True if a file that was not skipped should be reported."""


class PassThroughMatcher:
    """Skips nothing and matches every name."""

    def skip_directory_name(self, name: str) -> bool:
        return False

    def skip_directory_results(self) -> bool:
        return False

    def skip_file_results(self) -> bool:
        return False

    def skip_file_name(self, name: str) -> bool:
        return False

    def match_file_name(self, name: str) -> bool:
        return True


PASS_THROUGH = PassThroughMatcher()
