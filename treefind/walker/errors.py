"""Errors attached to traversal results."""


class TraversalError(Exception):
    """Base class for classified filesystem errors found during a traversal."""

    reason = "traversal error"

    def __init__(self, path: str, detail: str | None = None):
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {self.description}")

    @property
    def description(self) -> str:
        if self.detail:
            return f"{self.reason} ({self.detail})"
        return self.reason


class NotFoundError(TraversalError):
    """Raised when a path does not exist."""

    reason = "no such file or directory"


class PermissionDeniedError(TraversalError):
    """Raised when a directory cannot be opened for listing."""

    reason = "permission denied"


class SymlinkResolutionError(TraversalError):
    """Raised when a symlink chain cannot be resolved, e.g. too many links."""

    reason = "cannot resolve symlink"


class CycleDetectedError(TraversalError):
    """Raised when a followed directory is already being traversed on the same branch."""

    reason = "symlink cycle detected"
