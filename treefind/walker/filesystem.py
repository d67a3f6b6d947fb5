"""Filesystem primitives: probing paths and reading directories."""

import logging
import os
import stat
from dataclasses import dataclass, replace

from treefind.walker.errors import (
    NotFoundError,
    PermissionDeniedError,
    SymlinkResolutionError,
    TraversalError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileInfo:
    """Metadata of a filesystem object, as seen without following symlinks."""

    name: str
    mode: int
    size: int
    mtime: float
    device: int
    inode: int

    @classmethod
    def from_stat(cls, name: str, stat_result: os.stat_result) -> "FileInfo":
        return cls(
            name=name,
            mode=stat_result.st_mode,
            size=stat_result.st_size,
            mtime=stat_result.st_mtime,
            device=stat_result.st_dev,
            inode=stat_result.st_ino,
        )

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)

    @property
    def is_file(self) -> bool:
        return stat.S_ISREG(self.mode)

    @property
    def identity(self) -> tuple[int, int]:
        return (self.device, self.inode)


@dataclass(frozen=True)
class FileEntry:
    """A probed path, or the error found while probing or listing it."""

    path: str
    info: FileInfo | None
    error: Exception | None = None

    @property
    def name(self) -> str:
        if self.info is not None:
            return self.info.name
        return os.path.basename(self.path)

    @property
    def is_dir(self) -> bool:
        return self.info is not None and self.info.is_dir

    def with_error(self, error: Exception) -> "FileEntry":
        return replace(self, error=error)


def probe(path: str) -> FileEntry:
    """Stat `path` without following symlinks.

    Errors are attached to the returned entry rather than raised. A missing
    path is reported as NotFoundError, any other OSError is kept as is.
    """
    clean_path = os.path.normpath(path)
    logger.debug("Probing: %s", clean_path)

    try:
        stat_result = os.lstat(clean_path)
    except FileNotFoundError:
        logger.debug("Path not found: %s", clean_path)
        return FileEntry(clean_path, None, NotFoundError(clean_path))
    except OSError as e:
        logger.debug("Error probing %s: %s", clean_path, e)
        return FileEntry(clean_path, None, e)

    return FileEntry(clean_path, FileInfo.from_stat(os.path.basename(clean_path), stat_result))


def resolve_symlink(entry: FileEntry) -> FileEntry:
    """Resolve the full link chain of `entry` and probe the final target.

    Raises NotFoundError for a dangling link and SymlinkResolutionError when
    the chain cannot be resolved (link loops included).
    """
    try:
        target = os.path.realpath(entry.path, strict=True)
    except FileNotFoundError as e:
        raise NotFoundError(entry.path) from e
    except PermissionError as e:
        raise PermissionDeniedError(entry.path) from e
    except OSError as e:
        raise SymlinkResolutionError(entry.path, e.strerror or str(e)) from e

    logger.debug("Symlink %s -> %s", entry.path, target)
    resolved = probe(target)
    if resolved.error is not None:
        if isinstance(resolved.error, TraversalError):
            raise type(resolved.error)(entry.path) from resolved.error
        raise SymlinkResolutionError(entry.path, str(resolved.error)) from resolved.error
    return resolved


def read_dir_no_sort(path: str) -> list[FileInfo]:
    """List the immediate children of a directory, in whatever order the OS returns them."""
    children: list[FileInfo] = []

    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    stat_result = entry.stat(follow_symlinks=False)
                except FileNotFoundError:
                    logger.warning("File disappeared during listing: %s", entry.path)
                    continue
                children.append(FileInfo.from_stat(entry.name, stat_result))
    except PermissionError as e:
        logger.warning("Permission denied listing directory: %s", path)
        raise PermissionDeniedError(path) from e
    except FileNotFoundError as e:
        raise NotFoundError(path) from e

    return children
