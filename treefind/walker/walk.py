"""Callback-driven walks built on the streaming listings.

`walk` visits every path under a root exactly once, parents before children,
and never follows symlinks. `symlink_walk` adapts it to follow directory
symlinks by walking the resolved target and reporting every path under the
link's own location. `list_recursive_walk` applies a FileMatcher on top.

A visit callback receives ``(path, info, error)`` and may return `SKIP_DIR`
to prune the directory it was called with. Exceptions raised by the callback
abort the walk and propagate to the caller.
"""

import logging
import os
from collections.abc import Callable
from contextlib import closing
from dataclasses import dataclass, replace
from enum import Enum

from treefind.matcher.base import PASS_THROUGH, FileMatcher
from treefind.walker.errors import CycleDetectedError, NotFoundError, TraversalError
from treefind.walker.filesystem import FileEntry, FileInfo, probe, resolve_symlink
from treefind.walker.listing import iter_recursive
from treefind.walker.sorting import sort_by_name

logger = logging.getLogger(__name__)


class WalkAction(Enum):
    """Answer a visit callback may give for a directory."""

    CONTINUE = "continue"
    SKIP_DIR = "skip_dir"


SKIP_DIR = WalkAction.SKIP_DIR

VisitFn = Callable[[str, FileInfo | None, Exception | None], WalkAction | None]


@dataclass(frozen=True)
class Redirection:
    """An active walk into the target of a followed directory symlink."""

    link_path: str
    target_path: str

    def restore(self, path: str) -> str:
        if path == self.target_path:
            return self.link_path
        if _is_under(path, self.target_path):
            prefix = self.target_path.rstrip(os.sep) + os.sep
            return os.path.join(self.link_path, path[len(prefix) :])
        return path


def _is_under(path: str, ancestor: str) -> bool:
    return path.startswith(ancestor.rstrip(os.sep) + os.sep)


def walk(root: str, visit: VisitFn) -> None:
    """Visit `root` and everything under it, without following symlinks."""
    entry = probe(root)
    action = visit(entry.path, entry.info, entry.error)
    if entry.error is not None or not entry.is_dir or action is SKIP_DIR:
        return

    stream = iter_recursive(entry, follow=False, matcher=PASS_THROUGH, sort_fn=sort_by_name)
    with closing(stream):
        try:
            item = next(stream)
            while True:
                action = visit(item.path, item.info, item.error)
                prune = action is SKIP_DIR and item.error is None and item.is_dir
                item = stream.send(prune)
        except StopIteration:
            return


def symlink_walk(root: str, follow: bool, visit: VisitFn) -> None:
    """Like `walk`, but descends into directory symlinks when `follow` is set.

    Paths under a followed link are reported relative to the link, never to
    its resolved target. Dangling links are reported as plain entries. A
    directory already open on the current branch is reported once with
    `CycleDetectedError` and not descended into.
    """
    _symlink_walk(os.path.normpath(root), follow, visit, (), frozenset())


def _symlink_walk(
    root: str,
    follow: bool,
    visit: VisitFn,
    redirections: tuple[Redirection, ...],
    branch: frozenset[tuple[int, int]],
) -> None:
    current = redirections[-1] if redirections else None
    # Directories of this walk enclosing the path being visited, outermost first
    open_dirs: list[tuple[str, tuple[int, int]]] = []

    def redirected_visit(
        walked_path: str, info: FileInfo | None, error: Exception | None
    ) -> WalkAction | None:
        while open_dirs and not _is_under(walked_path, open_dirs[-1][0]):
            open_dirs.pop()
        active = branch.union(identity for _, identity in open_dirs)

        path = walked_path
        if current is not None:
            path = current.restore(walked_path)
            if walked_path == current.target_path and info is not None:
                info = replace(info, name=os.path.basename(path))

        if error is not None:
            logger.debug("Walk error at %s: %s", path, error)
            return visit(path, info, error)

        assert info is not None
        if not (follow and info.is_symlink):
            if info.is_dir:
                if info.identity in active:
                    logger.debug("Cycle detected at %s", path)
                    visit(path, info, CycleDetectedError(path))
                    return SKIP_DIR
                open_dirs.append((walked_path, info.identity))
            return visit(path, info, None)

        try:
            target = resolve_symlink(FileEntry(path, info))
        except NotFoundError:
            logger.debug("Dangling symlink treated as a file: %s", path)
            return visit(path, info, None)
        except TraversalError as e:
            return visit(path, info, e)

        assert target.info is not None
        if not target.info.is_dir:
            return visit(path, info, None)

        if target.info.identity in active:
            logger.debug("Cycle detected at %s", path)
            return visit(path, info, CycleDetectedError(path))

        redirection = Redirection(path, target.path)
        logger.debug("Following %s into %s", redirection.link_path, redirection.target_path)
        _symlink_walk(target.path, follow, visit, redirections + (redirection,), active)
        return None

    walk(root, redirected_visit)


def list_recursive_walk(
    root: str,
    follow: bool,
    matcher: FileMatcher,
    visit: VisitFn,
) -> None:
    """Walk `root` through `symlink_walk`, reporting only what `matcher` lets through.

    The root itself is always visited.
    """
    root = os.path.normpath(root)

    def matched_visit(
        path: str, info: FileInfo | None, error: Exception | None
    ) -> WalkAction | None:
        if error is not None or path == root:
            return visit(path, info, error)

        assert info is not None
        name = os.path.basename(path)
        if info.is_dir:
            if matcher.skip_directory_name(name):
                return SKIP_DIR
            if matcher.skip_directory_results():
                return None
            return visit(path, info, None)

        if matcher.skip_file_results() or matcher.skip_file_name(name):
            return None
        if matcher.match_file_name(name):
            return visit(path, info, None)
        return None

    symlink_walk(root, follow, matched_visit)
