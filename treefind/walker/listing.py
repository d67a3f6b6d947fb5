"""Streaming one-level and recursive listings with optional symlink following.

Listings are generators: each level is read only when the consumer asks for
its next entry, and nested levels are chained with ``yield from`` so that
demand flows from the outermost consumer down to the deepest directory being
read. Closing a listing early unwinds every nested level.

Errors are never raised out of a listing. They are delivered as entries whose
``error`` is set, so a failing branch does not stop its siblings.
"""

import logging
import os
from collections.abc import Generator, Iterator

from treefind.matcher.base import PASS_THROUGH, FileMatcher
from treefind.walker.errors import CycleDetectedError, NotFoundError, TraversalError
from treefind.walker.filesystem import FileEntry, probe, read_dir_no_sort, resolve_symlink
from treefind.walker.sorting import SortFn, sort_by_name

logger = logging.getLogger(__name__)

# Sending True in answer to a directory entry prunes that directory
RecursiveListing = Generator[FileEntry, bool | None, None]


def list_one_level(
    path: str,
    follow: bool = True,
    sort_fn: SortFn = sort_by_name,
) -> Iterator[FileEntry]:
    """List the immediate children of `path`, or `path` itself if it is not a directory."""
    return iter_one_level(probe(path), follow, sort_fn)


def iter_one_level(entry: FileEntry, follow: bool, sort_fn: SortFn) -> Iterator[FileEntry]:
    if entry.error is not None:
        logger.debug("Entry error: %s", entry.error)
        yield entry
        return

    assert entry.info is not None
    resolved = entry
    if follow and entry.info.is_symlink:
        try:
            resolved = resolve_symlink(entry)
        except TraversalError as e:
            logger.debug("Cannot resolve symlink %s: %s", entry.path, e)
            yield entry.with_error(e)
            return

    if resolved.is_dir:
        try:
            children = read_dir_no_sort(entry.path)
        except (TraversalError, OSError) as e:
            yield entry.with_error(e)
            return

        for info in sort_fn(children):
            yield FileEntry(os.path.join(entry.path, info.name), info)
        return

    # Not a directory: report the entry itself, named after the unresolved object
    yield FileEntry(os.path.join(os.path.dirname(entry.path), entry.info.name), entry.info)


def list_recursive(
    path: str,
    follow: bool = True,
    matcher: FileMatcher | None = None,
    sort_fn: SortFn = sort_by_name,
) -> RecursiveListing:
    """List everything under `path` depth first, directories before their contents.

    The root directory itself is not reported. If `path` is not a directory
    it is reported alone, subject to the matcher.
    """
    return iter_recursive(probe(path), follow, matcher or PASS_THROUGH, sort_fn)


def iter_recursive(
    entry: FileEntry,
    follow: bool,
    matcher: FileMatcher,
    sort_fn: SortFn,
) -> RecursiveListing:
    branch: frozenset[tuple[int, int]] = frozenset()
    if entry.error is None:
        identity = _directory_identity(entry, follow)
        if identity is not None:
            branch = frozenset({identity})
    yield from _iter_recursive(entry, follow, matcher, sort_fn, branch)


def _iter_recursive(
    entry: FileEntry,
    follow: bool,
    matcher: FileMatcher,
    sort_fn: SortFn,
    branch: frozenset[tuple[int, int]],
) -> RecursiveListing:
    if entry.error is not None:
        yield entry
        return

    logger.debug("Listing: %s", entry.path)
    for child in iter_one_level(entry, follow, sort_fn):
        if child.error is not None:
            logger.debug("Error received for %s: %s", child.path, child.error)
            yield child
            continue

        assert child.info is not None
        target = child
        if follow and child.info.is_symlink:
            try:
                target = resolve_symlink(child)
            except NotFoundError:
                logger.debug("Dangling symlink treated as a file: %s", child.path)
            except TraversalError as e:
                yield child.with_error(e)
                continue

        name = child.info.name
        if target.is_dir:
            if matcher.skip_directory_name(name):
                logger.debug("Skipping directory: %s", child.path)
                continue

            assert target.info is not None
            identity = target.info.identity
            if identity in branch:
                logger.debug("Cycle detected at %s", child.path)
                yield child.with_error(CycleDetectedError(child.path))
                continue

            if not matcher.skip_directory_results():
                prune = yield child
                if prune:
                    logger.debug("Pruned by consumer: %s", child.path)
                    continue

            yield from _iter_recursive(child, follow, matcher, sort_fn, branch | {identity})
        else:
            if matcher.skip_file_results() or matcher.skip_file_name(name):
                continue
            if matcher.match_file_name(name):
                yield child


def _directory_identity(entry: FileEntry, follow: bool) -> tuple[int, int] | None:
    resolved = entry
    if follow and entry.info is not None and entry.info.is_symlink:
        try:
            resolved = resolve_symlink(entry)
        except TraversalError:
            return None
    if resolved.is_dir:
        assert resolved.info is not None
        return resolved.info.identity
    return None
