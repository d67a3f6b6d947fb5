"""CLI interface for treefind."""

import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import click

from treefind.config import Config
from treefind.matcher import FILE_TYPES, BasicFileMatch, InvalidPatternError
from treefind.walker import (
    SORT_FUNCTIONS,
    FileInfo,
    TraversalError,
    get_sort_fn,
    list_recursive,
    list_recursive_walk,
)

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", is_flag=True, help="Log traversal details to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Find files and directories, following symlinks by default."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = Config()


def _traversal_options(command: Callable[..., Any]) -> Callable[..., Any]:
    options = [
        click.argument("pattern", required=False),
        click.argument("location", required=False, default="."),
        click.option("--follow/--no-follow", default=None, help="Follow symlinks (default: follow)"),
        click.option("--hidden", is_flag=True, help="Include hidden files and directories"),
        click.option("--vcs", is_flag=True, help="Include version control directories"),
        click.option(
            "--type",
            "entry_type",
            type=click.Choice(["f", "d"]),
            default=None,
            help="Only report files (f) or directories (d)",
        ),
        click.option("--case-sensitive", is_flag=True, help="Match the pattern case sensitively"),
        click.option("--ignore-ext", multiple=True, help="Skip files with this extension"),
        click.option(
            "--file-type",
            multiple=True,
            type=click.Choice(sorted(FILE_TYPES)),
            help="Only report files of this type",
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


@cli.command("find")
@_traversal_options
@click.option(
    "--sort",
    "sort_name",
    type=click.Choice(sorted(SORT_FUNCTIONS)),
    default=None,
    help="Order of entries within each directory",
)
@click.pass_context
def find(
    ctx: click.Context,
    pattern: str | None,
    location: str,
    follow: bool | None,
    sort_name: str | None,
    **options: Any,
) -> None:
    """List entries under LOCATION whose name matches PATTERN (a regular expression)."""
    config: Config = ctx.obj["config"]
    matcher = _build_matcher(config, pattern, options)
    follow = config.follow_symlinks if follow is None else follow
    sort_fn = get_sort_fn(sort_name or config.sort)

    errors = 0
    try:
        for entry in list_recursive(location, follow, matcher, sort_fn):
            if entry.error is not None:
                _report_error(entry.path, entry.error)
                errors += 1
                continue
            click.echo(entry.path)
    except KeyboardInterrupt:
        sys.exit(130)

    if errors:
        sys.exit(1)


@cli.command("walk")
@_traversal_options
@click.pass_context
def walk_command(
    ctx: click.Context,
    pattern: str | None,
    location: str,
    follow: bool | None,
    **options: Any,
) -> None:
    """Like find, but driven by a visit callback. Entries are sorted by name."""
    config: Config = ctx.obj["config"]
    matcher = _build_matcher(config, pattern, options)
    follow = config.follow_symlinks if follow is None else follow
    root = os.path.normpath(location)

    errors = 0

    def visit(path: str, info: FileInfo | None, error: Exception | None) -> None:
        nonlocal errors
        if error is not None:
            _report_error(path, error)
            errors += 1
            return
        # The root is only reported when it is not a directory
        if path == root and info is not None and info.is_dir:
            return
        click.echo(path)

    try:
        list_recursive_walk(root, follow, matcher, visit)
    except KeyboardInterrupt:
        sys.exit(130)

    if errors:
        sys.exit(1)


def _build_matcher(config: Config, pattern: str | None, options: dict[str, Any]) -> BasicFileMatch:
    try:
        return config.build_matcher(
            pattern,
            entry_type=options["entry_type"],
            include_hidden=options["hidden"],
            include_vcs_dirs=options["vcs"],
            case_sensitive=options["case_sensitive"],
            ignore_extensions=options["ignore_ext"],
            file_types=options["file_type"],
        )
    except InvalidPatternError as e:
        raise click.UsageError(str(e)) from e


def _report_error(path: str, error: Exception) -> None:
    click.echo(f"ERROR: '{path}' {_describe_error(error)}", err=True)


def _describe_error(error: Exception) -> str:
    if isinstance(error, TraversalError):
        return error.description
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


def main() -> None:
    """Entry point for the CLI."""
    cli(standalone_mode=True)  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
