"""Tests for filesystem primitives."""

import os
from pathlib import Path

import pytest

from treefind.walker.errors import (
    NotFoundError,
    PermissionDeniedError,
    SymlinkResolutionError,
)
from treefind.walker.filesystem import FileEntry, probe, read_dir_no_sort, resolve_symlink

running_as_root = hasattr(os, "geteuid") and os.geteuid() == 0


class TestProbe:
    """Tests for probe function."""

    def test_regular_file(self, tmp_path: Path):
        (tmp_path / "a.txt").write_text("hello")

        entry = probe(str(tmp_path / "a.txt"))

        assert entry.error is None
        assert entry.info is not None
        assert entry.info.name == "a.txt"
        assert entry.info.is_file
        assert not entry.info.is_dir
        assert entry.info.size == 5

    def test_directory(self, tmp_path: Path):
        entry = probe(str(tmp_path))

        assert entry.error is None
        assert entry.is_dir
        assert entry.name == tmp_path.name

    def test_path_is_normalized(self, tmp_path: Path):
        (tmp_path / "a.txt").write_text("hello")

        entry = probe(f"{tmp_path}/missing/../a.txt")

        assert entry.path == str(tmp_path / "a.txt")
        assert entry.error is None

    def test_missing_path(self, tmp_path: Path):
        entry = probe(str(tmp_path / "missing"))

        assert entry.info is None
        assert isinstance(entry.error, NotFoundError)
        assert entry.error.path == str(tmp_path / "missing")
        assert entry.name == "missing"

    def test_does_not_follow_symlinks(self, tmp_path: Path):
        (tmp_path / "target").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "target")

        entry = probe(str(tmp_path / "link"))

        assert entry.info is not None
        assert entry.info.is_symlink
        assert not entry.info.is_dir

    def test_dangling_symlink_is_probed(self, tmp_path: Path):
        (tmp_path / "dangling").symlink_to(tmp_path / "nowhere")

        entry = probe(str(tmp_path / "dangling"))

        assert entry.error is None
        assert entry.info is not None
        assert entry.info.is_symlink


class TestFileEntry:
    """Tests for FileEntry."""

    def test_with_error_keeps_path_and_info(self, tmp_path: Path):
        entry = probe(str(tmp_path))
        error = PermissionDeniedError(entry.path)

        failed = entry.with_error(error)

        assert failed.path == entry.path
        assert failed.info == entry.info
        assert failed.error is error
        assert entry.error is None

    def test_name_without_info(self):
        entry = FileEntry("some/dir/file.txt", None, NotFoundError("some/dir/file.txt"))
        assert entry.name == "file.txt"
        assert not entry.is_dir


class TestReadDirNoSort:
    """Tests for read_dir_no_sort function."""

    def test_lists_children(self, tmp_path: Path):
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "sub").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "sub")

        children = read_dir_no_sort(str(tmp_path))

        by_name = {info.name: info for info in children}
        assert set(by_name) == {"a.txt", "sub", "link"}
        assert by_name["sub"].is_dir
        assert by_name["link"].is_symlink

    def test_empty_directory(self, tmp_path: Path):
        assert read_dir_no_sort(str(tmp_path)) == []

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(NotFoundError):
            read_dir_no_sort(str(tmp_path / "missing"))

    def test_not_a_directory_passes_through(self, tmp_path: Path):
        (tmp_path / "file.txt").write_text("x")

        with pytest.raises(NotADirectoryError):
            read_dir_no_sort(str(tmp_path / "file.txt"))

    @pytest.mark.skipif(running_as_root, reason="root ignores directory permissions")
    def test_permission_denied(self, tmp_path: Path):
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0)
        try:
            with pytest.raises(PermissionDeniedError) as exc_info:
                read_dir_no_sort(str(locked))
        finally:
            locked.chmod(0o755)

        assert exc_info.value.path == str(locked)


class TestResolveSymlink:
    """Tests for resolve_symlink function."""

    def test_resolves_chain(self, tmp_path: Path):
        (tmp_path / "real.txt").write_text("x")
        (tmp_path / "first").symlink_to(tmp_path / "second")
        (tmp_path / "second").symlink_to(tmp_path / "real.txt")

        resolved = resolve_symlink(probe(str(tmp_path / "first")))

        assert resolved.path == os.path.realpath(tmp_path / "real.txt")
        assert resolved.info is not None
        assert resolved.info.is_file

    def test_dangling_link(self, tmp_path: Path):
        (tmp_path / "dangling").symlink_to(tmp_path / "nowhere")

        with pytest.raises(NotFoundError) as exc_info:
            resolve_symlink(probe(str(tmp_path / "dangling")))

        assert exc_info.value.path == str(tmp_path / "dangling")

    def test_link_loop(self, tmp_path: Path):
        (tmp_path / "ping").symlink_to(tmp_path / "pong")
        (tmp_path / "pong").symlink_to(tmp_path / "ping")

        with pytest.raises(SymlinkResolutionError):
            resolve_symlink(probe(str(tmp_path / "ping")))
