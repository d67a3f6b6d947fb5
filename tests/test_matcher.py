"""Tests for FileMatcher policies."""

import pytest

from treefind.matcher import BasicFileMatch, InvalidPatternError, PassThroughMatcher
from treefind.matcher.filetypes import get_file_type_extensions, normalize_extension


class TestPassThroughMatcher:
    """Tests for PassThroughMatcher."""

    def test_skips_nothing(self):
        matcher = PassThroughMatcher()

        assert not matcher.skip_directory_name(".git")
        assert not matcher.skip_directory_results()
        assert not matcher.skip_file_results()
        assert not matcher.skip_file_name(".hidden")
        assert matcher.match_file_name("anything")


class TestBasicFileMatch:
    """Tests for BasicFileMatch."""

    def test_defaults_skip_hidden_and_vcs(self):
        matcher = BasicFileMatch()

        assert matcher.skip_directory_name(".cache")
        assert matcher.skip_directory_name(".git")
        assert matcher.skip_directory_name("CVS")
        assert matcher.skip_file_name(".bashrc")
        assert not matcher.skip_directory_name("src")
        assert not matcher.skip_file_name("main.py")

    def test_dot_entries_are_not_hidden(self):
        matcher = BasicFileMatch()

        assert not matcher.skip_directory_name(".")
        assert not matcher.skip_directory_name("..")

    def test_include_hidden_keeps_vcs_suppression(self):
        matcher = BasicFileMatch(ignore_hidden=False)

        assert not matcher.skip_directory_name(".cache")
        assert matcher.skip_directory_name(".git")

    def test_include_vcs(self):
        matcher = BasicFileMatch(ignore_hidden=False, ignore_vcs_dirs=False)
        assert not matcher.skip_directory_name(".git")

    def test_result_suppression_flags(self):
        assert BasicFileMatch(ignore_dir_results=True).skip_directory_results()
        assert BasicFileMatch(ignore_file_results=True).skip_file_results()
        assert not BasicFileMatch().skip_directory_results()
        assert not BasicFileMatch().skip_file_results()

    def test_pattern_is_case_insensitive_by_default(self):
        matcher = BasicFileMatch(pattern="readme")

        assert matcher.match_file_name("README.md")
        assert matcher.match_file_name("docs-readme.txt")
        assert not matcher.match_file_name("LICENSE")

    def test_case_sensitive_pattern(self):
        matcher = BasicFileMatch(pattern="readme", case_sensitive=True)

        assert not matcher.match_file_name("README.md")
        assert matcher.match_file_name("readme.md")

    def test_no_pattern_matches_everything(self):
        assert BasicFileMatch().match_file_name("whatever.bin")

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError):
            BasicFileMatch(pattern="(unclosed")

    def test_ignored_extensions_with_or_without_dot(self):
        matcher = BasicFileMatch(ignore_file_extensions=["pyc", ".LOG"])

        assert matcher.skip_file_name("module.pyc")
        assert matcher.skip_file_name("server.log")
        assert not matcher.skip_file_name("module.py")

    def test_match_file_types(self):
        matcher = BasicFileMatch(match_file_types=["ruby"])

        assert not matcher.skip_file_name("app.rb")
        assert not matcher.skip_file_name("view.ERB")
        assert matcher.skip_file_name("app.py")
        assert matcher.skip_file_name("Makefile")

    def test_ignore_file_types(self):
        matcher = BasicFileMatch(ignore_file_types=["compiled"])

        assert matcher.skip_file_name("lib.so")
        assert not matcher.skip_file_name("lib.c")

    def test_unknown_file_type(self):
        with pytest.raises(ValueError, match="Unknown file type"):
            BasicFileMatch(match_file_types=["cobol"])


class TestFileTypes:
    """Tests for file type helpers."""

    def test_union_of_groups(self):
        extensions = get_file_type_extensions(["c", "go"])
        assert extensions == frozenset({".c", ".h", ".go"})

    def test_empty(self):
        assert get_file_type_extensions([]) == frozenset()

    def test_normalize_extension(self):
        assert normalize_extension("TXT") == ".txt"
        assert normalize_extension(".Md") == ".md"
