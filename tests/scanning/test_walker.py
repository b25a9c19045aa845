"""Tests for scanning/walker.py - filtered directory enumeration."""

import os

import pytest

from srcstat.scanning import ExclusionMatcher, WalkEntry, WalkError, walk


def _files(root, **kwargs):
    return [
        entry.path.relative_to(root).as_posix()
        for entry in walk(root, **kwargs)
        if isinstance(entry, WalkEntry) and entry.is_file
    ]


def _dirs(root, **kwargs):
    return [
        entry.path.relative_to(root).as_posix()
        for entry in walk(root, **kwargs)
        if isinstance(entry, WalkEntry) and not entry.is_file
    ]


@pytest.fixture
def tree(tmp_path, make_file):
    make_file(tmp_path / "a.txt", "a")
    make_file(tmp_path / "b.py", "b = 1\n")
    make_file(tmp_path / ".hidden.txt", "secret")
    make_file(tmp_path / ".config" / "settings.toml", "x = 1")
    make_file(tmp_path / "src" / "main.rs", "fn main() {}")
    make_file(tmp_path / "src" / "deep" / "lib.rs", "pub fn f() {}")
    make_file(tmp_path / "big.txt", "x" * 1000)
    return tmp_path


class TestWalk:
    def test_visits_files_in_name_order_depth_first(self, tree):
        assert _files(tree) == ["a.txt", "b.py", "big.txt", "src/main.rs", "src/deep/lib.rs"]

    def test_reports_directories(self, tree):
        assert _dirs(tree) == ["src", "src/deep"]

    def test_hidden_entries_skipped_by_default(self, tree):
        files = _files(tree)
        assert ".hidden.txt" not in files
        assert ".config/settings.toml" not in files

    def test_include_hidden(self, tree):
        files = _files(tree, include_hidden=True)
        assert ".hidden.txt" in files
        assert ".config/settings.toml" in files

    def test_max_depth_one_lists_only_root_children(self, tree):
        assert _files(tree, max_depth=1) == ["a.txt", "b.py", "big.txt"]

    def test_max_depth_two(self, tree):
        assert _files(tree, max_depth=2) == ["a.txt", "b.py", "big.txt", "src/main.rs"]

    def test_max_depth_zero_yields_nothing(self, tree):
        assert list(walk(tree, max_depth=0)) == []

    def test_max_file_size(self, tree):
        files = _files(tree, max_file_size=100)
        assert "big.txt" not in files
        assert "a.txt" in files

    def test_exclude_patterns(self, tree):
        matcher = ExclusionMatcher(["*.py", "deep/"])
        assert _files(tree, exclude=matcher) == ["a.txt", "big.txt", "src/main.rs"]

    def test_empty_directory(self, tmp_path):
        assert list(walk(tmp_path)) == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_not_followed(self, tree):
        try:
            os.symlink(tree / "src", tree / "link")
        except OSError:
            pytest.skip("cannot create symlinks here")
        assert not any(path.startswith("link") for path in _files(tree))


class TestIgnoreFiles:
    def test_gitignore_respected(self, tree, make_file):
        make_file(tree / ".gitignore", "*.txt\n")
        assert _files(tree) == ["b.py", "src/main.rs", "src/deep/lib.rs"]

    def test_ignore_file_respected(self, tree, make_file):
        make_file(tree / ".ignore", "src/\n")
        assert _files(tree) == ["a.txt", "b.py", "big.txt"]

    def test_nested_gitignore_is_anchored_to_its_directory(self, tree, make_file):
        make_file(tree / "src" / ".gitignore", "/main.rs\n")
        make_file(tree / "main.rs", "fn main() {}")
        files = _files(tree)
        assert "main.rs" in files
        assert "src/main.rs" not in files

    def test_negation(self, tree, make_file):
        make_file(tree / ".gitignore", "*.txt\n!a.txt\n")
        files = _files(tree)
        assert "a.txt" in files
        assert "big.txt" not in files

    def test_nested_negation_reincludes_parent_match(self, tmp_path, make_file):
        make_file(tmp_path / ".gitignore", "*.log\n")
        make_file(tmp_path / "sub" / ".gitignore", "!keep.log\n")
        make_file(tmp_path / "sub" / "keep.log", "kept")
        make_file(tmp_path / "sub" / "drop.log", "dropped")
        make_file(tmp_path / "top.log", "dropped")
        assert _files(tmp_path) == ["sub/keep.log"]

    def test_nested_rule_overrides_parent_negation(self, tmp_path, make_file):
        make_file(tmp_path / ".gitignore", "*.log\n!keep.log\n")
        make_file(tmp_path / "sub" / ".gitignore", "keep.log\n")
        make_file(tmp_path / "keep.log", "kept")
        make_file(tmp_path / "sub" / "keep.log", "dropped")
        assert _files(tmp_path) == ["keep.log"]

    def test_ignore_file_beats_gitignore(self, tree, make_file):
        make_file(tree / ".gitignore", "a.txt\n")
        make_file(tree / ".ignore", "!a.txt\n")
        assert "a.txt" in _files(tree)

    def test_gitignore_beats_git_info_exclude(self, tree, make_file):
        make_file(tree / ".git" / "info" / "exclude", "b.py\n")
        make_file(tree / ".gitignore", "!b.py\n")
        assert "b.py" in _files(tree)

    def test_git_info_exclude(self, tree, make_file):
        make_file(tree / ".git" / "info" / "exclude", "b.py\n")
        assert "b.py" not in _files(tree)

    def test_disabled(self, tree, make_file):
        make_file(tree / ".gitignore", "*\n")
        assert _files(tree) == []
        assert _files(tree, respect_ignore_files=False) == [
            "a.txt",
            "b.py",
            "big.txt",
            "src/main.rs",
            "src/deep/lib.rs",
        ]


class TestWalkErrors:
    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="permission checks do not apply to root",
    )
    def test_unreadable_directory_yields_error(self, tree):
        locked = tree / "locked"
        locked.mkdir()
        locked.chmod(0)
        try:
            errors = [e for e in walk(tree) if isinstance(e, WalkError)]
        finally:
            locked.chmod(0o755)
        assert [e.path for e in errors] == [locked]
        assert "locked" in str(errors[0].error)
