"""Shared test fixtures for srcstat tests."""

import os
from pathlib import Path

import pytest

from srcstat.scanning import FileMetric, Language, ScanResults, Unknown


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep user config files and SRCSTAT_* variables out of every test."""
    home = tmp_path_factory.mktemp("_home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("NO_COLOR", raising=False)
    for key in list(os.environ):
        if key.startswith("SRCSTAT_"):
            monkeypatch.delenv(key)


def write(path: Path, content, encoding="utf-8") -> Path:
    """Create ``path`` (and its parents) with text or bytes content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_bytes(content.encode(encoding))
    return path


@pytest.fixture
def make_file():
    return write


def _record(path, lines=0, words=0, chars=0, bytes=0, language=Language.TEXT, count=1):
    return FileMetric(
        path=Path(path),
        lines=lines,
        words=words,
        chars=chars,
        bytes=bytes,
        language=language,
        count=count,
    )


@pytest.fixture
def make_record():
    return _record


@pytest.fixture
def mixed_results():
    """Three text files, a markdown file and an unknown extension."""
    return ScanResults.from_files(
        [
            _record("a.txt", lines=2, words=5, chars=26, bytes=27),
            _record("notes.md", lines=10, words=40, chars=200, bytes=210, language=Language.MARKDOWN),
            _record("b.txt", lines=1, words=1, chars=3, bytes=3),
            _record("data.xyz", lines=4, words=4, chars=16, bytes=20, language=Unknown("xyz")),
            _record("c.txt", lines=3, words=6, chars=30, bytes=33),
        ]
    )
