"""Shared fixtures for searchbot tests."""

import os
import tempfile
from pathlib import Path

import pytest


def _make_tree(root: Path, files):
    """Create files (relative paths) under root, with optional content."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)


@pytest.fixture
def sample_tree():
    """A small home-directory-like tree with hidden and skipped directories."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _make_tree(root, {
            "Documents/report-2024.pdf": b"x" * 2048,
            "Documents/meeting-notes.txt": b"notes",
            "Documents/Archive/REPORT-2023.pdf": b"old",
            ".git/config": b"[core]",
            ".git/report-2024.pdf": b"hidden",
            "Projects/node/node_modules/lib.js": b"module.exports = {}",
            "Projects/node/node_modules/report-2024.js": b"",
            "Projects/node/index.js": b"",
            "Library/report-2024.pdf": b"",
            "System/report-2024.pdf": b"",
            "Applications/report-2024.app": b"",
            "notes.txt": b"top level",
            ".report-2024.pdf": b"hidden file",
        })
        yield root


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SEARCHBOT_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("SEARCHBOT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_tree():
    """Return a helper that creates {relative path: bytes} files under a root."""
    return _make_tree
