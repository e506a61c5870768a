"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Canonical empty directory to prune."""
    directory = tmp_path.resolve() / "work"
    directory.mkdir()
    return directory


@pytest.fixture
def sample_tree(work_dir: Path) -> Path:
    """Directory with two files, a hidden file and a nested subdirectory.

    Layout::

        a.txt
        b.txt
        .hidden
        sub/
            nested.txt
            deeper/
                leaf.txt
    """
    (work_dir / "a.txt").write_text("a")
    (work_dir / "b.txt").write_text("b")
    (work_dir / ".hidden").write_text("hidden")
    deeper = work_dir / "sub" / "deeper"
    deeper.mkdir(parents=True)
    (work_dir / "sub" / "nested.txt").write_text("nested")
    (deeper / "leaf.txt").write_text("leaf")
    return work_dir

