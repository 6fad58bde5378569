from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures used across unit, integration and e2e tests.
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from filelister.domain.tree_models import FileTreeNode  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small directory structure on disk.

    Structure:
    /a
      f.txt      (10 bytes)
      /b
        g.txt
    """
    root = tmp_path / "a"
    root.mkdir()
    (root / "f.txt").write_text("0123456789", encoding="utf-8")

    sub = root / "b"
    sub.mkdir()
    (sub / "g.txt").write_text("g", encoding="utf-8")

    return root


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def make_node(fixed_time):
    """Factory for in-memory nodes that never touch the filesystem."""

    def _make(name: str, path: str = "", **kwargs) -> FileTreeNode:
        return FileTreeNode(
            name=name,
            path=path or name,
            modified_time=kwargs.pop("modified_time", fixed_time),
            **kwargs,
        )

    return _make
