from __future__ import annotations

"""
Unit tests for the entry metadata reader.

Verifies lstat-based classification, symlink target resolution and the
fatal errors raised for unreadable entries.
"""

import os
from datetime import datetime

import pytest

from filelister.core.analysis import tree_reader
from filelister.core.analysis.tree_reader import read_node
from filelister.domain.errors import LinkUnreadableError, PathUnreadableError


def test_read_regular_file(sample_tree):
    path = str(sample_tree / "f.txt")

    node = read_node(path)

    assert node.name == "f.txt"
    assert node.path == path
    assert node.size == 10
    assert node.is_dir is False
    assert node.is_link is False
    assert node.link_target is None
    assert node.children == []
    assert isinstance(node.modified_time, datetime)
    assert node.modified_time.tzinfo is not None
    assert node.modified_time.timestamp() == pytest.approx(os.lstat(path).st_mtime, abs=1e-3)


def test_read_directory_does_not_list_children(sample_tree):
    node = read_node(str(sample_tree))

    assert node.is_dir is True
    assert node.children == []


def test_root_path_kept_verbatim_and_name_ignores_trailing_slash(sample_tree):
    raw = str(sample_tree) + os.sep

    node = read_node(raw)

    assert node.path == raw
    assert node.name == "a"


def test_relative_symlink_resolved_against_link_directory(sample_tree):
    link = sample_tree / "to_b"
    os.symlink("b", link)

    node = read_node(str(link))

    assert node.is_link is True
    assert node.is_dir is False
    assert node.link_target == os.path.abspath(str(sample_tree / "b"))
    assert os.path.isabs(node.link_target)


def test_absolute_symlink_target_kept(sample_tree, tmp_path):
    target = tmp_path / "elsewhere.txt"
    target.write_text("x", encoding="utf-8")
    link = sample_tree / "abs_link"
    os.symlink(str(target), link)

    node = read_node(str(link))

    assert node.link_target == str(target)


def test_dangling_symlink_is_still_read(sample_tree):
    link = sample_tree / "dangling"
    os.symlink("../nowhere/missing.txt", link)

    node = read_node(str(link))

    assert node.is_link is True
    assert node.link_target == os.path.abspath(str(sample_tree.parent / "nowhere" / "missing.txt"))


def test_missing_path_raises_path_unreadable(tmp_path):
    missing = str(tmp_path / "does_not_exist")

    with pytest.raises(PathUnreadableError) as exc_info:
        read_node(missing)

    assert exc_info.value.path == missing
    assert exc_info.value.exit_code == 2
    assert missing in str(exc_info.value)
    assert isinstance(exc_info.value.cause, OSError)


def test_unreadable_link_raises_link_unreadable(sample_tree, monkeypatch):
    link = sample_tree / "broken"
    os.symlink("b", link)

    def _fail(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(tree_reader, "resolve_link_target", _fail)

    with pytest.raises(LinkUnreadableError) as exc_info:
        read_node(str(link))

    assert exc_info.value.path == str(link)
    assert exc_info.value.exit_code == 2
