from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over the 'os' module for the few path operations the tree
builder needs: entry naming, child path joining and symlink resolution.
"""

import os
from typing import List

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def entry_name(path: str) -> str:
    """
    Return the base name of a path, ignoring trailing separators.

    Args:
        path: Raw filesystem path.

    Returns:
        str: Last component of the path ('a' for '/tmp/a/').
    """
    name = os.path.basename(os.path.normpath(path))
    return name or path


def join_child(parent_path: str, child_name: str) -> str:
    """Build a child entry path below its parent directory."""
    return os.path.join(parent_path, child_name)


def resolve_link_target(link_path: str) -> str:
    """
    Read a symlink and resolve its target to an absolute path.

    Relative targets are interpreted against the directory containing the
    link. The target does not need to exist.

    Args:
        link_path: Path of the symlink itself.

    Returns:
        str: Absolute, normalized target path.

    Raises:
        OSError: If the link cannot be read.
    """
    raw_target = os.readlink(link_path)
    if not os.path.isabs(raw_target):
        raw_target = os.path.join(os.path.dirname(link_path), raw_target)
    return os.path.abspath(raw_target)

# -----------------------------------------------------------------------------
# DIRECTORY LISTING API
# -----------------------------------------------------------------------------

def list_entries(dir_path: str) -> List[str]:
    """
    List the immediate entries of a directory in filesystem order.

    Raises:
        OSError: If the directory cannot be listed.
    """
    return os.listdir(dir_path)
