from __future__ import annotations

"""
Directory Tree Generator.

Populates FileTreeNode children by listing directories, one level at a
time or depth-first through every real subdirectory. Symlinked
directories are never entered. Any I/O failure aborts the whole build.

Traversal uses an explicit stack, so tree depth is bounded by the
filesystem rather than the interpreter's recursion limit.
"""

import logging
from typing import List, Tuple

from filelister.core.analysis.tree_reader import read_node
from filelister.domain.errors import DirectoryUnreadableError
from filelister.domain.tree_models import FileTreeNode
from filelister.infra.fs import join_child, list_entries

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(path: str, recursive: bool = False) -> FileTreeNode:
    """
    Read the root entry and expand it.

    Args:
        path: Root path as given by the user.
        recursive: Expand all real subdirectories instead of one level.

    Returns:
        FileTreeNode: The fully materialized tree.
    """
    logger.info(f"Listing: {path} (recursive={recursive})")
    root = read_node(path)
    expand_node(root, recursive)
    if logger.isEnabledFor(logging.INFO):
        logger.info(f"Listing complete: {count_nodes(root)} entries, depth {tree_depth(root)}")
    return root


def expand_node(node: FileTreeNode, recursive: bool = False) -> None:
    """
    Attach the directory entries of a node as its children.

    Leaves (files and any symlink) are left untouched. Entries keep the
    order the filesystem lists them in. A directory's whole level is read
    before any of its children is expanded, and children are expanded
    depth-first in listing order.

    Args:
        node: Node to expand in place.
        recursive: Whether to expand the new children too.

    Raises:
        DirectoryUnreadableError: If the directory cannot be listed.
        PathUnreadableError: If an entry cannot be stat'ed.
        LinkUnreadableError: If a symlink entry cannot be read.
    """
    pending: List[FileTreeNode] = [node]
    while pending:
        current = pending.pop()
        children = _read_children(current)
        current.children.extend(children)
        if recursive:
            # Reversed so the first listed child is expanded first
            pending.extend(reversed(children))


def count_nodes(node: FileTreeNode) -> int:
    """Count the node and all of its descendants."""
    total = 0
    pending = [node]
    while pending:
        current = pending.pop()
        total += 1
        pending.extend(current.children)
    return total


def tree_depth(node: FileTreeNode) -> int:
    """Number of materialized levels below the node (0 for a childless node)."""
    deepest = 0
    pending: List[Tuple[FileTreeNode, int]] = [(node, 0)]
    while pending:
        current, depth = pending.pop()
        deepest = max(deepest, depth)
        pending.extend((child, depth + 1) for child in current.children)
    return deepest

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _read_children(node: FileTreeNode) -> List[FileTreeNode]:
    if node.is_leaf:
        return []

    try:
        entries = list_entries(node.path)
    except OSError as e:
        raise DirectoryUnreadableError(node.path, cause=e) from e

    return [read_node(join_child(node.path, entry)) for entry in entries]
