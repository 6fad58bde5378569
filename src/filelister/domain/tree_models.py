from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node type shared by the tree builder and the
renderers. A node carries the metadata of a single filesystem entry and,
once expanded, the ordered list of its children.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class FileTreeNode:
    """
    Represents one entry (file, directory or symlink) in the directory tree.

    Attributes:
        name: Base name of the entry.
        path: Filesystem path used for recursion. Never serialized.
        modified_time: Timestamp of the last modification.
        size: Byte size as reported by lstat.
        is_dir: Whether the entry itself is a directory.
        is_link: Whether the entry is a symbolic link.
        link_target: Absolute path the link points to (symlinks only).
        children: Ordered child nodes, populated by the tree builder.
    """
    name: str
    path: str
    modified_time: datetime
    size: int = 0
    is_dir: bool = False
    is_link: bool = False
    link_target: Optional[str] = None
    children: List[FileTreeNode] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        """Symlinks and non-directories never hold children."""
        return self.is_link or not self.is_dir

    def display_name(self, depth: int) -> str:
        """The root shows the path it was read from; descendants their base name."""
        return self.path if depth == 0 else self.name

    def suffix(self) -> str:
        if self.is_link:
            return f"* ({self.link_target})"
        if self.is_dir:
            return "/"
        return ""

    def to_record(self) -> Dict[str, Any]:
        """
        Convert the node and its subtree into a serializable mapping.

        The internal path is deliberately left out. Built with an explicit
        stack so arbitrarily deep trees convert.

        Returns:
            Dict[str, Any]: Public fields with camelCase keys.
        """
        root_record = self._own_record()
        pending: List[Tuple[FileTreeNode, Dict[str, Any]]] = [(self, root_record)]
        while pending:
            node, record = pending.pop()
            for child in node.children:
                child_record = child._own_record()
                record["children"].append(child_record)
                pending.append((child, child_record))
        return root_record

    def _own_record(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "modifiedTime": self.modified_time.isoformat(),
            "size": self.size,
            "isDirectory": self.is_dir,
            "isSymlink": self.is_link,
            "linkTarget": self.link_target,
            "children": [],
        }
