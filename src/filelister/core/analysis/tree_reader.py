from __future__ import annotations

"""
Entry Metadata Reader.

Produces a single FileTreeNode from a filesystem path without touching its
children. Uses lstat so that symlinks are classified as links instead of
being resolved transparently.
"""

import logging
import os
import stat
from datetime import datetime

from filelister.domain.errors import LinkUnreadableError, PathUnreadableError
from filelister.domain.tree_models import FileTreeNode
from filelister.infra.fs import entry_name, resolve_link_target

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_node(path: str) -> FileTreeNode:
    """
    Read the metadata of one filesystem entry.

    Args:
        path: Entry path, relative or absolute. Stored on the node as given.

    Returns:
        FileTreeNode: A childless node describing the entry.

    Raises:
        PathUnreadableError: If the entry does not exist or cannot be stat'ed.
        LinkUnreadableError: If the entry is a symlink whose target cannot be read.
    """
    try:
        info = os.lstat(path)
    except OSError as e:
        raise PathUnreadableError(path, cause=e) from e

    is_link = stat.S_ISLNK(info.st_mode)
    link_target = None
    if is_link:
        try:
            link_target = resolve_link_target(path)
        except OSError as e:
            raise LinkUnreadableError(path, cause=e) from e

    node = FileTreeNode(
        name=entry_name(path),
        path=path,
        modified_time=datetime.fromtimestamp(info.st_mtime).astimezone(),
        size=info.st_size,
        is_dir=stat.S_ISDIR(info.st_mode),
        is_link=is_link,
        link_target=link_target,
    )
    logger.debug(f"Read entry: {path} (dir={node.is_dir}, link={node.is_link})")
    return node
