from __future__ import annotations

"""
Tree Renderers.

Converts a built FileTreeNode tree into text, JSON or YAML. All renderers
share one interface and are selected by name through get_renderer().

The text format includes the root as a header line. The structured formats
serialize only the root's children, never the root itself.
"""

import json
import logging
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Tuple, Type

import yaml

from filelister.core.analysis.tree_generator import tree_depth
from filelister.domain.errors import EXIT_FAILURE, InvalidArgumentError
from filelister.domain.tree_models import FileTreeNode

logger = logging.getLogger(__name__)

INDENT_UNIT = "  "
JSON_INDENT = 4

# Interpreter frames the json and yaml serializers spend per tree level
_FRAMES_PER_LEVEL = 8
_MAX_RECURSION_LIMIT = 20000

# -----------------------------------------------------------------------------
# BASE INTERFACE
# -----------------------------------------------------------------------------

class TreeRenderer(ABC):
    """
    Abstract base class for tree output formats.
    """

    name: str = ""

    @abstractmethod
    def render(self, root: FileTreeNode) -> str:
        """
        Render a fully built tree. Must not mutate it.

        Args:
            root: Root node of the tree.

        Returns:
            str: Rendered document.
        """
        pass

# -----------------------------------------------------------------------------
# TEXT
# -----------------------------------------------------------------------------

class TextRenderer(TreeRenderer):
    """
    Indented pre-order listing, two spaces per depth level.

    Directories end with '/', symlinks with '* (<target>)'. The output ends
    with a newline after the final entry.
    """

    name = "text"

    def render(self, root: FileTreeNode) -> str:
        lines: List[str] = []
        pending: List[Tuple[FileTreeNode, int]] = [(root, 0)]
        while pending:
            node, depth = pending.pop()
            lines.append(f"{INDENT_UNIT * depth}{node.display_name(depth)}{node.suffix()}")
            pending.extend((child, depth + 1) for child in reversed(node.children))
        return "\n".join(lines) + "\n"

# -----------------------------------------------------------------------------
# STRUCTURED FORMATS
# -----------------------------------------------------------------------------

class StructuredRenderer(TreeRenderer):
    """
    Shared logic for serializers that emit the root's children as a list.

    Serialization failures are reported as warnings and yield an empty
    string instead of propagating. Both serializers recurse once per
    nesting level, so the recursion limit is raised for the duration of
    the call to fit the tree.
    """

    def render(self, root: FileTreeNode) -> str:
        records = [child.to_record() for child in root.children]
        try:
            with _nesting_headroom(tree_depth(root)):
                return self._serialize(records)
        except (TypeError, ValueError, RecursionError, yaml.YAMLError) as e:
            logger.warning(f"Problem serializing to {self.name.upper()}: {e}")
            return ""

    @abstractmethod
    def _serialize(self, records: List[Dict[str, Any]]) -> str:
        pass


class JsonRenderer(StructuredRenderer):
    name = "json"

    def _serialize(self, records: List[Dict[str, Any]]) -> str:
        return json.dumps(records, indent=JSON_INDENT)


class YamlRenderer(StructuredRenderer):
    name = "yaml"

    def _serialize(self, records: List[Dict[str, Any]]) -> str:
        return yaml.safe_dump(
            records,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

# -----------------------------------------------------------------------------
# REGISTRY
# -----------------------------------------------------------------------------

_RENDERERS: Dict[str, Type[TreeRenderer]] = {
    TextRenderer.name: TextRenderer,
    JsonRenderer.name: JsonRenderer,
    YamlRenderer.name: YamlRenderer,
}


def get_renderer(output: str) -> TreeRenderer:
    """
    Instantiate the renderer registered under an output format name.

    Raises:
        InvalidArgumentError: If no renderer is registered for the name.
    """
    renderer_cls = _RENDERERS.get(output)
    if renderer_cls is None:
        raise InvalidArgumentError(f"Invalid output format: {output}", exit_code=EXIT_FAILURE)
    return renderer_cls()


def render_tree(root: FileTreeNode, output: str) -> str:
    """Render a tree with the renderer registered under output."""
    return get_renderer(output).render(root)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

@contextmanager
def _nesting_headroom(depth: int) -> Iterator[None]:
    """Temporarily raise the recursion limit by enough frames for depth levels, up to a cap."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, min(previous + depth * _FRAMES_PER_LEVEL, _MAX_RECURSION_LIMIT)))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)
