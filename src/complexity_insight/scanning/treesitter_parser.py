"""Tree-sitter parser wrapper for Java source.

Provides the syntax-tree capability consumed by the Java calculator.
Handles a missing tree-sitter dependency gracefully: check
TREE_SITTER_AVAILABLE before relying on the default parser.

Usage:
    if TREE_SITTER_AVAILABLE:
        parser = JavaSyntaxParser()
        tree = parser.parse("class A { void f() {} }")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterator, List, Optional

logger = logging.getLogger(__name__)

# Try to import tree-sitter and the Java grammar
TREE_SITTER_AVAILABLE = False
_tree_sitter_module: Any = None
_java_grammar: Any = None

try:
    import tree_sitter as _tree_sitter_module  # type: ignore[no-redef]
    import tree_sitter_java as _java_grammar  # type: ignore[no-redef]

    TREE_SITTER_AVAILABLE = True
except ImportError:
    TREE_SITTER_AVAILABLE = False


if TYPE_CHECKING:
    from typing import Protocol

    class Node(Protocol):
        type: str
        text: Optional[bytes]
        children: List["Node"]
        named_children: List["Node"]
        has_error: bool

        def child_by_field_name(self, name: str) -> Optional["Node"]: ...

    class Tree(Protocol):
        root_node: Node


def iter_nodes(node: "Node") -> Iterator["Node"]:
    """Yield ``node`` and all of its descendants in document (pre-)order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def node_text(node: Optional["Node"]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


class JavaSyntaxParser:
    """Builds tree-sitter syntax trees for Java source text.

    ``parse`` raises ``SyntaxError`` when the text does not form a valid
    compilation unit (tree-sitter recovers from errors, so any ERROR or
    MISSING node in the tree counts as a failure).
    """

    def __init__(self) -> None:
        if not TREE_SITTER_AVAILABLE:
            raise ImportError(
                "Java analysis requires the 'tree-sitter' and 'tree-sitter-java' packages. "
                "Install with: pip install tree-sitter tree-sitter-java"
            )
        # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
        language = _tree_sitter_module.Language(_java_grammar.language())
        self._parser = _tree_sitter_module.Parser(language)

    def parse(self, source: str) -> "Tree":
        tree = self._parser.parse(source.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            raise SyntaxError(_describe_error(root))
        return tree


def _describe_error(root: "Node") -> str:
    for node in iter_nodes(root):
        if node.type == "ERROR" or getattr(node, "is_missing", False):
            line, column = node.start_point
            snippet = node_text(node).strip().splitlines()
            near = f" near '{snippet[0][:40]}'" if snippet else ""
            return f"syntax error at line {line + 1}, column {column + 1}{near}"
    return "syntax error"
