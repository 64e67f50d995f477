"""Syntax-tree construction for structured languages."""

from .treesitter_parser import (
    TREE_SITTER_AVAILABLE,
    JavaSyntaxParser,
    iter_nodes,
    node_text,
)

__all__ = [
    "TREE_SITTER_AVAILABLE",
    "JavaSyntaxParser",
    "iter_nodes",
    "node_text",
]
