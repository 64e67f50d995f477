"""Cyclomatic complexity for Java, computed over a tree-sitter syntax tree.

Every method and constructor (record compact constructors included),
including those of nested, local and anonymous classes, gets its own
score starting at 1. One point is added per decision node in the
declaration:

- if / for / enhanced for / while / do-while
- each switch label (``case`` and ``default``)
- each catch clause
- each ternary expression
- each ``&&`` and ``||`` operator
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..exceptions import ComplexityCalculationError, ParsingError
from ..languages import Language
from ..models import ComplexityResult
from ..scanning.treesitter_parser import JavaSyntaxParser, iter_nodes, node_text
from .base import ComplexityCalculator
from .rules import JAVA_DECISION_NODES, JAVA_LOGICAL_OPERATORS, JAVA_UNIT_NODES

logger = logging.getLogger(__name__)


class JavaCalculator(ComplexityCalculator):
    """Walks method and constructor declarations of a parsed compilation unit.

    Args:
        parser: Object with ``parse(source) -> tree`` raising ``SyntaxError``
            on invalid input. Defaults to a fresh tree-sitter Java parser
            per call, since tree-sitter parsers are not shareable across
            threads.
    """

    language = Language.JAVA

    def __init__(self, parser: Optional[Any] = None) -> None:
        self._parser = parser

    def calculate(self, source: str, file_name: str) -> ComplexityResult:
        try:
            parser = self._parser if self._parser is not None else JavaSyntaxParser()
            tree = parser.parse(source)
        except SyntaxError as e:
            raise ParsingError(self.language.display_name, file_name, str(e)) from e
        except ImportError as e:
            raise ComplexityCalculationError(file_name, str(e)) from e

        units: Dict[str, int] = {}
        for node in iter_nodes(tree.root_node):
            if node.type in JAVA_UNIT_NODES:
                name = unit_name(node)
                # Identical signatures are invalid Java; last one wins
                units[name] = method_complexity(node)

        logger.debug(f"Found {len(units)} methods in {file_name}")
        return ComplexityResult(file_name, self.language.display_name, units)


def method_complexity(declaration) -> int:
    complexity = 1
    for node in iter_nodes(declaration):
        if is_decision_point(node):
            complexity += 1
    return complexity


def is_decision_point(node) -> bool:
    if node.type in JAVA_DECISION_NODES:
        return True
    if node.type == "binary_expression":
        operator = node.child_by_field_name("operator")
        return operator is not None and operator.type in JAVA_LOGICAL_OPERATORS
    return False


def unit_name(declaration) -> str:
    """``name(T1, T2)`` so that overloads stay distinct."""
    name = node_text(declaration.child_by_field_name("name"))
    params = declaration.child_by_field_name("parameters")
    types = []
    if params is not None:
        for param in params.named_children:
            param_type = _parameter_type(param)
            if param_type:
                types.append(param_type)
    return f"{name}({', '.join(types)})"


def _parameter_type(param) -> str:
    if param.type == "formal_parameter":
        text = _squash(node_text(param.child_by_field_name("type")))
        dimensions = param.child_by_field_name("dimensions")
        return text + _squash(node_text(dimensions)).replace(" ", "")
    if param.type == "spread_parameter":
        for child in param.named_children:
            if child.type not in ("modifiers", "variable_declarator"):
                return _squash(node_text(child)) + "..."
    # receiver parameters (``Outer this``) are not part of the signature
    return ""


def _squash(text: str) -> str:
    return " ".join(text.split())
