"""
Tree traversal helpers.

Consumers dispatch over the closed node set. The child table below is
keyed by concrete class and checked against NODE_TYPES on import, so
adding a node kind without teaching traversal about it fails loudly.
"""

import logging
import re
from typing import Callable, Dict, Iterator, List, Type

from sparrow.core.ast import (
    Node, NODE_TYPES,
    Program, BlockStatement, LetStatement, ReturnStatement, ExpressionStatement,
    Identifier, IntegerLiteral, StringLiteral, Boolean,
    PrefixExpression, InfixExpression,
    IfExpression, FunctionLiteral, CallExpression,
)

logger = logging.getLogger(__name__)


def _if_children(node: IfExpression) -> List[Node]:
    children = [node.condition, node.consequent]
    if node.alternative is not None:
        children.append(node.alternative)
    return children


_CHILDREN: Dict[Type[Node], Callable[[Node], List[Node]]] = {
    Program: lambda n: list(n.statements),
    BlockStatement: lambda n: list(n.statements),
    LetStatement: lambda n: [n.name, n.value],
    ReturnStatement: lambda n: [n.return_value],
    ExpressionStatement: lambda n: [n.expression],
    Identifier: lambda n: [],
    IntegerLiteral: lambda n: [],
    StringLiteral: lambda n: [],
    Boolean: lambda n: [],
    PrefixExpression: lambda n: [n.right],
    InfixExpression: lambda n: [n.left, n.right],
    IfExpression: _if_children,
    FunctionLiteral: lambda n: list(n.parameters) + [n.body],
    CallExpression: lambda n: [n.function] + list(n.arguments),
}

_missing = set(NODE_TYPES) - set(_CHILDREN)
if _missing:
    raise RuntimeError(
        "traversal has no child rule for: "
        + ", ".join(sorted(cls.__name__ for cls in _missing))
    )


def children(node: Node) -> List[Node]:
    """
    Return the direct children of a node in source order.

    For IfExpression the alternative is included only when present.

    Raises:
        TypeError: If node is not one of the known node kinds
    """
    rule = _CHILDREN.get(type(node))
    if rule is None:
        raise TypeError(f"Not an AST node: {type(node).__name__}")
    return rule(node)


def walk(node: Node) -> Iterator[Node]:
    """
    Yield node and all of its descendants, depth-first, pre-order.

    Example:
        walk(ExpressionStatement(tok, (1 + 2)))
        yields the statement, the infix expression, 1, then 2
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children(current)))


def node_kind(node: Node) -> str:
    """Return the snake_case kind of a node: InfixExpression -> infix_expression"""
    if type(node) not in _CHILDREN:
        raise TypeError(f"Not an AST node: {type(node).__name__}")
    return re.sub(r'(?<!^)(?=[A-Z])', '_', type(node).__name__).lower()


def count_nodes(node: Node) -> int:
    """Number of nodes in the tree rooted at node"""
    total = sum(1 for _ in walk(node))
    logger.debug("counted %d nodes under %s", total, type(node).__name__)
    return total
