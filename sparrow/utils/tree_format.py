"""
Diagnostic views of an AST.

Two debugging formats, neither meant to be read back:
- node_to_tree: box-drawing tree, one node per line
- node_to_sexp: S-expression, one line
"""

from typing import List

from sparrow.core.ast import (
    Node, fold_tree,
    Program, BlockStatement, LetStatement, ReturnStatement, ExpressionStatement,
    Identifier, IntegerLiteral, StringLiteral, Boolean,
    PrefixExpression, InfixExpression,
    IfExpression, FunctionLiteral, CallExpression,
)
from sparrow.utils.traversal import children, node_kind


BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def _label(node: Node) -> str:
    """One-line label for a node: its kind plus any payload"""
    if isinstance(node, Identifier):
        return f"identifier {node.value}"
    elif isinstance(node, IntegerLiteral):
        return f"integer {node.value}"
    elif isinstance(node, StringLiteral):
        return f"string {node.token.literal}"
    elif isinstance(node, Boolean):
        return f"boolean {node.value}"
    elif isinstance(node, (PrefixExpression, InfixExpression)):
        return f"{node_kind(node)} {node.operator}"
    elif isinstance(node, IfExpression):
        return "if" if node.alternative is None else "if-else"
    elif isinstance(node, FunctionLiteral):
        return f"function/{len(node.parameters)}"
    elif isinstance(node, CallExpression):
        return f"call/{len(node.arguments)}"
    return node_kind(node)


def node_to_tree(node: Node, prefix: str = "", is_last: bool = True) -> str:
    """Convert a tree to a box-drawing visualization"""
    lines = []
    pending = [(node, prefix, is_last)]
    while pending:
        current, current_prefix, last = pending.pop()
        connector = LAST_BRANCH if last else BRANCH
        lines.append(f"{current_prefix}{connector}{_label(current)}")

        child_prefix = current_prefix + (SPACE if last else PIPE)
        kids = children(current)
        for i in reversed(range(len(kids))):
            pending.append((kids[i], child_prefix, i == len(kids) - 1))
    return "\n".join(lines)


def _sexp(node: Node, parts: List[str]) -> str:
    """S-expression for one node, given its children's S-expressions"""
    if isinstance(node, Identifier):
        return node.value
    elif isinstance(node, IntegerLiteral):
        return str(node.value)
    elif isinstance(node, StringLiteral):
        return node.token.literal
    elif isinstance(node, Boolean):
        return "true" if node.value else "false"
    elif isinstance(node, PrefixExpression):
        return f"(prefix {node.operator} {parts[0]})"
    elif isinstance(node, InfixExpression):
        return f"(infix {node.operator} {parts[0]} {parts[1]})"
    elif isinstance(node, IfExpression):
        return f"(if {' '.join(parts)})"
    elif isinstance(node, FunctionLiteral):
        params = " ".join(parts[:-1])
        return f"(fn ({params}) {parts[-1]})"
    elif isinstance(node, CallExpression):
        return f"(call {' '.join(parts)})"
    elif isinstance(node, LetStatement):
        return f"(let {parts[0]} {parts[1]})"
    elif isinstance(node, ReturnStatement):
        return f"(return {parts[0]})"
    elif isinstance(node, ExpressionStatement):
        return parts[0]
    elif isinstance(node, (BlockStatement, Program)):
        tag = "block" if isinstance(node, BlockStatement) else "program"
        body = " ".join(parts)
        return f"({tag} {body})" if body else f"({tag})"
    raise TypeError(f"Not an AST node: {type(node).__name__}")


def node_to_sexp(node: Node) -> str:
    """Convert a tree to S-expression format"""
    return fold_tree(node, children, _sexp)
