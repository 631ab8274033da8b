"""
Operator expression AST nodes

Defines prefix (!x, -x) and infix (a + b, a < b) expressions. Both render
fully parenthesized so the rendering shows how the tree is grouped.
"""

from dataclasses import dataclass
from typing import List, Sequence

from sparrow.core.token import Token
from sparrow.core._ast_base import Node, Expression, require, require_token


@dataclass(frozen=True, eq=False)
class PrefixExpression(Expression):
    """Prefix expression: (-x), (!ok)"""
    token: Token
    operator: str
    right: Expression

    def __post_init__(self):
        require_token("PrefixExpression", self.token)
        require("PrefixExpression", "operator", self.operator, str)
        require("PrefixExpression", "right", self.right, Expression)

    def _render_children(self) -> Sequence[Node]:
        return (self.right,)

    def _format(self, parts: List[str]) -> str:
        right, = parts
        return f"({self.operator}{right})"


@dataclass(frozen=True, eq=False)
class InfixExpression(Expression):
    """Infix expression: (a + b)"""
    token: Token
    left: Expression
    operator: str
    right: Expression

    def __post_init__(self):
        require_token("InfixExpression", self.token)
        require("InfixExpression", "left", self.left, Expression)
        require("InfixExpression", "operator", self.operator, str)
        require("InfixExpression", "right", self.right, Expression)

    def _render_children(self) -> Sequence[Node]:
        return (self.left, self.right)

    def _format(self, parts: List[str]) -> str:
        left, right = parts
        return f"({left} {self.operator} {right})"
