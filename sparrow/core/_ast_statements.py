"""
Statement AST nodes

Defines the program root and the statement kinds:
- Program (tree root, not itself a statement)
- Block statements
- Let bindings
- Return statements
- Expression statements

Only ReturnStatement compares structurally; the rest compare by identity.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from sparrow.core.token import Token
from sparrow.core._ast_base import (
    Node, Statement, Expression, require, require_token, require_sequence,
)
from sparrow.core._ast_literals import Identifier


@dataclass(frozen=True, eq=False)
class Program(Node):
    """
    Root of a parsed source file.

    Renders as its first statement only; an empty program renders as "".
    """
    statements: Tuple[Statement, ...]

    def __post_init__(self):
        object.__setattr__(
            self, "statements",
            require_sequence("Program", "statements", self.statements, Statement)
        )

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def _render_children(self) -> Sequence[Statement]:
        return self.statements[:1]

    def _format(self, parts: List[str]) -> str:
        if not parts:
            return ""
        return parts[0]


@dataclass(frozen=True, eq=False)
class BlockStatement(Statement):
    """Block: { s1; s2 }, rendered as the statements concatenated"""
    token: Token
    statements: Tuple[Statement, ...]

    def __post_init__(self):
        require_token("BlockStatement", self.token)
        object.__setattr__(
            self, "statements",
            require_sequence("BlockStatement", "statements", self.statements, Statement)
        )

    def _render_children(self) -> Sequence[Statement]:
        return self.statements

    def _format(self, parts: List[str]) -> str:
        return "".join(parts)


@dataclass(frozen=True, eq=False)
class LetStatement(Statement):
    """Let binding: let x = 5"""
    token: Token
    name: Identifier
    value: Expression

    def __post_init__(self):
        require_token("LetStatement", self.token)
        require("LetStatement", "name", self.name, Identifier)
        require("LetStatement", "value", self.value, Expression)

    def _render_children(self) -> Sequence[Node]:
        return (self.name, self.value)

    def _format(self, parts: List[str]) -> str:
        name, value = parts
        return f"let {name} = {value}"


@dataclass(frozen=True, eq=False)
class ReturnStatement(Statement):
    """Return statement: return x"""
    token: Token
    return_value: Expression

    def __post_init__(self):
        require_token("ReturnStatement", self.token)
        require("ReturnStatement", "return_value", self.return_value, Expression)

    def _render_children(self) -> Sequence[Node]:
        return (self.return_value,)

    def _format(self, parts: List[str]) -> str:
        return_value, = parts
        return f"return {return_value}"

    def __eq__(self, other):
        return (isinstance(other, ReturnStatement) and
                self.token == other.token and
                self.return_value == other.return_value)

    def __hash__(self):
        return hash(self.token) ^ hash(self.return_value)


@dataclass(frozen=True, eq=False)
class ExpressionStatement(Statement):
    """Expression used as a statement: x + 1"""
    # first token of the expression
    token: Token
    expression: Expression

    def __post_init__(self):
        require_token("ExpressionStatement", self.token)
        require("ExpressionStatement", "expression", self.expression, Expression)

    def _render_children(self) -> Sequence[Node]:
        return (self.expression,)

    def _format(self, parts: List[str]) -> str:
        expression, = parts
        return expression
