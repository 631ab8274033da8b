"""
Leaf expression AST nodes

Defines the expressions that have no child nodes:
- Identifiers
- Integer literals (signed 64-bit)
- String literals
- Boolean literals

IntegerLiteral and Boolean compare structurally (token and value);
Identifier and StringLiteral compare by identity.
"""

from dataclasses import dataclass
from typing import List

from sparrow.core.token import Token
from sparrow.core._ast_base import (
    Expression, NodeConstructionError, INT64_MIN, INT64_MAX,
    require, require_token,
)


@dataclass(frozen=True, eq=False)
class Identifier(Expression):
    """Identifier: x"""
    token: Token
    value: str

    def __post_init__(self):
        require_token("Identifier", self.token)
        require("Identifier", "value", self.value, str)

    def _format(self, parts: List[str]) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class IntegerLiteral(Expression):
    """Integer literal: 5"""
    token: Token
    value: int

    def __post_init__(self):
        require_token("IntegerLiteral", self.token)
        # bool is an int subclass but never a valid integer payload
        if isinstance(self.value, bool):
            raise NodeConstructionError("IntegerLiteral.value must be int, got bool")
        require("IntegerLiteral", "value", self.value, int)
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise NodeConstructionError(
                f"IntegerLiteral.value {self.value} does not fit in a signed 64-bit integer"
            )

    def _format(self, parts: List[str]) -> str:
        return str(self.value)

    def __eq__(self, other):
        return (isinstance(other, IntegerLiteral) and
                self.value == other.value and
                self.token == other.token)

    def __hash__(self):
        return hash(self.value) ^ hash(self.token)


@dataclass(frozen=True, eq=False)
class StringLiteral(Expression):
    """String literal: "hello"

    value holds the decoded string; rendering uses the raw token literal.
    """
    token: Token
    value: str

    def __post_init__(self):
        require_token("StringLiteral", self.token)
        require("StringLiteral", "value", self.value, str)

    def token_literal(self) -> str:
        return self.token.literal

    def _format(self, parts: List[str]) -> str:
        return self.token.literal


@dataclass(frozen=True, eq=False)
class Boolean(Expression):
    """Boolean literal: true, false"""
    token: Token
    value: bool

    def __post_init__(self):
        require_token("Boolean", self.token)
        require("Boolean", "value", self.value, bool)

    def _format(self, parts: List[str]) -> str:
        return str(self.value)

    def __eq__(self, other):
        return (isinstance(other, Boolean) and
                self.token == other.token and
                self.value == other.value)

    def __hash__(self):
        return hash(self.token) ^ hash(self.value)
