"""
Control and function AST nodes

Defines the compound expressions that own blocks or argument lists:
- Conditionals (if / else)
- Function literals
- Call expressions
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from sparrow.core.token import Token
from sparrow.core._ast_base import (
    Node, Expression, require, require_token, require_sequence,
)
from sparrow.core._ast_literals import Identifier
from sparrow.core._ast_statements import BlockStatement


@dataclass(frozen=True, eq=False)
class IfExpression(Expression):
    """
    Conditional: if (cond) then cons else alt

    alternative is None for a one-armed conditional. The one-armed
    rendering has no closing parenthesis after the condition:
        if (x < y then x
    Fixtures depend on that exact text.
    """
    token: Token
    condition: Expression
    consequent: BlockStatement
    alternative: Optional[BlockStatement] = None

    def __post_init__(self):
        require_token("IfExpression", self.token)
        require("IfExpression", "condition", self.condition, Expression)
        require("IfExpression", "consequent", self.consequent, BlockStatement)
        if self.alternative is not None:
            require("IfExpression", "alternative", self.alternative, BlockStatement)

    def _render_children(self) -> Sequence[Node]:
        if self.alternative is not None:
            return (self.condition, self.consequent, self.alternative)
        return (self.condition, self.consequent)

    def _format(self, parts: List[str]) -> str:
        if self.alternative is not None:
            condition, consequent, alternative = parts
            return f"if ({condition}) then {consequent} else {alternative}"
        condition, consequent = parts
        return f"if ({condition} then {consequent}"

    def __eq__(self, other):
        if not isinstance(other, IfExpression):
            return False
        if (self.alternative is None) != (other.alternative is None):
            return False
        if (self.token != other.token or
                self.condition != other.condition or
                self.consequent != other.consequent):
            return False
        if self.alternative is None:
            return True
        return self.alternative == other.alternative

    def __hash__(self):
        alternative = 0 if self.alternative is None else hash(self.alternative)
        return (hash(self.token) << 24 ^
                hash(self.condition) << 16 ^
                hash(self.consequent) << 8 ^
                alternative)


@dataclass(frozen=True, eq=False)
class FunctionLiteral(Expression):
    """Function literal: fn (x, y) body"""
    token: Token
    parameters: Tuple[Identifier, ...]
    body: BlockStatement

    def __post_init__(self):
        require_token("FunctionLiteral", self.token)
        object.__setattr__(
            self, "parameters",
            require_sequence("FunctionLiteral", "parameters", self.parameters, Identifier)
        )
        require("FunctionLiteral", "body", self.body, BlockStatement)

    def _render_children(self) -> Sequence[Node]:
        return self.parameters + (self.body,)

    def _format(self, parts: List[str]) -> str:
        params = ", ".join(parts[:-1])
        return f"{self.token.literal} ({params}) {parts[-1]}"


@dataclass(frozen=True, eq=False)
class CallExpression(Expression):
    """Call: add (1, 2)"""
    # the '(' token
    token: Token
    function: Expression
    arguments: Tuple[Expression, ...]

    def __post_init__(self):
        require_token("CallExpression", self.token)
        require("CallExpression", "function", self.function, Expression)
        object.__setattr__(
            self, "arguments",
            require_sequence("CallExpression", "arguments", self.arguments, Expression)
        )

    def _render_children(self) -> Sequence[Node]:
        return (self.function,) + self.arguments

    def _format(self, parts: List[str]) -> str:
        args = ", ".join(parts[1:])
        return f"{parts[0]} ({args})"
