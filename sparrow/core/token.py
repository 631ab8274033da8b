"""
Token types for the Sparrow language

Defines the lexical unit embedded in every AST node. Tokens are produced
by the tokenizer (not part of this package) and consumed here only as
opaque, comparable values.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = ['TokenType', 'Token', 'KEYWORDS', 'lookup_ident']


class TokenType(Enum):
    """Lexical kinds of the Sparrow language"""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"
    INT = "INT"
    STRING = "STRING"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"


KEYWORDS = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


def lookup_ident(name: str) -> TokenType:
    """Return the keyword type for name, or IDENT if it is not a keyword"""
    return KEYWORDS.get(name, TokenType.IDENT)


@dataclass(frozen=True)
class Token:
    """
    Token in the input stream.

    Equality and hashing cover every field, so two tokens with the same
    kind and literal taken from different source positions are distinct.

    Example: Token(TokenType.IDENT, "x", 1, 5)
    """
    type: TokenType
    literal: str
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return self.literal

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r}, {self.line}:{self.column})"
