"""
Sparrow AST

The abstract syntax tree layer for the Sparrow language front-end: the
node set a parser builds, with a canonical rendering for diagnostics and
tests and a per-kind equality contract.

The library is organized into logical modules:
- core: tokens and AST nodes
- utils: traversal and diagnostic views
"""

# Core abstractions
from sparrow.core.token import Token, TokenType, lookup_ident
from sparrow.core.ast import (
    Node, Statement, Expression, NodeConstructionError,
    Program, BlockStatement, LetStatement, ReturnStatement, ExpressionStatement,
    Identifier, IntegerLiteral, StringLiteral, Boolean,
    PrefixExpression, InfixExpression,
    IfExpression, FunctionLiteral, CallExpression,
    STATEMENT_TYPES, EXPRESSION_TYPES, NODE_TYPES,
)

# Traversal
from sparrow.utils.traversal import children, walk

__version__ = "0.1.0"
__all__ = [
    # Tokens
    "Token", "TokenType", "lookup_ident",
    # Base classes and errors
    "Node", "Statement", "Expression", "NodeConstructionError",
    # Statements and root
    "Program", "BlockStatement", "LetStatement", "ReturnStatement",
    "ExpressionStatement",
    # Expressions
    "Identifier", "IntegerLiteral", "StringLiteral", "Boolean",
    "PrefixExpression", "InfixExpression",
    "IfExpression", "FunctionLiteral", "CallExpression",
    # Variant sets
    "STATEMENT_TYPES", "EXPRESSION_TYPES", "NODE_TYPES",
    # Traversal
    "children", "walk",
]
