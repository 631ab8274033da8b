"""
Abstract Syntax Tree for Sparrow programs

This module defines the AST node classes a parser produces and an
evaluator or printer consumes: statements, expressions and the Program
root, each with its canonical rendering (str) and equality contract.

This file re-exports all AST nodes from thematic submodules. Import nodes
from sparrow.core.ast rather than from the submodules.
"""

# Re-export base classes
from sparrow.core._ast_base import (
    Node, Statement, Expression, NodeConstructionError,
    INT64_MIN, INT64_MAX, fold_tree,
)

# Re-export leaf expressions
from sparrow.core._ast_literals import (
    Identifier, IntegerLiteral, StringLiteral, Boolean
)

# Re-export operator expressions
from sparrow.core._ast_operators import PrefixExpression, InfixExpression

# Re-export statements and the root
from sparrow.core._ast_statements import (
    Program, BlockStatement, LetStatement, ReturnStatement,
    ExpressionStatement
)

# Re-export control and function expressions
from sparrow.core._ast_control import (
    IfExpression, FunctionLiteral, CallExpression
)

# The closed variant sets
STATEMENT_TYPES = (
    BlockStatement, LetStatement, ReturnStatement, ExpressionStatement,
)

EXPRESSION_TYPES = (
    Identifier, IntegerLiteral, StringLiteral, Boolean,
    PrefixExpression, InfixExpression,
    IfExpression, FunctionLiteral, CallExpression,
)

NODE_TYPES = (Program,) + STATEMENT_TYPES + EXPRESSION_TYPES

# Kinds that define structural equality; every other kind compares by identity
STRUCTURAL_TYPES = (IfExpression, Boolean, ReturnStatement, IntegerLiteral)

# Define __all__ for explicit exports
__all__ = [
    # Base classes
    'Node', 'Statement', 'Expression', 'NodeConstructionError',
    'INT64_MIN', 'INT64_MAX', 'fold_tree',

    # Leaf expressions
    'Identifier', 'IntegerLiteral', 'StringLiteral', 'Boolean',

    # Operator expressions
    'PrefixExpression', 'InfixExpression',

    # Statements and root
    'Program', 'BlockStatement', 'LetStatement', 'ReturnStatement',
    'ExpressionStatement',

    # Control and function expressions
    'IfExpression', 'FunctionLiteral', 'CallExpression',

    # Variant sets
    'STATEMENT_TYPES', 'EXPRESSION_TYPES', 'NODE_TYPES', 'STRUCTURAL_TYPES',
]
