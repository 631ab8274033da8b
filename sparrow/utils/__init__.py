"""
Utility modules for working with AST trees.

This module contains auxiliary functionality:
- Traversal (children, walk)
- Diagnostic views (tree, S-expression)
"""

from sparrow.utils.traversal import children, walk, node_kind, count_nodes
from sparrow.utils.tree_format import node_to_tree, node_to_sexp
