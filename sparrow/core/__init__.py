"""
Core abstractions for Sparrow programs.

This module contains the fundamental building blocks:
- Token definitions embedded in every node
- Abstract Syntax Tree (AST) definitions
"""

from sparrow.core.token import *
from sparrow.core.ast import *
