"""
Base classes for AST nodes

Defines the sealed base classes every node inherits from, the error raised
when a node is built from missing or ill-typed fields, and the field
validators the concrete nodes use in their constructors.
"""

from abc import ABC, abstractmethod
from collections import abc
from typing import Any, Callable, Iterable, List, Sequence, Tuple, TypeVar

from sparrow.core.token import Token


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_SEALED_PACKAGE = "sparrow.core"

T = TypeVar("T")


class NodeConstructionError(TypeError):
    """Exception raised when a node is built with a missing or ill-typed field"""
    pass


class Node(ABC):
    """
    Base class for every AST node.

    The node set is closed: subclasses may only be declared inside
    sparrow.core, so consumers can dispatch exhaustively over NODE_TYPES.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        module = cls.__module__
        if module != _SEALED_PACKAGE and not module.startswith(_SEALED_PACKAGE + "."):
            raise TypeError(
                f"{cls.__name__}: {cls.__mro__[1].__name__} is sealed, "
                f"node kinds can only be declared in {_SEALED_PACKAGE}"
            )

    def _render_children(self) -> Sequence["Node"]:
        """Children whose renderings feed this node's template"""
        return ()

    @abstractmethod
    def _format(self, parts: List[str]) -> str:
        """Fill this node's template from its children's renderings"""
        pass

    def __str__(self) -> str:
        return fold_tree(
            self,
            lambda node: node._render_children(),
            lambda node, parts: node._format(parts),
        )

    def token_literal(self) -> str:
        """Return the literal text of the token that began this node"""
        return self.token.literal

    def render(self) -> str:
        """Canonical rendering, same as str(node)"""
        return str(self)


class Statement(Node):
    """Base class for statements"""
    pass


class Expression(Node):
    """Base class for expressions"""
    pass


def _kind_name(kind: Any) -> str:
    if isinstance(kind, tuple):
        return " or ".join(k.__name__ for k in kind)
    return kind.__name__


def require(owner: str, field: str, value: Any, kind: Any) -> Any:
    """
    Check a mandatory field.

    Args:
        owner: Node class name, for the error message
        field: Field name, for the error message
        value: Value passed to the constructor
        kind: Type (or tuple of types) the value must be an instance of

    Returns:
        The value, unchanged

    Raises:
        NodeConstructionError: If value is None or not an instance of kind
    """
    if value is None:
        raise NodeConstructionError(f"{owner}.{field} is required")
    if not isinstance(value, kind):
        raise NodeConstructionError(
            f"{owner}.{field} must be {_kind_name(kind)}, got {type(value).__name__}"
        )
    return value


def require_token(owner: str, value: Any) -> Token:
    return require(owner, "token", value, Token)


def require_sequence(owner: str, field: str, values: Iterable[Any], kind: Any) -> Tuple[Any, ...]:
    """
    Check an ordered sequence field and freeze it into a tuple.

    Order is kept verbatim. Strings are rejected even though they are
    iterable, since a str is never a valid sequence of nodes.
    """
    if values is None:
        raise NodeConstructionError(f"{owner}.{field} is required")
    if isinstance(values, (str, bytes)) or not isinstance(values, abc.Iterable):
        raise NodeConstructionError(
            f"{owner}.{field} must be a sequence, got {type(values).__name__}"
        )
    items = tuple(values)
    for i, item in enumerate(items):
        require(owner, f"{field}[{i}]", item, kind)
    return items


def fold_tree(root: Any,
              children_of: Callable[[Any], Sequence[Any]],
              combine: Callable[[Any, List[T]], T]) -> T:
    """
    Post-order fold over a tree with an explicit stack.

    combine(node, results) receives the folded results of children_of(node)
    in order. Runs in constant Python stack depth, so arbitrarily deep
    trees never hit the recursion limit.

    Example:
        fold_tree(expr, children, lambda n, rs: 1 + sum(rs))  # node count
    """
    pending = [(root, False)]
    results: List[T] = []
    while pending:
        node, expanded = pending.pop()
        kids = children_of(node)
        if not expanded:
            pending.append((node, True))
            pending.extend((kid, False) for kid in reversed(kids))
            continue
        split = len(results) - len(kids)
        parts = results[split:]
        del results[split:]
        results.append(combine(node, parts))
    return results[0]
