"""
Vertex ordering capabilities for socialgraph.

An ordering is only consulted when two vertices are consolidated, to pick
which key survives. The graph itself never sorts its vertices.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

V = TypeVar("V")


class VertexOrdering(ABC, Generic[V]):
    """Total order over vertex keys."""

    @abstractmethod
    def compare(self, a: V, b: V) -> int:
        """
        Compare two vertex keys.

        Returns:
            negative if a sorts before b, zero if they are equal, positive
            otherwise. Must be consistent with key equality.
        """
        raise NotImplementedError


class NaturalOrdering(VertexOrdering[Any]):
    """Orders keys by their own ``<`` / ``>`` operators."""

    def compare(self, a: Any, b: Any) -> int:
        if a < b:
            return -1
        if a > b:
            return 1
        return 0


class ComparatorOrdering(VertexOrdering[V]):
    """
    Adapts a plain two-argument comparison function.

    Useful for keys without a natural order, e.g.
    ``ComparatorOrdering(lambda a, b: len(a) - len(b))``.
    """

    def __init__(self, cmp: Callable[[V, V], int]) -> None:
        if cmp is None:
            raise ValueError("ComparatorOrdering requires a comparison function")
        self._cmp = cmp

    def compare(self, a: V, b: V) -> int:
        return self._cmp(a, b)


class ReversedOrdering(VertexOrdering[V]):
    """Inverts another ordering so the larger key wins consolidation."""

    def __init__(self, inner: VertexOrdering[V]) -> None:
        if inner is None:
            raise ValueError("ReversedOrdering requires an ordering to invert")
        self._inner = inner

    def compare(self, a: V, b: V) -> int:
        return -self._inner.compare(a, b)
