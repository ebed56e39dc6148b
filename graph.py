"""
Directed, weighted graph abstraction for socialgraph.

Vertices are opaque hashable keys.
Edges are directed: u -> v with a positive integer weight.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Mapping, TypeVar

V = TypeVar("V")


class Graph(ABC, Generic[V]):
    """Read-only view of a directed, weighted graph."""

    @abstractmethod
    def vertices(self) -> Iterable[V]:
        """Return all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: V) -> Mapping[V, int]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: dict[V, int], empty when the vertex is absent.
        """
        raise NotImplementedError

    @abstractmethod
    def incoming(self, vertex: V) -> Mapping[V, int]:
        """
        Sources and edge weights of every edge that targets vertex.

        Returns: dict[V, int], empty when the vertex is absent.
        """
        raise NotImplementedError
