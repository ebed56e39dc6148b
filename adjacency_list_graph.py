"""
Concrete directed, weighted graph implementation for socialgraph.

Implements the Graph interface using a simple adjacency-map representation
and adds the vertex/edge lifecycle used by the social layer. Invalid domain
requests (self-loops, non-positive weights, absent vertices) are soft
failures reported through the return value; a missing key is a programming
error and raises.
"""

from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from graph import Graph
from ordering import NaturalOrdering, VertexOrdering

V = TypeVar("V")

# Legacy "no edge" weight, usable as edge_weight(..., default=NO_EDGE).
NO_EDGE = -1


def _require(value: object, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None")


class AdjacencyListGraph(Graph[V], Generic[V]):
    """
    Directed, weighted graph backed by a vertex -> (neighbour -> weight) mapping.

    Invariants maintained by every operation:
        - every edge target is itself a vertex
        - no vertex has an edge to itself
        - all weights are positive ints
        - at most one edge per ordered (src, dst) pair

    Not thread-safe: callers serialize mutations themselves.
    """

    def __init__(self, ordering: Optional[VertexOrdering[V]] = None) -> None:
        self._adj: Dict[V, Dict[V, int]] = {}
        self._ordering: VertexOrdering[V] = ordering if ordering is not None else NaturalOrdering()

    @property
    def ordering(self) -> VertexOrdering[V]:
        """Ordering used to choose a survivor when vertices are consolidated."""
        return self._ordering

    # --- Vertex lifecycle ----------------------------------------------------

    def add_vertex(self, vertex: V) -> bool:
        """
        Ensure vertex exists in the graph.

        Returns True if it was newly added, False if it was already present.
        """
        _require(vertex, "vertex")
        if vertex in self._adj:
            return False
        self._adj[vertex] = {}
        return True

    def has_vertex(self, vertex: V) -> bool:
        _require(vertex, "vertex")
        return vertex in self._adj

    def remove_vertex(self, vertex: V) -> bool:
        """
        Remove vertex together with every edge it is the source or target of.

        Returns False (and changes nothing) if vertex is absent.
        """
        _require(vertex, "vertex")
        if vertex not in self._adj:
            return False

        del self._adj[vertex]
        for adjacency in self._adj.values():
            adjacency.pop(vertex, None)
        return True

    # --- Edge lifecycle ------------------------------------------------------

    def add_edge(self, src: V, dst: V, weight: int) -> bool:
        """
        Add a directed edge src -> dst with weight.

        Auto-adds missing endpoints. Rejects self-loops and non-positive
        weights without touching the graph. An existing edge keeps its
        original weight.

        Returns True only if the edge did not exist before.
        """
        _require(src, "src")
        _require(dst, "dst")
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise TypeError(f"edge weight must be an int, got {type(weight).__name__}")

        if weight <= 0 or src == dst:
            return False

        self.add_vertex(src)
        self.add_vertex(dst)

        adjacency = self._adj[src]
        if dst in adjacency:
            return False
        adjacency[dst] = weight
        return True

    def has_edge(self, src: V, dst: V) -> bool:
        _require(src, "src")
        _require(dst, "dst")
        return dst in self._adj.get(src, {})

    def edge_weight(self, src: V, dst: V, default: Optional[int] = None) -> Optional[int]:
        """
        Weight of the edge src -> dst, or default if either vertex or the
        edge is missing.
        """
        _require(src, "src")
        _require(dst, "dst")
        if dst not in self._adj:
            return default
        return self._adj.get(src, {}).get(dst, default)

    def remove_edge(self, src: V, dst: V) -> bool:
        """Remove src -> dst. Returns False if there was nothing to remove."""
        _require(src, "src")
        _require(dst, "dst")
        if src not in self._adj or dst not in self._adj:
            return False

        adjacency = self._adj[src]
        if dst not in adjacency:
            return False
        del adjacency[dst]
        return True

    # --- Queries -------------------------------------------------------------

    def neighbors(self, vertex: V) -> List[V]:
        """
        Targets of vertex's outgoing edges.

        An absent vertex yields an empty list, exactly like a vertex with no
        outgoing edges; use has_vertex to tell the two apart.
        """
        _require(vertex, "vertex")
        return list(self._adj.get(vertex, {}))

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __iter__(self) -> Iterator[V]:
        return iter(self.vertices())

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> List[V]:
        return list(self._adj)

    def outgoing(self, vertex: V) -> Dict[V, int]:
        _require(vertex, "vertex")
        return dict(self._adj.get(vertex, {}))  # defensive copy

    def incoming(self, vertex: V) -> Dict[V, int]:
        _require(vertex, "vertex")
        if vertex not in self._adj:
            return {}
        return {
            src: adjacency[vertex]
            for src, adjacency in self._adj.items()
            if vertex in adjacency
        }
