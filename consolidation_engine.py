"""
Vertex consolidation for socialgraph.

Collapses two adjacent vertices into one survivor, keeping the cheaper edge
whenever both vertices were connected to the same third vertex.
"""

from typing import Dict, Mapping, TypeVar
import logging

from adjacency_list_graph import AdjacencyListGraph
from algorithms import ConsolidationEngine

V = TypeVar("V")

logger = logging.getLogger(__name__)


def union_min(first: Mapping[V, int], second: Mapping[V, int]) -> Dict[V, int]:
    """
    Union of two vertex -> weight maps, keeping the minimum on shared keys.
    """
    merged: Dict[V, int] = dict(first)
    for vertex, weight in second.items():
        current = merged.get(vertex)
        if current is None or weight < current:
            merged[vertex] = weight
    return merged


class MinWeightConsolidationEngine(ConsolidationEngine):
    """
    Merges two vertices joined by a direct edge.

    Steps:
        1. survivor = v1 if ordering.compare(v1, v2) <= 0 else v2
        2. drop the edge(s) between v1 and v2
        3. outgoing = union of both outgoing maps, min weight on conflicts
        4. incoming = union of both incoming maps, min weight on conflicts
        5. remove v1 and v2, add survivor, reinstall both edge sets

    Complexity:
        O(V + E) because collecting incoming edges scans every adjacency map.

    The steps are not atomic; do not run concurrently with other mutations.
    """

    def consolidate(self, graph: AdjacencyListGraph[V], v1: V, v2: V) -> bool:
        if v1 is None or v2 is None:
            raise ValueError("consolidate requires two vertices")

        if not (graph.has_vertex(v1) and graph.has_vertex(v2)):
            return False
        forward = graph.has_edge(v1, v2)
        backward = graph.has_edge(v2, v1)
        if not (forward or backward):
            return False

        # Ordering may raise; pick the survivor before touching the graph.
        survivor = v1 if graph.ordering.compare(v1, v2) <= 0 else v2

        if forward:
            graph.remove_edge(v1, v2)
        if backward:
            graph.remove_edge(v2, v1)

        # Mutual edges are already gone, so neither map can mention v1 or v2.
        outgoing = union_min(graph.outgoing(v1), graph.outgoing(v2))
        incoming = union_min(graph.incoming(v1), graph.incoming(v2))

        graph.remove_vertex(v1)
        graph.remove_vertex(v2)
        graph.add_vertex(survivor)

        for dst, weight in outgoing.items():
            graph.add_edge(survivor, dst, weight)
        for src, weight in incoming.items():
            graph.add_edge(src, survivor, weight)

        logger.debug(
            "consolidated %r and %r into %r (%d outgoing, %d incoming edges)",
            v1,
            v2,
            survivor,
            len(outgoing),
            len(incoming),
        )
        return True
