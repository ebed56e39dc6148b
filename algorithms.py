"""
Algorithm interfaces for socialgraph.

Keeps graph algorithms separate from the store and the social layer.
"""

from abc import ABC, abstractmethod
from typing import TypeVar

from adjacency_list_graph import AdjacencyListGraph

V = TypeVar("V")


class ConsolidationEngine(ABC):
    """
    Interface for collapsing two adjacent vertices into one.
    """

    @abstractmethod
    def consolidate(self, graph: AdjacencyListGraph[V], v1: V, v2: V) -> bool:
        """
        Merge v1 and v2 into a single survivor vertex.

        The survivor key is picked with graph.ordering. Only vertices joined
        by at least one direct edge (either direction) can be merged.

        Returns:
            True if the merge happened, False if the graph was left untouched.
        """
        raise NotImplementedError
