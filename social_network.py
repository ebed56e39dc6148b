"""
Social-network layer for socialgraph.

Users are string vertices; a friendship is a pair of unit-weight edges, one
in each direction. Invalid requests return False (or an empty result) rather
than raising; only a missing (None) argument raises.
"""

from typing import List, Optional, Sequence, Set
import logging

from adjacency_list_graph import AdjacencyListGraph
from ingestion import IngestionReport, Source, ingest_sources
from ordering import NaturalOrdering

FRIENDSHIP_WEIGHT = 1

logger = logging.getLogger(__name__)


def _require_name(name: Optional[str], label: str = "name") -> str:
    if name is None:
        raise ValueError(f"{label} must not be None")
    return name


class SocialNetwork:
    """
    Users and their symmetric friendships, stored in an AdjacencyListGraph.
    """

    def __init__(self, graph: Optional[AdjacencyListGraph[str]] = None) -> None:
        self._graph: AdjacencyListGraph[str] = (
            graph if graph is not None else AdjacencyListGraph(NaturalOrdering())
        )
        self.last_report: Optional[IngestionReport] = None

    @property
    def graph(self) -> AdjacencyListGraph[str]:
        return self._graph

    def add_user(self, name: str) -> bool:
        """Add a friendless user. False for an empty or already-taken name."""
        _require_name(name)
        if not name:
            return False
        return self._graph.add_vertex(name)

    def all_users(self) -> List[str]:
        return self._graph.vertices()

    def add_friends(self, first: str, second: str) -> bool:
        """
        Make two users friends, adding either of them if needed.

        False if a name is empty, both names are the same, or they are
        already friends in both directions.
        """
        _require_name(first, "first")
        _require_name(second, "second")
        if not first or not second or first == second:
            return False

        forward = self._graph.add_edge(first, second, FRIENDSHIP_WEIGHT)
        backward = self._graph.add_edge(second, first, FRIENDSHIP_WEIGHT)
        return forward or backward

    def friends(self, name: str) -> List[str]:
        """Friends of name; empty if the user is unknown or friendless."""
        _require_name(name)
        return self._graph.neighbors(name)

    def unfriend(self, first: str, second: str) -> bool:
        """
        End a friendship. Requires both users to exist and to be friends in
        both directions; otherwise nothing changes.
        """
        _require_name(first, "first")
        _require_name(second, "second")
        if not first or not second:
            return False
        if not (self._graph.has_edge(first, second) and self._graph.has_edge(second, first)):
            return False

        self._graph.remove_edge(first, second)
        self._graph.remove_edge(second, first)
        return True

    def people_you_may_know(self, name: str) -> Set[str]:
        """Friends of friends, excluding name and name's own friends."""
        _require_name(name)
        if not self._graph.has_vertex(name):
            return set()

        friends = set(self._graph.neighbors(name))
        suggestions: Set[str] = set()
        for friend in friends:
            for candidate in self._graph.neighbors(friend):
                if candidate != name and candidate not in friends:
                    suggestions.add(candidate)
        return suggestions

    def read_social_network_data(
        self,
        sources: Sequence[Source],
        max_workers: Optional[int] = None,
        encoding: str = "utf-8",
    ) -> bool:
        """
        Apply every command found in sources, one worker per source.

        Unreadable sources and malformed lines are skipped. Returns True once
        all workers have finished; the per-source outcome is kept in
        last_report.
        """
        if sources is None:
            raise ValueError("sources must not be None")

        self.last_report = ingest_sources(sources, self, max_workers=max_workers, encoding=encoding)
        if self.last_report.failed:
            logger.info("%d source(s) could not be read", len(self.last_report.failed))
        return True
