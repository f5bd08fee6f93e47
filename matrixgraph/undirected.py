"""Unweighted undirected graph stored as adjacency lists."""

from __future__ import annotations

from typing import Dict, Hashable, List

from .exceptions import UnknownVertex

Name = Hashable


class UndirectedGraph:
    """Undirected graph mapping each vertex to the list of its neighbours.

    Neighbour lists keep insertion order and may hold duplicates: adding the
    same edge twice records it twice. A self-loop is recorded once per call
    in the vertex's own list.
    """

    def __init__(self) -> None:
        self._adjacency_list: Dict[Name, List[Name]] = {}

    @property
    def adjacency_list(self) -> Dict[Name, List[Name]]:
        """Mapping from vertex to its neighbours."""
        return self._adjacency_list

    def add_vertex(self, vertex: Name) -> None:
        """Add ``vertex`` with no neighbours; does nothing if it exists."""
        self._adjacency_list.setdefault(vertex, [])

    def add_edge(self, source: Name, destination: Name) -> None:
        """Make ``source`` and ``destination`` neighbours, adding them if needed."""
        self.add_vertex(source)
        self.add_vertex(destination)
        self._adjacency_list[source].append(destination)
        if source != destination:
            self._adjacency_list[destination].append(source)

    def remove_edge(self, source: Name, destination: Name) -> None:
        """Remove every edge between ``source`` and ``destination``.

        Raises:
            UnknownVertex: If either vertex is missing.
        """
        self._require(source)
        self._require(destination)
        adj = self._adjacency_list
        adj[source] = [v for v in adj[source] if v != destination]
        adj[destination] = [v for v in adj[destination] if v != source]

    def remove_vertex(self, vertex: Name) -> None:
        """Remove ``vertex`` and every edge touching it.

        Raises:
            UnknownVertex: If ``vertex`` is missing.
        """
        self._require(vertex)
        for neighbour in set(self._adjacency_list[vertex]):
            self.remove_edge(vertex, neighbour)
        del self._adjacency_list[vertex]

    def _require(self, vertex: Name) -> None:
        if vertex not in self._adjacency_list:
            raise UnknownVertex(f"unknown vertex {vertex!r}")

    def __len__(self) -> int:
        return len(self._adjacency_list)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency_list


__all__ = ["UndirectedGraph"]
