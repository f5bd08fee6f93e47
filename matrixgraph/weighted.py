"""Weighted graph backed by an adjacency matrix and a name-to-index map."""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .dijkstra import Float, ShortestPathConfig, shortest_path
from .exceptions import DuplicateVertex, InvalidEdge, InvalidMatrix, UnknownVertex
from .logger import Logger, NoopLogger
from .matrix import Matrix, is_weight, validate

Name = Hashable
Destination = Tuple[Name, Float]


class WeightedGraph:
    """Graph with named vertices and weighted edges stored in a square matrix.

    ``matrix[i][j]`` holds the weight of the edge between the vertices at
    indices ``i`` and ``j``. A weight of ``0`` means "no edge"; zero-cost
    edges cannot be told apart from missing ones. Indices are handed out in
    insertion order and never reused. Vertices cannot be removed.

    Edges are undirected (mirrored across the diagonal) unless an operation
    is called with ``directed=True``. The diagonal is always zero.

    Instances are not safe for concurrent mutation.
    """

    def __init__(
        self,
        matrix: Any = None,
        names: Optional[Sequence[Name]] = None,
        logger: Logger | None = None,
    ) -> None:
        """Create an empty graph or one wrapping a copy of ``matrix``.

        Args:
            matrix: Optional adjacency matrix; must pass :func:`validate`.
            names: Optional vertex names for the rows of ``matrix``, in row
                order. Defaults to the row indices ``0..N-1``.
            logger: Optional structured logger for mutation events.

        Raises:
            InvalidMatrix: If ``matrix`` is malformed, if ``names`` has the
                wrong length, or if ``names`` is given without a matrix.
            DuplicateVertex: If ``names`` repeats a name.
        """
        self.logger = logger or NoopLogger()
        self._index: Dict[Name, int] = {}

        if matrix is None:
            if names is not None:
                raise InvalidMatrix("vertex names were given without a matrix")
            self._matrix: Matrix = np.zeros((0, 0), dtype=np.float64)
            return

        if not validate(matrix):
            raise InvalidMatrix(
                "matrix must be square, hold finite numbers only and have a zero diagonal"
            )
        n = len(matrix)
        self._matrix = np.array(matrix, dtype=np.float64).reshape(n, n)

        labels = list(range(n)) if names is None else list(names)
        if len(labels) != n:
            raise InvalidMatrix(f"expected {n} vertex names, got {len(labels)}")
        for i, name in enumerate(labels):
            if name in self._index:
                raise DuplicateVertex(f"vertex {name!r} appears twice in names")
            self._index[name] = i

    # ---------- read access -----------------------------------------------

    def adjacency_matrix(self) -> Matrix:
        """Return a read-only view of the adjacency matrix."""
        view = self._matrix.view()
        view.flags.writeable = False
        return view

    @property
    def vertices(self) -> List[Name]:
        """Vertex names in index order."""
        return list(self._index)

    def index_of(self, name: Name) -> int:
        """Return the matrix index of ``name``.

        Raises:
            UnknownVertex: If ``name`` has no index.
        """
        try:
            return self._index[name]
        except KeyError:
            raise UnknownVertex(f"unknown vertex {name!r}") from None

    def weight(self, source: Name, destination: Name) -> Float:
        """Return the weight stored from ``source`` to ``destination`` (0 if none)."""
        return float(self._matrix[self.index_of(source), self.index_of(destination)])

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"WeightedGraph(n={len(self)})"

    # ---------- mutation --------------------------------------------------

    def add_vertex(self, name: Name) -> None:
        """Add a vertex with no edges.

        The matrix grows by one zero column and one zero row and ``name`` is
        mapped to the previous vertex count.

        Raises:
            DuplicateVertex: If ``name`` already has an index.
        """
        if name in self._index:
            raise DuplicateVertex(f"vertex {name!r} already exists")
        n = len(self._index)
        grown = np.zeros((n + 1, n + 1), dtype=np.float64)
        grown[:n, :n] = self._matrix
        self._matrix = grown
        self._index[name] = n
        self.logger.debug("add_vertex", name=name, index=n)

    def add_edges(
        self,
        source: Name,
        destinations: Iterable[Destination],
        directed: bool = False,
    ) -> None:
        """Connect ``source`` to every ``(destination, weight)`` pair.

        Vertices that do not exist yet are added first, the source before
        the destinations in order of first appearance. A destination equal
        to ``source`` with weight ``0`` is skipped. A later pair for the same
        destination overwrites an earlier one.

        The call is all-or-nothing: every pair is checked before any vertex
        is added or any weight written.

        Args:
            source: Source vertex name.
            destinations: Iterable of ``(destination, weight)`` pairs.
            directed: If ``True``, only ``matrix[source][destination]`` is
                written; otherwise the weight is mirrored.

        Raises:
            InvalidEdge: If a pair is malformed, a weight is not a finite
                number, or a non-zero weight connects ``source`` to itself,
                or a vertex name is not hashable.

        Examples:
            ```python
            >>> g = WeightedGraph()
            >>> g.add_edges("A", [("B", 2), ("C", 5)])
            >>> g.adjacency_matrix().tolist()
            [[0.0, 2.0, 5.0], [2.0, 0.0, 0.0], [5.0, 0.0, 0.0]]
            ```
        """
        pairs: List[Destination] = []
        _require_hashable(source)
        missing: List[Name] = [] if source in self._index else [source]
        for item in destinations:
            try:
                destination, weight = item
            except (TypeError, ValueError):
                raise InvalidEdge(f"expected a (destination, weight) pair, got {item!r}") from None
            if not is_weight(weight):
                raise InvalidEdge(
                    f"weight {weight!r} on edge ({source!r}, {destination!r}) is not a finite number"
                )
            _require_hashable(destination)
            if destination == source:
                if weight != 0:
                    raise InvalidEdge(f"self-loop on vertex {source!r} is not allowed")
                continue
            if destination not in self._index and destination not in missing:
                missing.append(destination)
            pairs.append((destination, weight))

        for name in missing:
            self.add_vertex(name)

        i = self._index[source]
        for destination, weight in pairs:
            j = self._index[destination]
            self._matrix[i, j] = weight
            if not directed:
                self._matrix[j, i] = weight
        self.logger.debug(
            "add_edges", source=source, edges=len(pairs), directed=directed, added=len(missing)
        )

    def remove_edge(self, source: Name, destination: Name, directed: bool = False) -> None:
        """Set the weight between ``source`` and ``destination`` back to 0.

        Removing an edge that does not exist is a no-op.

        Raises:
            UnknownVertex: If either name has no index.
        """
        i = self.index_of(source)
        j = self.index_of(destination)
        self._matrix[i, j] = 0.0
        if not directed:
            self._matrix[j, i] = 0.0
        self.logger.debug("remove_edge", source=source, destination=destination, directed=directed)

    # ---------- shortest paths --------------------------------------------

    def shortest_paths_from(
        self,
        root: Name,
        config: Optional[ShortestPathConfig] = None,
    ) -> Tuple[Dict[Name, Float], Dict[Name, Optional[Name]]]:
        """Run :func:`~matrixgraph.dijkstra.shortest_path` from a named root.

        Returns:
            ``(distances, previous)`` keyed by vertex name; ``previous`` holds
            predecessor names and ``None`` for unreached vertices.

        Raises:
            UnknownVertex: If ``root`` has no index.
        """
        result = shortest_path(self._matrix, self.index_of(root), config=config, logger=self.logger)
        names = self.vertices
        distances = {names[i]: d for i, d in enumerate(result.distance)}
        previous = {
            names[i]: (None if p is None else names[p]) for i, p in enumerate(result.previous)
        }
        return distances, previous



def _require_hashable(name: Any) -> None:
    try:
        hash(name)
    except TypeError:
        raise InvalidEdge(f"vertex name {name!r} is not hashable") from None

__all__ = ["WeightedGraph"]
