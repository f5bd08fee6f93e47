"""Dijkstra's single-source shortest paths over an adjacency matrix."""

from __future__ import annotations

import heapq
import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .exceptions import ConfigError, InputError
from .logger import Logger, NoopLogger
from .matrix import as_square_array
from .path import reconstruct_path

Vertex = int
Float = float


@dataclass(frozen=True)
class ShortestPathConfig:
    """Configuration knobs for :func:`shortest_path`.

    Attributes:
        frontier: ``"scan"`` picks the next vertex by scanning every unvisited
            vertex (O(N^2) overall). ``"heap"`` keeps a binary heap of
            ``(distance, index)`` pairs. Both settle vertices in the same
            order, so they return identical results.
        skip_zero_weights: Treat off-diagonal zero cells as "no edge" instead
            of a zero-cost edge. Off by default: with the plain matrix
            encoding every zero cell is an edge of weight 0.
    """

    frontier: str = "scan"  # or "heap"
    skip_zero_weights: bool = False


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors produced by :func:`shortest_path`.

    Unpacks as ``(distance, previous)``.
    """

    distance: List[Float]
    previous: List[Optional[Vertex]]
    root: Vertex

    def __iter__(self) -> Iterator[List[Any]]:
        return iter((self.distance, self.previous))

    def path_to(self, target: Vertex) -> List[Vertex]:
        """Return the vertex indices from the root to ``target``.

        An empty list means ``target`` was not reached.
        """
        return reconstruct_path(self.previous, self.root, target)


class _Run:
    """Mutable state of a single shortest-path computation."""

    def __init__(self, rows: List[List[Float]], root: Vertex, skip_zero: bool) -> None:
        n = len(rows)
        self.rows = rows
        self.skip_zero = skip_zero
        self.distance: List[Float] = [math.inf] * n
        self.previous: List[Optional[Vertex]] = [None] * n
        self.distance[root] = 0.0
        self.previous[root] = root
        self.counters = {"extracted": 0, "relaxed": 0}

    def relax(self, u: Vertex) -> List[Vertex]:
        """Relax every column of row ``u`` and return the improved vertices."""
        self.counters["extracted"] += 1
        du = self.distance[u]
        improved: List[Vertex] = []
        for v, w in enumerate(self.rows[u]):
            if self.skip_zero and w == 0:
                continue
            self.counters["relaxed"] += 1
            cand = du + w
            if cand < self.distance[v]:
                self.distance[v] = cand
                self.previous[v] = u
                improved.append(v)
        return improved


def _settle_by_scan(run: _Run, root: Vertex) -> None:
    unvisited: List[Vertex] = list(range(len(run.rows)))
    while unvisited:
        # min() keeps the first of equal keys, so ties go to the lowest index
        pos = min(range(len(unvisited)), key=lambda k: run.distance[unvisited[k]])
        u = unvisited.pop(pos)
        if run.distance[u] == math.inf:
            # everything left is unreachable
            break
        run.relax(u)


def _settle_by_heap(run: _Run, root: Vertex) -> None:
    settled = [False] * len(run.rows)
    heap: List[Tuple[Float, Vertex]] = [(0.0, root)]
    while heap:
        d, u = heapq.heappop(heap)
        # lazy deletion
        if settled[u] or d != run.distance[u]:
            continue
        settled[u] = True
        for v in run.relax(u):
            heapq.heappush(heap, (run.distance[v], v))


_FRONTIERS: Dict[str, Callable[[_Run, Vertex], None]] = {
    "scan": _settle_by_scan,
    "heap": _settle_by_heap,
}


def shortest_path(
    matrix: Any,
    root: Vertex,
    config: Optional[ShortestPathConfig] = None,
    logger: Logger | None = None,
) -> ShortestPaths:
    """Run Dijkstra's algorithm from ``root`` over an adjacency matrix.

    The vertex with the smallest tentative distance is settled next, ties
    going to the lowest index, and every cell of its row is relaxed. Weights
    are expected to be non-negative; negative weights are not checked and
    give meaningless results. The input matrix is never modified.

    Args:
        matrix: Square matrix (nested sequences or a NumPy array) where
            ``matrix[i][j]`` is the weight of the edge from ``i`` to ``j``.
        root: Index of the root vertex.
        config: Optional configuration.
        logger: Optional structured logger; receives one ``debug`` event.

    Returns:
        Per-vertex distances (``inf`` when unreached) and predecessors
        (``None`` when unreached, the root is its own predecessor).

    Raises:
        InvalidMatrix: If ``matrix`` is empty, not square or not numeric.
        InputError: If ``root`` is not an index into ``matrix``.
        ConfigError: If ``config.frontier`` is unknown.

    Examples:
        ```python
        >>> distance, previous = shortest_path([[0, 1, 4], [1, 0, 2], [4, 2, 0]], 0)
        >>> distance, previous
        ([0.0, 1.0, 3.0], [0, 0, 1])
        ```
    """
    cfg = config or ShortestPathConfig()
    log = logger or NoopLogger()
    try:
        settle = _FRONTIERS[cfg.frontier]
    except KeyError:
        raise ConfigError(f"unknown frontier '{cfg.frontier}'") from None

    weights = as_square_array(matrix)
    n = weights.shape[0]
    negatives = int((weights < 0).sum())
    if negatives:
        log.warning("negative_weights", cells=negatives)
    if isinstance(root, bool) or not isinstance(root, numbers.Integral) or not (0 <= root < n):
        raise InputError(f"root must be a vertex index in [0, {n}), got {root!r}")
    root = int(root)

    run = _Run(weights.tolist(), root, cfg.skip_zero_weights)
    settle(run, root)
    log.debug("shortest_path", n=n, root=root, frontier=cfg.frontier, **run.counters)
    return ShortestPaths(distance=run.distance, previous=run.previous, root=root)


__all__ = ["ShortestPathConfig", "ShortestPaths", "shortest_path"]
