"""Public package exports for :mod:`matrixgraph`."""

from __future__ import annotations

from .dijkstra import ShortestPathConfig, ShortestPaths, shortest_path
from .exceptions import (
    ConfigError,
    DuplicateVertex,
    InputError,
    InvalidEdge,
    InvalidMatrix,
    MatrixGraphError,
    UnknownVertex,
)
from .logger import Logger, NoopLogger, StdLogger
from .matrix import validate
from .path import reconstruct_path
from .undirected import UndirectedGraph
from .weighted import WeightedGraph

__version__ = "0.1.0"

__all__ = [
    "WeightedGraph",
    "UndirectedGraph",
    "ShortestPathConfig",
    "ShortestPaths",
    "shortest_path",
    "reconstruct_path",
    "validate",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "MatrixGraphError",
    "InputError",
    "InvalidMatrix",
    "InvalidEdge",
    "DuplicateVertex",
    "UnknownVertex",
    "ConfigError",
]
