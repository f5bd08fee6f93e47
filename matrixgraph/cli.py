"""Command-line interface for computing shortest paths."""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from typing import Any, Dict, List, Optional

from .dijkstra import ShortestPathConfig
from .exceptions import (
    ConfigError,
    DuplicateVertex,
    InputError,
    InvalidMatrix,
    MatrixGraphError,
    UnknownVertex,
)
from .logger import StdLogger
from .path import reconstruct_path
from .weighted import WeightedGraph

EXAMPLE_MATRIX = [[0, 1, 4], [1, 0, 2], [4, 2, 0]]


def _parse_name(raw: str) -> Any:
    """Read integer vertex names as ints, anything else as a string."""
    try:
        return int(raw)
    except ValueError:
        return raw


def _build_graph_from_matrix(raw: str, logger: StdLogger) -> WeightedGraph:
    try:
        matrix = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidMatrix(f"--matrix is not valid JSON: {exc}") from exc
    return WeightedGraph(matrix, logger=logger)


def _build_graph_from_edges(
    edges: List[List[str]], directed: bool, logger: StdLogger
) -> WeightedGraph:
    g = WeightedGraph(logger=logger)
    for src, dst, w in edges:
        try:
            weight = float(w)
        except ValueError:
            raise InputError(f"invalid weight {w!r} for edge {src} {dst}") from None
        g.add_edges(_parse_name(src), [(_parse_name(dst), weight)], directed=directed)
    return g


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``matrixgraph`` command-line tool."""
    examples = (
        "Examples:\n"
        "  matrixgraph --matrix '[[0,1,4],[1,0,2],[4,2,0]]' --root 0\n"
        "  matrixgraph --edge A B 1 --edge B C 2 --edge A C 4 --root A --target C\n"
        "  matrixgraph --example --frontier heap --plot tree.png\n"
    )
    p = argparse.ArgumentParser(
        prog="matrixgraph",
        description="Dijkstra shortest paths over an adjacency matrix",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit log events as JSON lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--matrix", type=str, help="Adjacency matrix as a JSON array of rows")
    src.add_argument(
        "--edge",
        nargs=3,
        action="append",
        metavar=("SRC", "DST", "W"),
        help="Add a weighted edge (repeatable)",
    )
    src.add_argument("--example", action="store_true", help="Use a small built-in matrix")

    p.add_argument("--directed", action="store_true", help="Do not mirror --edge weights")
    p.add_argument("--root", type=str, default=None, help="Root vertex (default: first vertex)")
    p.add_argument("--target", type=str, default=None, help="Target vertex for path output")
    p.add_argument("--frontier", choices=["scan", "heap"], default="scan")
    p.add_argument(
        "--skip-zero-weights",
        action="store_true",
        help="Treat zero off-diagonal cells as missing edges",
    )
    p.add_argument("--plot", type=str, default=None, help="Save a drawing of the graph here")

    args = p.parse_args(argv)
    logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=sys.stderr)

    try:
        if args.example:
            g = WeightedGraph(EXAMPLE_MATRIX, logger=logger)
        elif args.matrix is not None:
            g = _build_graph_from_matrix(args.matrix, logger)
        else:
            g = _build_graph_from_edges(args.edge, args.directed, logger)

        if len(g) == 0:
            raise InvalidMatrix("graph has no vertices")
        root = g.vertices[0] if args.root is None else _parse_name(args.root)
        cfg = ShortestPathConfig(frontier=args.frontier, skip_zero_weights=args.skip_zero_weights)

        if args.verbose:
            sys.stderr.write(
                f"config: n={len(g)} root={root!r} frontier={args.frontier} "
                f"skip_zero_weights={args.skip_zero_weights}\n"
            )

        distances, previous = g.shortest_paths_from(root, config=cfg)
        out: Dict[str, Any] = {
            "root": root,
            "vertices": g.vertices,
            "distance": [distances[v] for v in g.vertices],
            "previous": [previous[v] for v in g.vertices],
        }

        if args.target is not None:
            target = _parse_name(args.target)
            names = g.vertices
            prev_index = [None if previous[v] is None else g.index_of(previous[v]) for v in names]
            hops = reconstruct_path(prev_index, g.index_of(root), g.index_of(target))
            out["target"] = target
            out["path"] = [names[i] for i in hops]

        if args.plot:
            from .visualize import draw_graph

            draw_graph(g, root=root, previous=previous, directed=args.directed, path=args.plot)

        logger.info("run", n=len(g), root=root, frontier=args.frontier)
        # json.dumps writes inf as Infinity
        print(json.dumps(out))
        return 0

    except (InputError, ConfigError, DuplicateVertex, UnknownVertex) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 64
    except MatrixGraphError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70


if __name__ == "__main__":
    sys.exit(main())
