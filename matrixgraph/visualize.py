"""Drawing helpers built on NetworkX and Matplotlib."""

from __future__ import annotations

from typing import Dict, Hashable, Optional

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from .weighted import WeightedGraph

Name = Hashable


def to_networkx(graph: WeightedGraph, directed: bool = False) -> nx.Graph:
    """Build a NetworkX graph from the non-zero cells of ``graph``'s matrix.

    Every vertex becomes a node, including isolated ones. Edge weights are
    stored under the ``weight`` attribute.

    Args:
        graph: Source graph.
        directed: Build a ``DiGraph`` with one edge per non-zero cell instead
            of an undirected ``Graph``.

    Returns:
        The NetworkX graph.
    """
    G = nx.DiGraph() if directed else nx.Graph()
    names = graph.vertices
    G.add_nodes_from(names)
    matrix = graph.adjacency_matrix()
    for i, j in zip(*np.nonzero(matrix)):
        G.add_edge(names[i], names[j], weight=float(matrix[i, j]))
    return G


def draw_graph(
    graph: WeightedGraph,
    root: Optional[Name] = None,
    previous: Optional[Dict[Name, Optional[Name]]] = None,
    *,
    directed: bool = False,
    layout: str = "spring",
    show_weights: bool = True,
    node_size: int = 300,
    path: Optional[str] = None,
):
    """Render ``graph`` and optionally highlight a shortest-path tree.

    Args:
        graph: Graph to draw.
        root: Vertex drawn in red.
        previous: Predecessor mapping as returned by
            :meth:`WeightedGraph.shortest_paths_from`; its edges are drawn
            thicker.
        directed: Draw arrows for a directed matrix.
        layout: ``"spring"``, ``"kamada_kawai"`` or ``"shell"``.
        show_weights: Label edges with their weight.
        node_size: Marker size for vertices.
        path: Save the figure to this file instead of showing it.

    Returns:
        The Matplotlib figure.

    Raises:
        ValueError: If ``layout`` is unknown.
    """
    G = to_networkx(graph, directed=directed)

    if layout == "spring":
        pos = nx.spring_layout(G, seed=42)
    elif layout == "kamada_kawai":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    else:
        raise ValueError(f"Unknown layout: {layout}")

    fig = plt.figure(figsize=(8, 6))

    node_colors = ["tab:red" if node == root else "tab:blue" for node in G.nodes]
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=node_size, alpha=0.9)
    nx.draw_networkx_labels(G, pos, font_size=8, font_color="white")

    tree = []
    if previous:
        tree = [(p, v) for v, p in previous.items() if p is not None and p != v and G.has_edge(p, v)]
    others = [e for e in G.edges if e not in tree and (e[1], e[0]) not in tree]
    nx.draw_networkx_edges(G, pos, edgelist=others, width=1.0, alpha=0.5)
    if tree:
        nx.draw_networkx_edges(G, pos, edgelist=tree, width=2.5, edge_color="tab:red")

    if show_weights:
        edge_labels = {(u, v): f"{w:g}" for u, v, w in G.edges(data="weight")}
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7)

    plt.title("Weighted graph", fontsize=12)
    plt.axis("off")
    plt.tight_layout()
    if path is not None:
        fig.savefig(path)
        plt.close(fig)
    else:  # pragma: no cover - interactive
        plt.show()
    return fig


__all__ = ["draw_graph", "to_networkx"]
