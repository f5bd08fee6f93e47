import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest  # noqa: E402

from matrixgraph import WeightedGraph  # noqa: E402


@pytest.fixture
def triangle():
    """Three vertices where the two-hop route A-B-C beats the direct A-C edge."""
    g = WeightedGraph()
    g.add_edges("A", [("B", 1), ("C", 4)])
    g.add_edges("B", [("C", 2)])
    return g
