import pytest

from matrixgraph import UndirectedGraph, UnknownVertex


def test_starts_with_an_empty_adjacency_list():
    assert UndirectedGraph().adjacency_list == {}


def test_add_vertex():
    g = UndirectedGraph()
    g.add_vertex(1)
    g.add_vertex(1)
    assert g.adjacency_list == {1: []}


def test_add_edge_with_new_vertices():
    g = UndirectedGraph()
    g.add_edge(1, 2)
    assert g.adjacency_list == {1: [2], 2: [1]}


def test_add_edge_from_existing_vertex():
    g = UndirectedGraph()
    g.add_vertex(1)
    g.add_edge(1, 2)
    assert g.adjacency_list == {1: [2], 2: [1]}


def test_self_loop_is_recorded_once_per_call():
    g = UndirectedGraph()
    g.add_vertex(1)
    g.add_edge(1, 1)
    assert g.adjacency_list == {1: [1]}
    g.add_edge(1, 1)
    assert g.adjacency_list == {1: [1, 1]}


def test_remove_edge():
    g = UndirectedGraph()
    g.add_edge(1, 2)
    g.add_edge(1, 2)
    g.add_edge(1, 3)
    g.remove_edge(1, 2)
    assert g.adjacency_list == {1: [3], 2: [], 3: [1]}


def test_remove_vertex():
    g = UndirectedGraph()
    g.add_edge(1, 2)
    g.add_edge(1, 1)
    g.add_edge(3, 1)
    g.remove_vertex(1)
    assert g.adjacency_list == {2: [], 3: []}
    assert 1 not in g
    assert len(g) == 2


def test_unknown_vertices():
    g = UndirectedGraph()
    g.add_vertex("a")
    with pytest.raises(UnknownVertex):
        g.remove_edge("a", "b")
    with pytest.raises(UnknownVertex):
        g.remove_vertex("b")
    assert g.adjacency_list == {"a": []}
