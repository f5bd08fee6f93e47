import pytest

from matrixgraph import reconstruct_path


def test_walks_predecessors_back_to_root():
    assert reconstruct_path([0, 0, 1, 2], 0, 3) == [0, 1, 2, 3]


def test_root_is_its_own_path():
    assert reconstruct_path([0, None], 0, 0) == [0]


def test_unreached_target():
    assert reconstruct_path([0, 0, None], 0, 2) == []


def test_cycle_in_predecessors_stops():
    assert reconstruct_path([0, 2, 1], 0, 2) == []


def test_out_of_range():
    with pytest.raises(IndexError):
        reconstruct_path([0], 0, 1)
