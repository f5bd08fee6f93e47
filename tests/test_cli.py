import json
import math

from matrixgraph.cli import main


def _run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_example_matrix(capsys):
    code, out, _ = _run(capsys, "--example")
    assert code == 0
    data = json.loads(out)
    assert data["vertices"] == [0, 1, 2]
    assert data["distance"] == [0, 1, 3]
    assert data["previous"] == [0, 0, 1]


def test_matrix_with_heap_frontier(capsys):
    code, out, _ = _run(
        capsys, "--matrix", "[[0,1,4],[1,0,2],[4,2,0]]", "--root", "2", "--frontier", "heap"
    )
    assert code == 0
    data = json.loads(out)
    assert data["root"] == 2
    assert data["distance"] == [3, 2, 0]


def test_edges_with_target(capsys):
    code, out, _ = _run(
        capsys,
        "--edge", "A", "B", "1",
        "--edge", "B", "C", "2",
        "--edge", "A", "C", "4",
        "--root", "A",
        "--target", "C",
    )
    assert code == 0
    data = json.loads(out)
    assert data["vertices"] == ["A", "B", "C"]
    assert data["previous"] == ["A", "A", "B"]
    assert data["path"] == ["A", "B", "C"]


def test_skip_zero_weights_reports_infinity(capsys):
    code, out, _ = _run(
        capsys, "--matrix", "[[0,1,0],[1,0,0],[0,0,0]]", "--skip-zero-weights", "--target", "2"
    )
    assert code == 0
    data = json.loads(out)
    assert math.isinf(data["distance"][2])
    assert data["previous"][2] is None
    assert data["path"] == []


def test_invalid_matrix_exit_code(capsys):
    code, out, err = _run(capsys, "--matrix", "[[0,1],[1,1]]")
    assert code == 64
    assert out == ""
    assert err.startswith("error:")


def test_bad_json_and_unknown_root(capsys):
    assert _run(capsys, "--matrix", "[[0,")[0] == 64
    assert _run(capsys, "--example", "--root", "7")[0] == 64


def test_self_loop_edge_is_rejected(capsys):
    code, _, err = _run(capsys, "--edge", "A", "A", "3")
    assert code == 64
    assert "self-loop" in err


def test_debug_log_goes_to_stderr(capsys):
    code, _, err = _run(capsys, "--example", "--log-level", "debug")
    assert code == 0
    assert "debug shortest_path" in err
    assert "info run n=3" in err


def test_plot(capsys, tmp_path):
    out = tmp_path / "g.png"
    code, _, _ = _run(capsys, "--example", "--plot", str(out))
    assert code == 0
    assert out.exists()
