import io
import json

from matrixgraph import StdLogger, WeightedGraph


def test_text_events_from_graph_mutations():
    stream = io.StringIO()
    g = WeightedGraph(logger=StdLogger(level="debug", stream=stream))
    g.add_vertex("A")
    g.remove_edge("A", "A")
    lines = stream.getvalue().splitlines()
    assert lines[0] == "debug add_vertex name=A index=0"
    assert lines[1] == "debug remove_edge source=A destination=A directed=False"


def test_json_events():
    stream = io.StringIO()
    g = WeightedGraph(logger=StdLogger(level="debug", json_fmt=True, stream=stream))
    g.add_edges("A", [("B", 2)])
    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert [e["event"] for e in events] == ["add_vertex", "add_vertex", "add_edges"]
    assert events[-1] == {
        "level": "debug",
        "event": "add_edges",
        "source": "A",
        "edges": 1,
        "directed": False,
        "added": 2,
    }


def test_level_filters_debug():
    stream = io.StringIO()
    logger = StdLogger(level="info", stream=stream)
    logger.debug("hidden")
    logger.info("shown", n=1)
    assert stream.getvalue() == "info shown n=1\n"
