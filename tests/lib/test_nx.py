import networkx as nx
import pytest

from pathgraph.engine import ShortestPathEngine
from pathgraph.lib.nx import from_networkx, to_networkx
from pathgraph.model.graph import Edge, Node


def test_to_networkx(parallel_graph):
    graph = to_networkx(*parallel_graph)
    assert isinstance(graph, nx.MultiDiGraph)
    assert set(graph.nodes) == {"A", "B", "C"}
    assert graph.number_of_edges("A", "B") == 3
    assert graph.edges["A", "B", "ab-light-1"]["weight"] == 1
    assert graph.nodes["A"]["label"] == "A"


def test_distances_match_networkx_dijkstra(square_graph):
    nodes, edges = square_graph
    engine = ShortestPathEngine(nodes, edges)
    engine.set_source("B")
    engine.analyze()
    expected = nx.single_source_dijkstra_path_length(to_networkx(nodes, edges), "B")
    for node_id, distance in engine.distances().items():
        assert distance == expected.get(node_id, float("inf"))


def test_from_networkx_digraph():
    g = nx.DiGraph()
    g.add_node("A", label="Alpha", position=(1, 2))
    g.add_edge("A", "B", weight=2.5)
    g.add_edge("B", "C")
    nodes, edges = from_networkx(g)
    assert nodes[0] == Node("A", "Alpha", (1, 2))
    assert [(e.source, e.target, e.weight) for e in edges] == [
        ("A", "B", 2.5),
        ("B", "C", 1),
    ]
    assert len({e.id for e in edges}) == 2


def test_from_networkx_undirected_yields_both_directions():
    g = nx.Graph()
    g.add_edge(1, 2, weight=4)
    nodes, edges = from_networkx(g)
    assert [n.id for n in nodes] == ["1", "2"]
    assert sorted((e.source, e.target) for e in edges) == [("1", "2"), ("2", "1")]
    assert len({e.id for e in edges}) == 2


def test_from_networkx_keeps_string_keys():
    g = nx.MultiDiGraph()
    g.add_edge("A", "B", key="fast", weight=1)
    g.add_edge("A", "B", key="slow", weight=9)
    _, edges = from_networkx(g)
    assert {e.id for e in edges} == {"fast", "slow"}


def test_from_networkx_key_shared_across_node_pairs():
    g = nx.MultiDiGraph()
    g.add_edge("A", "B", key="primary", weight=1)
    g.add_edge("C", "D", key="primary", weight=1)
    g.add_edge("B", "C", key="link", weight=2)
    nodes, edges = from_networkx(g)

    ids = [e.id for e in edges]
    assert len(set(ids)) == 3
    assert "link" in ids
    assert "primary" not in ids

    engine = ShortestPathEngine(nodes, edges)
    engine.set_source("A")
    engine.analyze()
    assert engine.distances() == {"A": 0, "B": 1, "C": 3, "D": 4}

    engine.set_source("C")
    engine.analyze()
    assert engine.distance_to("B") == float("inf")
    assert engine.distance_to("D") == 1


def test_round_trip(abc_graph):
    nodes, edges = from_networkx(to_networkx(*abc_graph))
    assert nodes == abc_graph[0]
    assert {(e.id, e.source, e.target, e.weight) for e in edges} == {
        (e.id, e.source, e.target, e.weight) for e in abc_graph[1]
    }


def test_custom_weight_attribute():
    g = nx.DiGraph()
    g.add_edge("A", "B", cost=7)
    _, edges = from_networkx(g, weight="cost")
    assert edges[0].weight == pytest.approx(7)
