import networkx as nx
import pytest

from graph_generator.src import helpers


def test_apply_to_nodes_visits_each_node_once():
    graph = nx.path_graph(6)
    visited = list()

    helpers.apply_to_nodes(graph, lambda n: visited.append(n.key))

    assert sorted(visited) == list(range(6))


def test_apply_to_edges_keys():
    graph = nx.MultiDiGraph()
    graph.add_edge("a", "b", key=0, weight=1)
    graph.add_edge("a", "b", key=1, weight=2)
    edges = list()

    helpers.apply_to_edges(graph, edges.append)

    assert [e.key for e in edges] == [("a", "b", 0), ("a", "b", 1)]
    assert all(e.directed and e.source == "a" and e.target == "b" for e in edges)
    assert [e.get_attribute("weight").as_int() for e in edges] == [1, 2]


def test_edge_changes_are_written_to_graph():
    graph = nx.Graph([(0, 1), (1, 2)])

    helpers.apply_to_edges(graph, lambda e: e.set_attribute("weight", e.source + e.target))

    assert {(u, v): d for u, v, d in graph.edges(data=True)} == {(0, 1): {"weight": 1}, (1, 2): {"weight": 3}}


def test_failure_propagates_and_stops():
    graph = nx.path_graph(5)
    calls = list()

    def mark(node):
        if len(calls) == 2:
            raise KeyError(node.key)
        calls.append(node.key)
        node.set_attribute("seen", 1)

    with pytest.raises(KeyError):
        helpers.apply_to_nodes(graph, mark)

    assert helpers.count_nodes_where(graph, lambda n: not n.get_attribute("seen").is_absent) == 2
    assert all("seen" not in graph.nodes[i] for i in range(5) if i not in calls)


def test_edge_failure_propagates_and_stops():
    graph = nx.path_graph(5)
    calls = list()

    def mark(edge):
        if len(calls) == 2:
            raise ValueError(edge.key)
        calls.append(edge.key)
        edge.set_attribute("weight", 1)

    with pytest.raises(ValueError):
        helpers.apply_to_edges(graph, mark)

    marked = [(u, v) for u, v, w in graph.edges(data="weight") if w is not None]
    assert sorted(marked) == sorted(calls)
    assert len(marked) == 2


def test_topology_can_change_during_traversal():
    graph = nx.complete_graph(4)

    helpers.apply_to_edges(graph, lambda e: graph.remove_edge(e.source, e.target))
    helpers.apply_to_nodes(graph, lambda n: graph.remove_node(n.key))

    assert graph.number_of_nodes() == 0
