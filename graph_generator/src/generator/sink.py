import typing as tp

import networkx as nx


class Sink:
    """
    Получатель событий генератора. Методы по умолчанию ничего не делают.
    """

    def node_added(self, node_id: int, attributes: tp.Dict[str, tp.Any]):
        pass

    def edge_added(self, edge_id: int, source: int, target: int, directed: bool,
                   attributes: tp.Dict[str, tp.Any]):
        pass

    def edge_removed(self, edge_id: int):
        pass


class NetworkxSink(Sink):
    """
    Применяет события генератора к графу networkx.
    """

    def __init__(self, graph: nx.Graph):
        self._graph: nx.Graph = graph
        self._edges: tp.Dict[int, tp.Tuple[tp.Hashable, ...]] = dict()

    def next_free_id(self) -> int:
        ids = [i for i in self._graph.nodes if isinstance(i, int) and not isinstance(i, bool)]
        return max(ids, default=-1) + 1

    def node_added(self, node_id, attributes):
        self._graph.add_node(node_id, **attributes)

    def edge_added(self, edge_id, source, target, directed, attributes):
        if directed != self._graph.is_directed():
            raise ValueError(
                f"Can not add {'directed' if directed else 'undirected'} edge {edge_id} "
                f"to {'directed' if self._graph.is_directed() else 'undirected'} graph"
            )
        if self._graph.is_multigraph():
            self._graph.add_edge(source, target, key=edge_id, **attributes)
            self._edges[edge_id] = (source, target, edge_id)
        else:
            self._graph.add_edge(source, target, **attributes)
            self._edges[edge_id] = (source, target)

    def edge_key(self, edge_id: int) -> tp.Tuple[tp.Hashable, ...]:
        return self._edges[edge_id]

    def edge_removed(self, edge_id):
        edge = self._edges.pop(edge_id, None)
        if edge is not None and self._graph.has_edge(*edge):
            self._graph.remove_edge(*edge)

    def __eq__(self, other):
        return isinstance(other, NetworkxSink) and other._graph is self._graph

    def __hash__(self):
        return id(self._graph)
