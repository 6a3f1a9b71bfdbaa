import logging
import typing as tp

import networkx as nx
import numpy as np

from graph_generator.src.config import config
from graph_generator.src.generator.sink import NetworkxSink, Sink


class RandomGenerator:
    """
    Пошаговый генератор случайного графа.

    begin() создает две вершины, соединенные ребром. Каждый вызов next_events()
    добавляет одну вершину и соединяет ее с каждой из n уже существующих
    вершин с вероятностью min(1, d / 2n), так что средняя степень остается
    около d. Если allow_remove, то с вероятностью remove_probability вместо
    роста удаляется случайное ребро.
    """

    def __init__(
            self,
            average_degree: float = 1.0,
            allow_remove: bool = False,
            directed: bool = False,
            node_attribute: tp.Optional[str] = None,
            edge_attribute: tp.Optional[str] = None,
            seed: tp.Optional[int] = None,
            remove_probability: float = config.REMOVE_PROBABILITY
    ):
        if not average_degree >= 0:
            raise ValueError(f"average_degree = {average_degree} is not a non-negative number")
        if not 0 <= remove_probability <= 1:
            raise ValueError(f"remove_probability = {remove_probability} is not in [0, 1]")

        self._average_degree: float = average_degree
        self._allow_remove: bool = allow_remove
        self._directed: bool = directed
        self._node_attribute: tp.Optional[str] = node_attribute
        self._edge_attribute: tp.Optional[str] = edge_attribute
        self._remove_probability: float = remove_probability

        self._rng: np.random.Generator = np.random.default_rng(seed)
        self._sinks: tp.List[Sink] = list()

        self._nodes: tp.List[int] = list()
        self._edges: tp.Dict[int, tp.Tuple[int, int]] = dict()
        self._next_node_id: int = 0
        self._next_edge_id: int = 0
        self._event_count: int = 0
        self._started: bool = False

        self._logger = logging.getLogger("RandomGenerator")

    @property
    def event_count(self) -> int:
        return self._event_count

    @property
    def edges(self) -> tp.Dict[int, tp.Tuple[int, int]]:
        return dict(self._edges)

    @property
    def sinks(self) -> tp.List[Sink]:
        return list(self._sinks)

    def add_sink(self, sink: tp.Union[Sink, nx.Graph]):
        if isinstance(sink, nx.Graph):
            sink = NetworkxSink(sink)
        self._sinks.append(sink)

    def remove_sink(self, sink: tp.Union[Sink, nx.Graph]):
        if isinstance(sink, nx.Graph):
            sink = NetworkxSink(sink)
        self._sinks.remove(sink)

    def clear_sinks(self):
        self._sinks.clear()

    def begin(self):
        self._nodes.clear()
        self._edges.clear()
        self._event_count = 0
        self._next_node_id = max(
            (i.next_free_id() for i in self._sinks if isinstance(i, NetworkxSink)), default=0
        )
        self._started = True
        self._logger.info(
            f"Starting generation. Average degree = {self._average_degree}, "
            f"allow remove = {self._allow_remove}, directed = {self._directed}."
        )

        first, second = self._add_node(), self._add_node()
        self._add_edge(first, second)

    def next_events(self) -> bool:
        if not self._started:
            raise RuntimeError("begin() must be called before next_events()")

        self._event_count += 1
        if self._allow_remove and self._edges and self._rng.random() < self._remove_probability:
            ids = list(self._edges)
            self._remove_edge(ids[self._rng.integers(len(ids))])
            return True

        existing = list(self._nodes)
        new_node = self._add_node()
        p = min(1.0, self._average_degree / (2 * len(existing))) if existing else 0.0
        for node in existing:
            if self._rng.random() < p:
                if self._directed and self._rng.random() < 0.5:
                    self._add_edge(node, new_node)
                else:
                    self._add_edge(new_node, node)
        return True

    def end(self):
        self._logger.info(
            f"Generation is finished after {self._event_count} events. "
            f"Generated {len(self._nodes)} nodes, {len(self._edges)} edges."
        )

    def _random_attributes(self, name: tp.Optional[str]) -> tp.Dict[str, float]:
        return {} if name is None else {name: float(self._rng.random())}

    def _add_node(self) -> int:
        node_id = self._next_node_id
        self._next_node_id += 1
        self._nodes.append(node_id)
        attributes = self._random_attributes(self._node_attribute)
        for sink in self._sinks:
            sink.node_added(node_id, dict(attributes))
        self._logger.debug(f"Node {node_id} added.")
        return node_id

    def _add_edge(self, source: int, target: int):
        edge_id = self._next_edge_id
        self._next_edge_id += 1
        self._edges[edge_id] = (source, target)
        attributes = self._random_attributes(self._edge_attribute)
        for sink in self._sinks:
            sink.edge_added(edge_id, source, target, self._directed, dict(attributes))
        self._logger.debug(f"Edge {edge_id} ({source}, {target}) added.")

    def _remove_edge(self, edge_id: int):
        source, target = self._edges.pop(edge_id)
        for sink in self._sinks:
            sink.edge_removed(edge_id)
        self._logger.debug(f"Edge {edge_id} ({source}, {target}) removed.")
