import logging
import typing as tp

import networkx as nx

from graph_generator.src.config import config
from graph_generator.src.config.config import AttributeNames
from graph_generator.src.generator.random_generator import RandomGenerator
from graph_generator.src.generator.sink import NetworkxSink
from graph_generator.src.structures.graph_elements import Edge, Node

_logger = logging.getLogger("GraphHelpers")


def apply_to_edges(graph: nx.Graph, function: tp.Callable[[Edge], tp.Any]):
    """
    Вызывает function для каждого ребра графа. Исключение из function
    прерывает обход, уже обработанные ребра остаются измененными.
    """
    directed = graph.is_directed()
    if graph.is_multigraph():
        edges = [((u, v, k), data) for u, v, k, data in graph.edges(keys=True, data=True)]
    else:
        edges = [((u, v), data) for u, v, data in graph.edges(data=True)]
    for key, data in edges:
        function(Edge(key, directed, data))


def apply_to_nodes(graph: nx.Graph, function: tp.Callable[[Node], tp.Any]):
    for key, data in list(graph.nodes(data=True)):
        function(Node(key, data))


def _edge_identity(key, directed: bool):
    # у неориентированного ребра networkx может вернуть концы в любом порядке
    return key if directed else (frozenset(key[:2]),) + tuple(key[2:])


def count_nodes_where(graph: nx.Graph, predicate: tp.Callable[[Node], bool]) -> int:
    return sum(1 for key, data in graph.nodes(data=True) if predicate(Node(key, data)))


def generate_graph(
        graph: nx.Graph,
        event_count: int,
        avg_degree: float,
        allow_remove: bool = False,
        directed: bool = False,
        add_weight: bool = False,
        names: AttributeNames = config.DEFAULT_NAMES,
        seed: tp.Optional[int] = None
) -> RandomGenerator:
    """
    Достраивает graph случайным генератором за event_count шагов.

    :param graph: граф networkx, в который добавляются вершины и ребра
    :param event_count: число шагов генерации
    :param avg_degree: средняя степень вершины
    :param allow_remove: разрешено ли удалять ребра на шаге генерации
    :param directed: ориентированы ли ребра (должно совпадать с graph.is_directed())
    :param add_weight: добавить ли ребрам целый вес из [0, 9]
    :param names: имена атрибутов веса и расстояния
    :param seed: зерно генератора случайных чисел
    :return: генератор, которым построен граф; на нем можно продолжить next_events()
    """
    if event_count < 0:
        raise ValueError(f"event_count = {event_count} < 0")
    if not avg_degree >= 0:
        raise ValueError(f"avg_degree = {avg_degree} is not a non-negative number")
    if directed != graph.is_directed():
        raise ValueError(
            f"directed = {directed}, but graph is {'directed' if graph.is_directed() else 'undirected'}"
        )

    generator = RandomGenerator(
        avg_degree,
        allow_remove,
        directed,
        edge_attribute=names.weight if add_weight else None,
        seed=seed
    )
    sink = NetworkxSink(graph)
    generator.add_sink(sink)
    generator.begin()
    for _ in range(event_count):
        generator.next_events()
    generator.end()

    if add_weight:
        # переводятся только ребра этого запуска, старые ребра графа не трогаются
        created = {_edge_identity(sink.edge_key(i), directed) for i in generator.edges}

        # генератор выдает числа из [0, 1)
        def scale(edge: Edge):
            if _edge_identity(edge.key, directed) not in created:
                return
            weight = edge.get_attribute(names.weight).as_float(strict=True)
            edge.set_attribute(names.weight, int(weight * config.WEIGHT_SCALE))

        apply_to_edges(graph, scale)

    _logger.info(
        f"Graph is generated: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges."
    )
    return generator


def reset_dijkstra_distance(graph: nx.Graph, names: AttributeNames = config.DEFAULT_NAMES):
    """
    Ставит всем вершинам расстояние -1: алгоритм Дейкстры не работает
    с отрицательными весами, поэтому -1 означает "расстояние не найдено".
    """
    apply_to_nodes(graph, lambda n: n.set_attribute(names.distance, config.DISTANCE_SENTINEL))


def fill_dijkstra_distance(graph: nx.Graph, source, names: AttributeNames = config.DEFAULT_NAMES):
    reset_dijkstra_distance(graph, names)
    lengths = nx.single_source_dijkstra_path_length(graph, source, weight=names.weight)
    for node, length in lengths.items():
        graph.nodes[node][names.distance] = length
    _logger.info(f"Distances from {source!r} are found for {len(lengths)} of {graph.number_of_nodes()} nodes.")
