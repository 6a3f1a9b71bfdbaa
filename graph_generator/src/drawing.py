import matplotlib.pyplot as plt
import networkx as nx

from graph_generator.src.config import config
from graph_generator.src.config.config import AttributeNames


def draw_graph(graph: nx.Graph, names: AttributeNames = config.DEFAULT_NAMES, ax=None, seed=None):
    """
    Рисует граф с подписями вершин и весами ребер. Ребра без веса подписываются пустой строкой.
    """
    if ax is None:
        plt.figure()
        ax = plt.gca()

    pos = nx.random_layout(graph, seed=seed)
    nx.draw(
        graph, pos, ax=ax, edge_color='black', width=1, linewidths=1,
        node_size=500, node_color="pink",
        labels={node: node for node in graph.nodes()},
    )
    nx.draw_networkx_edge_labels(
        graph,
        pos,
        ax=ax,
        edge_labels={(u, v): data.get(names.weight, "") for u, v, data in graph.edges(data=True)},
    )
    return ax
