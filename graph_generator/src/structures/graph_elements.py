import typing as tp

from graph_generator.src.structures.attribute_value import AttributeValue, RawAttribute

NodeKey = tp.Hashable
EdgeKey = tp.Tuple[tp.Hashable, ...]


class Node:
    """
    Вершина графа networkx. Атрибуты - это словарь данных самого графа,
    поэтому set_attribute сразу меняет граф.
    """

    def __init__(self, key: NodeKey, attributes: tp.Dict[str, tp.Any]):
        self._key = key
        self._attributes = attributes

    @property
    def key(self) -> NodeKey:
        return self._key

    def get_attribute(self, name: str) -> AttributeValue:
        return AttributeValue.of(self._attributes.get(name))

    def set_attribute(self, name: str, value: RawAttribute):
        self._attributes[name] = value

    def __repr__(self):
        return f"Node({self._key!r})"


class Edge:
    """
    Ребро графа networkx: (u, v) для простых графов и (u, v, k) для мультиграфов.
    """

    def __init__(self, key: EdgeKey, directed: bool, attributes: tp.Dict[str, tp.Any]):
        self._key = key
        self._directed = directed
        self._attributes = attributes

    @property
    def key(self) -> EdgeKey:
        return self._key

    @property
    def source(self) -> NodeKey:
        return self._key[0]

    @property
    def target(self) -> NodeKey:
        return self._key[1]

    @property
    def directed(self) -> bool:
        return self._directed

    def get_attribute(self, name: str) -> AttributeValue:
        return AttributeValue.of(self._attributes.get(name))

    def set_attribute(self, name: str, value: RawAttribute):
        self._attributes[name] = value

    def __repr__(self):
        arrow = "->" if self._directed else "--"
        return f"Edge({self.source!r} {arrow} {self.target!r})"
