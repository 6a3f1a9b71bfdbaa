from dataclasses import dataclass

WEIGHT_ATTRIBUTE_NAME = "weight"
DISTANCE_ATTRIBUTE_NAME = "distance"

# -1 не может совпасть с весом ребра: все веса неотрицательные
DISTANCE_SENTINEL = -1

# генератор выдает веса из [0, 1), после генерации они переводятся в [0, 9]
WEIGHT_SCALE = 10

REMOVE_PROBABILITY = 0.5


@dataclass(frozen=True)
class AttributeNames:
    """
    Имена атрибутов, под которыми хранятся вес ребра и расстояние до вершины.
    """
    weight: str = WEIGHT_ATTRIBUTE_NAME
    distance: str = DISTANCE_ATTRIBUTE_NAME


DEFAULT_NAMES = AttributeNames()
