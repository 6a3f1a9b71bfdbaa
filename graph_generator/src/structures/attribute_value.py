import numbers
import typing as tp
from enum import Enum

import numpy as np


class TypeMismatchError(TypeError):
    pass


class AttributeKind(Enum):
    INT = 0
    FLOAT = 1
    STRING = 2
    ABSENT = 3

    @property
    def to_str(self) -> str:
        return {0: "int", 1: "float", 2: "str", 3: "absent"}[self.value]


RawAttribute = tp.Union[int, float, str, None]


class AttributeValue:
    """
    Значение атрибута вершины или ребра: int, float, str или отсутствие значения.
    """

    def __init__(self, kind: AttributeKind, value: RawAttribute = None):
        self._kind: AttributeKind = kind
        self._value: RawAttribute = value

    @staticmethod
    def of(raw) -> "AttributeValue":
        if raw is None:
            return AttributeValue(AttributeKind.ABSENT)
        # bool является подклассом int, но весом или расстоянием не бывает
        if isinstance(raw, (bool, np.bool_)):
            raise TypeMismatchError(f"Unsupported attribute value {raw!r}")
        if isinstance(raw, numbers.Integral):
            return AttributeValue(AttributeKind.INT, int(raw))
        if isinstance(raw, numbers.Real):
            return AttributeValue(AttributeKind.FLOAT, float(raw))
        if isinstance(raw, str):
            return AttributeValue(AttributeKind.STRING, raw)
        raise TypeMismatchError(f"Unsupported attribute value {raw!r} of type {type(raw).__name__}")

    @staticmethod
    def absent() -> "AttributeValue":
        return AttributeValue(AttributeKind.ABSENT)

    @property
    def kind(self) -> AttributeKind:
        return self._kind

    @property
    def is_absent(self) -> bool:
        return self._kind == AttributeKind.ABSENT

    def _mismatch(self, expected: str) -> TypeMismatchError:
        return TypeMismatchError(f"Failed cast {self._kind.to_str} attribute {self._value!r} to {expected}")

    def as_int(self) -> int:
        if self._kind != AttributeKind.INT:
            raise self._mismatch("int")
        return self._value

    def as_float(self, strict: bool = False) -> float:
        allowed = (AttributeKind.FLOAT,) if strict else (AttributeKind.INT, AttributeKind.FLOAT)
        if self._kind not in allowed:
            raise self._mismatch("float")
        return float(self._value)

    def as_str(self) -> str:
        if self._kind != AttributeKind.STRING:
            raise self._mismatch("str")
        return self._value

    def __eq__(self, other):
        if not isinstance(other, AttributeValue):
            return NotImplemented
        return self._kind == other._kind and self._value == other._value

    def __hash__(self):
        return hash((self._kind, self._value))

    def __repr__(self):
        return f"AttributeValue({self._kind.name}, {self._value!r})"
