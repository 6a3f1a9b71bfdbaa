import numpy as np
import pytest

from graph_generator.src.structures.attribute_value import AttributeKind, AttributeValue, TypeMismatchError
from graph_generator.src.structures.graph_elements import Node


@pytest.mark.parametrize(
    "raw, kind",
    [(3, AttributeKind.INT), (np.int64(3), AttributeKind.INT), (0.25, AttributeKind.FLOAT),
     (np.float64(0.25), AttributeKind.FLOAT), ("a", AttributeKind.STRING), (None, AttributeKind.ABSENT)]
)
def test_kind(raw, kind):
    assert AttributeValue.of(raw).kind == kind


@pytest.mark.parametrize("raw", [True, np.bool_(False), [1], {"a": 1}])
def test_unsupported_values(raw):
    with pytest.raises(TypeMismatchError):
        AttributeValue.of(raw)


def test_conversions():
    assert AttributeValue.of(np.int64(-1)).as_int() == -1
    assert type(AttributeValue.of(np.int64(-1)).as_int()) is int
    assert AttributeValue.of(2).as_float() == 2.0
    assert AttributeValue.of(0.5).as_float(strict=True) == 0.5
    assert AttributeValue.of("w").as_str() == "w"
    assert AttributeValue.absent().is_absent


@pytest.mark.parametrize(
    "value, cast",
    [(AttributeValue.of(0.5), "as_int"), (AttributeValue.of("1"), "as_int"), (AttributeValue.of("1"), "as_float"),
     (AttributeValue.of(1), "as_str"), (AttributeValue.absent(), "as_float")]
)
def test_type_mismatch(value, cast):
    with pytest.raises(TypeError):
        getattr(value, cast)()


def test_strict_float():
    with pytest.raises(TypeMismatchError):
        AttributeValue.of(1).as_float(strict=True)


def test_node_attributes():
    data = {"distance": 4}
    node = Node("a", data)

    assert node.get_attribute("distance") == AttributeValue.of(4)
    assert node.get_attribute("weight").is_absent

    node.set_attribute("distance", -1)
    assert data == {"distance": -1}
