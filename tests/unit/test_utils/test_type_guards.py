from collections import ChainMap, OrderedDict, UserString, deque
from types import MappingProxyType
from typing import Any

import pytest

from sqlpilot.utils.type_guards import is_binding_map, is_sequence_value


@pytest.mark.parametrize("value", [[], [1], (1, 2), range(3), deque([1])], ids=repr)
def test_is_sequence_value_true(value: Any) -> None:
    assert is_sequence_value(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "",
        "abc",
        UserString("abc"),
        b"abc",
        bytearray(b"x"),
        memoryview(b"x"),
        {"a": 1},
        {1},
        frozenset(),
        None,
        1,
        (x for x in [1]),
    ],
    ids=repr,
)
def test_is_sequence_value_false(value: Any) -> None:
    assert is_sequence_value(value) is False


@pytest.mark.parametrize("value", [{}, {"a": 1}, OrderedDict(), MappingProxyType({}), ChainMap({})], ids=repr)
def test_is_binding_map_true(value: Any) -> None:
    assert is_binding_map(value) is True


@pytest.mark.parametrize("value", [[], [("a", 1)], (), "a", None, 1], ids=repr)
def test_is_binding_map_false(value: Any) -> None:
    assert is_binding_map(value) is False
