from __future__ import annotations

from collections import OrderedDict
from decimal import Decimal
from types import MappingProxyType

import pytest

from canonjson.converter import convert
from canonjson.errors import (
    MaxDepthExceededError,
    UnserializableInputError,
    UnsupportedValueError,
)
from canonjson.policy import CanonicalPolicy
from canonjson.values import (
    NULL,
    CanonicalArray,
    CanonicalBool,
    CanonicalInteger,
    CanonicalObject,
    CanonicalString,
)


def test_scalars_map_directly() -> None:
    assert convert(None) == NULL
    assert convert(True) == CanonicalBool(True)
    assert convert(False) == CanonicalBool(False)
    assert convert(0) == CanonicalInteger(0)
    assert convert("text") == CanonicalString("text")


def test_bool_is_not_treated_as_integer() -> None:
    assert convert([True, 1]) == CanonicalArray(
        items=(CanonicalBool(True), CanonicalInteger(1))
    )


def test_object_entries_are_sorted_by_utf8_bytes() -> None:
    ligature = "\N{LATIN SMALL LIGATURE FF}"
    converted = convert({"\U0001f600": 1, ligature: 2, "\xe9": 3, "z": 4, "Z": 5})
    assert isinstance(converted, CanonicalObject)
    # UTF-16 order would put the emoji before the ligature.
    assert converted.keys() == ("Z", "z", "\xe9", ligature, "\U0001f600")


def test_same_pairs_in_any_order_convert_equal() -> None:
    forward = OrderedDict([("a", 1), ("b", 2)])
    backward = OrderedDict([("b", 2), ("a", 1)])
    assert convert(forward) == convert(backward)


def test_read_only_mappings_are_objects() -> None:
    converted = convert(MappingProxyType({"k": [1]}))
    assert converted == CanonicalObject(
        entries=(("k", CanonicalArray(items=(CanonicalInteger(1),))),)
    )


def test_float_and_decimal_are_rejected_with_rendering() -> None:
    with pytest.raises(UnsupportedValueError) as float_info:
        convert([1, 2.5])
    assert float_info.value.rendering == "2.5"
    assert float_info.value.path == "$[1]"

    with pytest.raises(UnsupportedValueError) as decimal_info:
        convert({"n": Decimal("100.00")})
    assert decimal_info.value.rendering == "100.00"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), -0.0, 3.0])
def test_every_float_is_rejected(value: float) -> None:
    with pytest.raises(UnsupportedValueError):
        convert(value)


def test_first_failure_aborts_conversion() -> None:
    with pytest.raises(UnsupportedValueError) as exc_info:
        convert({"a": [0, {"deep key": 0.1}], "b": 0.2})
    assert exc_info.value.path == '$.a[1]["deep key"]'


def test_lone_surrogates_are_rejected() -> None:
    with pytest.raises(UnsupportedValueError, match="not valid Unicode"):
        convert({"a": "\ud800"})
    with pytest.raises(UnsupportedValueError, match="not valid Unicode"):
        convert({"\udfff": 1})


def test_circular_references_are_rejected() -> None:
    looped: list[object] = [1]
    looped.append(looped)
    with pytest.raises(UnserializableInputError, match="Circular reference") as exc_info:
        convert({"x": looped})
    assert exc_info.value.path == "$.x[1]"


def test_shared_subtrees_are_not_cycles() -> None:
    shared = {"v": 1}
    converted = convert([shared, shared])
    assert isinstance(converted, CanonicalArray)
    assert converted.items[0] == converted.items[1]


def test_deep_nesting_does_not_recurse() -> None:
    value: object = 7
    for _ in range(50_000):
        value = [value]
    converted = convert(value)
    for _ in range(50_000):
        assert isinstance(converted, CanonicalArray)
        converted = converted.items[0]
    assert converted == CanonicalInteger(7)


def test_max_depth_counts_containers() -> None:
    policy = CanonicalPolicy(max_depth=2)
    assert convert({"a": [1]}, policy=policy) is not None
    with pytest.raises(MaxDepthExceededError) as exc_info:
        convert({"a": [{"b": 1}]}, policy=policy)
    assert exc_info.value.path == "$.a[0]"


def test_conversion_does_not_mutate_input() -> None:
    source = {"b": [2, 1], "a": {"y": 1, "x": 2}}
    convert(source)
    assert list(source) == ["b", "a"]
    assert source["b"] == [2, 1]


def test_canonical_values_reject_out_of_range_integers() -> None:
    with pytest.raises(UnsupportedValueError):
        CanonicalInteger(2**63)


def test_canonical_object_orders_entries_on_construction() -> None:
    built = CanonicalObject(entries=(("b", NULL), ("a", NULL)))
    assert built.keys() == ("a", "b")
    assert built == CanonicalObject.from_pairs([("a", NULL), ("b", NULL)])
    with pytest.raises(UnserializableInputError, match="Duplicate object key"):
        CanonicalObject.from_pairs([("a", NULL), ("a", CanonicalBool(True))])
