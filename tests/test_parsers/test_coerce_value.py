from datetime import datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Literal

import pytest

from optbuilder.exceptions import ConversionError
from optbuilder.parser import Arity, Option, ValueKind
from optbuilder.parser.utils import (
    coerce_bool,
    coerce_option_values,
    coerce_value,
    get_element_types,
    resolve_kind,
    split_values,
)


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


# --- Tests ---
@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("3.14", float, 3.14),
        ("True", bool, True),
        ("hello", str, "hello"),
        ("", str, ""),
        ("False", bool, False),
        ("3.14159", Decimal, Decimal("3.14159")),
        ("cv.txt", Path, Path("cv.txt")),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int | float, 42),
        ("3.14", int | float, 3.14),
        ("hello", str | int, "hello"),
        ("1", bool | str, True),
        ("7", int | None, 7),
    ],
)
def test_coerce_value_union_success(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ConversionError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be converted" in str(excinfo.value)
    assert excinfo.value.value == "abc"


def test_coerce_value_enum_by_name():
    assert coerce_value("RED", Color) == Color.RED
    assert coerce_value("BLUE", Color) == Color.BLUE


def test_coerce_value_enum_is_case_sensitive():
    with pytest.raises(ConversionError) as excinfo:
        coerce_value("red", Color)
    assert excinfo.value.type_name == "Color"
    assert "RED, GREEN, BLUE" in str(excinfo.value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("TRUE", True),
        ("t", True),
        ("1", True),
        ("yes", True),
        ("on", True),
        ("false", False),
        ("F", False),
        ("0", False),
        ("no", False),
        ("off", False),
    ],
)
def test_coerce_bool(value, expected):
    assert coerce_bool(value) is expected


def test_coerce_bool_invalid():
    with pytest.raises(ConversionError):
        coerce_bool("maybe")


def test_coerce_value_literal():
    assert coerce_value("fast", Literal["fast", "slow"]) == "fast"
    assert coerce_value("2", Literal[1, 2, 3]) == 2
    with pytest.raises(ConversionError):
        coerce_value("medium", Literal["fast", "slow"])


def test_coerce_value_datetime():
    assert coerce_value("2016-01-01", datetime) == datetime(2016, 1, 1)
    assert coerce_value("2024-05-06T07:08:09", datetime) == datetime(2024, 5, 6, 7, 8, 9)
    with pytest.raises(ConversionError):
        coerce_value("not a date", datetime)


@pytest.mark.parametrize(
    "value, target_type",
    [
        ("abc", int),
        ("1.2.3", float),
        ("one", Decimal),
    ],
)
def test_coerce_value_invalid(value, target_type):
    with pytest.raises(ConversionError) as excinfo:
        coerce_value(value, target_type)
    assert excinfo.value.value == value


def test_conversion_error_is_value_error():
    with pytest.raises(ValueError):
        coerce_value("abc", int)


@pytest.mark.parametrize(
    "target_type, expected",
    [
        (str, ValueKind.SCALAR),
        (int, ValueKind.SCALAR),
        (int | None, ValueKind.SCALAR),
        (list, ValueKind.ARRAY),
        (list[int], ValueKind.ARRAY),
        (tuple[int, ...], ValueKind.ARRAY),
        (set[str], ValueKind.ARRAY),
        (dict, ValueKind.MAP),
        (dict[str, int], ValueKind.MAP),
    ],
)
def test_resolve_kind(target_type, expected):
    assert resolve_kind(target_type) == expected


def test_get_element_types():
    assert get_element_types(list) == (str,)
    assert get_element_types(list[int]) == (int,)
    assert get_element_types(tuple[int, ...]) == (int,)
    assert get_element_types(tuple[str, int]) == (str, int)


def test_split_values():
    assert split_values("1,2,3", ",") == ["1", "2", "3"]
    assert split_values("1,2,3", None) == ["1,2,3"]
    assert split_values("1", ",") == ["1"]
    assert split_values("a=b", "=") == ["a", "b"]


def test_coerce_option_values_scalar():
    """A single-valued option reports its last value."""
    option = Option(short="n", type=int)
    value, values = coerce_option_values(["1", "2"], option)
    assert value == 2
    assert values == (1, 2)


def test_coerce_option_values_multi_valued_scalar():
    """A multi-valued scalar option reports its first value."""
    option = Option(short="a", arity=Arity.fixed(2))
    value, values = coerce_option_values(["1", "2"], option)
    assert value == "1"
    assert values == ("1", "2")


def test_coerce_option_values_containers():
    value, _ = coerce_option_values(["3", "1", "3"], Option(short="s", type=set[int]))
    assert value == {1, 3}

    value, _ = coerce_option_values(["3", "4"], Option(short="t", type=tuple[int, ...]))
    assert value == (3, 4)

    value, _ = coerce_option_values(["x", "5"], Option(short="p", type=tuple[str, int]))
    assert value == ("x", 5)

    with pytest.raises(ConversionError):
        coerce_option_values(["x"], Option(short="p", type=tuple[str, int]))


def test_coerce_option_values_converter():
    option = Option(short="u", converter=str.upper)
    assert coerce_option_values(["abc"], option) == ("ABC", ("ABC",))

    option = Option(short="i", converter=int)
    with pytest.raises(ConversionError) as excinfo:
        coerce_option_values(["x"], option)
    assert excinfo.value.type_name == "int"
