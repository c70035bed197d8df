from enum import Enum

import pytest

from optbuilder.exceptions import ConversionError, InvalidOptionError
from optbuilder.parser import OptionParser


class TimeUnit(Enum):
    SECONDS = "s"
    HOURS = "h"
    DAYS = "d"


def build_parser() -> OptionParser:
    parser = OptionParser(name="test")
    parser.add_option("-D", arity=2, value_separator="=", help="property")
    parser.add_option("-X", type=dict, help="extended setting")
    parser.add_option("-Z", type=dict[TimeUnit, int], help="durations")
    return parser


def test_map_options():
    parser = build_parser()
    argz = "-Da=b -Dc=d -Xx=y -Xi=j -ZDAYS=2 -ZHOURS=23 and some more".split()

    result = parser.parse(argz)
    assert result.values("D") == ["a", "b", "c", "d"]
    assert result.value("X") == {"x": "y", "i": "j"}
    assert list(result.value("X")) == ["x", "i"]
    assert result.value("Z") == {TimeUnit.DAYS: 2, TimeUnit.HOURS: 23}
    assert result.arguments() == ["and", "some", "more"]


def test_map_values_are_pairs():
    parser = build_parser()

    result = parser.parse(["-Xx=y", "-Xi=j"])
    assert result.values("X") == [("x", "y"), ("i", "j")]


def test_map_last_key_wins():
    parser = build_parser()

    assert parser.parse(["-Xa=1", "-Xa=2"]).value("X") == {"a": "2"}


def test_map_value_may_contain_equals():
    parser = build_parser()

    assert parser.parse(["-Xa=b=c"]).value("X") == {"a": "b=c"}


def test_map_missing_separator():
    parser = build_parser()

    with pytest.raises(ConversionError):
        parser.parse(["-Xfoo"])


def test_map_conversion_errors():
    parser = build_parser()

    with pytest.raises(ConversionError) as excinfo:
        parser.parse(["-ZDAYS=two"])
    assert excinfo.value.value == "two"

    with pytest.raises(ConversionError):
        parser.parse(["-ZWEEKS=2"])


def test_map_with_pair_arity():
    """A map with an arity of two reads alternating keys and values."""
    parser = OptionParser(name="test")
    parser.add_option("-P", "--prop", arity=2, type=dict[str, int], help="property")

    result = parser.parse(["-P", "a", "1", "--prop", "b", "2"])
    assert result.value("prop") == {"a": 1, "b": 2}


def test_map_with_other_fixed_arity():
    parser = OptionParser(name="test")

    with pytest.raises(InvalidOptionError):
        parser.add_option("-P", arity=3, type=dict)
