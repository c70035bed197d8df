from datetime import datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Literal

import pytest

from optbuilder.exceptions import ConversionError
from optbuilder.parser import OptionParser


class RoundingMode(Enum):
    UP = "up"
    DOWN = "down"
    HALF_EVEN = "half_even"


def test_typed_options():
    """Each option is coerced to its declared type."""
    parser = OptionParser(name="test")
    parser.add_option("-a", type=str, help="a")
    parser.add_option("-b", type=bool, help="b")
    parser.add_option("-c", type=bool, help="c")
    parser.add_option("-d", type=int, help="d")
    parser.add_option("-e", type=int, help="e")
    parser.add_option("-f", type=float, help="f")
    parser.add_option("-g", type=Decimal, help="g")
    parser.add_option("-h", type=Path, help="h")
    parser.add_option("-i", type=RoundingMode, help="i")

    argz = "-a John -b -d 21 -e 1980 -f 3.5 -g 3.14159 -h cv.txt -i DOWN and some more"
    result = parser.parse(argz.split())

    assert result.value("a") == "John"
    assert result.value("b") is True
    assert result.value("c") is False
    assert result.value("d") == 21
    assert result.value("e") == 1980
    assert result.value("f") == 3.5
    assert result.value("g") == Decimal("3.14159")
    assert result.value("h") == Path("cv.txt")
    assert result.value("i") == RoundingMode.DOWN
    assert result.arguments() == ["and", "some", "more"]


def test_bool_with_value():
    parser = OptionParser(name="test")
    parser.add_option("--debug", type=bool, arity=1, help="debug")

    assert parser.parse(["--debug", "false"]).value("debug") is False
    assert parser.parse(["--debug=yes"]).value("debug") is True
    with pytest.raises(ConversionError):
        parser.parse(["--debug", "maybe"])


def test_datetime_and_literal():
    parser = OptionParser(name="test")
    parser.add_option("--date", type=datetime, help="date")
    parser.add_option("--speed", type=Literal["fast", "slow"], help="speed")

    result = parser.parse(["--date", "2016-01-01", "--speed", "slow"])
    assert result.value("date") == datetime(2016, 1, 1)
    assert result.value("speed") == "slow"

    with pytest.raises(ConversionError):
        parser.parse(["--speed", "medium"])


def test_conversion_error_details():
    parser = OptionParser(name="test")
    parser.add_option("-d", type=int, help="d")
    parser.add_option("-i", type=RoundingMode, help="i")

    with pytest.raises(ConversionError) as excinfo:
        parser.parse(["-d", "abc"])
    assert excinfo.value.value == "abc"
    assert excinfo.value.type_name == "int"

    with pytest.raises(ConversionError):
        parser.parse(["-i", "down"])


def test_converters():
    """Converters replace type coercion for each raw value."""
    parser = OptionParser(name="test")
    parser.add_option("-a", converter=str.lower, help="a")
    parser.add_option("-b", converter=lambda s: s.upper(), help="b")
    parser.add_option(
        "-d", converter=lambda s: datetime.strptime(s, "%Y-%m-%d"), help="d"
    )

    result = parser.parse("-a John -b Mary -d 2016-01-01 and some more".split())
    assert result.value("a") == "john"
    assert result.value("b") == "MARY"
    assert result.value("d") == datetime(2016, 1, 1)
    assert result.arguments() == ["and", "some", "more"]


def test_converter_applies_to_each_element():
    parser = OptionParser(name="test")
    parser.add_option("-n", arity="+", type=list[int], converter=lambda s: int(s) * 2)

    assert parser.parse(["-n", "1", "2"]).value("n") == [2, 4]


def test_converter_failure():
    parser = OptionParser(name="test")
    parser.add_option("-n", converter=int, help="n")

    with pytest.raises(ConversionError) as excinfo:
        parser.parse(["-n", "x"])
    assert excinfo.value.value == "x"
