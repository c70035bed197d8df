# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Arity`, the number of values an option consumes per occurrence.

Arity values can be written the way they are usually written in option
declarations and are normalized by `Arity.parse()`:

    Arity.parse(0)    → Arity.ZERO           (flag, no value)
    Arity.parse(1)    → Arity.ONE            (exactly one value)
    Arity.parse(3)    → Arity.fixed(3)       (exactly three values)
    Arity.parse("2")  → Arity.fixed(2)
    Arity.parse("+")  → Arity.AT_LEAST_ONE   (one or more values)
    Arity.parse("*")  → Arity.ANY            (zero or more values)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from optbuilder.exceptions import InvalidOptionError


class ArityKind(Enum):
    """Shapes of arity supported by the tokenizer."""

    ZERO = "zero"
    ONE = "one"
    FIXED = "fixed"
    AT_LEAST_ONE = "at_least_one"
    ANY = "any"

    @classmethod
    def _missing_(cls, value: object) -> ArityKind:
        aliases = {"+": "at_least_one", "*": "any", "0": "zero", "1": "one"}
        if isinstance(value, str):
            normalized = value.strip().lower()
            alias = aliases.get(normalized, normalized)
            for member in cls:
                if member.value == alias:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Arity:
    """
    Number of values an option consumes per occurrence.

    Attributes:
        kind (ArityKind): The shape of the arity.
        count (int | None): Exact number of values for `ZERO`, `ONE` and `FIXED`,
            `None` for the variable kinds.
    """

    kind: ArityKind
    count: int | None = None

    ZERO: ClassVar[Arity]
    ONE: ClassVar[Arity]
    AT_LEAST_ONE: ClassVar[Arity]
    ANY: ClassVar[Arity]

    @classmethod
    def fixed(cls, count: int) -> Arity:
        """Return the arity that consumes exactly `count` values."""
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidOptionError(f"Arity must be a non-negative integer, got {count!r}")
        if count == 0:
            return cls.ZERO
        if count == 1:
            return cls.ONE
        return cls(ArityKind.FIXED, count)

    @classmethod
    def parse(cls, value: Any) -> Arity:
        """Normalize an int, a numeric string, '+' or '*' into an `Arity`."""
        if isinstance(value, Arity):
            return value
        if isinstance(value, ArityKind):
            if value == ArityKind.FIXED:
                raise InvalidOptionError("A fixed arity needs a count, use Arity.fixed(n)")
            return {
                ArityKind.ZERO: cls.ZERO,
                ArityKind.ONE: cls.ONE,
                ArityKind.AT_LEAST_ONE: cls.AT_LEAST_ONE,
                ArityKind.ANY: cls.ANY,
            }[value]
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.fixed(value)
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls.fixed(int(text))
            if text == "+":
                return cls.AT_LEAST_ONE
            if text == "*":
                return cls.ANY
        raise InvalidOptionError(
            f"Invalid arity {value!r}: expected an integer, a numeric string, '+' or '*'"
        )

    @property
    def takes_value(self) -> bool:
        return self.kind != ArityKind.ZERO

    @property
    def is_variable(self) -> bool:
        return self.kind in (ArityKind.AT_LEAST_ONE, ArityKind.ANY)

    @property
    def is_multi(self) -> bool:
        """True if one occurrence may carry more than one value."""
        return self.kind in (ArityKind.FIXED, ArityKind.AT_LEAST_ONE, ArityKind.ANY)

    def __str__(self) -> str:
        if self.kind == ArityKind.AT_LEAST_ONE:
            return "+"
        if self.kind == ArityKind.ANY:
            return "*"
        return str(self.count)


Arity.ZERO = Arity(ArityKind.ZERO, 0)
Arity.ONE = Arity(ArityKind.ONE, 1)
Arity.AT_LEAST_ONE = Arity(ArityKind.AT_LEAST_ONE)
Arity.ANY = Arity(ArityKind.ANY)
