# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value kinds and per-parse state models for the optbuilder parser.

Contents:
- `ValueKind`: The shape of an option's coerced value (scalar, array or map),
  resolved once from the declared type when the option is registered.
- `Occurrence`: Raw values collected for one option during a single parse call.
  Repeated appearances of the same option accumulate into one occurrence.
- `OptionValue`: The final, coerced entry for one option in a `ParseResult`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from optbuilder.parser.option import Option


class ValueKind(Enum):
    """Shape of the value an option produces."""

    SCALAR = "scalar"
    ARRAY = "array"
    MAP = "map"

    def __str__(self) -> str:
        return self.value


@dataclass
class Occurrence:
    """Tracks the raw values collected for an option during one parse call."""

    option: Option
    values: list[str] = field(default_factory=list)
    count: int = 0
    bare: bool = False

    def add(self, values: list[str]) -> None:
        """Record one appearance of the option carrying `values`."""
        self.count += 1
        self.values.extend(values)

    def add_bare(self) -> None:
        """Record one appearance of the option without a value."""
        self.count += 1
        self.bare = True


@dataclass(frozen=True)
class OptionValue:
    """
    Final state of one option after parsing.

    Attributes:
        option (Option): The declaration this entry belongs to.
        kind (ValueKind): Shape of `value`.
        present (bool): True if the option appeared in the argument vector.
        explicit (bool): True if at least one value was supplied for it.
        value (Any): The coerced single value, list or mapping.
        values (tuple[Any, ...]): Every coerced value, in encounter order.
        count (int): Number of times the option appeared.
    """

    option: Option
    kind: ValueKind
    present: bool
    explicit: bool
    value: Any
    values: tuple[Any, ...] = ()
    count: int = 0
