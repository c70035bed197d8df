# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds the typed, immutable `ParseResult` from the raw values collected by the
tokenizer.

`ResultBuilder` walks every declared option in registration order and:
- synthesizes a raw occurrence from `default` when the option is absent,
- reports a zero value (`False`, `None`, empty container) when it is absent
  without a default,
- reports `True` (or an empty container) for an option present without a value,
  without coercing anything,
- otherwise coerces the collected raw values with `coerce_option_values()`.

`ParseResult` is queried by short name, long name or dest, with or without
leading dashes:

    result.has_option("-v")
    result.value("--level")
    result.values("files")
    result.arguments()
"""
from __future__ import annotations

from copy import copy
from dataclasses import replace
from typing import Any, Iterator, Mapping, Sequence, get_origin

from optbuilder.parser.option import Option
from optbuilder.parser.parser_types import Occurrence, OptionValue, ValueKind
from optbuilder.parser.registry import OptionRegistry
from optbuilder.parser.tokenizer import TokenizedArgs
from optbuilder.parser.utils import coerce_option_values, split_values


def _detach(value: Any) -> Any:
    if isinstance(value, (list, dict, set)):
        return copy(value)
    return value


class ParseResult:
    """
    Immutable result of one parse call.

    Holds one `OptionValue` per declared option and the ordered remainder of
    tokens that were not consumed as options or option values.
    """

    def __init__(self, entries: Mapping[str, OptionValue], remainder: Sequence[str]) -> None:
        self._entries: dict[str, OptionValue] = dict(entries)
        self._names: dict[str, str] = {}
        for dest, entry in self._entries.items():
            for name in entry.option.names:
                self._names[name] = dest
        self._remainder: tuple[str, ...] = tuple(remainder)

    def _resolve(self, name: str) -> str:
        key = name.lstrip("-") if name.startswith("-") else name
        if key in self._names:
            return self._names[key]
        if key in self._entries:
            return key
        raise KeyError(f"Unknown option '{name}'")

    def _entry(self, name: str) -> OptionValue:
        return self._entries[self._resolve(name)]

    def option(self, name: str) -> OptionValue:
        """Return a copy of the full entry of an option."""
        entry = self._entry(name)
        return replace(entry, value=_detach(entry.value))

    def has_option(self, name: str) -> bool:
        """True if the option appeared in the argument vector."""
        try:
            return self._entry(name).present
        except KeyError:
            return False

    def value(self, name: str) -> Any:
        """Return the coerced value: the single scalar, a container or a mapping."""
        return _detach(self._entry(name).value)

    def values(self, name: str) -> list[Any]:
        """Return every coerced value of the option in encounter order."""
        return list(self._entry(name).values)

    def count(self, name: str) -> int:
        """Return how many times the option appeared."""
        return self._entry(name).count

    def arguments(self) -> list[str]:
        """Return the tokens that were not consumed as options or values."""
        return list(self._remainder)

    def as_dict(self) -> dict[str, Any]:
        """Return a `{dest: value}` mapping for every declared option."""
        return {dest: _detach(entry.value) for dest, entry in self._entries.items()}

    def __getitem__(self, name: str) -> Any:
        return self.value(name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.value(name)
        except KeyError:
            raise AttributeError(
                f"'{type(self).__name__}' has no option named '{name}'"
            ) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_option(name)

    def __iter__(self) -> Iterator[OptionValue]:
        return iter(self._entries.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return self._entries == other._entries and self._remainder == other._remainder

    def __hash__(self) -> int:
        return hash((tuple(self._entries), self._remainder))

    def __repr__(self) -> str:
        present = ", ".join(
            f"{dest}={entry.value!r}" for dest, entry in self._entries.items() if entry.present
        )
        return f"ParseResult({present}, arguments={list(self._remainder)!r})"


class ResultBuilder:
    """Turns tokenized raw values into a `ParseResult`."""

    def __init__(self, registry: OptionRegistry) -> None:
        self.registry = registry

    def _empty_container(self, option: Option) -> Any:
        if option.kind == ValueKind.MAP:
            return {}
        container = get_origin(option.type) or option.type
        if container in (list, tuple, set, frozenset):
            return container()
        return []

    def _absent_value(self, option: Option) -> Any:
        if option.is_flag:
            return False
        if option.kind == ValueKind.SCALAR:
            return None
        return self._empty_container(option)

    def _bare_value(self, option: Option) -> Any:
        if option.kind == ValueKind.SCALAR:
            return True
        return self._empty_container(option)

    def build_entry(self, option: Option, occurrence: Occurrence | None) -> OptionValue:
        kind = option.kind
        if occurrence is None:
            if option.default is not None:
                raw_values = split_values(option.default, option.value_separator)
                value, values = coerce_option_values(raw_values, option)
                return OptionValue(option, kind, False, False, value, values)
            return OptionValue(option, kind, False, False, self._absent_value(option))

        if option.is_flag:
            return OptionValue(option, kind, True, False, True, (), occurrence.count)
        if not occurrence.values:
            return OptionValue(
                option, kind, True, False, self._bare_value(option), (), occurrence.count
            )
        value, values = coerce_option_values(occurrence.values, option)
        return OptionValue(option, kind, True, True, value, values, occurrence.count)

    def build(self, tokenized: TokenizedArgs) -> ParseResult:
        """
        Build the result for every declared option.

        Raises:
            ConversionError: If a collected or default value cannot be coerced.
        """
        entries = {
            option.dest: self.build_entry(option, tokenized.occurrences.get(option.dest))
            for option in self.registry.all()
        }
        return ParseResult(entries, tokenized.remainder)
