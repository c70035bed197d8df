# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionRegistry`, the ordered and name-indexed set of option
declarations shared by the tokenizer, the result builder and the usage renderer.

The registry has a two-phase lifecycle. While it is open, `register()` validates
each `Option` and indexes its names; names are unique across short and long
forms. `freeze()` ends the builder phase: the registry is read-only from then on
and can be shared by any number of sequential parse calls and usage renderings.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from optbuilder.exceptions import (
    ConversionError,
    DuplicateOptionError,
    InvalidOptionError,
    RegistryFrozenError,
)
from optbuilder.logger import logger
from optbuilder.parser.arity import Arity, ArityKind
from optbuilder.parser.option import Option
from optbuilder.parser.parser_types import ValueKind
from optbuilder.parser.utils import coerce_option_values, split_values


class OptionRegistry:
    """Holds option declarations in registration order."""

    def __init__(self, options: list[Option] | None = None) -> None:
        self._options: list[Option] = []
        self._names: dict[str, Option] = {}
        self._short: dict[str, Option] = {}
        self._long: dict[str, Option] = {}
        self._dests: set[str] = set()
        self._frozen: bool = False
        for option in options or []:
            self.register(option)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def short_names(self) -> Mapping[str, Option]:
        return MappingProxyType(self._short)

    @property
    def long_names(self) -> Mapping[str, Option]:
        return MappingProxyType(self._long)

    def freeze(self) -> OptionRegistry:
        """End the registration phase. Further `register()` calls fail."""
        if not self._frozen:
            self._frozen = True
            logger.debug("Registry frozen with %d options", len(self._options))
        return self

    def _validate_names(self, option: Option) -> None:
        if not option.names:
            raise InvalidOptionError("An option needs a short name or a long name")
        if option.short is not None:
            short = option.short
            if len(short) != 1 or short in "-=" or short.isspace():
                raise InvalidOptionError(
                    f"Short name '{short}' must be a single character other than '-' or '='"
                )
        if option.long is not None:
            long = option.long
            if (
                not long
                or long.startswith("-")
                or "=" in long
                or any(char.isspace() for char in long)
            ):
                raise InvalidOptionError(
                    f"Long name '{long}' must be non-empty, without leading '-', '=' or spaces"
                )
        for name in option.names:
            if name in self._names:
                raise DuplicateOptionError(name, self._names[name].name)
        if option.dest in self._dests:
            raise InvalidOptionError(f"Destination '{option.dest}' is already defined")

    def _validate_arity(self, option: Option) -> None:
        if not isinstance(option.arity, Arity):
            raise InvalidOptionError(
                f"Arity of '{option.name}' must be an Arity, got {option.arity!r}"
            )
        kind = option.arity.kind
        if option.optional_arg and kind in (ArityKind.ZERO, ArityKind.FIXED):
            raise InvalidOptionError(
                f"Option '{option.name}' cannot take an optional argument with arity {option.arity}"
            )
        if option.is_flag:
            if option.type not in (bool, None):
                raise InvalidOptionError(
                    f"Flag '{option.name}' takes no value and must be of type bool"
                )
            if option.default is not None:
                raise InvalidOptionError(
                    f"Default value cannot be set for flag '{option.name}'"
                )
        if option.kind == ValueKind.MAP and kind == ArityKind.FIXED and option.arity.count != 2:
            raise InvalidOptionError(
                f"Map option '{option.name}' can only use a fixed arity of 2"
            )

    def _validate_conversion(self, option: Option) -> None:
        separator = option.value_separator
        if separator is not None and len(separator) != 1:
            raise InvalidOptionError(
                f"Value separator of '{option.name}' must be a single character"
            )
        if (
            separator is not None
            and option.kind == ValueKind.SCALAR
            and option.arity.kind == ArityKind.ONE
        ):
            raise InvalidOptionError(
                f"Option '{option.name}' takes a single value and cannot use a value separator"
            )
        if option.converter is not None and not callable(option.converter):
            raise InvalidOptionError(f"Converter of '{option.name}' must be callable")
        if option.default is not None:
            if not isinstance(option.default, str):
                raise InvalidOptionError(
                    f"Default value of '{option.name}' must be a raw string, got {option.default!r}"
                )
            try:
                coerce_option_values(split_values(option.default, separator), option)
            except ConversionError as error:
                raise InvalidOptionError(
                    f"Default value {option.default!r} for '{option.name}' cannot be coerced: {error}"
                ) from error

    def register(self, option: Option) -> Option:
        """
        Validate and add an option.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
            DuplicateOptionError: If one of the option's names is already taken.
            InvalidOptionError: If the declaration is inconsistent.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{option.name}': options are frozen once parsing has started"
            )
        self._validate_names(option)
        self._validate_arity(option)
        self._validate_conversion(option)

        self._options.append(option)
        self._dests.add(option.dest)
        for name in option.names:
            self._names[name] = option
        if option.short:
            self._short[option.short] = option
        if option.long:
            self._long[option.long] = option
        logger.debug("Registered %s", option)
        return option

    def lookup_short(self, char: str) -> Option | None:
        return self._short.get(char)

    def lookup_long(self, name: str) -> Option | None:
        return self._long.get(name)

    def lookup(self, token: str) -> Option | None:
        """
        Resolve a name or token (`a`, `-a`, `--alpha`, `--alpha=1`) to its option.
        """
        name = token.lstrip("-").partition("=")[0]
        if token.startswith("--"):
            return self._long.get(name)
        return self._names.get(name)

    def all(self) -> tuple[Option, ...]:
        """Return the options in registration order."""
        return tuple(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(tuple(self._options))

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __str__(self) -> str:
        return (
            f"OptionRegistry(options={len(self._options)}, "
            f"short={len(self._short)}, long={len(self._long)}, frozen={self._frozen})"
        )

    def __repr__(self) -> str:
        return str(self)
