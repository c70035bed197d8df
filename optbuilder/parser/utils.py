# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for optbuilder parsing.

This module converts the raw strings collected by the tokenizer into the types
declared on each option: scalars (`bool`, `int`, `float`, `Decimal`, `Path`,
`datetime`, `Enum`, `Literal`, unions), arrays (`list[T]`, `tuple[T, ...]`,
`set[T]`) and maps (`dict`, `dict[K, V]`).

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string to an Enum member by name.
- coerce_value: Convert a string to a scalar target type.
- resolve_kind: Classify a declared type as scalar, array or map.
- split_values: Split one token on an option's value separator.
- coerce_option_values: Coerce every raw value collected for an option.
"""
from __future__ import annotations

import types
from collections.abc import Mapping, Sequence
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import EnumMeta
from typing import TYPE_CHECKING, Any, Callable, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

from optbuilder.exceptions import ConversionError
from optbuilder.parser.arity import ArityKind
from optbuilder.parser.parser_types import ValueKind

if TYPE_CHECKING:
    from optbuilder.parser.option import Option

_ARRAY_TYPES = (list, tuple, set, frozenset)
_MAP_TYPES = (dict, Mapping)


def type_name(target_type: Any) -> str:
    """Return a readable name for a type or converter."""
    if get_origin(target_type) is not None:
        return str(target_type).replace("typing.", "")
    return getattr(target_type, "__name__", None) or str(target_type)


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts 'true'/'false' in any case, as well as 't'/'f', '1'/'0', 'yes'/'no'
    and 'on'/'off'.

    Raises:
        ConversionError: If the string is not a recognized boolean.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in {"true", "t", "1", "yes", "on"}:
        return True
    elif normalized in {"false", "f", "0", "no", "off"}:
        return False
    raise ConversionError(value, "bool")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a string to an Enum member by its (case-sensitive) name.

    Raises:
        ConversionError: If the value does not name a member of `enum_type`.
    """
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type[value]
    except KeyError:
        names = ", ".join(enum_type.__members__)
        raise ConversionError(
            value, enum_type.__name__, f"should be one of {{{names}}}"
        ) from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Convert a string to the given scalar target type.

    Handles Literal, Union, Enum, bool, datetime and Decimal; any other type is
    called with the string (`int`, `float`, `Path`, custom classes).

    Raises:
        ConversionError: If conversion fails or the value is invalid.
    """
    if target_type is None or target_type is Any or target_type is str:
        return value

    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        for arg in args:
            if value == arg or value == str(arg):
                return arg
        raise ConversionError(value, type_name(target_type), "not a valid literal")

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except ConversionError:
                continue
        raise ConversionError(value, type_name(target_type))

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ConversionError(value, "datetime", str(error)) from error

    if target_type is Decimal:
        try:
            return Decimal(value.strip())
        except InvalidOperation as error:
            raise ConversionError(value, "Decimal") from error

    try:
        return target_type(value)
    except Exception as error:
        raise ConversionError(value, type_name(target_type), str(error)) from error


def resolve_kind(target_type: Any) -> ValueKind:
    """Classify a declared type as a scalar, an array or a map."""
    if target_type in _MAP_TYPES or get_origin(target_type) in _MAP_TYPES:
        return ValueKind.MAP
    if target_type in _ARRAY_TYPES or get_origin(target_type) in _ARRAY_TYPES:
        return ValueKind.ARRAY
    return ValueKind.SCALAR


def get_element_types(target_type: Any) -> tuple[Any, ...]:
    """
    Return the element type(s) of an array type.

    `list[int]`, `set[int]` and `tuple[int, ...]` give `(int,)`; a fixed-length
    tuple such as `tuple[str, int]` gives one type per position; bare
    containers give `(str,)`.
    """
    args = get_args(target_type)
    if not args:
        return (str,)
    if get_origin(target_type) is tuple and len(args) == 2 and args[1] is Ellipsis:
        return (args[0],)
    return args


def get_map_types(target_type: Any) -> tuple[Any, Any]:
    """Return the (key type, value type) pair of a map type, defaulting to str."""
    args = get_args(target_type)
    if len(args) == 2:
        return args[0], args[1]
    return str, str


def split_values(raw: str, separator: str | None) -> list[str]:
    """Split a single token on `separator`, if one is declared."""
    if separator and separator in raw:
        return raw.split(separator)
    return [raw]


def convert(
    value: str, target_type: Any, converter: Callable[[str], Any] | None = None
) -> Any:
    """Coerce one raw string with `converter` if given, otherwise by type."""
    if converter is None:
        return coerce_value(value, target_type)
    try:
        return converter(value)
    except ConversionError:
        raise
    except Exception as error:
        raise ConversionError(value, type_name(converter), str(error)) from error


def _coerce_array(raw_values: Sequence[str], option: Option) -> tuple[Any, list[Any]]:
    element_types = get_element_types(option.type)
    if len(element_types) == 1:
        typed = [
            convert(raw, element_types[0], option.converter) for raw in raw_values
        ]
    else:
        if len(raw_values) != len(element_types):
            raise ConversionError(
                " ".join(raw_values),
                type_name(option.type),
                f"expected {len(element_types)} values, got {len(raw_values)}",
            )
        typed = [
            convert(raw, element_type, option.converter)
            for raw, element_type in zip(raw_values, element_types)
        ]
    container = get_origin(option.type) or option.type
    if container in (list, tuple, set, frozenset):
        return container(typed), typed
    return list(typed), typed


def _coerce_map(raw_values: Sequence[str], option: Option) -> dict[Any, Any]:
    key_type, value_type = get_map_types(option.type)
    pairs: list[tuple[str, str]] = []
    if option.arity.kind == ArityKind.FIXED and option.arity.count == 2:
        if len(raw_values) % 2:
            raise ConversionError(
                raw_values[-1], type_name(option.type), "missing a value for key"
            )
        pairs = list(zip(raw_values[0::2], raw_values[1::2]))
    else:
        for raw in raw_values:
            key, separator, value = raw.partition("=")
            if not separator:
                raise ConversionError(
                    raw, type_name(option.type), "expected the form key=value"
                )
            pairs.append((key, value))

    mapping: dict[Any, Any] = {}
    for key, value in pairs:
        typed_key = convert(key, key_type)
        mapping[typed_key] = convert(value, value_type, option.converter)
    return mapping


def coerce_option_values(
    raw_values: Sequence[str], option: Option
) -> tuple[Any, tuple[Any, ...]]:
    """
    Coerce all raw values collected for `option`.

    Returns:
        tuple: (value, values) where `value` is the single scalar, the container
        or the mapping reported for the option, and `values` is every coerced
        element in encounter order (key/value pairs for maps).

    Raises:
        ConversionError: If any raw value is incompatible with the declared type
        or the custom converter fails.
    """
    kind = option.kind
    if kind == ValueKind.MAP:
        mapping = _coerce_map(raw_values, option)
        return mapping, tuple(mapping.items())
    if kind == ValueKind.ARRAY:
        container, typed = _coerce_array(raw_values, option)
        return container, tuple(typed)

    typed = [convert(raw, option.type, option.converter) for raw in raw_values]
    if option.arity.is_multi:
        return typed[0], tuple(typed)
    return typed[-1], tuple(typed)
