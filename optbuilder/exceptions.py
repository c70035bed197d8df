# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by optbuilder.

Declaration problems are raised while options are being registered, parse
problems while an argument vector is being consumed, and conversion problems
while raw strings are coerced into their declared types. Every parse-time
failure aborts the whole parse call; no partial result is returned.

All exceptions inherit from `OptbuilderError`, the base exception for the package.

Exception Hierarchy:
- OptbuilderError
    ├── InvalidOptionError
    │   └── DuplicateOptionError
    ├── RegistryFrozenError
    ├── ParseError
    │   ├── UnknownOptionError
    │   ├── MissingArgumentError
    │   └── UnexpectedValueError
    ├── ConversionError
    └── UsageTemplateError
"""
from __future__ import annotations

from typing import Any


class OptbuilderError(Exception):
    """Base exception for optbuilder."""


class InvalidOptionError(OptbuilderError):
    """Exception raised when an option declaration is rejected."""


class DuplicateOptionError(InvalidOptionError):
    """Exception raised when an option name is already registered."""

    def __init__(self, name: str, existing: str):
        self.name = name
        self.existing = existing
        super().__init__(f"Option name '{name}' is already used by option '{existing}'")


class RegistryFrozenError(OptbuilderError):
    """Exception raised when registering options after parsing has started."""


class ParseError(OptbuilderError):
    """Base exception for errors raised while consuming an argument vector."""


class UnknownOptionError(ParseError):
    """Exception raised when a token names an option that was never declared."""

    def __init__(self, token: str, message: str | None = None):
        self.token = token
        super().__init__(message or f"Unrecognized option '{token}'")


class MissingArgumentError(ParseError):
    """Exception raised when an option cannot collect the values its arity needs."""

    def __init__(self, option: str, message: str | None = None):
        self.option = option
        super().__init__(message or f"Option '{option}' is missing an argument")


class UnexpectedValueError(ParseError):
    """Exception raised when a value is attached to an option that takes none."""

    def __init__(self, option: str, value: str):
        self.option = option
        self.value = value
        super().__init__(
            f"Option '{option}' does not take an argument, but '{value}' was given"
        )


class ConversionError(OptbuilderError, ValueError):
    """Exception raised when a raw value cannot be coerced to its target type."""

    def __init__(self, value: Any, type_name: str, reason: str | None = None):
        self.value = value
        self.type_name = type_name
        self.reason = reason
        message = f"Value '{value}' could not be converted to {type_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UsageTemplateError(OptbuilderError):
    """Exception raised when a usage template references an unknown placeholder."""
