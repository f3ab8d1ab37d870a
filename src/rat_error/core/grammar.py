"""
Canonical error key grammar and helpers.

Defines the closed set of error attributes a Structure may select, plus zero-IO
validators used by the key filter and by tests.

Responsibilities
- Define the ErrorKey enum (the Supported-Key Set).
- Provide parse helpers from serialized lower_snake strings to enum members.
- Provide a total membership predicate for arbitrary values.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE (Python constants)
   - Enum serialized values (config files, env vars): lower_snake

2) Closed set:
   - Only ErrorKey members can appear in Structure.keys. Adding an attribute
     means adding a member here; nothing else hard-codes key names.

Examples
--------
>>> from rat_error.core.grammar import (
...     SUPPORTED_KEYS,
...     ErrorKey,
...     error_key_from_value,
...     is_supported_key,
... )
>>> error_key_from_value("message") == ErrorKey.MESSAGE
True
>>> is_supported_key("stacktrace")
False
>>> [k.value for k in SUPPORTED_KEYS]
['code', 'file', 'function', 'line', 'message', 'module']
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Any, Final

from .errors import GrammarError

__all__ = [
    "ErrorKey",
    "SUPPORTED_KEYS",
    "is_lower_snake",
    "assert_lower_snake",
    "error_key_value",
    "error_key_from_value",
    "is_supported_key",
    "ensure_all_enum_values_lower_snake",
]


class ErrorKey(Enum):
    """
    Error attributes a Structure may include when shaping an error.

    Notes:
      Values are what callers pass in options (``keys=["code", "message"]``)
      and what configuration files and environment variables contain.
    """

    # Error code defined by the caller, e.g. "no_entry", 9 or "unexpected".
    CODE = "code"
    # Path of the file that raised the error.
    FILE = "file"
    # Name of the function that raised the error.
    FUNCTION = "function"
    # Line within FILE.
    LINE = "line"
    # Message string passed in by the caller.
    MESSAGE = "message"
    # Module that raised the error.
    MODULE = "module"


SUPPORTED_KEYS: Final[tuple[ErrorKey, ...]] = tuple(ErrorKey)

_VALUE_TO_KEY: Final[dict[str, ErrorKey]] = {k.value: k for k in ErrorKey}

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Args:
      value (str): Candidate string to validate.

    Returns:
      bool: True if value matches lower_snake (e.g., "function"), False otherwise.

    Examples:
      >>> is_lower_snake("message")
      True
      >>> is_lower_snake("Message")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def assert_lower_snake(value: str, what: str = "value") -> None:
    """
    Validate that a string is lower_snake.

    Args:
      value (str): Candidate string to validate.
      what (str): Human-friendly label used in the error message.

    Raises:
      GrammarError: If value is not lower_snake.
    """
    if not is_lower_snake(value):
        raise GrammarError(f"{what} must be lower_snake (got: {value!r})")


def error_key_value(key: ErrorKey) -> str:
    """
    Get the serialized (lower_snake) value for an ErrorKey.

    Args:
      key (ErrorKey): Error key enum.

    Returns:
      str: Lower_snake serialized value (e.g., "line").
    """
    return key.value


def error_key_from_value(s: str) -> ErrorKey:
    """
    Parse a lower_snake key string into an ErrorKey.

    Args:
      s (str): Lower_snake key string.

    Returns:
      ErrorKey: Parsed error key.

    Raises:
      GrammarError: If s is not lower_snake or is not a supported key.
    """
    assert_lower_snake(s, "error key")
    try:
        return _VALUE_TO_KEY[s]
    except KeyError as exc:
        allowed = [k.value for k in SUPPORTED_KEYS]
        raise GrammarError(f"error key must be one of {allowed} (got {s!r})") from exc


def is_supported_key(value: Any) -> bool:
    """
    Tell whether any value names a supported error key.

    Accepts ErrorKey members and their exact string values; every other
    value (other enums, ints, None, differently-cased strings) is unsupported.
    """
    if isinstance(value, ErrorKey):
        return True
    return isinstance(value, str) and value in _VALUE_TO_KEY


def ensure_all_enum_values_lower_snake(enums: Iterable[type[Enum]]) -> None:
    """
    Assert that every enum member's value is lower_snake.

    Args:
      enums (Iterable[type[Enum]]): Iterable of Enum classes to inspect.

    Raises:
      GrammarError: If any enum member's value is not lower_snake.
    """
    for enum_cls in enums:
        for member in enum_cls:
            assert_lower_snake(member.value, f"{enum_cls.__name__}.{member.name}")
