"""
Exception types raised by rat_error.

Structure construction itself never raises: unsupported keys are dropped and
reported through a warning. These types cover the strict helpers and the
configuration layer:
- GrammarError for unknown or malformed error key values.
- ConfigError for explicitly requested configuration sources that cannot be read.

Examples:
    Catch an unknown key from the strict parser.

    >>> from rat_error.core.errors import GrammarError
    >>> from rat_error.core.grammar import error_key_from_value
    >>> try:
    ...     error_key_from_value("stacktrace")
    ... except GrammarError as e:
    ...     msg = str(e)
    >>> "stacktrace" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "RatErrorError",
    "GrammarError",
    "ConfigError",
]


class RatErrorError(Exception):
    """Base class for rat_error exceptions."""


class GrammarError(RatErrorError, ValueError):
    """Error key is not lower_snake or is not a supported key."""


class ConfigError(RatErrorError):
    """
    Raised when an explicitly named configuration source cannot be used.

    Examples:
        - TOML path passed to LayeredConfigProvider does not exist
        - TOML file fails to parse
    """
