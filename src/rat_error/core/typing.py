"""
Typing aliases and collaborator protocols shared across rat_error.

This module contains no runtime logic and is zero-IO.

Notes:
    - Any ``logging.Logger`` satisfies DiagnosticSink.
    - rat_error.config.MappingConfigProvider and LayeredConfigProvider satisfy ConfigProvider.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "KeySpec",
    "OptionsMapping",
    "ConfigProvider",
    "DiagnosticSink",
]

# A single key, a sequence of keys, or None. Kept broad: unsupported entries are filtered out.
KeySpec = Any

# Loose options mapping as read from config sources or passed by callers.
OptionsMapping = Mapping[str, Any]


@runtime_checkable
class ConfigProvider(Protocol):
    """Resolves a configuration namespace to an options mapping, or None when unset."""

    def get_env(self, namespace: str) -> OptionsMapping | None: ...


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receives advisory warnings."""

    def warning(self, msg: str, *args: Any) -> None: ...
