"""
Core package for rat_error structure descriptors (grammar, errors, structure).

## Contracts
- Grammar — ErrorKey enum (the supported error attributes) and parse helpers.
- Structure — immutable descriptor plus create/update and the key filter.
- Errors — GrammarError, ConfigError.

## Notes
- Zero-IO policy: stdlib + pydantic only; default-config lookup goes through
  an injected ConfigProvider.
- Naming policy: enum `.value` and option names are lower_snake.

## Examples
```python
from rat_error.core import ErrorKey, Structure

s = Structure.create(node="error", keys=["code", "message", "stacktrace"])
s.keys  # (ErrorKey.CODE, ErrorKey.MESSAGE); unsupported "stacktrace" is dropped
s.update(node=None, prefix="err").prefix  # 'err'
```
"""

from __future__ import annotations

from .errors import ConfigError, GrammarError, RatErrorError
from .grammar import SUPPORTED_KEYS, ErrorKey, error_key_from_value, is_supported_key
from .structure import Structure, StructureOptions, filter_keys
from .typing import ConfigProvider, DiagnosticSink

__all__ = [
    "ErrorKey",
    "SUPPORTED_KEYS",
    "error_key_from_value",
    "is_supported_key",
    "Structure",
    "StructureOptions",
    "filter_keys",
    "ConfigProvider",
    "DiagnosticSink",
    "RatErrorError",
    "GrammarError",
    "ConfigError",
]
