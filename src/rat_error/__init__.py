"""
rat_error — structure descriptors for shaping error values.

## Responsibilities
- Describe how an error is shaped: grouping node, nesting prefix and the
  ordered error attributes (keys) to include.
- Restrict keys to the supported set (code, file, function, line, message,
  module), dropping the rest with a logged warning.
- Load default structure options from the environment or TOML.

## Public API
- Structure — immutable descriptor with create, create_from_default_config and update.
- ErrorKey, SUPPORTED_KEYS — the supported attributes.
- filter_keys — the key filter used by Structure.
- MappingConfigProvider, LayeredConfigProvider — default-config sources.

## Examples
```python
from rat_error import MappingConfigProvider, Structure

provider = MappingConfigProvider({"structure": {"node": "error", "keys": ["code", "message"]}})
s = Structure.create_from_default_config(provider)
s.update(keys="message").key_values()  # ('message',)
```
"""

from __future__ import annotations

from .config import LayeredConfigProvider, MappingConfigProvider, default_provider
from .core import (
    SUPPORTED_KEYS,
    ConfigError,
    ErrorKey,
    GrammarError,
    RatErrorError,
    Structure,
    StructureOptions,
    filter_keys,
)

__all__ = [
    "Structure",
    "StructureOptions",
    "ErrorKey",
    "SUPPORTED_KEYS",
    "filter_keys",
    "MappingConfigProvider",
    "LayeredConfigProvider",
    "default_provider",
    "RatErrorError",
    "GrammarError",
    "ConfigError",
]
