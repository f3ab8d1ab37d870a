"""
rat_error core configuration defaults.

Defines the names under which default structure configuration is looked up by
configuration providers. This module is zero-IO and uses only the Python
standard library.

Notes:
    - Providers resolve ``STRUCTURE_NAMESPACE`` to an options mapping (see rat_error.config).
    - Environment variables are named ``ENV_PREFIX + NAMESPACE.upper() + "_" + FIELD``,
      e.g. ``RAT_ERROR_STRUCTURE_KEYS``.
"""

from __future__ import annotations

__all__ = [
    "APP_NAME",
    "STRUCTURE_NAMESPACE",
    "ENV_PREFIX",
    "CONFIG_FILENAME",
    "KEYS_ENV_SEPARATOR",
]

# Application name; also the [tool.<APP_NAME>] table in pyproject.toml.
APP_NAME: str = "rat_error"

# Namespace holding the default Structure options.
STRUCTURE_NAMESPACE: str = "structure"

# Prefix for environment variable overrides.
ENV_PREFIX: str = "RAT_ERROR_"

# Dedicated TOML file searched in the working directory.
CONFIG_FILENAME: str = "rat_error.toml"

# Separator for list-valued environment variables (keys).
KEYS_ENV_SEPARATOR: str = ","
