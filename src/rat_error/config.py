"""
Configuration providers for rat_error defaults.

A provider resolves a namespace (e.g. "structure") to a loose options mapping
that Structure.create understands, or None when nothing configures it.

Providers
- MappingConfigProvider: in-memory namespace -> options store (tests, embedders).
- LayeredConfigProvider: environment > TOML > unset.

Source of truth
- rat_error.core.constants for the namespace, env prefix and file names.

Import DAG discipline
- Depends on stdlib and rat_error.core only.

Notes
- TOML search (no explicit path): ./rat_error.toml table [<namespace>], then
  ./pyproject.toml under [tool.rat_error.<namespace>].
- Environment: RAT_ERROR_<NAMESPACE>_NODE, _PREFIX, _KEYS (comma-separated).
  Empty variables are ignored.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rat_error.core.constants import APP_NAME, CONFIG_FILENAME, ENV_PREFIX, KEYS_ENV_SEPARATOR
from rat_error.core.errors import ConfigError

__all__ = [
    "MappingConfigProvider",
    "LayeredConfigProvider",
    "default_provider",
]

logger = logging.getLogger(__name__)


class MappingConfigProvider:
    """
    In-memory configuration store keyed by namespace.

    Examples:
        >>> p = MappingConfigProvider({"structure": {"node": "error", "keys": ["code"]}})
        >>> p.get_env("structure")
        {'node': 'error', 'keys': ['code']}
        >>> p.get_env("other") is None
        True
    """

    def __init__(self, env: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._env: dict[str, dict[str, Any]] = {ns: dict(cfg) for ns, cfg in (env or {}).items()}

    def get_env(self, namespace: str) -> dict[str, Any] | None:
        cfg = self._env.get(namespace)
        return dict(cfg) if cfg is not None else None

    def put_env(self, namespace: str, cfg: Mapping[str, Any]) -> None:
        self._env[namespace] = dict(cfg)

    def delete_env(self, namespace: str) -> None:
        self._env.pop(namespace, None)


@dataclass(frozen=True)
class LayeredConfigProvider:
    """
    Resolve namespaces from environment variables and TOML files.

    Attributes:
        path (str | os.PathLike[str] | None): Explicit TOML file. When None the
            working directory is searched (rat_error.toml, then pyproject.toml).
        env_prefix (str): Prefix for environment overrides.

    Notes:
        Precedence is env > TOML, applied per option. get_env returns None when
        neither source mentions the namespace.
    """

    path: str | os.PathLike[str] | None = None
    env_prefix: str = ENV_PREFIX

    def get_env(self, namespace: str) -> dict[str, Any] | None:
        """
        Resolve a namespace applying precedence: environment > TOML.

        Args:
            namespace: Namespace to resolve, e.g. "structure".

        Returns:
            dict[str, Any] | None: Options mapping, or None if unset everywhere.

        Raises:
            ConfigError: If an explicit path is missing or not valid TOML.
        """
        from_toml = self.from_toml(namespace)
        from_env = self.from_env(namespace)
        if from_toml is None and from_env is None:
            return None
        cfg = dict(from_toml or {})
        cfg.update(from_env or {})
        return cfg

    def from_env(self, namespace: str) -> dict[str, Any] | None:
        """
        Read options for a namespace from environment variables.

        Recognized variables (for namespace "structure"):
            - RAT_ERROR_STRUCTURE_NODE
            - RAT_ERROR_STRUCTURE_PREFIX
            - RAT_ERROR_STRUCTURE_KEYS ("code,message")
        """

        def get(name: str) -> str | None:
            return os.getenv(f"{self.env_prefix}{namespace.upper()}_{name}")

        mapping: dict[str, Any] = {}
        v = get("NODE")
        if v:
            mapping["node"] = v
        v = get("PREFIX")
        if v:
            mapping["prefix"] = v
        v = get("KEYS")
        if v:
            mapping["keys"] = [p.strip() for p in v.split(KEYS_ENV_SEPARATOR) if p.strip()]
        return mapping or None

    def from_toml(self, namespace: str) -> dict[str, Any] | None:
        """
        Read options for a namespace from TOML.

        Search order when `path` is None:
            1) ./rat_error.toml under [<namespace>]
            2) ./pyproject.toml under [tool.rat_error.<namespace>]

        Returns None if no candidate file configures the namespace.
        """
        if self.path is not None:
            p = Path(self.path)
            if not p.exists():
                raise ConfigError(f"config file not found: {p}")
            try:
                data = _load_toml(p)
            except (OSError, ValueError) as exc:
                raise ConfigError(f"cannot read config file {p}: {exc}") from exc
            return _namespace_table(p, data, namespace)

        for p in (Path.cwd() / CONFIG_FILENAME, Path.cwd() / "pyproject.toml"):
            if not p.exists():
                continue
            try:
                data = _load_toml(p)
            except (OSError, ValueError) as exc:
                logger.warning("skipping unreadable config file %s: %s", p, exc)
                continue
            cfg = _namespace_table(p, data, namespace)
            if cfg is not None:
                return cfg
        return None


def _load_toml(p: Path) -> dict[str, Any]:
    with p.open("rb") as fh:
        return tomllib.load(fh)


def _namespace_table(p: Path, data: dict[str, Any], namespace: str) -> dict[str, Any] | None:
    if p.name == "pyproject.toml":
        tool = data.get("tool", {})
        app = tool.get(APP_NAME, {}) if isinstance(tool, dict) else {}
        table = app.get(namespace) if isinstance(app, dict) else None
    else:
        table = data.get(namespace)
    return dict(table) if isinstance(table, dict) else None


def default_provider() -> LayeredConfigProvider:
    """Provider used by Structure.create_from_default_config when none is given."""
    return LayeredConfigProvider()
