"""
Structure descriptor: how an error-formatting layer shapes error values.

A Structure names the grouping (``node``) or nesting key (``prefix``) a shaped
error is emitted under, and the ordered attributes (``keys``) to include.
Keys are restricted to grammar.ErrorKey; anything else is dropped with a
warning rather than raising.

Responsibilities
- filter_keys: normalize a key spec and keep only supported keys, order and duplicates preserved.
- Structure.create: build from options (missing option -> None / no keys).
- Structure.create_from_default_config: build from a ConfigProvider's "structure" namespace.
- Structure.update: merge explicit overrides onto an existing Structure.

Notes:
    - Zero-IO apart from the default-config lookup and the warning.
    - Option presence is tracked by StructureOptions.model_fields_set, so
      ``update(prefix=None)`` clears prefix while ``update()`` keeps it.

Examples:
    >>> from rat_error.core.structure import Structure
    >>> s = Structure.create(node="error", keys=["code", "message"])
    >>> s.node, s.prefix, s.key_values()
    ('error', None, ('code', 'message'))
    >>> s.update(prefix="err", keys="line").key_values()
    ('line',)
    >>> s.update() == s
    True
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from pydantic import BaseModel, ConfigDict

from .constants import STRUCTURE_NAMESPACE
from .grammar import ErrorKey, error_key_from_value, is_supported_key
from .typing import ConfigProvider, DiagnosticSink, KeySpec

__all__ = [
    "Structure",
    "StructureOptions",
    "filter_keys",
]

logger = logging.getLogger(__name__)

_OPTION_NAMES = frozenset({"node", "prefix", "keys"})


# ============================================================================
# Key filter
# ============================================================================


def _wrap_keys(keys: KeySpec) -> list[Any]:
    if keys is None:
        return []
    if isinstance(keys, (str, bytes, ErrorKey)):
        return [keys]
    if isinstance(keys, Iterable) and not isinstance(keys, Mapping):
        return list(keys)
    return [keys]


def _parse_key(value: Any) -> ErrorKey | None:
    if not is_supported_key(value):
        return None
    return value if isinstance(value, ErrorKey) else error_key_from_value(value)


def filter_keys(keys: KeySpec, *, sink: DiagnosticSink | None = None) -> tuple[ErrorKey, ...]:
    """
    Restrict a requested key spec to supported error keys.

    Args:
        keys (KeySpec): A single key (str or ErrorKey), an iterable of keys, or None.
        sink (DiagnosticSink | None): Receives the warning; defaults to this module's logger.

    Returns:
        tuple[ErrorKey, ...]: Supported keys in requested order, duplicates kept.

    Notes:
        Never raises. When nothing survives, one warning naming the requested
        keys is emitted and an empty tuple is returned.

    Examples:
        >>> filter_keys(["code", "bogus", "message"])
        (<ErrorKey.CODE: 'code'>, <ErrorKey.MESSAGE: 'message'>)
        >>> filter_keys("line")
        (<ErrorKey.LINE: 'line'>,)
    """
    requested = _wrap_keys(keys)
    filtered = tuple(k for k in map(_parse_key, requested) if k is not None)
    if not filtered:
        (sink if sink is not None else logger).warning(
            "there are no supported keys in %r", requested
        )
    return filtered


# ============================================================================
# Options
# ============================================================================


class StructureOptions(BaseModel):
    """
    Recognized Structure options with per-field presence.

    Attributes:
        node (Any): Grouping identifier, kept verbatim.
        prefix (Any): Nesting key, kept verbatim.
        keys (KeySpec): Unfiltered key spec; filtering happens in Structure.

    Notes:
        ``model_fields_set`` holds the names the caller actually supplied,
        including ones supplied as None. Unknown names are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    node: Any = None
    prefix: Any = None
    keys: Any = None

    @classmethod
    def parse(cls, opts: Any = None, /, **overrides: Any) -> StructureOptions:
        """
        Build options from a mapping (or StructureOptions) plus keyword overrides.

        Args:
            opts (Any): Mapping of options, StructureOptions, or None. Other
                values are treated as no options.
            **overrides (Any): Options applied on top of ``opts``.

        Returns:
            StructureOptions: Parsed options; only supplied names are in model_fields_set.
        """
        if isinstance(opts, StructureOptions):
            data = {name: getattr(opts, name) for name in opts.model_fields_set}
        elif isinstance(opts, Mapping):
            data = {k: v for k, v in opts.items() if k in _OPTION_NAMES}
        else:
            if opts is not None:
                logger.debug("ignoring non-mapping structure options %r", opts)
            data = {}
        data.update((k, v) for k, v in overrides.items() if k in _OPTION_NAMES)
        return cls.model_validate(data)


# ============================================================================
# Structure
# ============================================================================


@dataclass(frozen=True, slots=True)
class Structure:
    """
    Immutable description of how to shape an error.

    Attributes:
        node (Any): Grouping under which the shaped error is emitted.
        prefix (Any): Nesting key for the shaped error.
        keys (tuple[ErrorKey, ...]): Attributes to include, in order.

    Notes:
        node and prefix are independent; typical configurations set one of them.
        Build through create/update so keys are filtered; direct construction
        only normalizes keys to a tuple.

    Examples:
        >>> Structure.create(prefix="err", keys=["code", "message"])  # doctest: +ELLIPSIS
        Structure(node=None, prefix='err', keys=(<ErrorKey.CODE: 'code'>, ...))
    """

    node: Any = None
    prefix: Any = None
    keys: tuple[ErrorKey, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.keys, tuple):
            object.__setattr__(self, "keys", tuple(self.keys))

    @classmethod
    def create(
        cls, opts: Any = None, /, *, sink: DiagnosticSink | None = None, **options: Any
    ) -> Structure:
        """
        Create a Structure from options.

        Args:
            opts (Any): Options mapping (``node``, ``prefix``, ``keys``) or None.
            sink (DiagnosticSink | None): Receives the no-supported-keys warning.
            **options (Any): Options given as keywords; override ``opts``.

        Returns:
            Structure: node/prefix verbatim (None when missing), keys filtered.
        """
        parsed = StructureOptions.parse(opts, **options)
        return cls(
            node=parsed.node,
            prefix=parsed.prefix,
            keys=filter_keys(parsed.keys, sink=sink),
        )

    @classmethod
    def create_from_default_config(
        cls,
        provider: ConfigProvider | None = None,
        *,
        sink: DiagnosticSink | None = None,
    ) -> Structure:
        """
        Create a Structure from the default "structure" configuration.

        Args:
            provider (ConfigProvider | None): Source of default options. Defaults to
                rat_error.config.default_provider() (environment > TOML).
            sink (DiagnosticSink | None): Receives the no-supported-keys warning.

        Returns:
            Structure: Same as ``create(provider.get_env("structure"))``.
        """
        if provider is None:
            # rat_error.config sits above core; import on demand.
            from rat_error.config import default_provider

            provider = default_provider()
        return cls.create(provider.get_env(STRUCTURE_NAMESPACE), sink=sink)

    def update(
        self, opts: Any = None, /, *, sink: DiagnosticSink | None = None, **options: Any
    ) -> Structure:
        """
        Return a copy with the explicitly supplied options applied.

        Args:
            opts (Any): Override mapping or None.
            sink (DiagnosticSink | None): Receives the no-supported-keys warning.
            **options (Any): Overrides given as keywords.

        Returns:
            Structure: New Structure. Supplied fields win (None included);
            supplied keys are filtered and replace the old keys entirely.
        """
        parsed = StructureOptions.parse(opts, **options)
        changes = {name: getattr(parsed, name) for name in parsed.model_fields_set}
        if "keys" in changes:
            changes["keys"] = filter_keys(changes["keys"], sink=sink)
        return replace(self, **changes)

    def key_values(self) -> tuple[str, ...]:
        """Serialized (lower_snake) values of ``keys``, in order."""
        return tuple(k.value for k in self.keys)

    def as_options(self) -> dict[str, Any]:
        """Plain options mapping; ``Structure.create(s.as_options()) == s``."""
        return {"node": self.node, "prefix": self.prefix, "keys": list(self.key_values())}
