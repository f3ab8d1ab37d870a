"""Tests for `Structure.create` and `Structure.create_from_default_config`."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any

import pytest

from rat_error.config import MappingConfigProvider
from rat_error.core.grammar import SUPPORTED_KEYS, ErrorKey
from rat_error.core.structure import Structure, StructureOptions


class RecordingSink:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def warning(self, msg: str, *args: Any) -> None:
        self.messages.append(msg % args)


def test_create_with_node() -> None:
    s = Structure.create(node="error", keys=["code", "message"])
    assert s == Structure(node="error", prefix=None, keys=(ErrorKey.CODE, ErrorKey.MESSAGE))


def test_create_with_prefix() -> None:
    s = Structure.create(prefix="err", keys=["code", "message"])
    assert s == Structure(node=None, prefix="err", keys=(ErrorKey.CODE, ErrorKey.MESSAGE))


def test_create_with_single_key() -> None:
    assert Structure.create(keys="code") == Structure(keys=(ErrorKey.CODE,))


def test_create_from_mapping_matches_keywords() -> None:
    opts = {"node": "error", "keys": ["line", "bogus"]}
    assert Structure.create(opts) == Structure.create(**opts)


def test_keyword_options_override_mapping() -> None:
    s = Structure.create({"node": "a", "keys": "code"}, node="b")
    assert s.node == "b"
    assert s.keys == (ErrorKey.CODE,)


def test_unknown_options_are_ignored() -> None:
    s = Structure.create({"node": "error", "keys": "code", "color": "red", 1: "x"}, depth=3)
    assert s == Structure(node="error", keys=(ErrorKey.CODE,))


def test_node_and_prefix_together() -> None:
    s = Structure.create(node="error", prefix="err", keys=["module"])
    assert (s.node, s.prefix) == ("error", "err")


def test_identifiers_are_kept_verbatim() -> None:
    s = Structure.create(node=ErrorKey.CODE, prefix=("a", 1), keys="code")
    assert s.node is ErrorKey.CODE
    assert s.prefix == ("a", 1)


def test_unhashable_identifiers_are_kept_verbatim() -> None:
    sink = RecordingSink()

    s = Structure.create(node=["error"], prefix={"nest": "err"}, keys="code", sink=sink)

    assert s.node == ["error"]
    assert s.prefix == {"nest": "err"}
    assert sink.messages == []


def test_update_keeps_unhashable_identifier_verbatim() -> None:
    s = Structure.create(node="err", keys="code")
    assert s.update(prefix=["a", "b"]).prefix == ["a", "b"]


@pytest.mark.parametrize("opts", [None, {}, "node=error", 42])
def test_absent_or_malformed_options_yield_empty_structure(opts: Any) -> None:
    sink = RecordingSink()

    s = Structure.create(opts, sink=sink)

    assert s == Structure(node=None, prefix=None, keys=())
    assert len(sink.messages) == 1


def test_structure_is_immutable() -> None:
    s = Structure.create(node="error", keys="code")
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.node = "other"  # type: ignore[misc]


def test_direct_construction_normalizes_keys_to_tuple() -> None:
    s = Structure(node="err", keys=[ErrorKey.CODE])  # type: ignore[arg-type]
    assert s.keys == (ErrorKey.CODE,)


def test_as_options_recreates_structure() -> None:
    s = Structure.create(prefix="err", keys=["message", "line", "message"])
    assert s.as_options() == {"node": None, "prefix": "err", "keys": ["message", "line", "message"]}
    assert Structure.create(s.as_options()) == s


def test_options_track_supplied_fields() -> None:
    opts = StructureOptions.parse({"node": None}, keys="code")
    assert opts.model_fields_set == {"node", "keys"}
    assert StructureOptions.parse(None).model_fields_set == set()
    again = StructureOptions.parse(opts, prefix="p")
    assert again.model_fields_set == {"node", "keys", "prefix"}


def test_create_from_default_config() -> None:
    provider = MappingConfigProvider(
        {"structure": {"node": "error", "prefix": None, "keys": [k.value for k in SUPPORTED_KEYS]}}
    )

    s = Structure.create_from_default_config(provider)

    assert s == Structure(node="error", prefix=None, keys=SUPPORTED_KEYS)


def test_create_from_default_config_equals_create_of_lookup() -> None:
    provider = MappingConfigProvider({"structure": {"prefix": "err", "keys": ["code", "x"]}})
    assert Structure.create_from_default_config(provider) == Structure.create(
        provider.get_env("structure")
    )


def test_create_from_default_config_without_configuration() -> None:
    sink = RecordingSink()

    s = Structure.create_from_default_config(MappingConfigProvider(), sink=sink)

    assert s == Structure()
    assert sink.messages == ["there are no supported keys in []"]


def test_create_from_default_config_uses_layered_provider_by_default(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RAT_ERROR_STRUCTURE_NODE", "error")
    monkeypatch.setenv("RAT_ERROR_STRUCTURE_KEYS", "code, message")
    monkeypatch.delenv("RAT_ERROR_STRUCTURE_PREFIX", raising=False)

    s = Structure.create_from_default_config()

    assert s == Structure(node="error", keys=(ErrorKey.CODE, ErrorKey.MESSAGE))
