import pytest

from rat_error.core.errors import GrammarError
from rat_error.core.grammar import (
    SUPPORTED_KEYS,
    ErrorKey,
    ensure_all_enum_values_lower_snake,
    error_key_from_value,
    error_key_value,
    is_supported_key,
)


def test_all_enum_values_are_lower_snake() -> None:
    ensure_all_enum_values_lower_snake([ErrorKey])


def test_supported_keys_are_the_six_error_attributes() -> None:
    assert [k.value for k in SUPPORTED_KEYS] == [
        "code",
        "file",
        "function",
        "line",
        "message",
        "module",
    ]


def test_error_key_round_trip() -> None:
    for key in ErrorKey:
        assert error_key_from_value(error_key_value(key)) is key


@pytest.mark.parametrize("bad", ["Code", "stack trace", ""])
def test_error_key_from_value_rejects_non_lower_snake(bad: str) -> None:
    with pytest.raises(GrammarError, match="lower_snake"):
        error_key_from_value(bad)


def test_error_key_from_value_rejects_unknown_key() -> None:
    with pytest.raises(GrammarError, match="must be one of"):
        error_key_from_value("stacktrace")


def test_grammar_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        error_key_from_value("bogus")


@pytest.mark.parametrize(
    "value,expected",
    [
        (ErrorKey.LINE, True),
        ("module", True),
        ("MODULE", False),
        ("bogus", False),
        (None, False),
        (1, False),
    ],
)
def test_is_supported_key(value: object, expected: bool) -> None:
    assert is_supported_key(value) is expected
