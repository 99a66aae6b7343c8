"""Tests for building property parameters."""

from typing import Any

import pytest

from jcard.parameters import (
    SORT_AS,
    TYPE,
    get_parameter,
    normalize_parameters,
    parameters,
)


def test_parameters() -> None:
    """Test building parameters from strings and iterables of strings."""
    assert parameters() == {}
    assert parameters({"language": "en"}) == {"language": ["en"]}
    assert parameters(
        {"language": "en", "type": ("work", "voice")},
        sort_as=["foo", "bar"],
        pref="1",
    ) == {
        "language": ["en"],
        "type": ["work", "voice"],
        SORT_AS: ["foo", "bar"],
        "pref": ["1"],
    }


@pytest.mark.parametrize(
    "value",
    [1, None, [], ["a", 1], {"a": "b"}],
)
def test_invalid_parameters(value: Any) -> None:
    """Test parameter values must be one or more strings."""
    with pytest.raises(ValueError):
        parameters({"type": value})
    with pytest.raises(ValueError):
        parameters(type=value)


def test_normalize_parameters() -> None:
    """Test normalizing parameters leaves other shapes for validation."""
    assert normalize_parameters(None) == {}
    assert normalize_parameters({TYPE: "voice"}) == {TYPE: ["voice"]}
    assert normalize_parameters(["type"]) == ["type"]


def test_get_parameter() -> None:
    """Test looking up a parameter ignoring case."""
    params = parameters({"TYPE": "voice"})
    assert get_parameter(params, TYPE) == ["voice"]
    assert get_parameter(params, "pref") is None
