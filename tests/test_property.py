"""Tests for the Property model and builders."""

from typing import Any

import pytest
from pydantic import ValidationError

from jcard.exceptions import EmptyCollectionError, JCardParseError
from jcard.parsing.property import ParsedProperty
from jcard.property import Property
from jcard.structured import Address, TelephoneType


def test_parameters_shorthand() -> None:
    """Test a single string is accepted in place of a list of values."""
    prop = Property(
        name="tel",
        parameters={"type": "voice", "x-list": ["a", "b"], "x-tuple": ("c",)},
        value_type="uri",
        values=["tel:+1-555-555-5555"],
    )
    assert prop.parameters == {
        "type": ["voice"],
        "x-list": ["a", "b"],
        "x-tuple": ["c"],
    }
    assert prop.to_jcard() == [
        "tel",
        {"type": "voice", "x-list": ["a", "b"], "x-tuple": "c"},
        "uri",
        "tel:+1-555-555-5555",
    ]


@pytest.mark.parametrize(
    "parameters",
    [
        {"pref": 1},
        {"type": [1]},
        {"type": []},
        {"type": {"a": "b"}},
        ["type"],
    ],
)
def test_invalid_parameters(parameters: Any) -> None:
    """Test parameters that can't be encoded are rejected."""
    with pytest.raises(ValidationError):
        Property(name="fn", parameters=parameters, values=["X"])


@pytest.mark.parametrize(
    "values",
    [
        [None],
        [{"a": "b"}],
        [[]],
        ["a", ["b", []]],
        [float("nan")],
        [float("inf")],
        ["a", [float("-inf")]],
        "not a list",
    ],
)
def test_invalid_values(values: Any) -> None:
    """Test values that can't be encoded are rejected."""
    with pytest.raises(ValidationError):
        Property(name="fn", values=values)


def test_empty_values() -> None:
    """Test a property without values can't be encoded."""
    prop = Property(name="fn", values=[])
    with pytest.raises(EmptyCollectionError):
        prop.to_jcard()

    prop = Property.new_fn("X")
    prop.values.clear()
    with pytest.raises(EmptyCollectionError):
        prop.to_jcard()


def test_multi_value_splicing() -> None:
    """Test multiple values are encoded at the level of the property."""
    prop = Property.new_multivalued("categories", ["rust", "serde"])
    assert prop.to_jcard() == ["categories", {}, "text", "rust", "serde"]


def test_structured_flattening() -> None:
    """Test a single element structured value is encoded as a bare value."""
    prop = Property.new("fn", ["A"])
    assert prop.values == [["A"]]
    assert prop.to_jcard() == ["fn", {}, "text", "A"]


def test_from_jcard() -> None:
    """Test decoding a property model from a jCard property."""
    prop = Property.from_jcard(["x-karma-points", {"pref": "1"}, "integer", 42])
    assert prop == Property(
        name="x-karma-points",
        parameters={"pref": ["1"]},
        value_type="integer",
        values=[42],
    )
    assert prop.to_parsed() == ParsedProperty(
        name="x-karma-points",
        parameters={"pref": ["1"]},
        value_type="integer",
        values=[42],
    )

    with pytest.raises(JCardParseError):
        Property.from_jcard(["fn", {}, "text", None])


def test_get_parameter() -> None:
    """Test looking up parameters ignoring case."""
    prop = Property.new_fn("X", {"LANGUAGE": "en", "type": ["work", "home"]})
    assert prop.get_parameter("language") == ["en"]
    assert prop.get_parameter_value("Language") == "en"
    assert prop.get_parameter("type") == ["work", "home"]
    assert prop.get_parameter("pref") is None
    assert prop.get_parameter_value("pref") is None
    with pytest.raises(ValueError):
        prop.get_parameter_value("type")


def test_new_fn() -> None:
    """Test creating a formatted name property."""
    assert Property.new_fn("John Doe").to_jcard() == ["fn", {}, "text", "John Doe"]


def test_new_email() -> None:
    """Test creating an email property."""
    prop = Property.new_email("jcard@example.com", {"type": "work"})
    assert prop.to_jcard() == [
        "email",
        {"type": "work"},
        "text",
        "jcard@example.com",
    ]


def test_new_org() -> None:
    """Test creating plain and structured organization properties."""
    assert Property.new_org("Jcard").to_jcard() == ["org", {}, "text", "Jcard"]
    assert Property.new_org(["Jcard", "Python development"]).to_jcard() == [
        "org",
        {},
        "text",
        ["Jcard", "Python development"],
    ]


@pytest.mark.parametrize(
    ("phone_type", "expected"),
    [
        (TelephoneType.VOICE, "voice"),
        (TelephoneType.FAX, "fax"),
        ("cell", "cell"),
    ],
)
def test_new_tel(phone_type: Any, expected: str) -> None:
    """Test creating a telephone property as a uri."""
    prop = Property.new_tel(phone_type, "+1-555-555-5555")
    assert prop.to_jcard() == [
        "tel",
        {"type": expected},
        "uri",
        "tel:+1-555-555-5555",
    ]


def test_new_tel_replaces_type() -> None:
    """Test the telephone type replaces any type parameter."""
    parameters = {"type": ["home", "cell"], "pref": "1"}
    prop = Property.new_tel(TelephoneType.VOICE, "+1-555-555-5555", parameters)
    assert prop.parameters == {"type": ["voice"], "pref": ["1"]}
    assert parameters == {"type": ["home", "cell"], "pref": "1"}


def test_new_adr() -> None:
    """Test creating an address property."""
    address = Address(street_address="Main St", locality="Springfield")
    prop = Property.new_adr(address, {"pref": "1"})
    assert prop.to_jcard() == [
        "adr",
        {"pref": "1"},
        "text",
        ["", "", "Main St", "Springfield", "", "", ""],
    ]
