"""The Property model, a single field of a vCard.

A property has a name (e.g. `fn`), parameters (e.g. `{"pref": ["1"]}`), a
value type (e.g. `text`) and one or more values. Each value is a string,
boolean, integer, float, or a structured value held as a list of values.

Properties are usually created with one of the builder methods:

```python
from jcard.property import Property
from jcard.structured import Address, TelephoneType

Property.new_fn("J. Doe")
Property.new_tel(TelephoneType.VOICE, "+1-555-555-5555", {"pref": "1"})
Property.new_adr(Address(street_address="Main St", locality="Springfield"))
Property.new_multivalued("categories", ["work", "friends"])
```
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .exceptions import JCardError
from .parameters import Parameters, get_parameter, normalize_parameters
from .parsing.property import ParsedProperty
from .parsing.value import PropertyValue, decode_value
from .structured import Address, Telephone, format_telephone

__all__ = ["Property"]

_TEXT = "text"
_URI = "uri"
_TEL_PREFIX = "tel:"


def _as_property_value(value: Any) -> Any:
    """Return the property value for a builder argument."""
    if isinstance(value, Address):
        return value.to_value()
    return value


class Property(BaseModel):
    """An entry in a vCard."""

    name: str
    """The property name, e.g. `fn`."""

    parameters: Parameters = Field(default_factory=dict)
    """Parameters such as the language or the preference value.

    A parameter with a single value is encoded as a single string in jCard.
    """

    value_type: str = _TEXT
    """The value type, e.g. `text` or `uri`."""

    values: list[Any]
    """One or more values of the property.

    Multiple values are appended at the level of the property array in the
    jCard format, e.g. `["categories", {}, "text", "work", "friends"]`. A
    structured value is held as a single list value instead and is nested
    as its own array, e.g. `["org", {}, "text", ["ABC, Inc.", "Sales"]]`.
    """

    @field_validator("parameters", mode="before")
    @classmethod
    def _parse_parameters(cls, value: Any) -> Any:
        """Allow a single string in place of a list of parameter values."""
        return normalize_parameters(value)

    @field_validator("values", mode="before")
    @classmethod
    def _parse_values(cls, value: Any) -> list[PropertyValue]:
        """Verify each value has a shape that can be encoded in jCard."""
        if not isinstance(value, (list, tuple)):
            raise ValueError(
                f"Property values must be a list, got {type(value).__name__}"
            )
        result: list[PropertyValue] = []
        for i, item in enumerate(value):
            try:
                result.append(
                    decode_value(_as_property_value(item), location=f"values[{i}]")
                )
            except JCardError as err:
                raise ValueError(str(err)) from err
        return result

    def get_parameter(self, name: str) -> list[str] | None:
        """Return the values of the parameter with the specified name."""
        return get_parameter(self.parameters, name)

    def get_parameter_value(self, name: str) -> str | None:
        """Return the single value of the parameter with the specified name."""
        if not (values := self.get_parameter(name)):
            return None
        if len(values) > 1:
            raise ValueError(
                f"Expected only a single parameter string value, got {values}"
            )
        return values[0]

    def to_parsed(self) -> ParsedProperty:
        """Return the raw parsed property for encoding."""
        return ParsedProperty(
            name=self.name,
            parameters=self.parameters,
            value_type=self.value_type,
            values=self.values,
        )

    def to_jcard(self) -> list[Any]:
        """Encode the property as a jCard property array."""
        return self.to_parsed().jcard()

    @classmethod
    def from_parsed(cls, prop: ParsedProperty) -> Property:
        """Create a property from a raw parsed property."""
        return cls(
            name=prop.name,
            parameters=prop.parameters,
            value_type=prop.value_type,
            values=prop.values,
        )

    @classmethod
    def from_jcard(cls, node: Any) -> Property:
        """Decode a property from a jCard property array.

        Will raise a JCardParseError on failure.
        """
        return cls.from_parsed(ParsedProperty.from_jcard(node))

    @classmethod
    def new(
        cls,
        name: str,
        value: Any,
        parameters: Parameters | dict[str, Any] | None = None,
        value_type: str = _TEXT,
    ) -> Property:
        """Create a new property with a single value."""
        return cls.new_multivalued(name, [value], parameters, value_type)

    @classmethod
    def new_multivalued(
        cls,
        name: str,
        values: list[Any],
        parameters: Parameters | dict[str, Any] | None = None,
        value_type: str = _TEXT,
    ) -> Property:
        """Create a new property with multiple values."""
        return cls(
            name=name,
            parameters=parameters or {},
            value_type=value_type,
            values=values,
        )

    @classmethod
    def new_fn(
        cls, formatted: str, parameters: Parameters | dict[str, Any] | None = None
    ) -> Property:
        """Create a formatted name property."""
        return cls.new("fn", formatted, parameters)

    @classmethod
    def new_adr(
        cls, address: Address, parameters: Parameters | dict[str, Any] | None = None
    ) -> Property:
        """Create a structured postal address property."""
        return cls.new("adr", address, parameters)

    @classmethod
    def new_org(
        cls,
        org: str | list[PropertyValue],
        parameters: Parameters | dict[str, Any] | None = None,
    ) -> Property:
        """Create an organization property.

        The organization is either a name or a structured value with the
        name followed by organizational units.
        """
        return cls.new("org", org, parameters)

    @classmethod
    def new_tel(
        cls,
        phone_type: Telephone,
        number: str,
        parameters: Parameters | dict[str, Any] | None = None,
    ) -> Property:
        """Create a telephone property as a `tel:` uri.

        The `type` parameter is replaced with the telephone type.
        """
        params = normalize_parameters(parameters)
        params["type"] = [format_telephone(phone_type)]
        return cls.new("tel", f"{_TEL_PREFIX}{number}", params, _URI)

    @classmethod
    def new_email(
        cls, email: str, parameters: Parameters | dict[str, Any] | None = None
    ) -> Property:
        """Create an email address property."""
        return cls.new("email", email, parameters)
