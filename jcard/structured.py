"""Helper types to construct structured property values.

A structured value is a nested array of values with a fixed meaning for
each position, such as the components of a postal address. These types
are typed views over the plain structured value held by a property.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import TYPE_CHECKING, Union

from pydantic import BaseModel

from .exceptions import InvalidStructuredAddress
from .parsing.value import PropertyValue

if TYPE_CHECKING:
    from .property import Property

__all__ = [
    "Address",
    "Telephone",
    "TelephoneType",
    "parse_telephone",
    "format_telephone",
]

_ADDRESS_FIELDS = 7


class Address(BaseModel):
    """A postal address held in the structured value of an `adr` property.

    The components are in the order defined by rfc6350 section 6.3.1. A
    component that is not present is an empty string.
    """

    post_office_box: str = ""
    extended_address: str = ""
    street_address: str = ""
    locality: str = ""
    """The city."""

    region: str = ""
    """The state or province."""

    postal_code: str = ""
    country: str = ""

    def to_value(self) -> list[PropertyValue]:
        """Return the address as a seven element structured value."""
        return [
            self.post_office_box,
            self.extended_address,
            self.street_address,
            self.locality,
            self.region,
            self.postal_code,
            self.country,
        ]

    @classmethod
    def from_values(cls, values: Sequence[str]) -> Address:
        """Create an address from exactly seven string components."""
        if isinstance(values, str) or len(values) != _ADDRESS_FIELDS:
            raise InvalidStructuredAddress(
                f"Invalid structured address, expected {_ADDRESS_FIELDS} components: {values!r}"
            )
        if not all(isinstance(value, str) for value in values):
            raise InvalidStructuredAddress(
                f"Invalid structured address, expected string components: {values!r}"
            )
        (
            post_office_box,
            extended_address,
            street_address,
            locality,
            region,
            postal_code,
            country,
        ) = values
        return cls(
            post_office_box=post_office_box,
            extended_address=extended_address,
            street_address=street_address,
            locality=locality,
            region=region,
            postal_code=postal_code,
            country=country,
        )

    @classmethod
    def from_value(cls, value: PropertyValue) -> Address:
        """Create an address from the structured value of a property."""
        if not isinstance(value, list):
            raise InvalidStructuredAddress(
                f"Invalid structured address, expected a structured value: {value!r}"
            )
        return cls.from_values(value)  # type: ignore[arg-type]

    @classmethod
    def from_property(cls, prop: Property) -> Address:
        """Create an address from a single valued `adr` property."""
        if len(prop.values) != 1:
            raise InvalidStructuredAddress(
                f"Invalid structured address, expected a single value: {prop.values!r}"
            )
        return cls.from_value(prop.values[0])


class TelephoneType(str, enum.Enum):
    """Well known values of the telephone `type` parameter."""

    FAX = "fax"
    VOICE = "voice"

    def __str__(self) -> str:
        return self.value


Telephone = Union[TelephoneType, str]
"""A telephone type, where any other string is an unrecognized type."""


def parse_telephone(value: str) -> Telephone:
    """Parse a telephone type, keeping unrecognized values as is."""
    try:
        return TelephoneType(value)
    except ValueError:
        return value


def format_telephone(value: Telephone) -> str:
    """Return the string form of a telephone type."""
    if isinstance(value, TelephoneType):
        return value.value
    return value
