"""Library for handling rfc7095 properties.

A property is a single field of a vCard such as the formatted name or a
telephone number. In a jCard it is an array with three fixed elements
followed by one or more values:

  ["categories", {}, "text", "work", "friends"]

This library would create a ParsedProperty object with this structure:

  ParsedProperty(
    name='categories',
    parameters={},
    value_type='text',
    values=['work', 'friends'],
  )

Note that the two values are spliced into the property array, unlike a
structured value which is nested as its own array:

  ["org", {}, "text", ["ABC, Inc.", "North American Division"]]

  ParsedProperty(
    name='org',
    parameters={},
    value_type='text',
    values=[['ABC, Inc.', 'North American Division']],
  )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jcard.exceptions import (
    EmptyCollectionError,
    InvalidLengthError,
    InvalidShapeError,
)

from .const import (
    PROPERTY_FIXED_ELEMENTS,
    PROPERTY_NAME_INDEX,
    PROPERTY_PARAMETERS_INDEX,
    PROPERTY_VALUE_TYPE_INDEX,
)
from .parameters import decode_parameters, encode_parameters
from .value import PropertyValue, child_location, decode_value, encode_value, json_kind

_MIN_LENGTH = "an array of at least 4 elements"


@dataclass
class ParsedProperty:
    """An rfc7095 property."""

    name: str
    value_type: str
    values: list[PropertyValue]
    parameters: dict[str, list[str]] = field(default_factory=dict)

    def jcard(self) -> list[Any]:
        """Encode a ParsedProperty as a jCard property array."""
        if not self.values:
            raise EmptyCollectionError(
                f"Property '{self.name}' must have at least one value"
            )
        return [
            self.name,
            encode_parameters(self.parameters),
            self.value_type,
            *(encode_value(value) for value in self.values),
        ]

    @classmethod
    def from_jcard(cls, node: Any, location: str = "property") -> ParsedProperty:
        """Decode a ParsedProperty from a jCard property array.

        Will raise a JCardParseError on failure.
        """
        if not isinstance(node, list):
            raise InvalidShapeError(
                f"invalid type {json_kind(node)}, expected an rfc7095 jCard property",
                location=location,
                detailed_error=repr(node),
            )
        name = _fixed_element(node, PROPERTY_NAME_INDEX, str, "a string", location)
        parameters = decode_parameters(
            _fixed_element(
                node, PROPERTY_PARAMETERS_INDEX, dict, "a parameter map", location
            ),
            child_location(location, PROPERTY_PARAMETERS_INDEX),
        )
        value_type = _fixed_element(
            node, PROPERTY_VALUE_TYPE_INDEX, str, "a string", location
        )

        values: list[PropertyValue] = []
        for i in range(PROPERTY_FIXED_ELEMENTS, len(node)):
            values.append(decode_value(node[i], child_location(location, i)))
        if not values:
            raise EmptyCollectionError(
                f"invalid length {PROPERTY_FIXED_ELEMENTS}, "
                "expected at least one value of the jCard property",
                location=location,
            )

        return cls(
            name=name,
            parameters=parameters,
            value_type=value_type,
            values=values,
        )


def _fixed_element(
    node: list[Any], index: int, node_type: type, expected: str, location: str
) -> Any:
    """Return the fixed property element at index, checking its kind."""
    if index >= len(node):
        raise InvalidLengthError(
            _MIN_LENGTH, index=index, location=location, detailed_error=repr(node)
        )
    element = node[index]
    if not isinstance(element, node_type):
        raise InvalidShapeError(
            f"invalid type {json_kind(element)}, expected {expected}",
            location=child_location(location, index),
            detailed_error=repr(element),
        )
    return element
