"""Library for decoding and encoding jCard property values.

A single value slot in a jCard property may hold a string, a boolean, a
number or a nested array of values, depending on the value type of the
property. For example:

  ["fn", {}, "text", "J. Doe"]
  ["x-karma-points", {}, "integer", 42]
  ["x-grade", {}, "float", 1.3]
  ["x-use-rust", {}, "boolean", true]
  ["org", {}, "text", ["ABC, Inc.", "North American Division"]]

The JSON encoding is untyped, so the value is decoded based on the shape of
the JSON node alone and held as the matching python type. A nested array is
a structured value and is held as a list of values, which may themselves be
structured.
"""

from __future__ import annotations

import math
from typing import Any, Union

from jcard.exceptions import (
    EmptyCollectionError,
    InvalidShapeError,
    InvalidValueError,
    JCardEncodeError,
)

from .const import INTEGER_MAX, INTEGER_MIN

__all__ = [
    "PropertyValue",
    "decode_value",
    "encode_value",
]

PropertyValue = Union[str, bool, int, float, list["PropertyValue"]]
"""A single property value, where a list is a structured value."""

_JSON_KINDS: list[tuple[type, str]] = [
    (str, "string"),
    (bool, "boolean"),
    (int, "integer"),
    (float, "float"),
    (list, "array"),
    (tuple, "array"),
    (dict, "object"),
]


def json_kind(node: Any) -> str:
    """Return a human readable name for the kind of a JSON node."""
    if node is None:
        return "null"
    for node_type, name in _JSON_KINDS:
        if isinstance(node, node_type):
            return name
    return type(node).__name__


def child_location(location: str, key: int | str) -> str:
    """Return the location of an element nested inside location."""
    if isinstance(key, int):
        return f"{location}[{key}]"
    return f"{location}[{key!r}]"


def decode_value(node: Any, location: str = "value") -> PropertyValue:
    """Decode a single JSON node as a property value.

    The node kinds are tried in a fixed order: string, boolean, integer,
    float then array. A boolean must be tested before an integer since it
    is also an int in python. Integers that do not fit in 64 bits are held
    as a float. NaN and infinite numbers have no JSON representation.
    """
    if isinstance(node, str):
        return node
    if isinstance(node, bool):
        return node
    if isinstance(node, int):
        if INTEGER_MIN <= node <= INTEGER_MAX:
            return node
        try:
            node = float(node)
        except OverflowError as err:
            raise InvalidValueError(
                "number out of range", location=location, detailed_error=str(err)
            ) from err
    if isinstance(node, float):
        if not math.isfinite(node):
            raise InvalidValueError(
                f"invalid value {node!r}, expected a finite number",
                location=location,
            )
        return node
    if isinstance(node, (list, tuple)):
        if not node:
            raise EmptyCollectionError(
                "structured value must have at least one element", location=location
            )
        return [
            decode_value(item, child_location(location, i))
            for i, item in enumerate(node)
        ]
    raise InvalidShapeError(
        f"invalid type {json_kind(node)}, expected a string, boolean, number or array value",
        location=location,
        detailed_error=repr(node),
    )


def encode_value(value: PropertyValue) -> Any:
    """Encode a property value as a JSON node.

    A structured value with a single element is encoded as that element,
    omitting the array, as recommended by rfc7095 section 3.3.1.3.
    """
    if isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (list, tuple)):
        if not value:
            raise EmptyCollectionError("Empty structured value")
        if len(value) == 1:
            return encode_value(value[0])
        return [encode_value(item) for item in value]
    raise JCardEncodeError(
        f"Unable to encode property value of type {type(value).__name__}: {value!r}"
    )
