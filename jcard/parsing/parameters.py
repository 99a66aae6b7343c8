"""Library for decoding and encoding jCard property parameters.

Parameters are a JSON object mapping the parameter name to either a single
string or an array of strings when the parameter has multiple values:

  ["tel", {"type": "voice"}, "uri", "tel:+1-555-555-5555"]
  ["tel", {"type": ["voice", "fax"]}, "uri", "tel:+1-555-555-5555"]

Parameter values are always held as a list of strings.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from jcard.exceptions import EmptyCollectionError, InvalidShapeError

from .value import child_location, json_kind

__all__ = [
    "decode_parameters",
    "encode_parameters",
]


def _decode_parameter_values(node: Any, location: str) -> list[str]:
    """Decode the value of a single parameter as a list of strings."""
    if isinstance(node, str):
        return [node]
    if not isinstance(node, list):
        raise InvalidShapeError(
            f"invalid type {json_kind(node)}, expected a string or an array of strings",
            location=location,
            detailed_error=repr(node),
        )
    if not node:
        raise EmptyCollectionError(
            "parameter must have at least one value", location=location
        )
    for i, item in enumerate(node):
        if not isinstance(item, str):
            raise InvalidShapeError(
                f"invalid type {json_kind(item)}, expected a string",
                location=child_location(location, i),
                detailed_error=repr(item),
            )
    return list(node)


def decode_parameters(
    node: Any, location: str = "parameters"
) -> dict[str, list[str]]:
    """Decode a JSON object of property parameters."""
    if not isinstance(node, dict):
        raise InvalidShapeError(
            f"invalid type {json_kind(node)}, expected a map from string to one or multiple strings",
            location=location,
            detailed_error=repr(node),
        )
    return {
        key: _decode_parameter_values(value, child_location(location, key))
        for key, value in node.items()
    }


def encode_parameters(parameters: Mapping[str, Sequence[str]]) -> dict[str, Any]:
    """Encode property parameters as a JSON object.

    A parameter with a single value is encoded as a bare string.
    """
    result: dict[str, Any] = {}
    for key, values in parameters.items():
        if not values:
            raise EmptyCollectionError(
                f"Property parameter '{key}' is an empty array"
            )
        if len(values) == 1:
            result[key] = values[0]
        else:
            result[key] = list(values)
    return result
