"""Library for handling the rfc7095 jCard document.

A jCard is an array of two elements, the "vcard" header and the array of
properties. The first "version" property is pulled out of the properties
and held separately, then written back as the first property on encode.

Components created here have no semantic meaning, but hold all the
data needed to interpret based on the type (e.g. by a pydantic model)

Note: rfc7095 requires exactly one version property as the first element of
the properties. Neither the position nor the number of version properties
is enforced here. Only the first version property found is removed and any
later duplicates remain as ordinary properties.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from jcard.exceptions import (
    InvalidLengthError,
    InvalidShapeError,
    InvalidValueError,
    JCardEncodeError,
    JCardParseError,
)

from .const import ATTR_VCARD, ATTR_VERSION, VERSION_VALUE_TYPE
from .property import ParsedProperty
from .value import PropertyValue, child_location, json_kind

__all__ = [
    "ParsedVcard",
    "parse_content",
    "encode_content",
]

_LOGGER = logging.getLogger(__name__)

_PROPERTIES_LOCATION = "properties"
_VERSION_TYPE = "a string version property"


@dataclass
class ParsedVcard:
    """An rfc7095 jCard."""

    version: str = ""
    properties: list[ParsedProperty] = field(default_factory=list)

    def jcard(self) -> list[Any]:
        """Encode the jCard as a JSON array, with the version property first."""
        version = ParsedProperty(
            name=ATTR_VERSION,
            value_type=VERSION_VALUE_TYPE,
            values=[self.version],
        )
        return [
            ATTR_VCARD,
            [version.jcard(), *(prop.jcard() for prop in self.properties)],
        ]

    @classmethod
    def from_jcard(cls, node: Any) -> ParsedVcard:
        """Decode a ParsedVcard from a jCard JSON array.

        Will raise a JCardParseError on failure.
        """
        if not isinstance(node, list):
            raise InvalidShapeError(
                f"invalid type {json_kind(node)}, expected an rfc7095 jCard array",
                detailed_error=repr(node),
            )
        if not node:
            raise InvalidLengthError(
                'a non-empty array starting with a "vcard" header', index=0
            )
        if not isinstance(header := node[0], str) or header != ATTR_VCARD:
            raise InvalidValueError(
                f'invalid value {header!r}, expected a "{ATTR_VCARD}" header string',
                location=child_location("jcard", 0),
            )
        if len(node) < 2:
            raise InvalidLengthError(
                "an array of jCard properties as the second element", index=1
            )
        if not isinstance(node[1], list):
            raise InvalidShapeError(
                f"invalid type {json_kind(node[1])}, expected an array of jCard properties",
                location=_PROPERTIES_LOCATION,
                detailed_error=repr(node[1]),
            )
        if len(node) > 2:
            _LOGGER.debug("Ignoring %d trailing jCard elements", len(node) - 2)

        properties = [
            ParsedProperty.from_jcard(item, child_location(_PROPERTIES_LOCATION, i))
            for i, item in enumerate(node[1])
        ]
        version = ""
        for i, prop in enumerate(properties):
            if prop.name.lower() != ATTR_VERSION:
                continue
            version = _version_value(
                prop.values, child_location(_PROPERTIES_LOCATION, i)
            )
            _LOGGER.debug("Found jCard version %s at index %d", version, i)
            del properties[i]
            break
        return cls(version=version, properties=properties)


def _version_value(values: list[PropertyValue], location: str) -> str:
    """Return the string value of the version property."""
    if len(values) != 1:
        raise InvalidLengthError(
            "exactly one value in the jCard version property",
            index=len(values),
            location=location,
        )
    value = values[0]
    if isinstance(value, list):
        if len(value) != 1:
            raise InvalidLengthError(
                "a non-structured version property",
                index=len(value),
                location=location,
            )
        value = value[0]
    if not isinstance(value, str):
        raise InvalidShapeError(
            f"invalid type {json_kind(value)}, expected {_VERSION_TYPE}",
            location=location,
            detailed_error=repr(value),
        )
    return value


def _reject_constant(constant: str) -> Any:
    """Reject the non-standard NaN and Infinity literals."""
    raise JCardParseError(
        "Failed to parse jCard contents",
        detailed_error=f"invalid JSON number {constant}",
    )


def parse_content(content: str) -> Any:
    """Parse jCard JSON text into the raw JSON structure."""
    try:
        return json.loads(content, parse_constant=_reject_constant)
    except json.JSONDecodeError as err:
        raise JCardParseError(
            "Failed to parse jCard contents", detailed_error=str(err)
        ) from err


def encode_content(node: Any, indent: int | None = None) -> str:
    """Encode the raw JSON structure as jCard JSON text."""
    try:
        return json.dumps(node, indent=indent, ensure_ascii=False, allow_nan=False)
    except ValueError as err:
        raise JCardEncodeError(f"Failed to encode jCard contents: {err}") from err
