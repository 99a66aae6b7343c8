"""Library for diagnostics or debugging information about vCards."""

from __future__ import annotations

from typing import Any

from .parsing.component import ParsedVcard
from .parsing.property import ParsedProperty

__all__ = [
    "redact_jcard",
]


PROPERTY_ALLOWLIST = {
    "version",
    "prodid",
    "rev",
    "kind",
}
REDACT = "***"


def _redact_value(value: Any) -> Any:
    """Return a redacted value, keeping the shape of structured values."""
    if isinstance(value, list):
        return [_redact_value(item) for item in value]
    return REDACT


def redact_property(
    prop: ParsedProperty, property_allowlist: set[str]
) -> ParsedProperty:
    """Return a redacted version of a parsed property."""
    if prop.name.lower() in property_allowlist:
        return prop
    return ParsedProperty(
        name=prop.name,
        parameters={key: [REDACT] * len(values) for key, values in prop.parameters.items()},
        value_type=prop.value_type,
        values=[_redact_value(value) for value in prop.values],
    )


def redact_jcard(
    jcard: Any,
    property_allowlist: set[str] | None = None,
) -> list[Any]:
    """Return a redacted copy of a jCard document.

    Property names, value types and parameter names are kept so that the
    structure of the document can still be debugged.
    """
    parsed = ParsedVcard.from_jcard(jcard)
    if property_allowlist is None:
        property_allowlist = PROPERTY_ALLOWLIST
    allowlist = {name.lower() for name in property_allowlist}
    return ParsedVcard(
        version=parsed.version,
        properties=[redact_property(prop, allowlist) for prop in parsed.properties],
    ).jcard()
