"""Parameters or meta information associated with a property.

Property parameters are additional modifiers on a property to specify extra
information about the value for the property (e.g. language, preference,
type of telephone number, etc).

Property parameters are stored as a map from the lower case parameter name
to one or more string values.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

__all__ = [
    "Parameters",
    "parameters",
    "normalize_parameters",
]

Parameters = dict[str, list[str]]
"""Map of parameter name to one or more parameter values."""

# Parameter names defined in rfc6350 section 5
LANGUAGE = "language"
VALUE = "value"
PREF = "pref"
ALTID = "altid"
PID = "pid"
TYPE = "type"
MEDIATYPE = "mediatype"
CALSCALE = "calscale"
SORT_AS = "sort-as"
GEO = "geo"
TZ = "tz"
LABEL = "label"


def _parameter_values(key: str, value: Any) -> list[str]:
    """Convert a single string or iterable of strings into a list of values."""
    if isinstance(value, str):
        return [value]
    if not isinstance(value, Iterable) or isinstance(value, Mapping):
        raise ValueError(
            f"Parameter '{key}' must be a string or strings, got {type(value).__name__}"
        )
    values = list(value)
    for item in values:
        if not isinstance(item, str):
            raise ValueError(
                f"Parameter '{key}' values must be strings, got {type(item).__name__}"
            )
    if not values:
        raise ValueError(f"Parameter '{key}' must have at least one value")
    return values


def normalize_parameters(value: Any) -> Any:
    """Normalize a map of parameters so that every value is a list of strings.

    Values that are not a map are returned unchanged for further validation.
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        return value
    return {key: _parameter_values(key, item) for key, item in value.items()}


def parameters(
    mapping: Mapping[str, str | Iterable[str]] | None = None, **kwargs: Any
) -> Parameters:
    """Build a parameter map from single strings or iterables of strings.

    Keyword argument names have underscores replaced with dashes so that
    names such as `sort-as` can be passed as `sort_as`:

      parameters({"type": ["work", "voice"]}, pref="1", sort_as="Doe")
    """
    result: Parameters = normalize_parameters(mapping or {})
    for key, value in kwargs.items():
        name = key.replace("_", "-")
        result[name] = _parameter_values(name, value)
    return result


def get_parameter(params: Mapping[str, list[str]], name: str) -> list[str] | None:
    """Return the values of a parameter, matching the name case-insensitively."""
    for key, values in params.items():
        if key.lower() == name.lower():
            return values
    return None
