"""The Vcard model, a collection of properties describing a person or entity.

This is an example of decoding a jCard from JSON text:
```python
from pathlib import Path
from jcard.vcard import Vcard

filename = Path("example/contact.json")
with filename.open() as jcard_file:
    vcard = Vcard.from_json(jcard_file.read())
    print(f"Contact has version {vcard.version}")
```

You can encode a vCard as jCard JSON text calling the `to_json()` method:

```python
from jcard.property import Property

vcard = Vcard()
vcard.push(Property.new_fn("J. Doe"))
print(vcard.to_json())
```

The `version` property is not held in `properties`. It is pulled out of
the properties when decoding and is written as the first property when
encoding.
"""

from __future__ import annotations

import logging
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from .parsing.component import ParsedVcard, encode_content, parse_content
from .property import Property
from .structured import Address

__all__ = ["Vcard"]

_LOGGER = logging.getLogger(__name__)

_VERSION = "4.0"


class Vcard(BaseModel):
    """A vCard and its properties."""

    model_config = ConfigDict(validate_assignment=True)

    version: str = _VERSION
    """The vCard version from the first `version` property.

    When decoding a jCard without a version property this is empty.
    """

    properties: list[Property] = Field(default_factory=list)
    """The vCard properties, excluding the version property."""

    def push(self, prop: Union[Property, Address]) -> None:
        """Append a property to the vCard.

        An address is appended as an `adr` property.
        """
        if isinstance(prop, Address):
            prop = Property.new_adr(prop)
        elif not isinstance(prop, Property):
            raise TypeError(
                f"Expected a Property or Address, got {type(prop).__name__}"
            )
        self.properties.append(prop)

    def get_properties(self, name: str) -> list[Property]:
        """Return all properties with the specified name, ignoring case."""
        return [prop for prop in self.properties if prop.name.lower() == name.lower()]

    def to_jcard(self) -> list[Any]:
        """Encode the vCard as a jCard JSON array."""
        _LOGGER.debug("Encoding vcard with %d properties", len(self.properties))
        parsed = ParsedVcard(
            version=self.version,
            properties=[prop.to_parsed() for prop in self.properties],
        )
        return parsed.jcard()

    def to_json(self, indent: int | None = None) -> str:
        """Encode the vCard as jCard JSON text."""
        return encode_content(self.to_jcard(), indent=indent)

    @classmethod
    def from_jcard(cls, node: Any) -> Vcard:
        """Decode a vCard from a jCard JSON array.

        Will raise a JCardParseError on failure.
        """
        parsed = ParsedVcard.from_jcard(node)
        _LOGGER.debug("Decoded vcard with %d properties", len(parsed.properties))
        return cls(
            version=parsed.version,
            properties=[Property.from_parsed(prop) for prop in parsed.properties],
        )

    @classmethod
    def from_json(cls, content: str) -> Vcard:
        """Decode a vCard from jCard JSON text."""
        return cls.from_jcard(parse_content(content))
