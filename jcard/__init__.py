"""
A library for decoding and encoding rfc7095 jCard, the JSON format for vCard.

```python
from jcard.vcard import Vcard
from jcard.property import Property

vcard = Vcard.from_json('["vcard", [["version", {}, "text", "4.0"]]]')
vcard.push(Property.new_fn("J. Doe"))
print(vcard.to_json())
```
"""

__all__ = [
    "vcard",
    "property",
    "parameters",
    "structured",
    "exceptions",
    "diagnostics",
    "parsing",
]
