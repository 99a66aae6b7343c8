"""Library for decoding and encoding the raw rfc7095 jCard structure.

The jCard format is a JSON array with two elements, the string "vcard" and
an array of properties:

  [
    "vcard",
    [
      ["version", {}, "text", "4.0"],
      ["fn", {}, "text", "J. Doe"],
      ["categories", {}, "text", "work", "friends"]
    ]
  ]

Each property is an array of at least four elements: the property name, an
object of parameters, the value type, and one or more values. The values
are spliced into the property array rather than nested in another array.

This library converts between that structure and simple dataclasses, and
reports detailed errors with the position of any malformed node. It does
not attempt to interpret the meaning of the properties themselves, which
is done by the pydantic models elsewhere.
"""
