"""Constants for jcard parsing library."""

# Related to the rfc7095 document layout
ATTR_VCARD = "vcard"
ATTR_VERSION = "version"
VERSION_VALUE_TYPE = "text"

# Number of fixed elements in a property array before the values start
PROPERTY_FIXED_ELEMENTS = 3
PROPERTY_NAME_INDEX = 0
PROPERTY_PARAMETERS_INDEX = 1
PROPERTY_VALUE_TYPE_INDEX = 2

# Range of a signed 64-bit integer value
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1
