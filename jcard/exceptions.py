"""Exceptions for jcard library."""


class JCardError(Exception):
    """Base exception for all jcard errors."""


class JCardParseError(JCardError):
    """Exception raised when decoding a jCard document.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the offending JSON node. The
    'location' attribute points at the position in the document where the
    error was found, e.g. `properties[2][1]['type']`.
    """

    def __init__(
        self,
        message: str,
        *,
        location: str | None = None,
        detailed_error: str | None = None,
    ) -> None:
        """Initialize the JCardParseError with a message."""
        super().__init__(f"{location}: {message}" if location else message)
        self.message = message
        self.location = location
        self.detailed_error = detailed_error


class InvalidShapeError(JCardParseError):
    """Exception raised when a JSON node has the wrong kind for its position.

    For example an object was expected for the property parameters, but an
    array was found instead.
    """


class InvalidLengthError(JCardParseError):
    """Exception raised when an array has fewer elements than required.

    The 'index' attribute is the 0-based index that could not be read.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int,
        location: str | None = None,
        detailed_error: str | None = None,
    ) -> None:
        """Initialize the InvalidLengthError with the index reached."""
        super().__init__(
            f"invalid length {index}, expected {message}",
            location=location,
            detailed_error=detailed_error,
        )
        self.index = index


class InvalidValueError(JCardParseError):
    """Exception raised when a fixed position does not hold the expected literal."""


class JCardEncodeError(JCardError):
    """Exception raised when a value can't be represented in a jCard document."""


class EmptyCollectionError(JCardError):
    """Exception raised for a collection that must never be empty.

    This covers a property without values, a structured value without
    elements, and a parameter without values. It is raised both when
    decoding and when encoding.

    The 'location' attribute points at the collection when it is known.
    """

    def __init__(self, message: str, *, location: str | None = None) -> None:
        """Initialize the EmptyCollectionError with a message."""
        super().__init__(f"{location}: {message}" if location else message)
        self.message = message
        self.location = location


class InvalidStructuredAddress(JCardError, ValueError):
    """Exception raised when a structured value is not a valid address."""
