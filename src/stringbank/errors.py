"""stringbank exception hierarchy.

All library errors derive from StringBankError. Where an error is also a
standard failure category (lookup, value, attribute), it inherits from the
builtin as well so callers can catch either.

Missing *text* resources are deliberately not represented here: a missing
locale file is a normal condition and yields an empty table.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "PropertyAccessError",
    "ResourceError",
    "ResourceNotFoundError",
    "ResourceReadError",
    "StringBankError",
    "TableFormatError",
]


class StringBankError(Exception):
    """Base exception for all stringbank errors."""


class ResourceError(StringBankError):
    """Failure to resolve or read a bundled resource.

    Attributes:
        entry_name: Bundle entry involved, if known
    """

    def __init__(self, message: str, *, entry_name: str | None = None) -> None:
        """Initialize ResourceError.

        Args:
            message: Error message
            entry_name: Bundle entry involved, if known
        """
        super().__init__(message)
        self.entry_name = entry_name


class ResourceNotFoundError(ResourceError, LookupError):
    """Required resource is not present in the bundle.

    Raised for binary resources, which a correctly packaged deployment
    always ships.
    """


class ResourceReadError(ResourceError):
    """Resource stream could not be read or decoded.

    Fatal for the immediate caller and never retried. The underlying
    OSError or UnicodeDecodeError is chained as __cause__.
    """


class TableFormatError(StringBankError, ValueError):
    """Raw table content could not be interpreted.

    Attributes:
        line: Offending line, if known
    """

    def __init__(self, message: str, *, line: str | None = None) -> None:
        """Initialize TableFormatError.

        Args:
            message: Error message
            line: Offending line, if known
        """
        super().__init__(message)
        self.line = line


class PropertyAccessError(StringBankError, AttributeError):
    """Named property is unknown to, or rejected by, a translatable target.

    Raised by PropertyAccessor implementations. The localization merger
    treats it as non-fatal: it is logged and the remaining lines are applied.

    Attributes:
        property_name: Name of the property that could not be set
    """

    def __init__(self, message: str, *, property_name: str) -> None:
        """Initialize PropertyAccessError.

        Args:
            message: Error message
            property_name: Name of the property that could not be set
        """
        super().__init__(message)
        self.property_name = property_name
