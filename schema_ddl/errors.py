"""
Error taxonomy for schema ingestion and DDL generation.

Every failure raised by the core derives from SchemaDDLError so that
front ends can catch the whole family in one place.
"""


class SchemaDDLError(Exception):
    """Base exception for all schema-ddl errors."""

    pass


class InvalidInputError(SchemaDDLError):
    """Raised when a null or empty format token or file reference is supplied."""

    pass


class FileAccessError(SchemaDDLError):
    """Raised when a file is missing, not a regular file, or unreadable."""

    pass


class UnsupportedFormatError(SchemaDDLError):
    """Raised for a file extension or format token outside the supported set."""

    pass


class ParsingError(SchemaDDLError):
    """Raised when a document does not match the shape of its declared format."""

    pass


class ValidationError(SchemaDDLError):
    """Raised when a schema model violates a structural invariant."""

    pass


class GenerationError(SchemaDDLError):
    """Raised for an unexpected failure while building DDL text."""

    pass
