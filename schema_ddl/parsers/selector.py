"""
Parser selection for the supported schema formats.

The set of formats is closed: each SchemaFormat member is bound to
exactly one parser class, and select_parser() dispatches on a format token.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Type

from ..errors import InvalidInputError, UnsupportedFormatError
from ..logging_config import get_logger
from .base import SchemaParser
from .json_parser import JSONSchemaParser
from .xml_parser import XMLSchemaParser

logger = get_logger(__name__)


class SchemaFormat(Enum):
    """Supported schema input formats."""

    JSON = "json"
    XML = "xml"

    @property
    def file_extension(self) -> str:
        return f".{self.value}"


# Single source of truth for format -> parser dispatch
_PARSERS: Dict[SchemaFormat, Type[SchemaParser]] = {
    SchemaFormat.JSON: JSONSchemaParser,
    SchemaFormat.XML: XMLSchemaParser,
}


def list_supported_formats() -> List[str]:
    """Get the supported format tokens."""
    return sorted(fmt.value for fmt in _PARSERS)


def resolve_format(
    format_token: Optional[str], sink: Optional[logging.Logger] = None
) -> SchemaFormat:
    """
    Resolve a format token to a SchemaFormat.

    Args:
        format_token: Token such as "json" or "XML" (case-insensitive)
        sink: Optional logger receiving diagnostics

    Returns:
        Matching SchemaFormat

    Raises:
        InvalidInputError: If the token is None or blank
        UnsupportedFormatError: If the token names no supported format
    """
    log = sink or logger

    if format_token is None or not str(format_token).strip():
        log.error("Schema format is null or empty.")
        raise InvalidInputError(
            "No schema format specified. Please provide a valid format (json or xml)."
        )

    key = str(format_token).strip().lower()
    for schema_format in _PARSERS:
        if schema_format.value == key:
            return schema_format

    available = ", ".join(list_supported_formats())
    log.error("Unsupported schema format requested: %s", format_token)
    raise UnsupportedFormatError(
        f"Unsupported schema format: '{format_token}'. Supported formats are: {available}."
    )


def is_format_supported(format_token: Optional[str]) -> bool:
    """Check if a format token is supported."""
    if format_token is None:
        return False
    return str(format_token).strip().lower() in list_supported_formats()


def select_parser(
    format_token: Optional[str], sink: Optional[logging.Logger] = None
) -> SchemaParser:
    """
    Create the parser for a format token.

    Args:
        format_token: "json" or "xml", matched case-insensitively
        sink: Optional logger receiving diagnostics

    Returns:
        A new parser instance

    Raises:
        InvalidInputError: If the token is None or blank
        UnsupportedFormatError: For any other unsupported token
    """
    schema_format = resolve_format(format_token, sink=sink)
    (sink or logger).info("Schema format requested: %s", schema_format.value)
    return _PARSERS[schema_format]()
