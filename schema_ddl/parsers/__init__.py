"""
Schema file parsers.

One parser per supported input format, plus the selector that maps a
format token to its parser.
"""

from .base import SchemaParser
from .json_parser import JSONSchemaParser
from .xml_parser import XMLSchemaParser
from .selector import (
    SchemaFormat,
    select_parser,
    resolve_format,
    list_supported_formats,
    is_format_supported,
)

__all__ = [
    "SchemaParser",
    "JSONSchemaParser",
    "XMLSchemaParser",
    "SchemaFormat",
    "select_parser",
    "resolve_format",
    "list_supported_formats",
    "is_format_supported",
]
