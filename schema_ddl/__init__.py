"""
schema-ddl

Parses JSON and XML schema descriptions into a canonical model,
validates it, and generates a MySQL CREATE TABLE statement.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .errors import (
    SchemaDDLError,
    InvalidInputError,
    FileAccessError,
    UnsupportedFormatError,
    ParsingError,
    ValidationError,
    GenerationError,
)
from .core import SchemaModel, SchemaValidator, validate_schema, GeneratorConfig, load_config
from .parsers import SchemaFormat, select_parser, list_supported_formats
from .codegen import MySQLGenerator, get_generator, generate_create_table
from .utils import detect_format, check_file

# Version info
__version__ = "0.1.0"


def parse_schema(
    file_path: Union[str, Path],
    format_hint: Optional[str] = None,
    sink: Optional[logging.Logger] = None,
) -> SchemaModel:
    """
    Parse a schema file into a SchemaModel.

    Args:
        file_path: Path of a .json or .xml schema file
        format_hint: Format token to use instead of the file extension
        sink: Optional logger receiving diagnostics

    Returns:
        The parsed model

    Raises:
        InvalidInputError: If no path or a blank format hint is given
        FileAccessError: If the file is missing or unreadable
        UnsupportedFormatError: If the format is not json or xml
        ParsingError: If the content does not match its format
    """
    path = check_file(file_path, sink=sink)
    format_token = format_hint if format_hint is not None else detect_format(path, sink=sink)
    parser = select_parser(format_token, sink=sink)
    return parser.parse(path, sink=sink)


__all__ = [
    # Pipeline entry points
    "parse_schema",
    "validate_schema",
    "generate_create_table",
    "detect_format",
    "check_file",
    # Model and components
    "SchemaModel",
    "SchemaValidator",
    "SchemaFormat",
    "select_parser",
    "list_supported_formats",
    "MySQLGenerator",
    "get_generator",
    "GeneratorConfig",
    "load_config",
    # Errors
    "SchemaDDLError",
    "InvalidInputError",
    "FileAccessError",
    "UnsupportedFormatError",
    "ParsingError",
    "ValidationError",
    "GenerationError",
]
