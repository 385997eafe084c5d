"""
SQL DDL generation.

Turns a validated SchemaModel into CREATE TABLE text.
"""

from .generator import SQLGenerator
from .mysql import (
    MySQLGenerator,
    MYSQL_TYPE_MAP,
    DEFAULT_COLUMN_TYPE,
    FALLBACK_SQL_TYPE,
    get_generator,
    generate_create_table,
)
from .templates import TemplateEngine, TemplateError, quote_identifier

__all__ = [
    "SQLGenerator",
    "MySQLGenerator",
    "MYSQL_TYPE_MAP",
    "DEFAULT_COLUMN_TYPE",
    "FALLBACK_SQL_TYPE",
    "get_generator",
    "generate_create_table",
    "TemplateEngine",
    "TemplateError",
    "quote_identifier",
]
