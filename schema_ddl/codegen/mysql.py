"""
MySQL DDL generator.

Produces CREATE TABLE statements from a SchemaModel. Every column is
emitted as VARCHAR(255); map_data_type() is available for callers that
carry generic type names but is not applied to columns.
"""

import logging
from typing import Any, Dict, List, Optional, Set, Union

from ..core.config import GeneratorConfig, load_config
from ..core.schema import SchemaModel
from ..errors import GenerationError, ValidationError
from ..logging_config import get_logger
from .generator import SQLGenerator

logger = get_logger(__name__)

DEFAULT_COLUMN_TYPE = "VARCHAR(255)"
FALLBACK_SQL_TYPE = "TEXT"

# Generic type -> MySQL type
MYSQL_TYPE_MAP = {
    "int": "INT",
    "string": "VARCHAR(255)",
    "bool": "BOOLEAN",
}


class MySQLGenerator(SQLGenerator):
    """Generates MySQL-compatible DDL."""

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def generate_create_table(
        self, schema: SchemaModel, sink: Optional[logging.Logger] = None
    ) -> str:
        """
        Generate a CREATE TABLE statement for the schema.

        The schema is re-checked here so the generator can be used without
        a prior validator pass.

        Args:
            schema: Model holding the table name and ordered fields
            sink: Optional logger receiving diagnostics

        Returns:
            DDL text, e.g. "CREATE TABLE `Person` (\\n    `id` VARCHAR(255)\\n);"

        Raises:
            ValidationError: If the schema is None, unnamed, has no fields,
                or has blank or duplicate field names
            GenerationError: If building the text fails unexpectedly
        """
        log = sink or logger
        fields = self._check_schema(schema, log)

        log.info("Starting CREATE TABLE generation for schema: %s", schema.name)
        log.debug("Schema '%s' has %d fields: %s", schema.name, len(fields), fields)

        try:
            columns = []
            for field_name in fields:
                log.debug("Adding field to CREATE TABLE statement: %s", field_name)
                columns.append({"name": field_name, "type": DEFAULT_COLUMN_TYPE})

            sql = self.template_engine.render_template(
                "create_table",
                {
                    "table_name": schema.name,
                    "columns": columns,
                    "indent": self.config.indent,
                    "nl": self.config.line_ending,
                },
            )
        except Exception as e:
            log.error(
                "Error while generating CREATE TABLE statement for schema: %s",
                schema.name,
                exc_info=True,
            )
            raise GenerationError(
                f"An unexpected error occurred while generating CREATE TABLE "
                f"for schema '{schema.name}': {e}"
            ) from e

        log.info("Successfully generated CREATE TABLE statement for schema: %s", schema.name)
        log.debug("Generated SQL:\n%s", sql)
        return sql

    def _check_schema(self, schema: SchemaModel, log: logging.Logger) -> List[str]:
        if schema is None:
            log.error("Schema is None, cannot generate CREATE TABLE statement.")
            raise ValidationError("Cannot generate SQL: schema is null.")

        name = getattr(schema, "name", None)
        if name is None or not str(name).strip():
            log.error("Schema name is missing.")
            raise ValidationError("Cannot generate SQL: schema name is missing or empty.")

        fields = getattr(schema, "fields", None)
        if fields is None or len(fields) == 0:
            log.error("Schema '%s' has no fields defined.", name)
            raise ValidationError(
                f"Cannot generate SQL: schema '{name}' must contain at least one field."
            )

        seen: Set[str] = set()
        for field_name in fields:
            if field_name is None or not str(field_name).strip():
                log.error("Schema '%s' has a null or empty field name.", name)
                raise ValidationError("Field names cannot be null or empty.")

            normalized = str(field_name).lower()
            if normalized in seen:
                log.error("Duplicate field '%s' detected in schema '%s'", field_name, name)
                raise ValidationError(
                    f"Cannot generate SQL: duplicate field '{field_name}' in schema '{name}'."
                )
            seen.add(normalized)

        return list(fields)

    def map_data_type(
        self, generic_type: Optional[str], sink: Optional[logging.Logger] = None
    ) -> str:
        """
        Map a generic type name to a MySQL column type.

        Matching is case-insensitive: int -> INT, string -> VARCHAR(255),
        bool -> BOOLEAN. Any other name maps to TEXT.

        Raises:
            ValidationError: If generic_type is None or blank
        """
        log = sink or logger
        if generic_type is None or not str(generic_type).strip():
            log.error("Generic type is null or empty.")
            raise ValidationError("Cannot map data type: input type is null or empty.")

        sql_type = MYSQL_TYPE_MAP.get(str(generic_type).strip().lower())
        if sql_type is None:
            log.warning(
                "Unknown generic type '%s'. Defaulting to %s.", generic_type, FALLBACK_SQL_TYPE
            )
            return FALLBACK_SQL_TYPE
        return sql_type

    def generate_constraints(self, schema: SchemaModel) -> str:
        # No key or uniqueness clauses are generated yet
        return ""


def get_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> MySQLGenerator:
    """
    Create the SQL generator.

    Args:
        config: GeneratorConfig, dict of overrides, or None for defaults

    Returns:
        Configured MySQLGenerator
    """
    if config is None or isinstance(config, GeneratorConfig):
        return MySQLGenerator(config)
    if isinstance(config, dict):
        return MySQLGenerator(load_config(custom_config=config))
    raise TypeError(f"Invalid config type: {type(config)}")


def generate_create_table(
    schema: SchemaModel,
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
    sink: Optional[logging.Logger] = None,
) -> str:
    """
    Convenience function to generate a CREATE TABLE statement.

    Args:
        schema: Model to generate DDL for
        config: Optional GeneratorConfig or dict of overrides
        sink: Optional logger receiving diagnostics

    Returns:
        DDL text
    """
    return get_generator(config).generate_create_table(schema, sink=sink)
