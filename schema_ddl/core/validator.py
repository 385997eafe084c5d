"""
Structural validation of schema models.

Runs the checks a model must pass before DDL can be generated from it.
"""

import logging
from typing import Optional, Set

from ..errors import ValidationError
from ..logging_config import get_logger
from .schema import SchemaModel

logger = get_logger(__name__)


class SchemaValidator:
    """Checks a SchemaModel for the invariants required by SQL generation."""

    def validate(
        self, schema: Optional[SchemaModel], sink: Optional[logging.Logger] = None
    ) -> None:
        """
        Validate a schema model, stopping at the first failure.

        Checks run in this order: model and name present, name not blank,
        at least one field, no blank field names, no duplicate field names
        (compared case-insensitively).

        Args:
            schema: Model to validate
            sink: Optional logger receiving diagnostics (defaults to module logger)

        Raises:
            ValidationError: If any check fails
        """
        log = sink or logger

        if schema is None or getattr(schema, "name", None) is None:
            log.error("Validation failed: no schema object supplied")
            raise ValidationError(
                "Schema validation failed: no schema object found in the model."
            )

        name = schema.name
        if not str(name).strip():
            log.error("Validation failed: blank schema name")
            raise ValidationError(
                "Schema validation failed: schema name is missing or empty."
            )

        fields = schema.fields
        if fields is None or len(fields) == 0:
            log.error("Validation failed: schema '%s' has no fields", name)
            raise ValidationError(
                f"Schema validation failed: schema '{name}' must contain at least one field."
            )

        for field_name in fields:
            if field_name is None or not str(field_name).strip():
                log.error("Validation failed: schema '%s' has a blank field", name)
                raise ValidationError(
                    f"Schema validation failed: schema '{name}' contains an empty or null field."
                )

        seen: Set[str] = set()
        for field_name in fields:
            normalized = str(field_name).lower()
            if normalized in seen:
                log.error(
                    "Validation failed: duplicate field '%s' in schema '%s'",
                    field_name,
                    name,
                )
                raise ValidationError(
                    f"Schema validation failed: schema '{name}' contains duplicate field '{field_name}'."
                )
            seen.add(normalized)

        log.debug("Schema '%s' passed validation (%d fields)", name, len(fields))


def validate_schema(
    schema: Optional[SchemaModel], sink: Optional[logging.Logger] = None
) -> None:
    """
    Convenience function to validate a schema model.

    Args:
        schema: Model to validate
        sink: Optional logger receiving diagnostics

    Raises:
        ValidationError: If the model is invalid
    """
    SchemaValidator().validate(schema, sink=sink)
