"""
JSON schema parser.

Reads documents of the form {"name": "...", "fields": ["...", ...]}.
"""

import json
import logging
from pathlib import Path
from typing import Any, List

from ..core.schema import SchemaModel
from ..errors import ParsingError
from .base import SchemaParser


class JSONSchemaParser(SchemaParser):
    """Parses a JSON schema document into a SchemaModel."""

    @property
    def format_name(self) -> str:
        return "json"

    @property
    def file_extension(self) -> str:
        return ".json"

    def _decode(self, path: Path, log: logging.Logger) -> SchemaModel:
        try:
            log.debug("Reading JSON document from %s", path.name)
            with path.open("r", encoding="utf-8-sig") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            log.error("Invalid JSON in file %s: %s", path.absolute(), e, exc_info=True)
            raise ParsingError(
                f"An error occurred while reading the JSON file: {e}. "
                "Please ensure the file is valid JSON and try again."
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            log.error("Error reading JSON file %s: %s", path.absolute(), e, exc_info=True)
            raise ParsingError(
                f"An error occurred while reading the JSON file {path.absolute()}: {e}"
            ) from e

        if not isinstance(document, dict):
            log.error("JSON root is %s, expected an object", type(document).__name__)
            raise ParsingError(
                "Invalid JSON schema: the document root must be an object "
                "with 'name' and 'fields' properties."
            )

        log.debug("Validating required keys 'name' and 'fields'")
        if document.get("name") is None or "fields" not in document:
            log.error("JSON schema missing required 'name' or 'fields'")
            raise ParsingError(
                "Invalid JSON schema: missing required property 'name' or 'fields'. "
                "Please ensure your schema includes both."
            )

        name = self._extract_name(document["name"])
        log.debug("Extracted schema name: %s", name)

        fields_node = document["fields"]
        if not isinstance(fields_node, list):
            log.warning(
                "'fields' must be an array but was %s", type(fields_node).__name__
            )
            raise ParsingError(
                "Invalid JSON schema: 'fields' must be an array of field names."
            )

        fields = self._extract_fields(fields_node, log)
        return SchemaModel(name=name, fields=tuple(fields))

    def _extract_name(self, value: Any) -> str:
        if isinstance(value, (dict, list)):
            raise ParsingError("Invalid JSON schema: 'name' must be a string.")

        name = value if isinstance(value, str) else json.dumps(value)
        if not name.strip():
            raise ParsingError("Invalid JSON schema: 'name' must not be empty.")
        return name

    def _extract_fields(self, items: List[Any], log: logging.Logger) -> List[str]:
        """Convert array elements to field names, stringifying non-strings."""
        fields = []
        for index, item in enumerate(items):
            if isinstance(item, str):
                field_name = item
            else:
                field_name = json.dumps(item, ensure_ascii=False)
                log.warning(
                    "Field[%d] is a %s, using its JSON text %s",
                    index,
                    type(item).__name__,
                    field_name,
                )
            log.debug("Field[%d] = %s", index, field_name)
            fields.append(field_name)
        return fields
