"""
XML schema parser.

Reads documents of the form:

    <schema name="Person">
        <fields>
            <field>id</field>
            <field>firstName</field>
        </fields>
    </schema>
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List

from ..core.schema import SchemaModel
from ..errors import ParsingError
from .base import SchemaParser

ROOT_TAG = "schema"
FIELDS_TAG = "fields"
FIELD_TAG = "field"


class XMLSchemaParser(SchemaParser):
    """Parses an XML schema document into a SchemaModel."""

    @property
    def format_name(self) -> str:
        return "xml"

    @property
    def file_extension(self) -> str:
        return ".xml"

    def _decode(self, path: Path, log: logging.Logger) -> SchemaModel:
        try:
            log.debug("Reading XML document from %s", path.name)
            tree = ET.parse(str(path))
        except ET.ParseError as e:
            log.error("Malformed XML in file %s: %s", path.absolute(), e, exc_info=True)
            raise ParsingError(
                f"An error occurred while reading the XML file: {e}. "
                "Please ensure the file is well-formed XML and try again."
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            log.error("Error reading XML file %s: %s", path.absolute(), e, exc_info=True)
            raise ParsingError(
                f"An error occurred while reading the XML file {path.absolute()}: {e}"
            ) from e

        root = tree.getroot()
        if root.tag != ROOT_TAG:
            log.error("Unexpected XML root element <%s>", root.tag)
            raise ParsingError(
                f"Invalid XML schema: root element must be <{ROOT_TAG}>, found <{root.tag}>."
            )

        name = root.get("name")
        if name is None or not name.strip():
            log.error("XML schema root has no 'name' attribute")
            raise ParsingError(
                f"Invalid XML schema: <{ROOT_TAG}> requires a non-empty 'name' attribute."
            )
        log.debug("Extracted schema name: %s", name)

        fields_element = root.find(FIELDS_TAG)
        if fields_element is None:
            log.error("XML schema '%s' has no <%s> element", name, FIELDS_TAG)
            raise ParsingError(
                f"Invalid XML schema: <{ROOT_TAG}> must contain a <{FIELDS_TAG}> element."
            )

        fields = self._extract_fields(fields_element, log)
        return SchemaModel(name=name, fields=tuple(fields))

    def _extract_fields(self, fields_element: ET.Element, log: logging.Logger) -> List[str]:
        """Collect the trimmed text content of each <field> child, in document order."""
        fields = []
        for index, child in enumerate(fields_element):
            if child.tag != FIELD_TAG:
                log.error("Unexpected element <%s> inside <%s>", child.tag, FIELDS_TAG)
                raise ParsingError(
                    f"Invalid XML schema: <{FIELDS_TAG}> may only contain <{FIELD_TAG}> "
                    f"elements, found <{child.tag}>."
                )
            field_name = "".join(child.itertext()).strip()
            log.debug("Field[%d] = %s", index, field_name)
            fields.append(field_name)
        return fields
