"""
Orchestration between the schema pipeline and a view.

The controller runs file check -> format detection -> parsing, keeps the
resulting model, and turns every failure into a message for the view.
"""

from pathlib import Path
from typing import Optional, Union

from .codegen import MySQLGenerator, SQLGenerator
from .core.schema import SchemaModel
from .core.validator import SchemaValidator
from .errors import (
    FileAccessError,
    GenerationError,
    InvalidInputError,
    ParsingError,
    UnsupportedFormatError,
    ValidationError,
)
from .logging_config import get_logger
from .parsers import select_parser
from .utils import check_file, detect_format
from .view import SchemaView

logger = get_logger(__name__)


class SchemaController:
    """Mediates between the schema pipeline and a SchemaView."""

    def __init__(
        self,
        view: SchemaView,
        generator: Optional[SQLGenerator] = None,
        validator: Optional[SchemaValidator] = None,
    ):
        """
        Initialize the controller.

        Args:
            view: Where results and errors are reported
            generator: SQL generator (defaults to MySQLGenerator)
            validator: Schema validator (defaults to SchemaValidator)
        """
        self.view = view
        self.generator = generator or MySQLGenerator()
        self.validator = validator or SchemaValidator()
        self.schema: Optional[SchemaModel] = None

    def handle_schema_upload(
        self, file_path: Union[str, Path, None], format_hint: Optional[str] = None
    ) -> Optional[SchemaModel]:
        """
        Load a schema file and store the parsed model.

        A failed upload leaves any previously stored model in place.

        Args:
            file_path: Schema file chosen by the user
            format_hint: Format token overriding extension detection

        Returns:
            The parsed model, or None if loading failed
        """
        try:
            path = check_file(file_path)
            format_token = format_hint or detect_format(path)
            parser = select_parser(format_token)

            schema = parser.parse(path)
            self.schema = schema

            self.view.report_summary(schema)
            return schema

        except ParsingError as e:
            self.view.report_error(f"Schema could not be parsed: {e}")
        except (InvalidInputError, UnsupportedFormatError) as e:
            self.view.report_error(f"Invalid input: {e}")
        except FileAccessError as e:
            self.view.report_error(f"File upload failed: {e}")
        except Exception:
            logger.exception("Unexpected error while loading %s", file_path)
            self.view.report_error("An unexpected error occurred. Please try again.")
        return None

    def handle_generate(self, schema: Optional[SchemaModel] = None) -> Optional[str]:
        """
        Validate a model and generate its CREATE TABLE statement.

        Args:
            schema: Model to use (defaults to the stored model)

        Returns:
            DDL text, or None if validation or generation failed
        """
        target = schema if schema is not None else self.schema
        try:
            self.validator.validate(target)
            ddl = self.generator.generate_create_table(target)
        except ValidationError as e:
            self.view.report_error(f"Schema is not valid: {e}")
            return None
        except GenerationError as e:
            self.view.report_error(f"SQL generation failed: {e}")
            return None
        except Exception:
            logger.exception("Unexpected error while generating DDL")
            self.view.report_error("An unexpected error occurred. Please try again.")
            return None

        self.view.report_success(f"Generated CREATE TABLE statement for '{target.name}'.")
        return ddl
