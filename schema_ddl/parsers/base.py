"""
Base parser interface for all schema input formats.

Defines the contract that every format parser implements and the
checks shared by all of them.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from ..core.schema import SchemaModel
from ..errors import InvalidInputError, ParsingError, ValidationError
from ..logging_config import get_logger

logger = get_logger(__name__)


class SchemaParser(ABC):
    """Abstract base class for schema file parsers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format token handled by this parser (e.g., 'json')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the required file extension, including the dot."""
        pass

    def parse(
        self, file_path: Union[str, Path], sink: Optional[logging.Logger] = None
    ) -> SchemaModel:
        """
        Parse a schema file into a SchemaModel.

        The file must exist and carry this parser's extension; a file with
        the wrong extension is rejected without being opened.

        Args:
            file_path: Path of the schema file
            sink: Optional logger receiving diagnostics

        Returns:
            The parsed model

        Raises:
            ParsingError: If the file is missing, has the wrong extension,
                cannot be read or decoded, or has the wrong structure
        """
        log = sink or logger
        if file_path is None or not str(file_path).strip():
            raise InvalidInputError("No schema file supplied to the parser.")

        path = Path(file_path)
        label = self.format_name.upper()
        log.info("Starting %s schema parsing for file: %s", label, path.absolute())

        if not path.exists():
            log.error("%s file not found: %s", label, path.absolute())
            raise ParsingError(
                f"The {label} file could not be found: {path.absolute()}. "
                "Please check the path and try again."
            )

        if path.suffix.lower() != self.file_extension:
            log.warning("Invalid file format detected: %s", path.name)
            raise ParsingError(
                f"Invalid file format: {path.name}. Please provide a valid {label} "
                f"schema file with a {self.file_extension} extension."
            )

        try:
            model = self._decode(path, log)
        except ValidationError as e:
            # Model construction rejected the extracted values
            raise ParsingError(f"Invalid {label} schema: {e}") from e

        log.info("Parsed schema '%s' with %d fields", model.name, model.field_count)
        log.debug("Parsed model: %s", model)
        return model

    @abstractmethod
    def _decode(self, path: Path, log: logging.Logger) -> SchemaModel:
        """
        Read and decode a file already known to exist with the right extension.

        Args:
            path: Schema file path
            log: Logger for diagnostics

        Returns:
            The parsed model

        Raises:
            ParsingError: On read failure, malformed syntax, or wrong structure
        """
        pass
