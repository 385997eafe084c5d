"""Utility functions for locating and classifying schema files.

This module provides format detection from file extensions and the
file access checks that run before any format-specific decoding.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .errors import FileAccessError, InvalidInputError, UnsupportedFormatError
from .logging_config import get_logger

logger = get_logger(__name__)

# Extension (lowercase, with dot) -> format token
EXTENSION_FORMATS = {
    ".json": "json",
    ".xml": "xml",
}


def _require_path(file_path: Union[str, Path, None]) -> Path:
    if file_path is None or not str(file_path).strip():
        raise InvalidInputError(
            "No file provided. Please select a schema file (.json or .xml)."
        )
    return Path(file_path)


def detect_format(
    file_path: Union[str, Path, None], sink: Optional[logging.Logger] = None
) -> str:
    """Detect the schema format of a file from its extension.

    Args:
        file_path: Path of the schema file.
        sink: Optional logger receiving diagnostics.

    Returns:
        The format token, "json" or "xml".

    Raises:
        InvalidInputError: If no path is given.
        UnsupportedFormatError: If the extension is not .json or .xml.
    """
    log = sink or logger
    path = _require_path(file_path)
    suffix = path.suffix.lower()

    format_token = EXTENSION_FORMATS.get(suffix)
    if format_token is None:
        log.warning("Unsupported file type: %s", path.name)
        raise UnsupportedFormatError(
            f"Unsupported file type: {path.name.lower()}. "
            "Please upload a .json or .xml schema file."
        )

    log.debug("Detected format '%s' for %s", format_token, path.name)
    return format_token


def check_file(
    file_path: Union[str, Path, None], sink: Optional[logging.Logger] = None
) -> Path:
    """Check that a path names an existing, regular, readable file.

    Args:
        file_path: Path to check.
        sink: Optional logger receiving diagnostics.

    Returns:
        The path as a Path object.

    Raises:
        InvalidInputError: If no path is given.
        FileAccessError: If the file is missing, not a regular file, or unreadable.
    """
    log = sink or logger
    path = _require_path(file_path)

    if not path.exists():
        log.error("File not found: %s", path)
        raise FileAccessError(f"File not found: {path.absolute()}")

    if not path.is_file():
        log.error("Not a regular file: %s", path)
        raise FileAccessError(f"Not a valid file: {path.absolute()}")

    if not os.access(path, os.R_OK):
        log.error("File is not readable: %s", path)
        raise FileAccessError(f"File cannot be read: {path.absolute()}")

    return path
