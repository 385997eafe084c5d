"""
Base generator interface for SQL DDL targets.

Defines the contract that SQL generators implement.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..core.config import GeneratorConfig, load_config
from ..core.schema import SchemaModel
from .templates import TemplateEngine, get_default_template_engine


class SQLGenerator(ABC):
    """Abstract base class for SQL generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config()
        self._template_engine = None

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the name of the SQL dialect (e.g., 'mysql')."""
        pass

    @property
    def file_extension(self) -> str:
        """Return the file extension for generated files."""
        return ".sql"

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = get_default_template_engine()
        return self._template_engine

    @abstractmethod
    def generate_create_table(self, schema: SchemaModel, sink=None) -> str:
        """
        Generate a CREATE TABLE statement.

        Args:
            schema: Model to generate DDL for
            sink: Optional logger receiving diagnostics

        Returns:
            DDL text
        """
        pass

    @abstractmethod
    def map_data_type(self, generic_type: str, sink=None) -> str:
        """
        Map a generic type token (int, string, bool, ...) to a SQL column type.

        Args:
            generic_type: Format-agnostic type name
            sink: Optional logger receiving diagnostics

        Returns:
            SQL type
        """
        pass

    @abstractmethod
    def generate_constraints(self, schema: SchemaModel) -> str:
        """
        Generate table constraint clauses for a schema.

        Args:
            schema: Model to generate constraints for

        Returns:
            Constraint text (may be empty)
        """
        pass
