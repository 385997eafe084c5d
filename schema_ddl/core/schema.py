"""
Canonical schema representation.

Every format parser produces a SchemaModel; the validator and the SQL
generator consume it. Models are immutable once built.
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from ..errors import ValidationError


@dataclass(frozen=True)
class SchemaModel:
    """A flat table definition: a table name and its ordered field names."""

    name: str
    fields: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.name is None or not str(self.name).strip():
            raise ValidationError("Schema name cannot be null or empty.")
        if self.fields is None:
            raise ValidationError("Schema fields cannot be null.")
        if isinstance(self.fields, str):
            raise ValidationError("Schema fields must be a sequence of names, not a string.")

        # Freeze the field list so column order cannot change after parsing
        object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def from_fields(cls, name: str, fields: Iterable[str]) -> "SchemaModel":
        """Build a model from any iterable of field names."""
        return cls(name=name, fields=tuple(fields))

    @property
    def field_count(self) -> int:
        return len(self.fields)

    def summary(self) -> str:
        """
        Short human-readable description for display.

        Returns:
            e.g. "Person (2 fields): id, firstName"
        """
        noun = "field" if self.field_count == 1 else "fields"
        listed = ", ".join(str(f) for f in self.fields) if self.fields else "<none>"
        return f"{self.name} ({self.field_count} {noun}): {listed}"

    def __str__(self) -> str:
        return f"SchemaModel(name='{self.name}', fields={list(self.fields)})"
