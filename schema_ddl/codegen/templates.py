"""
Template engine wrapper for DDL generation.

Provides a simple interface for Jinja2 template rendering
with identifier-quoting helpers for SQL output.
"""

from typing import Dict, Any, Optional

from jinja2 import DictLoader, Environment, StrictUndefined

from ..errors import SchemaDDLError


class TemplateError(SchemaDDLError):
    """Exception raised for template-related errors."""

    pass


def quote_identifier(value: Any, quote: str = "`") -> str:
    """
    Quote a SQL identifier, doubling any embedded quote characters.

    Args:
        value: Identifier to quote
        quote: Quote character (backtick for MySQL)

    Returns:
        Quoted identifier, e.g. `first``name` for first`name
    """
    text = str(value)
    return f"{quote}{text.replace(quote, quote * 2)}{quote}"


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: Initial in-memory templates, by name
        """
        self._loader = DictLoader(dict(templates or {}))
        # SQL is not markup, so nothing is escaped
        self._env = Environment(
            loader=self._loader,
            autoescape=False,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        self._env.filters["quote_identifier"] = quote_identifier

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of a registered template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e


# Built-in templates. Line breaks come from the `nl` variable so the
# configured line ending is honored.
CREATE_TABLE_TEMPLATE = (
    "CREATE TABLE {{ table_name | quote_identifier }} ({{ nl }}"
    "{% for column in columns %}"
    "{{ indent }}{{ column.name | quote_identifier }} {{ column.type }}"
    "{% if not loop.last %},{{ nl }}{% endif %}"
    "{% endfor %}"
    "{{ nl }});"
)

# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine({"create_table": CREATE_TABLE_TEMPLATE})
    return _default_engine
