"""
Presentation interface for schema results.

Front ends implement SchemaView; the controller only talks to that
interface. ConsoleView renders through rich.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich import box

from .core.schema import SchemaModel


class SchemaView(ABC):
    """Capability interface for anything that displays pipeline outcomes."""

    @abstractmethod
    def report_success(self, message: str) -> None:
        pass

    @abstractmethod
    def report_error(self, message: str) -> None:
        pass

    @abstractmethod
    def report_summary(self, schema: Optional[SchemaModel]) -> None:
        pass


class ConsoleView(SchemaView):
    """Terminal view built on a rich Console."""

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        """
        Initialize the view.

        Args:
            console: Console for normal output (defaults to stdout)
            err_console: Console for errors (defaults to stderr)
        """
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def report_success(self, message: str) -> None:
        self.console.print(f"✅ [green]{escape(message)}[/green]", soft_wrap=True)

    def report_error(self, message: str) -> None:
        self.err_console.print(f"❌ [red]{escape(message)}[/red]", soft_wrap=True)

    def report_summary(self, schema: Optional[SchemaModel]) -> None:
        if schema is None:
            self.report_error("Parsed schema is empty.")
            return

        table = Table(title=f"Schema: {escape(schema.name)}", box=box.ROUNDED)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Field", style="cyan")
        for index, field_name in enumerate(schema.fields, start=1):
            table.add_row(str(index), escape(field_name))

        self.console.print(table)
        self.report_success(f"Schema parsed and loaded: {schema.summary()}")

    def show_ddl(self, ddl: str) -> None:
        """Display generated DDL with SQL highlighting."""
        syntax = Syntax(ddl, "sql", theme="monokai", word_wrap=True)
        self.console.print(Panel(syntax, title="Generated DDL", border_style="green"))
