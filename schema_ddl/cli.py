"""
Command-line interface for schema-ddl.

Usage: schema-ddl SCHEMA_FILE [options]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from . import __version__
from .codegen import MySQLGenerator
from .controller import SchemaController
from .core.config import ConfigError, get_config_manager, load_config
from .logging_config import get_logger, setup_logging
from .parsers import SchemaFormat, list_supported_formats
from .view import ConsoleView

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="schema-ddl",
        description="Generate a MySQL CREATE TABLE statement from a JSON or XML schema file.",
    )
    parser.add_argument("file", nargs="?", help="Schema file (.json or .xml)")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    input_group = parser.add_argument_group("input")
    input_group.add_argument(
        "--format",
        "-f",
        choices=list_supported_formats(),
        help="Schema format (default: detected from the file extension)",
    )
    input_group.add_argument(
        "--list-formats",
        action="store_true",
        help="List supported schema formats and exit",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated DDL (default: stdout)",
    )
    output_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for DDL generation"
    )
    output_group.add_argument(
        "--indent-size",
        type=int,
        metavar="N",
        help="Spaces used to indent column definitions (default: 4)",
    )
    output_group.add_argument(
        "--use-tabs",
        action="store_true",
        help="Indent column definitions with a tab",
    )
    output_group.add_argument(
        "--pretty",
        action="store_true",
        help="Show DDL in a highlighted panel instead of plain text",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation metadata",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", metavar="FILE", help="Also write logs to FILE")

    return parser


def _list_formats(console: Console) -> int:
    table = Table(title="Supported Schema Formats", box=box.ROUNDED)
    table.add_column("Format", style="cyan")
    table.add_column("Extension", style="green")
    for schema_format in SchemaFormat:
        table.add_row(schema_format.value, schema_format.file_extension)
    console.print(table)
    return 0


def _build_config(args: argparse.Namespace):
    """Merge the config file with command-line overrides."""
    overrides = {}
    if args.indent_size is not None:
        overrides["indent_size"] = args.indent_size
    if args.use_tabs:
        overrides["use_tabs"] = True
    if args.output:
        overrides["output_file"] = args.output

    config = load_config(custom_config=overrides, config_file=args.config)
    for warning in get_config_manager().validate_config(config):
        logger.warning("Configuration: %s", warning)
    return config


def _show_metadata(console: Console, schema, generator: MySQLGenerator, output: Optional[str]):
    table = Table(title="Generation Metadata", box=box.SIMPLE)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("dialect", generator.dialect_name)
    table.add_row("table", schema.name)
    table.add_row("columns", str(schema.field_count))
    table.add_row("output", output or "stdout")
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # DDL may go to stdout, so messages go to stderr
    err_console = Console(stderr=True)

    if args.list_formats:
        return _list_formats(Console())

    if not args.file:
        err_console.print("❌ [red]No schema file given[/red]")
        parser.print_usage(sys.stderr)
        return 1

    setup_logging(args.log_level, args.log_file)
    logger.info("schema-ddl %s starting for %s", __version__, args.file)

    try:
        config = _build_config(args)
    except ConfigError as e:
        err_console.print(f"❌ [red]Configuration error:[/red] {escape(str(e))}")
        return 1

    generator = MySQLGenerator(config)
    view = ConsoleView(console=err_console, err_console=err_console)
    controller = SchemaController(view, generator=generator)

    schema = controller.handle_schema_upload(args.file, format_hint=args.format)
    if schema is None:
        return 1

    ddl = controller.handle_generate(schema)
    if ddl is None:
        return 1

    output = config.output_file
    if output:
        try:
            Path(output).write_text(ddl + config.line_ending, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write %s: %s", output, e)
            view.report_error(f"Failed to write {output}: {e}")
            return 1
        view.report_success(f"DDL written to {output}")
    elif args.pretty:
        ConsoleView(console=Console()).show_ddl(ddl)
    else:
        Console().print(ddl, markup=False, highlight=False, emoji=False, soft_wrap=True)

    if args.verbose:
        _show_metadata(err_console, schema, generator, output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
