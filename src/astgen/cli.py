"""Command-line interface for astgen.

This module provides a CLI for generating node hierarchies, previewing the
generated text for a single base type, and displaying a schema.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable
from typing_extensions import Annotated

from astgen.config import Config
from astgen.errors import AstgenError
from astgen.generator.hierarchy import emit_schema, get_emitter
from astgen.generator.writer import write_sources
from astgen.schema.base import SchemaSource
from astgen.schema.file import JsonSchemaSource
from astgen.schema.lox import LoxSchemaSource
from astgen.schema_tree.builder import SchemaTreeBuilder

app = typer.Typer(
    name="astgen",
    help="Generate AST node hierarchies with visitor support from a declarative schema",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

SchemaOption = Annotated[
    Optional[Path],
    typer.Option("--schema", "-s", help="JSON schema file (built-in Lox schema if not specified)"),
]
TargetOption = Annotated[
    Optional[str], typer.Option("--target", "-t", help="Target language: java or python")
]
PackageOption = Annotated[
    Optional[str], typer.Option("--package", help="Package declaration for the generated units")
]


def get_config(
    target: Optional[str] = None,
    package: Optional[str] = None,
    strict: bool = False,
    verbose: bool = False,
) -> Config:
    """Get configuration from environment or CLI options.

    Args:
        target: Override target language from environment
        package: Override package declaration from environment
        strict: Enable strict side-table validation
        verbose: Log at DEBUG level

    Returns:
        Config instance with logging configured
    """
    config = Config()

    # Override config values if provided via CLI
    if target:
        config.target = target
    if package:
        config.package = package
    if strict:
        config.strict = True
    if verbose:
        config.log_level = "DEBUG"

    config.configure_logging(err_console)
    return config


def get_schema_source(schema: Optional[Path]) -> SchemaSource:
    """Pick the schema source for a command.

    Args:
        schema: Path to a JSON schema file, or None for the built-in schema

    Returns:
        The SchemaSource to load from
    """
    if schema is None:
        return LoxSchemaSource()
    return JsonSchemaSource(schema)


def report_error(error: Exception) -> None:
    """Print an error to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")


@app.command()
def generate(
    output_dir: Annotated[
        Optional[Path],
        typer.Argument(help="Directory to write generated units to (ASTGEN_OUTPUT_DIR if omitted)"),
    ] = None,
    schema: SchemaOption = None,
    target: TargetOption = None,
    package: PackageOption = None,
    strict: Annotated[
        bool, typer.Option("--strict", help="Reject table entries for unknown variants")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Generate one source file per base type.

    Every base type is generated before anything is written, so a malformed
    schema leaves the output directory untouched. Existing files are replaced.

    Example:
        astgen generate src/main/java/lox

        astgen generate build/ast --schema nodes.json --target python
    """
    try:
        config = get_config(target, package, strict, verbose)
        destination = output_dir or config.output_dir
        if destination is None:
            raise ValueError("No output directory given. Pass OUTPUT_DIR or set ASTGEN_OUTPUT_DIR.")

        source = get_schema_source(schema)
        document = source.load()

        sources = emit_schema(
            document,
            target=config.target,
            package=config.package,
            indent_width=config.indent_width,
            strict=config.strict,
        )
        for name in document.base_types:
            console.print(f"[blue]Generated {escape(name)}[/blue]")

        for path in write_sources(destination, sources):
            console.print(f"[green]✓[/green] Wrote {escape(str(path))}")

    except (AstgenError, ValueError, OSError) as e:
        report_error(e)
        raise typer.Exit(1)


@app.command()
def preview(
    base_type: Annotated[str, typer.Argument(help="Base type to generate, e.g. Expr")],
    schema: SchemaOption = None,
    target: TargetOption = None,
    package: PackageOption = None,
) -> None:
    """Print the generated source for a single base type to stdout.

    Example:
        astgen preview Expr

        astgen preview Stmt --target python --schema nodes.json
    """
    try:
        config = get_config(target, package)
        source = get_schema_source(schema)
        document = source.load()

        trees = {
            tree.name: tree
            for tree in SchemaTreeBuilder.build_from_document(document, strict=config.strict)
        }
        if base_type not in trees:
            raise ValueError(
                f"Unknown base type {base_type!r}. Schema defines: {', '.join(trees) or 'nothing'}"
            )

        emitter = get_emitter(
            config.target,
            package=config.package or document.package,
            imports=document.imports,
            indent_width=config.indent_width,
        )
        typer.echo(emitter.emit(trees[base_type]), nl=False)

    except (AstgenError, ValueError) as e:
        report_error(e)
        raise typer.Exit(1)


@app.command(name="show-schema")
def show_schema(schema: SchemaOption = None) -> None:
    """Display the schema's node families in a table.

    Example:
        astgen show-schema

        astgen show-schema --schema nodes.json
    """
    try:
        config = get_config()
        trees = get_schema_source(schema).load_tree(strict=config.strict)

        rich_table = RichTable(title="Schema")
        rich_table.add_column("Base Type", style="cyan")
        rich_table.add_column("Variant", style="magenta")
        rich_table.add_column("Fields")
        rich_table.add_column("Capabilities", style="yellow")
        rich_table.add_column("Extra Members", style="green")

        for tree in trees:
            for variant in tree.variants:
                fields = ", ".join(
                    f"{field.type_descriptor} {field.identifier}" for field in variant.fields
                )
                rich_table.add_row(
                    escape(tree.name),
                    escape(variant.name),
                    escape(fields) or "-",
                    escape(", ".join(variant.capabilities)) or "-",
                    "yes" if variant.extra_members else "-",
                )

        console.print(rich_table)

    except (AstgenError, ValueError) as e:
        report_error(e)
        raise typer.Exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
