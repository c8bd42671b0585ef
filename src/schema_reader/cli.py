"""
Command-line interface for schema_reader.

Provides constraints, manifest and providers commands.
"""

from __future__ import annotations

import logging
import sys
from contextlib import closing
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from schema_reader import __version__
from schema_reader.config import ReaderConfig
from schema_reader.models import ROW_TYPES, CatalogRow, QueryKind

console = Console()

KIND_CHOICES = [kind.value for kind in QueryKind]


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _rows_table(kind: QueryKind, rows: List[CatalogRow]) -> Table:
    table = Table(title=f"{kind.value} ({len(rows)})")
    for i, column in enumerate(ROW_TYPES[kind].column_names()):
        table.add_column(column, style="cyan" if i == 0 else None)
    for row in rows:
        table.add_row(*["" if v is None else str(v) for v in row.to_dict().values()])
    return table


@click.group()
@click.version_option(version=__version__, prog_name="schema-reader")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def cli(verbose: bool) -> None:
    """
    Schema Reader - database catalog metadata and code generation manifests
    """
    setup_logging(verbose)


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="YAML reader configuration",
)
@click.option(
    "--conn",
    type=str,
    default=None,
    help="ODBC connection string (overrides config)",
)
@click.option(
    "--provider",
    type=str,
    default=None,
    help="Provider name, e.g. ingres (overrides config)",
)
@click.option(
    "--owner",
    type=str,
    default=None,
    help="Schema owner filter (default: all schemas)",
)
@click.option(
    "--table",
    type=str,
    default=None,
    help="Table name filter (default: all tables)",
)
@click.option(
    "--kind",
    "kinds",
    type=click.Choice(KIND_CHOICES),
    multiple=True,
    help="Query kind to run (repeatable, default: all)",
)
@click.option(
    "--output",
    type=click.Path(path_type=Path),
    default=None,
    help="Write all rows to this YAML file",
)
@click.option(
    "--csv_dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Write one CSV per query kind into this directory",
)
def constraints(
    config_path: Optional[Path],
    conn: Optional[str],
    provider: Optional[str],
    owner: Optional[str],
    table: Optional[str],
    kinds: Tuple[str, ...],
    output: Optional[Path],
    csv_dir: Optional[Path],
) -> None:
    """
    Read keys and constraints from the database catalog.

    Examples:

        # All constraints of one table
        schema-reader constraints --table airline \\
            --conn "DRIVER={Ingres};SERVER=(local);DATABASE=demodb"

        # Foreign keys only, from a config file, saved as YAML
        schema-reader constraints --config reader.yaml \\
            --kind ForeignKeys --output fks.yaml
    """
    from schema_reader.metadata import get_reader, read_catalog
    from schema_reader.metadata.connection import open_connection
    from schema_reader.output import OutputWriter

    config = ReaderConfig.from_yaml(config_path) if config_path else ReaderConfig.from_environment()
    if conn:
        config.connection_string = conn
    if provider:
        config.provider = provider
    if owner:
        config.schema_owner = owner

    if not config.connection_string:
        console.print("[red]Error: No connection string. Use --conn, --config or SCHEMA_READER_CONNECTION[/red]")
        sys.exit(1)

    selected = [QueryKind(k) for k in kinds] or list(QueryKind)

    console.print("[bold blue]Schema Reader - Constraints[/bold blue]")
    console.print(f"Provider: {config.provider}")
    console.print(f"Owner: {config.schema_owner or '*'}")
    console.print(f"Table: {table or '*'}")

    results: Dict[QueryKind, List[CatalogRow]] = {}
    try:
        with closing(open_connection(config.connection_string)) as connection:
            reader = get_reader(
                config.provider,
                connection,
                owner=config.schema_owner,
                paramstyle=config.paramstyle,
            )
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                for kind in selected:
                    task = progress.add_task(f"Reading {kind.value}...", total=None)
                    results[kind] = read_catalog(reader, kind, table)
                    progress.update(task, completed=True)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    for kind, rows in results.items():
        console.print(_rows_table(kind, rows))

    if output:
        writer = OutputWriter(output.parent)
        path = writer.write_yaml(
            results,
            filename=output.name,
            provider=config.provider,
            schema_owner=config.schema_owner,
            table=table,
        )
        console.print(f"\n[green]Saved rows to: {path}[/green]")

    if csv_dir:
        paths = OutputWriter(csv_dir).write_csv(results)
        console.print(f"[green]Saved {len(paths)} CSV files to: {csv_dir / 'csv'}[/green]")


@cli.command()
@click.option(
    "--target",
    type=click.Choice(["entityframework", "fluentnhibernate"]),
    required=True,
    help="Code generation target",
)
@click.option(
    "--output",
    type=click.Path(path_type=Path),
    default=None,
    help="Write packages.config to this path instead of stdout",
)
def manifest(target: str, output: Optional[Path]) -> None:
    """
    Emit the packages.config for a code generation target.

    Example:

        schema-reader manifest --target fluentnhibernate --output out/packages.config
    """
    from schema_reader.codegen import get_manifest
    from schema_reader.output import OutputWriter

    dependency_manifest = get_manifest(target)

    if output is None:
        click.echo(dependency_manifest.render())
        return

    path = OutputWriter(output.parent).write_manifest(dependency_manifest, filename=output.name)
    console.print(f"[green]Wrote {target} manifest to: {path}[/green]")


@cli.command()
def providers() -> None:
    """List the registered catalog readers."""
    from schema_reader.metadata import available_providers, resolve_reader
    from schema_reader.metadata.registry import provider_aliases

    table = Table(title="Providers")
    table.add_column("Provider", style="cyan")
    table.add_column("Reader", style="green")
    table.add_column("Aliases", style="yellow")

    for name in available_providers():
        table.add_row(name, resolve_reader(name).__name__, ", ".join(provider_aliases(name)) or "-")

    console.print(table)


if __name__ == "__main__":
    cli()
