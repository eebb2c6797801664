"""
Command-line interface for geneinfo.

Commands:
- resolve: Resolve gene/protein ids and print or save the table
- import-hgnc: Build the human reference table from an HGNC download
- organisms: List supported organisms and their aliases
- show-config: Print effective settings
"""

import logging
from pathlib import Path

import polars as pl
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from geneinfo.config import settings
from geneinfo.errors import GeneInfoError

app = typer.Typer(
    name="geneinfo",
    help="Gene and protein identifier resolution CLI",
    no_args_is_help=True,
)
console = Console()

# Rows shown in the terminal before truncating
MAX_ROWS = 50


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="Override GENEINFO_LOG_LEVEL"
    ),
):
    """Gene and protein identifier resolution."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, show_time=False)],
        force=True,
    )


def read_id_file(path: Path) -> list[str]:
    """One id per line; blank lines and # comments are skipped."""
    ids = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                ids.append(line)
    return ids


def write_table(df: pl.DataFrame, dest: Path) -> None:
    """Write a table, format chosen by file suffix."""
    if dest.suffix == ".parquet":
        df.write_parquet(dest)
    elif dest.suffix in (".tsv", ".txt"):
        df.write_csv(dest, separator="\t")
    else:
        df.write_csv(dest)


def print_table(df: pl.DataFrame, title: str) -> None:
    """Render a result table with rich."""
    table = Table(title=title, show_header=True)
    for i, column in enumerate(df.columns):
        if i == 0:
            table.add_column(column, style="cyan", no_wrap=True)
        else:
            table.add_column(column, overflow="fold")
    for row in df.head(MAX_ROWS).iter_rows():
        table.add_row(*("[dim]NA[/]" if v is None else escape(v) for v in row))
    console.print(table)
    if len(df) > MAX_ROWS:
        console.print(f"[dim]... {len(df) - MAX_ROWS:,} more rows (use --output to save all)[/]")


@app.command()
def resolve(
    ids: list[str] | None = typer.Argument(None, help="Gene/protein ids to resolve"),
    organism: str | None = typer.Option(
        None, "--org", "-o", help="Organism alias (e.g. hs, mouse)"
    ),
    genome_build: str | None = typer.Option(
        None, "--build", "-b", help="Human genome build: v38 or v19"
    ),
    unique: bool = typer.Option(
        False, "--unique", "-u", help="Keep one row per id for one-to-many matches"
    ),
    drop_na: bool = typer.Option(
        False, "--drop-na", help="Drop ids without any match"
    ),
    id_file: Path | None = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="File with one id per line"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-O", help="Save to .csv, .tsv or .parquet instead of printing"
    ),
):
    """Resolve gene ids against the reference annotation."""
    from geneinfo.reference import ParquetReferenceLoader
    from geneinfo.resolution import resolve as resolve_ids

    batch = list(ids or [])
    if id_file:
        batch.extend(read_id_file(id_file))
    if not batch and output is None:
        console.print("[red]No ids given; use --output to export the full reference table[/]")
        raise typer.Exit(code=1)

    try:
        df = resolve_ids(
            batch or None,
            organism=organism,
            unique=unique,
            keep_na=not drop_na,
            genome_build=genome_build,
            loader=ParquetReferenceLoader(settings.reference_dir),
        )
    except GeneInfoError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(code=1) from e

    if output:
        write_table(df, output)
        console.print(f"[green]✓[/] {len(df):,} rows written to {output}")
    else:
        print_table(df, title=f"Resolved {len(batch):,} ids")


@app.command()
def import_hgnc(
    src: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="hgnc_complete_set.json download"
    ),
    genome_build: str = typer.Option(
        "v38", "--build", "-b", help="Genome build the table is stored under"
    ),
):
    """Build the human reference table from an HGNC download."""
    from geneinfo.config import HUMAN
    from geneinfo.organisms import parse_genome_build
    from geneinfo.reference.hgnc import import_hgnc as run_import

    try:
        build = parse_genome_build(genome_build)
    except GeneInfoError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(code=1) from e

    console.print("[bold cyan]HGNC Import[/]")
    run_import(src, settings.reference_path(HUMAN, build.value))


@app.command()
def organisms():
    """List supported organisms and their aliases."""
    from geneinfo.organisms import list_organisms

    table = Table(title="Supported Organisms", show_header=True)
    table.add_column("Organism", style="cyan")
    table.add_column("Aliases")
    for name, aliases in list_organisms().items():
        table.add_row(name, ", ".join(aliases))
    console.print(table)


@app.command()
def show_config():
    """Print the effective settings."""
    table = Table(title="Settings", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))
    console.print(table)


if __name__ == "__main__":
    app()
