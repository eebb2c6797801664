"""
HGNC reference table builder.

Converts the HGNC complete gene set JSON (hgnc_complete_set.json from
https://www.genenames.org/download/archive/) into a human reference table.
HGNC does not carry genomic coordinates, so start/end are absent and chr is
taken from the cytogenetic location.
"""

import json
import re
from pathlib import Path

import polars as pl
from rich.console import Console
from rich.progress import track
from rich.table import Table

console = Console()

CHROMOSOME = re.compile(r"^(\d+|X|Y)")

COLUMNS = (
    "symbol", "ensembl", "entrezid", "uniprot", "chr",
    "gene_biotype", "name", "location", "status",
)


def chromosome_from_location(location: str | None) -> str | None:
    """Chromosome of an HGNC cytogenetic location ("17p13.1" → "17")."""
    if not location:
        return None
    if location == "mitochondria":
        return "MT"
    match = CHROMOSOME.match(location)
    return match.group(1) if match else None


def parse_hgnc(src: Path, show_progress: bool = False) -> pl.DataFrame:
    """
    Parse hgnc_complete_set.json into a reference table.

    Args:
        src: Path to the HGNC JSON download
        show_progress: Show a rich progress bar

    Returns:
        Approved genes with symbol, ensembl, entrezid, uniprot, chr,
        gene_biotype, name and location columns
    """
    with open(src, encoding="utf-8") as f:
        data = json.load(f)

    docs = data["response"]["docs"]
    if show_progress:
        docs = track(docs, description="    Processing genes")

    records = []
    for doc in docs:
        uniprot_ids = doc.get("uniprot_ids", [])
        records.append(
            {
                "symbol": doc.get("symbol"),
                "ensembl": doc.get("ensembl_gene_id"),
                "entrezid": str(doc["entrez_id"]) if doc.get("entrez_id") else None,
                "uniprot": uniprot_ids[0] if uniprot_ids else None,
                "chr": chromosome_from_location(doc.get("location")),
                "gene_biotype": doc.get("locus_group"),
                "name": doc.get("name"),
                "location": doc.get("location"),
                "status": doc.get("status"),
            }
        )

    df = pl.DataFrame(records, schema={c: pl.Utf8 for c in COLUMNS})

    # Approved genes with symbols only
    return df.filter((pl.col("status") == "Approved") & pl.col("symbol").is_not_null()).drop(
        "status"
    )


def import_hgnc(src: Path, dest: Path) -> pl.DataFrame:
    """Parse an HGNC download and write it as a Parquet reference table."""
    console.print(f"  Parsing {src.name}...")
    df = parse_hgnc(src, show_progress=True)
    dest.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(dest)

    table = Table(title="HGNC Import Summary", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Approved genes", f"{len(df):,}")
    table.add_row("With Ensembl ID", f"{df['ensembl'].is_not_null().sum():,}")
    table.add_row("With Entrez ID", f"{df['entrezid'].is_not_null().sum():,}")
    table.add_row("Output", dest.name)
    console.print(table)
    return df
