"""Pytest configuration and fixtures."""

import polars as pl
import pytest

from geneinfo.reference import InMemoryReferenceLoader


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-reference",
        action="store_true",
        default=False,
        help="Run tests that require real annotation tables in GENEINFO_REFERENCE_DIR",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "reference: mark test as requiring real reference annotation tables"
    )


def pytest_collection_modifyitems(config, items):
    """Skip reference tests unless --run-reference is provided."""
    if config.getoption("--run-reference"):
        return

    skip_reference = pytest.mark.skip(reason="Need --run-reference option to run")
    for item in items:
        if "reference" in item.keywords:
            item.add_marker(skip_reference)


COLUMNS = [
    "symbol", "ensembl", "entrezid", "uniprot",
    "chr", "start", "end", "gene_biotype", "summary",
]

SCHEMA = {
    "symbol": pl.Utf8,
    "ensembl": pl.Utf8,
    "entrezid": pl.Utf8,
    "uniprot": pl.Utf8,
    "chr": pl.Utf8,
    "start": pl.Int64,
    "end": pl.Int64,
    "gene_biotype": pl.Utf8,
    "summary": pl.Utf8,
}

# Small human-like annotation table. Duplicate symbols exercise each
# disambiguation rule:
#   HBD      same Entrez, one alt contig       -> assembled chromosome wins
#   GPR1-AS  one record lacks a summary        -> fewest nulls wins
#   NC886    null counts tie, one has summary  -> exact symbol + summary wins
#   MMP1     different Entrez IDs              -> smallest Entrez wins
#   S100A9   smallest Entrez shared by two     -> assembled chromosome wins
GENES = [
    ("TP53", "ENSG00000141510", "7157", "P04637", "17", 7661779, 7687538,
     "protein_coding", "Tumor protein p53"),
    ("MCM10", "ENSG00000065328", "55388", "Q7L590", "10", 13161576, 13203960,
     "protein_coding", "Minichromosome maintenance 10 replication initiation factor"),
    ("CDC20", "ENSG00000117399", "991", "Q12834", "1", 43358981, 43363203,
     "protein_coding", "Cell division cycle 20"),
    ("PPARgamma", "ENSG00000132170", "5468", "P37231", "3", 12287368, 12434356,
     "protein_coding", "Peroxisome proliferator activated receptor gamma"),
    ("HBD", "ENSG00000284931", "3045", "P02042", "CHR_HSCHR11_1_CTG1", 5232000, 5234000,
     "protein_coding", "Hemoglobin subunit delta"),
    ("HBD", "ENSG00000223609", "3045", "P02042", "11", 5232838, 5234483,
     "protein_coding", "Hemoglobin subunit delta"),
    ("GPR1-AS", "ENSG00000229727", "101927", None, "2", 206000000, 206100000,
     "lncRNA", None),
    ("GPR1-AS", "ENSG00000237183", "101927", None, "2", 206200000, 206300000,
     "lncRNA", "GPR1 antisense RNA"),
    ("NC886", "ENSG00000263934", "100302165", None, None, 136000000, 136001000,
     "misc_RNA", "Vault RNA 2-1"),
    ("nc886", "ENSG00000270123", "100302165", None, "5", 136000100, 136001100,
     "misc_RNA", None),
    ("MMP1", "ENSG00000196611", "4312", "P03956", "11", 102789919, 102798160,
     "protein_coding", "Matrix metallopeptidase 1"),
    ("MMP1", "ENSG00000262406", "4311", "P03956", "HSCHR11_2_CTG", 102790000, 102798000,
     "protein_coding", "Matrix metallopeptidase 1"),
    ("S100A9", "ENSG00000163220", "6280", "P06702", "CHR_HSCHR1_ALT", 153357000, 153361000,
     "protein_coding", "S100 calcium binding protein A9"),
    ("S100A9", "ENSG00000285001", "6280", "P06702", "1", 153357854, 153361027,
     "protein_coding", "S100 calcium binding protein A9"),
    ("S100A9", "ENSG00000285002", "6281", "P06702", "1", 153357900, 153361100,
     "protein_coding", "S100 calcium binding protein A9"),
]


def make_table(rows, schema=None) -> pl.DataFrame:
    """Build a raw annotation frame from row tuples."""
    return pl.DataFrame(rows, schema=schema or SCHEMA, orient="row")


@pytest.fixture
def raw_reference() -> pl.DataFrame:
    """Human GRCh38-like annotation table (not yet prepared)."""
    return make_table(GENES)


@pytest.fixture
def raw_reference_v19() -> pl.DataFrame:
    """Same genes with hg19 coordinates for TP53."""
    rows = [
        row[:5] + (7565097, 7590856) + row[7:] if row[0] == "TP53" else row
        for row in GENES
    ]
    return make_table(rows)


@pytest.fixture
def raw_mouse() -> pl.DataFrame:
    """Tiny mouse table."""
    return make_table(
        [
            ("Trp53", "ENSMUSG00000059552", "22059", "P02340", "11", 69471185, 69482699,
             "protein_coding", "Transformation related protein 53"),
        ]
    )


@pytest.fixture
def loader(raw_reference, raw_reference_v19, raw_mouse) -> InMemoryReferenceLoader:
    """Loader serving the fixture tables."""
    return InMemoryReferenceLoader(
        {
            "hsapiens": raw_reference,
            ("hsapiens", "v19"): raw_reference_v19,
            "mmusculus": raw_mouse,
        }
    )
