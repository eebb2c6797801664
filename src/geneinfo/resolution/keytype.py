"""
Key-type detection.

Works out which identifier column (symbol, ensembl, entrezid, uniprot) a
batch of normalized ids addresses. One key type applies to the whole batch.
"""

import re
from collections.abc import Sequence
from enum import Enum

import polars as pl

from geneinfo.errors import InvalidKeyType
from geneinfo.resolution.normalize import ENSEMBL_PATTERN


class KeyType(str, Enum):
    """Identifier column a batch is matched against, in precedence order."""

    SYMBOL = "symbol"
    ENSEMBL = "ensembl"
    ENTREZID = "entrezid"
    UNIPROT = "uniprot"


# Key type -> reference column
KEY_COLUMNS: dict[KeyType, str] = {
    KeyType.SYMBOL: "symbol",
    KeyType.ENSEMBL: "ensembl",
    KeyType.ENTREZID: "entrezid",
    KeyType.UNIPROT: "uniprot",
}

ENTREZ_PATTERN = re.compile(r"^\d+$")
UNIPROT_PATTERN = re.compile(
    r"^([OPQ][0-9][A-Z0-9]{3}[0-9]|[A-NR-Z][0-9]([A-Z][A-Z0-9]{2}[0-9]){1,2})(-\d+)?$",
    re.IGNORECASE,
)
SYMBOL_PATTERN = re.compile(r"^[A-Za-z0-9][\w.\-/@:+']*$")

# Most specific shape first; every accession also looks like a symbol
_SHAPES: tuple[tuple[KeyType, re.Pattern], ...] = (
    (KeyType.ENSEMBL, ENSEMBL_PATTERN),
    (KeyType.ENTREZID, ENTREZ_PATTERN),
    (KeyType.UNIPROT, UNIPROT_PATTERN),
    (KeyType.SYMBOL, SYMBOL_PATTERN),
)

SAMPLE_SIZE = 5


def key_expr(key_type: KeyType) -> pl.Expr:
    """Lower-cased reference column for a key type."""
    return pl.col(KEY_COLUMNS[key_type]).cast(pl.Utf8).str.to_lowercase()


def available_key_types(reference: pl.DataFrame) -> list[KeyType]:
    """Key types whose column the reference carries, in precedence order."""
    return [k for k in KeyType if KEY_COLUMNS[k] in reference.columns]


def count_matches(ids: Sequence[str], reference: pl.DataFrame) -> dict[KeyType, int]:
    """
    Count, per key type, how many batch elements exactly match its column.

    Matching is case-insensitive. Key types whose column is missing from the
    reference are left out.
    """
    lowered = pl.Series("id", [i.lower() for i in ids], dtype=pl.Utf8)
    counts = {}
    for key_type in KeyType:
        column = KEY_COLUMNS[key_type]
        if column not in reference.columns:
            continue
        values = reference.select(key_expr(key_type)).to_series().drop_nulls().unique()
        counts[key_type] = int(lowered.is_in(values.to_list()).sum())
    return counts


def classify_shape(value: str) -> KeyType | None:
    """Key type an id looks like on its own, or None for junk."""
    for key_type, pattern in _SHAPES:
        if pattern.match(value):
            return key_type
    return None


def detect_key_type(ids: Sequence[str], reference: pl.DataFrame) -> KeyType:
    """
    Infer the key type of a batch of normalized ids.

    The column with the most case-insensitive exact matches wins, ties going
    to the earlier type in symbol, ensembl, entrezid, uniprot order. A batch
    with no match at all is classified by identifier shape, which only
    succeeds when every non-blank id has the same shape.

    Args:
        ids: Normalized identifiers
        reference: Prepared reference table

    Returns:
        Detected KeyType

    Raises:
        InvalidKeyType: If no column explains the batch
    """
    best, best_count = None, 0
    for key_type, count in count_matches(ids, reference).items():
        if count > best_count:
            best, best_count = key_type, count
    if best is not None:
        return best

    # Nothing matched: fall back to what the ids look like
    shapes = {classify_shape(i) for i in ids if i}
    if len(shapes) == 1:
        shape = shapes.pop()
        if shape is not None and KEY_COLUMNS[shape] in reference.columns:
            return shape
    raise InvalidKeyType(list(ids[:SAMPLE_SIZE]))
