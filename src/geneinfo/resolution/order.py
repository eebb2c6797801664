"""
Input-ordered candidate matching.

Left-joins the input batch against one identifier column of the reference.
Every input position appears at least once in the result (with a null
``rnum`` when nothing matched), and rows come out in input order with
duplicate inputs kept in place.
"""

from collections.abc import Sequence

import polars as pl

from geneinfo.reference.table import ROW_HANDLE
from geneinfo.resolution.keytype import KeyType, key_expr

POSITION = "pos"
INPUT_ID = "input_id"


def match_candidates(
    ids: Sequence[str],
    key_type: KeyType,
    reference: pl.DataFrame,
) -> pl.DataFrame:
    """
    Find candidate reference rows for each input id.

    Matching is case-insensitive and many-valued: an id matching several
    reference rows yields one candidate per row, in reference order.

    Args:
        ids: Normalized identifiers (caller casing preserved)
        key_type: Column to match against
        reference: Prepared reference table

    Returns:
        Frame with columns pos (input position), input_id and rnum (null
        when unmatched), sorted by input position
    """
    keys = reference.select(key_expr(key_type).alias("_key"), pl.col(ROW_HANDLE)).drop_nulls("_key")

    query = pl.DataFrame(
        {POSITION: list(range(len(ids))), INPUT_ID: list(ids)},
        schema={POSITION: pl.Int64, INPUT_ID: pl.Utf8},
    ).with_columns(pl.col(INPUT_ID).str.to_lowercase().alias("_key"))

    return (
        query.join(keys, on="_key", how="left")
        .drop("_key")
        .sort([POSITION, ROW_HANDLE], nulls_last=True, maintain_order=True)
    )


def attach_records(candidates: pl.DataFrame, reference: pl.DataFrame) -> pl.DataFrame:
    """
    Pull the reference record of every candidate.

    Unmatched candidates get all annotation fields null. Candidate order is
    kept.
    """
    return (
        candidates.with_row_index("_order")
        .join(reference, on=ROW_HANDLE, how="left")
        .sort("_order")
        .drop("_order")
    )
