"""
Reference annotation table helpers.

A reference table is a polars DataFrame with one row per gene record for a
single organism/genome build. Identifier columns are text, missing values
are null (never empty strings) and ``rnum`` is a dense 0..N-1 row handle.
"""

import polars as pl

# Identifier columns, in key-type precedence order
ID_COLUMNS = ("symbol", "ensembl", "entrezid", "uniprot")

ROW_HANDLE = "rnum"


def prepare_reference(df: pl.DataFrame) -> pl.DataFrame:
    """
    Prepare a raw annotation frame for resolution.

    Args:
        df: Annotation table with at least one of symbol/ensembl/entrezid/uniprot

    Returns:
        New frame with text identifiers, blank strings nulled and a
        leading ``rnum`` column

    Raises:
        ValueError: If no identifier column is present
    """
    id_cols = [c for c in ID_COLUMNS if c in df.columns]
    if not id_cols:
        raise ValueError(
            f"Reference table needs one of {', '.join(ID_COLUMNS)}; got {df.columns}"
        )

    if ROW_HANDLE in df.columns:
        df = df.drop(ROW_HANDLE)

    # Float entrez IDs (7157.0) would stringify with a trailing ".0"; NaN is missing
    df = df.with_columns(
        [
            (
                pl.col(c).fill_nan(None).cast(pl.Int64)
                if df.schema[c].is_float()
                else pl.col(c)
            ).cast(pl.Utf8)
            for c in id_cols
        ]
    )

    text_cols = [c for c, dtype in df.schema.items() if dtype == pl.Utf8]
    df = df.with_columns(
        [
            pl.when(pl.col(c).str.strip_chars() == "").then(None).otherwise(pl.col(c)).alias(c)
            for c in text_cols
        ]
    )

    return df.with_row_index(ROW_HANDLE)


def data_columns(reference: pl.DataFrame) -> list[str]:
    """Annotation columns, i.e. everything except the row handle."""
    return [c for c in reference.columns if c != ROW_HANDLE]
