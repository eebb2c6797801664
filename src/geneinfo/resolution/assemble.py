"""
Output table assembly.

Turns resolved candidate records into the caller-facing table: input_id
first, redundant key column dropped, optional NA-row filtering, Greek
letters restored, every field as text.
"""

from collections.abc import Sequence

import polars as pl

from geneinfo.reference.table import ROW_HANDLE
from geneinfo.resolution.keytype import KEY_COLUMNS, KeyType
from geneinfo.resolution.normalize import has_greek, restore_greek
from geneinfo.resolution.order import INPUT_ID, POSITION


def display_ids(
    positions: list[int],
    ids: list[str | None],
    raw_ids: Sequence[str | None] | None,
) -> list[str | None]:
    """Caller-facing form of each id, with Greek letters restored."""
    if raw_ids is None:
        return [restore_greek(i) if i is not None else None for i in ids]
    display = []
    for pos, value in zip(positions, ids):
        raw = raw_ids[pos]
        if raw is None:
            display.append(None)
        elif has_greek(str(raw)):
            display.append(restore_greek(value))
        else:
            display.append(value)
    return display


def as_text(df: pl.DataFrame) -> pl.DataFrame:
    """Cast every column to text, keeping nulls."""
    return df.with_columns(pl.all().cast(pl.Utf8))


def assemble_output(
    records: pl.DataFrame,
    key_type: KeyType,
    keep_na: bool = True,
    raw_ids: Sequence[str | None] | None = None,
) -> pl.DataFrame:
    """
    Build the final table from resolved records.

    Args:
        records: Records with pos, input_id, rnum and annotation fields
        key_type: Key type the batch was matched on
        keep_na: Keep rows whose annotation fields are all null (rows
            without a reference match when no annotation field is left)
        raw_ids: Caller's original ids; when given, Greek letters are only
            restored for ids that had them. Without it every input_id gets
            the blind substring restoration.

    Returns:
        Text-only table with input_id as the first column
    """
    columns = [c for c in records.columns if c not in (POSITION, INPUT_ID, ROW_HANDLE)]

    if key_type is KeyType.SYMBOL:
        if "symbol" in columns:
            columns.remove("symbol")
            columns.insert(0, "symbol")
    else:
        key_column = KEY_COLUMNS[key_type]
        if key_column in columns:
            columns.remove(key_column)

    df = records
    if not keep_na:
        if columns:
            df = df.filter(~pl.all_horizontal([pl.col(c).is_null() for c in columns]))
        else:
            # Only the key column exists: unmatched means no reference row
            df = df.filter(pl.col(ROW_HANDLE).is_not_null())

    display = display_ids(
        df.get_column(POSITION).to_list(), df.get_column(INPUT_ID).to_list(), raw_ids
    )
    df = df.with_columns(pl.Series(INPUT_ID, display, dtype=pl.Utf8))

    return as_text(df.select([INPUT_ID, *columns]))


def reference_output(reference: pl.DataFrame) -> pl.DataFrame:
    """The whole reference table as returned when no ids are given."""
    return as_text(reference.drop(ROW_HANDLE))
