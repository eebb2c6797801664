"""
One-to-many disambiguation.

An input position with more than one candidate row is ambiguous. Repeating
an id in the input is not ambiguity: each position is judged on its own.

When asked to, exactly one candidate is kept per ambiguous position using
this cascade (first rule that decides wins):

1. Fewest null fields.
2. Exact symbol match (symbol key type only); several exact matches are
   settled by the one with a summary.
3. With entrezid and chr columns: smallest numeric Entrez ID, ties going to
   a candidate on a real chromosome, then the first.
4. With entrezid and chr columns and no Entrez difference: first candidate
   on a real chromosome, else the first candidate.
5. Without entrezid/chr columns: smallest numeric Entrez ID (or input id
   for entrezid batches), else the first candidate.
"""

import logging
import math
import re
from collections.abc import Sequence
from typing import Any

import polars as pl

from geneinfo.reference.table import ROW_HANDLE
from geneinfo.resolution.keytype import KeyType
from geneinfo.resolution.order import INPUT_ID, POSITION

logger = logging.getLogger(__name__)

# Assembled chromosomes: 1..22, X, Y (and names starting with them)
REAL_CHROMOSOME = re.compile(r"^(\d|X|Y)")

NOTICE_EXAMPLES = 3


def ambiguous_positions(records: pl.DataFrame) -> list[int]:
    """Input positions that matched more than one reference row."""
    return (
        records.group_by(POSITION)
        .agg(pl.len().alias("n"))
        .filter(pl.col("n") > 1)
        .get_column(POSITION)
        .sort()
        .to_list()
    )


def ambiguous_ids(records: pl.DataFrame, display: Sequence[str] | None = None) -> list[str]:
    """
    Distinct ambiguous ids, in input order.

    Args:
        records: Candidate records (see match_candidates)
        display: Optional per-position display form of the ids
    """
    positions = ambiguous_positions(records)
    if display is not None:
        ids = [display[pos] for pos in positions]
    else:
        ids = records.filter(pl.col(POSITION).is_in(positions)).get_column(INPUT_ID).to_list()
    return list(dict.fromkeys(ids))


def ambiguity_notice(ids: Sequence[str]) -> str | None:
    """
    Message naming up to three ambiguous ids, or None when there are none.

    More than three ids are truncated with a trailing ``...``.
    """
    if not ids:
        return None
    shown = ", ".join(ids[:NOTICE_EXAMPLES])
    more = "..." if len(ids) > NOTICE_EXAMPLES else ""
    return f'Some IDs have one-to-many matches, like "{shown}"{more}'


def _as_number(value: Any) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _is_real_chromosome(value: Any) -> bool:
    return isinstance(value, str) and bool(REAL_CHROMOSOME.match(value))


def _fewest_na(rows: list[dict], columns: list[str]) -> int | None:
    n_na = [sum(row[c] is None for c in columns) for row in rows]
    if min(n_na) == max(n_na):
        return None
    return n_na.index(min(n_na))


def _exact_symbol(rows: list[dict], query: str, columns: list[str]) -> int | None:
    exact = [i for i, row in enumerate(rows) if (row["symbol"] or "").lower() == query]
    if len(exact) == 1:
        return exact[0]
    if len(exact) > 1 and "summary" in columns:
        described = [i for i in exact if rows[i]["summary"] is not None]
        if len(described) == 1:
            return described[0]
    return None


def _prefer_real_chromosome(rows: list[dict], indices: list[int]) -> int:
    for i in indices:
        if _is_real_chromosome(rows[i]["chr"]):
            return i
    return indices[0]


def _minimal_entrez(rows: list[dict]) -> int:
    numbered = [(i, _as_number(row["entrezid"])) for i, row in enumerate(rows)]
    numbered = [(i, n) for i, n in numbered if n is not None]
    values = {n for _, n in numbered}
    if len(values) > 1:
        lowest = min(values)
        return _prefer_real_chromosome(rows, [i for i, n in numbered if n == lowest])
    return _prefer_real_chromosome(rows, list(range(len(rows))))


def _lowest_entrez(rows: list[dict], key_type: KeyType, columns: list[str]) -> int:
    if key_type is KeyType.ENTREZID:
        values = [_as_number(row[INPUT_ID]) for row in rows]
    elif "entrezid" in columns:
        values = [_as_number(row["entrezid"]) for row in rows]
    else:
        return 0
    # Stable: equal or missing numbers keep candidate order
    ranked = sorted(range(len(rows)), key=lambda i: (values[i] is None, values[i] or 0.0))
    return ranked[0]


def pick_candidate(rows: list[dict], key_type: KeyType, columns: list[str]) -> int:
    """
    Choose one of several candidate records for the same input position.

    Args:
        rows: Candidate records (dicts with input_id and annotation fields)
        key_type: Key type of the batch
        columns: Annotation columns present in the reference

    Returns:
        Index into rows of the record to keep
    """
    if len(rows) == 1:
        return 0

    choice = _fewest_na(rows, columns)
    if choice is not None:
        return choice

    if key_type is KeyType.SYMBOL and "symbol" in columns:
        choice = _exact_symbol(rows, (rows[0][INPUT_ID] or "").lower(), columns)
        if choice is not None:
            return choice

    if "entrezid" in columns and "chr" in columns:
        return _minimal_entrez(rows)
    return _lowest_entrez(rows, key_type, columns)


def resolve_ambiguity(records: pl.DataFrame, key_type: KeyType) -> pl.DataFrame:
    """
    Keep exactly one candidate per ambiguous input position.

    Unambiguous and unmatched positions are untouched; row order is kept.

    Args:
        records: Candidate records with annotation fields attached
        key_type: Key type of the batch

    Returns:
        Records with one row per input position
    """
    positions = ambiguous_positions(records)
    if not positions:
        return records

    columns = [c for c in records.columns if c not in (POSITION, INPUT_ID, ROW_HANDLE)]
    indexed = records.with_row_index("_row")
    picked: dict[str, int] = {}
    drop = []
    groups = indexed.filter(pl.col(POSITION).is_in(positions)).partition_by(
        POSITION, maintain_order=True
    )
    for group in groups:
        rows = group.rows(named=True)
        # Repeated inputs share one decision
        key = (rows[0][INPUT_ID] or "").lower()
        if key not in picked:
            picked[key] = pick_candidate(rows, key_type, columns)
        drop.extend(row["_row"] for i, row in enumerate(rows) if i != picked[key])

    logger.debug("Disambiguated %d input positions", len(groups))
    return indexed.filter(~pl.col("_row").is_in(drop)).drop("_row")
