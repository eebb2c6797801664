"""
Gene identifier resolution.

    raw ids → normalize → detect key type → match (input order kept)
            → disambiguate (optional) → assemble output table

Usage:
    from geneinfo import resolve
    df = resolve(["TP53", "BCC7", "FAKEID"], organism="hs", unique=True)
"""

import logging
from collections.abc import Sequence
from functools import lru_cache

import polars as pl

from geneinfo.config import settings
from geneinfo.organisms import GenomeBuild, map_organism, parse_genome_build
from geneinfo.reference.loader import ParquetReferenceLoader, ReferenceLoader
from geneinfo.resolution.ambiguity import ambiguity_notice, ambiguous_ids, resolve_ambiguity
from geneinfo.resolution.assemble import assemble_output, display_ids, reference_output
from geneinfo.resolution.keytype import available_key_types, detect_key_type
from geneinfo.resolution.normalize import normalize_ids
from geneinfo.resolution.order import attach_records, match_candidates

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_loader() -> ReferenceLoader:
    """Process-wide loader reading from settings.reference_dir."""
    return ParquetReferenceLoader(settings.reference_dir)


def resolve(
    ids: Sequence[str | None] | str | None = None,
    organism: str | None = None,
    unique: bool = False,
    keep_na: bool = True,
    genome_build: GenomeBuild | str | None = None,
    loader: ReferenceLoader | None = None,
) -> pl.DataFrame:
    """
    Resolve gene identifiers against a reference annotation table.

    The identifier type (symbol, Ensembl, Entrez or UniProt) is detected from
    the batch. Matching is case-insensitive. The output has one row per input
    id in input order, unless an id matches several reference rows and
    ``unique`` is off, in which case all of its rows are returned.

    Ids are compared with surrounding whitespace removed, and input_id shows
    that stripped form. Non-string ids (e.g. Entrez numbers given as int)
    are converted with str().

    Args:
        ids: Identifiers to resolve, or None for the whole reference table
        organism: Organism alias (default: settings.default_organism)
        unique: Keep a single row for one-to-many matches
        keep_na: Keep rows for ids without any match
        genome_build: Human genome build, "v38" or "v19"
            (default: settings.default_genome_build)
        loader: Reference table source (default: Parquet files under
            settings.reference_dir)

    Returns:
        Table of text columns, input_id first

    Raises:
        UnknownGenomeBuild: If genome_build is not supported
        UnknownOrganism: If the organism alias is not recognized
        InvalidKeyType: If no identifier column explains the batch
    """
    build = parse_genome_build(genome_build or settings.default_genome_build)
    org = map_organism(organism or settings.default_organism)
    reference = (loader or default_loader()).load(org, build)

    if ids is None:
        return reference_output(reference)
    if isinstance(ids, str):
        ids = [ids]

    raw = list(ids)
    normalized = normalize_ids(raw)
    if raw:
        key_type = detect_key_type(normalized, reference)
    else:
        # An empty batch still gets the output schema
        key_type = available_key_types(reference)[0]
    logger.debug("Resolving %d ids as %s", len(raw), key_type.value)

    records = attach_records(match_candidates(normalized, key_type, reference), reference)

    notice = ambiguity_notice(
        ambiguous_ids(records, display_ids(list(range(len(raw))), normalized, raw))
    )
    if notice:
        logger.info(notice)

    if unique:
        records = resolve_ambiguity(records, key_type)

    return assemble_output(records, key_type, keep_na=keep_na, raw_ids=raw)
