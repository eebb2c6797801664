"""
Gene identifier resolution.

Resolves symbols, Ensembl, Entrez and UniProt IDs against a reference
annotation table. Each stage is usable on its own:
- normalize: version stripping and Greek letter spelling
- keytype: which identifier column a batch addresses
- order: input-ordered, case-insensitive candidate matching
- ambiguity: one-to-many detection and tie-breaking
- assemble: caller-facing output table
"""

from geneinfo.resolution.ambiguity import (
    ambiguity_notice,
    ambiguous_ids,
    pick_candidate,
    resolve_ambiguity,
)
from geneinfo.resolution.assemble import assemble_output
from geneinfo.resolution.keytype import KEY_COLUMNS, KeyType, detect_key_type
from geneinfo.resolution.normalize import normalize_ids, replace_greek, restore_greek
from geneinfo.resolution.order import attach_records, match_candidates
from geneinfo.resolution.resolver import default_loader, resolve

__all__ = [
    "resolve",
    "default_loader",
    "normalize_ids",
    "replace_greek",
    "restore_greek",
    "KeyType",
    "KEY_COLUMNS",
    "detect_key_type",
    "match_candidates",
    "attach_records",
    "ambiguous_ids",
    "ambiguity_notice",
    "pick_candidate",
    "resolve_ambiguity",
    "assemble_output",
]
