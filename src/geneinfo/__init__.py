"""
geneinfo: Gene and protein identifier resolution

Resolves gene symbols, Ensembl IDs, Entrez IDs and UniProt IDs against an
in-memory reference annotation table for one organism/genome build:

    raw ids → normalized ids → key type → input-ordered matches → one row per id

Core constraints:
- Output rows align 1:1 with the input (order and duplicates kept)
- Case-insensitive matching, Greek letters accepted in symbols (IFNγ)
- One-to-many matches resolved by a deterministic tie-break cascade
"""

from geneinfo.errors import (
    GeneInfoError,
    InvalidKeyType,
    ReferenceNotFound,
    UnknownGenomeBuild,
    UnknownOrganism,
)
from geneinfo.organisms import GenomeBuild, map_organism
from geneinfo.resolution import KeyType, resolve

__version__ = "0.1.0"

__all__ = [
    "resolve",
    "KeyType",
    "GenomeBuild",
    "map_organism",
    "GeneInfoError",
    "InvalidKeyType",
    "ReferenceNotFound",
    "UnknownGenomeBuild",
    "UnknownOrganism",
]
