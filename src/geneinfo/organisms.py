"""
Organism aliases and genome builds.

Maps the short organism names users type (hs, human, Homo sapiens, ...)
to the Ensembl short name used to key reference annotation tables.
"""

from enum import Enum

from geneinfo.config import HUMAN
from geneinfo.errors import UnknownGenomeBuild, UnknownOrganism


class GenomeBuild(str, Enum):
    """Human genome assembly."""

    V38 = "v38"  # GRCh38 / hg38
    V19 = "v19"  # GRCh37 / hg19


# Ensembl short name -> accepted aliases (besides the name itself)
ORGANISMS: dict[str, tuple[str, ...]] = {
    HUMAN: ("hs", "hsa", "human", "homo sapiens"),
    "mmusculus": ("mm", "mmu", "mouse", "mus musculus"),
    "rnorvegicus": ("rn", "rno", "rat", "rattus norvegicus"),
    "drerio": ("dr", "dre", "zebrafish", "danio rerio"),
    "dmelanogaster": ("dm", "dme", "fly", "fruitfly", "drosophila melanogaster"),
    "celegans": ("ce", "cel", "worm", "caenorhabditis elegans"),
    "scerevisiae": ("sc", "sce", "yeast", "saccharomyces cerevisiae"),
    "ggallus": ("gg", "gga", "chicken", "gallus gallus"),
    "btaurus": ("bt", "bta", "cow", "bovine", "bos taurus"),
    "sscrofa": ("ss", "ssc", "pig", "sus scrofa"),
    "mmulatta": ("mcc", "macaque", "rhesus", "macaca mulatta"),
    "ptroglodytes": ("pt", "ptr", "chimp", "chimpanzee", "pan troglodytes"),
    "cfamiliaris": ("cf", "cfa", "dog", "canis familiaris"),
    "ecaballus": ("ec", "ecb", "horse", "equus caballus"),
    "oaries": ("oa", "oas", "sheep", "ovis aries"),
    "xtropicalis": ("xt", "xtr", "frog", "xenopus tropicalis"),
}


def _fold(alias: str) -> str:
    return " ".join(alias.lower().replace("_", " ").split())


_ALIASES: dict[str, str] = {}
for _name, _aliases in ORGANISMS.items():
    _ALIASES[_name] = _name
    for _alias in _aliases:
        _ALIASES[_fold(_alias)] = _name


def map_organism(alias: str) -> str:
    """
    Map an organism alias to its Ensembl short name.

    Args:
        alias: Short code ("hs"), common name ("human"), latin binomial
            ("Homo sapiens", "homo_sapiens") or Ensembl name ("hsapiens")

    Returns:
        Ensembl short name, e.g. "hsapiens"

    Raises:
        UnknownOrganism: If the alias is not recognized
    """
    if not isinstance(alias, str):
        raise UnknownOrganism(str(alias))
    try:
        return _ALIASES[_fold(alias)]
    except KeyError:
        raise UnknownOrganism(alias) from None


def parse_genome_build(value: GenomeBuild | str) -> GenomeBuild:
    """Validate a genome build, accepting the enum or its string value."""
    if isinstance(value, GenomeBuild):
        return value
    if isinstance(value, str):
        try:
            return GenomeBuild(value.strip().lower())
        except ValueError:
            pass
    raise UnknownGenomeBuild(value)


def list_organisms() -> dict[str, tuple[str, ...]]:
    """Supported organisms with their aliases."""
    return dict(ORGANISMS)
