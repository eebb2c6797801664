"""Exceptions raised by geneinfo."""


class GeneInfoError(Exception):
    """Base class for all geneinfo errors."""


class UnknownOrganism(GeneInfoError, ValueError):
    """Organism alias has no Ensembl mapping."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"Unknown organism: {alias!r}")


class UnknownGenomeBuild(GeneInfoError, ValueError):
    """Genome build is not one of the supported assemblies."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown genome build: {value!r} (expected 'v38' or 'v19')")


class InvalidKeyType(GeneInfoError, ValueError):
    """No identifier column explains the input batch."""

    def __init__(self, sample: list[str]):
        self.sample = sample
        super().__init__(
            "Cannot infer identifier type (symbol, ensembl, entrezid or uniprot) "
            f"for input like: {', '.join(repr(s) for s in sample)}"
        )


class ReferenceNotFound(GeneInfoError, FileNotFoundError):
    """No annotation table is available for an organism/build pair."""

    def __init__(self, organism: str, genome_build: str, path=None):
        self.organism = organism
        self.genome_build = genome_build
        self.path = path
        where = f" at {path}" if path else ""
        super().__init__(f"No reference table for {organism} ({genome_build}){where}")
