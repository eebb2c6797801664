"""
Reference table loaders.

The resolver never reads files itself; it asks a loader for the table of an
organism/genome build pair. Loaders cache prepared tables, and since polars
frames are never mutated in place every caller sees a consistent snapshot.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path

import polars as pl

from geneinfo.config import HUMAN, reference_filename, settings
from geneinfo.errors import ReferenceNotFound
from geneinfo.organisms import GenomeBuild
from geneinfo.reference.table import prepare_reference

logger = logging.getLogger(__name__)


def _cache_key(organism: str, genome_build: GenomeBuild) -> tuple[str, str | None]:
    # Build only distinguishes human tables
    return organism, genome_build.value if organism == HUMAN else None


class ReferenceLoader(ABC):
    """Base class for reference table loaders."""

    def __init__(self):
        self._cache: dict[tuple[str, str | None], pl.DataFrame] = {}

    def load(self, organism: str, genome_build: GenomeBuild) -> pl.DataFrame:
        """
        Get the prepared reference table for an organism/build pair.

        Args:
            organism: Ensembl short name (e.g. "hsapiens")
            genome_build: Human genome build (ignored for other organisms)

        Returns:
            Prepared reference table (see prepare_reference)
        """
        key = _cache_key(organism, genome_build)
        if key not in self._cache:
            self._cache[key] = prepare_reference(self._read(organism, genome_build))
            logger.debug("Loaded %s reference: %d rows", key, len(self._cache[key]))
        return self._cache[key]

    def clear(self) -> None:
        """Drop all cached tables."""
        self._cache.clear()

    @abstractmethod
    def _read(self, organism: str, genome_build: GenomeBuild) -> pl.DataFrame:
        """Read the raw annotation table."""
        pass


class ParquetReferenceLoader(ReferenceLoader):
    """Load reference tables from a directory of Parquet (or CSV/TSV) files."""

    suffixes = (".parquet", ".csv", ".tsv")

    def __init__(self, reference_dir: Path | None = None):
        super().__init__()
        self.reference_dir = Path(reference_dir) if reference_dir else settings.reference_dir

    def path_for(self, organism: str, genome_build: GenomeBuild) -> Path | None:
        """First existing table file for the pair, or None."""
        for suffix in self.suffixes:
            path = self.reference_dir / reference_filename(organism, genome_build.value, suffix)
            if path.exists():
                return path
        return None

    def _read(self, organism: str, genome_build: GenomeBuild) -> pl.DataFrame:
        path = self.path_for(organism, genome_build)
        if path is None:
            expected = self.reference_dir / reference_filename(organism, genome_build.value)
            raise ReferenceNotFound(organism, genome_build.value, expected)

        if path.suffix == ".parquet":
            return pl.read_parquet(path)
        # Read delimited text as strings so identifiers keep leading zeros
        separator = "\t" if path.suffix == ".tsv" else ","
        return pl.read_csv(path, separator=separator, infer_schema_length=0)


class InMemoryReferenceLoader(ReferenceLoader):
    """
    Serve reference tables from memory.

    Tables are keyed by organism, or by (organism, build) for human tables
    that differ between builds. The (organism, build) key wins when both exist.
    """

    def __init__(self, tables: Mapping[str | tuple[str, str], pl.DataFrame]):
        super().__init__()
        self.tables = dict(tables)

    def _read(self, organism: str, genome_build: GenomeBuild) -> pl.DataFrame:
        for key in ((organism, genome_build.value), organism):
            if key in self.tables:
                return self.tables[key]
        raise ReferenceNotFound(organism, genome_build.value)
