"""Reference annotation tables and their loaders."""

from geneinfo.reference.loader import (
    InMemoryReferenceLoader,
    ParquetReferenceLoader,
    ReferenceLoader,
)
from geneinfo.reference.table import ID_COLUMNS, ROW_HANDLE, data_columns, prepare_reference

__all__ = [
    "ReferenceLoader",
    "ParquetReferenceLoader",
    "InMemoryReferenceLoader",
    "ID_COLUMNS",
    "ROW_HANDLE",
    "data_columns",
    "prepare_reference",
]
