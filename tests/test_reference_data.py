"""Tests against real annotation tables.

These tests require reference tables in GENEINFO_REFERENCE_DIR.
Run with: uv run pytest tests/test_reference_data.py --run-reference
"""

import pytest

from geneinfo import resolve

pytestmark = pytest.mark.reference

EXAMPLE_IDS = ["MCM10", "CDC20", "S100A9", "MMP1", "BCC7", "FAKEID", "TP53", "HBD", "NUDT10"]


def test_example_batch_keeps_alignment():
    df = resolve(EXAMPLE_IDS, unique=True)
    assert df["input_id"].to_list() == EXAMPLE_IDS
    assert df.filter(df["input_id"] == "FAKEID")["symbol"].to_list() == [None]


def test_case_insensitive_search():
    df = resolve(["tp53", "FAke", "EZh2"], organism="hs", unique=True)
    assert df["input_id"].to_list() == ["tp53", "FAke", "EZh2"]
    assert df["symbol"].to_list()[0].upper() == "TP53"


def test_hg19():
    df = resolve(["TP53"], genome_build="v19")
    assert df.height == 1


def test_full_table_biotypes():
    df = resolve(organism="hs")
    assert "protein_coding" in df["gene_biotype"].to_list()
