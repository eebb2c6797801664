"""Tests for input-ordered candidate matching."""

import pytest

from geneinfo.reference import prepare_reference
from geneinfo.resolution.keytype import KeyType
from geneinfo.resolution.order import attach_records, match_candidates


@pytest.fixture
def reference(raw_reference):
    return prepare_reference(raw_reference)


def test_every_input_kept_in_order(reference):
    ids = ["MCM10", "FAKEID", "TP53", "MCM10"]
    candidates = match_candidates(ids, KeyType.SYMBOL, reference)
    assert candidates["pos"].to_list() == [0, 1, 2, 3]
    assert candidates["input_id"].to_list() == ids
    assert candidates["rnum"].to_list() == [1, None, 0, 1]


def test_case_insensitive_keeps_caller_casing(reference):
    candidates = match_candidates(["tp53", "Tp53"], KeyType.SYMBOL, reference)
    assert candidates["input_id"].to_list() == ["tp53", "Tp53"]
    assert candidates["rnum"].to_list() == [0, 0]


def test_one_to_many_in_reference_order(reference):
    candidates = match_candidates(["TP53", "HBD", "CDC20"], KeyType.SYMBOL, reference)
    assert candidates["pos"].to_list() == [0, 1, 1, 2]
    assert candidates["rnum"].to_list() == [0, 4, 5, 2]


def test_symbol_case_variants_in_reference(reference):
    # NC886 and nc886 are separate reference rows
    candidates = match_candidates(["Nc886"], KeyType.SYMBOL, reference)
    assert candidates["rnum"].to_list() == [8, 9]


def test_non_symbol_key(reference):
    ids = ["7157", "991", "7157"]
    candidates = match_candidates(ids, KeyType.ENTREZID, reference)
    assert candidates["rnum"].to_list() == [0, 2, 0]


def test_attach_records(reference):
    candidates = match_candidates(["CDC20", "FAKEID"], KeyType.SYMBOL, reference)
    records = attach_records(candidates, reference)
    assert records["input_id"].to_list() == ["CDC20", "FAKEID"]
    assert records["symbol"].to_list() == ["CDC20", None]
    assert records["entrezid"].to_list() == ["991", None]


def test_empty_batch(reference):
    candidates = match_candidates([], KeyType.SYMBOL, reference)
    assert candidates.height == 0
    assert attach_records(candidates, reference).height == 0
