"""Tests for configuration module."""

from pathlib import Path

from geneinfo.config import Settings, reference_filename


def test_default_settings():
    """Test that default settings are valid."""
    s = Settings()
    assert s.default_organism == "hs"
    assert s.default_genome_build == "v38"
    assert s.log_level == "INFO"


def test_reference_dir_default():
    """Test default reference directory."""
    s = Settings()
    assert s.reference_dir == Path("data") / "reference"


def test_env_override(monkeypatch, tmp_path):
    """Test GENEINFO_ environment variables are picked up."""
    monkeypatch.setenv("GENEINFO_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("GENEINFO_REFERENCE_DIR", str(tmp_path))
    s = Settings()
    assert s.log_level == "DEBUG"
    assert s.reference_dir == tmp_path


def test_reference_path_human_is_per_build(tmp_path):
    """Test human tables are split by genome build."""
    s = Settings(reference_dir=tmp_path)
    assert s.reference_path("hsapiens", "v38") == tmp_path / "hsapiens.v38.parquet"
    assert s.reference_path("hsapiens", "v19") == tmp_path / "hsapiens.v19.parquet"


def test_reference_path_other_organisms_ignore_build(tmp_path):
    """Test non-human tables have a single file."""
    s = Settings(reference_dir=tmp_path)
    assert s.reference_path("mmusculus", "v19") == tmp_path / "mmusculus.parquet"
    assert reference_filename("mmusculus", "v38", ".tsv") == "mmusculus.tsv"
