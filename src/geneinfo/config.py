"""
Configuration management for geneinfo.

Uses pydantic-settings for environment variable loading and validation.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

HUMAN = "hsapiens"


def reference_filename(organism: str, genome_build: str, suffix: str = ".parquet") -> str:
    """
    File name of the annotation table for an organism/build pair.

    Only human tables are split by genome build; every other organism
    has a single table and the build is ignored.
    """
    if organism == HUMAN:
        return f"{organism}.{genome_build}{suffix}"
    return f"{organism}{suffix}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GENEINFO_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Reference annotation tables
    reference_dir: Path = Field(
        default=Path("data") / "reference",
        description="Directory holding per-organism annotation tables",
    )

    # Defaults for resolve()
    default_organism: str = Field(default="hs", description="Organism alias")
    default_genome_build: Literal["v38", "v19"] = Field(
        default="v38",
        description="Human genome build",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    def reference_path(self, organism: str, genome_build: str) -> Path:
        """Path of the annotation table for an organism/build pair."""
        return self.reference_dir / reference_filename(organism, genome_build)


# Global settings instance
settings = Settings()
