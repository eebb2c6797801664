"""
Identifier normalization.

Canonicalizes raw user identifiers before they are matched:
- Ensembl version suffixes are stripped (ENSG00000141510.2 → ENSG00000141510)
- Greek letters are spelled out (IFNα → IFNalpha), since reference symbols
  use the latin names
"""

import re
from collections.abc import Sequence

ENSEMBL_PATTERN = re.compile(r"^ENS[A-Z]*[EGPRT]\d+(\.\d+)?$", re.IGNORECASE)

# Substitution order matters for restore_greek, keep it fixed
GREEK_LETTERS: tuple[tuple[str, str], ...] = (
    ("α", "alpha"),
    ("β", "beta"),
    ("γ", "gamma"),
    ("δ", "delta"),
    ("ε", "epsilon"),
    ("λ", "lambda"),
    ("κ", "kappa"),
    ("σ", "sigma"),
)


def is_ensembl(value: str) -> bool:
    """Whether a value looks like an (optionally versioned) Ensembl accession."""
    return bool(ENSEMBL_PATTERN.match(value))


def strip_version(value: str) -> str:
    """Drop a trailing ``.N`` version from an accession."""
    return value.split(".", 1)[0]


def has_greek(value: str) -> bool:
    """Whether a value contains one of the supported Greek letters."""
    return any(glyph in value for glyph, _ in GREEK_LETTERS)


def replace_greek(value: str) -> str:
    """Spell out Greek letters: ``"TNFα"`` → ``"TNFalpha"``."""
    for glyph, name in GREEK_LETTERS:
        value = value.replace(glyph, name)
    return value


def restore_greek(value: str) -> str:
    """
    Put Greek letters back: ``"TNFalpha"`` → ``"TNFα"``.

    This is a plain substring substitution, so any value merely containing
    a latin token (e.g. "alphaXYZ") is rewritten too. Callers that know the
    original input should only restore values that had Greek letters.
    """
    for glyph, name in GREEK_LETTERS:
        value = value.replace(name, glyph)
    return value


def normalize_ids(ids: Sequence[str | None]) -> list[str]:
    """
    Normalize raw identifiers for matching.

    Surrounding whitespace is removed. Version suffixes are only stripped
    when every id is an Ensembl accession, so symbols containing dots
    (e.g. "RP11-34P13.7") are left alone in mixed batches.

    Args:
        ids: Raw identifiers; None is treated as an empty id and other
            non-string values are converted with str()

    Returns:
        Normalized identifiers, same length and order as the input
    """
    values = [str(i).strip() if i is not None else "" for i in ids]
    if values and all(is_ensembl(v) for v in values):
        values = [strip_version(v) for v in values]
    return [replace_greek(v) for v in values]
