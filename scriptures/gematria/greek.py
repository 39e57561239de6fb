"""
Greek isopsephy (ἰσοψηφία).

| System   | Greek name | Method                              | Source                      |
|----------|------------|-------------------------------------|-----------------------------|
| standard | ἰσοψηφία   | Milesian numerals, 27 letters       | Gow 1883                    |
| ordinal  | στοιχεῖα   | Position in the 24-letter alphabet  | Dionysius Thrax, Ars Gramm. |
| reduced  | πυθμήν     | Digital root of the standard value  | Hippolytus, Refutation IV.14|

Diacritics are decomposed and stripped before lookup. An iota subscript
(ypogegrammeni, U+0345) stands for an adscript iota and is expanded to a
full ι first, so ᾳ counts as α + ι = 11.

Example:
  compute_standard("λόγος") == 373
  compute_ordinal("λόγος") == 62
  compute_reduced("λόγος") == 4
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..errors import ArchaicLetterError
from .reduction import digital_root

# Units, tens, hundreds. Stigma, koppa and sampi fill the sixth, ninetieth and
# nine-hundredth slots.
_UPPER_STANDARD = {
    "Α": 1, "Β": 2, "Γ": 3, "Δ": 4, "Ε": 5, "Ϛ": 6, "Ζ": 7, "Η": 8, "Θ": 9,
    "Ι": 10, "Κ": 20, "Λ": 30, "Μ": 40, "Ν": 50, "Ξ": 60, "Ο": 70, "Π": 80, "Ϟ": 90,
    "Ρ": 100, "Σ": 200, "Τ": 300, "Υ": 400, "Φ": 500, "Χ": 600, "Ψ": 700, "Ω": 800, "Ϡ": 900,
}

STANDARD: Mapping[str, int] = MappingProxyType({
    **_UPPER_STANDARD,
    **{ch.lower(): value for ch, value in _UPPER_STANDARD.items()},
    "ς": 200,  # final sigma
})

# The 24-letter alphabet, alpha..omega.
ALPHABET = "ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ"

# Archaic letters are intentionally absent: they have no ordinal position.
ORDINAL: Mapping[str, int] = MappingProxyType({
    **{ch: i for i, ch in enumerate(ALPHABET, start=1)},
    **{ch.lower(): i for i, ch in enumerate(ALPHABET, start=1)},
    "ς": 18,
})

# Stigma, koppa, sampi (upper and lower case).
ARCHAIC_LETTERS = frozenset("ϚϛϞϟϠϡ")

SYSTEMS = ("standard", "ordinal", "reduced")

_GREEK_RE = re.compile(r"[\u0370-\u03FF\u1F00-\u1FFF]")
_NON_GREEK_RE = re.compile(r"[^\u0370-\u03FF]+")
_COMBINING_RE = re.compile(r"[\u0300-\u036F]")
_YPOGEGRAMMENI = "\u0345"


@dataclass(frozen=True)
class IsopsephyResult:
    value: int
    system: str
    letter_count: int
    word_count: int


def is_greek(text: str) -> bool:
    return bool(text) and _GREEK_RE.search(text) is not None


def remove_diacritics(text: str) -> str:
    """
    Decompose and strip combining marks.

    The iota subscript must become a letter before stripping, otherwise its
    value would be lost along with the accents.
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text).replace(_YPOGEGRAMMENI, "ι")
    return _COMBINING_RE.sub("", decomposed)


def extract_letters(text: str) -> str:
    return _NON_GREEK_RE.sub("", remove_diacritics(text))


def count_words(text: str) -> int:
    if not text:
        return 0
    return sum(1 for token in text.split() if _GREEK_RE.search(token))


def compute_standard(text: str) -> int:
    return sum(STANDARD.get(ch, 0) for ch in extract_letters(text))


def compute_ordinal(text: str, strict: bool = True) -> int:
    """
    Sum of alphabet positions (α=1 .. ω=24).

    With ``strict`` (the default) any stigma, koppa or sampi raises
    ArchaicLetterError naming each distinct offending letter; otherwise they
    contribute 0.
    """
    letters = extract_letters(text)
    if strict:
        archaic = [ch for ch in dict.fromkeys(letters) if ch in ARCHAIC_LETTERS]
        if archaic:
            raise ArchaicLetterError(archaic)
    return sum(ORDINAL.get(ch, 0) for ch in letters)


def compute_reduced(text: str) -> int:
    return digital_root(compute_standard(text))


def compute(text: str, system: str) -> IsopsephyResult:
    if system == "standard":
        value = compute_standard(text)
    elif system == "ordinal":
        value = compute_ordinal(text)
    elif system == "reduced":
        value = compute_reduced(text)
    else:
        raise ValueError(f"Unknown isopsephy system: {system}")
    return IsopsephyResult(
        value=value,
        system=system,
        letter_count=len(extract_letters(text)),
        word_count=count_words(text),
    )


def compute_all(text: str) -> dict[str, int]:
    """Every system at once; archaic letters count 0 toward the ordinal."""
    return {
        "standard": compute_standard(text),
        "ordinal": compute_ordinal(text, strict=False),
        "reduced": compute_reduced(text),
    }


def list_systems() -> list[str]:
    return list(SYSTEMS)
