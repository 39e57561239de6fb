"""
English gematria / cabala systems.

All systems read the same extraction (ASCII letters only). Most are
case-insensitive and look letters up in upper case; Whitehead's Objective
cabala is case-sensitive and gives lower case its own range.

Sources (public domain):
  Agrippa, Three Books of Occult Philosophy, trans. J.F. (London, 1651), II.xx
  Rudolff, Die Coss, ed. Stifel (Königsberg, 1553): 24-letter ordinal, here 26
  Whitehead, The Mystic Thesaurus (Chicago, 1899), pp. 58-65

Verified examples:
  whitehead_greek("GOD") == 22                (p. 58)
  whitehead_hebrew("WHITEHEAD") == 50         (p. 61)
  whitehead_subjective("IESUS") == 473        (p. 65)
  whitehead_subjective("PYRAMID") == 486      (p. 64)
"""

from __future__ import annotations

import re
import string
from collections.abc import Mapping
from types import MappingProxyType

from .reduction import digital_root

_NON_LETTER_RE = re.compile(r"[^A-Za-z]+")
_ENGLISH_ONLY_RE = re.compile(r"^[A-Za-z\s]+$")


def _freeze(table: dict[str, int]) -> Mapping[str, int]:
    return MappingProxyType(table)


# A=1 .. Z=26.
SIMPLE_ORDINAL = _freeze({ch: i for i, ch in enumerate(string.ascii_uppercase, start=1)})

# Agrippa's Latin enneads: units, tens, hundreds. J, V and W take the
# extended slots 600, 700 and 900.
AGRIPPA_LATIN = _freeze({
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8, "I": 9,
    "K": 10, "L": 20, "M": 30, "N": 40, "O": 50, "P": 60, "Q": 70, "R": 80, "S": 90,
    "T": 100, "U": 200, "X": 300, "Y": 400, "Z": 500,
    "J": 600, "V": 700, "W": 900,
})

# Whitehead's "Natural Cabala": English letters at the position of their
# Greek counterparts (pp. 58-59).
WHITEHEAD_GREEK = _freeze({
    "A": 1, "B": 2, "G": 3, "D": 4,
    "E": 5, "V": 5, "W": 5,
    "Z": 6,
    "H": 8, "Q": 8,
    "I": 9, "J": 9, "Y": 9,
    "K": 10, "L": 11, "M": 12, "N": 13,
    "S": 14, "X": 14,
    "O": 15, "P": 16, "R": 17, "T": 19, "U": 20, "F": 21, "C": 22,
})

# Hebrew values of English letters (pp. 60-61). Where the source offers two
# values the lower is used.
WHITEHEAD_HEBREW = _freeze({
    "A": 1, "B": 2, "C": 20, "D": 4, "E": 5, "F": 80, "G": 3, "H": 5, "I": 10,
    "J": 10, "K": 100, "L": 30, "M": 40, "N": 50, "O": 70, "P": 80, "Q": 100,
    "R": 200, "S": 60, "T": 9, "U": 6, "V": 6, "W": 6, "X": 8, "Y": 10, "Z": 7,
})

# Objective cabala (pp. 62-63): major symbols A-Z = 1-26, minor a-z = 27-52.
WHITEHEAD_OBJECTIVE = _freeze({
    **{ch: i for i, ch in enumerate(string.ascii_uppercase, start=1)},
    **{ch: i for i, ch in enumerate(string.ascii_lowercase, start=27)},
})

# Subjective cabala, column "X" (pp. 62-63). Published values, not a formula.
WHITEHEAD_SUBJECTIVE = _freeze({
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7,
    "H": 8, "I": 9, "J": 10, "K": 11, "L": 12, "M": 13,
    "N": 114, "O": 115, "P": 116, "Q": 117, "R": 118, "S": 119, "T": 120,
    "U": 221, "V": 222, "W": 223, "X": 224, "Y": 225, "Z": 226,
})


def is_english(text: str) -> bool:
    """True when the text is made of ASCII letters and whitespace only."""
    return bool(text) and _ENGLISH_ONLY_RE.match(text) is not None


def extract_letters(text: str, case_sensitive: bool = False) -> str:
    if not text:
        return ""
    letters = _NON_LETTER_RE.sub("", text)
    return letters if case_sensitive else letters.upper()


def _apply_table(text: str, table: Mapping[str, int], case_sensitive: bool = False) -> int:
    return sum(table.get(ch, 0) for ch in extract_letters(text, case_sensitive))


def compute_ordinal(text: str) -> int:
    """
    Simple ordinal, A=1 .. Z=26, case-insensitive.

    Example:
      compute_ordinal("God") == 26
    """
    return _apply_table(text, SIMPLE_ORDINAL)


def compute_agrippa(text: str) -> int:
    return _apply_table(text, AGRIPPA_LATIN)


def compute_whitehead_greek(text: str) -> int:
    return _apply_table(text, WHITEHEAD_GREEK)


def compute_whitehead_hebrew(text: str) -> int:
    return _apply_table(text, WHITEHEAD_HEBREW)


def compute_whitehead_objective(text: str) -> int:
    return _apply_table(text, WHITEHEAD_OBJECTIVE, case_sensitive=True)


def compute_whitehead_subjective(text: str) -> int:
    return _apply_table(text, WHITEHEAD_SUBJECTIVE)


def compute_digital_root(text: str) -> int:
    """Digital root of the ordinal value; a modifier, not a table of its own."""
    return digital_root(compute_ordinal(text))


def compute_all(text: str) -> dict[str, int]:
    ordinal = compute_ordinal(text)
    return {
        "simple_ordinal": ordinal,
        "agrippa_latin": compute_agrippa(text),
        "whitehead_greek": compute_whitehead_greek(text),
        "whitehead_hebrew": compute_whitehead_hebrew(text),
        "whitehead_objective": compute_whitehead_objective(text),
        "whitehead_subjective": compute_whitehead_subjective(text),
        "digital_root": digital_root(ordinal),
    }
