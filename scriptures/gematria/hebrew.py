"""
Hebrew gematria (Mispar) systems.

Every system is a letter-value table over the 22 consonants plus the five
final forms. Text is reduced to its consonants first: vowel points,
cantillation, maqaf, punctuation and anything outside U+05D0..U+05EA are
discarded, not substituted.

Sources:
  Jewish Encyclopedia (1903), "Gematria", vol. 5 pp. 589-592
    https://www.jewishencyclopedia.com/articles/6564-gematria
  Cordovero, Pardes Rimonim (1548), Gate 30, Chapter 8
    https://www.sefaria.org/Pardes_Rimmonim.30.8

Example:
  mispar_hechrachi("שלום") == 376
  mispar_siduri("שלום") == 52
  mispar_katan("שלום") == 16
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

from .reduction import digital_root

Musafi = Literal["letters", "words"]

# Alphabetic order, aleph..tav.
LETTERS = "אבגדהוזחטיכלמנסעפצקרשת"

FINAL_TO_BASE: Mapping[str, str] = MappingProxyType({
    "ך": "כ",
    "ם": "מ",
    "ן": "נ",
    "ף": "פ",
    "ץ": "צ",
})
BASE_TO_FINAL: Mapping[str, str] = MappingProxyType({v: k for k, v in FINAL_TO_BASE.items()})

_LETTER_RE = re.compile(r"[\u05D0-\u05EA]")
_NON_LETTER_RE = re.compile(r"[^\u05D0-\u05EA]+")


def _with_finals(base: dict[str, int]) -> Mapping[str, int]:
    """Freeze a 22-letter table, giving each final form its base letter's value."""
    table = dict(base)
    for final, letter in FINAL_TO_BASE.items():
        table.setdefault(final, base[letter])
    return MappingProxyType(table)


# Normal value: "counting א-ט as units, י-צ as tens, ק-ת as hundreds. The final
# letters have here the same values as their respective initial forms." (JE E.1)
MISPAR_HECHRACHI = _with_finals({
    "א": 1, "ב": 2, "ג": 3, "ד": 4, "ה": 5, "ו": 6, "ז": 7, "ח": 8, "ט": 9,
    "י": 10, "כ": 20, "ל": 30, "מ": 40, "נ": 50, "ס": 60, "ע": 70, "פ": 80, "צ": 90,
    "ק": 100, "ר": 200, "ש": 300, "ת": 400,
})

# Major value: "the final letters count as hundreds" (JE E.11), continuing after ת=400.
MISPAR_GADOL = _with_finals({
    **{ch: MISPAR_HECHRACHI[ch] for ch in LETTERS},
    "ך": 500, "ם": 600, "ן": 700, "ף": 800, "ץ": 900,
})

# Ordinal value, 1..22. Finals share their base position.
MISPAR_SIDURI = _with_finals({ch: i for i, ch in enumerate(LETTERS, start=1)})

# Minor value: tens and hundreds reduced to units (JE E.2).
MISPAR_KATAN = _with_finals({ch: digital_root(MISPAR_HECHRACHI[ch]) for ch in LETTERS})


def _cumulative(values: dict[str, int]) -> dict[str, int]:
    out: dict[str, int] = {}
    running = 0
    for ch in LETTERS:
        running += values[ch]
        out[ch] = running
    return out


# Inclusive value: each letter includes every standard value before it (JE E.3).
MISPAR_KOLEL = _with_finals(_cumulative({ch: MISPAR_HECHRACHI[ch] for ch in LETTERS}))

# Square and cube of the standard value (JE E.6, E.15).
MISPAR_PERATI = _with_finals({ch: MISPAR_HECHRACHI[ch] ** 2 for ch in LETTERS})
MISPAR_MESHULASH = _with_finals({ch: MISPAR_HECHRACHI[ch] ** 3 for ch in LETTERS})

# External value: every letter counts for 1 (JE E.10).
MISPAR_CHITZON = _with_finals({ch: 1 for ch in LETTERS})

# Prior value: triangular number of the ordinal position (Pardes 30:8).
MISPAR_HAKADMI = _with_finals({ch: n * (n + 1) // 2 for n, ch in enumerate(LETTERS, start=1)})


@dataclass(frozen=True)
class SourceCitation:
    text: str
    section: str | None = None
    page: int | None = None
    url: str | None = None
    quote: str | None = None
    note: str | None = None


@dataclass(frozen=True)
class HebrewSystem:
    name: str
    hebrew_name: str
    english_name: str
    description: str
    source: SourceCitation
    values: Mapping[str, int] = field(repr=False)


@dataclass(frozen=True)
class HebrewResult:
    value: int
    system: str
    letter_count: int
    word_count: int
    musafi: Musafi | None = None


_JE_URL = "https://www.jewishencyclopedia.com/articles/6564-gematria"
_PARDES_URL = "https://www.sefaria.org/Pardes_Rimmonim.30.8"


def _je(section: str, page: int, quote: str, note: str | None = None) -> SourceCitation:
    return SourceCitation(
        text="Jewish Encyclopedia (1903)", section=section, page=page, url=_JE_URL, quote=quote, note=note
    )


SYSTEMS: Mapping[str, HebrewSystem] = MappingProxyType({
    "mispar_hechrachi": HebrewSystem(
        name="mispar_hechrachi",
        hebrew_name="מספר הכרחי",
        english_name="Standard Value",
        description="Aleph-tet as units, yod-tsadi as tens, qof-tav as hundreds. Finals same as regular forms.",
        source=_je("E.1", 591, "Normal Value, מספר הכרחי, מספר פשוט, counting א-ט as units, י-צ as tens, ק-ת as hundreds."),
        values=MISPAR_HECHRACHI,
    ),
    "mispar_gadol": HebrewSystem(
        name="mispar_gadol",
        hebrew_name="מספר גדול",
        english_name="Major Value",
        description="Standard values, but final letters count as hundreds (500-900).",
        source=_je(
            "E.11", 592, "Major Value, מספר גדול. In this value the final letters count as hundreds.",
            note="500-900 continue the sequence after ת=400.",
        ),
        values=MISPAR_GADOL,
    ),
    "mispar_katan": HebrewSystem(
        name="mispar_katan",
        hebrew_name="מספר קטן",
        english_name="Minor/Reduced Value",
        description="Each letter's standard value reduced to a single digit (1-9), then summed.",
        source=_je("E.2", 591, "Cyclical or Minor Value, מספר קטן, where the tens, hundreds, and thousands are reduced to units."),
        values=MISPAR_KATAN,
    ),
    "mispar_kolel": HebrewSystem(
        name="mispar_kolel",
        hebrew_name="מספר כולל",
        english_name="Inclusive Value",
        description="Cumulative sum of all standard values from aleph up to and including the letter.",
        source=_je("E.3", 592, "e.g., ה = (5+4+3+2+1) = 15; כ = (20+10+9+8+7+6+5+4+3+2+1) = 75."),
        values=MISPAR_KOLEL,
    ),
    "mispar_perati": HebrewSystem(
        name="mispar_perati",
        hebrew_name="מספר פרטי",
        english_name="Square Value of Letter",
        description="Each letter's standard value squared.",
        source=_je("E.6", 592, "Square Value of the Letter, מספר מרובע פרטי; e.g., דוד = (4² + 6² + 4²) = 68."),
        values=MISPAR_PERATI,
    ),
    "mispar_meshulash": HebrewSystem(
        name="mispar_meshulash",
        hebrew_name="מספר משולש",
        english_name="Cube Value of Letter",
        description="Each letter's standard value cubed.",
        source=_je("E.15", 592, "Cube Value of the Letter, מעוקב פרטי."),
        values=MISPAR_MESHULASH,
    ),
    "mispar_chitzon": HebrewSystem(
        name="mispar_chitzon",
        hebrew_name="מספר חיצוני",
        english_name="External Value",
        description="Every letter counts as 1.",
        source=_je("E.10", 592, "External Value, מספר חיצוני, when the contents are disregarded, every letter counting for 1."),
        values=MISPAR_CHITZON,
    ),
    "mispar_siduri": HebrewSystem(
        name="mispar_siduri",
        hebrew_name="מספר סידורי",
        english_name="Ordinal Value",
        description="Sequential numbering 1-22 by alphabetical position.",
        source=SourceCitation(
            text="Pardes Rimonim (1548)", section="Gate 30, Chapter 8", url=_PARDES_URL,
            note="Implicit: ordinal positions are a prerequisite of Mispar HaKadmi.",
        ),
        values=MISPAR_SIDURI,
    ),
    "mispar_hakadmi": HebrewSystem(
        name="mispar_hakadmi",
        hebrew_name="מספר הקדמי",
        english_name="Prior Value",
        description="Triangular number of the ordinal position, n(n+1)/2.",
        source=SourceCitation(
            text="Pardes Rimonim (1548)", section="Gate 30, Chapter 8", url=_PARDES_URL,
            quote="מספר הקדמי כגון ג׳ עולה ששה כשנמנה מתחלת האלפא ביתא ועד הג׳",
        ),
        values=MISPAR_HAKADMI,
    ),
})


def extract_letters(text: str) -> str:
    """Keep only the consonants (final forms included)."""
    if not text:
        return ""
    return _NON_LETTER_RE.sub("", text)


def normalize_finals(text: str) -> str:
    return "".join(FINAL_TO_BASE.get(ch, ch) for ch in text)


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens that contain at least one consonant."""
    if not text:
        return 0
    return sum(1 for token in text.split() if _LETTER_RE.search(token))


def _musafi_addend(text: str, letters: str, musafi: Musafi | None) -> int:
    if musafi is None:
        return 0
    if musafi == "letters":
        return len(letters)
    if musafi == "words":
        return count_words(text)
    raise ValueError(f"Unknown musafi modifier: {musafi!r} (expected 'letters' or 'words')")


def _compute_with_table(
    text: str, table: Mapping[str, int], system: str, musafi: Musafi | None = None
) -> HebrewResult:
    letters = extract_letters(text)
    value = sum(table.get(ch, 0) for ch in letters)
    value += _musafi_addend(text, letters, musafi)
    return HebrewResult(
        value=value,
        system=system,
        letter_count=len(letters),
        word_count=count_words(text),
        musafi=musafi,
    )


def mispar_hechrachi(text: str, musafi: Musafi | None = None) -> int:
    """
    Standard gematria (Mispar Hechrachi).

    Example:
      mispar_hechrachi("בראשית") == 913
      mispar_hechrachi("שלום", musafi="letters") == 380
    """
    return _compute_with_table(text, MISPAR_HECHRACHI, "mispar_hechrachi", musafi).value


def mispar_gadol(text: str, musafi: Musafi | None = None) -> int:
    return _compute_with_table(text, MISPAR_GADOL, "mispar_gadol", musafi).value


def mispar_siduri(text: str, musafi: Musafi | None = None) -> int:
    return _compute_with_table(text, MISPAR_SIDURI, "mispar_siduri", musafi).value


def mispar_katan(text: str, musafi: Musafi | None = None) -> int:
    """Per-letter reduction: reduce each letter, then sum (בראשית -> 13)."""
    return _compute_with_table(text, MISPAR_KATAN, "mispar_katan", musafi).value


def mispar_katan_mispari(text: str, musafi: Musafi | None = None) -> int:
    """Whole-value reduction: digital root of the Mispar Katan sum (בראשית -> 4)."""
    letters = extract_letters(text)
    reduced = digital_root(sum(MISPAR_KATAN[ch] for ch in letters))
    return reduced + _musafi_addend(text, letters, musafi)


def mispar_kolel(text: str, musafi: Musafi | None = None) -> int:
    return _compute_with_table(text, MISPAR_KOLEL, "mispar_kolel", musafi).value


def mispar_perati(text: str, musafi: Musafi | None = None) -> int:
    return _compute_with_table(text, MISPAR_PERATI, "mispar_perati", musafi).value


def mispar_meshulash(text: str, musafi: Musafi | None = None) -> int:
    return _compute_with_table(text, MISPAR_MESHULASH, "mispar_meshulash", musafi).value


def mispar_chitzon(text: str, musafi: Musafi | None = None) -> int:
    return _compute_with_table(text, MISPAR_CHITZON, "mispar_chitzon", musafi).value


def mispar_hakadmi(text: str, musafi: Musafi | None = None) -> int:
    return _compute_with_table(text, MISPAR_HAKADMI, "mispar_hakadmi", musafi).value


SYSTEM_FUNCTIONS: Mapping[str, Callable[..., int]] = MappingProxyType({
    "mispar_hechrachi": mispar_hechrachi,
    "mispar_gadol": mispar_gadol,
    "mispar_katan": mispar_katan,
    "mispar_kolel": mispar_kolel,
    "mispar_perati": mispar_perati,
    "mispar_meshulash": mispar_meshulash,
    "mispar_chitzon": mispar_chitzon,
    "mispar_siduri": mispar_siduri,
    "mispar_hakadmi": mispar_hakadmi,
})


def compute(text: str, system: str, musafi: Musafi | None = None) -> HebrewResult:
    """Compute one table system with letter/word counts attached."""
    definition = SYSTEMS.get(system)
    if definition is None:
        raise ValueError(f"Unknown Hebrew gematria system: {system}")
    return _compute_with_table(text, definition.values, system, musafi)


def compute_all(text: str) -> dict[str, int]:
    return {name: fn(text) for name, fn in SYSTEM_FUNCTIONS.items()}


def list_systems() -> list[str]:
    return list(SYSTEMS)
