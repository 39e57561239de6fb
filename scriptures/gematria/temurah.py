"""
Temurah: Hebrew letter-substitution ciphers.

A cipher maps letters to letters; apply a gematria system to the result to
get a number. Final forms are folded to their base letter before mapping.

  atbash("בבל") == "ששכ"   (Jeremiah 25:26, Sheshach)
  albam("אלהים") == "לאעשב"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .hebrew import BASE_TO_FINAL, FINAL_TO_BASE, LETTERS, mispar_hechrachi


@dataclass(frozen=True)
class CipherSystem:
    name: str
    hebrew_name: str
    description: str
    source: str
    section: str | None = None
    url: str | None = None
    quote: str | None = None
    mapping: Mapping[str, str] = field(default_factory=dict, repr=False)


def _build_atbash() -> dict[str, str]:
    return dict(zip(LETTERS, reversed(LETTERS)))


def _build_albam() -> dict[str, str]:
    # Pardes 30:5: "אל במ גנ דס הע וף זץ חק טר יש כת"
    mapping: dict[str, str] = {}
    half = len(LETTERS) // 2
    for first, second in zip(LETTERS[:half], LETTERS[half:]):
        mapping[first] = second
        mapping[second] = first
    return mapping


ATBASH_MAPPING: Mapping[str, str] = MappingProxyType(_build_atbash())
ALBAM_MAPPING: Mapping[str, str] = MappingProxyType(_build_albam())

CIPHERS: Mapping[str, CipherSystem] = MappingProxyType({
    "atbash": CipherSystem(
        name="atbash",
        hebrew_name="אתב״ש",
        description="Mirror position cipher: the first letter maps to the last, and so on.",
        source="Jewish Encyclopedia (1903) + Pardes Rimonim (1548)",
        section="JE II.2, p.589; Pardes Gate 30, Ch. 5-6",
        url="https://www.jewishencyclopedia.com/articles/6564-gematria",
        mapping=ATBASH_MAPPING,
    ),
    "albam": CipherSystem(
        name="albam",
        hebrew_name="אלב״ם",
        description="Half-alphabet swap cipher: 11 letter pairs.",
        source="Pardes Rimonim (1548)",
        section="Gate 30, Chapter 5",
        url="https://www.sefaria.org/Pardes_Rimmonim.30.5",
        quote="אל במ גנ דס הע וף זץ חק טר יש כת",
        mapping=ALBAM_MAPPING,
    ),
})


def _substitute(text: str, mapping: Mapping[str, str], preserve_final_forms: bool) -> str:
    out: list[str] = []
    for ch in text or "":
        is_final = ch in FINAL_TO_BASE
        base = FINAL_TO_BASE.get(ch, ch)
        if base not in mapping:
            out.append(ch)
            continue
        result = mapping[base]
        if preserve_final_forms and is_final:
            result = BASE_TO_FINAL.get(result, result)
        out.append(result)
    return "".join(out)


def atbash(text: str, preserve_final_forms: bool = False) -> str:
    return _substitute(text, ATBASH_MAPPING, preserve_final_forms)


def albam(text: str, preserve_final_forms: bool = False) -> str:
    return _substitute(text, ALBAM_MAPPING, preserve_final_forms)


def atbash_value(text: str) -> int:
    """Standard value of the Atbash-transformed text."""
    return mispar_hechrachi(atbash(text))


def albam_value(text: str) -> int:
    return mispar_hechrachi(albam(text))


def apply(name: str, text: str, preserve_final_forms: bool = False) -> str:
    if name == "atbash":
        return atbash(text, preserve_final_forms)
    if name == "albam":
        return albam(text, preserve_final_forms)
    raise ValueError(f"Unknown cipher: {name}")


def list_ciphers() -> list[str]:
    return list(CIPHERS)


def get_cipher(name: str) -> CipherSystem | None:
    return CIPHERS.get(name)


def get_mapping(name: str) -> dict[str, str]:
    """A mutable copy of a cipher's letter mapping."""
    cipher = CIPHERS.get(name)
    if cipher is None:
        raise ValueError(f"Unknown cipher: {name}")
    return dict(cipher.mapping)
