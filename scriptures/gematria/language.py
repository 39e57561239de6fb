from __future__ import annotations

import re
from typing import Literal

from . import english, greek

Language = Literal["hebrew", "greek", "english", "auto"]

HEBREW: Language = "hebrew"
GREEK: Language = "greek"
ENGLISH: Language = "english"
AUTO: Language = "auto"

# Fixed search order for alias resolution and detection.
LANGUAGES: tuple[Language, ...] = (HEBREW, GREEK, ENGLISH)

# Hebrew block: U+0590..U+05FF
_HEBREW_RE = re.compile(r"[\u0590-\u05FF]")


def is_hebrew(text: str) -> bool:
    return bool(text) and _HEBREW_RE.search(text) is not None


def is_greek(text: str) -> bool:
    return greek.is_greek(text)


def is_english(text: str) -> bool:
    return english.is_english(text)


def detect_language(text: str) -> Language:
    """
    Classify text by script presence, not majority: any Hebrew character wins,
    then any Greek character, otherwise English.
    """
    if is_hebrew(text):
        return HEBREW
    if is_greek(text):
        return GREEK
    return ENGLISH


def resolve_language(text: str, language: str | None) -> Language:
    if not language or language == AUTO:
        return detect_language(text)
    return language  # type: ignore[return-value]


def normalize_language(edition_language: str | None) -> Language:
    """
    Map an edition's free-form language name onto a gematria language.

      normalize_language("Ancient Hebrew") == "hebrew"
      normalize_language("Latin") == "auto"
    """
    if not edition_language:
        return AUTO
    lang = edition_language.lower()
    for candidate in LANGUAGES:
        if candidate in lang:
            return candidate
    return AUTO
