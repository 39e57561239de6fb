"""
Raw verse data -> Verse.

Editions hand over verses as plain dicts:

  {"id": "Gen.1.1", "text": "...", "words": [{"position": 1, "text": "בְּרֵאשִׁית",
   "lemma": "b/7225", "morph": "HR/Ncfsa", "variant": "qere"}, ...]}

Scribal annotations embedded in the word list (manuscript notes with no lemma,
no morphology and no scripture letters) are dropped here, before any value is
computed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from .gematria.language import GREEK, HEBREW, normalize_language
from .models import Verse, Word
from .schemas import WordDataSchema

logger = logging.getLogger(__name__)

# Hebrew consonants/points and Greek (basic + extended)
_SCRIPTURE_LETTER_RE = re.compile(r"[\u0590-\u05FF\u0370-\u03FF\u1F00-\u1FFF]")

_STRONGS_RE = re.compile(r"([HGhg])0*(\d+)")
_DIGITS_RE = re.compile(r"\d{1,5}")

_word_schema = WordDataSchema()


def is_scribal_annotation(raw: Mapping[str, Any]) -> bool:
    """
    True for a word entry that is a scribal/textual-critical note.

    Both ``lemma`` and ``morph`` must be present and None, and the text must
    carry no Hebrew or Greek letters. A word that merely lacks the fields is
    not an annotation.
    """
    if "lemma" not in raw or "morph" not in raw:
        return False
    if raw["lemma"] is not None or raw["morph"] is not None:
        return False
    text = raw.get("text")
    if text is None:
        text = ""
    if not isinstance(text, str):
        # Left to schema validation, which rejects it.
        return False
    return _SCRIPTURE_LETTER_RE.search(text) is None


def parse_strongs(value: str | Iterable[str] | None, language: str | None = None) -> tuple[str, ...]:
    """
    Strong's numbers out of a lemma or strongs field.

      parse_strongs("b/7225", "hebrew") == ("H7225",)
      parse_strongs("G03056") == ("G3056",)

    Bare digits only count when the language supplies the H/G prefix.
    """
    if not value:
        return ()
    pieces = value.split() if isinstance(value, str) else [str(v) for v in value]
    lang = (language or "").lower()
    prefix = "H" if lang.startswith(HEBREW) else "G" if lang.startswith(GREEK) else None

    found: list[str] = []
    for piece in pieces:
        match = _STRONGS_RE.search(piece)
        if match:
            found.append(f"{match.group(1).upper()}{int(match.group(2))}")
            continue
        digits = _DIGITS_RE.search(piece)
        if digits and prefix:
            found.append(f"{prefix}{int(digits.group(0))}")
    return tuple(found)


def _split_morph(code: str | None) -> tuple[str | None, str | None]:
    """'oshm:HR/Ncfsa' -> ('HR/Ncfsa', 'oshm'); a plain code has no scheme."""
    if not code:
        return None, None
    if ":" in code:
        scheme, morph = code.split(":", 1)
        return morph, scheme
    return code, None


def word_from_data(raw: Mapping[str, Any], position: int, language: str = "auto") -> Word:
    data = _word_schema.load(dict(raw))

    lemma = data.get("lemma")
    if isinstance(lemma, (list, tuple)):
        lemma = " ".join(str(v) for v in lemma)

    strongs = (
        parse_strongs(data.get("lemma"), language)
        or parse_strongs(data.get("strongs"), language)
        or parse_strongs(data.get("strong"), language)
    )
    morph, scheme = _split_morph(data.get("morph"))

    return Word(
        position=data["position"] if data.get("position") is not None else position,
        text=data["text"],
        variant=data.get("variant"),
        is_colophon=data["is_colophon"],
        metadata=data["metadata"],
        lemma=lemma,
        morph=morph,
        morph_scheme=scheme,
        strongs=strongs,
        language=normalize_language(language),
    )


def words_from_data(raw_words: Iterable[Any] | None, language: str = "auto") -> tuple[Word, ...]:
    words: list[Word] = []
    for index, raw in enumerate(raw_words or (), start=1):
        if not isinstance(raw, Mapping):
            continue
        if is_scribal_annotation(raw):
            logger.debug("Dropping scribal annotation at position %s: %r", raw.get("position", index), raw.get("text"))
            continue
        words.append(word_from_data(raw, index, language))
    return tuple(words)


def verse_from_data(
    data: Mapping[str, Any],
    book: str,
    chapter: int,
    number: int,
    language: str | None = None,
) -> Verse:
    """
    Build a Verse from an edition's raw verse dict.

    ``language`` is the edition's free-form language name ("Ancient Hebrew",
    "Koine Greek"); anything unrecognized falls back to script detection.
    """
    lang = normalize_language(language)
    return Verse(
        book=book,
        chapter=chapter,
        number=number,
        words=words_from_data(data.get("words"), lang),
        text=data.get("text") or "",
        language=lang,
        id=data.get("id"),
        metadata=data.get("metadata") or {},
    )
