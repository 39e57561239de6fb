"""
Lazy gematria containers.

A container holds text (or a verse's words) and a language, and computes a
named value only when it is read:

  values = LazyGematria("בראשית", "hebrew")
  values.get("ordinal")            # 76
  values["mispar_gadol"]           # 913
  dict(values)                     # standard, ordinal, reduced

Reading never raises. An unknown method name, or text a system rejects,
reads as 0 so that irregular source data (placeholder words, scribal notes)
cannot break a lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from ..models import VARIANT_ALIASES, VerseAggregationOptions, Word
from .engine import compute_value
from .registry import MethodRegistry

logger = logging.getLogger(__name__)

DEFAULT_KEYS = ("standard", "ordinal", "reduced")

WordLike = Union[Word, Mapping[str, Any]]


class LazyGematria(Mapping):
    def __init__(self, text: str, language: str = "auto", registry: MethodRegistry | None = None) -> None:
        self.text = text or ""
        self.language = language or "auto"
        self.registry = registry

    def get(self, name: str, default: Any = None) -> int:  # type: ignore[override]
        try:
            return compute_value(self.text, name, self.language, self.registry)
        except Exception:
            logger.debug("Gematria %r of %r read as 0", name, self.text, exc_info=True)
            return 0

    def __getitem__(self, name: str) -> int:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str)

    def __iter__(self) -> Iterator[str]:
        return iter(DEFAULT_KEYS)

    def __len__(self) -> int:
        return len(DEFAULT_KEYS)

    @property
    def standard(self) -> int:
        return self.get("standard")

    @property
    def ordinal(self) -> int:
        return self.get("ordinal")

    @property
    def reduced(self) -> int:
        return self.get("reduced")

    def as_dict(self, names: Iterable[str] = DEFAULT_KEYS) -> dict[str, int]:
        return {name: self.get(name) for name in names}

    def __repr__(self) -> str:
        return f"LazyGematria(text={self.text!r}, language={self.language!r})"


def _word_fields(word: WordLike) -> tuple[str, str | None, bool]:
    """Text, reading variant and colophon flag of a Word or a raw word mapping."""
    if isinstance(word, Word):
        return word.text, word.variant, word.colophon
    metadata = word.get("metadata") or {}
    colophon = bool(word.get("is_colophon") or word.get("isColophon") or metadata.get("colophon"))
    variant = word.get("variant")
    return word.get("text") or "", VARIANT_ALIASES.get(variant, variant), colophon


def is_included(word: WordLike, options: VerseAggregationOptions) -> bool:
    _, variant, colophon = _word_fields(word)
    if colophon and not options.include_colophons:
        return False
    # Untagged words belong to both readings.
    if variant is not None and variant != options.variant:
        return False
    return True


class VerseGematria(LazyGematria):
    """
    Sum of the per-word values of a verse, computed on read.

    Words are filtered first: colophon words are skipped unless
    ``include_colophons``, and a word tagged with the reading that
    ``variant`` did not select is skipped. A word whose computation fails
    adds 0 instead of failing the verse.
    """

    def __init__(
        self,
        words: Iterable[WordLike],
        language: str = "auto",
        options: VerseAggregationOptions | None = None,
        registry: MethodRegistry | None = None,
    ) -> None:
        super().__init__("", language, registry)
        self.words = tuple(words)
        self.options = options or VerseAggregationOptions()

    def included_words(self) -> list[WordLike]:
        return [w for w in self.words if is_included(w, self.options)]

    def get(self, name: str, default: Any = None) -> int:  # type: ignore[override]
        total = 0
        for word in self.included_words():
            text = _word_fields(word)[0]
            try:
                total += compute_value(text, name, self.language, self.registry)
            except Exception:
                logger.debug("Skipping word %r for %r", text, name, exc_info=True)
        return total

    def __repr__(self) -> str:
        return (
            f"VerseGematria(words={len(self.words)}, language={self.language!r}, "
            f"variant={self.options.variant!r}, include_colophons={self.options.include_colophons})"
        )


def verse_gematria_with_colophons(
    text: str, language: str = "auto", registry: MethodRegistry | None = None
) -> LazyGematria:
    """Values over the verse's full raw text, colophon included."""
    return LazyGematria(text, language, registry)
