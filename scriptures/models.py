from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from .gematria.lazy import LazyGematria, VerseGematria

Variant = Literal["primary", "alternate"]

PRIMARY: Variant = "primary"
ALTERNATE: Variant = "alternate"
VARIANTS: tuple[Variant, ...] = (PRIMARY, ALTERNATE)

# Qere/Ketiv tags as they appear in Hebrew source data.
VARIANT_ALIASES: Mapping[str, Variant] = MappingProxyType({"qere": PRIMARY, "ketiv": ALTERNATE})

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _frozen_metadata(metadata: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(metadata or {}))


@dataclass(frozen=True)
class GematriaValues:
    """The three values every language offers."""

    standard: int
    ordinal: int
    reduced: int

    def __getitem__(self, name: str) -> int:
        if name not in ("standard", "ordinal", "reduced"):
            raise KeyError(name)
        return getattr(self, name)

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class VerseAggregationOptions:
    """
    How a verse total is assembled from its words.

    ``variant`` picks the primary (qere, traditionally read) or alternate
    (ketiv, written consonantal) reading where a verse carries both.
    """

    variant: Variant = PRIMARY
    include_colophons: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "variant", VARIANT_ALIASES.get(self.variant, self.variant))
        if self.variant not in VARIANTS:
            raise ValueError(f"variant must be one of {VARIANTS}, got {self.variant!r}")


@dataclass(frozen=True)
class Word:
    position: int
    text: str
    variant: Variant | None = None
    is_colophon: bool = False
    metadata: Mapping[str, Any] = field(default_factory=lambda: _EMPTY, hash=False)
    lemma: str | None = None
    morph: str | None = None
    morph_scheme: str | None = None
    strongs: tuple[str, ...] = ()
    language: str = "auto"

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", _frozen_metadata(self.metadata))
        if self.variant is None:
            return
        object.__setattr__(self, "variant", VARIANT_ALIASES.get(self.variant, self.variant))
        if self.variant not in VARIANTS:
            raise ValueError(f"variant must be one of {VARIANTS} or None, got {self.variant!r}")

    @property
    def colophon(self) -> bool:
        # Either flag marks a colophon word.
        return bool(self.is_colophon or self.metadata.get("colophon"))

    @property
    def gematria(self) -> LazyGematria:
        from .gematria.lazy import LazyGematria

        return LazyGematria(self.text, self.language)


@dataclass(frozen=True)
class Verse:
    book: str
    chapter: int
    number: int
    words: tuple[Word, ...] = ()
    text: str = ""
    language: str = "auto"
    id: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=lambda: _EMPTY, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "words", tuple(self.words))
        object.__setattr__(self, "metadata", _frozen_metadata(self.metadata))

    @property
    def reference(self) -> str:
        return f"{self.book} {self.chapter}:{self.number}"

    @property
    def gematria(self) -> VerseGematria:
        """Word-level aggregate: colophons excluded, primary readings."""
        return self.get_gematria()

    @property
    def gematria_with_colophons(self) -> LazyGematria:
        """Computed over the raw verse text, which already contains any colophon."""
        from .gematria.lazy import verse_gematria_with_colophons

        return verse_gematria_with_colophons(self.text, self.language)

    def get_gematria(self, options: VerseAggregationOptions | None = None, **kwargs: Any) -> VerseGematria:
        from .gematria.lazy import VerseGematria

        if options is None:
            options = VerseAggregationOptions(**kwargs)
        return VerseGematria(self.words, self.language, options)
