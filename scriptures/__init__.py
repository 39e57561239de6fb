"""Scripture gematria library and HTTP service.

The Flask application lives in `scriptures.factory`, so importing the engine
(used by scripts and tests) doesn't require Flask.
"""

from __future__ import annotations

from .errors import ArchaicLetterError, EmptyInputError, GematriaError, MethodNotFoundError
from .gematria import compute, compute_all, compute_value, default_registry, detect_language
from .ingest import verse_from_data
from .models import GematriaValues, Verse, VerseAggregationOptions, Word

__all__ = [
    "ArchaicLetterError",
    "EmptyInputError",
    "GematriaError",
    "GematriaValues",
    "MethodNotFoundError",
    "Verse",
    "VerseAggregationOptions",
    "Word",
    "compute",
    "compute_all",
    "compute_value",
    "default_registry",
    "detect_language",
    "verse_from_data",
]
