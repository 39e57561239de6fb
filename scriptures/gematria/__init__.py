"""
Gematria engine: per-language letter-value systems, the method registry and
lazy containers.

  from scriptures.gematria import compute, compute_value
  compute("λογος")                      # GematriaValues(standard=373, ordinal=62, reduced=4)
  compute_value("God", "ordinal")       # 26
  compute_value("שלום", "mispar_gadol")  # 936
"""

from __future__ import annotations

from .engine import compute, compute_all, compute_value
from .language import detect_language, normalize_language
from .lazy import LazyGematria, VerseGematria, is_included, verse_gematria_with_colophons
from .reduction import digital_root
from .registry import GematriaMethod, MethodRegistry, build_registry, default_registry

__all__ = [
    "GematriaMethod",
    "LazyGematria",
    "MethodRegistry",
    "VerseGematria",
    "build_registry",
    "compute",
    "compute_all",
    "compute_value",
    "default_registry",
    "detect_language",
    "digital_root",
    "is_included",
    "normalize_language",
    "verse_gematria_with_colophons",
]
