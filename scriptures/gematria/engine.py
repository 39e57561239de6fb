from __future__ import annotations

from ..errors import EmptyInputError, GematriaError, MethodNotFoundError
from ..models import GematriaValues
from . import english, greek, hebrew
from .language import ENGLISH, GREEK, HEBREW, LANGUAGES, resolve_language
from .registry import MethodRegistry, default_registry

_DEFAULT_NAMES = ("standard", "ordinal", "reduced")


def compute(text: str, language: str = "auto", registry: MethodRegistry | None = None) -> GematriaValues:
    """
    Standard, ordinal and reduced values for a piece of text.

    The language is detected from the script when ``"auto"``. Greek ordinal is
    strict here, so stigma/koppa/sampi raise ArchaicLetterError.

    Example:
      compute("בראשית") == GematriaValues(standard=913, ordinal=76, reduced=13)
    """
    if not text or not text.strip():
        raise EmptyInputError()

    lang = resolve_language(text, language)
    if lang not in LANGUAGES:
        raise GematriaError(f"Unsupported language: {lang}")

    registry = registry or default_registry()
    values: dict[str, int] = {}
    for name in _DEFAULT_NAMES:
        method = registry.resolve(name, lang)
        if method is None:
            raise MethodNotFoundError(name, lang)
        values[name] = method.compute(text)
    return GematriaValues(**values)


def compute_value(
    text: str,
    method: str = "standard",
    language: str = "auto",
    registry: MethodRegistry | None = None,
) -> int:
    """
    One value by method identifier or alias.

    Empty text is not an error here; it is worth 0 in every system.
    """
    lang = resolve_language(text, language)
    registry = registry or default_registry()
    found = registry.resolve(method, lang)
    if found is None:
        raise MethodNotFoundError(method, lang)
    return found.compute(text)


def compute_all(text: str, language: str = "auto") -> dict[str, int]:
    """Every native system of the text's language, with lenient Greek ordinal."""
    lang = resolve_language(text, language)
    if lang == HEBREW:
        values = hebrew.compute_all(text)
        values["mispar_katan_mispari"] = hebrew.mispar_katan_mispari(text)
        return values
    if lang == GREEK:
        return greek.compute_all(text)
    if lang == ENGLISH:
        return english.compute_all(text)
    raise GematriaError(f"Unsupported language: {lang}")
