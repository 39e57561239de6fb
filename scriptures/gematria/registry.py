"""
Method registry.

Maps a canonical method identifier (``mispar_hechrachi``, ``isopsephy``) and,
per language, a short alias (``standard``, ``ordinal``) to a compute function.
Registries are plain objects: the application builds one at startup and hands
it to whatever needs lookups, and tests can build isolated ones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from collections.abc import Callable

from . import english, greek, hebrew, temurah
from .language import AUTO, ENGLISH, GREEK, HEBREW, LANGUAGES, Language

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GematriaMethod:
    identifier: str
    display_name: str
    language: Language
    compute: Callable[[str], int]
    alias: str | None = None
    description: str | None = None


class MethodRegistry:
    def __init__(self) -> None:
        self._methods: dict[str, GematriaMethod] = {}
        self._aliases: dict[tuple[str, str], GematriaMethod] = {}

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._methods

    def __len__(self) -> int:
        return len(self._methods)

    def register(self, method: GematriaMethod) -> None:
        """Insert by identifier (last write wins) and index the alias, if any."""
        if method.identifier in self._methods:
            logger.debug("Overwriting gematria method %s", method.identifier)
        self._methods[method.identifier] = method
        if method.alias:
            self._aliases[(method.language, method.alias)] = method

    def resolve(self, name: str, language: str | None = None) -> GematriaMethod | None:
        """
        Look a method up by identifier or alias.

        An exact identifier always wins. Otherwise the alias is looked up in
        the given language, or, without one, in hebrew, greek, english order.
        """
        method = self._methods.get(name)
        if method is not None:
            return method
        if language and language != AUTO:
            return self._aliases.get((language, name))
        for lang in LANGUAGES:
            method = self._aliases.get((lang, name))
            if method is not None:
                return method
        return None

    def list_methods(self, language: str | None = None) -> list[GematriaMethod]:
        methods = list(self._methods.values())
        if not language or language == AUTO:
            return methods
        return [m for m in methods if m.language == language]

    def list_method_ids(self, language: str | None = None) -> list[str]:
        return [m.identifier for m in self.list_methods(language)]

    def list_aliases(self, language: str | None = None) -> list[str]:
        return [m.alias for m in self.list_methods(language) if m.alias]


def _hebrew_methods() -> list[GematriaMethod]:
    m = hebrew
    return [
        GematriaMethod("mispar_hechrachi", "Mispar Hechrachi", HEBREW, m.mispar_hechrachi, "standard",
                       "Standard Hebrew gematria using traditional letter values"),
        GematriaMethod("mispar_siduri", "Mispar Siduri", HEBREW, m.mispar_siduri, "ordinal",
                       "Ordinal Hebrew gematria (1-22 by alphabet position)"),
        GematriaMethod("mispar_katan", "Mispar Katan", HEBREW, m.mispar_katan, "reduced",
                       "Each letter reduced to a single digit, then summed"),
        GematriaMethod("mispar_katan_mispari", "Mispar Katan Mispari", HEBREW, m.mispar_katan_mispari,
                       "integral_reduced", "Digital root of the Mispar Katan total"),
        GematriaMethod("mispar_gadol", "Mispar Gadol", HEBREW, m.mispar_gadol, "major",
                       "Final letters count as hundreds (500-900)"),
        GematriaMethod("mispar_kolel", "Mispar Kolel", HEBREW, m.mispar_kolel, "inclusive",
                       "Cumulative sum of standard values up to each letter"),
        GematriaMethod("mispar_perati", "Mispar Perati", HEBREW, m.mispar_perati, "square",
                       "Square of each letter's standard value"),
        GematriaMethod("mispar_meshulash", "Mispar Meshulash", HEBREW, m.mispar_meshulash, "cube",
                       "Cube of each letter's standard value"),
        GematriaMethod("mispar_chitzon", "Mispar Chitzon", HEBREW, m.mispar_chitzon, "external",
                       "Every letter counts as 1"),
        GematriaMethod("mispar_hakadmi", "Mispar HaKadmi", HEBREW, m.mispar_hakadmi, "prior",
                       "Triangular number of each letter's ordinal position"),
        GematriaMethod("atbash_hechrachi", "Atbash", HEBREW, temurah.atbash_value, "atbash",
                       "Standard value of the Atbash-substituted text"),
        GematriaMethod("albam_hechrachi", "Albam", HEBREW, temurah.albam_value, "albam",
                       "Standard value of the Albam-substituted text"),
    ]


def _greek_methods() -> list[GematriaMethod]:
    return [
        GematriaMethod("isopsephy", "Isopsephy", GREEK, greek.compute_standard, "standard",
                       "Standard Greek isopsephy using Milesian letter values"),
        GematriaMethod("isopsephy_ordinal", "Greek Ordinal", GREEK, greek.compute_ordinal, "ordinal",
                       "Ordinal Greek gematria (1-24 by alphabet position); archaic letters rejected"),
        GematriaMethod("isopsephy_reduced", "Greek Reduced", GREEK, greek.compute_reduced, "reduced",
                       "Digital root (pythmen) of the standard value"),
    ]


def _english_methods() -> list[GematriaMethod]:
    return [
        GematriaMethod("english_ordinal", "English Ordinal", ENGLISH, english.compute_ordinal, "ordinal",
                       "English ordinal gematria (A=1, B=2, ... Z=26)"),
        GematriaMethod("english_standard", "English Standard", ENGLISH, english.compute_ordinal, "standard",
                       "English has no tiered native system; the ordinal value serves as standard"),
        GematriaMethod("english_digital_root", "English Digital Root", ENGLISH, english.compute_digital_root,
                       "reduced", "Digital root of the ordinal value"),
        GematriaMethod("agrippa_latin", "Agrippa Latin", ENGLISH, english.compute_agrippa, "agrippa",
                       "Agrippa's units/tens/hundreds Latin values (1651)"),
        GematriaMethod("whitehead_greek", "Whitehead Greek Cabala", ENGLISH, english.compute_whitehead_greek,
                       "greek_cabala", "English letters at their Greek alphabet positions (1899)"),
        GematriaMethod("whitehead_hebrew", "Whitehead Hebrew Values", ENGLISH, english.compute_whitehead_hebrew,
                       "hebrew_cabala", "Hebrew gematria values of English letters (1899)"),
        GematriaMethod("whitehead_objective", "Whitehead Objective Cabala", ENGLISH,
                       english.compute_whitehead_objective, "objective",
                       "Case-sensitive: A-Z = 1-26, a-z = 27-52 (1899)"),
        GematriaMethod("whitehead_subjective", "Whitehead Subjective Cabala", ENGLISH,
                       english.compute_whitehead_subjective, "subjective",
                       "A-M = 1-13, N-T = 114-120, U-Z = 221-226 (1899)"),
    ]


def build_registry() -> MethodRegistry:
    """A fresh registry holding every built-in method."""
    registry = MethodRegistry()
    for method in (*_hebrew_methods(), *_greek_methods(), *_english_methods()):
        registry.register(method)
    return registry


@lru_cache(maxsize=None)
def default_registry() -> MethodRegistry:
    """The process-wide registry, built once on first use."""
    return build_registry()
