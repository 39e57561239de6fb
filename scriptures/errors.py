"""Error types raised by the gematria engine."""

from __future__ import annotations

from collections.abc import Iterable


class GematriaError(Exception):
    """Base class for gematria computation failures."""


class EmptyInputError(GematriaError, ValueError):
    def __init__(self, message: str = "Input text cannot be empty") -> None:
        super().__init__(message)


class ArchaicLetterError(GematriaError, ValueError):
    """
    Raised by strict Greek ordinal computation.

    Stigma, koppa and sampi carry isopsephy values (6, 90, 900) but have no
    position in the 24-letter alphabet.
    """

    def __init__(self, letters: Iterable[str]) -> None:
        self.letters = tuple(letters)
        listed = ", ".join(self.letters)
        super().__init__(
            f"Cannot calculate ordinal value: text contains archaic Greek letters ({listed}). "
            "Archaic letters (stigma Ϛ, koppa Ϟ, sampi Ϡ) have standard isopsephy values (6, 90, 900) "
            "but no ordinal position in the 24-letter Greek alphabet. "
            "Use the standard system for isopsephy or pass strict=False to skip archaic letters."
        )


class MethodNotFoundError(GematriaError, KeyError):
    def __init__(self, method: str, language: str | None = None) -> None:
        self.method = method
        self.language = language
        where = f" for language '{language}'" if language and language != "auto" else ""
        super().__init__(f"Gematria method '{method}' not found{where}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])
