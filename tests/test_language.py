from __future__ import annotations

import pytest

from scriptures.gematria.language import (
    detect_language,
    is_english,
    is_greek,
    is_hebrew,
    normalize_language,
    resolve_language,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("בראשית", "hebrew"),
        ("λόγος", "greek"),
        ("In the beginning", "english"),
        # Presence, not majority.
        ("Hello world שלום", "hebrew"),
        ("the word λογος here", "greek"),
        ("λογος שלום", "hebrew"),
        ("1611", "english"),
        ("", "english"),
    ],
)
def test_detect_language(text, expected):
    assert detect_language(text) == expected


def test_predicates():
    assert is_hebrew("בְּ")
    assert not is_hebrew("abc")
    assert is_greek("ἀρχῇ")
    assert not is_greek("")
    assert is_english("Amen")


def test_resolve_language_keeps_explicit_choice():
    assert resolve_language("בראשית", "english") == "english"
    assert resolve_language("בראשית", "auto") == "hebrew"
    assert resolve_language("λογος", None) == "greek"


@pytest.mark.parametrize(
    "edition_language, expected",
    [
        ("Hebrew", "hebrew"),
        ("Ancient Hebrew", "hebrew"),
        ("Koine Greek", "greek"),
        ("ENGLISH", "english"),
        ("Latin", "auto"),
        (None, "auto"),
        ("", "auto"),
    ],
)
def test_normalize_language(edition_language, expected):
    assert normalize_language(edition_language) == expected
