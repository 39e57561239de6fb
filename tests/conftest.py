"""
Test configuration.

Shared fixtures: an isolated method registry, a Flask test client and sample
verse data.
"""
from __future__ import annotations

import pytest

from scriptures.factory import create_app
from scriptures.gematria.registry import build_registry


@pytest.fixture
def registry():
    """A fresh registry, independent of the process-wide one."""
    return build_registry()


@pytest.fixture(scope="session")
def app():
    """One application for the session: the API extension is a module singleton."""
    app = create_app({"TESTING": True, "MAX_VERSE_WORDS": 50})
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_hebrew_text() -> str:
    """Genesis 1:1 with points and cantillation."""
    return "בְּרֵאשִׁ֖ית בָּרָ֣א אֱלֹהִ֑ים אֵ֥ת הַשָּׁמַ֖יִם וְאֵ֥ת הָאָֽרֶץ׃"


@pytest.fixture
def sample_greek_text() -> str:
    return "Ἐν ἀρχῇ ἦν ὁ λόγος"


@pytest.fixture
def colophon_words() -> list[dict]:
    """Two scripture words followed by a colophon word."""
    return [
        {"position": 1, "text": "בְּרֵאשִׁית", "lemma": "b/7225", "morph": "HR/Ncfsa"},
        {"position": 2, "text": "בָּרָא", "lemma": "1254 a", "morph": "HVqp3ms"},
        {"position": 3, "text": "סוף", "metadata": {"colophon": True}},
    ]


@pytest.fixture
def qere_ketiv_words() -> list[dict]:
    """A verse fragment carrying both readings of one word."""
    return [
        {"position": 1, "text": "וַיֹּאמֶר"},
        {"position": 2, "text": "הוּא", "variant": "qere"},
        {"position": 3, "text": "היא", "variant": "ketiv"},
    ]
