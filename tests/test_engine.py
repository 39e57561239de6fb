from __future__ import annotations

import pytest

from scriptures import compute, compute_all, compute_value
from scriptures.errors import ArchaicLetterError, EmptyInputError, GematriaError, MethodNotFoundError
from scriptures.gematria.registry import GematriaMethod, MethodRegistry
from scriptures.models import GematriaValues


def test_compute_detects_language():
    assert compute("בראשית") == GematriaValues(standard=913, ordinal=76, reduced=13)
    assert compute("λογος") == GematriaValues(standard=373, ordinal=62, reduced=4)
    assert compute("God") == GematriaValues(standard=26, ordinal=26, reduced=8)


def test_compute_explicit_language():
    assert compute("God", "english").as_dict() == {"standard": 26, "ordinal": 26, "reduced": 8}
    assert compute("בראשית", "hebrew")["ordinal"] == 76


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_compute_rejects_empty_input(text):
    with pytest.raises(EmptyInputError):
        compute(text)


def test_compute_strict_greek_ordinal():
    with pytest.raises(ArchaicLetterError):
        compute("Ϛ")


def test_compute_unsupported_language():
    with pytest.raises(GematriaError):
        compute("abc", "latin")


def test_compute_value_by_alias_and_identifier():
    assert compute_value("God", "ordinal") == 26
    assert compute_value("שלום", "mispar_gadol") == 936
    assert compute_value("דוד", "square") == 68
    assert compute_value("IESUS", "subjective") == 473
    assert compute_value("λογος") == 373


def test_compute_value_empty_text_is_zero():
    assert compute_value("", "standard", "hebrew") == 0


def test_compute_value_unknown_method():
    with pytest.raises(MethodNotFoundError) as excinfo:
        compute_value("שלום", "bogus")
    assert excinfo.value.method == "bogus"
    assert excinfo.value.language == "hebrew"
    assert isinstance(excinfo.value, KeyError)
    assert str(excinfo.value) == "Gematria method 'bogus' not found for language 'hebrew'"


def test_compute_value_alias_from_other_language():
    with pytest.raises(MethodNotFoundError):
        compute_value("שלום", "agrippa")


def test_injected_registry():
    registry = MethodRegistry()
    registry.register(GematriaMethod("letters", "Letters", "english", len, "standard"))
    assert compute_value("abc", "standard", "english", registry) == 3
    with pytest.raises(MethodNotFoundError):
        compute("abc", "english", registry)


def test_compute_all_per_language():
    hebrew = compute_all("בראשית")
    assert hebrew["mispar_hechrachi"] == 913
    assert hebrew["mispar_katan_mispari"] == 4
    assert compute_all("αϠ") == {"standard": 901, "ordinal": 1, "reduced": 1}
    assert compute_all("God")["whitehead_greek"] == 22
