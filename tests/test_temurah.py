from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from scriptures.gematria import temurah
from scriptures.gematria.hebrew import FINAL_TO_BASE, LETTERS, mispar_hechrachi, normalize_finals

hebrew_text = st.text(alphabet=LETTERS + "".join(FINAL_TO_BASE) + " ,", max_size=40)


def test_atbash():
    assert temurah.atbash("בבל") == "ששכ"
    assert temurah.atbash("אבגד") == "תשרק"


def test_albam():
    assert temurah.albam("אלהים") == "לאעשב"


def test_final_forms_fold_before_substitution():
    # ם folds to מ, whose Atbash partner is י; י has no final form.
    assert temurah.atbash("ם") == "י"
    # מ -> ב under Albam; ב has no final form either.
    assert temurah.albam("ם", preserve_final_forms=True) == "ב"
    # ך -> כ -> ל under Atbash; כ <-> ת under Albam.
    assert temurah.albam("ך") == "ת"
    # צ <-> ה under Atbash: final ץ stays plain ה.
    assert temurah.atbash("ץ", preserve_final_forms=True) == "ה"
    # פ <-> ו under Albam.
    assert temurah.albam("ו", preserve_final_forms=True) == "פ"


def test_non_hebrew_passes_through():
    assert temurah.atbash("abc 123 בְּ") == "abc 123 שְּ"


def test_values():
    assert temurah.atbash_value("בבל") == mispar_hechrachi("ששכ") == 620
    assert temurah.albam_value("אלהים") == mispar_hechrachi("לאעשב")


def test_apply_and_metadata():
    assert temurah.apply("atbash", "בבל") == "ששכ"
    assert temurah.list_ciphers() == ["atbash", "albam"]
    assert temurah.get_cipher("albam").quote.startswith("אל במ")
    assert temurah.get_cipher("caesar") is None
    with pytest.raises(ValueError):
        temurah.apply("caesar", "בבל")


def test_get_mapping_returns_a_copy():
    mapping = temurah.get_mapping("atbash")
    mapping["א"] = "א"
    assert temurah.ATBASH_MAPPING["א"] == "ת"
    assert len(temurah.get_mapping("albam")) == 22
    with pytest.raises(ValueError):
        temurah.get_mapping("caesar")


@given(hebrew_text)
def test_atbash_is_an_involution(text):
    assert temurah.atbash(temurah.atbash(text)) == normalize_finals(text)


@given(hebrew_text)
def test_albam_is_an_involution(text):
    assert temurah.albam(temurah.albam(text)) == normalize_finals(text)
