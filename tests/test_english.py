from __future__ import annotations

import pytest

from scriptures.gematria import english


def test_ordinal_and_digital_root():
    assert english.compute_ordinal("God") == 26
    assert english.compute_digital_root("God") == 8
    assert english.compute_ordinal("In the beginning") == 137
    assert english.compute_ordinal("Amen") == 33


def test_punctuation_and_digits_are_ignored():
    assert english.compute_ordinal("Amen, Written from 1611!") == 194


def test_case_insensitive_systems():
    assert english.compute_ordinal("GOD") == english.compute_ordinal("god")
    assert english.compute_agrippa("jesus") == english.compute_agrippa("JESUS") == 985


@pytest.mark.parametrize(
    "fn, text, expected",
    [
        (english.compute_whitehead_greek, "GOD", 22),
        (english.compute_whitehead_hebrew, "WHITEHEAD", 50),
        (english.compute_whitehead_subjective, "IESUS", 473),
        (english.compute_whitehead_subjective, "PYRAMID", 486),
        (english.compute_whitehead_subjective, "pyramid", 486),
    ],
)
def test_whitehead_systems(fn, text, expected):
    assert fn(text) == expected


def test_objective_is_case_sensitive():
    assert english.compute_whitehead_objective("GOD") == 26
    assert english.compute_whitehead_objective("God") == 7 + 41 + 30


def test_compute_all_names_every_system():
    values = english.compute_all("God")
    assert set(values) == {
        "simple_ordinal",
        "agrippa_latin",
        "whitehead_greek",
        "whitehead_hebrew",
        "whitehead_objective",
        "whitehead_subjective",
        "digital_root",
    }
    assert values["simple_ordinal"] == 26
    assert values["digital_root"] == 8


def test_is_english():
    assert english.is_english("In the beginning")
    assert not english.is_english("Amen.")
    assert not english.is_english("")
