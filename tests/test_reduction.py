from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from scriptures.gematria.reduction import digital_root


@pytest.mark.parametrize(
    "value, expected",
    [(0, 0), (7, 7), (9, 9), (10, 1), (373, 4), (913, 4), (888, 6), (999_999, 9)],
)
def test_digital_root(value, expected):
    assert digital_root(value) == expected


def test_negative_rejected():
    with pytest.raises(ValueError):
        digital_root(-1)


@given(st.integers(min_value=0, max_value=10**12))
def test_single_digit_and_congruent_mod_nine(n):
    root = digital_root(n)
    assert 0 <= root <= 9
    assert root % 9 == n % 9
    if n > 0:
        assert root == 1 + (n - 1) % 9


@given(st.integers(min_value=0, max_value=9))
def test_single_digits_are_fixed_points(n):
    assert digital_root(n) == n
