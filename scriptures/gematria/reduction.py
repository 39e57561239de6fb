from __future__ import annotations


def digital_root(value: int) -> int:
    """
    Reduce a non-negative integer to a single digit by repeated digit sums.

    Multiples of nine reduce to 9, never 0, so only 0 itself maps to 0:
      digital_root(9) == 9
      digital_root(18) == 9
      digital_root(473) == 5
    """
    value = int(value)
    if value < 0:
        raise ValueError(f"digital_root expects a non-negative integer, got {value}")
    while value > 9:
        value = sum(int(d) for d in str(value))
    return value
