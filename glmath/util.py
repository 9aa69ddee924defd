"""Miscellaneous helpers."""

from __future__ import annotations

import operator


def is_power_of_2(value: int) -> bool:
    """Return True if ``value`` is a positive power of two.

    Texture sizes are the usual caller. Zero and negative numbers are not
    powers of two.

    Raises:
        TypeError: If ``value`` is not an integer; floats such as 8.0 are
            rejected rather than truncated
    """
    value = operator.index(value)
    if value <= 0:
        return False
    return (value & (value - 1)) == 0
