"""Lightweight validation helpers."""

from typing import Any


def is_positive_integer(value: Any) -> bool:
    """True for a real ``int`` above zero.

    ``bool`` is an ``int`` subclass and is rejected explicitly; floats and
    numeric strings are rejected by type rather than coerced.
    """
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
