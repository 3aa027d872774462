"""Predicates for numeric values.

``bool`` is an ``int`` subclass in Python but is never classified as a number
here. Comparisons run on the genuine ``int``/``float`` payload so subclasses
overriding rich comparison cannot change the outcome.
"""

from __future__ import annotations

import math
from typing import Any

from typechecking.predicates._base import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, has_genuine_type


def _genuine_number(value: Any) -> int | float | None:
    if has_genuine_type(value, bool):
        return None
    if has_genuine_type(value, int):
        return int.__index__(value)
    if has_genuine_type(value, float):
        return float.__float__(value)
    return None


def _genuine_integer(value: Any) -> int | None:
    if has_genuine_type(value, bool) or not has_genuine_type(value, int):
        return None
    return int.__index__(value)


def is_number(value: Any) -> bool:
    return _genuine_number(value) is not None


def is_regular_number(value: Any) -> bool:
    """A number that is neither NaN nor infinite."""
    number = _genuine_number(value)
    if number is None:
        return False
    if isinstance(number, int):
        return True
    return math.isfinite(number)


def is_positive_number(value: Any) -> bool:
    """A number ``>= 0``; accepts ``-0.0`` and ``inf``."""
    number = _genuine_number(value)
    return number is not None and number >= 0


def is_strictly_positive_number(value: Any) -> bool:
    number = _genuine_number(value)
    return number is not None and 0 < number < math.inf


def is_negative_number(value: Any) -> bool:
    """A number ``<= 0``; accepts ``-0.0`` and ``-inf``."""
    number = _genuine_number(value)
    return number is not None and number <= 0


def is_strictly_negative_number(value: Any) -> bool:
    number = _genuine_number(value)
    return number is not None and -math.inf < number < 0


def is_integer(value: Any) -> bool:
    """A genuine ``int``. Integral floats such as ``3.0`` or ``-0.0`` are not integers."""
    return _genuine_integer(value) is not None


def is_safe_integer(value: Any) -> bool:
    integer = _genuine_integer(value)
    return integer is not None and MIN_SAFE_INTEGER <= integer <= MAX_SAFE_INTEGER


def is_positive_integer(value: Any) -> bool:
    integer = _genuine_integer(value)
    return integer is not None and integer >= 0


def is_strictly_positive_integer(value: Any) -> bool:
    integer = _genuine_integer(value)
    return integer is not None and integer > 0


def is_negative_integer(value: Any) -> bool:
    integer = _genuine_integer(value)
    return integer is not None and integer <= 0


def is_strictly_negative_integer(value: Any) -> bool:
    integer = _genuine_integer(value)
    return integer is not None and integer < 0
