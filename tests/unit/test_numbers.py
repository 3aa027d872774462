import math

import pytest

from typechecking.predicates import (
    MAX_SAFE_INTEGER,
    is_integer,
    is_negative_integer,
    is_negative_number,
    is_number,
    is_positive_integer,
    is_positive_number,
    is_regular_number,
    is_safe_integer,
    is_strictly_negative_integer,
    is_strictly_negative_number,
    is_strictly_positive_integer,
    is_strictly_positive_number,
)


class ComparesPositive(int):
    def __ge__(self, other):
        return True

    def __gt__(self, other):
        return True


@pytest.mark.parametrize("value", [0, 1, -7, 10**400, 2.5, -0.0, math.inf, math.nan])
def test_numbers_accept_int_and_float(value):
    assert is_number(value)


@pytest.mark.parametrize("value", [True, False, None, "1", 1j, [1], object()])
def test_numbers_reject_bool_and_non_numeric(value):
    assert not is_number(value)


def test_regular_number_excludes_nan_and_infinities():
    assert is_regular_number(1.5)
    assert is_regular_number(10**400)
    assert not is_regular_number(math.nan)
    assert not is_regular_number(math.inf)
    assert not is_regular_number(-math.inf)
    assert not is_regular_number(True)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, 3.0, -0.0, True])
def test_no_integer_variant_accepts_floats_or_bool(value):
    for predicate in (
        is_integer,
        is_safe_integer,
        is_positive_integer,
        is_strictly_positive_integer,
        is_negative_integer,
        is_strictly_negative_integer,
    ):
        assert not predicate(value), predicate.__name__


def test_safe_integer_bounds():
    assert is_safe_integer(MAX_SAFE_INTEGER)
    assert is_safe_integer(-MAX_SAFE_INTEGER)
    assert not is_safe_integer(MAX_SAFE_INTEGER + 1)
    assert not is_safe_integer(-MAX_SAFE_INTEGER - 1)
    assert is_integer(MAX_SAFE_INTEGER + 1)


def test_zero_boundary_for_integers():
    assert is_positive_integer(-0)
    assert is_negative_integer(-0)
    assert not is_strictly_positive_integer(0)
    assert not is_strictly_negative_integer(0)
    assert not is_positive_integer(-0.0)


def test_negative_zero_boundary_for_numbers():
    assert is_positive_number(-0.0)
    assert is_negative_number(-0.0)
    assert not is_strictly_positive_number(-0.0)
    assert not is_strictly_negative_number(-0.0)


def test_sign_variants():
    assert is_strictly_positive_integer(1)
    assert not is_positive_integer(-1)
    assert is_strictly_negative_integer(-1)
    assert not is_negative_integer(1)
    assert is_strictly_positive_number(0.5)
    assert is_strictly_negative_number(-0.5)


def test_infinities_are_only_non_strict():
    assert is_positive_number(math.inf)
    assert not is_strictly_positive_number(math.inf)
    assert is_negative_number(-math.inf)
    assert not is_strictly_negative_number(-math.inf)
    assert not is_positive_number(math.nan)
    assert not is_negative_number(math.nan)


def test_subclass_comparison_overrides_are_ignored():
    weird = ComparesPositive(-3)
    assert is_integer(weird)
    assert not is_positive_integer(weird)
    assert not is_strictly_positive_integer(weird)
    assert is_strictly_negative_integer(weird)
