from types import SimpleNamespace

import pytest

from typechecking.descriptors import TypeDescriptor
from typechecking.errors import ExpectationError
from typechecking.expectations import (
    generate_expectations,
    optional_name,
    plural_name,
    pluralize,
    singular_name,
)


def _is_even(value):
    return isinstance(value, int) and value % 2 == 0


def _is_multiple_of(value, base):
    return isinstance(value, int) and value % base == 0


EVEN = TypeDescriptor.define("even", "an even integer", _is_even)
MULTIPLE_OF = TypeDescriptor.define("multiple_of", "a multiple of the given base", _is_multiple_of)


@pytest.fixture
def switch():
    return SimpleNamespace(disabled=False)


@pytest.fixture
def even(switch):
    return generate_expectations(EVEN, switch)


@pytest.mark.parametrize(
    ("name", "plural"),
    [
        ("list", "lists"),
        ("instance_of", "instances_of"),
        ("duck_of", "ducks_of"),
        ("multiple_of", "multiples_of"),
        ("class", "classes"),
        ("regex", "regexes"),
        ("weak_set", "weak_sets"),
        ("non_null", "non_nulls"),
    ],
)
def test_pluralize(name, plural):
    assert pluralize(name) == plural


def test_member_names():
    assert singular_name("even") == "expect_even"
    assert plural_name("even") == "expect_evens"
    assert optional_name("even") == "expect_optional_even"
    assert plural_name("instance_of") == "expect_instances_of"


def test_generates_three_named_callables(even):
    assert list(even) == ["expect_even", "expect_evens", "expect_optional_even"]
    for member_name, func in even.items():
        assert func.__name__ == member_name
        assert func.__qualname__ == member_name
        assert "an even integer" in func.__doc__


def test_singular_expectation(even):
    expect_even = even["expect_even"]

    assert expect_even(4) is None
    with pytest.raises(ExpectationError, match=r"^expected an even integer\.$"):
        expect_even(3)


def test_extra_arguments_reach_the_predicate(switch):
    generated = generate_expectations(MULTIPLE_OF, switch)

    generated["expect_multiple_of"](9, 3)
    generated["expect_multiple_of"](9, base=3)
    with pytest.raises(ExpectationError, match="expected a multiple of the given base."):
        generated["expect_multiple_of"](10, 3)

    generated["expect_multiples_of"]([3, 6, 9], 3)
    with pytest.raises(ExpectationError, match="expected every element to be a multiple of the given base."):
        generated["expect_multiples_of"]([3, 4], 3)

    generated["expect_optional_multiple_of"](None, 3)
    with pytest.raises(ExpectationError):
        generated["expect_optional_multiple_of"](4, 3)


def test_plural_expectation_accepts_array_like_objects(even):
    expect_evens = even["expect_evens"]

    expect_evens([2, 4])
    expect_evens((0,))
    expect_evens(range(0, 10, 2))


def test_plural_expectation_is_vacuously_true(even):
    even["expect_evens"]([])
    even["expect_evens"](())


@pytest.mark.parametrize("values", [2, "24", b"24", {2: 4}, {2, 4}, None])
def test_plural_expectation_rejects_non_array_like_objects(even, values):
    with pytest.raises(ExpectationError) as exc_info:
        even["expect_evens"](values)

    assert str(exc_info.value) == (
        "expected an array (or array-like object) where every element is an even integer."
    )


def test_plural_expectation_stops_at_first_failure(switch):
    seen = []

    def recording_is_even(value):
        seen.append(value)
        return _is_even(value)

    descriptor = TypeDescriptor.define("even", "an even integer", recording_is_even)
    expect_evens = generate_expectations(descriptor, switch)["expect_evens"]

    with pytest.raises(ExpectationError) as exc_info:
        expect_evens([2, 3, 4, 5])

    assert str(exc_info.value) == "expected every element to be an even integer."
    assert seen == [2, 3]


def test_optional_expectation(even):
    expect_optional_even = even["expect_optional_even"]

    expect_optional_even(None)
    expect_optional_even(2)
    with pytest.raises(ExpectationError, match="expected an even integer."):
        expect_optional_even(1)


def test_disabled_switch_turns_every_variant_into_a_no_op(even, switch):
    switch.disabled = True

    even["expect_even"](3)
    even["expect_evens"]("not a list")
    even["expect_evens"]([1])
    even["expect_optional_even"](1)

    switch.disabled = False
    with pytest.raises(ExpectationError):
        even["expect_even"](3)


def test_generation_is_repeatable(switch):
    first = generate_expectations(EVEN, switch)
    second = generate_expectations(EVEN, switch)

    assert list(first) == list(second)
    for member_name in first:
        assert first[member_name] is not second[member_name]
        assert first[member_name].__doc__ == second[member_name].__doc__

    for value in (2, 3, None):
        outcomes = []
        for generated in (first, second):
            try:
                generated["expect_optional_even"](value)
                outcomes.append(None)
            except ExpectationError as error:
                outcomes.append(str(error))
        assert outcomes[0] == outcomes[1]


class IndexedOnly:
    """Array-like through ``len`` and ``__getitem__`` alone; iteration is disabled."""

    __iter__ = None

    def __init__(self, *items):
        self._items = list(items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]


def test_plural_expectation_indexes_array_like_objects(even):
    expect_evens = even["expect_evens"]

    expect_evens(IndexedOnly(2, 4))
    with pytest.raises(ExpectationError) as exc_info:
        expect_evens(IndexedOnly(2, 3))

    assert str(exc_info.value) == "expected every element to be an even integer."


def test_descriptions_do_not_mention_extra_arguments(switch):
    expect_multiple_of = generate_expectations(MULTIPLE_OF, switch)["expect_multiple_of"]

    with pytest.raises(ExpectationError) as exc_info:
        expect_multiple_of(4, 3)

    assert str(exc_info.value) == "expected a multiple of the given base."
