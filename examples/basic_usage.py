"""Basic usage example for typechecking."""

import logging

from rich.console import Console

from typechecking import (
    ExpectationError,
    checks,
    expect_non_empty_string,
    expect_optional_positive_integer,
    expect_strings,
    is_duck_of,
    print_expectation_error,
    raise_type_error,
)


def create_user(name, tags, age=None):
    """Validate arguments the way a library entry point would."""
    expect_non_empty_string(name)
    expect_strings(tags)
    expect_optional_positive_integer(age)
    return {"name": name, "tags": list(tags), "age": age}


def expect_sorted(values):
    if list(values) != sorted(values):
        raise_type_error("a sorted list", expect_sorted)


def main():
    """Demonstrate probes, expectations and the disabled switch."""
    logging.basicConfig(level=logging.INFO)
    console = Console()

    print(create_user("ada", ["admin"], 36))
    print(is_duck_of({"name": "bob", "age": 3}, {"name": "", "age": 0}))

    for call in (
        lambda: create_user("", ["admin"]),
        lambda: create_user("ada", ["admin", 1]),
        lambda: create_user("ada", [], age=-1),
        lambda: expect_sorted([3, 1, 2]),
    ):
        try:
            call()
        except ExpectationError as error:
            print_expectation_error(error, console=console, verbosity=0)

    with checks.disabled_scope():
        print(create_user("", "not a list", age=-1))


if __name__ == "__main__":
    main()
