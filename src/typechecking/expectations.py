"""Derivation of ``expect_*`` callables from type descriptors.

Every descriptor yields three expectations through :func:`generate_expectations`:

- ``expect_<name>(value, *args)`` raises unless ``is_<name>(value, *args)``.
- ``expect_<plural>(values, *args)`` checks every element of an array-like object.
- ``expect_optional_<name>(value, *args)`` also accepts ``None``.

Each one reads the ``disabled`` flag of its switch at call time, so toggling it
takes effect immediately for every generated callable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol

from typechecking.errors import raise_type_error
from typechecking.predicates import is_array_like_object

if TYPE_CHECKING:
    from typechecking.descriptors import TypeDescriptor


Expectation = Callable[..., None]


class Switch(Protocol):
    """Anything exposing the ``disabled`` flag, usually a :class:`~typechecking.registry.Registry`."""

    disabled: bool


def pluralize(name: str) -> str:
    """Plural form of a descriptor name.

    >>> pluralize("instance_of"), pluralize("duck_of"), pluralize("regex"), pluralize("list")
    ('instances_of', 'ducks_of', 'regexes', 'lists')
    """
    if name.endswith("instance_of"):
        return name[: -len("instance_of")] + "instances_of"
    if name.endswith("_of"):
        return name[: -len("_of")] + "s_of"
    if name.endswith(("s", "x")):
        return name + "es"
    return name + "s"


def singular_name(name: str) -> str:
    return f"expect_{name}"


def plural_name(name: str) -> str:
    return f"expect_{pluralize(name)}"


def optional_name(name: str) -> str:
    return f"expect_optional_{name}"


def _finalize(func: Expectation, member_name: str, doc: str) -> Expectation:
    func.__name__ = member_name
    func.__qualname__ = member_name
    func.__doc__ = doc
    return func


def _make_singular(descriptor: TypeDescriptor, switch: Switch) -> Expectation:
    predicate = descriptor.predicate
    description = descriptor.description

    def expect(value: Any, *args: Any, **kwargs: Any) -> None:
        __tracebackhide__ = True
        if switch.disabled:
            return
        if not predicate(value, *args, **kwargs):
            raise_type_error(description, expect)

    return _finalize(
        expect,
        singular_name(descriptor.name),
        f"Raise ExpectationError unless the value is {description}.",
    )


def _make_plural(descriptor: TypeDescriptor, switch: Switch) -> Expectation:
    predicate = descriptor.predicate
    container_description = (
        f"an array (or array-like object) where every element is {descriptor.description}"
    )
    element_description = f"every element to be {descriptor.description}"

    def expect_all(values: Any, *args: Any, **kwargs: Any) -> None:
        __tracebackhide__ = True
        if switch.disabled:
            return
        if not is_array_like_object(values):
            raise_type_error(container_description, expect_all)
        # Indexed like any array-like object, which need not define __iter__.
        for index in range(len(values)):
            if not predicate(values[index], *args, **kwargs):
                raise_type_error(element_description, expect_all)

    return _finalize(
        expect_all,
        plural_name(descriptor.name),
        f"Raise ExpectationError unless the value is {container_description}.",
    )


def _make_optional(descriptor: TypeDescriptor, switch: Switch) -> Expectation:
    predicate = descriptor.predicate
    description = descriptor.description

    def expect_optional(value: Any, *args: Any, **kwargs: Any) -> None:
        __tracebackhide__ = True
        if switch.disabled or value is None:
            return
        if not predicate(value, *args, **kwargs):
            raise_type_error(description, expect_optional)

    return _finalize(
        expect_optional,
        optional_name(descriptor.name),
        f"Raise ExpectationError unless the value is None or {description}.",
    )


def generate_expectations(descriptor: TypeDescriptor, switch: Switch) -> dict[str, Expectation]:
    """Build the singular, plural and optional expectations for ``descriptor``.

    Parameters
    ----------
    descriptor : TypeDescriptor
        The type to enforce.
    switch : Switch
        Object whose ``disabled`` attribute turns the expectations into no-ops.

    Returns
    -------
    dict[str, Expectation]
        Member name to callable, in singular, plural, optional order.
    """
    expectations = (
        _make_singular(descriptor, switch),
        _make_plural(descriptor, switch),
        _make_optional(descriptor, switch),
    )
    return {func.__name__: func for func in expectations}
