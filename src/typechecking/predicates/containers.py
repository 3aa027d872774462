"""Predicates for built-in containers, buffers and array-like values."""

from __future__ import annotations

import array
import weakref
from typing import Any

from typechecking.predicates._base import (
    MAX_SAFE_INTEGER,
    attempt,
    has_genuine_type,
    is_primitive,
    length_of,
    type_defines,
)


# Unbound slots of C types only accept instances with the matching layout, so
# an object faking ``__class__`` makes them raise.

def is_list(value: Any) -> bool:
    return attempt(list.__len__, value)


def is_tuple(value: Any) -> bool:
    return attempt(tuple.__len__, value)


def is_dict(value: Any) -> bool:
    return attempt(dict.__len__, value)


def is_set(value: Any) -> bool:
    return attempt(set.__len__, value)


def is_frozenset(value: Any) -> bool:
    return attempt(frozenset.__len__, value)


def is_bytearray(value: Any) -> bool:
    return attempt(bytearray.__len__, value)


def is_typed_array(value: Any) -> bool:
    """An ``array.array`` of any typecode."""
    return attempt(array.array.buffer_info, value)


def is_memoryview(value: Any) -> bool:
    # len() fails on released and zero-dimensional views, which are still views.
    return has_genuine_type(value, memoryview)


def is_weak_key_dict(value: Any) -> bool:
    return has_genuine_type(value, weakref.WeakKeyDictionary)


def is_weak_value_dict(value: Any) -> bool:
    return has_genuine_type(value, weakref.WeakValueDictionary)


def is_weak_set(value: Any) -> bool:
    return has_genuine_type(value, weakref.WeakSet)


def is_array_like_object(value: Any) -> bool:
    """A non-primitive, indexable, non-mapping value with a safe length.

    Lists, tuples, ``str`` subclasses, ``array.array`` and user sequences
    qualify. Mappings are excluded because indexing them is by key.
    """
    if is_primitive(value):
        return False
    if not type_defines(value, "__getitem__") or type_defines(value, "keys"):
        return False
    length = length_of(value)
    return length is not None and 0 <= length <= MAX_SAFE_INTEGER


def is_array_like(value: Any) -> bool:
    """Same as :func:`is_array_like_object` but also accepts ``str`` and ``bytes``."""
    return type(value) in (str, bytes) or is_array_like_object(value)


def is_non_empty_array_like(value: Any) -> bool:
    return is_array_like(value) and length_of(value) != 0


def is_iterable(value: Any) -> bool:
    if value is None:
        return False
    return type_defines(value, "__iter__")
