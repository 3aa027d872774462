"""Predicates for scalars, functions and general objects."""

from __future__ import annotations

import inspect
import re
import types
from datetime import date, datetime
from typing import Any

from typechecking.predicates._base import has_genuine_type, is_primitive, type_attribute, type_defines
from typechecking.predicates.containers import is_array_like_object
from typechecking.predicates.numbers import is_number, is_positive_integer


ROUTINE_TYPES: tuple[type, ...] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
)

IMMUTABLE_CONTAINER_TYPES: tuple[type, ...] = (tuple, frozenset, range, types.MappingProxyType)

_ABSENT = object()


def is_non_primitive(value: Any) -> bool:
    return not is_primitive(value)


def is_non_null(value: Any) -> bool:
    return value is not None


def is_boolean(value: Any) -> bool:
    return has_genuine_type(value, bool)


def is_string(value: Any, length: int | None = None) -> bool:
    """A ``str``, optionally of exactly ``length`` characters.

    An invalid ``length`` (anything but a non-negative ``int``) never matches.
    """
    if not has_genuine_type(value, str):
        return False
    if length is None:
        return True
    return is_positive_integer(length) and str.__len__(value) == length


def is_non_empty_string(value: Any) -> bool:
    return has_genuine_type(value, str) and str.__len__(value) > 0


def is_date(value: Any) -> bool:
    """A ``datetime.date``, which includes ``datetime.datetime`` instances."""
    return has_genuine_type(value, date)


def is_datetime(value: Any) -> bool:
    return has_genuine_type(value, datetime)


def is_pattern(value: Any) -> bool:
    """A compiled regular expression."""
    return has_genuine_type(value, re.Pattern)


def is_callable(value: Any) -> bool:
    return callable(value)


def _positional_arity(value: Any) -> int | None:
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        return None
    required = 0
    for parameter in signature.parameters.values():
        if parameter.kind not in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            break
        if parameter.default is not parameter.empty:
            break
        required += 1
    return required


def is_function(value: Any, arity: int | None = None) -> bool:
    """A function or method, optionally taking exactly ``arity`` leading positional arguments.

    The arity counts positional parameters before the first one with a default,
    so ``def f(a, b=1)`` has an arity of 1.
    """
    if not has_genuine_type(value, *ROUTINE_TYPES):
        return False
    if arity is None:
        return True
    return is_positive_integer(arity) and _positional_arity(value) == arity


def is_generator_function(value: Any) -> bool:
    """A function defined with ``def`` whose body contains ``yield``."""
    if not has_genuine_type(value, types.FunctionType, types.MethodType):
        return False
    return inspect.isgeneratorfunction(value)


def is_instance_of(value: Any, cls: Any) -> bool:
    """``isinstance(value, cls)``, including ABC registration; false on a bad ``cls``."""
    # A forged or raising __class__ and a hostile __instancecheck__ all land here.
    try:
        return isinstance(value, cls)
    except Exception:
        return False


def _is_frozen_dataclass_instance(value: Any) -> bool:
    if has_genuine_type(value, type):
        return False
    params = type_attribute(value, "__dataclass_params__")
    if params is None:
        return False
    try:
        return getattr(params, "frozen", False) is True
    except Exception:
        return False


def is_immutable(value: Any) -> bool:
    """A primitive, or a container that cannot be changed in place.

    The check is shallow: a tuple holding a list is still immutable. Frozen
    dataclasses are recognized from their type, never from the instance.
    """
    if is_primitive(value) or has_genuine_type(value, *IMMUTABLE_CONTAINER_TYPES):
        return True
    return _is_frozen_dataclass_instance(value)


def is_mutable(value: Any) -> bool:
    return not is_immutable(value)


def is_mutable_array_like_object(value: Any) -> bool:
    return is_array_like_object(value) and not is_immutable(value)


def _kind(value: Any) -> str:
    if value is _ABSENT:
        return "absent"
    if value is None:
        return "none"
    if has_genuine_type(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if has_genuine_type(value, complex):
        return "complex"
    if has_genuine_type(value, str):
        return "string"
    if has_genuine_type(value, bytes):
        return "bytes"
    if callable(value):
        return "function"
    return "object"


def _is_mapping(value: Any) -> bool:
    return type_defines(value, "keys") and type_defines(value, "__getitem__")


def _shape_keys(shape: Any) -> list[Any]:
    if _is_mapping(shape):
        return list(shape.keys())
    return [name for name in dir(shape) if not name.startswith("_")]


def _entry(obj: Any, key: Any, mapping: bool) -> Any:
    if mapping:
        return obj[key] if key in obj else _ABSENT
    if not isinstance(key, str):
        return _ABSENT
    return getattr(obj, key, _ABSENT)


def _same_kinds(value: Any, shape: Any) -> bool:
    value_is_mapping = _is_mapping(value)
    shape_is_mapping = _is_mapping(shape)
    for key in _shape_keys(shape):
        expected = _kind(_entry(shape, key, shape_is_mapping))
        if _kind(_entry(value, key, value_is_mapping)) != expected:
            return False
    return True


def is_duck_of(value: Any, shape: Any) -> bool:
    """Whether ``value`` has, for every key of ``shape``, an entry of the same kind.

    Keys are mapping keys for mappings and public attributes (inherited ones
    included) otherwise. Only the shallow kind of each entry is compared
    (absent, none, boolean, number, complex, string, bytes, function, object),
    not its value or structure.

    >>> is_duck_of({"a": 1, "b": "x"}, {"a": 0, "b": ""})
    True
    >>> is_duck_of({"a": 1}, {"a": 0, "b": ""})
    False
    """
    if is_primitive(value) or is_primitive(shape):
        return False
    # Properties and custom __getattr__/__contains__ may raise on either side.
    try:
        return _same_kinds(value, shape)
    except Exception:
        return False
