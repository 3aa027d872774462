"""Capability probes: one pure ``is_*`` predicate per recognized type."""

from ._base import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, is_primitive
from .containers import (
    is_array_like,
    is_array_like_object,
    is_bytearray,
    is_dict,
    is_frozenset,
    is_iterable,
    is_list,
    is_memoryview,
    is_non_empty_array_like,
    is_set,
    is_tuple,
    is_typed_array,
    is_weak_key_dict,
    is_weak_set,
    is_weak_value_dict,
)
from .numbers import (
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
from .objects import (
    is_boolean,
    is_callable,
    is_date,
    is_datetime,
    is_duck_of,
    is_function,
    is_generator_function,
    is_immutable,
    is_instance_of,
    is_mutable,
    is_mutable_array_like_object,
    is_non_empty_string,
    is_non_null,
    is_non_primitive,
    is_pattern,
    is_string,
)


__all__ = [
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Containers
    "is_array_like",
    "is_array_like_object",
    "is_bytearray",
    "is_dict",
    "is_frozenset",
    "is_iterable",
    "is_list",
    "is_memoryview",
    "is_non_empty_array_like",
    "is_set",
    "is_tuple",
    "is_typed_array",
    "is_weak_key_dict",
    "is_weak_set",
    "is_weak_value_dict",
    # Numbers
    "is_integer",
    "is_negative_integer",
    "is_negative_number",
    "is_number",
    "is_positive_integer",
    "is_positive_number",
    "is_regular_number",
    "is_safe_integer",
    "is_strictly_negative_integer",
    "is_strictly_negative_number",
    "is_strictly_positive_integer",
    "is_strictly_positive_number",
    # Objects
    "is_boolean",
    "is_callable",
    "is_date",
    "is_datetime",
    "is_duck_of",
    "is_function",
    "is_generator_function",
    "is_immutable",
    "is_instance_of",
    "is_mutable",
    "is_mutable_array_like_object",
    "is_non_empty_string",
    "is_non_null",
    "is_non_primitive",
    "is_pattern",
    "is_primitive",
    "is_string",
]
