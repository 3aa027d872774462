"""Type descriptors and the table of recognized types."""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from typechecking import predicates as p
from typechecking.errors import ConfigurationError


class TypeDescriptor(BaseModel):
    """One recognized type: its name, its error phrase and its probe.

    Attributes
    ----------
    name : str
        Snake-case key from which member names are derived
        (``is_<name>``, ``expect_<name>``, ...).
    description : str
        Indefinite-article phrase completing ``"expected ... ."``.
    predicate : Callable[..., bool]
        Probe called as ``predicate(value, *args, **kwargs)``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(pattern=r"^[a-z][a-z0-9]*(_[a-z0-9]+)*$")
    description: str = Field(min_length=1)
    predicate: Callable[..., bool]

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("description must not be blank")
        return v

    @classmethod
    def define(cls, name: str, description: str, predicate: Callable[..., bool] | None) -> TypeDescriptor:
        """Build a descriptor, reporting inconsistencies as :class:`ConfigurationError`."""
        return cls.coerce({"name": name, "description": description, "predicate": predicate})

    @classmethod
    def coerce(cls, entry: Any) -> TypeDescriptor:
        if isinstance(entry, cls):
            return entry
        try:
            return cls.model_validate(entry)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid type descriptor {entry!r}: {exc}") from exc


define = TypeDescriptor.define


DESCRIPTORS: tuple[TypeDescriptor, ...] = (
    define("array_like", "an array-like value", p.is_array_like),
    define("array_like_object", "an array-like object", p.is_array_like_object),
    define("boolean", "a boolean", p.is_boolean),
    define("bytearray", "a 'bytearray' object", p.is_bytearray),
    define("callable", "a callable object", p.is_callable),
    define("date", "a 'date' object", p.is_date),
    define("datetime", "a 'datetime' object", p.is_datetime),
    define("dict", "a 'dict' object", p.is_dict),
    define("duck_of", "a duck of the given shape", p.is_duck_of),
    define("frozenset", "a 'frozenset' object", p.is_frozenset),
    define("function", "a function", p.is_function),
    define("generator_function", "a generator function", p.is_generator_function),
    define("immutable", "an immutable value", p.is_immutable),
    define("instance_of", "an instance of the given class", p.is_instance_of),
    define("integer", "an integer", p.is_integer),
    define("iterable", "an iterable", p.is_iterable),
    define("list", "a 'list' object", p.is_list),
    define("memoryview", "a 'memoryview' object", p.is_memoryview),
    define("mutable", "a mutable value", p.is_mutable),
    define("mutable_array_like_object", "a mutable array-like object", p.is_mutable_array_like_object),
    define("negative_integer", "a negative integer", p.is_negative_integer),
    define("negative_number", "a negative number", p.is_negative_number),
    define("non_empty_array_like", "a non-empty array-like value", p.is_non_empty_array_like),
    define("non_empty_string", "a non-empty string", p.is_non_empty_string),
    define("non_null", "a value other than 'None'", p.is_non_null),
    define("non_primitive", "a non-primitive value", p.is_non_primitive),
    define("number", "a number", p.is_number),
    define("pattern", "a compiled regular expression", p.is_pattern),
    define("positive_integer", "a positive integer", p.is_positive_integer),
    define("positive_number", "a positive number", p.is_positive_number),
    define("primitive", "a primitive value", p.is_primitive),
    define("regular_number", "a regular number", p.is_regular_number),
    define("safe_integer", "a safe integer", p.is_safe_integer),
    define("set", "a 'set' object", p.is_set),
    define("strictly_negative_integer", "a strictly negative integer", p.is_strictly_negative_integer),
    define("strictly_negative_number", "a strictly negative number", p.is_strictly_negative_number),
    define("strictly_positive_integer", "a strictly positive integer", p.is_strictly_positive_integer),
    define("strictly_positive_number", "a strictly positive number", p.is_strictly_positive_number),
    define("string", "a string", p.is_string),
    define("tuple", "a 'tuple' object", p.is_tuple),
    define("typed_array", "an 'array.array' object", p.is_typed_array),
    define("weak_key_dict", "a 'WeakKeyDictionary' object", p.is_weak_key_dict),
    define("weak_set", "a 'WeakSet' object", p.is_weak_set),
    define("weak_value_dict", "a 'WeakValueDictionary' object", p.is_weak_value_dict),
)
