"""Helpers shared by the predicate modules.

Probes must never raise and must not trust a forgeable ``__class__``. These
helpers read the interpreter's own view of a value: ``type(value)`` and the
slots of built-in types.
"""

from __future__ import annotations

from typing import Any, Callable


MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER

PRIMITIVE_TYPES: tuple[type, ...] = (type(None), bool, int, float, complex, str, bytes)


def attempt(operation: Callable[..., Any], *args: Any) -> bool:
    """Report whether ``operation(*args)`` completes without raising.

    Used with unbound slots of built-in types, e.g. ``attempt(dict.__len__, x)``,
    which only succeed when ``x`` carries the genuine internal layout.
    """
    try:
        operation(*args)
    except Exception:
        return False
    return True


def has_genuine_type(value: Any, *classes: type) -> bool:
    """``isinstance`` that ignores ``__class__`` and ``__instancecheck__``."""
    return issubclass(type(value), classes)


def type_attribute(value: Any, attribute: str) -> Any:
    """Raw ``attribute`` from the namespaces along ``type(value).__mro__``, or ``None``.

    Descriptors are returned as stored, never invoked.
    """
    for klass in type(value).__mro__:
        namespace = vars(klass)
        if attribute in namespace:
            return namespace[attribute]
    return None


def type_defines(value: Any, attribute: str) -> bool:
    """Whether ``type(value)`` or one of its bases defines ``attribute``.

    An attribute set to ``None`` (as in ``__hash__ = None``) counts as removed.
    """
    return type_attribute(value, attribute) is not None


def length_of(value: Any) -> int | None:
    """``len(value)``, or ``None`` when the value has no usable length."""
    try:
        length = len(value)
    except Exception:
        return None
    return length


def is_primitive(value: Any) -> bool:
    return type(value) in PRIMITIVE_TYPES
