"""typechecking - Runtime type predicates and expectations.

Every recognized type ``<name>`` is available as ``is_<name>``, ``expect_<name>``,
``expect_<plural>`` and ``expect_optional_<name>``, both on the default registry
:data:`checks` and as module attributes::

    from typechecking import expect_strictly_positive_integer, is_list

    expect_strictly_positive_integer(count)
"""

from typing import Any

from .config import TypeCheckingSettings
from .descriptors import DESCRIPTORS, TypeDescriptor
from .errors import CallSite, ConfigurationError, ExpectationError, prune_internal_frames, raise_type_error
from .expectations import pluralize
from .registry import Registry
from .reports import ExpectationReporter, print_expectation_error
from .version import __version__


checks = Registry(DESCRIPTORS)


def set_disabled(disabled: bool) -> None:
    """Turn every ``expect_*`` of the default registry into a no-op, or back."""
    checks.disabled = disabled


def __getattr__(name: str) -> Any:
    if name in checks:
        return getattr(checks, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(checks.names()))


__all__ = [
    # Core
    "Registry",
    "TypeDescriptor",
    "DESCRIPTORS",
    "checks",
    "set_disabled",
    "pluralize",
    # Errors
    "CallSite",
    "ConfigurationError",
    "ExpectationError",
    "prune_internal_frames",
    "raise_type_error",
    # Configuration
    "TypeCheckingSettings",
    # Reports
    "ExpectationReporter",
    "print_expectation_error",
    "__version__",
    # Generated members
    *(name for name in checks.names() if name != "raise_type_error"),
]
