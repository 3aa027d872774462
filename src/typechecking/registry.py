"""The namespace exposing probes and generated expectations."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Callable

from typechecking.config import TypeCheckingSettings
from typechecking.descriptors import TypeDescriptor
from typechecking.errors import ConfigurationError, raise_type_error
from typechecking.expectations import generate_expectations

logger = logging.getLogger(__name__)


class Registry:
    """Probes and expectations derived from a table of type descriptors.

    Members are built once, in the constructor, and exposed as read-only
    attributes: ``raise_type_error``, then for every descriptor ``is_<name>``,
    ``expect_<name>``, ``expect_<plural>`` and ``expect_optional_<name>``.
    The only mutable state is :attr:`disabled`.

    Parameters
    ----------
    descriptors
        :class:`TypeDescriptor` instances, or mappings validated into them.
    settings
        Source of the initial ``disabled`` value; read from the environment
        when omitted.

    Raises
    ------
    ConfigurationError
        If a descriptor is invalid, two descriptors share a name, or two
        generated members collide.

    Examples
    --------
    >>> checks = Registry(DESCRIPTORS)
    >>> checks.is_positive_integer(3)
    True
    >>> checks.expect_strings(["a", "b"])
    """

    def __init__(
        self,
        descriptors: Iterable[TypeDescriptor | Mapping[str, Any]],
        *,
        settings: TypeCheckingSettings | None = None,
    ) -> None:
        settings = settings or TypeCheckingSettings()
        self._disabled = settings.disabled
        self._descriptors = self._validate(descriptors)

        members: dict[str, Callable[..., Any]] = {"raise_type_error": raise_type_error}
        for descriptor in self._descriptors:
            generated = {f"is_{descriptor.name}": descriptor.predicate}
            generated.update(generate_expectations(descriptor, self))
            for member_name, member in generated.items():
                if member_name in members:
                    raise ConfigurationError(
                        f"member {member_name!r} generated for {descriptor.name!r} already exists"
                    )
                members[member_name] = member

        self._members = MappingProxyType(members)
        logger.debug(
            "Generated %d registry members from %d type descriptors",
            len(self._members),
            len(self._descriptors),
        )

    @staticmethod
    def _validate(
        descriptors: Iterable[TypeDescriptor | Mapping[str, Any]],
    ) -> tuple[TypeDescriptor, ...]:
        validated: list[TypeDescriptor] = []
        seen: set[str] = set()
        for entry in descriptors:
            descriptor = TypeDescriptor.coerce(entry)
            if descriptor.name in seen:
                raise ConfigurationError(f"duplicate type descriptor {descriptor.name!r}")
            seen.add(descriptor.name)
            validated.append(descriptor)
        return tuple(validated)

    @property
    def disabled(self) -> bool:
        """When true, every generated ``expect_*`` returns without checking."""
        return self._disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f"disabled must be a bool, got {type(value).__name__}")
        if value != self._disabled:
            logger.info("Type expectations %s", "disabled" if value else "enabled")
        self._disabled = value

    @contextmanager
    def disabled_scope(self, disabled: bool = True) -> Iterator[None]:
        """Set :attr:`disabled` for the duration of the ``with`` block."""
        previous = self._disabled
        self.disabled = disabled
        try:
            yield
        finally:
            self.disabled = previous

    @property
    def descriptors(self) -> tuple[TypeDescriptor, ...]:
        return self._descriptors

    def describe(self, name: str) -> str:
        """Description of the descriptor called ``name``.

        Raises
        ------
        KeyError
            If no descriptor has that name.
        """
        for descriptor in self._descriptors:
            if descriptor.name == name:
                return descriptor.description
        raise KeyError(name)

    def names(self) -> list[str]:
        return sorted(self._members)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        members = self.__dict__.get("_members")
        if members is not None and name in members:
            return members[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        members = self.__dict__.get("_members")
        if members is not None and name in members:
            raise AttributeError(f"registry member {name!r} is read-only")
        super().__setattr__(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._members))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(descriptors={len(self._descriptors)}, "
            f"members={len(self._members)}, disabled={self._disabled})"
        )
