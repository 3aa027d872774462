from collections.abc import Callable

import pytest

from typechecking import checks


@pytest.fixture(autouse=True)
def enabled_checks():
    """Never let a test leak a disabled default registry into the next one."""
    checks.disabled = False
    yield
    checks.disabled = False


@pytest.fixture
def spoof() -> Callable[[type], object]:
    """Factory for objects whose ``__class__`` claims a type they do not have."""

    def make(cls: type) -> object:
        class Spoof:
            __class__ = property(lambda self: cls)

        return Spoof()

    return make
