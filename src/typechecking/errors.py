"""Error types and the ``expected ...`` error factory."""

from __future__ import annotations

import inspect
import sys
from types import CodeType, FrameType, TracebackType
from typing import Any, Callable, NoReturn

from pydantic import BaseModel, ConfigDict


# Frames executing in these modules never count as a call site.
INTERNAL_MODULES = frozenset({__name__, "typechecking.expectations"})


class CallSite(BaseModel):
    """Location of the code that invoked a failing expectation.

    Attributes
    ----------
    filename : str
        Source file of the calling frame.
    lineno : int
        Line currently executing in the calling frame.
    function : str
        Name of the calling function (``<module>`` at module level).
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    lineno: int
    function: str

    @classmethod
    def from_frame(cls, frame: FrameType) -> CallSite:
        return cls(
            filename=frame.f_code.co_filename,
            lineno=frame.f_lineno,
            function=frame.f_code.co_name,
        )

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} in {self.function}"


class ConfigurationError(Exception):
    """A type descriptor table is inconsistent.

    Raised while a registry is being built, or when the error factory receives
    an unusable description. It always points at a defect in the descriptor
    table, never at a caller's input.
    """


class ExpectationError(TypeError):
    """A value did not satisfy an expectation.

    Attributes
    ----------
    description : str
        Human-readable phrase for the expected type, e.g. ``"a positive integer"``.
    call_site : CallSite | None
        First frame outside the library that triggered the check, if known.
    """

    def __init__(self, description: str, call_site: CallSite | None = None) -> None:
        self.description = description
        self.call_site = call_site
        super().__init__(f"expected {description}.")

    @property
    def message(self) -> str:
        return str(self)


def _is_internal(frame: FrameType) -> bool:
    return frame.f_globals.get("__name__") in INTERNAL_MODULES


def _code_of(func: Callable[..., Any]) -> CodeType | None:
    try:
        func = inspect.unwrap(func)
    except ValueError:
        return None
    return getattr(func, "__code__", None)


def _find_call_site(
    frame: FrameType | None, omit_frames_below: Callable[..., Any] | None
) -> FrameType | None:
    if omit_frames_below is not None:
        target = _code_of(omit_frames_below)
        cursor = frame
        while cursor is not None and cursor.f_code is not target:
            cursor = cursor.f_back
        if cursor is not None:
            frame = cursor.f_back

    while frame is not None and _is_internal(frame):
        frame = frame.f_back
    return frame


def prune_internal_frames(tb: TracebackType | None) -> TracebackType | None:
    """Return a copy of ``tb`` without the frames of the expectation machinery.

    An exception keeps collecting traceback entries while it unwinds through
    library code, so this is applied after the fact by reporters. Returns
    ``None`` when every entry is internal.
    """
    kept: list[TracebackType] = []
    while tb is not None:
        if not _is_internal(tb.tb_frame):
            kept.append(tb)
        tb = tb.tb_next

    pruned: TracebackType | None = None
    for entry in reversed(kept):
        pruned = TracebackType(pruned, entry.tb_frame, entry.tb_lasti, entry.tb_lineno)
    return pruned


def raise_type_error(
    description: str, omit_frames_below: Callable[..., Any] | None = None
) -> NoReturn:
    """Raise an :class:`ExpectationError` reading ``expected <description>.``.

    Parameters
    ----------
    description : str
        Indefinite-article noun phrase naming the expected type.
    omit_frames_below : Callable or None
        Function whose own frame, and everything beneath it, is not reported
        as the call site. Generated expectations pass themselves here.

    Raises
    ------
    ConfigurationError
        If ``description`` is not a non-empty string.
    ExpectationError
        Always, otherwise.
    """
    __tracebackhide__ = True
    if not isinstance(description, str) or not description:
        raise ConfigurationError(
            f"a type description must be a non-empty string, got {description!r}"
        )

    caller = _find_call_site(sys._getframe(1), omit_frames_below)
    error = ExpectationError(
        description,
        call_site=CallSite.from_frame(caller) if caller is not None else None,
    )
    raise error
