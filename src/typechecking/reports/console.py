"""Console rendering of expectation failures using Rich."""

from __future__ import annotations

import sys

from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.traceback import Traceback

from typechecking.errors import ExpectationError, prune_internal_frames


class ExpectationReporter:
    """Prints :class:`ExpectationError` instances with library frames hidden."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console(file=sys.__stderr__)
        self.verbosity = verbosity

    def _format_header(self, error: ExpectationError) -> list[str]:
        lines = [f"[bold red]{escape(error.message)}[/bold red]"]
        if error.call_site is not None:
            lines.append(f"[dim]at {escape(str(error.call_site))}[/dim]")
        return lines

    def _format_traceback(self, error: ExpectationError) -> Traceback | None:
        tb = prune_internal_frames(error.__traceback__)
        if tb is None:
            return None
        return Traceback.from_exception(
            type(error),
            error,
            tb,
            suppress=[__import__("typechecking")],
            show_locals=self.verbosity >= 2,
        )

    def render(self, error: ExpectationError) -> Panel:
        parts: list[RenderableType] = list(self._format_header(error))
        if self.verbosity >= 1:
            trace = self._format_traceback(error)
            if trace is not None:
                parts.append(trace)
        return Panel(
            Group(*parts),
            title=type(error).__name__,
            title_align="left",
            border_style="red",
            expand=True,
            padding=(1, 1),
        )

    def report(self, error: ExpectationError) -> None:
        self.console.print(self.render(error))


def print_expectation_error(
    error: ExpectationError, console: Console | None = None, verbosity: int = 1
) -> None:
    """Print ``error`` as a panel; ``verbosity >= 1`` adds the pruned traceback."""
    ExpectationReporter(console=console, verbosity=verbosity).report(error)
