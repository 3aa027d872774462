"""Human-readable reports of expectation failures."""

from .console import ExpectationReporter, print_expectation_error


__all__ = [
    "ExpectationReporter",
    "print_expectation_error",
]
