"""Failures raised by mocks.

Every mock failure derives from AssertionError so that test runners report
it as a failed assertion rather than an error in the test itself.
"""

from __future__ import annotations

from collections.abc import Sequence
from traceback import FrameSummary
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .expectation import Expectation
    from .interception import Arguments


class ExpectationError(AssertionError):
    """A mock was used differently from how it was configured."""

    def __init__(
        self, message: str, backtrace: Sequence[FrameSummary] | None = None
    ) -> None:
        super().__init__(message)
        self.backtrace: tuple[FrameSummary, ...] = tuple(backtrace or ())


class UnexpectedInvocation(ExpectationError):
    """A call matched no handler on a mock that does not stub everything."""

    def __init__(
        self,
        message: str,
        method_name: str,
        arguments: Arguments,
        backtrace: Sequence[FrameSummary] | None = None,
    ) -> None:
        super().__init__(message, backtrace)
        self.method_name = method_name
        self.arguments = arguments


class CardinalityViolation(ExpectationError):
    """A handler was invoked a number of times outside its cardinality."""

    def __init__(
        self,
        message: str,
        expectation: Expectation,
        backtrace: Sequence[FrameSummary] | None = None,
    ) -> None:
        super().__init__(message, backtrace)
        self.expectation = expectation


class StubbingError(ExpectationError):
    """A stub was never invoked while unnecessary stubbing is prevented."""


class NoMethodError(AttributeError):
    """Raised by the undefined-method fallback of a mock."""

    def __init__(self, receiver: Any, method_name: str) -> None:
        super().__init__(f"undefined method '{method_name}' for {receiver!r}")
        self.method_name = method_name


class ConfigurationError(ValueError):
    """The environment holds an invalid mockcore setting."""
