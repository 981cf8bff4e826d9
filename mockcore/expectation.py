"""Expectations: handlers that a mock resolves intercepted calls to.

An Expectation is registered against one method name on one mock. It decides
whether a call matches (method name plus parameters), produces the configured
outcome when invoked, and checks at verification time that it was invoked the
expected number of times. Every configuration method returns the expectation
itself so set-up reads as a chain:

    m.expects("fetch").with_args("users").twice().returns([], ["ann"])
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from traceback import FrameSummary
from typing import TYPE_CHECKING, Any, Self

from . import report
from .backtrace import capture_backtrace, format_location
from .cardinality import Cardinality
from .errors import CardinalityViolation
from .formatting import method_signature
from .interception import Arguments
from .parameters import ANY_PARAMETERS, ParametersMatcher
from .return_values import ExceptionRaiser, ReturnValues

if TYPE_CHECKING:
    from .mock import Mock

logger = logging.getLogger(__name__)

VerificationContext = Callable[["Expectation"], Any]


class Expectation:
    """A strict handler: by default it must be invoked exactly once."""

    def __init__(
        self,
        mock: Mock,
        method_name: str,
        backtrace: tuple[FrameSummary, ...] | None = None,
    ) -> None:
        self.mock = mock
        self.method_name = method_name
        self.backtrace = backtrace if backtrace is not None else capture_backtrace()
        self.invocation_count = 0
        self._parameters = ANY_PARAMETERS
        self._cardinality = self.default_cardinality()
        self._return_values = ReturnValues()
        self._yield_groups: list[tuple[Any, ...]] = []
        self._chaining = False

    def default_cardinality(self) -> Cardinality:
        return Cardinality.exactly(1)

    @property
    def cardinality(self) -> Cardinality:
        return self._cardinality

    @property
    def parameters(self) -> ParametersMatcher:
        return self._parameters

    # -- cardinality -------------------------------------------------------

    def times(self, count: int | range) -> Self:
        """Exactly ``count`` invocations, or any count within a ``range``."""
        match count:
            case int():
                self._cardinality = Cardinality.exactly(count)
            case range(step=1) if len(count) > 0:
                self._cardinality = Cardinality.between(count.start, count.stop - 1)
            case _:
                raise ValueError(f"times() needs an int or a non-empty unit-step range, got {count!r}")
        return self

    def once(self) -> Self:
        return self.times(1)

    def twice(self) -> Self:
        return self.times(2)

    def never(self) -> Self:
        return self.times(0)

    def at_least(self, count: int) -> Self:
        self._cardinality = Cardinality.at_least(count)
        return self

    def at_least_once(self) -> Self:
        return self.at_least(1)

    def at_most(self, count: int) -> Self:
        self._cardinality = Cardinality.at_most(count)
        return self

    def at_most_once(self) -> Self:
        return self.at_most(1)

    # -- parameters --------------------------------------------------------

    def with_args(self, *args: Any, **kwargs: Any) -> Self:
        """Only match calls whose arguments equal these."""
        self._parameters = ParametersMatcher(expected=Arguments(args=args, kwargs=kwargs))
        return self

    def with_args_matching(self, predicate: Callable[..., bool]) -> Self:
        """Only match calls for which ``predicate(*args, **kwargs)`` is true."""
        self._parameters = ParametersMatcher(predicate=predicate)
        return self

    # -- outcomes ----------------------------------------------------------

    def returns(self, *values: Any) -> Self:
        """Return ``values`` on successive invocations, repeating the last.

        Replaces any previously configured outcomes unless ``then()`` was
        called in between, in which case they are appended.
        """
        self._queue(ReturnValues.build(*values))
        return self

    def raises(
        self,
        exception: type[BaseException] | BaseException = RuntimeError,
        message: str | None = None,
    ) -> Self:
        self._queue(ReturnValues(ExceptionRaiser(exception, message)))
        return self

    def then(self) -> Self:
        self._chaining = True
        return self

    def _queue(self, outcomes: ReturnValues) -> None:
        if self._chaining:
            self._return_values = self._return_values + outcomes
        else:
            self._return_values = outcomes
        self._chaining = False

    def yields(self, *params: Any) -> Self:
        """Pass ``params`` to the block given to the call."""
        return self.multiple_yields(params)

    def multiple_yields(self, *groups: tuple[Any, ...]) -> Self:
        """Call the block once per group, passing the group's items."""
        self._yield_groups = [tuple(g) for g in groups]
        return self

    # -- handler protocol --------------------------------------------------

    def match(self, method_name: str, arguments: Arguments) -> bool:
        return self.method_name == method_name and self._parameters.match(arguments)

    def invoke(self, block: Callable[..., Any] | None = None) -> Any:
        self.invocation_count += 1
        if block is not None:
            for group in self._yield_groups:
                block(*group)
        return self._return_values.next()

    def verify(self, context: VerificationContext | None = None) -> None:
        if context is not None:
            context(self)
        if not self._cardinality.is_satisfied_by(self.invocation_count):
            logger.debug(
                "%s invoked %d time(s), expected %s",
                self.method_signature(),
                self.invocation_count,
                self._cardinality.describe(),
            )
            raise CardinalityViolation(
                report.render(
                    "cardinality_violation.j2",
                    signature=self.method_signature(),
                    expected=self._cardinality.describe(),
                    actual=self.invocation_count,
                    location=format_location(self.backtrace),
                ),
                expectation=self,
                backtrace=self.backtrace,
            )

    def method_signature(self) -> str:
        return method_signature(self.mock, self.method_name, self._parameters.describe())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.method_signature()}>"
