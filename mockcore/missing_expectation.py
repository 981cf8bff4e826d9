"""Reporting of calls that no handler on a mock accepted."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from . import config, report
from .errors import UnexpectedInvocation
from .expectation import Expectation, VerificationContext
from .formatting import format_call
from .interception import Arguments

if TYPE_CHECKING:
    from .mock import Mock


class MissingExpectation(Expectation):
    """Stands for a call that was made but never configured.

    Seed it with the actual arguments through ``with_args``; ``verify``
    then always raises.
    """

    def __init__(self, mock: Mock, method_name: str) -> None:
        super().__init__(mock, method_name)
        self._arguments = Arguments()

    def with_args(self, *args: Any, **kwargs: Any) -> Self:
        self._arguments = Arguments(args=args, kwargs=kwargs)
        return super().with_args(*args, **kwargs)

    def similar_expectations(self) -> list[Expectation]:
        return [e for e in self.mock.__handlers__() if e.method_name == self.method_name]

    def verify(self, context: VerificationContext | None = None) -> None:
        if context is not None:
            context(self)
        similar = []
        if config.current().show_similar_expectations:
            similar = [e.method_signature() for e in self.similar_expectations()]
        raise UnexpectedInvocation(
            report.render(
                "unexpected_invocation.j2",
                call=format_call(self.mock, self.method_name, self._arguments),
                similar=similar,
            ),
            method_name=self.method_name,
            arguments=self._arguments,
            backtrace=self.backtrace,
        )
