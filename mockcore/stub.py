"""Stubs: lenient handlers that may be invoked any number of times."""

from __future__ import annotations

import logging

from . import config, report
from .backtrace import format_location
from .cardinality import Cardinality
from .config import StubbingPolicy
from .errors import StubbingError
from .expectation import Expectation, VerificationContext

logger = logging.getLogger(__name__)


class Stub(Expectation):
    def default_cardinality(self) -> Cardinality:
        return Cardinality.at_least(0)

    def verify(self, context: VerificationContext | None = None) -> None:
        super().verify(context)
        if self.invocation_count > 0 or self.cardinality.maximum == 0:
            return

        match config.current().unnecessary_stubbing:
            case StubbingPolicy.ALLOW:
                return
            case StubbingPolicy.WARN:
                logger.warning("unnecessary stubbing: %s was never invoked", self.method_signature())
            case StubbingPolicy.PREVENT:
                raise StubbingError(
                    report.render(
                        "unnecessary_stubbing.j2",
                        signature=self.method_signature(),
                        location=format_location(self.backtrace),
                    ),
                    backtrace=self.backtrace,
                )
