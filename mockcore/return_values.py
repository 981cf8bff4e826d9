"""The sequence of outcomes a handler produces on successive invocations.

Each invocation consumes the next outcome; once only one remains it is
produced on every further invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ReturnValue:
    value: Any

    def evaluate(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ExceptionRaiser:
    exception: type[BaseException] | BaseException
    message: str | None = None

    def evaluate(self) -> Any:
        match self.exception:
            case type() as cls if self.message is not None:
                raise cls(self.message)
            case type() as cls:
                raise cls()
            case instance:
                raise instance


Outcome = ReturnValue | ExceptionRaiser


class ReturnValues:
    def __init__(self, *outcomes: Outcome) -> None:
        self._outcomes: list[Outcome] = list(outcomes)

    @classmethod
    def build(cls, *values: Any) -> ReturnValues:
        return cls(*(ReturnValue(v) for v in values))

    def __add__(self, other: ReturnValues) -> ReturnValues:
        return ReturnValues(*self._outcomes, *other._outcomes)

    def __len__(self) -> int:
        return len(self._outcomes)

    def next(self) -> Any:
        match self._outcomes:
            case []:
                return None
            case [only]:
                return only.evaluate()
            case _:
                return self._outcomes.pop(0).evaluate()
