"""How many times a handler may be invoked.

A cardinality is a closed interval [required, maximum] of invocation counts;
``maximum`` is None when there is no upper bound.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cardinality:
    required: int
    maximum: int | None

    def __post_init__(self) -> None:
        if self.required < 0:
            raise ValueError(f"required invocations must be >= 0, got {self.required}")
        if self.maximum is not None and self.maximum < self.required:
            raise ValueError(
                f"maximum invocations {self.maximum} is below required {self.required}"
            )

    @classmethod
    def exactly(cls, count: int) -> Cardinality:
        return cls(count, count)

    @classmethod
    def at_least(cls, count: int) -> Cardinality:
        return cls(count, None)

    @classmethod
    def at_most(cls, count: int) -> Cardinality:
        return cls(0, count)

    @classmethod
    def between(cls, required: int, maximum: int) -> Cardinality:
        return cls(required, maximum)

    def is_satisfied_by(self, invocation_count: int) -> bool:
        if invocation_count < self.required:
            return False
        return self.maximum is None or invocation_count <= self.maximum

    @property
    def allows_any_number(self) -> bool:
        return self.required == 0 and self.maximum is None

    def describe(self) -> str:
        """Human wording used in failure messages, e.g. ``exactly once``."""
        match (self.required, self.maximum):
            case (0, None):
                return "any number of times"
            case (0, 0):
                return "never"
            case (required, None):
                return f"at least {_times(required)}"
            case (0, maximum):
                return f"at most {_times(maximum)}"
            case (required, maximum) if required == maximum:
                return f"exactly {_times(required)}"
            case (required, maximum):
                return f"between {required} and {maximum} times"


def _times(count: int) -> str:
    match count:
        case 1:
            return "once"
        case 2:
            return "twice"
        case _:
            return f"{count} times"
