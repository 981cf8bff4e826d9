"""Which arguments a handler accepts.

Only two forms are supported: exact equality against expected arguments,
and an arbitrary predicate over the actual arguments. A matcher with
neither accepts any arguments.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from inspect import signature

from .formatting import format_arguments
from .interception import Arguments


@dataclass(frozen=True)
class ParametersMatcher:
    expected: Arguments | None = None
    predicate: Callable[..., bool] | None = None

    def match(self, actual: Arguments) -> bool:
        if self.predicate is not None:
            if not _accepts(self.predicate, actual):
                return False
            return bool(self.predicate(*actual.args, **actual.kwargs))
        if self.expected is None:
            return True
        return self.expected == actual

    def describe(self) -> str:
        if self.predicate is not None:
            name = getattr(self.predicate, "__name__", type(self.predicate).__name__)
            return f"<matching {name}>"
        if self.expected is None:
            return "<any parameters>"
        return format_arguments(self.expected)


ANY_PARAMETERS = ParametersMatcher()


def _accepts(predicate: Callable[..., bool], actual: Arguments) -> bool:
    """Whether ``predicate`` can be called with ``actual`` at all."""
    try:
        sig = signature(predicate)
    except (TypeError, ValueError):
        # No introspectable signature (some builtins); let the call decide.
        return True
    try:
        sig.bind(*actual.args, **actual.kwargs)
    except TypeError:
        return False
    return True
