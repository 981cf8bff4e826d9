"""Text rendering of values and calls for failure messages."""

from __future__ import annotations

from typing import Any

from .interception import Arguments


def inspect_value(value: Any) -> str:
    # Mocks render as their identity so nested mocks stay readable.
    debug_identity = getattr(type(value), "debug_identity", None)
    if callable(debug_identity):
        return debug_identity(value)
    return repr(value)


def format_arguments(arguments: Arguments) -> str:
    """``1, 'a', key=2`` for ``Arguments((1, 'a'), {'key': 2})``."""
    parts = [inspect_value(a) for a in arguments.args]
    parts.extend(f"{k}={inspect_value(v)}" for k, v in arguments.kwargs.items())
    return ", ".join(parts)


def format_call(receiver: Any, method_name: str, arguments: Arguments) -> str:
    return f"{inspect_value(receiver)}.{method_name}({format_arguments(arguments)})"


def method_signature(receiver: Any, method_name: str, parameters: str) -> str:
    """Signature of a configured handler; ``parameters`` is already rendered."""
    return f"{inspect_value(receiver)}.{method_name}({parameters})"
