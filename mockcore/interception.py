"""The call-interception seam between attribute access and a mock's registry.

Attribute access on a mock for a name it does not natively implement yields
a MethodProxy. Calling the proxy packs the call into Arguments and hands it
to the mock's ``__intercept__``, which resolves it against the registered
handlers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class Arguments:
    """The positional and keyword arguments of one call."""

    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def of(cls, *args: Any, **kwargs: Any) -> Arguments:
        return cls(args=args, kwargs=kwargs)

    def __len__(self) -> int:
        return len(self.args) + len(self.kwargs)


@runtime_checkable
class CallInterceptor(Protocol):
    def __intercept__(
        self,
        method_name: str,
        arguments: Arguments,
        block: Callable[..., Any] | None = None,
    ) -> Any: ...


class MethodProxy:
    """A method name bound to an interceptor, awaiting a call."""

    __slots__ = ("_interceptor", "_method_name")

    def __init__(self, interceptor: CallInterceptor, method_name: str) -> None:
        self._interceptor = interceptor
        self._method_name = method_name

    @property
    def method_name(self) -> str:
        return self._method_name

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._interceptor.__intercept__(
            self._method_name, Arguments(args=args, kwargs=kwargs)
        )

    def call_with_block(
        self, block: Callable[..., Any], *args: Any, **kwargs: Any
    ) -> Any:
        """Call with a trailing callable that configured yields are passed to."""
        return self._interceptor.__intercept__(
            self._method_name, Arguments(args=args, kwargs=kwargs), block
        )

    def __repr__(self) -> str:
        return f"<MethodProxy {self._interceptor!r}.{self._method_name}>"
