"""The mock object: a registry of handlers and the interception path.

Any attribute a Mock does not natively implement resolves to a MethodProxy;
calling it hands the call to ``Mock.__intercept__``, which picks the most
recently registered handler that matches and invokes it. A call that no
handler matches is absorbed when the mock stubs everything, and otherwise
reported as an unexpected invocation.

    m = Mock(name="mailer")
    m.expects("send").with_args("ann@example.com").returns(True)
    m.stubs({"connected": True})
    assert m.send("ann@example.com") is True
    m.verify()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from traceback import FrameSummary
from typing import Any, NoReturn

from .errors import NoMethodError
from .expectation import Expectation, VerificationContext
from .interception import Arguments, MethodProxy
from .missing_expectation import MissingExpectation
from .stub import Stub

logger = logging.getLogger(__name__)

_INTERNAL_PREFIX = "_Mock__"
_UNSET = object()


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _is_shadowable(name: str) -> bool:
    return not _is_dunder(name) and not name.startswith(_INTERNAL_PREFIX)


class Mock:
    """A traditional mock object.

    ``expects`` registers a handler that must be called exactly once;
    ``stubs`` registers one that may be called any number of times. Both
    take a method name, or a mapping of method names to return values, and
    return the last handler registered for further configuration.

    Registering a name the Mock natively defines (``verify``, say) shadows
    the native member for the rest of the Mock's life. The dunder aliases
    ``__expects__``, ``__stubs__`` and ``__verify__`` are never shadowed.
    """

    def __init__(self, stub_everything: bool = False, name: str | None = None) -> None:
        self.__shadowed: set[str] = set()
        self.__stub_everything = stub_everything
        self.__name = name
        self.__registry: list[Expectation] = []

    # -- attribute resolution ----------------------------------------------

    def __getattribute__(self, name: str) -> Any:
        if _is_shadowable(name) and name in object.__getattribute__(self, "_Mock__shadowed"):
            return MethodProxy(self, name)
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> MethodProxy:
        if not _is_shadowable(name):
            raise AttributeError(name)
        return MethodProxy(self, name)

    # -- registration ------------------------------------------------------

    def expects(
        self,
        method_names: str | Mapping[str, Any],
        backtrace: tuple[FrameSummary, ...] | None = None,
    ) -> Expectation:
        """Register handlers that must each be called exactly once.

        ``m.expects({"a": 1, "b": 2})`` is equivalent to
        ``m.expects("a").returns(1); m.expects("b").returns(2)``.
        """
        return self.__register(Expectation, method_names, backtrace)

    def stubs(
        self,
        method_names: str | Mapping[str, Any],
        backtrace: tuple[FrameSummary, ...] | None = None,
    ) -> Expectation:
        """Register handlers that may be called any number of times."""
        return self.__register(Stub, method_names, backtrace)

    __expects__ = expects
    __stubs__ = stubs

    def __register(
        self,
        handler_class: type[Expectation],
        method_names: str | Mapping[str, Any],
        backtrace: tuple[FrameSummary, ...] | None,
    ) -> Expectation:
        match method_names:
            case str(method_name):
                entries: list[tuple[Any, Any]] = [(method_name, _UNSET)]
            case Mapping() if method_names:
                entries = list(method_names.items())
            case Mapping():
                raise ValueError("at least one method name is required")
            case _:
                raise TypeError(
                    f"expected a method name or a mapping of method names, "
                    f"got {type(method_names).__name__}"
                )

        for method_name, _ in entries:
            if not isinstance(method_name, str):
                raise TypeError(f"method names must be str, got {method_name!r}")

        handler: Expectation | None = None
        for method_name, return_value in entries:
            handler = handler_class(self, method_name, backtrace)
            if return_value is not _UNSET:
                handler.returns(return_value)
            self.__registry.append(handler)
            if self.__natively_defines(method_name):
                self.__shadowed.add(method_name)
            logger.debug("registered %r", handler)

        assert handler is not None
        return handler

    def __natively_defines(self, method_name: str) -> bool:
        if not _is_shadowable(method_name):
            return False
        return hasattr(type(self), method_name) or method_name in vars(self)

    # -- interception ------------------------------------------------------

    def __intercept__(
        self,
        method_name: str,
        arguments: Arguments,
        block: Callable[..., Any] | None = None,
    ) -> Any:
        handler = self.__matching_handler(method_name, arguments)
        if handler is not None:
            logger.debug("%r.%s resolved to %r", self, method_name, handler)
            return handler.invoke(block)
        if self.__stub_everything:
            logger.debug("%r absorbed unmatched call to %s", self, method_name)
            return None
        try:
            return self.__undefined_method__(method_name, arguments, block)
        except Exception:
            logger.debug("%r has no handler for %s", self, method_name)
            self.__unexpected_method_called(method_name, arguments)

    def __matching_handler(
        self, method_name: str, arguments: Arguments
    ) -> Expectation | None:
        for handler in reversed(self.__registry):
            if handler.match(method_name, arguments):
                return handler
        return None

    def __undefined_method__(
        self,
        method_name: str,
        arguments: Arguments,
        block: Callable[..., Any] | None = None,
    ) -> Any:
        """Fallback for calls no handler matched. Subclasses may return a
        value here instead; any exception is reported as an unexpected
        invocation."""
        raise NoMethodError(self, method_name)

    def __unexpected_method_called(self, method_name: str, arguments: Arguments) -> NoReturn:
        MissingExpectation(self, method_name).with_args(
            *arguments.args, **arguments.kwargs
        ).verify()
        raise AssertionError("MissingExpectation.verify returned")

    # -- verification & introspection --------------------------------------

    def verify(self, context: VerificationContext | None = None) -> None:
        """Check every handler in registration order; the first unmet one raises."""
        for handler in self.__registry:
            handler.verify(context)

    __verify__ = verify

    def responds_to(self, method_name: str) -> bool:
        return any(h.method_name == method_name for h in self.__registry)

    def __handlers__(self) -> tuple[Expectation, ...]:
        return tuple(self.__registry)

    @property
    def expectations(self) -> tuple[Expectation, ...]:
        return self.__handlers__()

    @property
    def stub_everything(self) -> bool:
        return self.__stub_everything

    @property
    def mock_name(self) -> str | None:
        return self.__name

    def debug_identity(self) -> str:
        if self.__name is not None:
            return f"Mock:{self.__name}"
        return f"Mock:0x{id(self):x}"

    def __repr__(self) -> str:
        return f"<{Mock.debug_identity(self)}>"
