"""mockcore: the call-interception and expectation-resolution core of a mock object."""

from .mock import Mock
from .interception import Arguments, CallInterceptor, MethodProxy
from .expectation import Expectation
from .stub import Stub
from .missing_expectation import MissingExpectation
from .cardinality import Cardinality
from .parameters import ParametersMatcher
from .errors import (
    CardinalityViolation,
    ConfigurationError,
    ExpectationError,
    NoMethodError,
    StubbingError,
    UnexpectedInvocation,
)
from .config import Configuration, StubbingPolicy
from .helpers import mock, stub, stub_everything
from .result import Ok, Err, Result

__all__ = [
    # Mock
    "Mock",
    # Interception
    "Arguments", "CallInterceptor", "MethodProxy",
    # Handlers
    "Expectation", "Stub", "MissingExpectation", "Cardinality", "ParametersMatcher",
    # Errors
    "CardinalityViolation", "ConfigurationError", "ExpectationError",
    "NoMethodError", "StubbingError", "UnexpectedInvocation",
    # Configuration
    "Configuration", "StubbingPolicy",
    # Helpers
    "mock", "stub", "stub_everything",
    # Result
    "Ok", "Err", "Result",
]
