"""Result type for lookups that can fail without raising."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
V = TypeVar("V")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]


def unwrap(result: Result[V, Exception]) -> V:
    """Return the value of ``Ok`` or raise the error held by ``Err``."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise error
