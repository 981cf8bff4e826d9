"""Process-wide settings for mock behaviour.

Settings come from ``MOCKCORE_*`` environment variables, optionally loaded
from a ``.env`` file in the working directory:

  MOCKCORE_UNNECESSARY_STUBBING       allow | warn | prevent
  MOCKCORE_SHOW_SIMILAR_EXPECTATIONS  true | false
  MOCKCORE_FILTER_BACKTRACE           true | false
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv

from .errors import ConfigurationError
from .result import Err, Ok, Result, unwrap

ENV_PREFIX = "MOCKCORE_"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class StubbingPolicy(Enum):
    """What to do when a stub was never invoked by the end of a test."""

    ALLOW = "allow"
    WARN = "warn"
    PREVENT = "prevent"


@dataclass(frozen=True)
class Configuration:
    unnecessary_stubbing: StubbingPolicy = StubbingPolicy.ALLOW
    show_similar_expectations: bool = True
    filter_backtrace: bool = True

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None
    ) -> Result[Configuration, ConfigurationError]:
        """Build a configuration from ``MOCKCORE_*`` variables.

        With no explicit ``environ`` the process environment is used, after
        loading any ``.env`` file. Unset variables keep their defaults.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        values: dict[str, Any] = {}

        match environ.get(ENV_PREFIX + "UNNECESSARY_STUBBING"):
            case None:
                pass
            case str(raw):
                try:
                    values["unnecessary_stubbing"] = StubbingPolicy(raw.strip().lower())
                except ValueError:
                    return Err(
                        ConfigurationError(
                            f"{ENV_PREFIX}UNNECESSARY_STUBBING must be one of "
                            f"{', '.join(p.value for p in StubbingPolicy)}, got {raw!r}"
                        )
                    )

        for field_name in ("show_similar_expectations", "filter_backtrace"):
            key = ENV_PREFIX + field_name.upper()
            match environ.get(key):
                case None:
                    continue
                case str(raw) if raw.strip().lower() in _TRUE:
                    values[field_name] = True
                case str(raw) if raw.strip().lower() in _FALSE:
                    values[field_name] = False
                case raw:
                    return Err(ConfigurationError(f"{key} must be a boolean, got {raw!r}"))

        return Ok(cls(**values))


_current: Configuration | None = None


def current() -> Configuration:
    """The active configuration, read from the environment on first use."""
    global _current
    if _current is None:
        _current = unwrap(Configuration.from_env())
    return _current


def configure(**changes: Any) -> Configuration:
    """Replace fields of the active configuration and return the result."""
    global _current
    _current = dataclasses.replace(current(), **changes)
    return _current


@contextmanager
def override(**changes: Any) -> Iterator[Configuration]:
    """Temporarily replace configuration fields for the duration of a block."""
    global _current
    previous = current()
    _current = dataclasses.replace(previous, **changes)
    try:
        yield _current
    finally:
        _current = previous
