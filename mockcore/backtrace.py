"""Capture of the call site where a handler was registered."""

from __future__ import annotations

import traceback
from pathlib import Path
from traceback import FrameSummary

from . import config

PACKAGE_DIR = Path(__file__).resolve().parent


def _is_library_frame(frame: FrameSummary) -> bool:
    try:
        return Path(frame.filename).resolve().is_relative_to(PACKAGE_DIR)
    except (OSError, ValueError):
        return False


def filter_backtrace(frames: list[FrameSummary]) -> tuple[FrameSummary, ...]:
    return tuple(f for f in frames if not _is_library_frame(f))


def capture_backtrace() -> tuple[FrameSummary, ...]:
    """Frames of the current stack, innermost last, without mockcore's own
    frames unless backtrace filtering is switched off."""
    frames = traceback.extract_stack()[:-1]
    if config.current().filter_backtrace:
        return filter_backtrace(frames)
    return tuple(frames)


def format_location(backtrace: tuple[FrameSummary, ...]) -> str | None:
    """``path:line`` of the innermost frame, or None for an empty backtrace."""
    if not backtrace:
        return None
    frame = backtrace[-1]
    return f"{frame.filename}:{frame.lineno}"
