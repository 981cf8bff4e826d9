"""Builder helpers for constructing mocks.

These are the primary public API for test code:

    mailer = mock("mailer", send=True)       # send() must be called once
    clock = stub("clock", now=1700000000)    # now() may be called freely
    logger = stub_everything("logger")       # any call returns None
"""

from typing import Any

from mockcore.mock import Mock


def mock(name: str | None = None, **expected: Any) -> Mock:
    m = Mock(name=name)
    if expected:
        m.expects(expected)
    return m


def stub(name: str | None = None, **stubbed: Any) -> Mock:
    m = Mock(name=name)
    if stubbed:
        m.stubs(stubbed)
    return m


def stub_everything(name: str | None = None, **stubbed: Any) -> Mock:
    m = Mock(stub_everything=True, name=name)
    if stubbed:
        m.stubs(stubbed)
    return m
