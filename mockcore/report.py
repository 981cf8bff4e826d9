"""Failure messages rendered from Jinja2 templates."""

from __future__ import annotations

import typing

import jinja2

_env = jinja2.Environment(
    loader=jinja2.PackageLoader("mockcore", "templates"),
    keep_trailing_newline=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)


def render(template_name: str, **kwargs: typing.Any) -> str:
    return _env.get_template(template_name).render(**kwargs).rstrip("\n")
