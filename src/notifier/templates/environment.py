"""Shared jinja2 environment.

Templates are compiled once at import and never mutated, so they can be
shared across concurrent dispatches. Undefined fields raise instead of
rendering as blanks.
"""

from datetime import UTC, datetime

import jinja2
from notifier.errors import TemplateError


def human_time(value) -> str:
    """Format a timestamp as ``14:05, Mon Jan 2`` (UTC)."""
    if not isinstance(value, datetime):
        raise ValueError(f"expected a datetime, got {type(value).__name__}")
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return f"{value:%H:%M}, {value:%a %b} {value.day}"


environment = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)
environment.filters["human_time"] = human_time


def compile_template(source: str) -> jinja2.Template:
    return environment.from_string(source)


def render_template(name: str, template: jinja2.Template, /, **fields) -> str:
    """Render ``template``; any failure is reported as ``TemplateError``."""
    try:
        return template.render(**fields)
    except (jinja2.TemplateError, ValueError) as e:
        raise TemplateError(name, str(e)) from e
