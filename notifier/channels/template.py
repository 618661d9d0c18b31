"""
Template engine adapter for custom webhook payloads.

A payload template mixes two placeholder syntaxes:

  {{site}}, {{ status }}   parameter placeholders, expanded by the resolver
  {{.Title}}, {{ .Message | tojson }}
                           template references, rendered by Jinja2 against
                           the payload data

Every ``{{...}}`` span is tagged first (leading dot or not), then only the
parameter spans are replaced, right to left, so offsets of spans that have
not been processed yet never move.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping

import jinja2
from jinja2.sandbox import SandboxedEnvironment

from notifier.errors import TemplateError
from notifier.params import Resolver

SPAN_RE = re.compile(r"\{\{([^{}]*)\}\}")
REF_START_RE = re.compile(r"\{\{\s*\.")

_env = SandboxedEnvironment(
    variable_start_string="{{.",
    variable_end_string="}}",
    block_start_string="{{%",
    block_end_string="%}}",
    comment_start_string="{{#",
    comment_end_string="#}}",
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


@dataclass(frozen=True)
class Span:
    start: int
    end: int
    inner: str

    @property
    def is_template_ref(self) -> bool:
        return self.inner.strip().startswith(".")


def find_spans(template: str) -> list[Span]:
    return [Span(m.start(), m.end(), m.group(1)) for m in SPAN_RE.finditer(template)]


def resolve_special_parameters(template: str, resolver: Resolver) -> str:
    """Expand parameter placeholders only, leaving template references intact."""
    result = template
    for span in reversed(find_spans(template)):
        if span.is_template_ref:
            continue
        resolved = resolver.resolve_parameters("{{" + span.inner.strip() + "}}")
        result = result[: span.start] + resolved + result[span.end :]
    return result


def references_field(template: str, name: str) -> bool:
    """True if *template* contains a ``{{.name}}`` reference."""
    return re.search(r"\{\{\s*\." + re.escape(name) + r"\b", template) is not None


def render_template(template: str, data: Mapping[str, Any]) -> str:
    """Render template references against *data*."""
    source = REF_START_RE.sub("{{.", template)
    try:
        compiled = _env.from_string(source)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateError(f"failed to parse template: {e}") from e

    try:
        return compiled.render(dict(data))
    except jinja2.TemplateError as e:
        raise TemplateError(f"failed to execute template: {e}") from e
