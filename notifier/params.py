"""
Parameter resolver for alert text.

Expands domain placeholders such as ``{{site}}`` or ``{{status}}`` into
literal strings. Spans whose name starts with a dot (``{{.Title}}``) belong
to the payload template engine and are never touched here.

Built-in names:
  datetime, date, time, timestamp, env.NAME
"""

import os
import re
import time
from datetime import datetime
from typing import Any, Mapping, Optional, Protocol

PLACEHOLDER_RE = re.compile(r"\{\{\s*([^.{}\s][^{}]*?)\s*\}\}")


class Resolver(Protocol):
    def resolve_parameters(self, text: str) -> str:
        ...


class ParameterResolver:
    """Resolve ``{{name}}`` placeholders from a mapping plus built-ins."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self.values = dict(values or {})

    def resolve_parameters(self, text: str) -> str:
        if not text or "{{" not in text:
            return text
        return PLACEHOLDER_RE.sub(self._replace, text)

    def _replace(self, match: re.Match) -> str:
        value = self.lookup(match.group(1))
        return match.group(0) if value is None else value

    def lookup(self, name: str) -> Optional[str]:
        """Return the expansion for *name*, or None if it is not recognised."""
        if name in self.values:
            return str(self.values[name])

        if name.startswith("env."):
            return os.environ.get(name[4:], "")

        now = datetime.now()
        if name == "datetime":
            return now.strftime("%Y-%m-%d %H:%M:%S")
        if name == "date":
            return now.strftime("%Y-%m-%d")
        if name == "time":
            return now.strftime("%H:%M:%S")
        if name == "timestamp":
            return str(int(time.time()))
        return None
