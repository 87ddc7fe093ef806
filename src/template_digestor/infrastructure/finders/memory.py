"""In-memory TemplateFinder.

Templates are registered under ``"<path>.<format>"`` keys, with partials
stored under their underscore-prefixed leaf::

    InMemoryTemplateFinder({
        "topics/show.html": "<%= render @topic %>",
        "topics/_topic.html": "<h1><%= topic.title %></h1>",
    })

Implements the ``TemplateFinder`` port.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from template_digestor.domain.entities import TemplateSource
from template_digestor.domain.exceptions import MissingTemplateError
from template_digestor.infrastructure.finders.paths import template_path


class InMemoryTemplateFinder:
    """Serves template sources from a dict; counts every lookup."""

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self._templates: dict[str, str] = dict(templates or {})
        self.lookups: list[tuple[str, bool, tuple[str, ...]]] = []

    def add(self, key: str, source: str) -> None:
        """Register or replace the source stored under *key*."""
        self._templates[key] = source

    def find(
        self,
        name: str,
        prefixes: Sequence[str],
        partial: bool,
        formats: Sequence[str],
    ) -> TemplateSource:
        self.lookups.append((name, partial, tuple(formats)))
        candidates = [name] if not prefixes else [f"{p}/{name}" for p in prefixes]
        for candidate in candidates:
            path = template_path(candidate, partial)
            for fmt in formats:
                key = f"{path}.{fmt}"
                if key in self._templates:
                    return TemplateSource(text=self._templates[key], identifier=key)
        raise MissingTemplateError(name, prefixes, partial, formats)
