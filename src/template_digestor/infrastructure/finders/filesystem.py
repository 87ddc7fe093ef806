"""Filesystem-based TemplateFinder.

Resolves logical names against a template root directory::

    templates/
    ├── topics/show.html.erb     ← ("topics/show", full, ["html"])
    ├── topics/_topic.html.erb   ← ("topics/topic", partial, ["html"])
    └── shared/footer.html       ← ("shared/footer", full, ["html"])

A file matches when it is named ``<leaf>.<format>`` or
``<leaf>.<format>.<handler>``. Implements the ``TemplateFinder`` port.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import structlog

from template_digestor.domain.entities import TemplateSource
from template_digestor.domain.exceptions import MissingTemplateError
from template_digestor.infrastructure.finders.paths import template_path

logger = structlog.get_logger(__name__)


class FilesystemTemplateFinder:
    """Read template sources from files under a root directory."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def find(
        self,
        name: str,
        prefixes: Sequence[str],
        partial: bool,
        formats: Sequence[str],
    ) -> TemplateSource:
        candidates = [name] if not prefixes else [f"{p}/{name}" for p in prefixes]
        for candidate in candidates:
            for fmt in formats:
                path = self._match(template_path(candidate, partial), fmt)
                if path is not None:
                    return TemplateSource(
                        text=path.read_text(encoding="utf-8"),
                        identifier=str(path.relative_to(self._root)),
                    )
        logger.debug("finder.missing", name=name, partial=partial, formats=list(formats))
        raise MissingTemplateError(name, prefixes, partial, formats)

    def _match(self, relative: str, fmt: str) -> Path | None:
        base = self._root / relative
        exact = base.with_name(f"{base.name}.{fmt}")
        if exact.is_file():
            return exact
        if not base.parent.is_dir():
            return None
        # With a handler extension: show.html.erb, show.html.haml, ...
        matches = sorted(p for p in base.parent.glob(f"{base.name}.{fmt}.*") if p.is_file())
        return matches[0] if matches else None
