"""Port definitions (hexagonal architecture).

Each Protocol defines a boundary the host environment must satisfy.
The digestor depends only on these Protocols, never on concrete lookup,
logging or inflection implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from template_digestor.domain.entities import TemplateSource


# ---------------------------------------------------------------------------
# Template lookup port
# ---------------------------------------------------------------------------


@runtime_checkable
class TemplateFinder(Protocol):
    """Resolves a logical template name to its source.

    Implementations raise ``MissingTemplateError`` when nothing matches.
    """

    def find(
        self,
        name: str,
        prefixes: Sequence[str],
        partial: bool,
        formats: Sequence[str],
    ) -> TemplateSource: ...


# ---------------------------------------------------------------------------
# Logging port
# ---------------------------------------------------------------------------


@runtime_checkable
class DigestLogger(Protocol):
    """Sink for digest results. A structlog logger satisfies this."""

    def info(self, message: str) -> object: ...
    def error(self, message: str) -> object: ...


# ---------------------------------------------------------------------------
# Inflection port
# ---------------------------------------------------------------------------


@runtime_checkable
class Inflector(Protocol):
    """Pluralizes and singularizes English nouns."""

    def pluralize(self, word: str) -> str: ...
    def singularize(self, word: str) -> str: ...


# ---------------------------------------------------------------------------
# Dependency extraction port
# ---------------------------------------------------------------------------


@runtime_checkable
class ReferenceExtractor(Protocol):
    """Pulls raw template references out of source text."""

    def extract(self, source: str) -> list[str]: ...
