"""Dependency-aware template digests.

A template's digest changes whenever its own source or the source of any
template it renders (directly or transitively) changes::

    from template_digestor import InMemoryTemplateFinder, digest

    finder = InMemoryTemplateFinder({
        "topics/show.html": "<%= render @topic %>",
        "topics/_topic.html": "<h1><%= topic.title %></h1>",
    })
    digest("topics/show", "html", finder)
"""

from template_digestor.application.digestor import (
    Digestor,
    dependencies,
    digest,
    nested_dependencies,
)
from template_digestor.domain.entities import DigestOptions, TemplateReference, TemplateSource
from template_digestor.domain.exceptions import (
    CircularDependencyError,
    MissingTemplateError,
    TemplateDigestorError,
)
from template_digestor.infrastructure.cache import DigestCache
from template_digestor.infrastructure.finders import (
    FilesystemTemplateFinder,
    InMemoryTemplateFinder,
)

__version__ = "0.1.0"

__all__ = [
    "CircularDependencyError",
    "DigestCache",
    "DigestOptions",
    "Digestor",
    "FilesystemTemplateFinder",
    "InMemoryTemplateFinder",
    "MissingTemplateError",
    "TemplateDigestorError",
    "TemplateReference",
    "TemplateSource",
    "dependencies",
    "digest",
    "nested_dependencies",
]
