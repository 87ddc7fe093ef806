"""Template dependency extraction from raw source text.

Handles two kinds of references:

- render calls, inferred from the call's first argument::

      render partial: "comments/comment", collection: commentable.comments
      render "comments/comments"
      render('comments/comments')
      render(@topic)          # → "topics/topic" after name resolution
      render(message.topics)  # → "topics/topic" after name resolution

- explicit annotations, used verbatim::

      <%# Template Dependency: shared/footer %>

This is pattern matching, not parsing: malformed calls simply don't match.
"""

from __future__ import annotations

import re

from template_digestor.domain.ports import Inflector
from template_digestor.domain.rules import resolve_reference, unique

RENDER_DEPENDENCY_RE = re.compile(
    r"""
    render\s*                       # render, followed by optional whitespace
    \(?                             # optional parenthesis for the render call
    (partial:|:partial\s+=>)?\s*    # naming the partial, used with collection
    ([@a-z"'][@a-z_/."']+)          # the template name itself
    """,
    re.VERBOSE,
)

EXPLICIT_DEPENDENCY_RE = re.compile(r"# Template Dependency:[ \t]+(\S+)")


class RenderCallExtractor:
    """Raw references from ``render`` calls, deduplicated in order."""

    def extract(self, source: str) -> list[str]:
        return unique([m.group(2) for m in RENDER_DEPENDENCY_RE.finditer(source)])


class ExplicitDependencyExtractor:
    """Tokens from ``# Template Dependency:`` annotations, deduplicated in order."""

    def extract(self, source: str) -> list[str]:
        return unique(EXPLICIT_DEPENDENCY_RE.findall(source))


def extract_render_dependencies(
    source: str,
    directory: str,
    inflector: Inflector,
) -> list[str]:
    """Canonical template names referenced by render calls in *source*.

    *directory* is the containing directory of the template being scanned;
    bare names are resolved relative to it.
    """
    return [
        resolve_reference(raw, directory, inflector)
        for raw in RenderCallExtractor().extract(source)
    ]


def extract_explicit_dependencies(source: str) -> list[str]:
    """Template names named by explicit annotations in *source*."""
    return ExplicitDependencyExtractor().extract(source)


def extract_dependencies(
    source: str,
    directory: str,
    inflector: Inflector,
) -> list[str]:
    """All direct dependencies of *source*: render calls first, then annotations."""
    return extract_render_dependencies(source, directory, inflector) + extract_explicit_dependencies(source)
