"""Naming rules as pure functions.

Everything here is deterministic string manipulation over logical template
names. The only collaborator is the injected :class:`Inflector`.
"""

from __future__ import annotations

import re

from template_digestor.domain.ports import Inflector


# ---------------------------------------------------------------------------
# Template names
# ---------------------------------------------------------------------------

# "topics/_topic" marks a partial by its underscore-prefixed leaf.
PARTIAL_MARKER = "/_"


def cache_key(name: str, format: str) -> str:
    """Return the digest cache key for ``(name, format)``."""
    return f"{name}.{format}"


def is_partial_name(name: str) -> bool:
    """True when *name* syntactically denotes a partial."""
    return PARTIAL_MARKER in name


def logical_name(name: str) -> str:
    """Strip partial underscores: ``"topics/_topic"`` → ``"topics/topic"``."""
    return name.replace(PARTIAL_MARKER, "/")


def directory_of(name: str) -> str:
    """Return *name* with its last path segment removed (may be ``""``)."""
    return "/".join(name.split("/")[:-1])


# ---------------------------------------------------------------------------
# Reference resolution
# ---------------------------------------------------------------------------

# @topic, topics, message.topics
_OBJECT_REFERENCE_RE = re.compile(r"\A@?(?:[a-z]+\.)*([a-z_]+)\Z")
_QUOTES_RE = re.compile(r"[\"']")


def resolve_reference(raw: str, directory: str, inflector: Inflector) -> str:
    """Turn a raw render reference into a canonical template name.

    Steps, in order:

    1. Object-style references become ``"<plural>/<singular>"`` of their
       last segment: ``render(@topic)`` → ``"topics/topic"``.
    2. Names without a ``/`` are placed in *directory*:
       ``render("headline")`` from ``message/show`` → ``"message/headline"``.
    3. Quotes from string literals are removed.
    """
    name = _OBJECT_REFERENCE_RE.sub(
        lambda m: f"{inflector.pluralize(m.group(1))}/{inflector.singularize(m.group(1))}",
        raw,
    )
    if "/" not in name:
        name = f"{directory}/{name}"
    return _QUOTES_RE.sub("", name)


def unique(items: list[str]) -> list[str]:
    """Drop duplicates, keeping first-occurrence order."""
    return list(dict.fromkeys(items))
