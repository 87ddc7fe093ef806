"""Shared fixtures for template-digestor tests."""

from __future__ import annotations

import pytest
import structlog

from template_digestor.config import get_settings
from template_digestor.infrastructure.cache import DigestCache, get_default_cache
from template_digestor.infrastructure.finders import InMemoryTemplateFinder


class SuffixInflector:
    """Naive inflector: adds or strips a trailing ``s``."""

    def pluralize(self, word: str) -> str:
        return word if word.endswith("s") else f"{word}s"

    def singularize(self, word: str) -> str:
        return word[:-1] if word.endswith("s") else word


@pytest.fixture(autouse=True)
def _reset_globals():
    get_settings.cache_clear()
    get_default_cache.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_cache.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def inflector():
    return SuffixInflector()


@pytest.fixture
def cache():
    """A fresh digest cache, isolated from the process-wide one."""
    return DigestCache()


@pytest.fixture
def finder():
    """A small template tree::

        topics/show ─┬─ comments/comments ── comments/comment
                     ├─ topics/topic
                     └─ shared/footer (explicit)
        shared/about ── shared/footer
    """
    return InMemoryTemplateFinder({
        "topics/show.html": (
            "<h1>Topic</h1>\n"
            "<%= render @topic %>\n"
            '<%= render "comments/comments" %>\n'
            "<%# Template Dependency: shared/footer %>\n"
        ),
        "topics/_topic.html": "<h2><%= topic.title %></h2>\n",
        "comments/_comments.html": (
            '<%= render partial: "comments/comment", collection: topic.comments %>\n'
        ),
        "comments/_comment.html": "<p><%= comment.body %></p>\n",
        "shared/_footer.html": "<footer>footer</footer>\n",
        "shared/about.html": "<%# Template Dependency: shared/footer %>\nAbout us\n",
    })
