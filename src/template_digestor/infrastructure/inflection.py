"""English noun inflection backed by the ``inflection`` library.

``inflection`` ports ActiveSupport's inflector rules, so template names
inferred from object references (``@address`` → ``addresses/address``)
follow the same conventions as the views they point at. Implements the
``Inflector`` port. Both operations are idempotent: pluralizing a plural or
singularizing a singular returns the word as is.
"""

from __future__ import annotations

from functools import lru_cache

import inflection


class InflectionInflector:
    """Pluralize/singularize nouns with ActiveSupport-compatible rules."""

    def pluralize(self, word: str) -> str:
        return inflection.pluralize(word)

    def singularize(self, word: str) -> str:
        return inflection.singularize(word)


@lru_cache
def get_default_inflector() -> InflectionInflector:
    """Get the shared inflector used when none is injected."""
    return InflectionInflector()
