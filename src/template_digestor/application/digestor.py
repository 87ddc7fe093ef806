"""Template digesting.

A template's digest is ``hash(source + "-" + dependency digests)``, where the
dependency digests are computed recursively (always in partial mode) through
the shared :class:`DigestCache`. Changing any template in a dependency tree
therefore changes the digest of every template above it.

Public entry points:

- :func:`digest`: memoized, serialized digest of one template.
- :func:`dependencies`: direct dependency names, ``[]`` for a missing template.
- :func:`nested_dependencies`: recursive dependency tree, for diagnostics.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from template_digestor.config import get_settings
from template_digestor.domain.entities import (
    DigestOptions,
    NestedDependencies,
    TemplateReference,
)
from template_digestor.domain.exceptions import CircularDependencyError, MissingTemplateError
from template_digestor.domain.ports import DigestLogger, Inflector, TemplateFinder
from template_digestor.domain.rules import (
    cache_key,
    directory_of,
    is_partial_name,
    logical_name,
)
from template_digestor.infrastructure.cache import DigestCache, get_default_cache
from template_digestor.infrastructure.inflection import get_default_inflector
from template_digestor.infrastructure.parsing.dependencies import extract_dependencies
from template_digestor.infrastructure.parsing.hashing import (
    DEFAULT_ALGORITHM,
    compute_content_hash,
)


class Digestor:
    """Digest computation for a single ``(name, format)`` template.

    Instances are cheap and short-lived: one per request, with the source
    loaded lazily and kept for the instance's lifetime. ``partial`` selects
    the finder's partial lookup mode; the algorithm is otherwise identical.

    Use :func:`digest` rather than :meth:`digest` directly: only the module
    function memoizes results and holds the cache lock. *detect_cycles*
    applies to :meth:`nested_dependencies`; digests follow the flag of the
    cache they go through.
    """

    def __init__(
        self,
        name: str,
        format: str,
        finder: TemplateFinder,
        *,
        partial: bool = False,
        cache: DigestCache | None = None,
        logger: DigestLogger | None = None,
        inflector: Inflector | None = None,
        hash_algorithm: str = DEFAULT_ALGORITHM,
        detect_cycles: bool = True,
    ) -> None:
        self.name = name
        self.format = format
        self.finder = finder
        self.partial = partial
        self._cache = cache
        self._logger = logger
        self._inflector = inflector or get_default_inflector()
        self._hash_algorithm = hash_algorithm
        self._detect_cycles = detect_cycles
        self._source: str | None = None

    @property
    def reference(self) -> TemplateReference:
        return TemplateReference(name=self.name, format=self.format)

    @property
    def source(self) -> str:
        """The template's source text.

        Raises:
            MissingTemplateError: the finder has no such template.
        """
        if self._source is None:
            found = self.finder.find(
                logical_name(self.name), [], self.partial, [self.format]
            )
            self._source = found.text
        return self._source

    def digest(self) -> str:
        """Hash of the source and every dependency's digest; ``""`` if missing."""
        try:
            value = compute_content_hash(
                f"{self.source}-{self._dependency_digest()}", self._hash_algorithm
            )
        except MissingTemplateError:
            self._log("error", f"Couldn't find template for digesting: {self.reference}")
            return ""
        self._log("info", f"Cache digest for {self.reference}: {value}")
        return value

    def dependencies(self) -> list[str]:
        """Direct dependencies: render calls first, then explicit annotations."""
        try:
            source = self.source
        except MissingTemplateError:
            # No template, so no dependencies
            return []
        return extract_dependencies(source, directory_of(self.name), self._inflector)

    def nested_dependencies(self) -> NestedDependencies:
        """Dependency tree, e.g. ``["a/x", {"a/y": ["b/z"]}]``."""
        return self._nested(((self.reference.cache_key, self.partial),))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _nested(self, trail: tuple[tuple[str, bool], ...]) -> NestedDependencies:
        tree: NestedDependencies = []
        for dependency in self.dependencies():
            # dependencies are always looked up as partials
            entry = (cache_key(dependency, self.format), True)
            if self._detect_cycles and entry in trail:
                cycle = [key for key, _ in trail[trail.index(entry):]]
                raise CircularDependencyError([*cycle, entry[0]])
            children = self._child(dependency)._nested((*trail, entry))
            tree.append({dependency: children} if children else dependency)
        return tree

    def _child(self, name: str) -> Digestor:
        return Digestor(
            name,
            self.format,
            self.finder,
            partial=True,
            cache=self._cache,
            logger=self._logger,
            inflector=self._inflector,
            hash_algorithm=self._hash_algorithm,
            detect_cycles=self._detect_cycles,
        )

    def _dependency_digest(self) -> str:
        cache = self._cache if self._cache is not None else get_default_cache()
        return "-".join(
            _unsafe_digest(self._child(dependency), cache)
            for dependency in self.dependencies()
        )

    def _log(self, level: str, message: str) -> None:
        if self._logger is None:
            return
        getattr(self._logger, level)(message)


def _unsafe_digest(digestor: Digestor, cache: DigestCache) -> str:
    """Memoized digest of *digestor*'s template.

    Only safe inside ``cache.synchronize()``; callers outside the digestor
    should use :func:`digest`.
    """
    return cache.fetch(
        digestor.reference.cache_key, digestor.digest, partial=digestor.partial
    )


def digest(
    name: str,
    format: str,
    finder: TemplateFinder,
    options: DigestOptions | Mapping[str, Any] | None = None,
    *,
    cache: DigestCache | None = None,
    logger: DigestLogger | None = None,
    inflector: Inflector | None = None,
) -> str:
    """Return the memoized digest of template ``(name, format)``.

    Partial lookup is used when ``options.partial`` is set or *name* has an
    underscore-prefixed leaf (``"topics/_topic"``). A missing template
    digests to ``""``.

    Raises:
        CircularDependencyError: the template depends on itself and
            *cache* was built with ``detect_cycles`` on.
    """
    options = DigestOptions.coerce(options)
    settings = get_settings()
    if cache is None:
        cache = get_default_cache()

    digestor = Digestor(
        name,
        format,
        finder,
        partial=options.partial or is_partial_name(name),
        cache=cache,
        logger=logger,
        inflector=inflector,
        hash_algorithm=settings.hash_algorithm,
    )
    with cache.synchronize():
        return _unsafe_digest(digestor, cache)


def dependencies(
    name: str,
    format: str,
    finder: TemplateFinder,
    *,
    inflector: Inflector | None = None,
) -> list[str]:
    """Direct dependency names of ``(name, format)``; ``[]`` if it is missing."""
    return Digestor(
        name, format, finder, partial=is_partial_name(name), inflector=inflector
    ).dependencies()


def nested_dependencies(
    name: str,
    format: str,
    finder: TemplateFinder,
    *,
    inflector: Inflector | None = None,
) -> NestedDependencies:
    """Recursive dependency tree of ``(name, format)``."""
    settings = get_settings()
    return Digestor(
        name,
        format,
        finder,
        partial=is_partial_name(name),
        inflector=inflector,
        detect_cycles=settings.detect_cycles,
    ).nested_dependencies()
