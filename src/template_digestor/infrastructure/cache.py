"""Process-wide memoization of template digests.

One reentrant lock serializes every check-compute-store sequence. A digest
computation re-enters the cache for each of its dependencies from the same
thread, so the whole recursive subtree runs inside the outer critical
section while other threads wait.

Entries are insert-if-absent and live for the lifetime of the cache. The
digestor never clears it; hosts call :meth:`DigestCache.clear` when templates
are reloaded.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import lru_cache
from threading import RLock

import structlog

from template_digestor.domain.exceptions import CircularDependencyError

logger = structlog.get_logger(__name__)


class DigestCache:
    """Thread-safe ``cache key -> digest`` mapping.

    *detect_cycles* governs every digest computed through this cache.
    Only the process-wide cache reads it from settings.
    """

    def __init__(self, *, detect_cycles: bool = True) -> None:
        self._store: dict[str, str] = {}
        self._lock = RLock()
        self._detect_cycles = detect_cycles
        # (key, partial) pairs being computed by the lock holder, outermost first.
        self._computing: list[tuple[str, bool]] = []

    @contextmanager
    def synchronize(self) -> Iterator[None]:
        """Hold the cache lock for the duration of the block."""
        with self._lock:
            yield

    def fetch(self, key: str, compute: Callable[[], str], *, partial: bool = False) -> str:
        """Return the digest stored for *key*, computing and storing it on a miss.

        A template and its same-named partial share one key, so progress is
        tracked per ``(key, partial)``. When the partial was stored while its
        full template was still computing, the full template's digest wins.

        Raises:
            CircularDependencyError: *compute* re-entered the cache for a key
                that is still being computed in the same lookup mode.
        """
        with self._lock:
            cached = self._store.get(key)
            if cached is not None:
                logger.debug("digest.cache_hit", key=key)
                return cached

            entry = (key, partial)
            if self._detect_cycles and entry in self._computing:
                start = self._computing.index(entry)
                chain = [k for k, _ in self._computing[start:]] + [key]
                logger.warning("digest.circular_dependency", chain=chain)
                raise CircularDependencyError(chain)

            logger.debug("digest.cache_miss", key=key, depth=len(self._computing))
            self._computing.append(entry)
            try:
                value = compute()
            finally:
                self._computing.pop()
            self._store[key] = value
            return value

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._store.get(key)

    def clear(self) -> None:
        """Remove all memoized digests."""
        with self._lock:
            self._store.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


@lru_cache
def get_default_cache() -> DigestCache:
    """Get the process-wide digest cache."""
    from template_digestor.config import get_settings

    return DigestCache(detect_cycles=get_settings().detect_cycles)
