"""Hashing utilities.

Digests are fingerprints for cache invalidation, not integrity checks.
"""

from __future__ import annotations

import hashlib

from template_digestor.domain.exceptions import ConfigurationError

DEFAULT_ALGORITHM = "md5"


def compute_content_hash(content: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Compute a lowercase hex digest of *content* (MD5 by default)."""
    try:
        hasher = hashlib.new(algorithm, usedforsecurity=False)
    except ValueError as e:
        raise ConfigurationError(
            f"Unsupported hash algorithm: {algorithm}",
            details={"algorithm": algorithm},
        ) from e
    hasher.update(content.encode("utf-8"))
    return hasher.hexdigest()
