"""Source-text parsing utilities."""

from template_digestor.infrastructure.parsing.dependencies import (
    ExplicitDependencyExtractor,
    RenderCallExtractor,
    extract_dependencies,
    extract_explicit_dependencies,
    extract_render_dependencies,
)
from template_digestor.infrastructure.parsing.hashing import compute_content_hash

__all__ = [
    "ExplicitDependencyExtractor",
    "RenderCallExtractor",
    "compute_content_hash",
    "extract_dependencies",
    "extract_explicit_dependencies",
    "extract_render_dependencies",
]
