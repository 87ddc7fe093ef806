"""Domain layer: entities, ports, exceptions and naming rules."""

from template_digestor.domain.entities import (
    DigestOptions,
    NestedDependencies,
    TemplateReference,
    TemplateSource,
)
from template_digestor.domain.exceptions import (
    CircularDependencyError,
    ConfigurationError,
    MissingTemplateError,
    TemplateDigestorError,
)

__all__ = [
    "CircularDependencyError",
    "ConfigurationError",
    "DigestOptions",
    "MissingTemplateError",
    "NestedDependencies",
    "TemplateDigestorError",
    "TemplateReference",
    "TemplateSource",
]
