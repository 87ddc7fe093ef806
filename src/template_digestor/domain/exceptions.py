"""Custom exceptions for template-digestor."""

from __future__ import annotations

from collections.abc import Sequence


class TemplateDigestorError(Exception):
    """Base exception for all template-digestor errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(TemplateDigestorError):
    """Raised when there's a configuration problem."""

    pass


class MissingTemplateError(TemplateDigestorError):
    """Raised by a template finder when no template matches the lookup."""

    def __init__(
        self,
        name: str,
        prefixes: Sequence[str] = (),
        partial: bool = False,
        formats: Sequence[str] = (),
    ) -> None:
        kind = "partial" if partial else "template"
        super().__init__(
            f"Missing {kind} {name} with formats {list(formats)}",
            details={
                "name": name,
                "prefixes": list(prefixes),
                "partial": partial,
                "formats": list(formats),
            },
        )
        self.name = name
        self.partial = partial
        self.formats = list(formats)


class CircularDependencyError(TemplateDigestorError):
    """Raised when a template depends on itself, directly or transitively."""

    def __init__(self, chain: Sequence[str]) -> None:
        super().__init__(
            f"Circular template dependency: {' -> '.join(chain)}",
            details={"chain": list(chain)},
        )
        self.chain = list(chain)
