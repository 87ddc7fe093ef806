"""Domain entities for template digesting.

Value objects are Pydantic BaseModels, matching how the rest of the
package exchanges data with its collaborators.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict


class TemplateReference(BaseModel):
    """A ``(name, format)`` pair identifying one template variant."""

    model_config = ConfigDict(frozen=True)

    name: str  # logical, path-like e.g. "topics/topic"
    format: str  # e.g. "html", "json"

    @property
    def cache_key(self) -> str:
        return f"{self.name}.{self.format}"

    def __str__(self) -> str:
        return self.cache_key


class TemplateSource(BaseModel):
    """Source text returned by a template finder."""

    model_config = ConfigDict(frozen=True)

    text: str
    identifier: str = ""  # where the source came from (path, fixture key)


class DigestOptions(BaseModel):
    """Options accepted by the public ``digest`` entry point."""

    model_config = ConfigDict(frozen=True)

    partial: bool = False

    @classmethod
    def coerce(cls, options: DigestOptions | Mapping[str, Any] | None) -> DigestOptions:
        """Accept an options model, a plain mapping, or ``None``."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))


# A nested dependency tree: bare names for leaves, ``{name: children}`` otherwise.
NestedDependencies = list[Union[str, dict[str, Any]]]
