"""Template finder implementations."""

from template_digestor.infrastructure.finders.filesystem import FilesystemTemplateFinder
from template_digestor.infrastructure.finders.memory import InMemoryTemplateFinder

__all__ = ["FilesystemTemplateFinder", "InMemoryTemplateFinder"]
