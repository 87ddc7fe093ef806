"""Configuration module for template-digestor."""

from template_digestor.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
