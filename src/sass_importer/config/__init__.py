"""Importer configuration package."""

from sass_importer.config.loader import get_config, load_config
from sass_importer.config.models import ImporterConfig

__all__ = ["ImporterConfig", "get_config", "load_config"]
