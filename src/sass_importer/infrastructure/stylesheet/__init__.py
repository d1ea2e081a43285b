"""Stylesheet population adapters."""

from sass_importer.infrastructure.stylesheet.cssutils_populator import (
    CssutilsPopulator,
    NullPopulator,
)

__all__ = ["CssutilsPopulator", "NullPopulator"]
