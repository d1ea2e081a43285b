"""Infrastructure layer — external process and library adapters."""

from sass_importer.infrastructure.compiler.sass_cli import SassCliCompiler
from sass_importer.infrastructure.context.memory_context import InMemoryImportContext
from sass_importer.infrastructure.stylesheet.cssutils_populator import (
    CssutilsPopulator,
    NullPopulator,
)
from sass_importer.infrastructure.tempfiles import scoped_temp_file

__all__ = [
    "SassCliCompiler",
    "InMemoryImportContext",
    "CssutilsPopulator",
    "NullPopulator",
    "scoped_temp_file",
]
