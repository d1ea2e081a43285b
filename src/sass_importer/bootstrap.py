"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from sass_importer.application.stylesheet_adapter import StylesheetAdapter
from sass_importer.application.text_fallback import FallbackTextImporter
from sass_importer.application.use_cases.import_batch import ImportBatchUseCase
from sass_importer.application.use_cases.import_stylesheet import ImportStylesheetUseCase
from sass_importer.config.loader import get_config, load_config
from sass_importer.config.models import ImporterConfig
from sass_importer.domain.ports.compiler import CompilerPort
from sass_importer.domain.ports.import_context import ImportContextPort
from sass_importer.domain.ports.stylesheet_populator import StylesheetPopulatorPort
from sass_importer.domain.services.import_resolver import ImportGraphResolver

from sass_importer.infrastructure.compiler.sass_cli import SassCliCompiler
from sass_importer.infrastructure.context.memory_context import InMemoryImportContext
from sass_importer.infrastructure.stylesheet.cssutils_populator import (
    CssutilsPopulator,
    NullPopulator,
)


class Container:
    """Simple dependency injection container.

    Wires all infrastructure implementations to domain ports
    and provides pre-configured use cases.

    Usage::

        container = Container()
        context = container.new_context(Path("styles/main.scss"))
        outcome = container.import_stylesheet().execute(context)
    """

    def __init__(self, config_path: str | None = None) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._config: ImporterConfig = (
            load_config(Path(config_path)) if config_path else get_config()
        )

        self._compiler = SassCliCompiler(
            executable=self._config.compiler_executable,
            timeout_s=self._config.compiler_timeout_s,
            encoding=self._config.encoding,
        )

        populator: StylesheetPopulatorPort = CssutilsPopulator(self._config.populator_module)
        if not populator.is_available():
            populator = NullPopulator()
        self._populator = populator

        self._resolver = ImportGraphResolver(
            extensions=self._config.stylesheet_extensions,
            partial_prefix=self._config.partial_prefix,
        )

    # -- Port accessors ------------------------------------------------------

    @property
    def config(self) -> ImporterConfig:
        return self._config

    @property
    def compiler(self) -> CompilerPort:
        return self._compiler

    @property
    def populator(self) -> StylesheetPopulatorPort:
        return self._populator

    @property
    def resolver(self) -> ImportGraphResolver:
        return self._resolver

    def new_context(self, path: Path) -> ImportContextPort:
        """Return a fresh host context for importing *path*."""
        return InMemoryImportContext(path)

    # -- Use Case factories --------------------------------------------------

    def import_stylesheet(self) -> ImportStylesheetUseCase:
        """Create the single-file import pipeline."""
        return ImportStylesheetUseCase(
            resolver=self._resolver,
            compiler=self._compiler,
            adapter=StylesheetAdapter(self._populator),
            fallback=FallbackTextImporter(),
            on_compiler_error=self._config.on_compiler_error,
            partial_prefix=self._config.partial_prefix,
            encoding=self._config.encoding,
        )

    def import_batch(self) -> ImportBatchUseCase:
        """Create the multi-file import use case."""
        return ImportBatchUseCase(
            importer=self.import_stylesheet(),
            context_factory=self.new_context,
            is_supported=self._config.is_stylesheet,
        )
