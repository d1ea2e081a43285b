"""Use Case: Import one stylesheet source.

A one-shot state machine, with no retries::

    START -> RESOLVING_IMPORTS --fail--> FALLBACK -> DONE
                  |
                  ok (dependencies declared here)
                  v
          CHECKING_PARTIAL --partial--> FALLBACK -> DONE
                  |
                  v
             COMPILING -> ADAPTING -> DONE

Only an unresolved import or the partial-file convention leads to the text
fallback.  A conversion failure in ADAPTING is logged and the (possibly
empty) structured stylesheet is still the result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from pathlib import Path

from sass_importer.application.stylesheet_adapter import StylesheetAdapter
from sass_importer.application.text_fallback import FallbackTextImporter
from sass_importer.domain.errors import CompilerInvocationError, UnresolvedImportError
from sass_importer.domain.models.asset import SourceAsset
from sass_importer.domain.models.enums import (
    CompilerErrorPolicy,
    FallbackReason,
    PipelineState,
)
from sass_importer.domain.models.pipeline import CompilerRun, ImportOutcome
from sass_importer.domain.models.stylesheet import StructuredStylesheet
from sass_importer.domain.ports.compiler import CompilerPort
from sass_importer.domain.ports.import_context import ImportContextPort
from sass_importer.domain.services.import_resolver import ImportGraphResolver
from sass_importer.infrastructure.tempfiles import scoped_temp_file

logger = logging.getLogger(__name__)

STYLESHEET_OBJECT_ID = "stylesheet"

TempFileFactory = Callable[[], AbstractContextManager[Path]]


class ImportStylesheetUseCase:
    """Run the resolve / compile / convert pipeline for one source file.

    Parameters
    ----------
    resolver:
        Finds and validates the file's ``@import`` targets.
    compiler:
        External compiler, invoked once per non-partial file.
    adapter:
        Converts compiled CSS into a structured stylesheet.
    fallback:
        Produces the raw-text artifact.
    on_compiler_error:
        ``CONTINUE`` keeps partial output of a failing compiler;
        ``FAIL`` raises :class:`CompilerInvocationError`.
    partial_prefix:
        Filename prefix of include-only files.
    temp_file:
        Factory for the scoped compiler output file.
    encoding:
        Encoding used to read the source file.
    """

    def __init__(
        self,
        resolver: ImportGraphResolver,
        compiler: CompilerPort,
        adapter: StylesheetAdapter,
        fallback: FallbackTextImporter | None = None,
        *,
        on_compiler_error: CompilerErrorPolicy = CompilerErrorPolicy.CONTINUE,
        partial_prefix: str = "_",
        temp_file: TempFileFactory = scoped_temp_file,
        encoding: str = "utf-8",
    ) -> None:
        self._resolver = resolver
        self._compiler = compiler
        self._adapter = adapter
        self._fallback = fallback or FallbackTextImporter()
        self._on_compiler_error = on_compiler_error
        self._partial_prefix = partial_prefix
        self._temp_file = temp_file
        self._encoding = encoding

    def execute(self, context: ImportContextPort) -> ImportOutcome:
        """Import ``context.asset_path`` and report the outcome.

        Raises:
            OSError: The source file cannot be read.
            SourceReadError: The source does not decode with the configured
                encoding.
            CompilerInvocationError: The compiler could not run, or it
                failed under the ``FAIL`` policy.
        """
        asset = SourceAsset.read(context.asset_path, encoding=self._encoding)
        states = [PipelineState.START, PipelineState.RESOLVING_IMPORTS]

        try:
            import_set = self._resolver.resolve(asset)
        except UnresolvedImportError as exc:
            logger.info("%s: %s; importing as text", asset.path, exc)
            return self._import_as_text(
                asset,
                context,
                states,
                FallbackReason.UNRESOLVED_IMPORT,
                unresolved=exc.name,
            )

        dependencies = sorted(import_set)
        for path in dependencies:
            context.depends_on_source(path)

        states.append(PipelineState.CHECKING_PARTIAL)
        if asset.is_partial(self._partial_prefix):
            logger.debug("%s is a partial; importing as text", asset.path)
            return self._import_as_text(
                asset, context, states, FallbackReason.PARTIAL, dependencies=dependencies
            )

        states.append(PipelineState.COMPILING)
        run = self._compile(asset.path)

        states.append(PipelineState.ADAPTING)
        sheet = StructuredStylesheet()
        result = self._adapter.convert(sheet, run.output_text)
        if not result.ok:
            # Conversion failures never redirect to the text fallback.
            logger.error("%s: %s", asset.path, result.error)

        context.add_object(STYLESHEET_OBJECT_ID, sheet)
        context.set_main_object(sheet)

        states.append(PipelineState.DONE)
        return ImportOutcome(
            source=asset.path,
            artifact=sheet,
            states=states,
            dependencies=dependencies,
            compiler_run=run,
            adapter_result=result,
        )

    # -- Steps ---------------------------------------------------------------

    def _compile(self, source: Path) -> CompilerRun:
        with self._temp_file() as output:
            run = self._compiler.compile(source, output)

        if not run.succeeded:
            if self._on_compiler_error == CompilerErrorPolicy.FAIL:
                raise CompilerInvocationError(
                    f"Sass compiler exited with status {run.exit_status} on {source}: "
                    f"{run.stderr.strip()}"
                )
            logger.warning(
                "%s: compiler exited with status %d, using its partial output: %s",
                source,
                run.exit_status,
                run.stderr.strip(),
            )
        return run

    def _import_as_text(
        self,
        asset: SourceAsset,
        context: ImportContextPort,
        states: list[PipelineState],
        reason: FallbackReason,
        *,
        dependencies: list[Path] | None = None,
        unresolved: str | None = None,
    ) -> ImportOutcome:
        states.append(PipelineState.FALLBACK)
        text_asset = self._fallback.import_text(asset, context)
        states.append(PipelineState.DONE)
        return ImportOutcome(
            source=asset.path,
            artifact=text_asset,
            states=states,
            dependencies=dependencies or [],
            fallback_reason=reason,
            unresolved_import=unresolved,
        )
