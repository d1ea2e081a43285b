"""Use Case: Import a batch of stylesheet sources.

Each file runs the single-file pipeline with its own host context.  A
failure is recorded on that file's :class:`BatchItem`; it never stops the
rest of the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sass_importer.application.use_cases.import_stylesheet import ImportStylesheetUseCase
from sass_importer.domain.errors import SassImporterError
from sass_importer.domain.models.pipeline import ImportOutcome
from sass_importer.domain.ports.import_context import ImportContextPort

logger = logging.getLogger(__name__)

ContextFactory = Callable[[Path], ImportContextPort]


@dataclass
class BatchItem:
    """Result slot for one file of a batch."""

    path: Path
    context: ImportContextPort
    outcome: Optional[ImportOutcome] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ImportBatchUseCase:
    """Import many files, optionally on a thread pool."""

    def __init__(
        self,
        importer: ImportStylesheetUseCase,
        context_factory: ContextFactory,
        is_supported: Callable[[str], bool] | None = None,
    ) -> None:
        self._importer = importer
        self._context_factory = context_factory
        self._is_supported = is_supported

    def execute(self, paths: Sequence[Path], workers: int = 1) -> list[BatchItem]:
        """Import *paths* and return one item per path, in input order."""
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")

        if workers == 1 or len(paths) <= 1:
            return [self._import_one(path) for path in paths]

        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self._import_one, paths))

    def _import_one(self, path: Path) -> BatchItem:
        item = BatchItem(path=path, context=self._context_factory(path))

        if self._is_supported is not None and not self._is_supported(path.name):
            item.error = f"Unsupported file type: {path.suffix or path.name}"
            return item

        try:
            item.outcome = self._importer.execute(item.context)
        except (SassImporterError, OSError) as exc:
            logger.error("Import of %s failed: %s", path, exc)
            item.error = str(exc)
        return item
