"""Conversion of compiled CSS into the host's structured stylesheet."""

from __future__ import annotations

from sass_importer.domain.models.pipeline import AdapterResult
from sass_importer.domain.models.stylesheet import StructuredStylesheet
from sass_importer.domain.ports.stylesheet_populator import StylesheetPopulatorPort


class StylesheetAdapter:
    """Fill a :class:`StructuredStylesheet` through a populator capability.

    Never raises.  A missing capability or empty input is a skip; a parser
    failure is returned as a failed :class:`AdapterResult` and the sheet
    keeps whatever rules were added before the failure.
    """

    def __init__(self, populator: StylesheetPopulatorPort) -> None:
        self._populator = populator

    @property
    def available(self) -> bool:
        return self._populator.is_available()

    def convert(self, sheet: StructuredStylesheet, compiled_text: str) -> AdapterResult:
        if not compiled_text or not self._populator.is_available():
            return AdapterResult.skip()

        try:
            self._populator.populate(sheet, compiled_text)
        except Exception as exc:
            return AdapterResult.failure(
                f"Stylesheet conversion failed: {exc}", error_type=type(exc).__name__
            )

        return AdapterResult(ok=True, rule_count=len(sheet.rules))
