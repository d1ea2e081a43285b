"""cssutils populator — implements StylesheetPopulatorPort.

The parser module is looked up by name the first time it is needed, so the
importer still runs (with empty stylesheets) where it is not installed.
"""

from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Any, Optional

from sass_importer.domain.errors import AdapterConversionError
from sass_importer.domain.models.stylesheet import StructuredStylesheet, StyleRule
from sass_importer.domain.ports.stylesheet_populator import StylesheetPopulatorPort

logger = logging.getLogger(__name__)


def _to_style_rule(rule: Any, media: Optional[str] = None) -> StyleRule:
    declarations: dict[str, str] = {}
    for prop in rule.style.getProperties():
        value = prop.value
        if prop.priority:
            value = f"{value} !{prop.priority}"
        declarations[prop.name] = value
    return StyleRule(selector=rule.selectorText, declarations=declarations, media=media)


class CssutilsPopulator(StylesheetPopulatorPort):
    """Populate stylesheets with the ``cssutils`` parser."""

    def __init__(self, module_name: str = "cssutils") -> None:
        self._module_name = module_name
        self._module: Optional[ModuleType] = None
        self._looked_up = False

    def _lookup(self) -> Optional[ModuleType]:
        if not self._looked_up:
            self._looked_up = True
            try:
                self._module = importlib.import_module(self._module_name)
            except ImportError as exc:
                logger.debug("Stylesheet parser '%s' unavailable: %s", self._module_name, exc)
                self._module = None
            else:
                # Parse problems surface as exceptions, not log spam
                log = getattr(self._module, "log", None)
                if log is not None:
                    log.setLevel(logging.CRITICAL)
        return self._module

    def is_available(self) -> bool:
        return self._lookup() is not None

    def populate(self, sheet: StructuredStylesheet, css_text: str) -> None:
        module = self._lookup()
        if module is None:
            return

        parser = module.CSSParser(raiseExceptions=True, validate=False)
        try:
            parsed = parser.parseString(css_text)
        except Exception as exc:
            raise AdapterConversionError(
                f"{self._module_name} rejected the compiled CSS: {exc}"
            ) from exc

        for rule in parsed.cssRules:
            if rule.type == rule.STYLE_RULE:
                sheet.rules.append(_to_style_rule(rule))
            elif rule.type == rule.MEDIA_RULE:
                media = rule.media.mediaText
                for inner in rule.cssRules:
                    if inner.type == inner.STYLE_RULE:
                        sheet.rules.append(_to_style_rule(inner, media))


class NullPopulator(StylesheetPopulatorPort):
    """Degraded default: no capability, stylesheets stay empty."""

    def is_available(self) -> bool:
        return False

    def populate(self, sheet: StructuredStylesheet, css_text: str) -> None:
        return None
