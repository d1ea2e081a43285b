"""Tests for CSS → structured stylesheet conversion."""

from __future__ import annotations

import pytest

from sass_importer.application.stylesheet_adapter import StylesheetAdapter
from sass_importer.domain.models.stylesheet import StructuredStylesheet, StyleRule
from sass_importer.domain.ports.stylesheet_populator import StylesheetPopulatorPort
from sass_importer.infrastructure.stylesheet.cssutils_populator import (
    CssutilsPopulator,
    NullPopulator,
)


class _FailingPopulator(StylesheetPopulatorPort):
    def is_available(self) -> bool:
        return True

    def populate(self, sheet: StructuredStylesheet, css_text: str) -> None:
        sheet.rules.append(StyleRule(selector="a"))
        raise ValueError("unexpected token")


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------


class TestStylesheetAdapter:
    def test_empty_text_is_skipped(self):
        sheet = StructuredStylesheet()
        result = StylesheetAdapter(CssutilsPopulator()).convert(sheet, "")
        assert result.ok and result.skipped
        assert sheet.is_empty

    def test_unavailable_capability_is_skipped(self):
        sheet = StructuredStylesheet()
        result = StylesheetAdapter(NullPopulator()).convert(sheet, "body{color:red}")
        assert result.ok and result.skipped
        assert sheet.is_empty

    def test_failure_is_returned_not_raised(self):
        sheet = StructuredStylesheet()
        result = StylesheetAdapter(_FailingPopulator()).convert(sheet, "a{")
        assert not result.ok
        assert "unexpected token" in result.error
        assert result.error_type == "ValueError"
        # Rules added before the failure stay on the sheet
        assert sheet.selectors() == ["a"]

    def test_parser_rejection_is_reported_as_conversion_error(self, monkeypatch):
        cssutils = pytest.importorskip("cssutils")

        def _reject(self, css_text, *args, **kwargs):
            raise ValueError("bad token")

        monkeypatch.setattr(cssutils.CSSParser, "parseString", _reject)
        sheet = StructuredStylesheet()
        result = StylesheetAdapter(CssutilsPopulator()).convert(sheet, "a{")
        assert not result.ok
        assert result.error_type == "AdapterConversionError"
        assert "bad token" in result.error

    def test_success_has_no_error_type(self):
        result = StylesheetAdapter(NullPopulator()).convert(StructuredStylesheet(), "a{}")
        assert result.error is None and result.error_type is None

    def test_success_counts_rules(self):
        pytest.importorskip("cssutils")
        sheet = StructuredStylesheet()
        result = StylesheetAdapter(CssutilsPopulator()).convert(
            sheet, "body { color: red; }\n.a, .b { margin: 0; }\n"
        )
        assert result.ok and not result.skipped
        assert result.rule_count == 2


# ---------------------------------------------------------------------------
# cssutils populator
# ---------------------------------------------------------------------------


class TestCssutilsPopulator:
    def test_available_when_installed(self):
        pytest.importorskip("cssutils")
        assert CssutilsPopulator().is_available()

    def test_unknown_module_is_unavailable(self):
        populator = CssutilsPopulator(module_name="definitely_not_a_css_parser_module")
        assert not populator.is_available()
        sheet = StructuredStylesheet()
        populator.populate(sheet, "body{color:red}")
        assert sheet.is_empty

    def test_simple_rule(self):
        pytest.importorskip("cssutils")
        sheet = StructuredStylesheet()
        CssutilsPopulator().populate(sheet, "body{color:red}")
        assert sheet.rules == [StyleRule(selector="body", declarations={"color": "red"})]

    def test_declaration_order_and_priority(self):
        pytest.importorskip("cssutils")
        sheet = StructuredStylesheet()
        CssutilsPopulator().populate(
            sheet, ".btn {\n  padding: 4px;\n  color: blue !important;\n}\n"
        )
        rule = sheet.rules[0]
        assert rule.selector == ".btn"
        assert list(rule.declarations) == ["padding", "color"]
        assert rule.declarations["color"] == "blue !important"

    def test_media_rules_are_flattened(self):
        pytest.importorskip("cssutils")
        sheet = StructuredStylesheet()
        CssutilsPopulator().populate(
            sheet, "a { color: red; }\n@media print {\n  a { color: black; }\n}\n"
        )
        assert [r.media for r in sheet.rules] == [None, "print"]
        assert sheet.rules[1].declarations == {"color": "black"}


class TestNullPopulator:
    def test_never_available(self):
        assert not NullPopulator().is_available()
