"""Tests for @import parsing and resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from sass_importer.domain.errors import UnresolvedImportError
from sass_importer.domain.models.asset import SourceAsset
from sass_importer.domain.services.import_resolver import ImportGraphResolver


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _touch(directory: Path, *names: str) -> None:
    for name in names:
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")


def _asset(directory: Path, text: str, name: str = "main.scss") -> SourceAsset:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return SourceAsset(path=path, text=text)


@pytest.fixture()
def resolver() -> ImportGraphResolver:
    return ImportGraphResolver()


# ---------------------------------------------------------------------------
# Directive parsing
# ---------------------------------------------------------------------------


class TestParseDirectives:
    def test_single_import(self, resolver):
        directives = resolver.parse_directives("@import 'colors';\nbody { color: red; }\n")
        assert [d.name for d in directives] == ["colors"]
        assert directives[0].line_number == 1

    def test_only_first_quoted_target_is_used(self, resolver):
        directives = resolver.parse_directives("@import 'a', 'b';")
        assert [d.name for d in directives] == ["a"]

    def test_line_must_start_with_keyword(self, resolver):
        text = "  @import 'indented';\n// @import 'commented';\n@import 'real';"
        assert [d.name for d in resolver.parse_directives(text)] == ["real"]

    def test_double_quotes_are_not_understood(self, resolver):
        directives = resolver.parse_directives('@import "colors";')
        assert [d.name for d in directives] == [""]

    def test_line_numbers(self, resolver):
        text = "a {}\n\n@import 'x';\n@import 'y';"
        assert [d.line_number for d in resolver.parse_directives(text)] == [3, 4]

    def test_no_imports(self, resolver):
        assert resolver.parse_directives(".a { color: blue; }") == []

    def test_cr_and_crlf_line_endings(self, resolver):
        directives = resolver.parse_directives("@import 'a';\r\n@import 'b';\r@import 'c';")
        assert [(d.name, d.line_number) for d in directives] == [("a", 1), ("b", 2), ("c", 3)]

    @pytest.mark.parametrize("separator", ["\x0c", "\x1c", "\x1d", "\x85", "\u2028", "\u2029"])
    def test_other_separators_do_not_start_a_line(self, resolver, separator):
        text = f"a {{}}{separator}@import 'x';\n@import 'y';"
        directives = resolver.parse_directives(text)
        assert [(d.name, d.line_number) for d in directives] == [("y", 2)]


# ---------------------------------------------------------------------------
# Candidate search order
# ---------------------------------------------------------------------------


class TestCandidates:
    def test_order_without_extension(self, resolver, tmp_path):
        names = [p.relative_to(tmp_path).as_posix() for p in resolver.candidates(tmp_path, "foo")]
        assert names == ["foo", "_foo.scss", "foo.scss", "_foo.sass", "foo.sass"]

    def test_order_with_extension(self, resolver, tmp_path):
        names = [
            p.relative_to(tmp_path).as_posix() for p in resolver.candidates(tmp_path, "foo.scss")
        ]
        assert names == ["foo.scss", "_foo.scss", "foo.scss"]

    def test_partial_prefix_applies_to_file_name(self, resolver, tmp_path):
        names = [
            p.relative_to(tmp_path).as_posix() for p in resolver.candidates(tmp_path, "lib/foo")
        ]
        assert "lib/_foo.scss" in names

    def test_custom_extensions(self, tmp_path):
        resolver = ImportGraphResolver(extensions=[".sass"], partial_prefix="_")
        names = [p.relative_to(tmp_path).as_posix() for p in resolver.candidates(tmp_path, "x")]
        assert names == ["x", "_x.sass", "x.sass"]


class TestResolveImportPath:
    def test_partial_wins_over_plain(self, resolver, tmp_path):
        _touch(tmp_path, "_foo.scss", "foo.scss")
        assert resolver.resolve_import_path(tmp_path, "foo") == tmp_path / "_foo.scss"

    def test_plain_when_no_partial(self, resolver, tmp_path):
        _touch(tmp_path, "foo.scss")
        assert resolver.resolve_import_path(tmp_path, "foo") == tmp_path / "foo.scss"

    def test_scss_before_sass(self, resolver, tmp_path):
        _touch(tmp_path, "foo.sass", "foo.scss")
        assert resolver.resolve_import_path(tmp_path, "foo") == tmp_path / "foo.scss"

    def test_partial_sass_after_plain_scss(self, resolver, tmp_path):
        _touch(tmp_path, "_foo.sass", "foo.scss")
        assert resolver.resolve_import_path(tmp_path, "foo") == tmp_path / "foo.scss"

    def test_exact_name_first(self, resolver, tmp_path):
        _touch(tmp_path, "_foo.scss", "foo.scss")
        assert resolver.resolve_import_path(tmp_path, "foo.scss") == tmp_path / "foo.scss"

    def test_explicit_extension_finds_partial(self, resolver, tmp_path):
        _touch(tmp_path, "_foo.scss")
        assert resolver.resolve_import_path(tmp_path, "foo.scss") == tmp_path / "_foo.scss"

    def test_subdirectory(self, resolver, tmp_path):
        _touch(tmp_path, "base/_reset.scss")
        assert resolver.resolve_import_path(tmp_path, "base/reset") == tmp_path / "base/_reset.scss"

    def test_directory_is_not_a_match(self, resolver, tmp_path):
        (tmp_path / "foo").mkdir()
        assert resolver.resolve_import_path(tmp_path, "foo") is None

    def test_empty_name_never_resolves(self, resolver, tmp_path):
        assert resolver.resolve_import_path(tmp_path, "") is None

    def test_missing(self, resolver, tmp_path):
        assert resolver.resolve_import_path(tmp_path, "missing") is None


# ---------------------------------------------------------------------------
# Whole-file resolution
# ---------------------------------------------------------------------------


class TestResolve:
    def test_scenario_partial_preferred(self, resolver, tmp_path):
        _touch(tmp_path, "b.scss", "_b.scss")
        asset = _asset(tmp_path, "@import 'b';\n", name="a.scss")
        assert resolver.resolve(asset) == frozenset({tmp_path / "_b.scss"})

    def test_duplicates_collapse(self, resolver, tmp_path):
        _touch(tmp_path, "_vars.scss")
        asset = _asset(tmp_path, "@import 'vars';\n@import 'vars';\n@import '_vars.scss';\n")
        assert resolver.resolve(asset) == frozenset({tmp_path / "_vars.scss"})

    def test_no_imports_gives_empty_set(self, resolver, tmp_path):
        asset = _asset(tmp_path, "body { margin: 0; }\n")
        assert resolver.resolve(asset) == frozenset()

    def test_one_missing_import_fails_whole_file(self, resolver, tmp_path):
        _touch(tmp_path, "_ok.scss")
        asset = _asset(tmp_path, "@import 'ok';\n@import 'missing';\n")
        with pytest.raises(UnresolvedImportError) as excinfo:
            resolver.resolve(asset)
        assert excinfo.value.name == "missing"

    def test_unquoted_import_fails(self, resolver, tmp_path):
        asset = _asset(tmp_path, '@import "colors";\n')
        with pytest.raises(UnresolvedImportError):
            resolver.resolve(asset)

    def test_idempotent(self, resolver, tmp_path):
        _touch(tmp_path, "_a.scss", "b.sass", "c/_d.scss")
        asset = _asset(tmp_path, "@import 'a';\n@import 'b';\n@import 'c/d';\n")
        first = resolver.resolve(asset)
        assert resolver.resolve(asset) == first
        assert len(first) == 3

    def test_resolves_relative_to_source_directory(self, resolver, tmp_path):
        nested = tmp_path / "styles"
        nested.mkdir()
        _touch(tmp_path, "_outside.scss")
        _touch(nested, "_inside.scss")
        asset = _asset(nested, "@import 'inside';\n")
        assert resolver.resolve(asset) == frozenset({nested / "_inside.scss"})

        outside = _asset(nested, "@import 'outside';\n", name="other.scss")
        with pytest.raises(UnresolvedImportError):
            resolver.resolve(outside)
