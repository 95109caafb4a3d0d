"""Tests for CSS rendering, class extraction and error promotion."""

import pytest

from zephyr import GenerationError, extract_classes, raise_for_errors, render_css
from zephyr.model import Declaration, Diagnostic, DiagnosticKind, Keyframes, Rule, Stylesheet
from zephyr.scanner import extract_from_sources


class TestRenderCss:
    def test_plain_and_media(self, engine):
        sheet = engine.generate(["p-4", "md:p-2", "md:m-1"])
        assert render_css(sheet) == (
            ".p-4 {\n"
            "  padding: 1rem;\n"
            "}\n"
            "\n"
            "@media (min-width: 768px) {\n"
            "  .md\\:m-1 {\n"
            "    margin: 0.25rem;\n"
            "  }\n"
            "  .md\\:p-2 {\n"
            "    padding: 0.5rem;\n"
            "  }\n"
            "}\n"
        )

    def test_minified(self, engine):
        sheet = engine.generate(["!p-4", "md:p-2"])
        assert render_css(sheet, minify=True) == (
            ".\\!p-4{padding:1rem!important}"
            "@media (min-width: 768px){.md\\:p-2{padding:0.5rem}}"
        )

    def test_multiple_declarations(self):
        rule = Rule(
            selector=".px-4",
            media=None,
            properties=(Declaration("padding-left", "1rem"), Declaration("padding-right", "1rem")),
            order_key=(0, 0, 0),
        )
        assert render_css(Stylesheet(rules=(rule,)), minify=True) == (
            ".px-4{padding-left:1rem;padding-right:1rem}"
        )

    def test_keyframes_come_first(self, engine):
        sheet = engine.generate(["animate-spin"])
        assert render_css(sheet) == (
            "@keyframes spin {\n"
            "  to {\n"
            "    transform: rotate(360deg);\n"
            "  }\n"
            "}\n"
            "\n"
            ".animate-spin {\n"
            "  animation: spin 1s linear infinite;\n"
            "}\n"
        )

    def test_keyframes_minified(self):
        block = Keyframes("ping", (("75%, 100%", "transform: scale(2); opacity: 0"),))
        assert render_css(Stylesheet(keyframes=(block,)), minify=True) == (
            "@keyframes ping{75%,100%{transform:scale(2);opacity:0}}"
        )

    def test_keyframes_in_json(self, engine):
        payload = engine.generate(["animate-pulse"]).to_dict()
        assert payload["keyframes"] == [{"name": "pulse", "steps": {"50%": "opacity: 0.5"}}]

    def test_empty(self):
        assert render_css(Stylesheet()) == ""
        assert render_css(Stylesheet(), minify=True) == ""


class TestExtractClasses:
    def test_whitespace_split(self):
        assert extract_classes("p-4  md:w-1/2\n\thover:bg-blue-500") == [
            "p-4",
            "md:w-1/2",
            "hover:bg-blue-500",
        ]

    def test_first_seen_order_without_duplicates(self):
        assert extract_classes("b a b c a") == ["b", "a", "c"]

    def test_sources(self):
        assert extract_from_sources(["p-4 m-2", "m-2 flex"]) == ["p-4", "m-2", "flex"]

    def test_empty(self):
        assert extract_classes("   ") == []


class TestRaiseForErrors:
    def test_errors_raise(self, engine):
        sheet = engine.generate(["w-[", "p-4"])
        with pytest.raises(GenerationError) as exc_info:
            raise_for_errors(sheet)
        assert [d.kind for d in exc_info.value.diagnostics] == [DiagnosticKind.MALFORMED_CLASS]
        assert "1 error(s)" in str(exc_info.value)

    def test_warnings_returned(self, engine):
        sheet = engine.generate(["nope", "p-4"])
        [warning] = raise_for_errors(sheet)
        assert warning.kind is DiagnosticKind.UNKNOWN_CLASS

    def test_clean(self):
        assert raise_for_errors(Stylesheet()) == []

    def test_diagnostic_str(self):
        diag = Diagnostic.of(DiagnosticKind.UNKNOWN_CLASS, "No utility", token="x-1")
        assert str(diag) == "WARNING [class=x-1]: No utility"
