"""Tests for the yall LSP server."""

from __future__ import annotations

from lsprotocol import types as lsp

from yall.errors import Severity
from yall.lsp import _SEVERITY_MAP, DocumentState, _analyze, _state, span_to_range
from yall.source import Span


class TestSpanConversion:
    def test_span_to_range_basic(self):
        r = span_to_range(Span("test.yall", 1, 1, 1, 5))
        assert r.start.line == 0
        assert r.start.character == 0
        assert r.end.line == 0
        assert r.end.character == 5

    def test_span_to_range_single_char(self):
        r = span_to_range(Span("test.yall", 10, 5, 10, 5))
        assert r.start.line == 9
        assert r.start.character == 4
        assert r.end.character == 5


class TestSeverityMap:
    def test_error_maps(self):
        assert _SEVERITY_MAP[Severity.ERROR] == lsp.DiagnosticSeverity.Error


class TestAnalyze:
    def test_valid_source(self):
        ds = _analyze("file:///ok.yall", "(def x 1)\n; done\n")
        assert ds.program is not None
        assert len(ds.program) == 2
        assert ds.diagnostics == []
        _state.pop("file:///ok.yall", None)

    def test_syntax_error(self):
        ds = _analyze("file:///bad.yall", "(a)\n  (b]")
        assert ds.program is None
        assert len(ds.diagnostics) == 1
        diag = ds.diagnostics[0]
        assert diag.code == "E102"
        assert diag.severity == lsp.DiagnosticSeverity.Error
        assert diag.source == "yall"
        assert diag.range.start == lsp.Position(line=1, character=4)
        assert "[E102]" in diag.message
        _state.pop("file:///bad.yall", None)

    def test_caches_state(self):
        uri = "file:///cache_test.yall"
        ds = _analyze(uri, "{}")
        assert _state.get(uri) is ds
        _state.pop(uri, None)


class TestDocumentState:
    def test_default_state(self):
        ds = DocumentState()
        assert ds.source == ""
        assert ds.program is None
        assert ds.diagnostics == []
