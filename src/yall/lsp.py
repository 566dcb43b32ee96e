"""yall language server: pygls-based LSP publishing parse diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

from yall import __version__
from yall.errors import Diagnostic, ParseError, Severity
from yall.nodes import Program
from yall.parser import parse_program
from yall.source import Span

_SEVERITY_MAP = {
    Severity.ERROR: lsp.DiagnosticSeverity.Error,
}


def span_to_range(span: Span) -> lsp.Range:
    """Convert a 1-indexed Span to a 0-indexed LSP Range."""
    return lsp.Range(
        start=lsp.Position(line=span.start_line - 1, character=span.start_col - 1),
        end=lsp.Position(line=span.end_line - 1, character=span.end_col),
    )


@dataclass
class DocumentState:
    """Cached parse results for a single open document."""

    source: str = ""
    program: Program | None = None
    diagnostics: list[lsp.Diagnostic] = field(default_factory=list)


server = LanguageServer(
    "yall-lsp", __version__,
    text_document_sync_kind=lsp.TextDocumentSyncKind.Full,
)
_state: dict[str, DocumentState] = {}


def _to_lsp_diag(d: Diagnostic) -> lsp.Diagnostic:
    return lsp.Diagnostic(
        range=span_to_range(d.labels[0].span),
        severity=_SEVERITY_MAP[d.severity],
        source="yall",
        code=d.code,
        message=f"[{d.code}] {d.message}",
    )


def _analyze(uri: str, source: str) -> DocumentState:
    """Parse the document, cache the result and return it."""
    ds = DocumentState(source=source)
    try:
        ds.program = parse_program(source, uri)
    except ParseError as e:
        ds.diagnostics = [_to_lsp_diag(e.to_diagnostic())]
    _state[uri] = ds
    return ds


def _publish(uri: str, ds: DocumentState) -> None:
    server.text_document_publish_diagnostics(lsp.PublishDiagnosticsParams(
        uri=uri,
        diagnostics=ds.diagnostics,
    ))


@server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
def did_open(params: lsp.DidOpenTextDocumentParams) -> None:
    uri = params.text_document.uri
    _publish(uri, _analyze(uri, params.text_document.text))


@server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: lsp.DidChangeTextDocumentParams) -> None:
    uri = params.text_document.uri
    # Full sync: the last change holds the whole document
    source = params.content_changes[-1].text if params.content_changes else ""
    _publish(uri, _analyze(uri, source))


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: lsp.DidCloseTextDocumentParams) -> None:
    _state.pop(params.text_document.uri, None)


def main() -> None:
    """Start the yall language server on stdio."""
    server.start_io()
