"""
JulietScript Language Server implementation using pygls.

Re-lints a document whenever it is opened, edited or saved and publishes
the engine's diagnostics to the editor.
"""

import logging

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_SAVE,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
)
from lsprotocol.types import Diagnostic as LspDiagnostic
from pygls.lsp.server import LanguageServer

from julietscript import __version__
from julietscript.core.errors import Diagnostic, Severity
from julietscript.core.lint import lint_source

logger = logging.getLogger(__name__)

DIAGNOSTIC_SOURCE = "julietscript"

_SEVERITY_MAP = {
    Severity.ERROR: DiagnosticSeverity.Error,
    Severity.WARNING: DiagnosticSeverity.Warning,
}

# Create server instance
server = LanguageServer("julietscript-lsp", f"v{__version__}")


def to_lsp_diagnostic(diagnostic: Diagnostic) -> LspDiagnostic:
    """Convert an engine diagnostic; ranges are already zero-based UTF-16."""
    start = diagnostic.range.start
    end = diagnostic.range.end
    return LspDiagnostic(
        range=Range(
            start=Position(line=start.line, character=start.character),
            end=Position(line=end.line, character=end.character),
        ),
        message=diagnostic.message,
        severity=_SEVERITY_MAP[diagnostic.severity],
        source=DIAGNOSTIC_SOURCE,
    )


def lint_document(ls: LanguageServer, uri: str) -> None:
    """Lint the current text of a document and publish the result."""
    document = ls.workspace.get_text_document(uri)
    diagnostics = [to_lsp_diagnostic(d) for d in lint_source(document.source)]
    logger.debug("Publishing %d diagnostic(s) for %s", len(diagnostics), uri)
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, version=document.version, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Handle document open."""
    logger.info(f"Opened: {params.text_document.uri}")
    lint_document(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Handle document change."""
    lint_document(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_SAVE)
def did_save(ls: LanguageServer, params: DidSaveTextDocumentParams) -> None:
    """Handle document save."""
    logger.info(f"Saved: {params.text_document.uri}")
    lint_document(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: LanguageServer, params: DidCloseTextDocumentParams) -> None:
    """Handle document close; clear its diagnostics."""
    logger.info(f"Closed: {params.text_document.uri}")
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=params.text_document.uri, diagnostics=[])
    )


def start_server() -> None:
    """Start the JulietScript LSP server over stdio."""
    logging.basicConfig(level=logging.INFO)
    logging.getLogger("pygls").setLevel(logging.WARNING)
    logger.info("Starting JulietScript Language Server...")
    server.start_io()


if __name__ == "__main__":
    start_server()
