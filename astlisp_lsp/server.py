from __future__ import annotations

"""
A minimal pygls-based Language Server for astlisp JSON programs.

Features:
- Text synchronization and document store
- Diagnostics: JSON syntax errors, malformed nodes, unknown symbols,
  unbalanced brackets, and the first evaluation error of the document
- Hover: descriptions of global constants, builtins and special forms
- Completion: every global name plus the special forms

Evaluation is safe to run on every change: the global environment is
immutable and evaluating a node has no side effects.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TextDocumentSyncKind,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    Hover,
    MarkupContent,
    MarkupKind,
    CompletionList,
    CompletionParams,
    HoverParams,
)

from astlisp import __version__
from astlisp.config import get_log_level
from astlisp.interpreter import Interpreter
from astlisp_lsp.diagnostics import collect_diagnostics, completion_items, hover_text
from astlisp_lsp.indexer import build_index, string_at, DocumentIndex

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class AstLispLanguageServer(LanguageServer):
    CMD_NAME = "astlisp-ls"

    def __init__(self):
        super().__init__(
            self.CMD_NAME,
            __version__,
            text_document_sync_kind=TextDocumentSyncKind.Full,
        )
        self.documents: Dict[str, DocumentState] = {}
        self.interp = Interpreter()


ls = AstLispLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    text = params.text_document.text or ""
    ls.documents[uri] = DocumentState(text=text, index=build_index(text))
    _publish_diagnostics(uri)


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        # full sync: the last change carries the whole document
        text = params.content_changes[-1].text
    else:
        text = ls.documents.get(uri, DocumentState("", build_index(""))).text
    ls.documents[uri] = DocumentState(text=text, index=build_index(text))
    _publish_diagnostics(uri)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    if uri in ls.documents:
        del ls.documents[uri]
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _publish_diagnostics(uri: str):
    state = ls.documents[uri]
    diags = collect_diagnostics(state.text, state.index, ls.interp)
    logger.debug("Publishing %d diagnostic(s) for %s", len(diags), uri)
    ls.publish_diagnostics(uri, diags)


# --- Hover ---
@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    uri = params.text_document.uri
    state = ls.documents.get(uri)
    if not state:
        return None

    word = string_at(state.text, params.position.line, params.position.character)
    if not word:
        return None

    contents = hover_text(word, ls.interp.env)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature("textDocument/completion")
def on_completion(params: CompletionParams) -> CompletionList:
    return CompletionList(is_incomplete=False, items=completion_items(ls.interp.env))


def main():
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
