"""Editor-facing analysis of astlisp documents.

These helpers build lsprotocol objects from document text but do not touch
the pygls server, so they can be used and tested without a running client.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
)

from astlisp.builtin.env_builtin import DESCRIPTIONS
from astlisp.errors import AstLispError, BadInput
from astlisp.evaluation.special_forms import SPECIAL_FORMS
from astlisp.interpreter import Interpreter
from astlisp.reader.decoder import decode_program
from astlisp.types.environment import Environment
from astlisp.types.values import BuiltinFunction
from astlisp_lsp.indexer import DocumentIndex

SOURCE = "astlisp-ls"

SPECIAL_FORM_DESCRIPTIONS: Dict[str, str] = {
    "if": "(if predicate consequent [alternative]) - only #f is false",
}


def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def _diagnostic(rng: Range, message: str, severity: DiagnosticSeverity) -> Diagnostic:
    return Diagnostic(range=rng, message=message, severity=severity, source=SOURCE)


def collect_diagnostics(text: str, idx: DocumentIndex, interp: Interpreter) -> List[Diagnostic]:
    """Static checks from the index, then decode, then evaluate."""
    diags: List[Diagnostic] = []

    if idx.bracket_balance != 0 or idx.brace_balance != 0:
        diags.append(_diagnostic(_mk_range(0, 0), "Unbalanced brackets detected", DiagnosticSeverity.Warning))
    if idx.has_unmatched_quote:
        diags.append(_diagnostic(_mk_range(0, 0), "Unterminated string detected", DiagnosticSeverity.Warning))

    for ref in idx.symbols:
        if ref.name not in interp.env and ref.name not in SPECIAL_FORMS:
            diags.append(
                _diagnostic(
                    _mk_range(ref.line, ref.col, len(ref.name) + 2),
                    f"Unknown symbol '{ref.name}'",
                    DiagnosticSeverity.Warning,
                )
            )

    if not text.strip():
        return diags

    try:
        nodes = decode_program(text)
    except BadInput as ex:
        if ex.lineno is not None and ex.colno is not None:
            rng = _mk_range(ex.lineno - 1, ex.colno - 1)
        else:
            rng = _mk_range(0, 0)
        diags.append(_diagnostic(rng, ex.describe(), DiagnosticSeverity.Error))
        return diags
    except RecursionError:
        diags.append(_diagnostic(_mk_range(0, 0), "Document is nested too deeply", DiagnosticSeverity.Error))
        return diags

    # the batch stops at the first failing node, so only one error is reported
    try:
        for _ in interp.run(nodes):
            pass
    except AstLispError as ex:
        diags.append(_diagnostic(_mk_range(0, 0), ex.describe(), DiagnosticSeverity.Error))
    except RecursionError:
        diags.append(_diagnostic(_mk_range(0, 0), "Document is nested too deeply", DiagnosticSeverity.Error))
    return diags


def hover_text(name: str, env: Environment) -> Optional[str]:
    if name in DESCRIPTIONS and name in env:
        return DESCRIPTIONS[name]
    if name in SPECIAL_FORM_DESCRIPTIONS:
        return SPECIAL_FORM_DESCRIPTIONS[name]
    if name in env:
        return f"{name} = {env.lookup(name)}"
    return None


def completion_items(env: Environment) -> List[CompletionItem]:
    items: List[CompletionItem] = []
    for name in env:
        value = env.lookup(name)
        kind = CompletionItemKind.Function if isinstance(value, BuiltinFunction) else CompletionItemKind.Constant
        items.append(CompletionItem(label=name, kind=kind, detail=DESCRIPTIONS.get(name)))
    for name in SPECIAL_FORMS:
        items.append(
            CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=SPECIAL_FORM_DESCRIPTIONS.get(name))
        )
    return items
