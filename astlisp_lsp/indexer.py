from __future__ import annotations

"""
Lightweight indexer for astlisp JSON documents without decoding or evaluating.

We scan the raw text for symbol nodes, i.e. objects of the shape
{"type": "symbol", "value": "<name>"} (in either key order), and record each
name with its 0-based line/column. The scanner is regex based so it keeps
working on partial buffers that do not parse as JSON yet. It also tracks
bracket balance and unterminated strings for early warnings.
"""

from dataclasses import dataclass, field
from typing import List, Tuple
import json
import re

_STRING = r'"(?:\\.|[^"\\])*"'

# {"type": "symbol", "value": "x"}
SYMBOL_TYPE_FIRST = re.compile(
    r'"type"\s*:\s*"symbol"\s*,\s*"value"\s*:\s*(?P<name>' + _STRING + r')'
)
# {"value": "x", "type": "symbol"}
SYMBOL_VALUE_FIRST = re.compile(
    r'"value"\s*:\s*(?P<name>' + _STRING + r')\s*,\s*"type"\s*:\s*"symbol"'
)
STRING_LITERAL = re.compile(_STRING)


@dataclass
class SymbolRef:
    name: str
    line: int
    col: int  # column of the opening quote of the name


@dataclass
class DocumentIndex:
    symbols: List[SymbolRef] = field(default_factory=list)
    bracket_balance: int = 0
    brace_balance: int = 0
    has_unmatched_quote: bool = False


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _unquote(literal: str) -> str:
    try:
        return json.loads(literal)
    except json.JSONDecodeError:
        return literal[1:-1]


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()

    refs = []
    for pattern in (SYMBOL_TYPE_FIRST, SYMBOL_VALUE_FIRST):
        for m in pattern.finditer(text):
            line, col = _position_from_offset(text, m.start("name"))
            refs.append(SymbolRef(name=_unquote(m.group("name")), line=line, col=col))
    idx.symbols = sorted(refs, key=lambda r: (r.line, r.col))

    # bracket balance and unterminated strings, ignoring brackets inside strings
    in_string = False
    esc = False
    for ch in text:
        if in_string:
            if esc:
                esc = False
            elif ch == '\\':
                esc = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == '[':
            idx.bracket_balance += 1
        elif ch == ']':
            idx.bracket_balance -= 1
        elif ch == '{':
            idx.brace_balance += 1
        elif ch == '}':
            idx.brace_balance -= 1
    idx.has_unmatched_quote = in_string

    return idx


def string_at(text: str, line: int, character: int) -> str | None:
    """Return the decoded JSON string literal under (line, character), if any."""
    lines = text.splitlines(True)
    if line >= len(lines):
        return None
    for m in STRING_LITERAL.finditer(lines[line]):
        if m.start() <= character <= m.end():
            return _unquote(m.group(0))
    return None
