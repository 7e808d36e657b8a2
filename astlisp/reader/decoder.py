"""Wire-format decoder for astlisp programs.

A program is a JSON array of nodes, each node an object of the form

    {"type": "number" | "symbol" | "list", "value": <float> | <string> | [<node>, ...]}

Decoding validates every node completely before anything is evaluated, so a
malformed node anywhere in the input fails the whole program with BadInput and
the evaluator only ever sees well-formed NumberNode/SymbolNode/ListNode trees.
"""

from __future__ import annotations

import json
import math
import logging
from typing import Any

from astlisp.errors import BadInput
from astlisp.types.ast_node import AstNode, ListNode, NumberNode, SymbolNode

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise BadInput(f"Non-standard JSON constant {name} is not a number literal")


def load_json(data: str | bytes) -> Any:
    """Parse raw JSON text, converting every failure into BadInput."""
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as ex:
            raise BadInput(f"Input is not valid UTF-8: {ex}") from ex
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except json.JSONDecodeError as ex:
        raise BadInput(f"Invalid JSON: {ex.msg}", lineno=ex.lineno, colno=ex.colno) from ex
    except RecursionError:
        raise BadInput("Input nested too deeply") from None


def decode_node(obj: Any, path: str = "$") -> AstNode:
    """Decode one wire-format node, validating its shape against its type."""
    if not isinstance(obj, dict):
        raise BadInput(f"{path}: expected a node object, got {type(obj).__name__}", path)
    if "type" not in obj:
        raise BadInput(f"{path}: node has no 'type'", path)
    if "value" not in obj:
        raise BadInput(f"{path}: node has no 'value'", path)

    kind = obj["type"]
    value = obj["value"]
    match kind:
        case "number":
            # bool is an int subclass in Python but true/false are not numbers
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise BadInput(f"{path}.value: number node needs a JSON number", path)
            try:
                number = float(value)
            except OverflowError:
                number = math.inf
            if not math.isfinite(number):
                raise BadInput(f"{path}.value: number literal does not fit a finite float", path)
            return NumberNode(number)
        case "symbol":
            if not isinstance(value, str):
                raise BadInput(f"{path}.value: symbol node needs a JSON string", path)
            return SymbolNode(value)
        case "list":
            if not isinstance(value, list):
                raise BadInput(f"{path}.value: list node needs a JSON array", path)
            return ListNode(tuple(decode_node(e, f"{path}.value[{i}]") for i, e in enumerate(value)))
    raise BadInput(f"{path}: unrecognised node type {kind!r}", path)


def decode_program(data: str | bytes) -> list[AstNode]:
    """Decode a whole program: a JSON array of nodes."""
    doc = load_json(data)
    if not isinstance(doc, list):
        raise BadInput(f"$: expected a top-level array, got {type(doc).__name__}")
    try:
        nodes = [decode_node(obj, f"$[{i}]") for i, obj in enumerate(doc)]
    except RecursionError:
        raise BadInput("Input nested too deeply") from None
    logger.debug("Decoded %d top-level node(s)", len(nodes))
    return nodes
