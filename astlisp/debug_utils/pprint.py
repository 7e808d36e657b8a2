from __future__ import annotations

import json

from astlisp.evaluation.special_forms import SPECIAL_FORMS
from astlisp.types.ast_node import AstNode, ListNode, NumberNode, SymbolNode
from astlisp.types.values import Number

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_NUMBER = "\033[92m"
COLOR_SPECIAL_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 8,
    "display_legend": False,
    "color_symbols": True,
    "color_numbers": True,
    "color_special_forms": True,
}


# ----------------- Colorize utility -----------------
def colorize(node: AstNode, options: dict = DEFAULT_OPTIONS) -> str:
    if isinstance(node, SymbolNode):
        name = node.name
        if name in SPECIAL_FORMS and options.get("color_special_forms", True):
            return f"{COLOR_SPECIAL_FORM}{name}{RESET}"
        if options.get("color_symbols", True):
            return f"{COLOR_SYMBOL}{name}{RESET}"
        return name
    if isinstance(node, NumberNode):
        # numbers print the same way evaluated Numbers do
        text = str(Number(node.value))
        if options.get("color_numbers", True):
            return f"{COLOR_NUMBER}{text}{RESET}"
        return text
    return str(node)


# ----------------- Pretty printer -----------------
def pprint_node(
    node: AstNode,
    indent: int = 0,
    options: dict = DEFAULT_OPTIONS,
    _current_depth: int = 0,
) -> str:
    pad = "  " * indent
    legend_str = ""
    if options.get("display_legend", True) and indent == 0:
        legend_items = [
            f"{COLOR_SYMBOL}Symbol{RESET}",
            f"{COLOR_NUMBER}Number{RESET}",
            f"{COLOR_SPECIAL_FORM}Special Form{RESET}",
        ]
        legend_str = "Color Key: " + " | ".join(legend_items) + "\n"

    if _current_depth >= options.get("max_depth", 8):
        return legend_str + "…"

    if not isinstance(node, ListNode):
        return legend_str + colorize(node, options)

    if not node.elements:
        return legend_str + "()"

    parts = [
        pprint_node(e, indent + 1, {**options, "display_legend": False}, _current_depth + 1)
        for e in node.elements
    ]

    single_line = "(" + " ".join(parts) + ")"
    if len(single_line) + indent * 2 <= options.get("max_line_length", 80):
        return legend_str + single_line

    aligned_lines = ["(" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append(pad + "  " + part)
    aligned_lines[-1] += ")"
    return legend_str + "\n".join(aligned_lines)


def plain_options(**overrides) -> dict:
    """Options with every colour switched off, for logs and tests."""
    opts = {**DEFAULT_OPTIONS, "color_symbols": False, "color_numbers": False, "color_special_forms": False}
    opts.update(overrides)
    return opts


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str, base: dict | None = None) -> dict:
    base = DEFAULT_OPTIONS if base is None else base
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return base
    if not isinstance(user_opts, dict):
        return base
    return {**base, **user_opts}
