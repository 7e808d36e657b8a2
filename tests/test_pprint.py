from astlisp.debug_utils.pprint import (
    COLOR_NUMBER,
    COLOR_SPECIAL_FORM,
    COLOR_SYMBOL,
    DEFAULT_OPTIONS,
    load_options_from_json,
    plain_options,
    pprint_node,
)
from astlisp.types.ast_node import ListNode, NumberNode, SymbolNode


def L(*elements):
    return ListNode(elements)


def test_plain_single_line():
    node = L(SymbolNode("if"), SymbolNode("#t"), NumberNode(1.0), NumberNode(2.5))
    assert pprint_node(node, options=plain_options()) == "(if #t 1 2.5)"
    assert pprint_node(L(), options=plain_options()) == "()"


def test_long_lists_are_split_across_lines():
    node = L(SymbolNode("+"), *[NumberNode(float(i)) for i in range(6)])
    text = pprint_node(node, options=plain_options(max_line_length=10))
    assert text.splitlines() == ["(+", "  0", "  1", "  2", "  3", "  4", "  5)"]


def test_depth_limit():
    node = L(L(L(NumberNode(1.0))))
    assert pprint_node(node, options=plain_options(max_depth=2)) == "((…))"


def test_colours():
    node = L(SymbolNode("if"), SymbolNode("pi"), NumberNode(1.0))
    text = pprint_node(node, options=DEFAULT_OPTIONS)
    assert COLOR_SPECIAL_FORM + "if" in text
    assert COLOR_SYMBOL + "pi" in text
    assert COLOR_NUMBER + "1" in text


def test_legend():
    text = pprint_node(NumberNode(1.0), options=plain_options(display_legend=True))
    assert text.startswith("Color Key: ")
    assert text.endswith("\n1")


def test_load_options_from_json():
    opts = load_options_from_json('{"max_line_length": 40}')
    assert opts["max_line_length"] == 40
    assert opts["max_depth"] == DEFAULT_OPTIONS["max_depth"]
    assert load_options_from_json("not json") == DEFAULT_OPTIONS
    assert load_options_from_json("[1]") == DEFAULT_OPTIONS


def test_load_options_from_json_over_a_base():
    opts = load_options_from_json('{"max_depth": 2}', base=plain_options())
    assert opts["max_depth"] == 2
    assert opts["color_symbols"] is False
    assert load_options_from_json("not json", base=plain_options()) == plain_options()
