import pytest

from astlisp.errors import BadInput
from astlisp.reader.decoder import decode_node, decode_program
from astlisp.types.ast_node import ListNode, NumberNode, SymbolNode, to_json


def test_decode_program():
    src = '[{"type":"list","value":[{"type":"symbol","value":"+"},{"type":"number","value":1},{"type":"number","value":2.5}]}]'
    assert decode_program(src) == [
        ListNode((SymbolNode("+"), NumberNode(1.0), NumberNode(2.5)))
    ]


def test_decode_accepts_bytes_and_empty_program():
    assert decode_program(b'[{"type":"number","value":3}]') == [NumberNode(3.0)]
    assert decode_program("[]") == []


def test_integers_become_floats():
    node = decode_node({"type": "number", "value": 7})
    assert node == NumberNode(7.0)
    assert isinstance(node.value, float)


def test_key_order_and_extra_keys_do_not_matter():
    assert decode_node({"value": "pi", "type": "symbol", "comment": "x"}) == SymbolNode("pi")


@pytest.mark.parametrize(
    "src",
    [
        "",
        "not json",
        "[1, 2",
        '{"type":"number","value":1}',
        "42",
        "[42]",
        '[{"value":1}]',
        '[{"type":"number"}]',
        '[{"type":"bogus","value":1}]',
        '[{"type":"NUMBER","value":1}]',
        '[{"type":"number","value":"1"}]',
        '[{"type":"number","value":true}]',
        '[{"type":"number","value":null}]',
        '[{"type":"number","value":NaN}]',
        '[{"type":"number","value":Infinity}]',
        '[{"type":"number","value":1e999999}]',
        '[{"type":"symbol","value":3}]',
        '[{"type":"list","value":{"type":"number","value":1}}]',
        '[{"type":"list","value":[1]}]',
        '[{"type":1,"value":1}]',
    ],
)
def test_bad_input(src):
    with pytest.raises(BadInput):
        decode_program(src)


def test_huge_integer_literal_is_bad_input():
    with pytest.raises(BadInput):
        decode_program('[{"type":"number","value":' + "9" * 400 + "}]")


def test_invalid_utf8_is_bad_input():
    with pytest.raises(BadInput):
        decode_program(b"[\xff]")


def test_error_path_points_at_the_offending_node():
    src = '[{"type":"number","value":1},{"type":"list","value":[{"type":"symbol","value":"+"},{"type":"bogus","value":0}]}]'
    with pytest.raises(BadInput) as exc:
        decode_program(src)
    assert exc.value.path == "$[1].value[1]"
    assert "bogus" in str(exc.value)


def test_syntax_error_position():
    with pytest.raises(BadInput) as exc:
        decode_program('[\n  {"type": "number", "value": 1},\n  oops\n]')
    assert exc.value.lineno == 3
    assert exc.value.colno == 3
    assert exc.value.describe().startswith("BadInput: ")


def test_to_json_inverts_decode_node():
    wire = {
        "type": "list",
        "value": [
            {"type": "symbol", "value": "if"},
            {"type": "symbol", "value": "#t"},
            {"type": "number", "value": 1.0},
        ],
    }
    assert to_json(decode_node(wire)) == wire
    with pytest.raises(TypeError):
        to_json("pi")


def test_list_nodes_are_immutable():
    node = ListNode([NumberNode(1.0)])
    assert node.elements == (NumberNode(1.0),)
    assert len(node) == 1
    assert hash(node) == hash(ListNode((NumberNode(1.0),)))


def test_deep_nesting_is_bad_input():
    src = "[" + '{"type":"list","value":[' * 3000 + "]}" * 3000 + "]"
    with pytest.raises(BadInput) as exc:
        decode_program(src)
    assert "nested too deeply" in str(exc.value)
