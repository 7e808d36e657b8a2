from astlisp.types.values import (
    Number,
    Boolean,
    BuiltinFunction,
    NoValue,
    NoValueType,
    Value,
    is_truthy,
)
from astlisp.types.ast_node import NumberNode, SymbolNode, ListNode, AstNode
from astlisp.types.environment import Environment
