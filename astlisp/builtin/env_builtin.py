"""Built-in functions for the astlisp global environment.

This module defines the native arithmetic and comparison operations and the
fixed table of constants and builtins the global environment is built from.
Every builtin takes the already-evaluated argument values and checks their
kinds before computing anything.
"""
from __future__ import annotations

from typing import Sequence

from astlisp.errors import UnexpectedArgumentType, IncorrectNumberOfArguments
from astlisp.types.environment import Environment
from astlisp.types.values import (
    Boolean,
    BuiltinFunction,
    Number,
    Value,
    TRUE,
    FALSE,
)


def _number(value: Value) -> float:
    if not isinstance(value, Number):
        raise UnexpectedArgumentType(value)
    return value.value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[Value]) -> Value:
    """Return the sum of all arguments; (+) is 0."""
    total = 0.0
    for arg in args:
        total += _number(arg)
    return Number(total)


def sub(args: Sequence[Value]) -> Value:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise IncorrectNumberOfArguments(args)
    result = _number(args[0])
    if len(args) == 1:
        return Number(-result)
    for arg in args[1:]:
        result -= _number(arg)
    return Number(result)


# -------------------------------
# Comparison
# -------------------------------
def _check_numbers(args: Sequence[Value]) -> list[float]:
    # the whole argument list is type-checked before any ordering is looked at
    return [_number(arg) for arg in args]


def lt(args: Sequence[Value]) -> Boolean:
    """#t if the arguments are strictly increasing (trivially so for 0 or 1 args)."""
    numbers = _check_numbers(args)
    for a, b in zip(numbers, numbers[1:]):
        if not a < b:
            return FALSE
    return TRUE


def gt(args: Sequence[Value]) -> Boolean:
    """#t if the arguments are strictly decreasing (trivially so for 0 or 1 args)."""
    numbers = _check_numbers(args)
    for a, b in zip(numbers, numbers[1:]):
        if not a > b:
            return FALSE
    return TRUE


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, BuiltinFunction] = {
    "+": BuiltinFunction("+", add),
    "-": BuiltinFunction("-", sub),
    "<": BuiltinFunction("<", lt),
    ">": BuiltinFunction(">", gt),
}

CONSTANTS: dict[str, Value] = {
    "pi": Number(3.14159),
    "#t": TRUE,
    "#f": FALSE,
}

# Short descriptions used by the language server for hover and completion
DESCRIPTIONS: dict[str, str] = {
    "pi": "pi - the constant 3.14159",
    "#t": "#t - boolean true",
    "#f": "#f - boolean false (the only falsy value)",
    "+": "(+ number...) - sum of the arguments, 0 when empty",
    "-": "(- number number...) - negation with one argument, else first minus the rest",
    "<": "(< number...) - #t if strictly increasing",
    ">": "(> number...) - #t if strictly decreasing",
}


def global_bindings() -> dict[str, Value]:
    """Return a fresh copy of the global binding table."""
    table: dict[str, Value] = dict(CONSTANTS)
    table.update(BUILTINS)
    return table


def make_global_env() -> Environment:
    """Build the immutable global environment."""
    return Environment(global_bindings())
