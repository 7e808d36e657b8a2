"""Application engine for astlisp.

Applies an evaluated operator to evaluated operands. Only BuiltinFunction
values can be applied; anything else in operator position is reported as
NotAFunction instead of crashing.
"""

from __future__ import annotations

from typing import Sequence

from astlisp.errors import NotAFunction
from astlisp.types.values import BuiltinFunction, Value


def apply(head: Value, args: Sequence[Value]) -> Value:
    """Apply `head` to `args`, raising NotAFunction for non-callable values."""
    if isinstance(head, BuiltinFunction):
        return head(list(args))
    raise NotAFunction(head)
