"""Runtime values for astlisp.

Every evaluation produces exactly one of four kinds of value: a Number, a
Boolean, a BuiltinFunction looked up from the environment, or the NoValue
singleton returned by an `if` whose false branch has no alternative. Values are
immutable and never reference one another.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Sequence, Union


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self) -> str:
        v = self.value
        if not math.isfinite(v):
            return str(v)
        # drop a superfluous fractional part when printing
        if v == math.trunc(v):
            return str(int(v))
        return repr(v)


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


@dataclass(frozen=True)
class BuiltinFunction:
    """A native operation bound in the global environment.

    Identity is the operation's name; the implementation is excluded from
    equality and repr so two references to the same builtin compare equal.
    """

    name: str
    impl: Callable[[Sequence["Value"]], "Value"] = field(compare=False, repr=False)

    def __call__(self, args: Sequence[Value]) -> Value:
        return self.impl(args)

    def __str__(self) -> str:
        return f"#<builtin {self.name}>"


class NoValueType:
    __slots__ = ()

    def __repr__(self):
        return "NoValue"

    def __str__(self):
        return ""

    def __eq__(self, other):
        return isinstance(other, NoValueType)

    def __hash__(self):
        return hash(NoValueType)


NoValue = NoValueType()

Value = Union[Number, Boolean, BuiltinFunction, NoValueType]

TRUE = Boolean(True)
FALSE = Boolean(False)


def is_truthy(value: Value) -> bool:
    """Only the boolean false value is falsy; 0 and NoValue are truthy."""
    return not (isinstance(value, Boolean) and not value.value)
