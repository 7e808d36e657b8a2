"""Runtime environment for astlisp.

The Environment maps symbol names to evaluated values. It is built once from a
fixed table and never mutated afterwards: there are no nested scopes and no
binding forms, so a single frame is all the language needs. Because nothing
can write to it, one Environment may be shared freely between threads.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Iterator, Mapping

from astlisp.errors import SymbolNotFound
from astlisp.types.values import Value


class Environment:
    """Read-only mapping from case-sensitive symbol names to values."""

    __slots__ = ("_vars",)

    def __init__(self, bindings: Mapping[str, Value] | None = None):
        for name in bindings or {}:
            if not isinstance(name, str):
                raise TypeError(f"Cannot bind {name!r}: symbol names must be strings")
        # copy first so later changes to `bindings` cannot leak in
        object.__setattr__(self, "_vars", MappingProxyType(dict(bindings or {})))

    def __setattr__(self, key, value):
        raise AttributeError("Environment is immutable")

    def lookup(self, name: str) -> Value:
        """Return the value bound to `name`.

        Raises SymbolNotFound if there is no binding; there is no fallback.
        """
        try:
            return self._vars[name]
        except KeyError:
            raise SymbolNotFound(name) from None

    @property
    def vars(self) -> Mapping[str, Value]:
        return self._vars

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Environment) and dict(self._vars) == dict(other._vars)

    __hash__ = None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self._vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
