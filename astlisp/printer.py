from __future__ import annotations

from typing import Iterable, TextIO

from astlisp.types.values import Value


def to_display(value: Value) -> str:
    """Printable form of a value: 3 not 3.0, #t/#f, empty for NoValue."""
    return str(value)


def print_values(values: Iterable[Value], out: TextIO) -> int:
    """Write one line per value as each is produced. Returns the line count."""
    count = 0
    for value in values:
        out.write(to_display(value))
        out.write("\n")
        out.flush()
        count += 1
    return count
