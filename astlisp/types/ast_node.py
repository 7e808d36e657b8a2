from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class NumberNode:
    value: float


@dataclass(frozen=True)
class SymbolNode:
    name: str


@dataclass(frozen=True)
class ListNode:
    elements: tuple[AstNode, ...] = ()

    def __post_init__(self):
        # accept any sequence but store a tuple so the node stays immutable
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))

    def __len__(self) -> int:
        return len(self.elements)


AstNode = Union[NumberNode, SymbolNode, ListNode]


def to_json(node: AstNode) -> dict[str, Any]:
    """Convert a node back into its wire-format dictionary."""
    if isinstance(node, NumberNode):
        return {"type": "number", "value": node.value}
    if isinstance(node, SymbolNode):
        return {"type": "symbol", "value": node.name}
    if isinstance(node, ListNode):
        return {"type": "list", "value": [to_json(e) for e in node.elements]}
    raise TypeError(f"Not an AST node: {node!r}")
