"""Abstract syntax tree nodes for expressions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class NodeKind(enum.Enum):
    """Kinds of expression nodes."""

    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    EQ = enum.auto()
    NE = enum.auto()
    LT = enum.auto()
    LE = enum.auto()
    NUMBER = enum.auto()


@dataclass(frozen=True)
class Node:
    """An expression node: a binary operation or an integer literal."""

    kind: NodeKind
    lhs: Optional[Node] = None
    rhs: Optional[Node] = None
    value: int = 0

    @staticmethod
    def binary(kind: NodeKind, lhs: Node, rhs: Node) -> Node:
        """Build a binary operation node."""
        if kind is NodeKind.NUMBER:
            raise ValueError("a number node has no operands")
        return Node(kind, lhs, rhs)

    @staticmethod
    def number(value: int) -> Node:
        """Build an integer literal node."""
        return Node(NodeKind.NUMBER, value=value)

    def is_number(self) -> bool:
        return self.kind is NodeKind.NUMBER