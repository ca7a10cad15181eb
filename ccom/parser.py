"""Recursive-descent parser for arithmetic and comparison expressions."""

from __future__ import annotations

from ccom.nodes import Node, NodeKind
from ccom.tokens import TokenStream


class Parser:
    """Builds expression trees from a token stream.

    Grammar::

        expression = equality
        equality   = relational ("==" relational | "!=" relational)*
        relational = add ("<" add | "<=" add | ">" add | ">=" add)*
        add        = mul ("+" mul | "-" mul)*
        mul        = unary ("*" unary | "/" unary)*
        unary      = ("+" | "-")? unary | primary
        primary    = "(" expression ")" | number
    """

    def __init__(self, stream: TokenStream) -> None:
        self.stream = stream

    def expression(self) -> Node:
        return self._equality()

    def _equality(self) -> Node:
        node = self._relational()
        while True:
            if self.stream.consume("=="):
                node = Node.binary(NodeKind.EQ, node, self._relational())
            elif self.stream.consume("!="):
                node = Node.binary(NodeKind.NE, node, self._relational())
            else:
                return node

    def _relational(self) -> Node:
        node = self._add()
        while True:
            if self.stream.consume("<"):
                node = Node.binary(NodeKind.LT, node, self._add())
            elif self.stream.consume("<="):
                node = Node.binary(NodeKind.LE, node, self._add())
            elif self.stream.consume(">"):
                node = Node.binary(NodeKind.LT, self._add(), node)
            elif self.stream.consume(">="):
                node = Node.binary(NodeKind.LE, self._add(), node)
            else:
                return node

    def _add(self) -> Node:
        node = self._mul()
        while True:
            if self.stream.consume("+"):
                node = Node.binary(NodeKind.ADD, node, self._mul())
            elif self.stream.consume("-"):
                node = Node.binary(NodeKind.SUB, node, self._mul())
            else:
                return node

    def _mul(self) -> Node:
        node = self._unary()
        while True:
            if self.stream.consume("*"):
                node = Node.binary(NodeKind.MUL, node, self._unary())
            elif self.stream.consume("/"):
                node = Node.binary(NodeKind.DIV, node, self._unary())
            else:
                return node

    def _unary(self) -> Node:
        if self.stream.consume("+"):
            return self._unary()
        if self.stream.consume("-"):
            return Node.binary(NodeKind.SUB, Node.number(0), self._unary())
        return self._primary()

    def _primary(self) -> Node:
        if self.stream.consume("("):
            node = self.expression()
            self.stream.expect(")")
            return node
        return Node.number(self.stream.expect_number())


def parse_expression(stream: TokenStream) -> Node:
    """Parse one expression from ``stream``."""
    return Parser(stream).expression()