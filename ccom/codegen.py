"""x86-64 assembly generation for expression trees."""

from __future__ import annotations

from typing import Iterator, TextIO

from ccom.errors import CompileError
from ccom.nodes import Node, NodeKind

_PROLOGUE = ".intel_syntax noprefix\n.global main\nmain:\n"
_EPILOGUE = "    pop rax\n    ret\n"

_COMPARE_SET = {
    NodeKind.EQ: "sete",
    NodeKind.NE: "setne",
    NodeKind.LT: "setl",
    NodeKind.LE: "setle",
}


def _operation(kind: NodeKind) -> list[str]:
    if kind is NodeKind.ADD:
        return ["    add rax, rdi"]
    if kind is NodeKind.SUB:
        return ["    sub rax, rdi"]
    if kind is NodeKind.MUL:
        return ["    imul rax, rdi"]
    if kind is NodeKind.DIV:
        return ["     cqo", "     idiv rdi"]
    if kind in _COMPARE_SET:
        return [
            "     cmp rax, rdi",
            f"     {_COMPARE_SET[kind]} al",
            "     movzb rax, al",
        ]
    raise CompileError(f"This AST Node Type: {kind.name} is not supported now!")


def iter_instructions(node: Node) -> Iterator[str]:
    """Yield the stack-machine instructions that evaluate ``node``."""
    if node.is_number():
        yield f"    push {node.value}"
        return
    if node.lhs is None or node.rhs is None:
        raise CompileError(f"{node.kind.name} node is missing an operand")
    yield from iter_instructions(node.lhs)
    yield from iter_instructions(node.rhs)
    yield "    pop rdi"
    yield "    pop rax"
    yield from _operation(node.kind)
    yield "    push rax"


def generate(node: Node) -> str:
    """Return a complete assembly program computing ``node`` in main."""
    body = "".join(f"{line}\n" for line in iter_instructions(node))
    return _PROLOGUE + body + _EPILOGUE


def codegen(node: Node, out: TextIO) -> None:
    """Write the assembly program for ``node`` to ``out``."""
    out.write(generate(node))