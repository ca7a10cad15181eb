import io

import pytest

from ccom.codegen import codegen, generate, iter_instructions
from ccom.errors import CompileError
from ccom.nodes import Node, NodeKind

N = Node.number
B = Node.binary


def test_number_pushes_value():
    assert list(iter_instructions(N(42))) == ["    push 42"]


def test_addition_sequence():
    lines = list(iter_instructions(B(NodeKind.ADD, N(1), N(2))))
    assert lines == [
        "    push 1",
        "    push 2",
        "    pop rdi",
        "    pop rax",
        "    add rax, rdi",
        "    push rax",
    ]


def test_division_uses_cqo_idiv():
    lines = list(iter_instructions(B(NodeKind.DIV, N(8), N(2))))
    assert lines[4:6] == ["     cqo", "     idiv rdi"]


@pytest.mark.parametrize(
    "kind, setter",
    [
        (NodeKind.EQ, "     sete al"),
        (NodeKind.NE, "     setne al"),
        (NodeKind.LT, "     setl al"),
        (NodeKind.LE, "     setle al"),
    ],
)
def test_comparisons(kind, setter):
    lines = list(iter_instructions(B(kind, N(1), N(2))))
    assert lines[4:7] == ["     cmp rax, rdi", setter, "     movzb rax, al"]
    assert lines[-1] == "    push rax"


def test_program_wrapping():
    text = generate(N(7))
    assert text.startswith(".intel_syntax noprefix\n.global main\nmain:\n")
    assert text.endswith("    push 7\n    pop rax\n    ret\n")


def test_stack_balance():
    tree = B(NodeKind.ADD, B(NodeKind.MUL, N(2), N(3)), B(NodeKind.SUB, N(0), N(4)))
    lines = list(iter_instructions(tree))
    pushes = sum(line.strip().startswith("push") for line in lines)
    pops = sum(line.strip().startswith("pop") for line in lines)
    assert pushes - pops == 1


def test_codegen_writes_generate_output():
    tree = B(NodeKind.SUB, N(5), N(3))
    out = io.StringIO()
    codegen(tree, out)
    assert out.getvalue() == generate(tree)


def test_binary_without_operands_rejected():
    with pytest.raises(CompileError):
        list(iter_instructions(Node(NodeKind.ADD)))