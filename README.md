# ccom

`ccom` turns integer expressions into x86-64 assembly in Intel syntax. It
handles the four arithmetic operators, unary plus and minus, parentheses and
the comparisons `==`, `!=`, `<`, `<=`, `>` and `>=`. The listing it writes
defines a `main` function that returns the value of the expression, computed
with a simple stack machine.

## Pieces

- `ccom.tokens` – `Token`, `TokenKind` and `TokenStream`. A `Token` holds
  its kind (`RESERVED`, `NUMBER` or `EOF`), its text, its offset in the
  source and, for numbers, its value. `TokenStream(tokens, source)` is the
  cursor the parser walks; it appends an `EOF` token if the sequence does
  not end with one. `consume(op)` steps past a matching operator and
  returns whether it did, `expect(op)` and `expect_number()` raise
  `SourceError` when the current token is not what they need, and
  `at_eof()` tells whether the end has been reached.
- `ccom.nodes` – the syntax tree: `Node` and `NodeKind`, with
  `Node.number(value)` and `Node.binary(kind, lhs, rhs)` to build nodes and
  `Node.is_number()` to tell literals apart.
- `ccom.parser` – a recursive-descent `Parser` and the shortcut
  `parse_expression(stream)`. Operators bind as in C: `*` and `/` before
  `+` and `-`, those before the relational operators, those before
  equality, all left-associative. `a > b` is parsed as `b < a`, `a >= b`
  as `b <= a`, and `-x` as `0 - x`.
- `ccom.codegen` – `generate(node)` returns the whole assembly listing as a
  string, `iter_instructions(node)` yields the body line by line, and
  `codegen(node, out)` writes the listing to a text stream. A binary node
  with a missing operand raises `CompileError`.
- `ccom.errors` – `CompileError` for general failures and its subclass
  `SourceError` for mistakes at a place in the source. A `SourceError`
  prints as the source text, then a line of spaces as wide as the error
  position, then `^ ` followed by the message;
  `format_error_at(source, position, message)` builds that text.

## Example

```python
from ccom.codegen import generate
from ccom.parser import parse_expression
from ccom.tokens import Token, TokenKind, TokenStream

source = "1+2"
tokens = [
    Token(TokenKind.NUMBER, "1", 0, 1),
    Token(TokenKind.RESERVED, "+", 1),
    Token(TokenKind.NUMBER, "2", 2, 2),
]
tree = parse_expression(TokenStream(tokens, source))
print(generate(tree), end="")
```

prints

```
.intel_syntax noprefix
.global main
main:
    push 1
    push 2
    pop rdi
    pop rax
    add rax, rdi
    push rax
    pop rax
    ret
```

## What it does not do

- There is no lexer: the package does not turn source text into tokens.
  Callers build the `Token` list themselves, as in the example above.
- There is no command-line program; the package is used from Python.
- The parser reads a single expression and does not check that the whole
  stream was used up; call `TokenStream.at_eof()` afterwards if that
  matters.

## Tests

The tests use pytest; install the `test` extra to get it.