"""Parse token streams of integer expressions and emit x86-64 assembly."""

__version__ = "0.1.0"

__all__ = ["codegen", "errors", "nodes", "parser", "tokens"]