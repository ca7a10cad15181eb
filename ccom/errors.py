"""Compiler error types and diagnostic formatting."""

from __future__ import annotations


class CompileError(Exception):
    """Base class for every error the compiler reports."""


def format_error_at(source: str, position: int, message: str) -> str:
    """Render a diagnostic pointing at ``position`` inside ``source``.

    The layout is the input line, a line padded to the error column, then
    a caret line carrying the message.
    """
    padding = " " * max(position, 0)
    return f"{source}\n{padding}\n^ {message}"


class SourceError(CompileError):
    """An error tied to a location in the compiled source text."""

    def __init__(self, source: str, position: int, message: str) -> None:
        super().__init__(message)
        self.source = source
        self.position = position
        self.message = message

    def __str__(self) -> str:
        return format_error_at(self.source, self.position, self.message)