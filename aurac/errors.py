"""Compiler diagnostics and the error type raised by pipeline stages."""

from __future__ import annotations

import dataclasses
import enum
import os
from dataclasses import dataclass
from pathlib import Path


class Level(enum.IntEnum):
    """Severity of a diagnostic, ordered from least to most severe."""

    NOTE = 0
    WARNING = 1
    ERROR = 2

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Span:
    """A byte range in a source file with its 1-indexed line and column."""

    start: int
    end: int
    line: int
    col: int

    @classmethod
    def point(cls, offset: int, line: int, col: int) -> "Span":
        """A span covering the single byte at ``offset``."""
        return cls(offset, offset + 1, line, col)

    def __str__(self) -> str:
        return f"{self.line}:{self.col}"


@dataclass(frozen=True)
class Diagnostic:
    """A located, levelled compiler message."""

    level: Level
    message: str
    file: Path | None = None
    span: Span | None = None
    hint: str | None = None

    @classmethod
    def error(cls, message: str) -> "Diagnostic":
        return cls(Level.ERROR, str(message))

    @classmethod
    def warning(cls, message: str) -> "Diagnostic":
        return cls(Level.WARNING, str(message))

    @classmethod
    def note(cls, message: str) -> "Diagnostic":
        return cls(Level.NOTE, str(message))

    def with_file(self, path: str | os.PathLike) -> "Diagnostic":
        return dataclasses.replace(self, file=Path(path))

    def with_span(self, span: Span) -> "Diagnostic":
        return dataclasses.replace(self, span=span)

    def with_hint(self, hint: str) -> "Diagnostic":
        return dataclasses.replace(self, hint=str(hint))

    def __str__(self) -> str:
        parts = []
        if self.file is not None:
            parts.append(f"{self.file}:")
        if self.span is not None:
            parts.append(f"{self.span}: ")
        parts.append(f"{self.level}: {self.message}")
        if self.hint is not None:
            parts.append(f"\n  hint: {self.hint}")
        return "".join(parts)


class CompileError(Exception):
    """Raised by compiler stages; carries one or more diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic] | None = None) -> None:
        self.diagnostics: list[Diagnostic] = list(diagnostics or [])
        super().__init__(str(self))

    @classmethod
    def single(cls, diag: Diagnostic) -> "CompileError":
        return cls([diag])

    @classmethod
    def msg(cls, message: str) -> "CompileError":
        return cls.single(Diagnostic.error(message))

    @classmethod
    def at(cls, file: str | os.PathLike, span: Span, message: str) -> "CompileError":
        return cls.single(Diagnostic.error(message).with_file(file).with_span(span))

    def is_fatal(self) -> bool:
        """True if any diagnostic is at error level."""
        return any(d.level == Level.ERROR for d in self.diagnostics)

    def merge(self, other: "CompileError") -> None:
        """Append the diagnostics of ``other`` to this error."""
        self.diagnostics.extend(other.diagnostics)
        self.args = (str(self),)

    def __str__(self) -> str:
        return "\n".join(str(d) for d in self.diagnostics)