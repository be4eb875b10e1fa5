"""Token kinds and tokens produced by the AURA lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenKind(enum.Enum):
    """The kind of a lexer token.

    Structural kinds carry no value. Text kinds (``KEY``, ``BARE``,
    ``QUOTED``, ``TIME``, ``ANNOTATION_TEXT``) carry the source text in
    ``Token.value``. ``INDENT`` carries a signed indentation change.
    """

    SCOPE_OPEN = "::"
    ARROW = "->"
    REF_AT = "@"
    ANNOTATION = "##"
    DIVIDER = "--"
    PIPE = "|"
    OPTIONAL = "?"
    REQUIRED = "!"
    CUSTOM = "%"
    TILDE = "~"
    PLUS = "+"
    BRACKET_OPEN = "["
    BRACKET_CLOSE = "]"
    COMMA = ","
    INHERITS = ">>"
    WILDCARD = "*"
    INDENT = "indent"
    NEWLINE = "newline"
    EOF = "eof"

    KEY = "key"
    BARE = "bare"
    QUOTED = "quoted"
    TIME = "time"
    ANNOTATION_TEXT = "annotation-text"

    def is_whitespace(self) -> bool:
        """True if a token of this kind produces no compile output."""
        return self in _WHITESPACE

    def is_sigil(self) -> bool:
        """True if this is a structural sigil token."""
        return self in _SIGILS


_WHITESPACE = frozenset(
    {
        TokenKind.DIVIDER,
        TokenKind.NEWLINE,
        TokenKind.ANNOTATION,
        TokenKind.ANNOTATION_TEXT,
    }
)

_SIGILS = frozenset(
    {
        TokenKind.SCOPE_OPEN,
        TokenKind.ARROW,
        TokenKind.REF_AT,
        TokenKind.PIPE,
        TokenKind.OPTIONAL,
        TokenKind.REQUIRED,
        TokenKind.CUSTOM,
        TokenKind.TILDE,
        TokenKind.PLUS,
        TokenKind.BRACKET_OPEN,
        TokenKind.BRACKET_CLOSE,
        TokenKind.COMMA,
        TokenKind.INHERITS,
        TokenKind.WILDCARD,
    }
)


@dataclass(frozen=True)
class Token:
    """A lexer token.

    ``offset`` is the byte offset of the token's first byte in the UTF-8
    source; ``line`` is 1-indexed.
    """

    kind: TokenKind
    offset: int
    line: int
    value: str | int | None = None