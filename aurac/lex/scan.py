"""The byte scanner that turns AURA source text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from aurac.errors import CompileError
from aurac.lex.token import Token, TokenKind

_SINGLE = {
    ord("@"): TokenKind.REF_AT,
    ord("["): TokenKind.BRACKET_OPEN,
    ord("]"): TokenKind.BRACKET_CLOSE,
    ord(","): TokenKind.COMMA,
    ord("|"): TokenKind.PIPE,
    ord("~"): TokenKind.TILDE,
    ord("+"): TokenKind.PLUS,
    ord("?"): TokenKind.OPTIONAL,
    ord("!"): TokenKind.REQUIRED,
    ord("%"): TokenKind.CUSTOM,
    ord("*"): TokenKind.WILDCARD,
}

_NL = ord("\n")
_SPACE = frozenset(b" \t")
_WORD_END = frozenset(b" \t\n\r")


def _is_alnum(b: int) -> bool:
    return (48 <= b <= 57) or (65 <= b <= 90) or (97 <= b <= 122)


def _is_key_start(b: int) -> bool:
    return _is_alnum(b) or b == ord("_")


def _is_key_cont(b: int) -> bool:
    return _is_alnum(b) or b in b"-_."


def looks_like_time(s: str) -> bool:
    """True if a bare word looks like a time literal (``22s``, ``1m10s``, ``00:04:32``)."""
    if not s or not ("0" <= s[0] <= "9"):
        return False
    return s.endswith(("s", "m", "h")) or ":" in s


class Scanner:
    """Scans one source text lazily, token by token."""

    def __init__(self, src: str) -> None:
        self._bytes = src.encode("utf-8")
        self._pos = 0
        self._line = 1

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the end-of-file token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.EOF:
                return

    def next_token(self) -> Token:
        """Return the next token; ``EOF`` once the source is exhausted."""
        return self._scan_token()

    def collect_all(self) -> list[Token]:
        """All remaining tokens, ending with ``EOF``."""
        return list(self)

    # ------------------------------------------------------------------ #

    def _peek(self, offset: int = 0) -> int | None:
        idx = self._pos + offset
        return self._bytes[idx] if idx < len(self._bytes) else None

    def _slice(self, start: int, end: int) -> str:
        return self._bytes[start:end].decode("utf-8")

    def _tok(self, kind: TokenKind, offset: int, value: str | None = None) -> Token:
        return Token(kind, offset, self._line, value)

    def _scan_token(self) -> Token:
        self._skip_inline_space()
        start = self._pos
        byte = self._peek()
        if byte is None:
            return self._tok(TokenKind.EOF, start)

        if byte == _NL:
            line = self._line
            self._pos += 1
            self._line += 1
            return Token(TokenKind.NEWLINE, start, line)

        nxt = self._peek(1)
        if byte == ord("#") and nxt == ord("#"):
            return self._scan_annotation(start)
        if byte == ord("-") and nxt == ord("-"):
            self._pos += 2
            self._skip_to_eol()
            return self._tok(TokenKind.DIVIDER, start)
        if byte == ord(">") and nxt == ord(">"):
            self._pos += 2
            return self._tok(TokenKind.INHERITS, start)
        if byte == ord("-") and nxt == ord(">"):
            self._pos += 2
            return self._tok(TokenKind.ARROW, start)
        if byte == ord(":") and nxt == ord(":"):
            self._pos += 2
            return self._tok(TokenKind.SCOPE_OPEN, start)
        if byte == ord('"'):
            return self._scan_quoted(start)

        kind = _SINGLE.get(byte)
        if kind is not None:
            self._pos += 1
            return self._tok(kind, start)

        if _is_key_start(byte):
            return self._scan_key_or_bare(start)
        if byte == ord("$"):
            self._pos += 1
            return self._scan_dollar_key(start)

        raise CompileError.msg(
            f"unexpected byte `{chr(byte)!r}` (0x{byte:02X}) at line {self._line}"
        )

    def _skip_inline_space(self) -> None:
        while (b := self._peek()) is not None and b in _SPACE:
            self._pos += 1

    def _skip_to_eol(self) -> None:
        while (b := self._peek()) is not None and b != _NL:
            self._pos += 1

    def _scan_annotation(self, start: int) -> Token:
        self._pos += 2
        self._skip_inline_space()
        text_start = self._pos
        self._skip_to_eol()
        return self._tok(
            TokenKind.ANNOTATION_TEXT, start, self._slice(text_start, self._pos)
        )

    def _scan_quoted(self, start: int) -> Token:
        self._pos += 1
        while (b := self._peek()) is not None:
            if b == ord('"'):
                self._pos += 1
                break
            if b == _NL:
                raise CompileError.msg(
                    f"unterminated string literal starting at line {self._line}"
                )
            self._pos += 1
        return self._tok(TokenKind.QUOTED, start, self._slice(start, self._pos))

    def _scan_key_or_bare(self, start: int) -> Token:
        while (b := self._peek()) is not None:
            if b == ord(":"):
                if self._peek(1) == ord(":"):
                    after = self._peek(2)
                    if after is None or after in _WORD_END:
                        break
                self._pos += 1
            elif b == ord("/") or _is_key_cont(b):
                self._pos += 1
            else:
                break
        text = self._slice(start, self._pos)
        kind = TokenKind.TIME if looks_like_time(text) else TokenKind.KEY
        return self._tok(kind, start, text)

    def _scan_dollar_key(self, dollar_start: int) -> Token:
        ident_start = self._pos
        while (b := self._peek()) is not None and (_is_alnum(b) or b in b"-_"):
            self._pos += 1
        if self._pos == ident_start:
            raise CompileError.msg(
                f"expected identifier after `$` at line {self._line}"
            )
        return self._tok(
            TokenKind.KEY, dollar_start, self._slice(dollar_start, self._pos)
        )