import pytest

from aurac.lex.token import Token, TokenKind


@pytest.mark.parametrize(
    "kind",
    [
        TokenKind.DIVIDER,
        TokenKind.NEWLINE,
        TokenKind.ANNOTATION,
        TokenKind.ANNOTATION_TEXT,
    ],
)
def test_whitespace_kinds(kind):
    assert kind.is_whitespace() is True
    assert kind.is_sigil() is False


@pytest.mark.parametrize(
    "kind",
    [
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
    ],
)
def test_sigil_kinds(kind):
    assert kind.is_sigil() is True
    assert kind.is_whitespace() is False


@pytest.mark.parametrize(
    "kind",
    [
        TokenKind.KEY,
        TokenKind.BARE,
        TokenKind.QUOTED,
        TokenKind.TIME,
        TokenKind.EOF,
        TokenKind.INDENT,
    ],
)
def test_text_and_control_kinds_are_neither(kind):
    assert kind.is_sigil() is False
    assert kind.is_whitespace() is False


def test_no_kind_is_both_sigil_and_whitespace():
    sigils = {kind for kind in TokenKind if TokenKind.is_sigil(kind)}
    whitespace = {kind for kind in TokenKind if TokenKind.is_whitespace(kind)}
    assert sigils.isdisjoint(whitespace)
    assert len(sigils) == 14
    assert len(whitespace) == 4


def test_token_equality_includes_value():
    a = Token(TokenKind.KEY, 0, 1, "name")
    b = Token(TokenKind.KEY, 0, 1, "name")
    c = Token(TokenKind.KEY, 0, 1, "other")
    assert a == b
    assert (a == c) is False


def test_token_defaults_to_no_value():
    tok = Token(TokenKind.ARROW, 5, 2)
    assert tok.value is None
    assert tok.offset == 5