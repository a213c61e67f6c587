from __future__ import annotations

from typing import NamedTuple

from .errors import IllegalCharacterError, UnexpectedTokenError

INTEGER = "INTEGER"
DOT = "DOT"

_DIGITS = "0123456789"


class Token(NamedTuple):
    kind: str
    value: int | str
    position: int


def tokenize(text: str) -> list[Token]:
    """
    Split `text` into INTEGER and DOT tokens.

    An INTEGER is a maximal run of ASCII digits and is converted without any
    range check ("99999" is a valid token). Anything other than a digit or a
    single "." raises IllegalCharacterError, whitespace included.
    """
    tokens: list[Token] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == ".":
            tokens.append(Token(DOT, ".", i))
            i += 1
        elif ch in _DIGITS:
            # int() caps digit strings at sys.get_int_max_str_digits()
            start = i
            value = 0
            while i < len(text) and text[i] in _DIGITS:
                value = value * 10 + ord(text[i]) - 48
                i += 1
            tokens.append(Token(INTEGER, value, start))
        else:
            raise IllegalCharacterError(text, ch, i)
    return tokens


def parse_tokens(tokens: list[Token], text: str = "") -> list[int]:
    """
    Accepts the empty sequence or INTEGER (DOT INTEGER)*.
    """
    if not tokens:
        return []

    values: list[int] = []
    expect = INTEGER
    for tok in tokens:
        if tok.kind != expect:
            raise UnexpectedTokenError(text, tok)
        if tok.kind == INTEGER:
            values.append(int(tok.value))
            expect = DOT
        else:
            expect = INTEGER

    # Trailing dot
    if expect == INTEGER:
        raise UnexpectedTokenError(text, None)
    return values


def parse(text: str) -> list[int]:
    return parse_tokens(tokenize(text), text)
