from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .dotted_decimal import Token


class MACAddrError(Exception):
    pass


class ArgumentError(MACAddrError, ValueError):
    """
    Malformed input text: wrong digit count, out-of-range byte, illegal
    character. Safe to catch and report back to whoever typed it.
    """


class PreconditionError(MACAddrError, AssertionError):
    """
    A function was called with a value it is not defined for, e.g. a 16-bit
    split of a 3-byte OUI. This is a bug in the caller.
    """


class IllegalCharacterError(ArgumentError):
    def __init__(self, text: str, char: str, position: int) -> None:
        self.text = text
        self.char = char
        self.position = position
        super().__init__(
            f"{text!r} contains an illegal character, {char!r} at position {position}"
        )


class UnexpectedTokenError(ArgumentError):
    def __init__(self, text: str, token: Token | None) -> None:
        self.text = text
        self.token = token
        if token is None:
            found = "end of input"
        else:
            found = f"{token.value!r} at position {token.position}"
        super().__init__(f"{text!r} is not dotted decimal: unexpected {found}")
