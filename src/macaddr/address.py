"""
IEEE 802 MAC addresses and OUIs as plain `bytes`.

A MAC address is 6 bytes, an OUI (or any other upper half) is 3 bytes. There
is no wrapper type: every function takes and returns `bytes`, and the length
is what tells the two apart. Most functions accept either length.

    >>> addr = parse("C0-91-34-0B-DE-D4")
    >>> addr
    b'\\xc0\\x914\\x0b\\xde\\xd4'
    >>> to_string(most_significant_24_bits(addr))
    'C0-91-34'

A universally administered address (U/L bit 0) carries its manufacturer's OUI
in its upper half; a locally administered one (U/L bit 1) does not, which is
why `oui()` can return None while `most_significant_24_bits()` never does.
"""
from __future__ import annotations

import re
import secrets
from collections.abc import Callable

from . import dotted_decimal
from .errors import ArgumentError, PreconditionError

MAC_SIZE = 6
OUI_SIZE = 3

BROADCAST = b"\xff" * MAC_SIZE

STYLES = ("ieee", "colon_separated", "plain", "cisco", "dotted_decimal", "oid")
FORMATS = ("hex", "dotted_decimal", "oid")

_NON_HEX = re.compile(r"[^0-9A-Fa-f]")


def _checked(address: bytes) -> bytes:
    addr = bytes(address)
    if len(addr) not in (OUI_SIZE, MAC_SIZE):
        raise PreconditionError(f"expected a 3- or 6-byte value, got {len(addr)} bytes")
    return addr


# -------------------------------------------------
# Splitting / formatting
# -------------------------------------------------

def split(address: bytes, chunk_size: int) -> list[int]:
    """
    Split `address` into big-endian chunks of 8, 16 or 24 bits, most
    significant first.

    A 3-byte value can't be split into 16-bit words; asking for that is a
    PreconditionError, not a silently short result.
    """
    addr = _checked(address)

    if chunk_size == 8:
        return list(addr)
    if chunk_size not in (16, 24) or (chunk_size == 16 and len(addr) != MAC_SIZE):
        raise PreconditionError(
            f"can't split a {len(addr) * 8}-bit value into {chunk_size}-bit chunks"
        )

    width = chunk_size // 8
    return [int.from_bytes(addr[i : i + width], "big") for i in range(0, len(addr), width)]


def format(
    address: bytes,
    chunk_size: int,
    chunk_formatter: Callable[[int], str],
    separator: str = "",
) -> str:
    """
    Split `address` into `chunk_size`-bit chunks, render each one with
    `chunk_formatter` and join them with `separator`.

    Use this when none of the `format_as` styles fit, e.g. Sun style:

        >>> format(parse("3B-B5-4E-42-72-03"), 8, lambda b: f"{b:x}", ":")
        '3b:b5:4e:42:72:3'
    """
    return separator.join(chunk_formatter(chunk) for chunk in split(address, chunk_size))


def _padded_hex(address: bytes, chunk_size: int, separator: str = "") -> str:
    digits = chunk_size // 4
    return format(address, chunk_size, lambda chunk: f"{chunk:0{digits}X}", separator)


_STYLE_FORMATTERS: dict[str, Callable[[bytes], str]] = {
    "ieee": lambda a: _padded_hex(a, 8, "-"),
    "colon_separated": lambda a: _padded_hex(a, 8, ":"),
    "plain": lambda a: _padded_hex(a, 8),
    "cisco": lambda a: _padded_hex(a, 16, ".").lower(),
    "dotted_decimal": lambda a: format(a, 8, str, "."),
}
_STYLE_FORMATTERS["oid"] = _STYLE_FORMATTERS["dotted_decimal"]


def format_as(address: bytes, style: str) -> str:
    """
    Format `address` in one of the named styles:

    - ieee: 15-EF-2E-91-97-7A
    - colon_separated: 15:EF:2E:91:97:7A
    - plain: 15EF2E91977A
    - cisco: 15ef.2e91.977a (6-byte addresses only)
    - dotted_decimal / oid: 21.239.46.145.151.122
    """
    try:
        formatter = _STYLE_FORMATTERS[style]
    except KeyError:
        raise ArgumentError(f"unknown style {style!r}; expected one of {', '.join(STYLES)}") from None
    return formatter(address)


def to_string(address: bytes) -> str:
    return format_as(address, "ieee")


# -------------------------------------------------
# Integer conversion
# -------------------------------------------------

def to_integer(address: bytes) -> int:
    return int.from_bytes(_checked(address), "big")


def from_integer(value: int, size_bits: int = 48) -> bytes:
    """
    Encode `value` as a 48-bit address or a 24-bit OUI. Values outside the
    range wrap modulo 2**size_bits.
    """
    if size_bits not in (24, 48):
        raise PreconditionError(
            f"expected a 48-bit MAC address or 24-bit OUI, got size_bits={size_bits!r}"
        )
    return (value % (1 << size_bits)).to_bytes(size_bits // 8, "big")


# -------------------------------------------------
# Parsing
# -------------------------------------------------

def _parse_hex(text: str) -> bytes:
    digits = _NON_HEX.sub("", text)
    if len(digits) not in (6, 12):
        raise ArgumentError(
            f"expected a 6- or 12-digit hex string; {text!r} contains {len(digits)} hex digits"
        )
    return from_integer(int(digits, 16), len(digits) * 4)


def _parse_dotted_decimal(text: str) -> bytes:
    values = dotted_decimal.parse(text)
    if len(values) not in (OUI_SIZE, MAC_SIZE):
        raise ArgumentError(f"expected 3 or 6 decimal numbers; {text!r} contains {len(values)}")
    if any(v > 255 for v in values):
        raise ArgumentError(f"{text!r} contains a byte with a value greater than 255")
    return bytes(values)


def parse(text: str, format: str = "hex") -> bytes:
    """
    Parse `text` as a MAC address (12 hex digits / 6 numbers) or OUI
    (6 hex digits / 3 numbers).

    format="hex" throws away every character that isn't a hex digit and
    decodes whatever is left, so any separator style works and pasted tabs or
    spaces don't matter:

        >>> to_string(parse("\\t15ef.2e91.977a "))
        '15-EF-2E-91-97-7A'

    Be aware that this is lenient to a fault. Text that was never meant to be
    an address parses fine as long as it has the right number of hex digits:

        >>> to_string(parse("ventral beeswax"))
        'EA-BE-EA'

    format="dotted_decimal" (or "oid") is strict: 3 or 6 numbers from 0-255
    separated by single periods, nothing else, not even whitespace.
    """
    if format == "hex":
        return _parse_hex(text)
    if format in ("dotted_decimal", "oid"):
        return _parse_dotted_decimal(text)
    raise ArgumentError(f"unknown format {format!r}; expected one of {', '.join(FORMATS)}")


def mac(text: str, flags: str = "") -> bytes:
    """
    Shorthand for `parse`: mac("15ef.2e91.977a"), mac("21.239.46.145.151.122", "d").
    """
    if flags in ("", "h"):
        return parse(text, "hex")
    if flags == "d":
        return parse(text, "dotted_decimal")
    raise ArgumentError(f"unknown flag {flags!r}; expected 'h' or 'd'")


# -------------------------------------------------
# Classification
# -------------------------------------------------

def ig_bit(address: bytes) -> int:
    """0 for unicast, 1 for multicast."""
    return _checked(address)[0] & 0x01


def ul_bit(address: bytes) -> int:
    """0 for universally administered, 1 for locally administered."""
    return (_checked(address)[0] >> 1) & 0x01


def is_multicast(address: bytes) -> bool:
    return ig_bit(address) == 1


def is_unicast(address: bytes) -> bool:
    return ig_bit(address) == 0


def is_universal(address: bytes) -> bool:
    return ul_bit(address) == 0


def is_local(address: bytes) -> bool:
    return ul_bit(address) == 1


def is_broadcast(address: bytes) -> bool:
    return bytes(address) == BROADCAST


def broadcast() -> bytes:
    return BROADCAST


def most_significant_24_bits(address: bytes) -> bytes:
    return _checked(address)[:OUI_SIZE]


def oui(address: bytes) -> bytes | None:
    """
    The OUI of a universally administered address, or None for a locally
    administered one. See most_significant_24_bits() for the unconditional
    version.
    """
    if is_universal(address):
        return most_significant_24_bits(address)
    return None


# -------------------------------------------------
# Arithmetic
# -------------------------------------------------

def add(address: bytes, value: int) -> bytes:
    """
    Add `value` (may be negative) to `address`, wrapping around at the
    address's own width: add(broadcast(), 1) is 00-00-00-00-00-00.
    """
    addr = _checked(address)
    return from_integer(to_integer(addr) + value, len(addr) * 8)


def subtract(address: bytes, value: int) -> bytes:
    return add(address, -value)


def succ(address: bytes) -> bytes:
    return add(address, 1)


def pred(address: bytes) -> bytes:
    return subtract(address, 1)


# -------------------------------------------------
# Generation
# -------------------------------------------------

def random(prefix: bytes = b"") -> bytes:
    """
    A random 6-byte address. With `prefix` (normally a 3-byte OUI), the
    address starts with `prefix` and only the remaining bytes are random.
    """
    prefix = bytes(prefix)
    if len(prefix) >= MAC_SIZE:
        raise PreconditionError(f"prefix must be shorter than {MAC_SIZE} bytes, got {len(prefix)}")
    return prefix + secrets.token_bytes(MAC_SIZE - len(prefix))
